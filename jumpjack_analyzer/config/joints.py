"""Joint definitions for the body-tracking skeleton."""

# Tracked joints in capture order: attribute name -> serialized key
JOINTS = {
    "right_hand": "rightHand",
    "left_hand": "leftHand",
    "right_foot": "rightFoot",
    "left_foot": "leftFoot",
    "right_shoulder": "rightShoulder",
    "left_shoulder": "leftShoulder",
    "hip": "hip",
    "head": "head",
}

# Reverse mapping
JOINT_NAMES = {v: k for k, v in JOINTS.items()}

NUM_JOINTS = len(JOINTS)

# Readout labels -> (end point, origin). Foot angles are display only.
DISPLAY_SEGMENTS = {
    "Right Hand": ("right_hand", "right_shoulder"),
    "Left Hand": ("left_hand", "left_shoulder"),
    "Right Foot": ("right_foot", "hip"),
    "Left Foot": ("left_foot", "hip"),
}
