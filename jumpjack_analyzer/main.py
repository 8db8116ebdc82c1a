"""Jumping Jack Analyzer - CLI entry point."""

import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import List

from .analysis.analyzer import JumpingJackAnalyzer, JumpingJackReport
from .analysis.phase_scoring import Phase
from .config.scoring_config import AnalyzerConfig, DEFAULT_CONFIG
from .core.skeleton import Frame


def load_recording(path: Path) -> List[Frame]:
    """Read a recording exported as a JSON list of frames."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise ValueError("Recording must be a JSON list of frames")
    return [Frame.from_dict(item) for item in data]


def build_config(args: argparse.Namespace) -> AnalyzerConfig:
    cfg = DEFAULT_CONFIG
    if args.max_hand_angle is not None:
        cfg = replace(cfg, scoring=replace(cfg.scoring, max_hand_angle=args.max_hand_angle))

    overrides = {
        name: value
        for name, value in (
            ("top", args.top_threshold),
            ("middle", args.middle_threshold),
            ("bottom", args.bottom_threshold),
        )
        if value is not None
    }
    if overrides:
        cfg = replace(cfg, thresholds=replace(cfg.thresholds, **overrides))

    if args.tolerance is not None:
        cfg = replace(cfg, feedback=replace(cfg.feedback, tolerance_deg=args.tolerance))
    return cfg


def print_report(report: JumpingJackReport, show_scores: bool = False):
    print(f"Frames scored: {report.num_frames}")
    for phase in Phase:
        result = report.results[phase]
        message = report.feedback[phase]
        angle = f"{result.feedback_angle:5.1f}" if result.ok else "  n/a"
        print(f"  {phase.value:<7} {angle}  [{message.status.value}] {message.message}")

    if show_scores:
        print("\ntimestamp        top     middle     bottom")
        s = report.scores
        for ts, top, mid, bottom in zip(s.timestamps, s.top, s.middle, s.bottom):
            print(f"{int(ts):>9} {top:>10.1f} {mid:>10.1f} {bottom:>10.1f}")


def main(argv=None):
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Jumping Jack Analyzer - Score a recorded jumping jack session",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  jumpjack-analyzer recording.json
  jumpjack-analyzer recording.json --middle-threshold 5500
  jumpjack-analyzer recording.json --scores -v
        """
    )

    parser.add_argument("input", help="Recording file (JSON list of frames)")
    parser.add_argument("--max-hand-angle", type=float, default=None,
                        help=f"Ideal arm elevation in degrees (default: {DEFAULT_CONFIG.scoring.max_hand_angle:g})")
    parser.add_argument("--top-threshold", type=float, default=None, help="Minimum top peak score")
    parser.add_argument("--middle-threshold", type=float, default=None, help="Minimum middle peak score")
    parser.add_argument("--bottom-threshold", type=float, default=None, help="Minimum bottom peak score")
    parser.add_argument("--tolerance", type=float, default=None,
                        help=f"Pass tolerance in degrees (default: {DEFAULT_CONFIG.feedback.tolerance_deg:g})")
    parser.add_argument("--scores", action="store_true", help="Also print per-frame phase scores")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    input_path = Path(args.input)
    if not input_path.exists():
        print(f"Error: Input file not found: {args.input}", file=sys.stderr)
        sys.exit(1)

    if args.max_hand_angle is not None and not 0.0 < args.max_hand_angle <= 90.0:
        print("Error: Max hand angle must be between 0 and 90", file=sys.stderr)
        sys.exit(1)

    try:
        frames = load_recording(input_path)
        report = JumpingJackAnalyzer(build_config(args)).analyze(frames)
    except json.JSONDecodeError as e:
        print(f"Error: Recording is not valid JSON: {e}", file=sys.stderr)
        sys.exit(1)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print_report(report, show_scores=args.scores)


if __name__ == "__main__":
    main()
