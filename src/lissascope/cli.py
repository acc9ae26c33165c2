"""
CLI entry point for the Lissajous studio.

Usage:
    lissascope [options]
    python -m lissascope [options]
"""

import argparse
import sys
import time

from lissascope.config import DEFAULT_PRESET, PRESETS, StudioConfig


def _progress_bar(current: int, total: int, width: int = 35):
    """Print a progress bar to stdout."""
    pct = current / max(total, 1) * 100
    filled = int(width * current / max(total, 1))
    bar = "#" * filled + "-" * (width - filled)
    if sys.stdout.isatty():
        sys.stdout.write(f"\r[{bar}] {pct:5.1f}%  frame {current}/{total}")
        sys.stdout.flush()
        if current >= total:
            sys.stdout.write("\n")
    else:
        if current % max(1, total // 20) == 0 or current >= total:
            print(f"{pct:5.1f}%  frame {current}/{total}", flush=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lissascope",
        description="Interactive animated Lissajous curve",
    )

    parser.add_argument(
        "-p", "--preset", type=str, default=DEFAULT_PRESET,
        choices=sorted(PRESETS),
        help=f"Initial curve parameters (default: {DEFAULT_PRESET})",
    )

    # Window
    parser.add_argument("--width", type=int, default=1280, help="Window width (default: 1280)")
    parser.add_argument("--height", type=int, default=800, help="Window height (default: 800)")
    parser.add_argument("-f", "--fps", type=int, default=60, help="Display refresh rate (default: 60)")

    # Curve (override the preset)
    parser.add_argument("--amp-x", type=float, default=None, help="Amplitude X")
    parser.add_argument("--amp-y", type=float, default=None, help="Amplitude Y")
    parser.add_argument("--freq-x", type=float, default=None, help="Frequency X")
    parser.add_argument("--freq-y", type=float, default=None, help="Frequency Y")
    parser.add_argument("--phase-x", type=float, default=None, help="Phase X in radians")
    parser.add_argument("--phase-y", type=float, default=None, help="Phase Y in radians")
    parser.add_argument("--speed", type=float, default=None, help="Time step per frame, in thousandths")

    # Drawing
    parser.add_argument("--no-preview", action="store_true", help="Start with the period preview off")
    parser.add_argument(
        "--max-trail", type=int, default=None,
        help="Keep at most N trail points (default: unlimited)",
    )

    # Run mode
    parser.add_argument("--autostart", action="store_true", help="Start animating immediately")
    parser.add_argument("--headless", action="store_true", help="Render off-screen (no window)")
    parser.add_argument(
        "--frames", type=int, default=None,
        help="Quit after N display refreshes (required with --headless)",
    )
    return parser


def config_from_args(args: argparse.Namespace) -> StudioConfig:
    overrides = {}
    for name in ("amp_x", "amp_y", "freq_x", "freq_y", "phase_x", "phase_y", "speed"):
        value = getattr(args, name)
        if value is not None:
            overrides[name] = value

    return StudioConfig(
        width=args.width,
        height=args.height,
        fps=args.fps,
        max_trail_points=args.max_trail,
        initial_preview=not args.no_preview,
        preset=args.preset,
        overrides=overrides,
    )


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.headless and args.frames is None:
        print("Error: --headless needs --frames", file=sys.stderr)
        sys.exit(1)
    if args.frames is not None and args.frames < 1:
        print(f"Error: --frames must be at least 1, got {args.frames}", file=sys.stderr)
        sys.exit(1)

    try:
        config = config_from_args(args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    # pygame is only needed once there is something to show
    from lissascope.app import LissajousStudio

    studio = LissajousStudio(config, headless=args.headless)
    params = studio.params
    print(f"Window: {config.width}x{config.height} @ {config.fps}fps", flush=True)
    print(
        f"  Preset: {config.preset}  A={params.amp_x:g} B={params.amp_y:g} "
        f"a={params.freq_x:g} b={params.freq_y:g} "
        f"phi1={params.phase_x:.4f} phi2={params.phase_y:.4f} speed={params.speed:g}",
        flush=True,
    )

    if args.autostart:
        studio.controller.toggle_run()

    t0 = time.time()
    frames = studio.run(
        max_frames=args.frames,
        progress_callback=_progress_bar if args.frames is not None else None,
    )
    elapsed = time.time() - t0

    state = studio.engine.state
    print(f"\nDone! {frames} frames in {elapsed:.1f}s ({frames / max(elapsed, 0.01):.1f} fps)")
    print(f"  Trail points: {len(state.trail)}, t={state.time:.3f}")
    return 0


if __name__ == "__main__":
    main()
