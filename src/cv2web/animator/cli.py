"""
CLI entry point for the dot-field animator.

Usage:
    cv2web-canvas <image> [options]
    cv2web-canvas --resume resume.yaml [options]
    cv2web-canvas <image> --headless --frames 90 -o portrait.gif
"""

import argparse
import sys
import time
from pathlib import Path

import yaml
from PIL import Image, UnidentifiedImageError

from cv2web.animator.animator import DotFieldAnimator
from cv2web.animator.capture import render_capture, save_gif
from cv2web.animator.config import DotFieldConfig, parse_color
from cv2web.animator.host import FrameClock, PygameHost, SurfaceHost
from cv2web.animator.noise import NOISE_STRATEGIES, get_noise
from cv2web.site.resume import canvas_config, load_resume, photo_path


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
        prog="cv2web-canvas",
        description="Pointer-reactive halftone portrait",
    )

    parser.add_argument(
        "image",
        type=Path,
        nargs="?",
        default=None,
        help="Input image (default: the resume's photo)",
    )
    parser.add_argument(
        "-r", "--resume",
        type=Path,
        default=None,
        help="resume.yaml whose canvas section supplies defaults",
    )

    # Surface
    parser.add_argument("--width", type=int, default=None, help="Surface width (default: 640)")
    parser.add_argument("--height", type=int, default=None, help="Surface height (default: 480)")
    parser.add_argument("-f", "--fps", type=int, default=None, help="Frames per second (default: 60)")
    parser.add_argument("--pixel-ratio", type=float, default=None, help="Device pixel ratio (default: 1.0)")

    # Halftone
    parser.add_argument("--halftone-size", type=float, default=None, help="Cell size in image pixels")
    parser.add_argument("--contrast", type=float, default=None, help="Contrast multiplier (default: 1.0)")
    parser.add_argument("--accent-color", type=str, default=None, help="Accent dot color (default: #CECFC7)")
    parser.add_argument(
        "--accent-probability", type=float, default=None,
        help="Chance a bright dot uses the accent color (default: 0.2)",
    )
    parser.add_argument("--size-variation", type=float, default=None, help="Dot size jitter (default: 0.1)")

    # Interaction
    parser.add_argument("--mouse-radius", type=float, default=None, help="Pointer radius (default: 100)")
    parser.add_argument("--repulsion-strength", type=float, default=None, help="Trail push (default: 1.5)")
    parser.add_argument("--return-speed", type=float, default=None, help="Spring back speed (default: 0.6)")
    parser.add_argument(
        "--noise", type=str, default=None,
        choices=sorted(NOISE_STRATEGIES),
        help="Radius noise strategy (default: value)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for dot jitter")

    # Headless capture
    parser.add_argument("--headless", action="store_true", help="Render a scripted pointer pass to a GIF")
    parser.add_argument("--frames", type=int, default=90, help="Frames to capture (default: 90)")
    parser.add_argument(
        "-o", "--output",
        type=Path,
        default=None,
        help="Output GIF path (default: <image>_dots.gif)",
    )
    parser.add_argument("--duration", type=float, default=None, help="Close the window after N seconds")
    return parser


def resolve_inputs(args) -> tuple[Path, DotFieldConfig]:
    """Merge the resume canvas section with command-line overrides."""
    overrides = {
        "width": args.width,
        "height": args.height,
        "fps": args.fps,
        "pixel_ratio": args.pixel_ratio,
        "halftone_size": args.halftone_size,
        "contrast": args.contrast,
        "accent_color": args.accent_color,
        "accent_probability": args.accent_probability,
        "size_variation": args.size_variation,
        "mouse_radius": args.mouse_radius,
        "repulsion_strength": args.repulsion_strength,
        "return_speed": args.return_speed,
        "noise": args.noise,
    }

    image_path = args.image
    if args.resume is not None:
        resume = load_resume(args.resume)
        config = canvas_config(resume, **overrides)
        if image_path is None:
            image_path = photo_path(resume, args.resume.parent)
    else:
        config = DotFieldConfig.from_mapping(None, **overrides)

    # Resume values bypass argparse choices
    for color in (config.accent_color, config.dot_color, config.background_color, config.clear_color):
        parse_color(color)
    get_noise(config.noise)

    if image_path is None:
        raise FileNotFoundError("No image given and the resume has no photo")
    if not image_path.exists():
        raise FileNotFoundError(f"Image not found: {image_path}")
    return image_path, config


def main(argv: list[str] | None = None):
    args = build_parser().parse_args(argv)

    try:
        image_path, config = resolve_inputs(args)
        image = Image.open(image_path)
        image.load()
    except (OSError, ValueError, KeyError, UnidentifiedImageError, yaml.YAMLError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"Loaded {image_path} ({image.width}x{image.height})")

    if args.headless:
        _run_headless(args, image_path, image, config)
    else:
        _run_window(args, image, config)


def _run_window(args, image: Image.Image, config: DotFieldConfig):
    host = PygameHost(config.width, config.height, fps=config.fps)
    animator = DotFieldAnimator(config, seed=args.seed)
    if not animator.mount(host, image):
        print("Error: nothing to draw", file=sys.stderr)
        sys.exit(1)

    print(f"  Dots: {len(animator.dots)} (cell {animator.cell_size:.1f}px)")
    print("  Move the pointer over the window; Esc to quit")
    try:
        host.run(max_seconds=args.duration)
    finally:
        animator.unmount()


def _run_headless(args, image_path: Path, image: Image.Image, config: DotFieldConfig):
    # Off-screen surfaces only, no display is initialized
    output = args.output or image_path.with_name(f"{image_path.stem}_dots.gif")
    clock = FrameClock()
    host = SurfaceHost(config.width, config.height)
    animator = DotFieldAnimator(config, clock=clock, seed=args.seed)
    if not animator.mount(host, image):
        print("Error: nothing to draw", file=sys.stderr)
        sys.exit(1)

    print(f"  Dots: {len(animator.dots)} (cell {animator.cell_size:.1f}px)")
    print(f"\nRendering {args.frames} frames at {config.width}x{config.height} @ {config.fps}fps")

    t0 = time.time()
    try:
        frames = render_capture(animator, host, clock, args.frames, fps=config.fps, progress_callback=_progress_bar)
        save_gif(frames, output, fps=config.fps)
    finally:
        animator.unmount()

    elapsed = time.time() - t0
    file_size_mb = output.stat().st_size / 1024 / 1024
    print(f"\nDone! {file_size_mb:.1f} MB")
    print(f"  Render took {elapsed:.1f}s ({args.frames / max(elapsed, 0.01):.1f} fps)")
    print(f"  Output: {output}")


if __name__ == "__main__":
    main()
