"""
CLI entry point for the site generator.

Usage:
    cv2web-generate [--resume resume.yaml] [--out app]
"""

import argparse
import sys
from pathlib import Path

import yaml

from cv2web.site.layout import generate_layout
from cv2web.site.page import generate_page
from cv2web.site.resume import load_resume
from cv2web.site.styles import generate_globals_css

GENERATORS = (
    ("page.tsx", generate_page),
    ("layout.tsx", generate_layout),
    ("globals.css", generate_globals_css),
)


def generate_site(resume: dict, out_dir: Path) -> list[Path]:
    """Write every generated file into ``out_dir``; returns the written paths."""
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    written = []
    for filename, generator in GENERATORS:
        path = out_dir / filename
        path.write_text(generator(resume), encoding="utf-8")
        written.append(path)
    return written


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(
        prog="cv2web-generate",
        description="Generate the resume site sources from resume.yaml",
    )
    parser.add_argument(
        "-r", "--resume",
        type=Path,
        default=Path.cwd() / "resume.yaml",
        help="Resume YAML file (default: ./resume.yaml)",
    )
    parser.add_argument(
        "-o", "--out",
        type=Path,
        default=Path.cwd() / "app",
        help="Output directory (default: ./app)",
    )
    args = parser.parse_args(argv)

    if not args.resume.exists():
        print(f"Error: {args.resume.name} not found!", file=sys.stderr)
        print("Please copy resume.example.yaml to resume.yaml and customize it.", file=sys.stderr)
        sys.exit(1)

    try:
        resume = load_resume(args.resume)
        written = generate_site(resume, args.out)
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"Error generating site: {e}", file=sys.stderr)
        sys.exit(1)

    for path in written:
        print(f"✓ Generated {args.out.name}/{path.name}")
    print("\n✓ Generation complete!")


if __name__ == "__main__":
    main()
