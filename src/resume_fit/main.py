#!/usr/bin/env python
"""
resume-fit command line entry point.

Usage:
    resume-fit fit ./output/generated_resume.json -o ./output/fitted_resume.json
    resume-fit density ./output/generated_resume.json
"""
from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from resume_fit.density import estimate_section_chars
from resume_fit.json_loaders import load_resume_content
from resume_fit.json_validators import validate_resume_content
from resume_fit.layout_fit import (
    MEDIUM_CHARS,
    compute_global_scale,
    fit_resume_file,
    format_fit_summary,
)
from resume_fit.logger import get_logger, init_logger
from resume_fit.paths import LOG_DIR, ensure_dirs

logger = get_logger("cli")


def _print_validation_warnings(input_path: Path) -> None:
    content = load_resume_content(input_path)
    if content is None:
        return
    is_valid, errors = validate_resume_content(content)
    if not is_valid:
        print(f"⚠️  {len(errors)} problem(s) in {input_path.name} (fields were defaulted):")
        for error in errors:
            print(f"   - {error}")


def cmd_fit(args: argparse.Namespace) -> int:
    input_path = Path(args.input)
    output_path = Path(args.output) if args.output else None

    _print_validation_warnings(input_path)

    metadata = fit_resume_file(input_path, output_path)
    print(format_fit_summary(metadata))
    if metadata.get("status") != "success":
        return 1

    print(f"✅ {metadata['message']}")
    return 0


def cmd_density(args: argparse.Namespace) -> int:
    input_path = Path(args.input)
    content = load_resume_content(input_path)
    if content is None:
        print(f"[error] No resume content could be read from {input_path}")
        return 1

    sections = estimate_section_chars(content)
    total = sum(sections.values())
    width = max(len(name) for name in sections)
    for name, chars in sections.items():
        print(f"{name:<{width}}  {chars:>6,}")
    print(f"{'total':<{width}}  {total:>6,}")
    print(f"compact mode: {'yes' if total > MEDIUM_CHARS else 'no'}")
    print(f"font scale:   {compute_global_scale(total):.2f}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="resume-fit",
        description="Fit generated resume content onto a single printable page.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Fit a generated resume and write output/fitted_resume.json
  resume-fit fit ./output/generated_resume.json

  # Show how dense a resume is before fitting
  resume-fit density ./profile/resume.yaml
        """
    )
    parser.add_argument(
        "--log-level",
        default=os.getenv("LOG_LEVEL", "INFO"),
        help="Logging level (default: $LOG_LEVEL or INFO)",
    )
    parser.add_argument(
        "--no-log-file",
        action="store_true",
        help="Only log to the console",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    fit_parser = subparsers.add_parser("fit", help="Fit a resume file and write the annotated JSON")
    fit_parser.add_argument("input", help="Resume file (.json, .yaml or .yml)")
    fit_parser.add_argument(
        "-o", "--output",
        default=None,
        help="Output JSON path (default: output/fitted_resume.json)",
    )
    fit_parser.set_defaults(func=cmd_fit)

    density_parser = subparsers.add_parser("density", help="Print the per-section character count")
    density_parser.add_argument("input", help="Resume file (.json, .yaml or .yml)")
    density_parser.set_defaults(func=cmd_density)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    ensure_dirs()
    init_logger(LOG_DIR, log_level=args.log_level, log_to_file=not args.no_log_file)
    return args.func(args)


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
