"""CLI entrypoint for editing Doxygen-generated HTML in place."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import DEFAULT_BASE_TITLE, DEFAULT_HTML_DIR, EditConfig, load_config
from .errors import BdeDoxError
from .logging import configure_logging
from .orchestrator import Orchestrator


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bdedox-edithtml",
        description="Retrofit BDE naming, badges and cross-links onto Doxygen HTML output.",
    )
    parser.add_argument(
        "-d",
        "--debug",
        action="count",
        default=None,
        help="Enable debug reporting (repeat for more).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=None,
        help="Enable verbose reporting (repeat for more).",
    )
    parser.add_argument(
        "-m",
        "--userMainPage",
        dest="user_main_page",
        action="store_true",
        default=None,
        help="Main page supplied by user elsewhere; do not alias 'main.html' to 'components.html'.",
    )
    parser.add_argument(
        "-o",
        "--htmlDir",
        dest="html_dir",
        default=None,
        help=f"Output directory holding the Doxygenated files (default: ./{DEFAULT_HTML_DIR}).",
    )
    parser.add_argument(
        "-b",
        "--baseTitle",
        dest="base_title",
        default=None,
        help=f'Base HTML title (default: "{DEFAULT_BASE_TITLE}"; empty disables titles).',
    )
    parser.add_argument(
        "-l",
        "--logFile",
        dest="log_file",
        default=None,
        help="Also write log records to this file.",
    )
    parser.add_argument(
        "-c",
        "--config",
        default=None,
        help="Path to a .bdedox.yml file or the directory containing one.",
    )
    return parser


def resolve_config(args: argparse.Namespace) -> EditConfig:
    """Merge command-line values over the configuration file."""
    config = load_config(Path(args.config) if args.config else None)
    return config.with_overrides(
        html_dir=args.html_dir or None,
        base_title=args.base_title,
        user_main_page=args.user_main_page,
        debug=args.debug,
        verbose=args.verbose,
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for bdedox-edithtml."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    prog = parser.prog

    try:
        config = resolve_config(args)
    except BdeDoxError as exc:
        parser.exit(1, f"{prog}: {exc}\n")

    configure_logging(
        debug=config.debug,
        verbose=config.verbose,
        log_file=Path(args.log_file) if args.log_file else None,
    )

    if not config.html_dir.is_dir():
        parser.exit(1, f"{prog}: output directory not found: {config.html_dir}\n")

    try:
        summary = Orchestrator().run(config)
    except BdeDoxError as exc:
        parser.exit(1, f"{prog}: {exc}\n")
    except OSError as exc:
        parser.exit(1, f"{prog}: {exc}\n")

    print(
        f"Edited {summary.html_files_edited} HTML files; "
        f"annotated {summary.group_files_annotated} group files"
    )


if __name__ == "__main__":
    main(sys.argv[1:])
