"""Command-line entry point for Beef Brain."""

import argparse
import sys
from pathlib import Path

import structlog

from beefbrain.config import get_settings
from beefbrain.exceptions import ParseError
from beefbrain.logging import configure_logging
from beefbrain.sheet.engine import update_sheet, validate

logger = structlog.get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the ``beefbrain`` command."""
    parser = argparse.ArgumentParser(
        prog="beefbrain",
        description="Keep derived fields of YAML character sheets up to date",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    validate_cmd = commands.add_parser("validate", help="Check that sheets are well-formed YAML")
    validate_cmd.add_argument("paths", nargs="+", type=Path, help="Sheet files")

    update_cmd = commands.add_parser("update", help="Recompute derived fields of a sheet")
    update_cmd.add_argument("path", type=Path, help="Sheet file")
    update_cmd.add_argument(
        "--in-place", "-i", action="store_true", help="Rewrite the file instead of printing"
    )
    update_cmd.add_argument(
        "--changes", action="store_true", help="List rewritten fields on stderr"
    )

    return parser


def _read(path: Path) -> str | None:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        print(f"{path}: {e.strerror}", file=sys.stderr)
        return None


def cmd_validate(paths: list[Path]) -> int:
    """Validate each file, printing one status line per file."""
    failures = 0
    for path in paths:
        text = _read(path)
        if text is not None and validate(text):
            print(f"{path}: ok")
        else:
            print(f"{path}: invalid", file=sys.stderr)
            failures += 1
    return 1 if failures else 0


def cmd_update(path: Path, in_place: bool, show_changes: bool) -> int:
    """Recompute one sheet and print or rewrite it."""
    text = _read(path)
    if text is None:
        return 1

    try:
        result = update_sheet(text, get_settings().flow_style_policy())
    except ParseError as e:
        print(f"{path}: {e}", file=sys.stderr)
        return 1

    if show_changes:
        for change in result.changes:
            print(f"  {change}", file=sys.stderr)

    if not in_place:
        sys.stdout.write(result.text)
    elif result.changed:
        path.write_text(result.text, encoding="utf-8")
        logger.info("sheet_written", path=str(path), changes=len(result.changes))

    return 0


def main(argv: list[str] | None = None) -> int:
    """
    Run the command line.

    Args:
        argv: Arguments without the program name. Defaults to ``sys.argv[1:]``.

    Returns:
        Process exit code
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_format=settings.log_format == "json")

    args = build_parser().parse_args(argv)
    if args.command == "validate":
        return cmd_validate(args.paths)
    return cmd_update(args.path, args.in_place, args.changes)


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
