"""Command-line entry point: load, validate, report, exit."""

import argparse
import logging
import sys
import time
import uuid
from pathlib import Path
from typing import List, Optional, Sequence

from gitinfo.config.constants import COLOR_MODES, DEFAULT_TARGET
from gitinfo.config.settings import load_settings
from gitinfo.exceptions import LoadError
from gitinfo.loader import load_document, load_schema, locate_schema
from gitinfo.rendering.console import render_error, render_failure, render_success, use_color
from gitinfo.utils import get_logger, now_utc, set_log_level
from gitinfo.validator import validate

logger = get_logger(__name__)


def _check_file(file_path: str, schema: dict, color: str) -> bool:
    t0 = time.monotonic()
    try:
        data = load_document(file_path)
    except LoadError as e:
        logger.info("load failed file=%s: %s", file_path, e)
        print(render_error(str(e), use_color(color, sys.stderr)), file=sys.stderr)
        return False

    issues = validate(data, schema)
    logger.info("validated file=%s issues=%d took_ms=%d", file_path, len(issues), int((time.monotonic() - t0) * 1000))

    if issues:
        print(render_failure(file_path, issues, use_color(color, sys.stderr)), file=sys.stderr)
        return False
    print(render_success(file_path, use_color(color, sys.stdout)))
    return True


def run_once(
    files: Sequence[str],
    *,
    schema_path: Optional[str] = None,
    color: str = "auto",
) -> int:
    """Validate each file against the resolved schema.

    Returns the process exit status: 0 if every file is valid, 1 otherwise.
    """
    run_id = uuid.uuid4().hex[:8]
    logger.info("=== run start id=%s at=%s files=%d ===", run_id, now_utc().isoformat(), len(files))

    ok = True
    schema = None
    try:
        for file_path in files:
            # Missing targets are reported before the schema is looked up.
            if not Path(file_path).is_file():
                print(render_error(f"File not found: {file_path}", use_color(color, sys.stderr)), file=sys.stderr)
                ok = False
                continue
            if schema is None:
                try:
                    schema = load_schema(locate_schema(schema_path))
                except LoadError as e:
                    logger.info("schema load failed: %s", e)
                    print(render_error(str(e), use_color(color, sys.stderr)), file=sys.stderr)
                    ok = False
                    break
            if not _check_file(file_path, schema, color):
                ok = False
    finally:
        logger.info("=== run end id=%s ok=%s ===", run_id, ok)
    return 0 if ok else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gitinfo-validate", description="Validate .gitinfo files against their schema")
    parser.add_argument("files", nargs="*", help=f"Files to validate (default: {DEFAULT_TARGET})")
    parser.add_argument("--schema", help="Path to the schema JSON file")
    parser.add_argument("--config", help="Path to YAML settings file")
    parser.add_argument("--color", choices=COLOR_MODES, default=None, help="Colorize output")
    parser.add_argument("--no-color", dest="color", action="store_const", const="never", help="Disable colors")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    if args.verbose:
        set_log_level(logging.DEBUG)

    try:
        settings = load_settings(args.config)
    except LoadError as e:
        print(render_error(str(e), use_color(args.color or "auto", sys.stderr)), file=sys.stderr)
        sys.exit(1)

    status = run_once(
        args.files or [DEFAULT_TARGET],
        schema_path=args.schema or settings.schema_path,
        color=args.color or settings.color,
    )
    sys.exit(status)


if __name__ == "__main__":
    main()
