"""Locate and read the schema and the documents to validate."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

from . import jsonc
from .config.constants import SCHEMA_ENV, SCHEMA_FILENAME
from .exceptions import LoadError
from .utils import get_logger

logger = get_logger(__name__)

BUNDLED_SCHEMA = Path(__file__).resolve().parent / "schemas" / SCHEMA_FILENAME

PathLike = Union[str, os.PathLike]


def locate_schema(explicit: Optional[PathLike] = None) -> Path:
    """Resolve which schema file to use.

    Order: explicit path, ``$GITINFO_SCHEMA``, ``./gitinfo.schema.json``, the
    bundled schema. Explicit and environment paths are returned even when
    missing so the caller reports them instead of silently falling back.
    """
    if explicit:
        path = Path(explicit)
        source = "argument"
    elif os.getenv(SCHEMA_ENV):
        path = Path(os.environ[SCHEMA_ENV])
        source = "env"
    elif Path(SCHEMA_FILENAME).is_file():
        path = Path(SCHEMA_FILENAME)
        source = "cwd"
    else:
        path = BUNDLED_SCHEMA
        source = "bundled"
    logger.debug("schema resolved path=%s source=%s", path, source)
    return path


def _read_text(path: Path, what: str) -> str:
    if not path.is_file():
        raise LoadError(f"{what} not found: {path}")
    try:
        # utf-8-sig tolerates a BOM written by some editors
        return path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise LoadError(f"Error reading {what.lower()}: {e}") from e


def load_schema(path: PathLike) -> Dict[str, Any]:
    """Read a schema file. Its content is trusted beyond being a JSON object."""
    path = Path(path)
    text = _read_text(path, "Schema")
    try:
        schema = json.loads(text)
    except json.JSONDecodeError as e:
        raise LoadError(f"Error parsing schema: {e}") from e
    if not isinstance(schema, dict):
        raise LoadError("Schema root must be an object")
    return schema


def load_document(path: PathLike) -> Any:
    """Read and parse a JSONC document."""
    path = Path(path)
    text = _read_text(path, "File")
    try:
        return jsonc.loads(text)
    except json.JSONDecodeError as e:
        raise LoadError(f"Error parsing JSONC: {e}") from e
