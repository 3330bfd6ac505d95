"""Schema-driven validation of parsed ``.gitinfo`` documents.

Only a small keyword subset is understood: ``type``, ``properties``,
``additionalProperties``, ``format``, ``pattern``, ``minLength``, ``items``,
``minItems`` and ``maxItems``. The schema itself is trusted and never checked
here; see ``scripts/check_schema.py`` for that.
"""

from __future__ import annotations

import re
from typing import Any, Dict, List, Optional

from .formats import is_valid_email, is_valid_uri
from .models import ROOT_PATH, IssueKind, ValidationIssue, index_path, key_path


def _count_keyword(schema: Dict[str, Any], key: str) -> Optional[int]:
    """Return a non-negative integer keyword, or None when absent or unusable."""
    value = schema.get(key)
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        return None
    return value


def _compile_pattern(pattern: Any) -> Optional[re.Pattern]:
    if not isinstance(pattern, str):
        return None
    try:
        return re.compile(pattern)
    except re.error:
        return None


def validate(data: Any, schema: Dict[str, Any]) -> List[ValidationIssue]:
    """Validate a document root against a schema and return every issue found.

    Args:
        data: Parsed document (plain ``json`` values)
        schema: Parsed schema; must contain a top-level ``properties`` mapping

    Returns:
        Issues in schema property order, after any unknown-property issues.
        Declared properties absent from ``data`` are never reported: every
        property is optional.
    """
    errors: List[ValidationIssue] = []

    if not isinstance(data, dict):
        errors.append(ValidationIssue(path=ROOT_PATH, message="expected object", kind=IssueKind.STRUCTURAL))
        return errors

    properties = schema["properties"]

    if schema.get("additionalProperties") is False:
        allowed = set(properties)
        for key in data:
            if key not in allowed:
                errors.append(
                    ValidationIssue(
                        path=ROOT_PATH,
                        message=f'unknown property "{key}"',
                        kind=IssueKind.UNKNOWN_PROPERTY,
                    )
                )

    for key, prop_schema in properties.items():
        if key in data:
            validate_property(errors, key_path("", key), data[key], prop_schema)

    return errors


def validate_property(errors: List[ValidationIssue], path: str, value: Any, schema: Any) -> None:
    """Append issues for ``value`` checked against one schema node."""
    if not isinstance(schema, dict):
        return

    expected = schema.get("type")

    if expected == "string":
        _validate_string(errors, path, value, schema)
    elif expected == "array":
        _validate_array(errors, path, value, schema)
    elif expected == "object":
        # Shallow: nested "properties" are not followed.
        if not isinstance(value, dict):
            errors.append(ValidationIssue(path=path, message="expected object", kind=IssueKind.STRUCTURAL))


def _validate_string(errors: List[ValidationIssue], path: str, value: Any, schema: Dict[str, Any]) -> None:
    if not isinstance(value, str):
        errors.append(ValidationIssue(path=path, message="expected string", kind=IssueKind.STRUCTURAL))
        return

    fmt = schema.get("format")
    if fmt == "uri" and not is_valid_uri(value):
        errors.append(ValidationIssue(path=path, message=f'invalid URI "{value}"'))
    elif fmt == "email" and not is_valid_email(value):
        errors.append(ValidationIssue(path=path, message=f'invalid email "{value}"'))

    regex = _compile_pattern(schema.get("pattern"))
    if regex is not None and regex.search(value) is None:
        errors.append(ValidationIssue(path=path, message=f"does not match pattern {regex.pattern}"))

    min_length = _count_keyword(schema, "minLength")
    # Byte length, not codepoints.
    if min_length is not None and len(value.encode("utf-8", "surrogatepass")) < min_length:
        errors.append(ValidationIssue(path=path, message=f"string too short (min {min_length})"))


def _validate_array(errors: List[ValidationIssue], path: str, value: Any, schema: Dict[str, Any]) -> None:
    if not isinstance(value, list):
        errors.append(ValidationIssue(path=path, message="expected array", kind=IssueKind.STRUCTURAL))
        return

    if "items" not in schema:
        return
    items = schema["items"]

    if isinstance(items, list):
        # Tuple mode: positions past the end of ``items`` are unchecked.
        for i, (item, item_schema) in enumerate(zip(value, items)):
            validate_property(errors, index_path(path, i), item, item_schema)

        # Item counts are only enforced in tuple mode.
        min_items = _count_keyword(schema, "minItems")
        if min_items is not None and len(value) < min_items:
            errors.append(ValidationIssue(path=path, message=f"expected at least {min_items} items"))
        max_items = _count_keyword(schema, "maxItems")
        if max_items is not None and len(value) > max_items:
            errors.append(ValidationIssue(path=path, message=f"expected at most {max_items} items"))
    else:
        for i, item in enumerate(value):
            validate_property(errors, index_path(path, i), item, items)
