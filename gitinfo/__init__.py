"""Validate ``.gitinfo`` repository metadata files against a JSON schema subset."""

from .exceptions import LoadError
from .models import IssueKind, ValidationIssue
from .validator import validate, validate_property

__all__ = ["IssueKind", "LoadError", "ValidationIssue", "validate", "validate_property"]
