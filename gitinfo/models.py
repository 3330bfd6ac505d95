"""Pydantic models describing validation issues."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict

ROOT_PATH = "root"


class IssueKind(str, Enum):
    """Category of a reported violation."""

    STRUCTURAL = "structural"
    CONSTRAINT = "constraint"
    UNKNOWN_PROPERTY = "unknown_property"


class ValidationIssue(BaseModel):
    """Single violation found at a position in the document."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    path: str
    message: str
    kind: IssueKind = IssueKind.CONSTRAINT

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"


def key_path(parent: str, key: str) -> str:
    """Path of an object member, e.g. ``.owner`` or ``.links.home``."""
    return f"{parent}.{key}"


def index_path(parent: str, index: int) -> str:
    """Path of an array element, e.g. ``.tags[2]``."""
    return f"{parent}[{index}]"
