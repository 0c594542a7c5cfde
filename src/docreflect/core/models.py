"""Data models for docreflect.

Handles describing a reflected method are plain frozen dataclasses since they
carry live class and function objects. Reports handed to callers and the CLI
are pydantic models so they serialize cleanly.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class MethodKind(str, Enum):
    """How a method is bound on its declaring class."""

    METHOD = "method"
    STATICMETHOD = "staticmethod"
    CLASSMETHOD = "classmethod"
    PROPERTY = "property"
    BUILTIN = "builtin"


def qualified_class_name(cls: type) -> str:
    """Return ``module.QualName`` for a class."""
    return f"{cls.__module__}.{cls.__qualname__}"


@dataclass(frozen=True)
class MethodHandle:
    """Immutable reference to one method of one class."""

    owner: type
    name: str
    declaring_class: type
    function: Any
    kind: MethodKind

    @property
    def qualified_name(self) -> str:
        return f"{qualified_class_name(self.declaring_class)}.{self.name}"


@dataclass(frozen=True)
class DocSource:
    """A resolved docstring and the class whose method supplied it."""

    text: str
    source_class: type
    function: Any


class ReflectionReport(BaseModel):
    """Summary of what a reflector found for one method."""

    target: str = Field(..., description="Qualified name of the inspected class")
    method: str = Field(..., description="Method name")
    declaring_class: str = Field(..., description="Class that defines the method")
    kind: MethodKind
    doc_source: str | None = Field(None, description="Class that supplied the docstring")
    doc_comment: str | None = Field(None, description="Raw docstring text")
    return_types: list[str] = Field(default_factory=list, description="Declared return types")


class CheckResult(BaseModel):
    """Outcome of checking one value against a method's declared return types."""

    method: str = Field(..., description="Qualified method name")
    value_type: str = Field(..., description="Canonical runtime type name of the value")
    declared_types: list[str] = Field(default_factory=list)
    valid: bool
