"""docreflect - runtime return type checks driven by method docblocks."""

from docreflect.core import (
    CheckResult,
    MethodHandle,
    MethodKind,
    MethodReflector,
    ReflectionError,
    ReflectionReport,
    ReflectorConfig,
    parse_return_types,
)

__version__ = "0.1.0"

__all__ = [
    "CheckResult",
    "MethodHandle",
    "MethodKind",
    "MethodReflector",
    "ReflectionError",
    "ReflectionReport",
    "ReflectorConfig",
    "parse_return_types",
]
