"""Core module containing the method reflector, docblock parsing and type naming."""

from docreflect.core.config import ReflectorConfig, get_config, reload_config
from docreflect.core.docblock import (
    RETURN_MARKER,
    extract_type_expression,
    find_doc_comment,
    iter_interfaces,
    parse_return_types,
)
from docreflect.core.models import (
    CheckResult,
    DocSource,
    MethodHandle,
    MethodKind,
    ReflectionReport,
)
from docreflect.core.reflector import (
    MethodReflector,
    ReflectionError,
    resolve_class,
    resolve_method,
)
from docreflect.core.typenames import (
    resolve_type_token,
    runtime_type_name,
    runtime_type_names,
)

__all__ = [
    "CheckResult",
    "DocSource",
    "MethodHandle",
    "MethodKind",
    "MethodReflector",
    "RETURN_MARKER",
    "ReflectionError",
    "ReflectionReport",
    "ReflectorConfig",
    "extract_type_expression",
    "find_doc_comment",
    "get_config",
    "iter_interfaces",
    "parse_return_types",
    "reload_config",
    "resolve_class",
    "resolve_method",
    "resolve_type_token",
    "runtime_type_name",
    "runtime_type_names",
]
