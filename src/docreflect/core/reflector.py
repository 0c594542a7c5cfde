"""Method type reflector.

This module provides MethodReflector, a read-only query object bound to one
method of one class. It resolves the method's docstring (falling back to the
interfaces the declaring class implements), parses the declared return types
from its ``@return`` tag, and checks runtime values against them.
"""

from __future__ import annotations

import importlib
import inspect
import logging
import threading
from typing import Any

from docreflect.core.config import ReflectorConfig, get_config
from docreflect.core.docblock import find_doc_comment, parse_return_types, unwrap_member
from docreflect.core.models import (
    CheckResult,
    DocSource,
    MethodHandle,
    ReflectionReport,
    qualified_class_name,
)
from docreflect.core.typenames import (
    OBJECT,
    module_namespace,
    resolve_type_token,
    runtime_type_name,
    runtime_type_names,
)

logger = logging.getLogger(__name__)

_UNRESOLVED = object()


class ReflectionError(Exception):
    """The class or method to reflect does not exist."""

    def __init__(self, message: str, details: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


def resolve_class(target: Any) -> type:
    """Resolve a class object, an instance or an import path to a class.

    Import paths may be written ``pkg.mod:Class`` or ``pkg.mod.Class``.

    Raises:
        ReflectionError: If the module or class cannot be found.
    """
    if inspect.isclass(target):
        return target
    if not isinstance(target, str):
        return type(target)

    if ":" in target:
        module_name, _, attr_path = target.partition(":")
    else:
        module_name, _, attr_path = target.rpartition(".")
    if not module_name or not attr_path:
        raise ReflectionError(
            message=f"Class '{target}' does not exist",
            details="Expected 'module:Class' or 'module.Class'",
        )

    try:
        resolved: Any = importlib.import_module(module_name)
    except (ImportError, TypeError, ValueError) as e:
        raise ReflectionError(
            message=f"Class '{target}' does not exist",
            details=str(e),
        ) from e

    for attr in attr_path.split("."):
        try:
            resolved = getattr(resolved, attr)
        except AttributeError as e:
            raise ReflectionError(
                message=f"Class '{target}' does not exist",
                details=str(e),
            ) from e

    if not inspect.isclass(resolved):
        raise ReflectionError(message=f"'{target}' is not a class")
    return resolved


def resolve_method(owner: type, method_name: str) -> MethodHandle:
    """Locate a method on a class and wrap it in a MethodHandle.

    Raises:
        ReflectionError: If no class in the MRO defines a method of that name.
    """
    for klass in owner.__mro__:
        if method_name not in vars(klass):
            continue
        unwrapped = unwrap_member(vars(klass)[method_name])
        if unwrapped is None:
            raise ReflectionError(
                message=f"{qualified_class_name(klass)}.{method_name} is not a method",
            )
        function, kind = unwrapped
        return MethodHandle(
            owner=owner,
            name=method_name,
            declaring_class=klass,
            function=function,
            kind=kind,
        )

    raise ReflectionError(
        message=f"Method {qualified_class_name(owner)}.{method_name}() does not exist",
    )


class MethodReflector:
    """Return type information for one method of one class.

    Docstring and return types are resolved lazily, once, and cached for the
    lifetime of the reflector, including "nothing found" outcomes.
    """

    def __init__(
        self,
        target: Any,
        method_name: str,
        config: ReflectorConfig | None = None,
    ) -> None:
        self._config = config or get_config()
        self._handle = resolve_method(resolve_class(target), method_name)
        self._lock = threading.Lock()
        self._doc_source: Any = _UNRESOLVED
        self._return_types: Any = _UNRESOLVED

    def get_handle(self) -> MethodHandle:
        """Return the underlying method handle."""
        return self._handle

    def get_doc_source(self) -> DocSource | None:
        """Return the resolved docstring with the class that supplied it."""
        if self._doc_source is _UNRESOLVED:
            with self._lock:
                if self._doc_source is _UNRESOLVED:
                    self._doc_source = find_doc_comment(
                        self._handle,
                        interface_fallback=self._config.interface_fallback,
                    )
        return self._doc_source

    def get_doc_comment(self) -> str | None:
        """Return the method's docstring, or None if none was found.

        The method's own docstring is preferred; otherwise the first
        documented method of the same name on an implemented interface.
        """
        source = self.get_doc_source()
        return source.text if source is not None else None

    def get_return_types(self) -> tuple[str, ...]:
        """Return the types declared by the docstring's ``@return`` tag.

        An empty tuple means there is no constraint.
        """
        if self._return_types is _UNRESOLVED:
            doc = self.get_doc_comment()
            with self._lock:
                if self._return_types is _UNRESOLVED:
                    self._return_types = parse_return_types(doc, self._config.return_marker)
        return self._return_types

    def is_valid_return_value(self, value: Any) -> bool:
        """Check a value against the declared return types.

        For object values the first declared class type decides the outcome,
        even when a later alternative would have matched.
        """
        types = self.get_return_types()
        if not types:
            return True

        names = runtime_type_names(value)
        is_object = names[0] == OBJECT

        for declared in types:
            if declared == self._config.mixed_type:
                return True

            if is_object and declared == self._config.object_type:
                return True

            if is_object:
                return self._is_instance(value, declared)

            if declared in names:
                return True

        return False

    def check(self, value: Any) -> CheckResult:
        """Check a value and describe the outcome."""
        return CheckResult(
            method=self._handle.qualified_name,
            value_type=runtime_type_name(value),
            declared_types=list(self.get_return_types()),
            valid=self.is_valid_return_value(value),
        )

    def report(self) -> ReflectionReport:
        """Summarize the reflected method."""
        source = self.get_doc_source()
        return ReflectionReport(
            target=qualified_class_name(self._handle.owner),
            method=self._handle.name,
            declaring_class=qualified_class_name(self._handle.declaring_class),
            kind=self._handle.kind,
            doc_source=qualified_class_name(source.source_class) if source else None,
            doc_comment=source.text if source else None,
            return_types=list(self.get_return_types()),
        )

    def _is_instance(self, value: Any, declared: str) -> bool:
        cls = resolve_type_token(declared, self._type_namespaces())
        if cls is None:
            return False
        try:
            return isinstance(value, cls)
        except TypeError as e:
            logger.debug(f"isinstance() refused '{declared}': {e}")
            return False

    def _type_namespaces(self) -> list[Any]:
        # Classes in the reflected hierarchy resolve by simple name even when
        # they are not module globals.
        hierarchy = {klass.__name__: klass for klass in reversed(self._handle.owner.__mro__)}
        namespaces: list[Any] = [hierarchy]
        source = self.get_doc_source()
        if source is not None:
            namespaces.append(module_namespace(source.function))
            namespaces.append(module_namespace(source.source_class))
        namespaces.append(module_namespace(self._handle.declaring_class))
        namespaces.append(module_namespace(self._handle.owner))
        return namespaces
