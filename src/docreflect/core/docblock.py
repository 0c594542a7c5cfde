"""Docblock discovery and ``@return`` tag parsing.

Docstrings are read raw from ``__doc__``. Inherited docstrings only come from
the interface fallback in :func:`find_doc_comment`, never from
``inspect.getdoc``.

The tag grammar is deliberately small:

1. find the exact marker (``" * @return"`` by default);
2. take the text up to the next marker, and strip it;
3. split on the first run of whitespace and keep the type expression;
4. split the type expression on ``|`` and strip each token.
"""

from __future__ import annotations

import inspect
import logging
import re
from collections.abc import Iterator
from functools import cached_property
from typing import Any

from docreflect.core.models import DocSource, MethodHandle, MethodKind

logger = logging.getLogger(__name__)

RETURN_MARKER = " * @return"

_WHITESPACE = re.compile(r"\s+")


def extract_type_expression(doc: str | None, marker: str = RETURN_MARKER) -> str | None:
    """Return the raw type expression following the return marker.

    Args:
        doc: Docstring text, may be None.
        marker: Exact substring introducing the tag.

    Returns:
        The type expression (possibly empty), or None when the marker is absent.
    """
    if not doc:
        return None
    parts = doc.split(marker)
    if len(parts) < 2:
        return None
    return _WHITESPACE.split(parts[1].strip(), maxsplit=1)[0]


def parse_return_types(doc: str | None, marker: str = RETURN_MARKER) -> tuple[str, ...]:
    """Parse the declared return types out of a docstring.

    ``@return`` with nothing after it yields a single empty token.

    Args:
        doc: Docstring text, may be None.
        marker: Exact substring introducing the tag.

    Returns:
        Tuple of type tokens in declaration order, empty if there is no tag.
    """
    expression = extract_type_expression(doc, marker)
    if expression is None:
        return ()
    return tuple(token.strip() for token in expression.split("|"))


def unwrap_member(member: Any) -> tuple[Any, MethodKind] | None:
    """Unwrap a raw class namespace entry into its underlying callable.

    Returns None when the entry is not something that behaves as a method.
    """
    if isinstance(member, staticmethod):
        return member.__func__, MethodKind.STATICMETHOD
    if isinstance(member, classmethod):
        return member.__func__, MethodKind.CLASSMETHOD
    if isinstance(member, property):
        if member.fget is None:
            return None
        return member.fget, MethodKind.PROPERTY
    if isinstance(member, cached_property):
        return member.func, MethodKind.PROPERTY
    if inspect.isfunction(member):
        return member, MethodKind.METHOD
    if inspect.isroutine(member):
        return member, MethodKind.BUILTIN
    return None


def is_interface(cls: type) -> bool:
    """Whether a class acts as an interface (an abstract class or a Protocol).

    Concrete classes never qualify, even when they derive from an ABC.
    """
    return inspect.isabstract(cls) or bool(vars(cls).get("_is_protocol", False))


def iter_interfaces(cls: type) -> Iterator[type]:
    """Yield the interfaces implemented by a class, in MRO order."""
    for base in cls.__mro__[1:]:
        if base is object:
            continue
        if is_interface(base):
            yield base


def _raw_doc(function: Any) -> str | None:
    doc = getattr(function, "__doc__", None)
    return doc if isinstance(doc, str) and doc else None


def find_doc_comment(handle: MethodHandle, interface_fallback: bool = True) -> DocSource | None:
    """Resolve the docstring for a method.

    The method's own docstring wins. Otherwise each interface of the declaring
    class that defines a method of the same name is tried in MRO order, and
    the first non-empty docstring is returned.

    Args:
        handle: The method to document.
        interface_fallback: Whether to search interfaces at all.

    Returns:
        DocSource for the docstring found, or None.
    """
    doc = _raw_doc(handle.function)
    if doc:
        return DocSource(text=doc, source_class=handle.declaring_class, function=handle.function)

    if not interface_fallback:
        return None

    for iface in iter_interfaces(handle.declaring_class):
        member = vars(iface).get(handle.name)
        if member is None:
            continue
        unwrapped = unwrap_member(member)
        if unwrapped is None:
            continue
        function, _ = unwrapped
        doc = _raw_doc(function)
        if doc:
            logger.debug(
                f"Using docstring of {iface.__qualname__}.{handle.name} "
                f"for {handle.qualified_name}"
            )
            return DocSource(text=doc, source_class=iface, function=function)

    logger.debug(f"No docstring found for {handle.qualified_name}")
    return None
