"""Runtime type naming and declared type token resolution.

Values are named after their exact type. Subclasses of the builtin scalars
and containers (enums, named tuples, ordered dicts, ...) are objects.
"""

from __future__ import annotations

import builtins
import inspect
import logging
import sys
from collections.abc import Iterable, Mapping
from typing import Any

logger = logging.getLogger(__name__)

OBJECT = "object"

_TYPE_NAMES: dict[type, tuple[str, ...]] = {
    type(None): ("null", "none"),
    bool: ("boolean", "bool"),
    int: ("integer", "int"),
    float: ("double", "float"),
    str: ("string", "str"),
    bytes: ("string", "bytes"),
    list: ("array", "list"),
    tuple: ("array", "tuple"),
    dict: ("array", "dict"),
}


def runtime_type_names(value: Any) -> tuple[str, ...]:
    """Return the names a value's runtime type answers to.

    The first name is the canonical lower-cased name; the rest are aliases.
    """
    return _TYPE_NAMES.get(type(value), (OBJECT,))


def runtime_type_name(value: Any) -> str:
    """Return the canonical lower-cased runtime type name of a value."""
    return runtime_type_names(value)[0]


def module_namespace(obj: Any) -> Mapping[str, Any]:
    """Return the globals of the module an object was defined in."""
    module = sys.modules.get(getattr(obj, "__module__", None) or "")
    return vars(module) if module is not None else {}


def resolve_type_token(token: str, namespaces: Iterable[Mapping[str, Any]]) -> type | None:
    """Resolve a declared type token to a class.

    Dotted tokens are walked attribute by attribute from the first segment.
    Each namespace is tried in order, then ``builtins``. Nothing is imported.

    Args:
        token: Type token as written in the docstring.
        namespaces: Mappings to look the first segment up in.

    Returns:
        The class named by the token, or None.
    """
    if not token:
        return None

    head, *rest = token.split(".")
    for namespace in [*namespaces, vars(builtins)]:
        if head not in namespace:
            continue
        resolved: Any = namespace[head]
        for attr in rest:
            resolved = getattr(resolved, attr, None)
            if resolved is None:
                break
        if inspect.isclass(resolved):
            return resolved

    logger.debug(f"Could not resolve type token '{token}'")
    return None
