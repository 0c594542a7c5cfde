"""Unit tests for runtime type naming and type token resolution."""

import collections
import enum

import pytest

from docreflect.core.typenames import (
    module_namespace,
    resolve_type_token,
    runtime_type_name,
    runtime_type_names,
)


class Color(enum.IntEnum):
    RED = 1


class Point:
    pass


class TestRuntimeTypeNames:
    """Tests for canonical runtime type names."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (None, "null"),
            (True, "boolean"),
            (1, "integer"),
            (1.5, "double"),
            ("x", "string"),
            (b"x", "string"),
            ([], "array"),
            ((), "array"),
            ({}, "array"),
            (Point(), "object"),
            (object(), "object"),
            (len, "object"),
        ],
    )
    def test_canonical_name(self, value, expected) -> None:
        assert runtime_type_name(value) == expected

    def test_aliases(self) -> None:
        assert runtime_type_names(1) == ("integer", "int")
        assert runtime_type_names("x") == ("string", "str")
        assert runtime_type_names(None) == ("null", "none")

    def test_bool_is_not_an_integer(self) -> None:
        assert "int" not in runtime_type_names(False)
        assert "integer" not in runtime_type_names(False)

    def test_builtin_subclasses_are_objects(self) -> None:
        assert runtime_type_name(Color.RED) == "object"
        assert runtime_type_name(collections.OrderedDict()) == "object"


class TestResolveTypeToken:
    """Tests for resolving declared type tokens to classes."""

    def test_module_global(self) -> None:
        assert resolve_type_token("Point", [module_namespace(Point)]) is Point

    def test_dotted(self) -> None:
        namespace = module_namespace(Point)
        assert resolve_type_token("collections.OrderedDict", [namespace]) is collections.OrderedDict
        assert resolve_type_token("enum.IntEnum", [namespace]) is enum.IntEnum

    def test_builtins_fallback(self) -> None:
        assert resolve_type_token("int", []) is int
        assert resolve_type_token("ValueError", []) is ValueError

    def test_namespace_order(self) -> None:
        assert resolve_type_token("Point", [{"Point": Color}, {"Point": Point}]) is Color

    def test_non_class_is_skipped(self) -> None:
        assert resolve_type_token("Point", [{"Point": 42}, {"Point": Point}]) is Point

    @pytest.mark.parametrize("token", ["", "Nope", "collections.Nope", "len", "Point.x"])
    def test_unresolvable(self, token) -> None:
        assert resolve_type_token(token, [module_namespace(Point)]) is None

    def test_no_import_is_performed(self) -> None:
        assert resolve_type_token("json.JSONDecoder", [{}]) is None

    def test_unknown_module(self) -> None:
        ghost = type("Ghost", (), {"__module__": "docreflect_missing_module"})
        assert module_namespace(ghost) == {}
