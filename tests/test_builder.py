# tests/test_builder.py
from __future__ import annotations

import pytest

from bem_classnames.bem import BemParts, InvalidDescriptor
from bem_classnames.builder import ClassBuilder, MissingPrimaryClass

"""
ClassBuilder tests
==================

Does: Cover construction/prefixing, add_class/add_modifier chaining,
      map_classes sigil handling, map_params dispatch (including the
      "block"-key ambiguity) and to_string idempotence.
"""


# ──────────────────────────────────────────────────────────────────────────────
# Construction
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize("primary", ["", None, {}, [], {"block": ""}, [""]])
def test_missing_primary_class_raises(primary):
    with pytest.raises(MissingPrimaryClass):
        ClassBuilder(primary)


def test_unsupported_primary_type_raises_invalid_descriptor():
    with pytest.raises(InvalidDescriptor):
        ClassBuilder(42)


def test_primary_class_only():
    assert ClassBuilder("x").to_string() == "x"
    assert str(ClassBuilder("x")) == "x"


def test_primary_class_is_prefixed():
    builder = ClassBuilder("unique", "pre-")
    assert str(builder) == "pre-unique"
    assert builder.primary_class == "pre-unique"
    assert builder.prefix == "pre-"


def test_primary_class_from_record_and_sequence():
    assert str(ClassBuilder({"block": "drop", "modifier": "up"})) == "drop--up"
    assert str(ClassBuilder(["carousel", "prev"])) == "carousel-prev"


# ──────────────────────────────────────────────────────────────────────────────
# add_class / add_modifier
# ──────────────────────────────────────────────────────────────────────────────
def test_add_class_variants_are_prefixed():
    builder = (
        ClassBuilder("unique", "pre-")
        .add_class("foo")
        .add_class("foo", "element")
        .add_class("foo", "", "modifier")
        .add_class(["foo", "element"])
        .add_class({"block": "foo", "modifier": "modifier"})
    )
    assert builder.classes == (
        "pre-unique",
        "pre-foo",
        "pre-foo-element",
        "pre-foo--modifier",
        "pre-foo-element",
        "pre-foo--modifier",
    )


def test_add_class_without_prefix():
    builder = ClassBuilder("unique", "pre-").add_class("foo", apply_prefix=False)
    assert str(builder) == "pre-unique foo"


def test_add_modifier_chained():
    assert str(ClassBuilder("unique").add_modifier("inverse")) == "unique unique--inverse"


def test_add_modifier_is_not_reprefixed():
    builder = ClassBuilder("unique", "pre-").add_modifier("inverse").add_modifier("reverse")
    assert str(builder) == "pre-unique pre-unique--inverse pre-unique--reverse"


def test_add_class_returns_same_builder():
    builder = ClassBuilder("x")
    assert builder.add_class("y") is builder
    assert builder.add_modifier("z") is builder
    assert builder.map_classes({}) is builder
    assert builder.map_params() is builder


def test_duplicates_are_kept():
    builder = ClassBuilder("x").add_class("y").add_class("y")
    assert str(builder) == "x y y"


# ──────────────────────────────────────────────────────────────────────────────
# map_classes
# ──────────────────────────────────────────────────────────────────────────────
def test_map_classes_order_falsy_and_sigil():
    builder = ClassBuilder("x").map_classes({"is-active": True, "is-disabled": False, "@inv": True})
    assert str(builder) == "x is-active x--inv"


def test_map_classes_keys_are_literal_and_unprefixed():
    builder = ClassBuilder("unique", "pre-").map_classes(
        {"no-scroll": 1, "is-open": "", "@inverse": ["truthy"], "is-hidden": None}
    )
    assert str(builder) == "pre-unique no-scroll pre-unique--inverse"


def test_map_classes_skips_non_string_keys():
    builder = ClassBuilder("x").map_classes({1: True, "ok": True})
    assert str(builder) == "x ok"


# ──────────────────────────────────────────────────────────────────────────────
# map_params
# ──────────────────────────────────────────────────────────────────────────────
def test_map_params_equals_concatenation_of_individual_effects():
    combined = ClassBuilder("x").map_params(
        "foo",
        ["bar", "baz"],
        {"block": "qux", "modifier": "m"},
        {"is-active": True, "@inv": True, "is-off": False},
    )
    manual = (
        ClassBuilder("x")
        .add_class("foo")
        .add_class(["bar", "baz"])
        .add_class({"block": "qux", "modifier": "m"})
        .map_classes({"is-active": True, "@inv": True, "is-off": False})
    )
    assert str(combined) == str(manual) == "x foo bar-baz qux--m is-active x--inv"


def test_map_params_ignores_unrecognized_types():
    builder = ClassBuilder("x").map_params(None, 3, True, object(), "y")
    assert str(builder) == "x y"


def test_map_params_accepts_bem_parts():
    builder = ClassBuilder("x", "p-").map_params(BemParts("drop", "menu"))
    assert str(builder) == "p-x p-drop-menu"


def test_map_params_record_with_falsy_block_is_a_class_map():
    builder = ClassBuilder("x").map_params({"block": "", "is-active": True})
    assert str(builder) == "x is-active"


def test_map_params_block_key_wins_over_class_map_reading():
    # A boolean map that contains a truthy "block" key is read as a BEM record.
    builder = ClassBuilder("x").map_params({"block": "panel", "is-active": True})
    assert str(builder) == "x panel"

    with pytest.raises(InvalidDescriptor):
        ClassBuilder("x").map_params({"block": True, "is-active": True})


# ──────────────────────────────────────────────────────────────────────────────
# to_string
# ──────────────────────────────────────────────────────────────────────────────
def test_to_string_is_idempotent():
    builder = ClassBuilder("x").add_modifier("a").map_classes({"b": True})
    first = builder.to_string()
    assert builder.to_string() == first
    assert str(builder) == first


def test_classes_snapshot_is_read_only_copy():
    builder = ClassBuilder("x")
    snapshot = builder.classes
    builder.add_class("y")
    assert snapshot == ("x",)
    assert builder.classes == ("x", "y")


def test_repr_shows_class_string():
    assert repr(ClassBuilder("x").add_class("y")) == "ClassBuilder('x y')"
