# src/bem_classnames/bem/format.py
from __future__ import annotations

"""
bem.format

Does: Resolve a class-name descriptor (string | fragment sequence | record)
      into its block/element/modifier parts and join them the BEM way:
      block, block-element, block--modifier, block-element--modifier.
Returns: resolve_descriptor(), format_bem(), BemParts, DescriptorKind.
Used by: ClassBuilder and the class-name map generator.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from bem_classnames.types import Descriptor

__all__ = [
    "ClassNameError",
    "InvalidDescriptor",
    "DescriptorKind",
    "BemParts",
    "resolve_descriptor",
    "format_bem",
    "ELEMENT_SEPARATOR",
    "MODIFIER_SEPARATOR",
]

__docformat__ = "google"

ELEMENT_SEPARATOR = "-"
MODIFIER_SEPARATOR = "--"


# ── Errors ───────────────────────────────────────────────────────────────────
class ClassNameError(ValueError):
    """Base error for class-name synthesis."""


class InvalidDescriptor(ClassNameError):
    """Raise when a block descriptor cannot be resolved to a non-empty name."""


# ── Descriptor union ─────────────────────────────────────────────────────────
class DescriptorKind(Enum):
    STRING = "string"
    SEQUENCE = "sequence"
    RECORD = "record"


@dataclass(frozen=True)
class BemParts:
    """Resolved block/element/modifier triple. Also accepted as a record descriptor."""

    block: str
    element: str = ""
    modifier: str = ""

    def __str__(self) -> str:
        return format_bem(self)


def _field(record: Mapping[str, Any], name: str) -> str:
    value = record.get(name)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise InvalidDescriptor(f"BEM record field '{name}' must be a string, got {type(value).__name__}")
    return value


def resolve_descriptor(descriptor: Descriptor | BemParts | Any) -> tuple[DescriptorKind, BemParts]:
    """
    Does: Classify `descriptor` and extract its parts. An empty block is
          returned as-is; callers decide whether emptiness is an error.
    Returns: (kind, parts).
    Raises: InvalidDescriptor for unsupported shapes or non-string fields.
    """
    if isinstance(descriptor, str):
        return DescriptorKind.STRING, BemParts(descriptor)

    if isinstance(descriptor, BemParts):
        return DescriptorKind.RECORD, descriptor

    if isinstance(descriptor, Mapping):
        return DescriptorKind.RECORD, BemParts(
            _field(descriptor, "block"),
            _field(descriptor, "element"),
            _field(descriptor, "modifier"),
        )

    if isinstance(descriptor, (list, tuple)):
        bad = [type(f).__name__ for f in descriptor if not isinstance(f, str)]
        if bad:
            raise InvalidDescriptor(f"Block fragments must be strings (got {', '.join(bad[:3])})")
        return DescriptorKind.SEQUENCE, BemParts(ELEMENT_SEPARATOR.join(descriptor))

    raise InvalidDescriptor(f"Unsupported block descriptor type: {type(descriptor).__name__}")


def format_bem(block: Descriptor | BemParts, element: str = "", modifier: str = "") -> str:
    """
    Does: Build one BEM class name. Record fields fill in element/modifier
          only when the matching positional argument is empty.
    Returns: "block[-element][--modifier]".
    Raises: InvalidDescriptor when the resolved block is empty or unsupported.
    """
    _, parts = resolve_descriptor(block)
    if not parts.block:
        raise InvalidDescriptor("A BEM block name is required")

    element = element or parts.element
    modifier = modifier or parts.modifier

    class_name = parts.block
    if element:
        class_name += ELEMENT_SEPARATOR + element
    if modifier:
        class_name += MODIFIER_SEPARATOR + modifier
    return class_name
