# src/bem_classnames/naming/module.py
"""
module.

Does: Format a component's root and child class strings from its class-name
      map, e.g. format_child_class(names, "header", {"is-active": active}).
Returns: format_class(), format_child_class(), BlockModule, UnknownElement.
Used by: Rendering code that owns a block (accordion, drop menu, ...).
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from bem_classnames.builder import ClassBuilder

from .generate import DEFAULT_KEY, generate_class_names
from .suggest import suggest_elements

__all__ = ["UnknownElement", "format_class", "format_child_class", "BlockModule"]


class UnknownElement(KeyError):
    """Raise when a child class is requested for an element missing from the map."""

    def __init__(self, element: str, suggestions: list[str]):
        self.element = element
        self.suggestions = suggestions
        hint = f" (did you mean: {', '.join(suggestions)}?)" if suggestions else ""
        super().__init__(f"Unknown element {element!r}{hint}")

    def __str__(self) -> str:
        return str(self.args[0])


def format_class(class_names: Mapping[str, str], *params: Any) -> str:
    """Build the block's root class string: default class + mapped params."""
    return ClassBuilder(class_names[DEFAULT_KEY]).map_params(*params).to_string()


def format_child_class(class_names: Mapping[str, str], element: str, *params: Any) -> str:
    """Build an element's class string with the element class as primary."""
    if element not in class_names:
        candidates = [k for k in class_names if k != DEFAULT_KEY]
        raise UnknownElement(element, suggest_elements(element, candidates))
    return ClassBuilder(class_names[element]).map_params(*params).to_string()


@dataclass(frozen=True)
class BlockModule:
    """A block and the element names its markup uses."""

    block: str
    elements: tuple[str, ...] = ()

    def class_names(self, namespace: str | None = None) -> dict[str, str]:
        return generate_class_names(self.block, self.elements, namespace=namespace)

    def format_class(self, *params: Any, namespace: str | None = None) -> str:
        return format_class(self.class_names(namespace), *params)

    def format_child_class(self, element: str, *params: Any, namespace: str | None = None) -> str:
        return format_child_class(self.class_names(namespace), element, *params)
