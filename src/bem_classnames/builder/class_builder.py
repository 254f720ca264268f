# src/bem_classnames/builder/class_builder.py
"""
class_builder.

Does: Accumulate BEM class names for one render pass and join them into a
      CSS-ready string.

      builder = ClassBuilder("unique", "pre-")     # pre-unique
      builder.add_class("foo", "element")          # foo-element (prefixed)
      builder.add_modifier("inverse")              # pre-unique--inverse
      builder.map_classes({"is-active": True, "@reverse": True})
      str(builder)

Returns: ClassBuilder, MissingPrimaryClass.
Used by: naming.module (format_class / format_child_class) and callers directly.

Builders are not thread-safe; confine each instance to a single render pass.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from bem_classnames.bem import BemParts, ClassNameError, format_bem, resolve_descriptor
from bem_classnames.types import ClassMap
from bem_classnames.utils.log import debug

__all__ = ["ClassBuilder", "MissingPrimaryClass", "MODIFIER_SIGIL"]

__docformat__ = "google"

log = logging.getLogger(__name__)

MODIFIER_SIGIL = "@"


class MissingPrimaryClass(ClassNameError):
    """Raise when a builder is created without a usable primary class name."""


class ClassBuilder:
    """Ordered, append-only list of class names derived from a primary class."""

    def __init__(self, primary_class: Any, prefix: str = "") -> None:
        if not primary_class:
            raise MissingPrimaryClass(f"`{type(self).__name__}` requires a primary class name.")
        _, parts = resolve_descriptor(primary_class)
        if not parts.block:
            raise MissingPrimaryClass(f"`{type(self).__name__}` requires a primary class name.")

        self._prefix = prefix
        self._classes: list[str] = []

        self.add_class(parts)
        self._primary_class = self._classes[0]
        debug(f"primary={self._primary_class!r}", topic="builder")

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def primary_class(self) -> str:
        return self._primary_class

    @property
    def classes(self) -> tuple[str, ...]:
        return tuple(self._classes)

    def add_class(
        self,
        block: Any,
        element: str = "",
        modifier: str = "",
        apply_prefix: bool = True,
    ) -> ClassBuilder:
        """Add a secondary BEM class; the builder prefix applies unless `apply_prefix` is False."""
        class_name = format_bem(block, element, modifier)
        self._classes.append((self._prefix if apply_prefix else "") + class_name)
        return self

    def add_modifier(self, modifier: str) -> ClassBuilder:
        """Add `<primary>--<modifier>`. The primary class already carries the prefix."""
        return self.add_class(self._primary_class, "", modifier, apply_prefix=False)

    def map_classes(self, class_map: ClassMap) -> ClassBuilder:
        """
        Does: Append every key whose value is truthy, in insertion order.
              "@name" keys become modifiers of the primary class; other keys
              are appended literally (no BEM formatting, no prefix).
        """
        for key, enabled in class_map.items():
            if not enabled or not isinstance(key, str):
                continue
            if key.startswith(MODIFIER_SIGIL):
                self.add_modifier(key[len(MODIFIER_SIGIL):])
            else:
                self._classes.append(key)
        return self

    def map_params(self, *params: Any) -> ClassBuilder:
        """
        Does: Dispatch each param in order:
              - str, list or tuple          -> add_class
              - BemParts / mapping with a truthy "block" -> add_class
              - any other mapping           -> map_classes
              - anything else               -> ignored

        A boolean map that happens to contain a truthy "block" key is read as
        a BEM record, not as a map.
        """
        for param in params:
            if isinstance(param, (str, list, tuple, BemParts)):
                self.add_class(param)
            elif isinstance(param, Mapping):
                if param.get("block"):
                    self.add_class(param)
                else:
                    self.map_classes(param)
            else:
                log.debug("Ignoring class param of type %s", type(param).__name__)
        return self

    def to_string(self) -> str:
        return " ".join(self._classes).strip()

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_string()!r})"
