"""
naming.
======

Does: Namespaced class-name maps and per-block formatting helpers.
Exports: generate_class_names, BlockModule, format_class, format_child_class,
         UnknownElement, suggest_elements
"""

from __future__ import annotations

from .generate import DEFAULT_KEY, generate_class_names
from .module import BlockModule, UnknownElement, format_child_class, format_class
from .suggest import suggest_elements

__all__ = [
    "DEFAULT_KEY",
    "generate_class_names",
    "BlockModule",
    "UnknownElement",
    "format_class",
    "format_child_class",
    "suggest_elements",
]
