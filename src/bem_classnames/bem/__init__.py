"""
bem.
===

Does: Expose the pure BEM formatter and its descriptor types.
"""

from __future__ import annotations

from .format import (
    ELEMENT_SEPARATOR,
    MODIFIER_SEPARATOR,
    BemParts,
    ClassNameError,
    DescriptorKind,
    InvalidDescriptor,
    format_bem,
    resolve_descriptor,
)

__all__ = [
    "format_bem",
    "resolve_descriptor",
    "BemParts",
    "DescriptorKind",
    "ClassNameError",
    "InvalidDescriptor",
    "ELEMENT_SEPARATOR",
    "MODIFIER_SEPARATOR",
]
