"""
bem_classnames
==============

Does: Root package initializer for the BEM class-name synthesis library.
Returns: Re-exports the formatter, ClassBuilder, class-name map helpers,
         namespace settings and error types.
Used by: All imports starting from `bem_classnames.*`.
"""

from __future__ import annotations

from .bem import (
    BemParts,
    ClassNameError,
    DescriptorKind,
    InvalidDescriptor,
    format_bem,
    resolve_descriptor,
)
from .builder import ClassBuilder, MissingPrimaryClass
from .naming import (
    BlockModule,
    UnknownElement,
    format_child_class,
    format_class,
    generate_class_names,
)
from .utils import get_namespace, temp_namespace

__all__: list[str] = [
    "format_bem",
    "resolve_descriptor",
    "BemParts",
    "DescriptorKind",
    "ClassBuilder",
    "generate_class_names",
    "BlockModule",
    "format_class",
    "format_child_class",
    "get_namespace",
    "temp_namespace",
    "ClassNameError",
    "InvalidDescriptor",
    "MissingPrimaryClass",
    "UnknownElement",
]
__docformat__ = "google"
