# bem_classnames/types.py
from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, TypedDict, Union

"""
types.py.

Does: Define the structural types accepted as class-name descriptors and maps.
"""


class BemRecord(TypedDict, total=False):
    block: str
    element: str
    modifier: str


# str | list/tuple of fragments | record (BemParts is accepted wherever a record is)
Descriptor = Union[str, Sequence[str], Mapping[str, Any]]

# Boolean-keyed map: class name (or "@modifier") -> include?
ClassMap = Mapping[str, Any]

__all__ = ["BemRecord", "Descriptor", "ClassMap"]

__docformat__ = "google"
