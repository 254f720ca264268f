# src/bem_classnames/naming/generate.py
"""
generate.

Does: Build the namespaced class-name map of a block and its elements.
Returns: generate_class_names() -> {"default": ns+block, element: ns+block-element, ...}.
Used by: BlockModule and any caller needing a per-render class lookup.
"""

from __future__ import annotations

from collections.abc import Iterable

from bem_classnames.bem import format_bem
from bem_classnames.utils.log import debug
from bem_classnames.utils.settings import get_namespace

__all__ = ["DEFAULT_KEY", "generate_class_names"]

DEFAULT_KEY = "default"


def generate_class_names(
    block_name: str,
    element_names: Iterable[str] = (),
    *,
    namespace: str | None = None,
) -> dict[str, str]:
    """
    Does: Map DEFAULT_KEY to the block class and each element name to its
          block-element class, all prefixed with the namespace. The
          configured namespace is read once per call unless one is passed.
    Returns: A fresh dict, in element order after the default entry.
    """
    if namespace is None:
        namespace = get_namespace()

    class_names = {DEFAULT_KEY: namespace + format_bem(block_name)}
    for element_name in element_names:
        class_names[element_name] = namespace + format_bem(block_name, element_name)

    debug(f"{block_name!r} -> {class_names}", topic="naming")
    return class_names
