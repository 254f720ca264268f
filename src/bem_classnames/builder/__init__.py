"""
builder.
=======

Does: Expose the chainable ClassBuilder accumulator.
"""

from __future__ import annotations

from .class_builder import MODIFIER_SIGIL, ClassBuilder, MissingPrimaryClass

__all__ = ["ClassBuilder", "MissingPrimaryClass", "MODIFIER_SIGIL"]
