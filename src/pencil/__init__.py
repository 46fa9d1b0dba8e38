"""Pencil durability model.

A :class:`Pencil` writes text under a point durability budget, can be
sharpened a limited number of times, erases the last occurrence of a word and
edits new text into erased space.  The command line interface lives in
:mod:`pencil.cli`.
"""

from .model import Pencil, PencilState, write_cost

__version__ = "0.1.0"

__all__ = ["Pencil", "PencilState", "write_cost", "__version__"]
