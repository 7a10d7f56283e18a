"""Structural patterns shared by the rewriter and the detector.

Each shape is compiled once here so that what the detector reports always
matches what the rewriter acts on.
"""
from __future__ import annotations

import re

# One Latin letter, then ``_`` and an alphanumeric run: ``x_1``, ``T_ab``.
SUBSCRIPT_RE = re.compile(r"([A-Za-z])_([A-Za-z0-9]+)")

# An alphanumeric base, then ``^`` and an alphanumeric run: ``x^2``.
SUPERSCRIPT_RE = re.compile(r"([A-Za-z0-9])\^([A-Za-z0-9]+)")

# Slash between two alphanumeric runs. Cannot tell a fraction from a unit
# slash or a date.
FRACTION_RE = re.compile(r"([A-Za-z0-9]+)/([A-Za-z0-9]+)")

# Lowercase and uppercase Greek blocks.
GREEK_GLYPH_RE = re.compile(r"[α-ωΑ-Ω]")


def greek_letter_pattern(name: str, glyph: str) -> re.Pattern[str]:
    """Whole-word ``name`` in any case, or the exact ``glyph`` anywhere.

    A name already written as a command (``\\alpha``) is left alone.
    """
    return re.compile(rf"(?<!\\)\b(?i:{re.escape(name)})\b|{re.escape(glyph)}")


def ordered_chain(*tokens: str) -> re.Pattern[str]:
    """Match when every token appears, in this left-to-right order.

    Tokens are regex fragments; anything except a newline may sit between
    them.
    """
    return re.compile(".*?".join(tokens))
