from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Dict

from mathformat.tex.equations import EINSTEIN, MAXWELL, SCHRODINGER
from mathformat.tex.patterns import (
    FRACTION_RE,
    GREEK_GLYPH_RE,
    SUBSCRIPT_RE,
    SUPERSCRIPT_RE,
)


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


@dataclass(frozen=True)
class PatternFlags:
    """Structural patterns found in a raw input expression."""

    has_subscripts: bool = False
    has_superscripts: bool = False
    has_fractions: bool = False
    has_greek_letters: bool = False
    is_einstein_equation: bool = False
    is_schrodinger_equation: bool = False
    is_maxwell_equation: bool = False

    def to_dict(self) -> Dict[str, bool]:
        """camelCase keys, e.g. ``hasSubscripts``."""
        return {_camel(f.name): getattr(self, f.name) for f in fields(self)}

    @property
    def detected(self) -> list[str]:
        return [f.name for f in fields(self) if getattr(self, f.name)]


def detect_patterns(text: str) -> PatternFlags:
    """Report which patterns the *raw* input contains.

    Independent of :func:`~mathformat.tex.rewriter.rewrite_to_latex`; feed it
    the original text, not the rewritten one.
    """
    text = text or ""
    return PatternFlags(
        has_subscripts=SUBSCRIPT_RE.search(text) is not None,
        has_superscripts=SUPERSCRIPT_RE.search(text) is not None,
        has_fractions=FRACTION_RE.search(text) is not None,
        has_greek_letters=GREEK_GLYPH_RE.search(text) is not None,
        is_einstein_equation=EINSTEIN.matches(text),
        is_schrodinger_equation=SCHRODINGER.matches(text),
        is_maxwell_equation=MAXWELL.matches(text),
    )
