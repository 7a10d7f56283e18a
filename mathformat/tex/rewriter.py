from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Tuple

from loguru import logger

from mathformat.tex.equations import KNOWN_EQUATIONS
from mathformat.tex.greek import GREEK_LETTERS
from mathformat.tex.patterns import (
    FRACTION_RE,
    SUBSCRIPT_RE,
    SUPERSCRIPT_RE,
    greek_letter_pattern,
)
from mathformat.tex.rules import Substitution, sub


class Step(Protocol):
    def apply(self, text: str) -> str: ...


@dataclass(frozen=True)
class RewritePass:
    name: str
    steps: Tuple[Step, ...]

    def apply(self, text: str) -> str:
        for step in self.steps:
            text = step.apply(text)
        return text


def _greek_substitutions() -> Tuple[Substitution, ...]:
    return tuple(
        sub(greek_letter_pattern(name, glyph), "\\\\" + name)
        for name, glyph in GREEK_LETTERS.items()
    )


# Order matters: every pass sees the output of the one before it.
REWRITE_PASSES: Tuple[RewritePass, ...] = (
    RewritePass("subscripts", (sub(SUBSCRIPT_RE, r"\1_{\2}"),)),
    RewritePass("superscripts", (sub(SUPERSCRIPT_RE, r"\1^{\2}"),)),
    RewritePass("fractions", (sub(FRACTION_RE, r"\\frac{\1}{\2}"),)),
    RewritePass("greek", _greek_substitutions()),
    RewritePass("equations", tuple(eq.rules for eq in KNOWN_EQUATIONS)),
)


def rewrite_to_latex(text: str) -> str:
    """Rewrite informally typed maths into LaTeX-flavoured text.

    Best-effort: never raises, and returns the input unchanged when none of
    the passes finds anything to do. The result is not guaranteed to be valid
    LaTeX.
    """
    out = text or ""
    for rewrite_pass in REWRITE_PASSES:
        before = out
        out = rewrite_pass.apply(out)
        if out != before:
            logger.debug(f"Pass '{rewrite_pass.name}': {before!r} -> {out!r}")
    return out
