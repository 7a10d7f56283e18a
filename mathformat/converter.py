from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict

from loguru import logger

from mathformat.render.mathml import latex_to_mathml
from mathformat.tex.detector import PatternFlags, detect_patterns
from mathformat.tex.rewriter import rewrite_to_latex


@dataclass(frozen=True)
class ConversionResult:
    """Everything derived from one input expression."""

    input: str
    latex: str = ""
    mathml: str = ""
    patterns: PatternFlags = field(default_factory=PatternFlags)

    @property
    def is_empty(self) -> bool:
        return not self.latex

    def to_dict(self) -> Dict[str, Any]:
        return {
            "input": self.input,
            "latex": self.latex,
            "mathml": self.mathml,
            "patterns": self.patterns.to_dict(),
        }


def convert(text: str) -> ConversionResult:
    """Rewrite ``text`` to LaTeX, render MathML and detect patterns.

    Empty input yields empty LaTeX and MathML.
    """
    text = text or ""
    latex = rewrite_to_latex(text) if text else ""
    mathml = latex_to_mathml(latex) if latex else ""
    patterns = detect_patterns(text)

    if patterns.detected:
        logger.debug(f"Detected patterns: {', '.join(patterns.detected)}")
    return ConversionResult(input=text, latex=latex, mathml=mathml, patterns=patterns)
