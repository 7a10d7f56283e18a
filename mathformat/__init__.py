"""Informal maths notation to LaTeX, MathML and Word documents."""

from mathformat.converter import ConversionResult, convert
from mathformat.tex.detector import PatternFlags, detect_patterns
from mathformat.tex.rewriter import rewrite_to_latex

__all__ = [
    "ConversionResult",
    "PatternFlags",
    "convert",
    "detect_patterns",
    "rewrite_to_latex",
]

__version__ = "0.1.0"
