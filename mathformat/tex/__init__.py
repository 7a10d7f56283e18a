"""Regex-based rewriting and pattern detection for informally typed maths.

This package provides small, best-effort helpers that turn what a user types
(``x_1``, ``a/b``, ``alpha``, ``G_μν``) into LaTeX-flavoured text, plus a
detector reporting which structural patterns the raw input contains.
"""
