"""Known physics equations with hand-written rewrites.

Each family carries two independent definitions:

- ``rules``: a trigger plus ordered substitutions, run by the rewriter on text
  that has already been through the structural and Greek passes.
- ``signature``: an ordered-chain regex the detector runs on the raw input.

The two disagree on purpose for the Einstein equation (three unordered
containments vs. a seven-token chain); see DESIGN.md before unifying them.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Tuple

from mathformat.tex.patterns import ordered_chain
from mathformat.tex.rules import RuleGroup, contains_all, contains_any, literal, sub


@dataclass(frozen=True)
class KnownEquation:
    name: str
    rules: RuleGroup
    signature: re.Pattern[str]

    def matches(self, raw: str) -> bool:
        return self.signature.search(raw) is not None


# The Greek pass has already turned a fused ``μν`` into ``\mu\nu``.
_MU_NU = r"(?:μν|\\mu\\nu)"


def _einstein_trigger(text: str) -> bool:
    return (
        "G" in text
        and ("μν" in text or "\\mu\\nu" in text)
        and "Λ" in text
    )


EINSTEIN = KnownEquation(
    name="einstein",
    rules=RuleGroup(
        name="einstein",
        trigger=_einstein_trigger,
        substitutions=(
            sub(r"G\s*_?\{?" + _MU_NU + r"\}?", literal(r"G_{\mu\nu}")),
            sub(r"Λ\s*g\s*_?\{?" + _MU_NU + r"\}?", literal(r"\Lambda g_{\mu\nu}")),
            sub(r"T\s*_?\{?" + _MU_NU + r"\}?", literal(r"T_{\mu\nu}")),
            # A standalone ``c``; leaves ``\frac`` and ``\vec`` alone.
            sub(r"(?<![A-Za-z\\])c(?:\s*\^\s*\{?4\}?)?(?![A-Za-z])", literal("c^{4}")),
            sub(r"8\s*(?:π|\\pi)\s*G", literal(r"8\pi G")),
        ),
    ),
    signature=ordered_chain("G", "μν", "Λ", "g", "μν", "T", "μν"),
)

SCHRODINGER = KnownEquation(
    name="schrodinger",
    rules=RuleGroup(
        name="schrodinger",
        trigger=contains_all("Ψ", "ħ"),
        substitutions=(
            sub(r"iħ", literal(r"i\hbar")),
            sub(r"∂Ψ/∂t", literal(r"\frac{\partial\Psi}{\partial t}")),
            sub(r"∇\^2", literal(r"\nabla^{2}")),
        ),
    ),
    signature=ordered_chain("[Ψψ]", "[ħh]", r"∇\^2"),
)


def _maxwell_trigger(text: str) -> bool:
    return "∇" in text and contains_any("E", "B")(text)


MAXWELL = KnownEquation(
    name="maxwell",
    rules=RuleGroup(
        name="maxwell",
        trigger=_maxwell_trigger,
        substitutions=(
            sub(r"∇\s*\.\s*E", literal(r"\nabla \cdot \vec{E}")),
            sub(r"∇\s*\.\s*B", literal(r"\nabla \cdot \vec{B}")),
            sub(r"∇\s*×\s*E", literal(r"\nabla \times \vec{E}")),
            sub(r"∇\s*×\s*B", literal(r"\nabla \times \vec{B}")),
        ),
    ),
    signature=ordered_chain("∇", "[EB]", "∇", "[EB]"),
)

# Rewrite order.
KNOWN_EQUATIONS: Tuple[KnownEquation, ...] = (EINSTEIN, SCHRODINGER, MAXWELL)
