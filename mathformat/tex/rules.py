"""Building blocks of the rewrite pipeline.

A :class:`Substitution` is one global regex replacement. A :class:`RuleGroup`
bundles an ordered list of substitutions behind a trigger predicate that is
checked against the text as it stands when the group runs.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Callable, Tuple, Union

Replacement = Union[str, Callable[[re.Match], str]]


@dataclass(frozen=True)
class Substitution:
    pattern: re.Pattern[str]
    replacement: Replacement

    def apply(self, text: str) -> str:
        return self.pattern.sub(self.replacement, text)


def sub(pattern: Union[str, re.Pattern[str]], replacement: Replacement) -> Substitution:
    if isinstance(pattern, str):
        pattern = re.compile(pattern)
    return Substitution(pattern=pattern, replacement=replacement)


def literal(text: str) -> Callable[[re.Match], str]:
    """Replacement returning ``text`` as-is, backslashes included."""
    return lambda _m: text


@dataclass(frozen=True)
class RuleGroup:
    name: str
    trigger: Callable[[str], bool]
    substitutions: Tuple[Substitution, ...] = field(default_factory=tuple)

    def applies_to(self, text: str) -> bool:
        return bool(self.trigger(text))

    def apply(self, text: str) -> str:
        if not self.applies_to(text):
            return text
        for substitution in self.substitutions:
            text = substitution.apply(text)
        return text


def contains_all(*needles: str) -> Callable[[str], bool]:
    return lambda text: all(n in text for n in needles)


def contains_any(*needles: str) -> Callable[[str], bool]:
    return lambda text: any(n in text for n in needles)
