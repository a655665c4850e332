"""Ordered extraction rules and the bundled default rule set.

Rules are evaluated first-match-wins, so anchored, specific rules must come
before generic catch-alls in every list.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from statement_splitter.extraction.exceptions import InvalidPatternError

DEFAULT_ACCOUNT_PATTERNS: tuple[str, ...] = (
    r"account\s*nbr[:\s]+(FBNWSTX\d+)",
    r"account\s*nbr[:\s]+(DNWSTX\d+)",
    r"account\s*nbr[:\s]+(WNWSTX\d+)",
    r"account\s*nbr[:\s]+(SMNWSTX\d+)",
    r"account\s*nbr[:\s]+(SENWSTX\d+)",
    r"account\s*nbr[:\s]+(SVNWSTX\d+)",
    r"account\s*nbr[:\s]+(PPNWSTX\d+)",
    r"account\s*nbr[:\s]+(OHNWSTX\d+)",
    r"account\s*nbr[:\s]+(SUNWSTX\d+)",
    r"account\s*nbr[:\s]+([A-Z]{2,}\d+)",
)

DEFAULT_NAME_PATTERNS: tuple[str, ...] = (
    # joint names first: "Celia & Felipe Ramirez's"
    r"customer\s*name[:\s]+([A-Za-z]+\s*&\s*[A-Za-z]+\s+[A-Za-z]+'?s?)",
    r"customer\s*name[:\s]+([A-Za-z]+\s*&\s*[A-Za-z]+\s+[A-Za-z]+)",
    r"customer\s*name[:\s]+([A-Z][a-z]+\s+[A-Z][a-z]+)\s*(?:Account)?",
    r"customer\s*name[:\s]+([A-Z][a-z]+\s+[A-Z][a-z]+\s+[A-Z][a-z]+)\s*(?:Account)?",
    r"customer\s*name[:\s]+([A-Za-z]+\s+[A-Za-z]+(?:\s+[A-Za-z]+)?)",
    r"name[:\s]+([A-Za-z]+\s+[A-Za-z]+(?:\s+[A-Za-z]+)?)",
    r"account\s*holder[:\s]+([A-Za-z]+\s+[A-Za-z]+(?:\s+[A-Za-z]+)?)",
    r"bill\s*to[:\s]+([A-Za-z]+\s+[A-Za-z]+(?:\s+[A-Za-z]+)?)",
    r"([A-Z][a-z]+\s+[A-Z][a-z]+)(?=\s|$)",
)

_NAME_TOKEN = r"[A-Z][a-z]+\s+[A-Z][a-z]+"

# Evaluated case-sensitively; "{account}" is replaced by the escaped account id.
FALLBACK_NAME_TEMPLATES: tuple[str, ...] = (
    rf"({_NAME_TOKEN})\s*[:#-]?\s*{{account}}",
    rf"\b(?i:dear|to|for|customer|client|account\s*holder)\b\s*:?\s*({_NAME_TOKEN})",
    rf"({_NAME_TOKEN}(?:\s+[A-Z][a-z]+)?)",
)


@dataclass(frozen=True)
class PatternRule:
    """One compiled extraction rule; group 1 is the captured value."""

    pattern: str
    regex: re.Pattern[str]

    @classmethod
    def compile(cls, pattern: str, flags: int = re.IGNORECASE) -> PatternRule:
        try:
            regex = re.compile(pattern, flags)
        except re.error as exc:
            raise InvalidPatternError(f"Invalid pattern {pattern!r}: {exc}") from exc
        if regex.groups < 1:
            raise InvalidPatternError(f"Pattern {pattern!r} has no capture group")
        return cls(pattern=pattern, regex=regex)

    def capture(self, text: str) -> str:
        """Return the stripped group 1 of the first match, or ""."""
        match = self.regex.search(text)
        if match is None:
            return ""
        return (match.group(1) or "").strip()


def compile_rules(patterns: Iterable[str], flags: int = re.IGNORECASE) -> tuple[PatternRule, ...]:
    return tuple(PatternRule.compile(p, flags) for p in patterns)


def first_capture(rules: Sequence[PatternRule], text: str) -> str:
    """Evaluate *rules* in order and return the first non-empty capture."""
    for rule in rules:
        value = rule.capture(text)
        if value:
            return value
    return ""


@dataclass(frozen=True)
class PatternSet:
    """Account and name rule lists, as configured for one splitting run."""

    account_rules: tuple[PatternRule, ...]
    name_rules: tuple[PatternRule, ...]

    @classmethod
    def from_patterns(
        cls,
        account_patterns: Iterable[str],
        name_patterns: Iterable[str],
    ) -> PatternSet:
        return cls(
            account_rules=compile_rules(account_patterns),
            name_rules=compile_rules(name_patterns),
        )

    @classmethod
    def default(cls) -> PatternSet:
        return cls.from_patterns(DEFAULT_ACCOUNT_PATTERNS, DEFAULT_NAME_PATTERNS)

    @property
    def account_patterns(self) -> list[str]:
        return [rule.pattern for rule in self.account_rules]

    @property
    def name_patterns(self) -> list[str]:
        return [rule.pattern for rule in self.name_rules]
