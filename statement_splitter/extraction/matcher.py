import re
from collections.abc import Sequence
from dataclasses import dataclass

from statement_splitter.extraction.patterns import (
    FALLBACK_NAME_TEMPLATES,
    PatternRule,
    first_capture,
)
from statement_splitter.logging.logger import Log


@dataclass(frozen=True)
class PageIdentity:
    """Account id and customer name captured from one page."""

    account_id: str
    customer_name: str
    used_fallback: bool = False

    @property
    def missing_fields(self) -> list[str]:
        missing: list[str] = []
        if not self.account_id:
            missing.append("account number")
        if not self.customer_name:
            missing.append("customer name")
        return missing

    @property
    def is_complete(self) -> bool:
        return not self.missing_fields


class PatternCascadeMatcher:
    """Resolves account id and customer name from page text.

    Both fields are resolved independently with first-match-wins over their
    rule lists. When an account id is found without a name, the fallback
    heuristics in FALLBACK_NAME_TEMPLATES are tried in order.
    """

    def __init__(
        self,
        account_rules: Sequence[PatternRule],
        name_rules: Sequence[PatternRule],
        fallback_templates: Sequence[str] = FALLBACK_NAME_TEMPLATES,
    ) -> None:
        self._account_rules = tuple(account_rules)
        self._name_rules = tuple(name_rules)
        self._fallback_templates = tuple(fallback_templates)

    def match(self, text: str) -> PageIdentity:
        account_id = first_capture(self._account_rules, text)
        customer_name = first_capture(self._name_rules, text)

        if account_id and not customer_name:
            customer_name = self._fallback_name(text, account_id)
            if customer_name:
                return PageIdentity(account_id, customer_name, used_fallback=True)

        return PageIdentity(account_id, customer_name)

    def _fallback_name(self, text: str, account_id: str) -> str:
        escaped = re.escape(account_id)
        for template in self._fallback_templates:
            # Case-sensitive on purpose: the heuristics look for capitalized words.
            rule = PatternRule.compile(template.replace("{account}", escaped), flags=0)
            value = rule.capture(text)
            if value:
                Log.debug(f"Fallback name rule {template!r} matched: {value}")
                return value
        return ""
