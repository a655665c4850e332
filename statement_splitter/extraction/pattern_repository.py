import json
from pathlib import Path

from statement_splitter.extraction.exceptions import PatternError
from statement_splitter.extraction.patterns import PatternRule, PatternSet
from statement_splitter.logging.logger import Log


class PatternRepository:
    """Loads and saves the configured pattern set as a JSON file.

    File layout: {"account_patterns": [...], "name_patterns": [...]}.
    Without a path the repository only keeps the set in memory.
    """

    def __init__(self, path: Path | None = None) -> None:
        self._path = path
        self._patterns = self._load()

    @property
    def patterns(self) -> PatternSet:
        return self._patterns

    def add_account_pattern(self, pattern: str) -> PatternSet:
        rule = PatternRule.compile(pattern)
        return self._save(
            PatternSet(self._patterns.account_rules + (rule,), self._patterns.name_rules)
        )

    def add_name_pattern(self, pattern: str) -> PatternSet:
        rule = PatternRule.compile(pattern)
        return self._save(
            PatternSet(self._patterns.account_rules, self._patterns.name_rules + (rule,))
        )

    def remove_account_pattern(self, index: int) -> PatternSet:
        rules = self._without(self._patterns.account_rules, index)
        return self._save(PatternSet(rules, self._patterns.name_rules))

    def remove_name_pattern(self, index: int) -> PatternSet:
        rules = self._without(self._patterns.name_rules, index)
        return self._save(PatternSet(self._patterns.account_rules, rules))

    def reset_to_defaults(self) -> PatternSet:
        return self._save(PatternSet.default())

    @staticmethod
    def _without(
        rules: tuple[PatternRule, ...], index: int
    ) -> tuple[PatternRule, ...]:
        if not 0 <= index < len(rules):
            raise IndexError(f"No pattern at index {index}")
        return rules[:index] + rules[index + 1 :]

    def _load(self) -> PatternSet:
        if self._path is None or not self._path.exists():
            return PatternSet.default()
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
            return PatternSet.from_patterns(
                data["account_patterns"], data["name_patterns"]
            )
        except (OSError, ValueError, KeyError, TypeError, PatternError) as exc:
            Log.error(f"Failed to load patterns from {self._path}, using defaults: {exc}")
            return PatternSet.default()

    def _save(self, patterns: PatternSet) -> PatternSet:
        self._patterns = patterns
        if self._path is not None:
            payload = {
                "account_patterns": patterns.account_patterns,
                "name_patterns": patterns.name_patterns,
            }
            try:
                self._path.parent.mkdir(parents=True, exist_ok=True)
                self._path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
            except OSError as exc:
                raise PatternError(f"Failed to save patterns: {exc}") from exc
        return patterns
