import json
from pathlib import Path

import pytest

from statement_splitter.extraction.exceptions import InvalidPatternError
from statement_splitter.extraction.pattern_repository import PatternRepository
from statement_splitter.extraction.patterns import (
    DEFAULT_ACCOUNT_PATTERNS,
    DEFAULT_NAME_PATTERNS,
)


class TestLoad:
    def test_defaults_without_path(self) -> None:
        repo = PatternRepository()
        assert repo.patterns.account_patterns == list(DEFAULT_ACCOUNT_PATTERNS)
        assert repo.patterns.name_patterns == list(DEFAULT_NAME_PATTERNS)

    def test_defaults_when_file_missing(self, tmp_path: Path) -> None:
        repo = PatternRepository(tmp_path / "patterns.json")
        assert repo.patterns.account_patterns == list(DEFAULT_ACCOUNT_PATTERNS)

    def test_loads_saved_patterns(self, tmp_path: Path) -> None:
        path = tmp_path / "patterns.json"
        path.write_text(
            json.dumps({"account_patterns": [r"acct:(\d+)"], "name_patterns": [r"to:(\w+)"]})
        )

        repo = PatternRepository(path)

        assert repo.patterns.account_patterns == [r"acct:(\d+)"]
        assert repo.patterns.name_patterns == [r"to:(\w+)"]

    @pytest.mark.parametrize(
        "content",
        ["{broken", json.dumps({"account_patterns": []}), json.dumps(
            {"account_patterns": ["no group"], "name_patterns": []}
        )],
    )
    def test_unusable_file_falls_back_to_defaults(self, tmp_path: Path, content: str) -> None:
        path = tmp_path / "patterns.json"
        path.write_text(content)
        assert PatternRepository(path).patterns.account_patterns == list(DEFAULT_ACCOUNT_PATTERNS)


class TestEdit:
    def test_added_patterns_go_last_and_persist(self, tmp_path: Path) -> None:
        path = tmp_path / "patterns.json"
        repo = PatternRepository(path)

        repo.add_account_pattern(r"ref[:\s]+(XY\d+)")
        repo.add_name_pattern(r"attn[:\s]+(\w+ \w+)")

        reloaded = PatternRepository(path).patterns
        assert reloaded.account_patterns[-1] == r"ref[:\s]+(XY\d+)"
        assert reloaded.name_patterns[-1] == r"attn[:\s]+(\w+ \w+)"

    def test_invalid_pattern_is_rejected(self) -> None:
        repo = PatternRepository()
        with pytest.raises(InvalidPatternError):
            repo.add_account_pattern("no capture group")
        assert repo.patterns.account_patterns == list(DEFAULT_ACCOUNT_PATTERNS)

    def test_remove_by_index(self) -> None:
        repo = PatternRepository()
        repo.remove_account_pattern(0)
        repo.remove_name_pattern(0)
        assert repo.patterns.account_patterns == list(DEFAULT_ACCOUNT_PATTERNS[1:])
        assert repo.patterns.name_patterns == list(DEFAULT_NAME_PATTERNS[1:])

    def test_remove_out_of_range(self) -> None:
        with pytest.raises(IndexError):
            PatternRepository().remove_name_pattern(99)

    def test_reset_to_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "patterns.json"
        repo = PatternRepository(path)
        repo.remove_account_pattern(0)

        repo.reset_to_defaults()

        saved = json.loads(path.read_text())
        assert saved["account_patterns"] == list(DEFAULT_ACCOUNT_PATTERNS)
