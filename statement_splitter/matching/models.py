from dataclasses import dataclass, field

from statement_splitter.splitter.models import Artifact


@dataclass(frozen=True)
class ContactRecord:
    """A customer entry from the contact directory."""

    account_id: str
    email: str
    customer_name: str


@dataclass(frozen=True)
class MatchedPair:
    artifact: Artifact
    contact: ContactRecord


@dataclass(frozen=True)
class UnmatchedArtifact:
    """An artifact with no contact; `contact` is a placeholder with no email."""

    artifact: Artifact
    contact: ContactRecord


@dataclass(frozen=True)
class MatchStats:
    total: int
    matched_count: int
    unmatched_count: int


@dataclass(frozen=True)
class MatchResult:
    """Matched/unmatched partition of a set of artifacts."""

    matched: list[MatchedPair] = field(default_factory=list)
    unmatched: list[UnmatchedArtifact] = field(default_factory=list)
    duplicate_account_ids: list[str] = field(default_factory=list)

    @property
    def stats(self) -> MatchStats:
        return MatchStats(
            total=len(self.matched) + len(self.unmatched),
            matched_count=len(self.matched),
            unmatched_count=len(self.unmatched),
        )
