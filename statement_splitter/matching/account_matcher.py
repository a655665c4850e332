from collections.abc import Iterable

from statement_splitter.logging.logger import Log
from statement_splitter.matching.models import (
    ContactRecord,
    MatchedPair,
    MatchResult,
    UnmatchedArtifact,
)
from statement_splitter.splitter.models import Artifact


def normalize_account_id(account_id: str) -> str:
    return account_id.strip().casefold()


class AccountMatcher:
    """Joins artifacts to contacts by case-insensitive account id.

    Stateless: the result depends only on the arguments, so repeated calls
    with the same inputs give the same partition.
    """

    def match(
        self,
        artifacts: Iterable[Artifact],
        contacts: Iterable[ContactRecord],
    ) -> MatchResult:
        directory: dict[str, ContactRecord] = {}
        duplicates: list[str] = []
        for contact in contacts:
            key = normalize_account_id(contact.account_id)
            if key in directory and key not in duplicates:
                duplicates.append(key)
            # Last record wins for duplicate account ids.
            directory[key] = contact

        if duplicates:
            Log.warning(
                f"{len(duplicates)} account ids appear more than once in the contact "
                f"list; using the last entry for: {', '.join(duplicates)}"
            )

        matched: list[MatchedPair] = []
        unmatched: list[UnmatchedArtifact] = []
        for artifact in artifacts:
            contact = directory.get(normalize_account_id(artifact.account_id))
            if contact is not None:
                matched.append(MatchedPair(artifact=artifact, contact=contact))
            else:
                placeholder = ContactRecord(
                    account_id=artifact.account_id,
                    email="",
                    customer_name=artifact.customer_name,
                )
                unmatched.append(UnmatchedArtifact(artifact=artifact, contact=placeholder))

        result = MatchResult(
            matched=matched, unmatched=unmatched, duplicate_account_ids=duplicates
        )
        stats = result.stats
        Log.info(f"Matched {stats.matched_count} of {stats.total} files with contact data")
        return result
