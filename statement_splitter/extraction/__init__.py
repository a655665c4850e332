from statement_splitter.extraction.matcher import PageIdentity, PatternCascadeMatcher
from statement_splitter.extraction.pattern_repository import PatternRepository
from statement_splitter.extraction.patterns import PatternRule, PatternSet

__all__ = [
    "PageIdentity",
    "PatternCascadeMatcher",
    "PatternRepository",
    "PatternRule",
    "PatternSet",
]
