class PatternError(Exception):
    """Base exception for pattern configuration problems."""


class InvalidPatternError(PatternError):
    """Raised when a rule does not compile or has no capture group."""
