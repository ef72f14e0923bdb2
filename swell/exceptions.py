"""
Error taxonomy for the reward engine.

AICODE-NOTE: Only ValidationError reaches a caller (as a rejected scoring
request). Scorer errors are always recovered inside the reward pipeline.
A repeated claim is not an error at all, see ClaimStatus.DUPLICATE.
"""


class SwellError(Exception):
    """Base class for all engine errors."""


class ValidationError(SwellError):
    """A scoring request is missing required data (mission text)."""


class ScorerError(SwellError):
    """The remote scorer did not produce a usable score."""


class ScorerUnavailable(ScorerError):
    """Network failure, timeout or non-success status from the scorer."""

    def __init__(self, message: str, status: int | None = None):
        super().__init__(message)
        self.status = status


class MalformedScorerResponse(ScorerError):
    """The scorer replied, but the body is not a valid {xp, note} object."""

    def __init__(self, message: str, raw: str = ""):
        super().__init__(message)
        self.raw = raw
