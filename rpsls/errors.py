from __future__ import annotations


class InvalidHandSetError(ValueError):
    """Accepted hands cannot form a balanced rule table."""


class ScoreTrackingDisabledError(RuntimeError):
    pass
