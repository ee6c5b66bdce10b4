"""Domain errors surfaced to play command and user lookup callers"""


class NowPlayingError(Exception):
    """Base class; `code` is the machine-readable error name."""
    code = "error"


class InvalidQuery(NowPlayingError):
    code = "invalid_query"


class NotFound(NowPlayingError):
    code = "not_found"


class ResolutionFailed(NowPlayingError):
    code = "resolution_failed"


class ResolutionTimeout(NowPlayingError):
    code = "resolution_timeout"


class PersistenceUnavailable(NowPlayingError):
    code = "persistence_unavailable"
