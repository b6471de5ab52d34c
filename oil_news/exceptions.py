class FeedError(Exception):
    """Base class for failures scoped to a single feed source."""


class FetchError(FeedError):
    """Raised when a feed cannot be retrieved (transport error, timeout, non-200 status)."""


class DecodeError(FeedError):
    """Raised when a feed body cannot be decoded as RSS/XML."""
