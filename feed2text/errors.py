"""Error taxonomy for the feed2text service.

Every error is terminal for the request that raised it. ``status_code`` is the
HTTP status the boundary answers with.
"""


class Feed2TextError(Exception):
    """Base class for all service errors."""

    status_code = 500


class ValidationError(Feed2TextError):
    """Raised when a request parameter is missing or unparseable."""

    status_code = 400


class UpstreamFetchError(Feed2TextError):
    """Raised when the remote document cannot be fetched (network, status, timeout)."""


class ParseError(Feed2TextError):
    """Raised when the fetched document is malformed."""


class EmptyContentError(Feed2TextError):
    """Raised when HTML extraction produces no content."""
