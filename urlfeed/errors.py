"""Exception types raised while turning a URL into a feed item."""


class UrlFeedError(Exception):
    """Base class for all fatal urlfeed errors."""


class FetchError(UrlFeedError):
    """The resource could not be retrieved."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"fetch error: {url}: {reason}")


class UnsupportedContentType(UrlFeedError):
    """The response declared a content type with no extractor."""

    def __init__(self, content_type: str, url: str | None = None):
        self.content_type = content_type
        self.url = url
        message = f"unsupported content type: {content_type or '<none>'}"
        if url:
            message += f" ({url})"
        super().__init__(message)


class ParseError(UrlFeedError):
    """The fetched document could not be parsed."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"parse error: {url}: {reason}")


class PersistenceError(UrlFeedError):
    """The feed file could not be read or written.

    ``operation`` is either ``"read"`` or ``"write"``.
    """

    def __init__(self, operation: str, path: str, reason: str):
        self.operation = operation
        self.path = path
        self.reason = reason
        super().__init__(f"failed to {operation} feed file {path}: {reason}")
