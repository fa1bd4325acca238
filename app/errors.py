"""Errors raised while resolving public content."""


class ContentError(Exception):
    """Base class for content resolution errors."""


class ContentNotFound(ContentError):
    """No publishable content for the slug/locale pair.

    Unpublished content raises this too, so callers cannot tell the two apart.
    """

    def __init__(self, slug: str, locale: str):
        super().__init__(f"No content for slug={slug!r} locale={locale!r}")
        self.slug = slug
        self.locale = locale


class StorageFailure(ContentError):
    """The backing store failed while looking content up.

    The original exception is kept as ``__cause__``.
    """

    def __init__(self, operation: str):
        super().__init__(f"Storage lookup failed during {operation}")
        self.operation = operation
