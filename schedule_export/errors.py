"""Error hierarchy for schedule exports.

Nothing here is retried: every export is a single linear pipeline and any
failure aborts it before a file is produced.
"""


class ExportError(Exception):
    """Base exception for all export errors."""

    pass


class TemplateUnavailable(ExportError):
    """The template resource could not be retrieved.

    Examples: missing file, unreadable path, connection error, non-2xx response.
    """

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Template unavailable: {source} ({reason})")


class TemplateMalformed(ExportError):
    """The template decoded, but it has no first worksheet to fill."""

    def __init__(self, reason: str = "template worksheet not found"):
        self.reason = reason
        super().__init__(f"Template malformed: {reason}")


class DataValidationError(Exception):
    """Raised when schedule data does not have the expected shape."""

    pass
