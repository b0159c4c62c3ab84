"""Errors raised while resolving AppConfig environment identifiers."""


class MalformedIdentifierError(ValueError):
    """Raised when an environment ARN does not match
    ``application/<applicationId>/environment/<environmentId>``."""

    def __init__(self, message: str, arn: str | None = None):
        super().__init__(message)
        self.arn = arn
