"""Error taxonomy for menu planning runs."""


class MenuPlannerError(Exception):
    """Base class for every error that aborts a planning run."""


class SchemaValidationError(MenuPlannerError):
    """Model output did not match the required shape."""

    def __init__(self, path: str, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path
        self.message = message


class MissingVariableError(MenuPlannerError):
    """A template token has no matching variable."""

    def __init__(self, token: str) -> None:
        super().__init__(f"Missing template variable: {token}")
        self.token = token


class CompletionError(MenuPlannerError):
    """The completion provider call failed."""


class AuthError(CompletionError):
    """Credentials are missing or were rejected by the provider."""


class RateLimitedError(CompletionError):
    """The provider rejected the request with a rate limit."""


class CompletionTimeoutError(CompletionError):
    """The provider did not answer in time."""


class ProviderError(CompletionError):
    """Any other provider failure."""

    def __init__(self, message: str, *, retryable: bool = False) -> None:
        super().__init__(message)
        self.retryable = retryable
