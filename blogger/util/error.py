"""Errors raised while setting up Blogger (configuration, observability, DI).

Storage and domain failures have their own hierarchies in
`blogger.persistence.error` and `blogger.domain.error`.
"""


class UtilError(Exception):
    """Base error for application setup."""

    pass


class ConfigurationError(UtilError):
    """Raised when settings are inconsistent, e.g. Logfire sending without a token."""

    def __init__(self, message: str, setting: str | None = None):
        self.setting = setting
        super().__init__(message)


class DependencyInjectionError(UtilError):
    """Raised when no provider implementation exists for a component."""

    pass
