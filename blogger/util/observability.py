"""Observability configuration using Logfire.

Tables and the store emit spans and structured events directly:

    import logfire

    with logfire.span("table.save", kind="posts"):
        logfire.info("Table saved", kind="posts", written=3)
"""

import logfire

from blogger import __version__
from blogger.config import Settings
from blogger.util.error import ConfigurationError


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for observability.

    Token Configuration:
    - Set OBSERVABILITY__LOGFIRE_TOKEN environment variable to enable cloud sending
    - Can be explicitly controlled with OBSERVABILITY__SEND_TO_LOGFIRE

    Args:
        settings: Application settings

    Raises:
        ConfigurationError: If sending is forced on without a token
    """
    # Priority: explicit setting > token presence > default (False)
    if settings.observability.send_to_logfire is not None:
        send_to_logfire = settings.observability.send_to_logfire
    else:
        send_to_logfire = bool(settings.observability.logfire_token)

    if send_to_logfire and not settings.observability.logfire_token:
        raise ConfigurationError(
            "OBSERVABILITY__SEND_TO_LOGFIRE is set but no Logfire token is configured",
            setting="observability.send_to_logfire",
        )

    config_kwargs = {
        "service_name": "blogger",
        "service_version": __version__,
        "environment": settings.environment,
        "send_to_logfire": send_to_logfire,
        "console": logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    }

    if settings.observability.logfire_token:
        config_kwargs["token"] = settings.observability.logfire_token

    logfire.configure(**config_kwargs)

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        debug=settings.debug,
        send_to_logfire=send_to_logfire,
    )
