"""Observability configuration using Logfire.

Resolution stages run inside spans and report their outcome as structured
log records:

    with logfire.span("git_user_resolver.find_by_label", login=login):
        logfire.info("Linked git account", user=user.name, login=login)
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from gitusers.config import ObservabilitySettings, Settings


def _send_to_logfire(observability: ObservabilitySettings) -> bool:
    # Explicit setting wins, otherwise send only when a token is configured
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the service.

    Console output is always enabled. Records are also sent to Logfire cloud
    when OBSERVABILITY__LOGFIRE_TOKEN is set, unless
    OBSERVABILITY__SEND_TO_LOGFIRE=false.

    Args:
        settings: Application settings
    """
    observability = settings.observability
    send = _send_to_logfire(observability)

    logfire.configure(
        service_name="gitusers",
        service_version="0.1.0",
        environment=settings.environment,
        send_to_logfire=send,
        token=observability.logfire_token,
        # Never export the git provider token with request attributes
        scrubbing=logfire.ScrubbingOptions(extra_patterns=["token"]),
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        namespace=settings.identity.namespace,
        git_provider=settings.git_provider.kind,
        send_to_logfire=send,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace incoming API requests."""
    logfire.instrument_fastapi(app, capture_headers=False)


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace identity store queries.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)


def instrument_httpx() -> None:
    """Trace git provider API calls."""
    logfire.instrument_httpx()
