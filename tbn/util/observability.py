"""Logfire setup and instrumentation helpers.

Services emit spans and events directly:

    with logfire.span("lifecycle_service.soft_delete", email=email):
        logfire.info("Account withdrawn", account_id=str(account.id))

Tokens and password hashes are scrubbed before anything leaves the process.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from tbn.config import Settings

SERVICE_NAME = "tbn-backend"
SERVICE_VERSION = "0.1.0"

# Attribute names Logfire must never export verbatim
SCRUB_PATTERNS = ["id_token", "password_hash", "bearer"]


def _send_to_logfire(settings: Settings) -> bool:
    """Explicit setting wins; otherwise send only when a token is present."""
    if settings.observability.send_to_logfire is not None:
        return settings.observability.send_to_logfire
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once per process, before the app is imported.

    Args:
        settings: Application settings
    """
    send = _send_to_logfire(settings)
    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=settings.git_sha
        if settings.git_sha != "unknown"
        else SERVICE_VERSION,
        environment=settings.environment,
        token=settings.observability.logfire_token,
        send_to_logfire=send,
        scrubbing=logfire.ScrubbingOptions(extra_patterns=SCRUB_PATTERNS),
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )
    logfire.info(
        "Logfire configured",
        environment=settings.environment,
        send_to_logfire=send,
    )


def _request_attributes(request, attributes: dict) -> dict:
    """Keep path parameters (region codes, emails) and drop request bodies."""
    mapped = {k: v for k, v in attributes.items() if k != "values"}
    path_params = getattr(request, "path_params", None)
    if path_params:
        mapped["path_params"] = dict(path_params)
    return mapped


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request handled by the API.

    Headers are not captured; Authorization carries bearer tokens.
    """
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace queries issued through the async engine."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)


def instrument_httpx() -> None:
    """Trace outbound requests to the TBN on-air page."""
    logfire.instrument_httpx()
