"""Logfire setup.

Services, use cases and stores log through the `logfire` module directly:

    with logfire.span("question_service.delete_question", question_id=...):
        logfire.info("Question deleted", question_id=str(question_id))

Nothing leaves the process unless a token is configured or sending is
switched on explicitly.
"""

import logfire
from fastapi import FastAPI

from icebreaker.config import ObservabilitySettings, Settings

SERVICE_NAME = "icebreaker-api"
SERVICE_VERSION = "0.1.0"


def should_send_to_logfire(observability: ObservabilitySettings) -> bool:
    """Decide whether telemetry goes to Logfire cloud.

    OBSERVABILITY__SEND_TO_LOGFIRE wins when set; otherwise sending follows
    the presence of OBSERVABILITY__LOGFIRE_TOKEN.
    """
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire console output and, optionally, cloud export.

    Args:
        settings: Application settings
    """
    observability = settings.observability
    send = should_send_to_logfire(observability)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=SERVICE_VERSION,
        environment=settings.environment,
        send_to_logfire=send,
        token=observability.logfire_token or None,
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
        storage_path=str(settings.storage.path),
        send_to_logfire=send,
    )


def _request_attributes(request, attributes: dict) -> dict:
    # Request path only; bodies may carry user content
    mapped = dict(attributes)
    mapped["method"] = getattr(request, "method", None)
    url = getattr(request, "url", None)
    if url is not None:
        mapped["path"] = url.path
    return mapped


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request handled by `app`."""
    logfire.instrument_fastapi(app, request_attributes_mapper=_request_attributes)
