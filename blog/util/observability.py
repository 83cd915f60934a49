"""Logfire setup.

Application code logs through ``logfire`` directly:

    logfire.info("Comment created", comment_id=comment.id, article_id=article_id)

    with logfire.span("comment_command_service.delete_comment", comment_id=comment_id):
        ...

This module only decides where those records go and which libraries get
automatic spans.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from blog.config import ObservabilitySettings, Settings

SERVICE_NAME = "blog-comments"


def should_send(observability: ObservabilitySettings) -> bool:
    """Whether records leave the process.

    An explicit ``send_to_logfire`` wins; otherwise a configured token
    enables sending.
    """
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return observability.logfire_token is not None


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once per process, before the app is built.

    Args:
        settings: Application settings
    """
    send_to_logfire = should_send(settings.observability)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=settings.git_sha,
        environment=settings.environment,
        token=settings.observability.logfire_token,
        send_to_logfire=send_to_logfire,
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
        send_to_logfire=send_to_logfire,
        git_sha=settings.git_sha,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request handled by ``app``.

    Request headers are not captured since they carry bearer tokens.
    """
    logfire.instrument_fastapi(app, capture_headers=False)
    logfire.info("FastAPI instrumented", title=app.title)


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace every statement run on ``engine``.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(
        engine=engine.sync_engine,
        enable_commenter=True,  # Add SQL comments with span context
    )
    logfire.info("SQLAlchemy instrumented", dialect=engine.dialect.name)
