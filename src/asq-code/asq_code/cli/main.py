"""CLI entrypoint for asq-code — typer app for inspecting logs and configs."""

import asyncio
import json
import sys
from pathlib import Path

import structlog
import typer

from asq_code.config.domain.config import PluginConfig
from asq_code.config.infrastructure.observer import StructlogConfigObserver
from asq_code.config.infrastructure.yaml_loader import YamlConfigLoader
from asq_code.core.errors import AsqCodeError
from asq_code.notification.domain.notifier import Payload
from asq_code.progress.application.live_progress import LiveProgressAggregator
from asq_code.progress.domain.events import QuestionProgress
from asq_code.progress.infrastructure.observer import StructlogProgressObserver
from asq_code.submission.infrastructure.jsonl_loader import load_submission_records
from asq_code.submission.infrastructure.memory_log import InMemorySubmissionLog

app = typer.Typer(add_completion=False)


def _configure_structlog(log_format: str) -> None:
    """Configure structlog based on the requested format."""
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.")
        raise typer.Exit(code=1)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(0),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


class _DiscardingNotifier:
    """Notifier for offline aggregation: there are no connections to push to."""

    def emit_to_role(
        self, event_name: str, payload: Payload, session_id: str, role: str
    ) -> None:
        pass

    def emit_to_connection(
        self, event_name: str, payload: Payload, connection_id: str
    ) -> None:
        pass


async def _compute_progress(
    log_path: Path, session_id: str, question_uid: str, config: PluginConfig
) -> QuestionProgress:
    submission_log = InMemorySubmissionLog()
    for record in load_submission_records(path=log_path):
        await submission_log.append(record)

    aggregator = LiveProgressAggregator(
        config=config,
        submission_log=submission_log,
        notifier=_DiscardingNotifier(),
        observer=StructlogProgressObserver(),
    )
    return await aggregator.compute(session_id=session_id, question_uid=question_uid)


def _load_config(config_path: Path | None) -> PluginConfig:
    if config_path is None:
        return PluginConfig()
    return YamlConfigLoader(observer=StructlogConfigObserver()).load(path=config_path)


@app.command()
def progress(
    log_path: Path = typer.Argument(..., help="Path to a JSONL file of submissions"),
    session_id: str = typer.Option(..., "--session", help="Session identifier"),
    question_uid: str = typer.Option(..., "--question", help="Question uid"),
    config_path: Path | None = typer.Option(
        None, "--config", "-c", help="Path to plugin config YAML"
    ),
    log_format: str = typer.Option(
        "console",
        "--log-format",
        help="Log format: 'console' or 'json'",
    ),
) -> None:
    """Print each learner's latest submission for one question of one session."""
    _configure_structlog(log_format=log_format)
    try:
        config = _load_config(config_path=config_path)
        result = asyncio.run(
            _compute_progress(
                log_path=log_path,
                session_id=session_id,
                question_uid=question_uid,
                config=config,
            )
        )
    except AsqCodeError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc

    typer.echo(json.dumps(result.to_payload(), indent=2))


@app.command("check-config")
def check_config(
    config_path: Path = typer.Argument(..., help="Path to plugin config YAML"),
    log_format: str = typer.Option(
        "console",
        "--log-format",
        help="Log format: 'console' or 'json'",
    ),
) -> None:
    """Validate a plugin config file and print the resolved settings."""
    _configure_structlog(log_format=log_format)
    try:
        config = _load_config(config_path=config_path)
    except AsqCodeError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc

    typer.echo(json.dumps(config.model_dump(), indent=2))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
