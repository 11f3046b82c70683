from __future__ import annotations

import asyncio
import json
from typing import Annotated

import typer

from ragchat.app import build_orchestrator_from_env, run_server
from ragchat.config import DEFAULT_HOST, DEFAULT_PORT, ConfigurationError
from ragchat.schemas.chat import ChatMessage

app = typer.Typer(add_completion=False, help="Retrieval-augmented chat backend.")


def _print_json(payload: object) -> None:
    typer.echo(json.dumps(payload, indent=2, default=str))


@app.command()
def serve(
    host: Annotated[
        str, typer.Option("--host", envvar="RAGCHAT_HOST", help="Interface to bind.")
    ] = DEFAULT_HOST,
    port: Annotated[
        int, typer.Option("--port", envvar="RAGCHAT_PORT", min=1, help="Port to listen on.")
    ] = DEFAULT_PORT,
) -> None:
    """Run the chat HTTP server."""

    run_server(host=host, port=port)


@app.command()
def context(
    prompt: Annotated[str, typer.Argument(help="User question to retrieve evidence for.")],
    system: Annotated[
        str | None,
        typer.Option("--system", help="System instruction to send instead of the default."),
    ] = None,
) -> None:
    """Print the augmented conversation that would be sent for PROMPT.

    Runs retrieval and prompt assembly only; no completion is requested.
    """

    messages: list[ChatMessage] = []
    if system is not None:
        messages.append(ChatMessage(role="system", content=system))
    messages.append(ChatMessage(role="user", content=prompt))

    try:
        orchestrator = build_orchestrator_from_env()
    except ConfigurationError as exc:
        raise typer.BadParameter(str(exc)) from exc

    augmented = asyncio.run(orchestrator.augment(messages))
    _print_json({"messages": [message.model_dump() for message in augmented]})


if __name__ == "__main__":  # pragma: no cover
    app()
