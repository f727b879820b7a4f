"""Command line interface for issuing and parsing tokens."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

import typer
import yaml
from pydantic import ValidationError

from hashauth.config import load_config
from hashauth.errors import HashAuthError
from hashauth.generator import TokenGenerator
from hashauth.parser import TokenParser

app = typer.Typer(help="CLI for hashauth tokens")


@app.callback()
def main() -> None:
    """hashauth CLI entry point."""
    pass


def _parse_value(raw: str) -> Any:
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def _parse_pairs(pairs: Optional[List[str]], option: str) -> Dict[str, Any]:
    result: Dict[str, Any] = {}
    for pair in pairs or []:
        name, sep, raw = pair.partition("=")
        if not sep or not name:
            raise typer.BadParameter(f"expected name=value, got {pair!r}", param_hint=option)
        result[name] = _parse_value(raw)
    return result


@app.command("issue")
def issue(
    data: str = typer.Option(..., help="Payload data as JSON (plain strings allowed)"),
    claim: Optional[List[str]] = typer.Option(None, help="Claim as name=value, repeatable"),
    config: Optional[Path] = typer.Option(None, help="Path to hashauth YAML config"),
) -> None:
    """
    Issue a token carrying ``data`` and the given claims.

    Example:
        hashauth issue --data '{"user": "alice"}' --claim role=admin
    """
    claims = _parse_pairs(claim, "--claim")
    try:
        settings = load_config(str(config) if config else None)
        token = TokenGenerator.from_config(settings).generate(_parse_value(data), claims)
    except HashAuthError as exc:
        typer.secho(f"Cannot issue token: {exc.message}", fg=typer.colors.RED)
        raise typer.Exit(code=1)
    except (ValidationError, yaml.YAMLError) as exc:
        typer.secho(f"Invalid configuration: {exc}", fg=typer.colors.RED)
        raise typer.Exit(code=1)
    typer.echo(token)


@app.command("parse")
def parse(
    token: str,
    context: Optional[List[str]] = typer.Option(
        None, help="Request data as name=value, repeatable"
    ),
    config: Optional[Path] = typer.Option(None, help="Path to hashauth YAML config"),
) -> None:
    """
    Verify a token against request data and print its payload data as JSON.

    Example:
        hashauth parse "$TOKEN" --context role=admin
    """
    request_data = _parse_pairs(context, "--context")
    try:
        settings = load_config(str(config) if config else None)
        data = TokenParser.from_config(settings).parse(token, request_data)
    except HashAuthError as exc:
        typer.secho(f"Token rejected: {exc.message}", fg=typer.colors.RED)
        raise typer.Exit(code=1)
    except (ValidationError, yaml.YAMLError) as exc:
        typer.secho(f"Invalid configuration: {exc}", fg=typer.colors.RED)
        raise typer.Exit(code=1)
    typer.echo(json.dumps(data))
