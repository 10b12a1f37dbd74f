"""Shared helpers for CLI commands."""

from __future__ import annotations

import json

import click

from storefront.application.auth import AdminContext
from storefront.infrastructure.api.endpoints import StorefrontApi


def api() -> StorefrontApi:
    return click.get_current_context().find_root().obj


def admin_context(token: str | None) -> AdminContext:
    return AdminContext(token=token)


def emit(response: dict) -> None:
    """Print a response as JSON; failures exit with status 1."""
    click.echo(json.dumps(response, indent=2, ensure_ascii=False))
    if not response.get("success"):
        click.get_current_context().exit(1)


token_option = click.option(
    "--token",
    envvar="STOREFRONT_TOKEN",
    default=None,
    help="Admin token (or set STOREFRONT_TOKEN).",
)
