"""Notification sink that writes confirmations to the terminal."""

import logging

import click

logger = logging.getLogger(__name__)


class EchoNotificationSink:
    """Writes ``[success] <message>`` to stderr."""

    def success(self, message: str) -> None:
        logger.debug("success: %s", message)
        click.secho(f"[success] {message}", fg="green", err=True)
