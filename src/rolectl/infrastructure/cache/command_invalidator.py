"""Cache invalidator that runs a shell command."""

import logging
import shlex
import subprocess

from rolectl.domain.exceptions import CacheInvalidationFailed

logger = logging.getLogger(__name__)


class CommandCacheInvalidator:
    """Runs a configured command after permissions change.

    ``{role}`` in the command is replaced with the shell-quoted role id,
    e.g. ``drush cache:rebuild`` or ``systemctl reload app``.
    """

    def __init__(self, command: str, timeout: float | None = None) -> None:
        self._command = command
        self._timeout = timeout

    def invalidate(self, role_id: str) -> None:
        command = self._command.replace("{role}", shlex.quote(role_id))
        logger.info("Invalidating cache: %s", command)
        try:
            completed = subprocess.run(
                command,
                shell=True,
                capture_output=True,
                text=True,
                timeout=self._timeout,
            )
        except (OSError, subprocess.TimeoutExpired) as e:
            raise CacheInvalidationFailed(
                f'Permissions for "{role_id}" were saved but cache invalidation failed: {e}'
            ) from e
        if completed.returncode != 0:
            detail = (completed.stderr or completed.stdout).strip()
            raise CacheInvalidationFailed(
                f'Permissions for "{role_id}" were saved but cache invalidation '
                f"exited with status {completed.returncode}: {detail}"
            )
        logger.debug("Cache invalidation output: %s", completed.stdout.strip())
