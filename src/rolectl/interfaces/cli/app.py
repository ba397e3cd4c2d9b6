"""rolectl command-line application."""

from pathlib import Path

import click

from rolectl import __version__
from rolectl.application.role_manager import RoleManager
from rolectl.domain.exceptions import RoleCtlError
from rolectl.interfaces.cli.commands.role import role

# Short and legacy names, resolved to command paths below the root group.
ALIASES = {
    "rcrt": ("role", "create"),
    "role-create": ("role", "create"),
    "rdel": ("role", "delete"),
    "role-delete": ("role", "delete"),
    "rap": ("role", "perm", "add"),
    "role-add-perm": ("role", "perm", "add"),
    "rmp": ("role", "perm", "remove"),
    "role-remove-perm": ("role", "perm", "remove"),
    "rls": ("role", "list"),
    "role-list": ("role", "list"),
}


class AliasedGroup(click.Group):
    """Group that also resolves ALIASES and colon paths such as ``role:perm:add``."""

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        rv = super().get_command(ctx, cmd_name)
        if rv is not None:
            return rv
        if cmd_name in ALIASES:
            path = ALIASES[cmd_name]
        elif ":" in cmd_name:
            path = tuple(cmd_name.split(":"))
        else:
            return None
        command: click.Command | None = self
        for part in path:
            if not isinstance(command, click.Group):
                return None
            command = click.Group.get_command(command, ctx, part)
            if command is None:
                return None
        return command


@click.group(cls=AliasedGroup)
@click.option(
    "--store",
    type=click.Choice(["memory", "file", "postgres"]),
    help="Role store backend (default from ROLECTL_STORE_BACKEND)",
)
@click.option("--store-path", type=click.Path(dir_okay=False, path_type=Path), help="JSON role store file")
@click.option("--database-url", help="PostgreSQL connection URL")
@click.option(
    "--permissions-file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML file listing known permission names",
)
@click.option("--log-level", help="Logging level, e.g. INFO or DEBUG")
@click.version_option(__version__, prog_name="rolectl")
@click.pass_context
def cli(
    ctx: click.Context,
    store: str | None,
    store_path: Path | None,
    database_url: str | None,
    permissions_file: Path | None,
    log_level: str | None,
):
    """Manage roles and their permissions."""
    from rolectl.config import get_settings
    from rolectl.logging import configure_logging
    from rolectl.main import role_manager_context

    overrides = {
        "store_backend": store,
        "store_path": store_path,
        "database_url": database_url,
        "permissions_file": permissions_file,
        "log_level": log_level,
    }
    settings = get_settings().model_copy(
        update={k: v for k, v in overrides.items() if v is not None}
    )
    try:
        configure_logging(settings.log_level, settings.debug)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--log-level") from e

    ctx.meta["rolectl.default_format"] = settings.default_format

    # Callers embedding the CLI may pass a ready RoleManager as ``obj``
    # (``cli(obj=manager)``); the configured store is then not opened.
    if isinstance(ctx.obj, RoleManager):
        return
    try:
        ctx.obj = ctx.with_resource(role_manager_context(settings))
    except RoleCtlError as e:
        raise click.ClickException(str(e)) from e


cli.add_command(role)
