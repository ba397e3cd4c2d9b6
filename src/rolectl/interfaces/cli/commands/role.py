"""Role management commands."""

from collections.abc import Iterator
from contextlib import contextmanager

import click

from rolectl.application.role_manager import RoleManager
from rolectl.domain.exceptions import RoleCtlError
from rolectl.domain.value_objects import parse_permission_list
from rolectl.interfaces.cli.formatting import (
    FORMATS,
    RowFilter,
    parse_fields,
    render,
    role_rows,
)


@contextmanager
def _domain_errors() -> Iterator[None]:
    """Turn domain errors into a one-line message and exit status 1."""
    try:
        yield
    except RoleCtlError as e:
        raise click.ClickException(str(e)) from e


@click.group()
def role():
    """Role management commands."""
    pass


@role.command()
@click.argument("machine_name")
@click.argument("human_readable_name", required=False)
@click.pass_obj
def create(manager: RoleManager, machine_name: str, human_readable_name: str | None):
    """
    Create a new role.

    MACHINE_NAME is the symbolic machine name for the role. HUMAN_READABLE_NAME
    is a descriptive name; it defaults to the machine name with its first
    letter upper-cased.

    Examples:
        rolectl role create test_role 'Test role'
    """
    with _domain_errors():
        manager.create(machine_name, human_readable_name)


@role.command()
@click.argument("machine_name")
@click.pass_obj
def delete(manager: RoleManager, machine_name: str):
    """
    Delete a role.

    Examples:
        rolectl role delete test_role
    """
    with _domain_errors():
        manager.delete(machine_name)


@role.group()
def perm():
    """Grant or revoke role permissions."""
    pass


@perm.command()
@click.argument("machine_name")
@click.argument("permissions")
@click.pass_obj
def add(manager: RoleManager, machine_name: str, permissions: str):
    """
    Grant specified permission(s) to a role.

    PERMISSIONS is a comma-delimited list of permission names.

    Examples:
        # Allow anonymous users to post comments and access content
        rolectl role perm add anonymous 'post comments,access content'
    """
    with _domain_errors():
        manager.grant_permissions(machine_name, parse_permission_list(permissions))


@perm.command()
@click.argument("machine_name")
@click.argument("permissions")
@click.pass_obj
def remove(manager: RoleManager, machine_name: str, permissions: str):
    """
    Remove specified permission(s) from a role.

    PERMISSIONS is a comma-delimited list of permission names.

    Examples:
        rolectl role perm remove anonymous 'post comments,access content'
    """
    with _domain_errors():
        manager.revoke_permissions(machine_name, parse_permission_list(permissions))


@role.command("list")
@click.option("--filter", "filter_expr", help="Filter rows, e.g. 'administer nodes' or 'rid=anonymous'")
@click.option("--format", "output_format", type=click.Choice(FORMATS), help="Output format")
@click.option("--fields", help="Comma-separated fields to show: rid,label,perms")
@click.pass_context
def list_(ctx: click.Context, filter_expr: str | None, output_format: str | None, fields: str | None):
    """
    Display a list of all roles defined on the system.

    Examples:
        # Roles that have the 'administer nodes' permission
        rolectl role list --filter='administer nodes'

        # Only the anonymous role, as a table
        rolectl role list --filter='rid=anonymous' --format=table
    """
    manager: RoleManager = ctx.obj
    output_format = output_format or ctx.meta.get("rolectl.default_format", "yaml")
    try:
        selected = parse_fields(fields)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--fields") from e
    try:
        row_filter = RowFilter.parse(filter_expr) if filter_expr else None
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--filter") from e

    with _domain_errors():
        rows = role_rows(manager.list_roles())
    if row_filter is not None:
        rows = row_filter.apply(rows)
    click.echo(render(rows, output_format, selected), nl=False)
