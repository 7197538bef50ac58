# Overview: Flask CLI command group for permission inspection and grant editing.

# backend/accessmatrix/cli.py
# Commands Legend (run from the backend directory):
# Prereqs:
# - Activate your virtualenv.
# - Set FLASK_APP to accessmatrix (PowerShell: $env:FLASK_APP="accessmatrix").
# - Use: python -m flask perms <command> [options]
#
# Schema inspection:
# - python -m flask perms schema [--category manageOrders]
#   List categories and capabilities.
# - python -m flask perms defaults employee
#   Show the capabilities granted by a default set (admin | employee).
#
# Employee grants:
# - python -m flask perms check jane@example.com manageQuotes sendQuote
#   Check an employee's effective grant.
# - python -m flask perms grant jane@example.com managePurchase menuPageVisible
#   Grant one capability (omit the capability to grant the whole category).
# - python -m flask perms revoke jane@example.com manageQuotes sendQuote
#   Revoke one capability (omit the capability to revoke the whole category).
# - python -m flask perms reset jane@example.com
#   Delete the stored record so the employee falls back to the baseline.

import click
from flask.cli import with_appcontext

from .permissions import (
    PERMISSION_SCHEMA,
    UnknownPermissionError,
    build_administrator_defaults,
    build_employee_baseline_defaults,
)
from .services import roster_service


@click.group('perms')
def perms_group():
    """Permission inspection and grant editing commands."""


@perms_group.command('schema')
@click.option('--category', help='Only show one category')
def schema_cli(category):
    """List categories and their capabilities."""
    if category and category not in PERMISSION_SCHEMA:
        click.echo(f"FAIL Unknown category '{category}'")
        return

    categories = [category] if category else list(PERMISSION_SCHEMA)
    total = 0
    for name in categories:
        click.echo(f"CATEGORY {name}")
        click.echo("-"*80)
        for code, label, _description in PERMISSION_SCHEMA[name]:
            click.echo(f"  {code:<28} {label}")
            total += 1
        click.echo("")

    click.echo(f" Total: {total} capabilities")


@perms_group.command('defaults')
@click.argument('role', type=click.Choice(['admin', 'employee']))
def defaults_cli(role):
    """Show the capabilities granted by a default set."""
    permission_set = (
        build_administrator_defaults() if role == 'admin' else build_employee_baseline_defaults()
    )
    granted = permission_set.granted()
    for category, capability in granted:
        click.echo(f"  {category}.{capability}")
    click.echo(f"\n Total: {len(granted)} granted")


@perms_group.command('check')
@click.argument('email')
@click.argument('category')
@click.argument('capability')
@with_appcontext
def check_cli(email, category, capability):
    """Check an employee's effective grant."""
    permission_set = roster_service.get_employee_permission_set(email)
    if permission_set.get(category, capability):
        click.echo(f"PASS '{email}' HAS '{category}.{capability}'")
    else:
        click.echo(f"FAIL '{email}' DOES NOT HAVE '{category}.{capability}'")


def _set_grant(email, category, capability, value):
    try:
        if capability:
            roster_service.set_employee_capability(email, category, capability, value, updated_by='cli')
        else:
            roster_service.set_employee_category(email, category, value, updated_by='cli')
    except (UnknownPermissionError, ValueError) as e:
        click.echo(f"FAIL Error: {str(e)}")
        return False
    return True


@perms_group.command('grant')
@click.argument('email')
@click.argument('category')
@click.argument('capability', required=False)
@with_appcontext
def grant_cli(email, category, capability):
    """Grant a capability (or a whole category) to an employee."""
    if _set_grant(email, category, capability, True):
        click.echo(f"PASS Granted '{category}.{capability or '*'}' to '{email}'")


@perms_group.command('revoke')
@click.argument('email')
@click.argument('category')
@click.argument('capability', required=False)
@with_appcontext
def revoke_cli(email, category, capability):
    """Revoke a capability (or a whole category) from an employee."""
    if _set_grant(email, category, capability, False):
        click.echo(f"PASS Revoked '{category}.{capability or '*'}' from '{email}'")


@perms_group.command('reset')
@click.argument('email')
@with_appcontext
def reset_cli(email):
    """Reset an employee to the baseline defaults."""
    if roster_service.reset_employee_permissions(email):
        click.echo(f"PASS Reset '{email}' to baseline permissions")
    else:
        click.echo(f"WARN  No stored permissions for '{email}'")


def register_commands(app):
    """Register all CLI commands with Flask app."""
    app.cli.add_command(perms_group)
