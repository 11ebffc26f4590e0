"""CLI commands for units of measure."""

from __future__ import annotations

import click

from catalog.application.add_unit_of_measure import AddUnitOfMeasureHandler
from catalog.application.delete_unit_of_measure import DeleteUnitOfMeasureHandler
from catalog.application.list_units_of_measure import ListUnitsOfMeasureHandler
from catalog.application.update_unit_of_measure import UpdateUnitOfMeasureHandler
from catalog.domain.exceptions import DomainException
from catalog.infrastructure.bootstrap import (
    event_publisher,
    unit_repository,
    variant_repository,
)


@click.command("add")
@click.option("--name", required=True, help="Unit name, e.g. Millimeter.")
@click.option("--symbol", required=True, help="Unit symbol, e.g. mm.")
@click.option("--type", "unit_type", required=True, help="Length, Weight, Volume or Count.")
@click.pass_obj
def unit_add(obj: dict, name: str, symbol: str, unit_type: str) -> None:
    """Add a unit of measure."""
    handler = AddUnitOfMeasureHandler(unit_repository(), event_publisher())

    try:
        dto = handler.handle(name, symbol, unit_type, user_id=obj["user"])
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Unit {dto.id} '{dto.name}' ({dto.symbol}, {dto.type}) added")


@click.command("list")
@click.option("--type", "unit_type", default=None, help="Only units of this type.")
def unit_list(unit_type: str | None) -> None:
    """List units of measure."""
    handler = ListUnitsOfMeasureHandler(unit_repository())

    try:
        units = handler.handle(unit_type)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not units:
        click.echo("No units found.")
        return

    click.echo(f"{'ID':<38} {'Name':<16} {'Symbol':<8} {'Type':<8}")
    click.echo("-" * 72)
    for u in units:
        click.echo(f"{u.id:<38} {u.name:<16} {u.symbol:<8} {u.type:<8}")


@click.command("update")
@click.option("--id", "unit_id", required=True, help="Unit ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--symbol", default=None, help="New symbol.")
@click.option("--type", "unit_type", default=None, help="New type.")
@click.pass_obj
def unit_update(
    obj: dict,
    unit_id: str,
    name: str | None,
    symbol: str | None,
    unit_type: str | None,
) -> None:
    """Update a unit of measure."""
    handler = UpdateUnitOfMeasureHandler(unit_repository(), event_publisher())

    try:
        dto = handler.handle(
            unit_id, user_id=obj["user"], name=name, symbol=symbol, unit_type=unit_type
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Unit {dto.id} '{dto.name}' updated")


@click.command("delete")
@click.option("--id", "unit_id", required=True, help="Unit ID.")
@click.pass_obj
def unit_delete(obj: dict, unit_id: str) -> None:
    """Delete a unit that no variant uses."""
    handler = DeleteUnitOfMeasureHandler(
        unit_repository(), variant_repository(), event_publisher()
    )

    try:
        handler.handle(unit_id, user_id=obj["user"])
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Unit {unit_id} deleted")
