"""CLI commands for the ProductVariant aggregate."""

from __future__ import annotations

import json

import click

from catalog.application.bulk_update_product_variants import (
    BulkUpdateProductVariantsHandler,
)
from catalog.application.create_product_variant import CreateProductVariantHandler
from catalog.application.delete_product_variant import DeleteProductVariantHandler
from catalog.application.dto import NewVariant, ProductVariantDTO, VariantUpdate
from catalog.application.list_product_variants import ListProductVariantsHandler
from catalog.application.show_product_variant import ShowProductVariantHandler
from catalog.application.update_product_variant import UpdateProductVariantHandler
from catalog.domain.exceptions import DomainException
from catalog.domain.model.value_objects import PropertyValue, parse_property_value
from catalog.infrastructure.bootstrap import (
    base_product_repository,
    event_publisher,
    unit_repository,
    variant_projector,
    variant_repository,
)


def _parse_props(pairs: tuple[str, ...]) -> dict[str, PropertyValue] | None:
    """Parse ('color=red', 'size=42') into a property map; None if empty."""
    if not pairs:
        return None
    props: dict[str, PropertyValue] = {}
    for pair in pairs:
        if "=" not in pair:
            raise click.BadParameter(
                f"Invalid property '{pair}'. Expected 'key=value'."
            )
        key, value = pair.split("=", 1)
        props[key.strip()] = parse_property_value(value)
    return props


def _update_handler() -> UpdateProductVariantHandler:
    return UpdateProductVariantHandler(
        variant_repo=variant_repository(),
        unit_repo=unit_repository(),
        publisher=event_publisher(),
        projector=variant_projector(),
    )


def _display_variant(dto: ProductVariantDTO) -> None:
    """Shared formatting for displaying one variant."""
    click.echo(f"Variant {dto.id}")
    click.echo(f"  Name:         {dto.name}")
    click.echo(f"  Base product: {dto.base_product_name or '?'} ({dto.base_product_id})")
    if dto.base_product_category_name:
        click.echo(f"  Category:     {dto.base_product_category_name}")
    click.echo(f"  Stock:        {dto.stock_quantity}")
    click.echo(f"  Unit:         {dto.unit_value} {dto.unit_symbol or dto.unit_of_measure_id}")
    if dto.usage_notes:
        click.echo(f"  Notes:        {dto.usage_notes}")
    for key, value in sorted(dto.dynamic_properties.items()):
        click.echo(f"  {key + ':':<14}{value}")
    for photo in dto.photos:
        click.echo(f"  Photo:        {photo}")


@click.command("add")
@click.option("--base-product", "base_product_id", required=True, help="Base product ID.")
@click.option("--name", required=True, help="Variant name, unique within the base product.")
@click.option("--unit", "unit_id", required=True, help="Unit of measure ID.")
@click.option("--unit-value", required=True, help="Magnitude in the unit (e.g. 250).")
@click.option("--stock", default=None, help="Initial stock quantity (default 0).")
@click.option("--notes", default=None, help="Usage notes.")
@click.option("--photo", "photos", multiple=True, help="Photo reference; repeatable.")
@click.option("--prop", "props", multiple=True, help="Dynamic property 'key=value'; repeatable.")
@click.pass_obj
def variant_add(
    obj: dict,
    base_product_id: str,
    name: str,
    unit_id: str,
    unit_value: str,
    stock: str | None,
    notes: str | None,
    photos: tuple[str, ...],
    props: tuple[str, ...],
) -> None:
    """Add a variant to a base product."""
    handler = CreateProductVariantHandler(
        variant_repo=variant_repository(),
        base_product_repo=base_product_repository(),
        unit_repo=unit_repository(),
        publisher=event_publisher(),
        projector=variant_projector(),
    )
    new_variant = NewVariant(
        base_product_id=base_product_id,
        name=name,
        unit_of_measure_id=unit_id,
        unit_value=unit_value,
        stock_quantity=stock,
        usage_notes=notes,
        photos=list(photos),
        dynamic_properties=_parse_props(props),
    )

    try:
        dto = handler.handle(new_variant, user_id=obj["user"])
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Variant {dto.id} '{dto.name}' added to '{dto.base_product_name}'")


@click.command("show")
@click.option("--id", "variant_id", required=True, help="Variant ID.")
def variant_show(variant_id: str) -> None:
    """Show one variant."""
    handler = ShowProductVariantHandler(variant_repository(), variant_projector())

    try:
        dto = handler.handle(variant_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_variant(dto)


@click.command("list")
@click.option("--base-product", "base_product_id", default=None, help="Only this base product.")
@click.option("--search", default=None, help="Match variant or base product name.")
@click.option("--unit", "unit_id", default=None, help="Only this unit of measure.")
@click.option("--page", default=1, show_default=True, type=int)
@click.option("--page-size", default=10, show_default=True, type=int)
def variant_list(
    base_product_id: str | None,
    search: str | None,
    unit_id: str | None,
    page: int,
    page_size: int,
) -> None:
    """List variants, filtered and paged."""
    handler = ListProductVariantsHandler(
        variant_repo=variant_repository(),
        base_product_repo=base_product_repository(),
        projector=variant_projector(),
    )

    try:
        result = handler.handle(
            base_product_id=base_product_id,
            search_term=search,
            unit_of_measure_id=unit_id,
            page_number=page,
            page_size=page_size,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not result.items:
        click.echo("No variants found.")
        return

    click.echo(f"{'ID':<38} {'Base product':<20} {'Variant':<20} {'Stock':>8} {'Unit':>10}")
    click.echo("-" * 100)
    for v in result.items:
        unit_label = f"{v.unit_value} {v.unit_symbol or ''}".strip()
        click.echo(
            f"{v.id:<38} {(v.base_product_name or '?'):<20} {v.name:<20} "
            f"{v.stock_quantity:>8} {unit_label:>10}"
        )
    click.echo(
        f"Page {result.page_number}/{max(result.total_pages, 1)} "
        f"({result.total_count} matching)"
    )


@click.command("update")
@click.option("--id", "variant_id", required=True, help="Variant ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--stock", default=None, help="New stock quantity.")
@click.option("--unit", "unit_id", default=None, help="New unit of measure ID.")
@click.option("--unit-value", default=None, help="New unit value.")
@click.option("--notes", default=None, help="New usage notes.")
@click.option("--prop", "props", multiple=True, help="Replaces ALL dynamic properties; repeatable.")
@click.pass_obj
def variant_update(
    obj: dict,
    variant_id: str,
    name: str | None,
    stock: str | None,
    unit_id: str | None,
    unit_value: str | None,
    notes: str | None,
    props: tuple[str, ...],
) -> None:
    """Update a variant. Options left out keep their current values."""
    update = VariantUpdate(
        variant_id=variant_id,
        name=name,
        stock_quantity=stock,
        unit_of_measure_id=unit_id,
        unit_value=unit_value,
        usage_notes=notes,
        dynamic_properties=_parse_props(props),
    )

    try:
        dto = _update_handler().handle(update, user_id=obj["user"])
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Variant {dto.id} updated")
    _display_variant(dto)


@click.command("delete")
@click.option("--id", "variant_id", required=True, help="Variant ID.")
@click.pass_obj
def variant_delete(obj: dict, variant_id: str) -> None:
    """Delete a variant. Only variants without stock can be deleted."""
    handler = DeleteProductVariantHandler(variant_repository(), event_publisher())

    try:
        handler.handle(variant_id, user_id=obj["user"])
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Variant {variant_id} deleted")


@click.command("bulk-update")
@click.option(
    "--file",
    "updates_file",
    required=True,
    type=click.File("r", encoding="utf-8"),
    help="JSON list of updates, or an object with an 'updates' list.",
)
@click.option("--json", "as_json", is_flag=True, help="Print the full result as JSON.")
@click.pass_obj
def variant_bulk_update(obj: dict, updates_file, as_json: bool) -> None:
    """Apply many partial updates; failures do not stop the batch."""
    try:
        raw = json.load(updates_file)
    except json.JSONDecodeError as exc:
        raise click.BadParameter(f"Not valid JSON: {exc}", param_hint="--file")

    items = raw.get("updates") if isinstance(raw, dict) else raw
    if not isinstance(items, list) or not all(isinstance(i, dict) for i in items):
        raise click.BadParameter("Expected a list of update objects", param_hint="--file")

    updates = [VariantUpdate.from_dict(item) for item in items]
    handler = BulkUpdateProductVariantsHandler(_update_handler())
    result = handler.handle(updates, user_id=obj["user"])

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return

    click.echo(
        f"Total: {result.total_updates}  "
        f"Succeeded: {result.successful_updates}  "
        f"Failed: {result.failed_updates}"
    )
    for error in result.errors:
        click.echo(f"  {error.variant_id}: [{error.error_kind.value}] {error.error_message}")
