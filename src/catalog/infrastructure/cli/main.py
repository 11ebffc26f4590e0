import click

from catalog.infrastructure.cli.base_product_commands import (
    base_product_add,
    base_product_delete,
    base_product_list,
    base_product_update,
)
from catalog.infrastructure.cli.category_commands import category_add, category_list
from catalog.infrastructure.cli.unit_commands import (
    unit_add,
    unit_delete,
    unit_list,
    unit_update,
)
from catalog.infrastructure.cli.variant_commands import (
    variant_add,
    variant_bulk_update,
    variant_delete,
    variant_list,
    variant_show,
    variant_update,
)
from catalog.infrastructure.log_config import LOG_LEVELS, configure_logging


@click.group()
@click.option(
    "--user",
    envvar="CATALOG_USER",
    default="cli",
    show_default=True,
    help="Acting user ID recorded in logs and events.",
)
@click.option(
    "--log-level",
    envvar="CATALOG_LOG_LEVEL",
    default="WARNING",
    show_default=True,
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
)
@click.pass_context
def cli(ctx: click.Context, user: str, log_level: str) -> None:
    """Catalog: products, variants and units of measure"""
    configure_logging(log_level)
    ctx.obj = {"user": user}


@cli.group()
def variant() -> None:
    """Manage product variants."""


@cli.group("base-product")
def base_product() -> None:
    """Manage base products."""


@cli.group()
def unit() -> None:
    """Manage units of measure."""


@cli.group()
def category() -> None:
    """Manage categories."""


# Register subcommands
variant.add_command(variant_add)
variant.add_command(variant_bulk_update)
variant.add_command(variant_delete)
variant.add_command(variant_list)
variant.add_command(variant_show)
variant.add_command(variant_update)
base_product.add_command(base_product_add)
base_product.add_command(base_product_delete)
base_product.add_command(base_product_list)
base_product.add_command(base_product_update)
unit.add_command(unit_add)
unit.add_command(unit_delete)
unit.add_command(unit_list)
unit.add_command(unit_update)
category.add_command(category_add)
category.add_command(category_list)
