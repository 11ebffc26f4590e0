"""End-to-end tests for the click CLI against a temporary data directory."""

import json

import pytest
from click.testing import CliRunner

from catalog.infrastructure import bootstrap
from catalog.infrastructure.cli.main import cli


@pytest.fixture
def runner(tmp_path, monkeypatch):
    monkeypatch.setenv(bootstrap.DATA_DIR_ENV, str(tmp_path))
    return CliRunner()


def _invoke(runner, *args):
    # keep warning logs out of the captured output
    return runner.invoke(cli, ["--user", "tester", "--log-level", "ERROR", *args])


@pytest.fixture
def seeded(runner):
    """A base product and a unit, returned as (base_product_id, unit_id)."""
    assert _invoke(runner, "base-product", "add", "--name", "Acrylic Paint").exit_code == 0
    assert _invoke(
        runner, "unit", "add", "--name", "Milliliter", "--symbol", "ml", "--type", "Volume"
    ).exit_code == 0
    base_product = bootstrap.base_product_repository().list_all()[0]
    unit = bootstrap.unit_repository().list_all()[0]
    return base_product.id, unit.id


def _add_variant(runner, base_product_id, unit_id, name, *extra):
    result = _invoke(
        runner, "variant", "add",
        "--base-product", base_product_id,
        "--name", name,
        "--unit", unit_id,
        "--unit-value", "250",
        *extra,
    )
    assert result.exit_code == 0, result.output
    return next(v for v in bootstrap.variant_repository().list_all() if v.name == name)


class TestVariantCommands:

    def test_add_and_show(self, runner, seeded):
        bp_id, unit_id = seeded
        variant = _add_variant(
            runner, bp_id, unit_id, "Red", "--stock", "5", "--prop", "glossy=true"
        )
        assert variant.dynamic_properties == {"glossy": True}

        result = _invoke(runner, "variant", "show", "--id", variant.id)
        assert result.exit_code == 0
        assert "Acrylic Paint" in result.output
        assert "250 ml" in result.output

    def test_duplicate_name_is_reported(self, runner, seeded):
        bp_id, unit_id = seeded
        _add_variant(runner, bp_id, unit_id, "Red")
        result = _invoke(
            runner, "variant", "add", "--base-product", bp_id, "--name", "red",
            "--unit", unit_id, "--unit-value", "1",
        )
        assert result.exit_code != 0
        assert "already exists" in result.output

    def test_list_reports_filtered_total(self, runner, seeded):
        bp_id, unit_id = seeded
        for name in ("Red", "Blue", "Green"):
            _add_variant(runner, bp_id, unit_id, name)
        result = _invoke(runner, "variant", "list", "--search", "re", "--page-size", "1")
        assert result.exit_code == 0
        assert "(2 matching)" in result.output

    def test_update_and_delete(self, runner, seeded):
        bp_id, unit_id = seeded
        variant = _add_variant(runner, bp_id, unit_id, "Red", "--stock", "3")

        refused = _invoke(runner, "variant", "delete", "--id", variant.id)
        assert refused.exit_code != 0

        assert _invoke(
            runner, "variant", "update", "--id", variant.id, "--stock", "0"
        ).exit_code == 0
        assert _invoke(runner, "variant", "delete", "--id", variant.id).exit_code == 0
        assert bootstrap.variant_repository().get_by_id(variant.id) is None

    def test_bulk_update_reports_partial_failure(self, runner, seeded, tmp_path):
        bp_id, unit_id = seeded
        red = _add_variant(runner, bp_id, unit_id, "Red")
        updates = tmp_path / "updates.json"
        updates.write_text(
            json.dumps(
                {"updates": [{"id": red.id, "stockQuantity": 15}, {"id": "missing"}]}
            ),
            encoding="utf-8",
        )

        result = _invoke(runner, "variant", "bulk-update", "--file", str(updates), "--json")

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["successfulUpdates"] == 1
        assert data["failedUpdates"] == 1
        assert data["errors"][0]["errorKind"] == "NotFound"

    def test_events_are_recorded(self, runner, seeded, tmp_path):
        bp_id, unit_id = seeded
        _add_variant(runner, bp_id, unit_id, "Red")
        lines = (tmp_path / "events.jsonl").read_text(encoding="utf-8").splitlines()
        events = [json.loads(line) for line in lines]
        assert [e["event"] for e in events] == [
            "BaseProductCreated",
            "UnitOfMeasureCreated",
            "ProductVariantCreated",
        ]
        assert {e["user_id"] for e in events} == {"tester"}


class TestReferenceDataCommands:

    def test_base_product_delete_requires_cascade(self, runner, seeded):
        bp_id, unit_id = seeded
        _add_variant(runner, bp_id, unit_id, "Red")

        assert _invoke(runner, "base-product", "delete", "--id", bp_id).exit_code != 0
        assert _invoke(
            runner, "base-product", "delete", "--id", bp_id, "--cascade"
        ).exit_code == 0
        assert bootstrap.variant_repository().list_all() == []

    def test_unit_list(self, runner, seeded):
        result = _invoke(runner, "unit", "list")
        assert "Milliliter" in result.output

    def test_category_add_and_list(self, runner):
        assert _invoke(runner, "category", "add", "--name", "Paints").exit_code == 0
        result = _invoke(runner, "category", "list")
        assert "Paints" in result.output
