"""End-to-end tests for the click CLI against a temporary data file."""

import json

import pytest
from click.testing import CliRunner

from ims.infrastructure.cli.main import cli
from ims.infrastructure.config import get_settings


@pytest.fixture
def data_file(tmp_path, monkeypatch):
    path = tmp_path / "local_storage.json"
    monkeypatch.setenv("IMS_DATA_FILE", str(path))
    get_settings.cache_clear()
    yield path
    get_settings.cache_clear()


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def _stored(path) -> list[dict]:
    return json.loads(json.loads(path.read_text(encoding="utf-8"))["inventory_products"])


class TestProductCommands:

    def test_add_and_show(self, runner, data_file):
        result = runner.invoke(cli, [
            "product", "add", "--name", "Smartphone", "--barcode", "7123456789012",
            "--quantity", "25", "--category", "Electronics", "--price", "599.99",
        ])
        assert result.exit_code == 0, result.output
        assert "added with barcode 7123456789012" in result.output

        result = runner.invoke(cli, ["product", "show", "7123456789012"])
        assert result.exit_code == 0
        assert "Smartphone" in result.output
        assert "Quantity: 25" in result.output
        assert "$599.99" in result.output

    def test_add_duplicate_barcode_fails(self, runner, data_file):
        runner.invoke(cli, ["product", "add", "--name", "Smartphone", "--barcode", "7123456789012"])
        result = runner.invoke(cli, ["product", "add", "--name", "Tablet", "--barcode", "7123456789012"])
        assert result.exit_code == 1
        assert "already used by: Smartphone" in result.output
        assert len(_stored(data_file)) == 1

    def test_add_with_generated_barcode(self, runner, data_file):
        result = runner.invoke(cli, ["product", "add", "--name", "T-shirt", "--generate"])
        assert result.exit_code == 0, result.output
        barcode = _stored(data_file)[0]["barcode"]
        assert barcode.startswith("7")
        assert len(barcode) == 12

    def test_show_unknown(self, runner, data_file):
        result = runner.invoke(cli, ["product", "show", "0000"])
        assert result.exit_code == 1
        assert "Product not found" in result.output

    def test_list_empty(self, runner, data_file):
        result = runner.invoke(cli, ["product", "list"])
        assert result.exit_code == 0
        assert "No products in inventory" in result.output

    def test_update_and_delete(self, runner, data_file):
        runner.invoke(cli, ["product", "add", "--name", "Notebook", "--barcode", "7456789012345"])
        product_id = _stored(data_file)[0]["id"]

        result = runner.invoke(cli, ["product", "update", "--id", product_id, "--quantity", "12"])
        assert result.exit_code == 0, result.output
        assert _stored(data_file)[0]["quantity"] == 12

        result = runner.invoke(cli, ["product", "delete", "--id", product_id, "--yes"])
        assert result.exit_code == 0, result.output
        assert _stored(data_file) == []

        result = runner.invoke(cli, ["product", "delete", "--id", product_id, "--yes"])
        assert result.exit_code == 1
        assert "not found" in result.output


class TestInventoryCommands:

    def test_demo_then_show(self, runner, data_file):
        result = runner.invoke(cli, ["demo", "load"])
        assert "Loaded 5 demo products." in result.output

        result = runner.invoke(cli, ["inventory", "show"])
        assert result.exit_code == 0
        assert "Products: 5   Units: 101   Low stock: 2" in result.output
        assert "LOW STOCK" in result.output

        result = runner.invoke(cli, ["demo", "load"])
        assert "not loaded" in result.output

    def test_adjust_subtract(self, runner, data_file):
        runner.invoke(cli, ["product", "add", "--name", "Smartphone",
                            "--barcode", "7123456789012", "--quantity", "25"])

        result = runner.invoke(cli, ["inventory", "adjust", "7123456789012",
                                     "--type", "subtract", "--amount", "10"])
        assert result.exit_code == 0, result.output
        assert "25 -> 15" in result.output
        assert _stored(data_file)[0]["quantity"] == 15

    def test_adjust_unknown_barcode(self, runner, data_file):
        result = runner.invoke(cli, ["inventory", "adjust", "0000", "--amount", "1"])
        assert result.exit_code == 1
        assert "Please enroll this product first" in result.output

    def test_count_session(self, runner, data_file):
        runner.invoke(cli, ["product", "add", "--name", "Smartphone",
                            "--barcode", "7123456789012", "--quantity", "25"])
        runner.invoke(cli, ["product", "add", "--name", "T-shirt",
                            "--barcode", "7567890123456", "--quantity", "3"])

        session = "\n".join([
            "7123456789012", "-10",
            "7999999999999",
            "7567890123456", "=40",
            "",
        ]) + "\n"
        result = runner.invoke(cli, ["inventory", "count"], input=session)

        assert result.exit_code == 0, result.output
        assert "Quantity updated: 25 -> 15" in result.output
        assert "Quantity updated: 3 -> 40" in result.output
        assert "Recent updates:" in result.output
        assert [p["quantity"] for p in _stored(data_file)] == [15, 40]


class TestBarcodeCommands:

    def test_generate(self, runner, data_file):
        result = runner.invoke(cli, ["barcode", "generate"])
        assert result.exit_code == 0
        code = result.output.strip()
        assert code.startswith("7")
        assert len(code) == 12

    def test_check(self, runner, data_file):
        result = runner.invoke(cli, ["barcode", "check", "SKU-0001"])
        assert result.exit_code == 0
        assert "is ready to use" in result.output

        result = runner.invoke(cli, ["barcode", "check", "123"])
        assert result.exit_code == 1
        assert "at least 4 characters" in result.output
