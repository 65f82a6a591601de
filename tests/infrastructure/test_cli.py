"""End-to-end tests for the click CLI against real stores."""

import pytest
from click.testing import CliRunner
from loguru import logger

from catalog.infrastructure.cli.main import cli


@pytest.fixture(autouse=True)
def detach_log_sinks():
    yield
    # Sinks installed by the CLI point at the runner's closed streams.
    logger.remove()


@pytest.fixture(params=["json", "sqlite"])
def run(request, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    runner = CliRunner()

    def _run(*args):
        return runner.invoke(
            cli,
            [
                "--backend", request.param,
                "--data-dir", str(tmp_path / "data"),
                "--log-level", "WARNING",
                *args,
            ],
        )

    return _run


class TestProductCommands:

    def test_create_and_get(self, run):
        result = run("product", "create", "--category", "tools", "--name", "hammer")
        assert result.exit_code == 0, result.output
        assert "Product #1 'hammer' created in 'tools'" in result.output

        result = run("product", "get", "--id", "1")
        assert result.exit_code == 0
        assert "Category: tools" in result.output
        assert "Name:     hammer" in result.output

    def test_update_replaces_fields(self, run):
        run("product", "create", "--category", "tools", "--name", "hammer")
        result = run("product", "update", "--id", "1", "--category", "tools", "--name", "wrench")
        assert result.exit_code == 0
        assert "Name:     wrench" in result.output

    def test_delete_twice(self, run):
        run("product", "create", "--category", "tools", "--name", "hammer")
        assert run("product", "delete", "--id", "1").exit_code == 0

        result = run("product", "delete", "--id", "1")
        assert result.exit_code == 4
        assert "Product #1 not found" in result.output

    def test_list_by_category(self, run):
        for i in range(5):
            run("product", "create", "--category", "tools", "--name", f"tool-{i}")

        result = run("product", "list", "--category", "tools", "--size", "2")
        assert result.exit_code == 0
        assert "tool-0" in result.output
        assert "tool-1" in result.output
        assert "tool-2" not in result.output
        assert "Page 1 of 3 (5 product(s) total)" in result.output
        assert "More results: --page 1" in result.output

    def test_last_page_has_no_next_hint(self, run):
        for i in range(3):
            run("product", "create", "--category", "tools", "--name", f"tool-{i}")

        result = run("product", "list", "--category", "tools", "--size", "2", "--page", "1")
        assert result.exit_code == 0
        assert "tool-2" in result.output
        assert "More results" not in result.output

    def test_category_kept_with_surrounding_spaces(self, run):
        run("product", "create", "--category", " tools", "--name", "hammer")

        result = run("product", "list", "--category", " tools")
        assert result.exit_code == 0
        assert "hammer" in result.output
        assert "(1 product(s) total)" in result.output

    def test_list_empty_category(self, run):
        result = run("product", "list", "--category", "toys")
        assert result.exit_code == 0
        assert "No products found in 'toys'" in result.output


class TestErrorExitCodes:

    def test_not_found_exit_code(self, run):
        result = run("product", "get", "--id", "42")
        assert result.exit_code == 4

    def test_validation_exit_code(self, run):
        result = run("product", "create", "--category", "tools", "--name", "   ")
        assert result.exit_code == 3
        assert "name is required" in result.output

    def test_invalid_page_exit_code(self, run):
        result = run("product", "list", "--category", "tools", "--page=-1")
        assert result.exit_code == 3
        assert "cannot be negative" in result.output

    def test_bad_option_differs_from_validation_error(self, run):
        usage = run("product", "get", "--id", "not-a-number")
        invalid = run("product", "create", "--category", "tools", "--name", " ")
        assert usage.exit_code == 2
        assert invalid.exit_code == 3


class TestCategoryCommands:

    def test_lists_distinct_categories(self, run):
        for category in ("tools", "tools", "food"):
            run("product", "create", "--category", category, "--name", "x")

        result = run("category", "list")
        assert result.exit_code == 0
        assert result.output.splitlines()[-2:] == ["food", "tools"]

    def test_no_categories(self, run):
        result = run("category", "list")
        assert "No categories found." in result.output


def test_corrupt_json_store_exit_code(tmp_path):
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    (data_dir / "products.json").write_text("{oops", encoding="utf-8")

    result = CliRunner().invoke(
        cli,
        ["--backend", "json", "--data-dir", str(data_dir), "--log-level", "CRITICAL",
         "category", "list"],
    )
    assert result.exit_code == 5
    assert "Cannot read product catalog" in result.output
