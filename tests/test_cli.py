import json

import pytest
from typer.testing import CliRunner

import clipstash.cli as cli
from clipstash.clipboard import MemoryClipboard
from clipstash.services import codec

runner = CliRunner()


@pytest.fixture
def cli_clipboard(monkeypatch) -> MemoryClipboard:
    """Route the CLI to an in-memory clipboard and skip log file setup."""
    clip = MemoryClipboard("from clipboard")
    monkeypatch.setattr(cli, "PyperclipClipboard", lambda: clip)
    monkeypatch.setattr(cli, "setup_logging", lambda *args, **kwargs: None)
    return clip


def invoke(store_path, *args):
    return runner.invoke(cli.app, ["--store", str(store_path), *args])


class TestCli:
    """Tests for the scriptable subcommands."""

    def test_save_and_get(self, cli_clipboard, store_path):
        result = invoke(store_path, "save", "work", "snippet")
        assert result.exit_code == 0, result.output
        assert "Data saved to clipboard history: work" in result.output
        assert json.loads(store_path.read_text(encoding="utf-8")) == {
            "work": {"snippet": "from clipboard"}
        }

        cli_clipboard.text = "something else"
        result = invoke(store_path, "get", "work", "snippet")
        assert result.exit_code == 0, result.output
        assert cli_clipboard.text == "from clipboard"

    def test_get_missing(self, cli_clipboard, store_path):
        result = invoke(store_path, "get", "work", "snippet")
        assert result.exit_code == 1
        assert "does not exist" in result.output

    def test_list(self, cli_clipboard, sample_store, store_path):
        codec.save(sample_store, store_path)
        result = invoke(store_path, "list")
        assert result.exit_code == 0, result.output
        assert "snippet" in result.output
        assert "archive" in result.output

    def test_list_one_history(self, cli_clipboard, sample_store, store_path):
        codec.save(sample_store, store_path)
        result = invoke(store_path, "list", "--history", "personal")
        assert result.exit_code == 0, result.output
        assert "address" in result.output
        assert "snippet" not in result.output

    def test_list_unknown_history(self, cli_clipboard, sample_store, store_path):
        codec.save(sample_store, store_path)
        result = invoke(store_path, "list", "--history", "nope")
        assert result.exit_code == 1

    def test_list_empty(self, cli_clipboard, store_path):
        result = invoke(store_path, "list")
        assert result.exit_code == 0
        assert "No clipboard histories saved yet." in result.output

    def test_search(self, cli_clipboard, sample_store, store_path):
        codec.save(sample_store, store_path)
        result = invoke(store_path, "search", "kubectl")
        assert result.exit_code == 0, result.output
        assert "deploy" in result.output

    def test_search_no_results(self, cli_clipboard, sample_store, store_path):
        codec.save(sample_store, store_path)
        result = invoke(store_path, "search", "zz")
        assert result.exit_code == 1
        assert "No results found for search term: zz" in result.output

    def test_delete(self, cli_clipboard, sample_store, store_path):
        codec.save(sample_store, store_path)
        result = invoke(store_path, "delete", "work", "snippet")
        assert result.exit_code == 0, result.output
        assert "snippet" not in codec.load(store_path).to_document()["work"]

    def test_export_import_csv(
        self, cli_clipboard, sample_store, store_path, tmp_path
    ):
        codec.save(sample_store, store_path)
        export_path = tmp_path / "backup.csv"
        result = invoke(store_path, "export", str(export_path))
        assert result.exit_code == 0, result.output

        other_store = tmp_path / "other.json"
        result = invoke(other_store, "import", str(export_path))
        assert result.exit_code == 0, result.output
        assert "4 created" in result.output
        assert set(codec.load(other_store).flatten()) == set(sample_store.flatten())

    def test_export_explicit_format(
        self, cli_clipboard, sample_store, store_path, tmp_path
    ):
        codec.save(sample_store, store_path)
        export_path = tmp_path / "backup.txt"
        result = invoke(store_path, "export", str(export_path), "--format", "json")
        assert result.exit_code == 0, result.output
        assert codec.load(export_path) == sample_store

    def test_export_unknown_format(self, cli_clipboard, store_path, tmp_path):
        result = invoke(store_path, "export", str(tmp_path / "backup.xml"))
        assert result.exit_code == 1
        assert "Unsupported format" in result.output

    def test_corrupt_store(self, cli_clipboard, store_path):
        store_path.write_text("not json", encoding="utf-8")
        result = invoke(store_path, "list")
        assert result.exit_code == 1
        assert "not valid JSON" in result.output

    def test_store_from_environment(self, cli_clipboard, monkeypatch, tmp_path):
        env_store = tmp_path / "env.json"
        monkeypatch.setenv("CLIPSTASH_STORE_PATH", str(env_store))
        result = runner.invoke(cli.app, ["save", "h", "k"])
        assert result.exit_code == 0, result.output
        assert codec.load(env_store).get_entry("h", "k") == "from clipboard"
