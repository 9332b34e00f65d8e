"""Tests for the click command group."""

import pytest
from click.testing import CliRunner

from vent.cli import main


@pytest.fixture
def env(tmp_path, monkeypatch):
    store = tmp_path / "vent.csv"
    template = tmp_path / "vent.hbs"
    template.write_text("{{#each_reverse this}}{{@index}}:{{message}};{{/each_reverse}}")
    monkeypatch.setenv("VENT_TXT_CSV", str(store))
    monkeypatch.setenv("VENT_TXT_HBS", str(template))
    return store, template


@pytest.fixture
def runner():
    return CliRunner()


class TestAdd:
    def test_add_and_reply(self, runner, env):
        store, _ = env
        assert runner.invoke(main, ["add", "hello", "world"]).exit_code == 0
        assert runner.invoke(main, ["add", ">>0", "reply"]).exit_code == 0

        lines = store.read_text().splitlines()
        assert lines[0].endswith(",hello world")
        assert lines[1].endswith(",>>0 reply")

    def test_empty_message(self, runner, env):
        result = runner.invoke(main, ["add"])
        assert result.exit_code == 1
        assert "Empty message" in result.output


class TestEdit:
    def test_edit(self, runner, env):
        store, _ = env
        store.write_text("a,zero\nb,one\n")
        result = runner.invoke(main, ["edit", "1", "new", "text"])
        assert result.exit_code == 0
        lines = store.read_text().splitlines()
        assert lines[0] == "a,zero"
        assert lines[1].endswith(",new text")

    def test_invalid_id(self, runner, env):
        result = runner.invoke(main, ["edit", "x", "text"])
        assert result.exit_code == 1
        assert "Invalid message ID" in result.output

    def test_out_of_range(self, runner, env):
        store, _ = env
        store.write_text("a,zero\n")
        result = runner.invoke(main, ["edit", "4", "text"])
        assert result.exit_code == 1
        assert "Out-of-bound" in result.output


class TestRemove:
    def test_rm(self, runner, env):
        store, _ = env
        store.write_text("a,zero\nb,one\n")
        assert runner.invoke(main, ["rm", "0"]).exit_code == 0
        assert store.read_text().splitlines()[0].endswith(",[removed]")

    def test_missing_id(self, runner, env):
        result = runner.invoke(main, ["rm"])
        assert result.exit_code == 1
        assert "Invalid message ID" in result.output

    def test_missing_store(self, runner, env):
        result = runner.invoke(main, ["rm", "0"])
        assert result.exit_code == 1
        assert "Error:" in result.output


class TestRender:
    def test_render(self, runner, env):
        store, _ = env
        store.write_text("a,zero\nb,>>0 one\n")
        result = runner.invoke(main, ["render"])
        assert result.exit_code == 0
        assert result.output == "1: one;0:zero;"

    def test_render_error_prints_cause(self, runner, env):
        store, template = env
        store.write_text("a,zero\n")
        template.write_text("{{#each_reverse this}}{{#if_reply message}}x{{/if_reply}}{{/each_reverse}}")
        result = runner.invoke(main, ["render"])
        assert result.exit_code == 1
        assert "Failed to render" in result.output
        assert "Caused by" in result.output
        assert "invalid type" in result.output

    def test_malformed_store(self, runner, env):
        store, _ = env
        store.write_text("no comma\n")
        result = runner.invoke(main, ["render"])
        assert result.exit_code == 1
        assert "No date in entry" in result.output


def test_help_lists_environment(runner):
    result = runner.invoke(main, ["--help"])
    assert result.exit_code == 0
    assert "VENT_TXT_CSV" in result.output
    assert "VENT_TXT_HBS" in result.output
