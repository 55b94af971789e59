"""
TEST DOC: CLI

WHAT: Tests for the actor-input command line
WHY: The CLI is how worlds and grammars are checked by hand and in scripts
HOW: Invoke commands through typer's CliRunner

CASES:
- parse: text and JSON output, interactive sessions
- move: resolutions and blocked directions
- scenario: text and JSON runs, --fail-on-unknown
- config and --version

EDGE CASES:
- Empty input
- Missing grammar files
- Bad scenario directives
- Unknown rooms
"""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from actor_input import __version__
from actor_input.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch):
    """Keep developer environment settings out of CLI runs."""
    for name in ("ACTOR_INPUT_GRAMMAR_FILE", "ACTOR_INPUT_DEBUG", "ACTOR_INPUT_OTEL_ENABLED"):
        monkeypatch.delenv(name, raising=False)


class TestParse:
    """Tests for the parse command."""

    def test_json_output(self):
        result = runner.invoke(app, ["parse", "--json", "put", "rusty", "sword", "in", "old", "chest"])
        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload["grammar"] == "default"
        assert payload["grammarPath"] is None
        assert payload["actorInput"] == "put rusty sword in old chest"
        parsed = payload["parsedInput"]
        assert parsed["intentToken"] == "put"
        assert parsed["primaryTargetSpan"] == ["rusty", "sword"]
        assert parsed["relationToken"] == "in"
        assert parsed["secondaryTargetSpan"] == ["old", "chest"]
        assert parsed["classification"] == "success"

    def test_empty_input_json(self):
        """An empty argument is a normal UNKNOWN_INTENT result, not a CLI error."""
        result = runner.invoke(app, ["parse", "--json", ""])
        assert result.exit_code == 0
        parsed = json.loads(result.stdout)["parsedInput"]
        assert parsed["classification"] == "unknown intent"
        assert parsed["errorEnvelope"]["code"] == "UNKNOWN_INTENT"

    def test_text_output(self):
        result = runner.invoke(app, ["parse", "take", "lamp"])
        assert result.exit_code == 0
        assert "grammar: default" in result.output
        assert "input: take lamp" in result.output
        assert '"intentToken": "take"' in result.output

    def test_text_output_describes_error(self):
        result = runner.invoke(app, ["parse", "put", "in", "chest"])
        assert result.exit_code == 0
        assert "SEMANTIC_ERROR" in result.output
        assert "primaryTargetSpan" in result.output

    def test_alternate_grammar(self, alt_grammar_path: Path):
        result = runner.invoke(
            app, ["parse", "--json", "--grammar", str(alt_grammar_path), "put", "sword", "in", "chest"]
        )
        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload["grammar"] == "minimal"
        assert payload["grammarPath"] == str(alt_grammar_path)
        assert payload["parsedInput"]["relationToken"] is None

    def test_grammar_from_environment(self, alt_grammar_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("ACTOR_INPUT_GRAMMAR_FILE", str(alt_grammar_path))
        result = runner.invoke(app, ["parse", "--json", "look"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["grammar"] == "minimal"

    def test_missing_grammar(self, tmp_path: Path):
        result = runner.invoke(app, ["parse", "--grammar", str(tmp_path / "nope.json"), "look"])
        assert result.exit_code == 1
        assert "Grammar not found" in result.output

    def test_interactive(self):
        """Without words the command reads lines until exit."""
        result = runner.invoke(app, ["parse"], input="look\n\ntake lamp\nexit\nnever parsed\n")
        assert result.exit_code == 0
        assert "parse-input>" in result.output
        assert "input: look" in result.output
        assert "input: take lamp" in result.output
        assert "never parsed" not in result.output

    def test_interactive_eof(self):
        result = runner.invoke(app, ["parse"], input="look\n")
        assert result.exit_code == 0
        assert "input: look" in result.output


class TestMove:
    """Tests for the move command."""

    def test_resolves_abbreviation(self, sample_world_path: Path):
        result = runner.invoke(app, ["move", str(sample_world_path), "n", "--json"])
        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload["room"] == "entrance"
        assert payload["word"] == "n"
        assert payload["resolution"]["direction"] == "north"
        assert payload["resolution"]["roomExit"]["target"] == "library"

    def test_blocked(self, sample_world_path: Path):
        result = runner.invoke(app, ["move", str(sample_world_path), "W", "--json"])
        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload["word"] == "w"
        assert payload["resolution"] == {"direction": "west", "roomExit": None}

    def test_unresolved(self, sample_world_path: Path):
        result = runner.invoke(app, ["move", str(sample_world_path), "xyzzy", "--json"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["resolution"] is None

    def test_text_output(self, sample_world_path: Path):
        result = runner.invoke(app, ["move", str(sample_world_path), "sw", "--room", "garden"])
        assert result.exit_code == 0
        assert "southwest -> entrance" in result.output

    def test_unknown_room(self, sample_world_path: Path):
        result = runner.invoke(app, ["move", str(sample_world_path), "n", "--room", "attic"])
        assert result.exit_code == 1
        assert "Room not found: attic" in result.output

    def test_bracketed_word_printed_verbatim(self, sample_world_path: Path):
        """Words that look like Rich markup are shown as typed."""
        result = runner.invoke(app, ["move", str(sample_world_path), "[/x]"])
        assert result.exit_code == 0
        assert '"[/x]" is not a movement word in entrance.' in result.output

    def test_invalid_world_file(self, tmp_path: Path):
        path = tmp_path / "world.json"
        path.write_text(
            json.dumps({"rooms": [{"id": "a", "name": "A", "exits": ["north"]}]}),
            encoding="utf-8",
        )
        result = runner.invoke(app, ["move", str(path), "n"])
        assert result.exit_code == 1
        assert "Invalid world" in result.output


class TestScenario:
    """Tests for the scenario command."""

    def test_scenario_file(self, sample_world_path: Path, sample_scenario_path: Path):
        result = runner.invoke(
            app, ["scenario", str(sample_world_path), "--scenario", str(sample_scenario_path)]
        )
        assert result.exit_code == 0
        assert "[info] scenario starting (commands=3)" in result.output
        assert "[run] 1/3: look" in result.output
        assert "[run] 2/3: n" in result.output
        assert "Library" in result.output
        assert "[info] scenario complete (commands=3, unknown=0, failed=0)" in result.output

    def test_json(self, sample_world_path: Path):
        result = runner.invoke(
            app, ["scenario", str(sample_world_path), "-c", "look", "-c", "xyzzy", "--json"]
        )
        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload["meta"] == {"commands": 2, "unknown": 1, "failed": 0}
        assert payload["events"][0] == {"type": "start", "commands": 2}
        assert payload["events"][-1] == {"type": "complete"}

    def test_default_look(self, sample_world_path: Path):
        result = runner.invoke(app, ["scenario", str(sample_world_path), "--room", "vault"])
        assert result.exit_code == 0
        assert "[run] 1/1: look" in result.output
        assert "Cold stone walls." in result.output

    def test_fail_on_unknown(self, sample_world_path: Path):
        result = runner.invoke(
            app, ["scenario", str(sample_world_path), "-c", "xyzzy", "--fail-on-unknown"]
        )
        assert result.exit_code == 1
        assert "unknown=1, failed=1" in result.output

    def test_bad_directive(self, sample_world_path: Path, tmp_path: Path):
        path = tmp_path / "bad.scenario"
        path.write_text("teleport: vault\n", encoding="utf-8")
        result = runner.invoke(app, ["scenario", str(sample_world_path), "-s", str(path)])
        assert result.exit_code == 1
        assert "[error]" in result.output
        assert 'Unknown scenario directive "teleport"' in result.output

    def test_unknown_room(self, sample_world_path: Path):
        result = runner.invoke(app, ["scenario", str(sample_world_path), "--room", "attic"])
        assert result.exit_code == 1
        assert "room not found: attic" in result.output


class TestMisc:
    """Tests for --version and config."""

    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_config(self):
        result = runner.invoke(app, ["config"])
        assert result.exit_code == 0
        assert "Grammar file: (built-in)" in result.output
        assert "Log level: WARNING" in result.output
