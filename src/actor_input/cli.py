"""
cli.py

PURPOSE: Command-line interface for inspecting actor input handling.
DEPENDENCIES: typer, rich

ARCHITECTURE NOTES:
The CLI provides commands for:
- parse: Parse one line (or an interactive session) and show the artifact
- move: Resolve a movement word against a room of a world file
- scenario: Run command lines in order against a world file
- config: Show current configuration

Parse and movement failures are normal results, not errors: the CLI only
exits non-zero when its own inputs (grammar, world, scenario files) are
unusable, or when a scenario fails on unknown commands.
"""

import asyncio
import json
import logging
from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.logging import RichHandler

from actor_input import __version__
from actor_input.config import get_settings
from actor_input.engine.actions import build_command_table
from actor_input.models.artifact import ParseArtifact, describe_error
from actor_input.models.grammar import DEFAULT_GRAMMAR, Grammar, GrammarLoadError, load_grammar
from actor_input.models.world import WorldLoadError, load_world
from actor_input.observability import init_telemetry, shutdown_telemetry
from actor_input.parser.movement import MovementResolver
from actor_input.parser.parser import InputParser
from actor_input.scenario.directives import ScenarioError, build_scenario, read_scenario_file
from actor_input.scenario.runner import ScenarioEvent, ScenarioRunner
from actor_input.ui import plain

app = typer.Typer(
    name="actor-input",
    help="Parse actor input and resolve movement words for text adventures.",
    add_completion=False,
)

console = Console()

INTERACTIVE_PROMPT = "parse-input> "
EXIT_WORDS = frozenset({"exit", "quit"})


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"actor-input version {__version__}")
        raise typer.Exit()


def configure_logging(level: str) -> None:
    """Send log records to stderr through Rich."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
    )


@app.callback()
def main(
    _version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """Actor input tools - parse commands and resolve movement."""
    configure_logging(get_settings().effective_log_level)


def resolve_grammar(grammar_file: Path | None) -> tuple[Grammar, Path | None]:
    """Pick the grammar from --grammar, then settings, then the built-in default."""
    path = grammar_file or get_settings().grammar_file
    if path is None:
        return DEFAULT_GRAMMAR, None

    try:
        return load_grammar(path), path
    except GrammarLoadError as e:
        plain.print_error(str(e))
        raise typer.Exit(1) from None


def show_artifact(
    artifact: ParseArtifact,
    grammar: Grammar,
    grammar_path: Path | None,
    json_output: bool,
) -> None:
    """Print one parse result."""
    parsed = artifact.to_dict()

    if json_output:
        payload = {
            "grammar": grammar.name,
            "grammarPath": str(grammar_path) if grammar_path else None,
            "actorInput": artifact.actor_input,
            "parsedInput": parsed,
        }
        typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    plain.print_raw(f"grammar: {grammar.name}")
    plain.print_raw(f"input: {artifact.actor_input}")
    plain.print_raw("parsed:")
    plain.print_raw(json.dumps(parsed, indent=2, ensure_ascii=False))

    message = describe_error(artifact)
    if message:
        plain.print_error(message)

    if get_settings().debug:
        plain.print_debug({"tokens": artifact.tokens(), "args": artifact.args})


@app.command()
def parse(
    words: Annotated[
        list[str] | None,
        typer.Argument(
            help="Actor input to parse (words are joined with spaces). "
            "Omit to start an interactive session.",
        ),
    ] = None,
    json_output: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Emit JSON output",
        ),
    ] = False,
    grammar_file: Annotated[
        Path | None,
        typer.Option(
            "--grammar",
            "-g",
            help="Grammar JSON file to parse with (default: built-in grammar)",
        ),
    ] = None,
) -> None:
    """Parse actor input and show the parse artifact."""
    grammar, grammar_path = resolve_grammar(grammar_file)
    parser = InputParser(grammar)

    if words:
        show_artifact(parser.parse(" ".join(words)), grammar, grammar_path, json_output)
        return

    if not json_output:
        plain.print_raw(f"grammar: {grammar.name}")
        plain.print_raw('Type input lines to parse. Type "exit" or "quit" to leave.')

    while True:
        try:
            line = plain.print_prompt(INTERACTIVE_PROMPT)
        except (EOFError, KeyboardInterrupt):
            break

        actor_input = line.strip()
        if actor_input in EXIT_WORDS:
            break
        if not actor_input:
            continue

        show_artifact(parser.parse(actor_input), grammar, grammar_path, json_output)


@app.command()
def move(
    world_file: Annotated[
        Path,
        typer.Argument(
            help="Path to the world JSON file",
            exists=True,
            readable=True,
        ),
    ],
    word: Annotated[
        str,
        typer.Argument(help="Movement word to resolve (e.g. n, ne, northwest, portal)"),
    ],
    room_id: Annotated[
        str | None,
        typer.Option(
            "--room",
            "-r",
            help="Room to resolve in (default: the world's start room)",
        ),
    ] = None,
    json_output: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Emit JSON output",
        ),
    ] = False,
    grammar_file: Annotated[
        Path | None,
        typer.Option(
            "--grammar",
            "-g",
            help="Grammar JSON file with direction tables",
        ),
    ] = None,
) -> None:
    """Resolve a movement word against a room's exits."""
    grammar, _ = resolve_grammar(grammar_file)

    try:
        world = load_world(world_file)
    except WorldLoadError as e:
        plain.print_error(str(e))
        raise typer.Exit(1) from None

    room = world.get_room(room_id) if room_id else world.initial_room
    if room is None:
        plain.print_error(f"Room not found: {room_id}")
        raise typer.Exit(1)

    normalized_word = word.strip().lower()
    resolution = MovementResolver(grammar).resolve(normalized_word, room.get_exits())

    if json_output:
        payload: dict[str, Any] = {"room": room.id, "word": normalized_word, "resolution": None}
        if resolution is not None:
            payload["resolution"] = {
                "direction": resolution.direction,
                "roomExit": resolution.room_exit.model_dump() if resolution.room_exit else None,
            }
        typer.echo(json.dumps(payload, indent=2))
        return

    if resolution is None:
        plain.print_message(f'"{normalized_word}" is not a movement word in {room.id}.')
    elif resolution.room_exit is None:
        plain.print_message(f"{resolution.direction}: no exit from {room.id}.")
    else:
        plain.print_success(f"{resolution.direction} -> {resolution.room_exit.target}")


@app.command()
def scenario(
    world_file: Annotated[
        Path,
        typer.Argument(
            help="Path to the world JSON file",
            exists=True,
            readable=True,
        ),
    ],
    commands: Annotated[
        list[str] | None,
        typer.Option(
            "--command",
            "-c",
            help="Command line to run (repeatable)",
        ),
    ] = None,
    scenario_file: Annotated[
        Path | None,
        typer.Option(
            "--scenario",
            "-s",
            help="Scenario file with command/room directives",
        ),
    ] = None,
    room_id: Annotated[
        str | None,
        typer.Option(
            "--room",
            "-r",
            help="Room to start in (overrides the scenario file)",
        ),
    ] = None,
    fail_on_unknown: Annotated[
        bool,
        typer.Option(
            "--fail-on-unknown",
            help="Exit non-zero if any unknown commands are encountered",
        ),
    ] = False,
    json_output: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Emit machine-readable JSON output",
        ),
    ] = False,
    grammar_file: Annotated[
        Path | None,
        typer.Option(
            "--grammar",
            "-g",
            help="Grammar JSON file to parse and resolve with",
        ),
    ] = None,
) -> None:
    """Run command lines in order against a world, like a player would."""
    settings = get_settings()
    grammar, _ = resolve_grammar(grammar_file)

    try:
        world = load_world(world_file)
        directives = read_scenario_file(scenario_file) if scenario_file else []
        plan = build_scenario(directives, commands=commands, room=room_id)
    except (WorldLoadError, ScenarioError) as e:
        plain.print_error(f"[error] {e}")
        raise typer.Exit(1) from None

    init_telemetry(settings.otel)

    total = len(plan.commands)

    def on_event(event: ScenarioEvent) -> None:
        """Display events as they happen (text mode)."""
        match event["type"]:
            case "start":
                plain.print_raw(f"[info] scenario starting (commands={total})")
            case "run":
                plain.print_raw(f"[run] {event['index']}/{total}: {event['raw']}")
            case "output":
                plain.print_raw(event["text"])

    runner = ScenarioRunner(
        build_command_table(),
        world,
        parser=InputParser(grammar),
        resolver=MovementResolver(grammar),
    )

    try:
        result = asyncio.run(
            runner.run(
                plan,
                fail_on_unknown=fail_on_unknown,
                on_event=None if json_output else on_event,
            )
        )
    except ScenarioError as e:
        plain.print_error(f"[error] {e}")
        raise typer.Exit(1) from None
    finally:
        shutdown_telemetry()

    if json_output:
        typer.echo(json.dumps(result.to_payload(), indent=2))
    else:
        plain.print_raw(
            f"[info] scenario complete (commands={result.commands}, "
            f"unknown={result.unknown}, failed={result.failed})"
        )

    if result.failed:
        raise typer.Exit(result.failed)


@app.command("config")
def config_cmd(
    show: Annotated[
        bool,
        typer.Option(
            "--show",
            "-s",
            help="Show current configuration",
        ),
    ] = True,
) -> None:
    """Show current configuration."""
    if show:
        settings = get_settings()
        console.print("[bold]Current Configuration:[/bold]")
        console.print(f"  Log level: {settings.log_level}")
        console.print(f"  Debug: {settings.debug}")
        grammar_status = settings.grammar_file if settings.grammar_file else "(built-in)"
        console.print(f"  Grammar file: {grammar_status}")
        console.print()
        console.print("[bold]OpenTelemetry Settings:[/bold]")
        console.print(f"  Enabled: {settings.otel.enabled}")
        console.print(f"  Service name: {settings.otel.service_name}")
        endpoint_status = settings.otel.endpoint if settings.otel.endpoint else "(console only)"
        console.print(f"  Endpoint: {endpoint_status}")


if __name__ == "__main__":
    app()
