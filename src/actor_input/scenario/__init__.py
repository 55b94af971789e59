"""Scenario harness: run command lines in order against a command registry."""

from actor_input.scenario.directives import (
    Directive,
    Scenario,
    ScenarioError,
    build_scenario,
    read_scenario_file,
)
from actor_input.scenario.runner import ScenarioResult, ScenarioRunner

__all__ = [
    "Directive",
    "Scenario",
    "ScenarioError",
    "ScenarioResult",
    "ScenarioRunner",
    "build_scenario",
    "read_scenario_file",
]
