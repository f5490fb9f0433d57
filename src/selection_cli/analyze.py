"""Selection engine CLI: analyze workout selections and generated plans.

Usage:
    selection-engine analyze --selections sel.json [--context ctx.json]
    selection-engine validate --selections sel.json [--all]
    selection-engine change --selections sel.json --field energy --value 1
    selection-engine duration --duration 22 [--energy 2] [--fitness-level beginner]
    selection-engine confidence --plan plan.json [--profile profile.json] [--breakdown]

Every command prints JSON to stdout. Exit codes: 0 on success, 1 when
``validate`` finds critical issues, 2 on unreadable or invalid input.
"""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import sys
from pathlib import Path
from typing import Any, Sequence

from selection_engine.confidence import ConfidenceService
from selection_engine.cross_component import CrossComponentService
from selection_engine.duration import DurationStrategy
from selection_engine.exceptions import SelectionEngineError
from selection_engine.models.context import AnalysisContext
from selection_engine.models.enums import DEFAULT_ENERGY_LEVEL
from selection_engine.serialization import (
    context_from_dict,
    plan_from_dict,
    profile_from_dict,
    selection_field_name,
    selections_from_dict,
    strategy_params_from_dict,
    to_dict,
    to_json_string,
)

from selection_cli.config import DEFAULT_PROFILE_PATH, JSON_INDENT, LOG_LEVEL

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID_CONFIGURATION = 1
EXIT_BAD_INPUT = 2


def _load_json(path: str | Path) -> Any:
    """Load a JSON document from disk."""
    with open(path) as f:
        return json.load(f)


def _load_context(args: argparse.Namespace) -> AnalysisContext:
    """Context file, with the profile file (if any) taking precedence."""
    context = context_from_dict(_load_json(args.context)) if args.context else AnalysisContext()
    profile_path = args.profile or DEFAULT_PROFILE_PATH
    if profile_path:
        context = dataclasses.replace(context, user_profile=profile_from_dict(_load_json(profile_path)))
    return context


def _emit(payload: Any, indent: int) -> None:
    print(to_json_string(payload, indent=indent))


def cmd_analyze(args: argparse.Namespace) -> int:
    selections = selections_from_dict(_load_json(args.selections))
    analysis = CrossComponentService().analyze_interactions(selections, _load_context(args))
    _emit(analysis, args.indent)
    return EXIT_OK


def cmd_validate(args: argparse.Namespace) -> int:
    selections = selections_from_dict(_load_json(args.selections))
    result = CrossComponentService().validate_configuration(
        selections, _load_context(args), include_all=args.all
    )
    _emit(result, args.indent)
    if not result.is_valid:
        logger.warning("Configuration has %d critical issue(s)", len(result.critical_issues))
        return EXIT_INVALID_CONFIGURATION
    return EXIT_OK


def cmd_change(args: argparse.Namespace) -> int:
    selections = selections_from_dict(_load_json(args.selections))
    field_name = selection_field_name(args.field)
    try:
        raw_value = json.loads(args.value)
    except json.JSONDecodeError:
        # Bare words like --value strength
        raw_value = args.value
    new_value = getattr(selections_from_dict({field_name: raw_value}), field_name)
    change = CrossComponentService().analyze_component_change(
        field_name, new_value, selections, _load_context(args)
    )
    _emit(change, args.indent)
    return EXIT_OK


def cmd_duration(args: argparse.Namespace) -> int:
    if args.params:
        params = strategy_params_from_dict(_load_json(args.params))
    else:
        params = strategy_params_from_dict(
            {
                "duration": args.duration,
                "fitness_level": args.fitness_level,
                "focus": args.focus,
                "energy_level": args.energy,
                "soreness_areas": args.soreness,
                "equipment": args.equipment,
            }
        )

    strategy = DurationStrategy()
    result = strategy.select_strategy(params)
    _emit(
        {
            "strategy": to_dict(result),
            "valid": strategy.validate_strategy(result, params),
            "optimization": to_dict(strategy.create_duration_optimization(params, result)),
        },
        args.indent,
    )
    return EXIT_OK


def cmd_confidence(args: argparse.Namespace) -> int:
    plan = plan_from_dict(_load_json(args.plan))
    context = _load_context(args)
    service = ConfidenceService()

    payload: dict[str, Any] = {
        "confidence": to_dict(service.calculate_confidence(context.user_profile, plan, context))
    }
    if args.breakdown:
        payload["breakdown"] = to_dict(
            service.get_factor_breakdown(context.user_profile, plan, context)
        )
    _emit(payload, args.indent)
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Workout selection analysis engine")
    parser.add_argument("--log-level", default=LOG_LEVEL, help="Logging level (default: %(default)s)")
    parser.add_argument("--indent", type=int, default=JSON_INDENT, help="JSON output indent")
    sub = parser.add_subparsers(dest="command", required=True)

    def _with_context(p: argparse.ArgumentParser) -> argparse.ArgumentParser:
        p.add_argument("--context", help="Analysis context JSON file")
        p.add_argument("--profile", help="User profile JSON file (overrides the context's)")
        return p

    p = _with_context(sub.add_parser("analyze", help="Conflicts, synergies and recommendations"))
    p.add_argument("--selections", required=True, help="Workout selections JSON file")
    p.set_defaults(func=cmd_analyze)

    p = _with_context(sub.add_parser("validate", help="Classify conflicts as blocking or advisory"))
    p.add_argument("--selections", required=True, help="Workout selections JSON file")
    p.add_argument("--all", action="store_true", help="Include every conflict in the output")
    p.set_defaults(func=cmd_validate)

    p = _with_context(sub.add_parser("change", help="What-if analysis for one selection field"))
    p.add_argument("--selections", required=True, help="Workout selections JSON file")
    p.add_argument("--field", required=True, help="Selection field to change")
    p.add_argument("--value", required=True, help="New value, as JSON")
    p.set_defaults(func=cmd_change)

    p = sub.add_parser("duration", help="Map a requested duration onto a supported bucket")
    source = p.add_mutually_exclusive_group(required=True)
    source.add_argument("--params", help="Strategy parameters JSON file")
    source.add_argument("--duration", type=float, help="Requested duration in minutes")
    p.add_argument("--fitness-level", default="some experience")
    p.add_argument("--focus")
    p.add_argument("--energy", type=int, default=DEFAULT_ENERGY_LEVEL, help="Energy 1-10")
    p.add_argument("--soreness", nargs="*", default=[], help="Sore body areas")
    p.add_argument("--equipment", nargs="*", default=[], help="Available equipment")
    p.set_defaults(func=cmd_duration)

    p = _with_context(sub.add_parser("confidence", help="Score a generated plan"))
    p.add_argument("--plan", required=True, help="Generated plan JSON file")
    p.add_argument("--breakdown", action="store_true", help="Include per-factor breakdown")
    p.set_defaults(func=cmd_confidence)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        return args.func(args)
    except FileNotFoundError as exc:
        logger.error("Input file not found: %s", exc.filename)
    except json.JSONDecodeError as exc:
        logger.error("Input is not valid JSON: %s", exc)
    except SelectionEngineError as exc:
        logger.error("%s", exc)
    return EXIT_BAD_INPUT


if __name__ == "__main__":
    sys.exit(main())
