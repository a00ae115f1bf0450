"""Command-line interface router for spine-bootstrap."""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from spine_bootstrap import __version__
from spine_bootstrap.bootstrap import Extension, configure_project
from spine_bootstrap.config import (
    ConfigLoadError,
    ConfigValidationError,
    dump_effective_config,
    load_config,
    load_snapshot,
    parse_override,
    write_snapshot,
)
from spine_bootstrap.constants import ASSEMBLE
from spine_bootstrap.errors import BootstrapError, BuildError, SnapshotLoadError
from spine_bootstrap.observability import setup_logging
from spine_bootstrap.project import Project
from spine_bootstrap.ui.render import CLIRenderer, create_renderer


@dataclass(frozen=True, slots=True)
class CLIError(RuntimeError):
    """Typed CLI failure with an explicit process exit code."""

    message: str
    exit_code: int = 1

    def __str__(self) -> str:
        return self.message


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse command router for all supported CLI workflows."""

    parser = argparse.ArgumentParser(
        prog="spine-bootstrap",
        description=(
            "spine-bootstrap - code generation setup for projects built on Spine.\n\n"
            "Common workflows:\n"
            "  spine-bootstrap plan              Show the configured build\n"
            "  spine-bootstrap build assemble    Run tasks in dependency order\n"
            "  spine-bootstrap snapshot          Show pinned artifact versions\n"
            "  spine-bootstrap config            Show the effective configuration\n"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--config",
        dest="config_path",
        default=None,
        help="Path to bootstrap TOML config (default: ./bootstrap.toml if present).",
    )
    common.add_argument(
        "--set",
        dest="overrides",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Override a config value, e.g. spine.java.enabled=true (repeatable).",
    )
    common.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        default=False,
        help="Show detailed output and debug logs.",
    )
    common.add_argument(
        "--no-color",
        action="store_true",
        default=False,
        help="Disable colored output (also respects NO_COLOR env var).",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # plan ----------------------------------------------------------------
    plan_parser = subparsers.add_parser(
        "plan",
        parents=[common],
        help="Configure the project and print the resulting build plan.",
    )
    output = plan_parser.add_mutually_exclusive_group()
    output.add_argument("--json", action="store_true", help="Emit deterministic JSON output")
    output.add_argument("--yaml", action="store_true", help="Emit YAML output")
    plan_parser.set_defaults(handler=_cmd_plan)

    # build ---------------------------------------------------------------
    build_parser_ = subparsers.add_parser(
        "build",
        parents=[common],
        help="Configure the project and execute tasks in dependency order.",
    )
    build_parser_.add_argument(
        "tasks", nargs="*", default=[ASSEMBLE], help=f"Tasks to run (default: {ASSEMBLE})"
    )
    build_parser_.add_argument("--json", action="store_true", help="Emit deterministic JSON output")
    build_parser_.set_defaults(handler=_cmd_build)

    # snapshot ------------------------------------------------------------
    snapshot_parser = subparsers.add_parser(
        "snapshot",
        parents=[common],
        help="Print the artifact snapshot the project is configured against.",
    )
    snapshot_parser.add_argument("--json", action="store_true", help="Emit JSON output")
    snapshot_parser.add_argument(
        "--write", dest="write_path", default=None, help="Also store the snapshot at this path"
    )
    snapshot_parser.set_defaults(handler=_cmd_snapshot)

    # config --------------------------------------------------------------
    config_parser = subparsers.add_parser(
        "config",
        parents=[common],
        help="Print the effective configuration after all overrides.",
    )
    config_parser.add_argument("--json", action="store_true", help="Emit JSON output")
    config_parser.set_defaults(handler=_cmd_config)

    return parser


# ---------------------------------------------------------------------------
# Entrypoints
# ---------------------------------------------------------------------------


def run_cli(argv: Sequence[str] | None = None) -> int:
    """Parse argv, route to a command handler, and return process exit code."""

    parser = build_parser()
    namespace = parser.parse_args(list(argv) if argv is not None else None)
    handler = getattr(namespace, "handler", None)
    if not callable(handler):
        parser.print_help(sys.stderr)
        return 2

    try:
        result = handler(namespace)
    except CLIError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return exc.exit_code
    return int(result)


def main(argv: Sequence[str] | None = None) -> int:
    """Compatibility wrapper for main-module wiring."""

    return run_cli(argv)


# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------


def _cmd_plan(args: argparse.Namespace) -> int:
    config = _load_effective_config(args)
    project, extension = _configure(config)
    plan = project.describe()

    if _flag(args, "json"):
        _emit_json(plan)
        return 0
    if _flag(args, "yaml"):
        print(yaml.safe_dump(plan, sort_keys=True, default_flow_style=False), end="")
        return 0

    renderer = _get_renderer(args)
    renderer.kv("Project", project.name)
    renderer.kv("Spine version", extension.version())
    renderer.kv("Targets", ", ".join(extension.enabled_targets) or "(none)")
    _render_plan(renderer, plan)
    return 0


def _cmd_build(args: argparse.Namespace) -> int:
    config = _load_effective_config(args)
    project, _ = _configure(config)
    requested = list(getattr(args, "tasks", None) or [ASSEMBLE])

    try:
        results = project.tasks.execute(requested)
    except BuildError as exc:
        raise CLIError(str(exc), exit_code=1) from exc

    if _flag(args, "json"):
        _emit_json(
            {
                "command": "build",
                "project": project.name,
                "requested": requested,
                "tasks": [
                    {"name": result.task, "outcome": result.outcome.value} for result in results
                ],
            }
        )
        return 0

    renderer = _get_renderer(args)
    renderer.table(
        ["Task", "Outcome"],
        [[result.task, result.outcome.value] for result in results],
        title=f"Executed {len(results)} task(s) for {project.name}:",
    )
    renderer.ok("BUILD SUCCESSFUL")
    return 0


def _cmd_snapshot(args: argparse.Namespace) -> int:
    config = _load_effective_config(args)
    snapshot_path = config.get("paths", {}).get("artifact_snapshot")
    try:
        snapshot = load_snapshot(snapshot_path)
    except SnapshotLoadError as exc:
        raise CLIError(str(exc), exit_code=2) from exc

    write_path = getattr(args, "write_path", None)
    if isinstance(write_path, str) and write_path:
        write_snapshot(snapshot, Path(write_path))

    values = snapshot.to_properties()
    if _flag(args, "json"):
        _emit_json(values)
        return 0

    renderer = _get_renderer(args)
    renderer.kv("Source", snapshot_path or "(bundled)")
    renderer.table(["Key", "Value"], [[key, values[key]] for key in sorted(values)])
    return 0


def _cmd_config(args: argparse.Namespace) -> int:
    config = _load_effective_config(args)

    if _flag(args, "json"):
        print(dump_effective_config(config))
        return 0

    renderer = _get_renderer(args)
    renderer.text(json.dumps(config, indent=2, sort_keys=True, ensure_ascii=False))
    return 0


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _configure(config: Mapping[str, Any]) -> tuple[Project, Extension]:
    try:
        return configure_project(config)
    except BootstrapError as exc:
        raise CLIError(str(exc), exit_code=2) from exc


def _render_plan(renderer: CLIRenderer, plan: Mapping[str, Any]) -> None:
    renderer.section("Plugins:")
    renderer.items(plan["plugins"])

    renderer.table(
        ["Repository", "Content", "Groups"],
        [
            [item["url"], item["content"], ", ".join(item["groups"]) or "*"]
            for item in plan["repositories"]
        ],
        title="Repositories:",
    )

    for name, configuration in plan["configurations"].items():
        if not configuration["dependencies"] and not configuration["exclusions"]:
            continue
        suffix = "" if configuration["transitive"] else " (non-transitive)"
        renderer.section(f"{name}{suffix}:")
        renderer.items(configuration["dependencies"])
        renderer.items(configuration["exclusions"], prefix="exclude ")

    if plan["forced"]:
        renderer.section("Forced versions:")
        renderer.items(plan["forced"])

    protobuf = plan.get("protobuf")
    if protobuf is not None:
        renderer.section(f"protoc: {protobuf['protoc']}")
        for task_name, task in protobuf["tasks"].items():
            jobs = [_job_label(name, options) for name, options in task["builtins"].items()]
            jobs += [
                _job_label(name, options, plugin=True)
                for name, options in task["plugins"].items()
            ]
            renderer.items([f"{task_name}: {', '.join(jobs) or '(no jobs)'}"])

    renderer.table(
        ["Task", "Enabled", "Depends on"],
        [
            [name, "yes" if task["enabled"] else "no", ", ".join(task["depends_on"])]
            for name, task in plan["tasks"].items()
        ],
        title="Tasks:",
    )


def _job_label(name: str, options: Sequence[str], *, plugin: bool = False) -> str:
    label = f"{name}[plugin]" if plugin else name
    return f"{label}({', '.join(options)})" if options else label


def _emit_json(payload: Mapping[str, object]) -> None:
    """Emit a JSON payload to stdout with deterministic formatting."""

    print(json.dumps(payload, sort_keys=True, separators=(",", ":"), ensure_ascii=False))


def _get_renderer(args: argparse.Namespace) -> CLIRenderer:
    """Retrieve or create a CLI renderer from the parsed namespace."""

    return create_renderer(no_color=_flag(args, "no_color"), verbose=_flag(args, "verbose"))


def _load_effective_config(args: argparse.Namespace) -> dict[str, Any]:
    config_path = getattr(args, "config_path", None)
    try:
        overrides = dict(parse_override(raw) for raw in getattr(args, "overrides", None) or ())
        config = load_config(config_path, cli_overrides=overrides)
    except (ConfigLoadError, ConfigValidationError) as exc:
        raise CLIError(str(exc), exit_code=2) from exc

    setup_logging(config.get("observability"), verbose=_flag(args, "verbose"))
    return config


def _flag(args: argparse.Namespace, name: str) -> bool:
    value = getattr(args, name, False)
    return bool(value)


__all__ = ["CLIError", "build_parser", "main", "run_cli"]
