# Copyright 2026 Guardgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the Guardgen command-line interface."""

import argparse
import errno
import logging
import sys
from pathlib import Path

from guardgen.compiler.errors import CompilerError
from guardgen.compiler.generator import generate_validators_source
from guardgen.compiler.semantic_analysis import analyze
from guardgen.model.api import ApiModel
from guardgen.schema.loader import SchemaError, load_api_model
from guardgen.workspace.config import (
    CONFIG_FILE_NAME,
    WorkspaceConfig,
    WorkspaceConfigError,
    load_workspace_config,
)

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the Guardgen CLI."""
    parser = argparse.ArgumentParser(
        prog="guardgen",
        description="Guardgen - runtime type-guard generator for API schemas",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # init subcommand
    init_parser = subparsers.add_parser(
        "init",
        help="Initialize a new Guardgen project",
        description=f"Create a template {CONFIG_FILE_NAME} in a directory.",
    )
    init_parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Directory to initialize the project in (default: current directory)",
    )

    # check subcommand
    check_parser = subparsers.add_parser(
        "check",
        help="Check the schema for errors",
        description="Report every unresolved reference, malformed status code and name collision.",
    )
    check_parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Directory containing the Guardgen project (default: current directory)",
    )

    # generate subcommand
    generate_parser = subparsers.add_parser(
        "generate",
        help="Generate validators",
        description="Generate every validator document configured in the project.",
    )
    generate_parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Directory containing the Guardgen project (default: current directory)",
    )
    generate_parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print the generated documents instead of writing them",
    )

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################

_CONFIG_TEMPLATE = """\
# Guardgen project configuration.
schema: api.yaml
outputs:
  - target: typescript
    path: generated/validators.ts
"""


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "init":
        return _cmd_init(args)
    if args.command == "check":
        return _cmd_check(args)
    if args.command == "generate":
        return _cmd_generate(args)
    return 0


def _cmd_init(args: argparse.Namespace) -> int:
    """Handle the init subcommand."""
    directory = Path(args.directory).resolve()

    if not directory.exists():
        print(f"Error: directory '{directory}' does not exist.", file=sys.stderr)
        return 1

    config_file = directory / CONFIG_FILE_NAME

    if config_file.exists():
        print(
            f"Error: project already exists at '{config_file}'.",
            file=sys.stderr,
        )
        return 1

    config_file.write_text(_CONFIG_TEMPLATE, encoding="utf-8")
    print(f"Initialized Guardgen project at '{config_file}'.")
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    """Handle the check subcommand."""
    loaded = _load_project(Path(args.directory).resolve())
    if loaded is None:
        return 1
    _, api = loaded

    errors = analyze(api)
    for error in errors:
        print(f"Error: {error.message}", file=sys.stderr)
    if errors:
        return 1

    print(f"No issues found in {len(api.types)} type(s) and {len(api.endpoints)} endpoint(s).")
    return 0


def _cmd_generate(args: argparse.Namespace) -> int:
    """Handle the generate subcommand."""
    directory = Path(args.directory).resolve()
    loaded = _load_project(directory)
    if loaded is None:
        return 1
    config, api = loaded

    # Compile every output before writing any, so a failure leaves no partial result.
    documents: list[tuple[Path, str]] = []
    for output in config.outputs:
        try:
            source = generate_validators_source(api, output.target)
        except CompilerError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            for note in getattr(exc, "__notes__", []):
                print(f"Error: {note}", file=sys.stderr)
            return 1
        documents.append((directory / output.path, source))

    if args.stdout:
        for _, source in documents:
            print(source)
        return 0

    try:
        _write_documents(documents)
    except OSError as exc:
        print(f"Error: cannot write generated validators: {exc}", file=sys.stderr)
        return 1
    for path, _ in documents:
        print(f"Wrote {path}")
    return 0


def _write_documents(documents: list[tuple[Path, str]]) -> None:
    """Write every document, replacing no destination unless all of them could be staged.

    Each document is first written to a hidden file beside its destination and
    moved into place afterwards. Staged files are removed if any step fails.
    """
    staged: list[tuple[Path, Path]] = []
    try:
        for path, source in documents:
            if path.is_dir():
                raise IsADirectoryError(errno.EISDIR, "Is a directory", str(path))
            path.parent.mkdir(parents=True, exist_ok=True)
            staging = path.with_name(f".{path.name}.tmp")
            staging.write_text(source + "\n", encoding="utf-8")
            staged.append((staging, path))
        for staging, path in staged:
            staging.replace(path)
    finally:
        for staging, _ in staged:
            staging.unlink(missing_ok=True)


def _load_project(directory: Path) -> tuple[WorkspaceConfig, ApiModel] | None:
    """Load the project config and schema of *directory*, reporting failures on stderr."""
    if not directory.exists():
        print(f"Error: directory '{directory}' does not exist.", file=sys.stderr)
        return None

    config_file = directory / CONFIG_FILE_NAME
    if not config_file.exists():
        print(
            f"Error: no Guardgen project found at '{directory}'. Run 'guardgen init' to initialize a project.",
            file=sys.stderr,
        )
        return None

    try:
        config = load_workspace_config(config_file)
        api = load_api_model(directory / config.schema)
    except (WorkspaceConfigError, SchemaError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return None

    return config, api
