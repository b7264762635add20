#!/usr/bin/env python3
import argparse
import os
import subprocess
from typing import List

from leo_lib import (
    LeoError,
    check_workspace,
    create_library,
    create_react_app,
    run_command,
    scaffold_project,
)
from leo_lib.commands import describe_failure
from leo_lib.config import PROJECT_TEMPLATE, component_command
from leo_lib.console import error, info, show_banner, success


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="leo",
        description="Scaffold a React starter project and add apps and libraries to its npm workspace.",
    )
    parser.add_argument(
        "-C",
        "--cwd",
        default=os.getcwd(),
        help="Directory to run in (default: current directory)",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="<command>")

    init = subparsers.add_parser("init", help="Sets up the project")
    init.add_argument(
        "--template",
        default=PROJECT_TEMPLATE,
        help=f"degit source of the starter project (default: {PROJECT_TEMPLATE})",
    )

    for command, help_text in (
        ("create:ts-lib", "Create a new TypeScript library"),
        ("create:react-lib", "Create a new React library"),
        ("create:react-app", "Create a new React app"),
    ):
        sub = subparsers.add_parser(command, help=help_text)
        # checked by the generator so a missing name exits 1 like every other precondition
        sub.add_argument("name", nargs="?", default="")

    component = subparsers.add_parser("component", help="Adds Shadcn component to the ui-kit")
    component.add_argument("name", nargs="?", default="")
    return parser


def _add_component(root: str, name: str) -> None:
    if not name:
        raise LeoError("Please provide a component name")
    try:
        run_command(component_command(name), root)
    except (subprocess.CalledProcessError, OSError) as e:
        raise LeoError(f"Error adding component: {describe_failure(e)}") from e
    success(f"Successfully added Shadcn component to 'packages/ui-kit': {name}")


def _run_generator(root: str, command: str, name: str) -> None:
    check_workspace(root)
    info(f"Running {command} with name: {name}")
    if command == "create:react-app":
        create_react_app(root, name, run=run_command)
    else:
        create_library(root, name, command.split(":", 1)[1])


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        show_banner()
        return 0

    root = os.path.abspath(args.cwd)
    try:
        if args.command == "init":
            scaffold_project(root, run=run_command, template=args.template)
        elif args.command == "component":
            _add_component(root, args.name)
        else:
            _run_generator(root, args.command, args.name)
    except LeoError as e:
        error(str(e))
        return 1
    except KeyboardInterrupt:
        error("Aborted.")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
