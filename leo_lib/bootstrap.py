"""The interactive `leo init` flow: clone the starter, optionally flatten it, then set it up."""
import os
import subprocess
from typing import List, Optional

from . import config
from .commands import Runner, describe_failure, run_command
from .console import error, success, warn
from .errors import LeoError
from .flatten import transform_monorepo_to_single_app
from .manifest import rename_lock_file, set_name
from .prompts import Prompter


def normalize_project_name(name: str) -> str:
    """Turn a free-text project name into a directory/package name by replacing spaces with hyphens."""
    normalized = name.strip().replace(" ", "-")
    if not normalized:
        raise LeoError("A project name is required.")
    return normalized


def rename_project(project_path: str, project_name: str) -> None:
    manifest_path = os.path.join(project_path, config.MANIFEST)
    if not os.path.isfile(manifest_path):
        raise LeoError(f"'{config.MANIFEST}' not found in the cloned project.")
    set_name(manifest_path, project_name)

    lock_path = os.path.join(project_path, config.LOCK_FILE)
    if os.path.isfile(lock_path):
        rename_lock_file(lock_path, project_name)
    else:
        error(f"'{config.LOCK_FILE}' not found in the cloned project.")


def clone_template(source: str, cwd: str, project_name: str, run: Runner = run_command) -> None:
    try:
        run(config.degit_command(source, project_name), cwd)
    except (subprocess.CalledProcessError, OSError) as e:
        raise LeoError(f"Error creating project: {describe_failure(e)}") from e
    success(f"Successfully cloned project: {project_name}")


def _run_optional(args: List[str], cwd: str, run: Runner, failure: str) -> bool:
    try:
        run(args, cwd)
    except (subprocess.CalledProcessError, OSError) as e:
        error(f"{failure}: {describe_failure(e)}")
        return False
    return True


def scaffold_project(
    cwd: str,
    prompter: Optional[Prompter] = None,
    run: Runner = run_command,
    template: str = config.PROJECT_TEMPLATE,
) -> str:
    """
    Ask for a project name and structure, create the project under cwd and return its path.

    Raises LeoError when the target directory already exists, the clone fails, or the cloned
    project is missing files the chosen structure needs.
    """
    prompter = prompter or Prompter()

    project_name = normalize_project_name(prompter.text("What is your project name?"))
    structure = prompter.select(
        "Choose the structure you want to scaffold:",
        config.STRUCTURE_CHOICES,
        default=config.STRUCTURE_MONOREPO,
    )

    project_path = os.path.join(cwd, project_name)
    if os.path.exists(project_path):
        raise LeoError(f'Error: A folder with the name "{project_name}" already exists.')

    clone_template(template, cwd, project_name, run=run)

    if structure == config.STRUCTURE_SINGLE_APP:
        transform_monorepo_to_single_app(project_path)

    rename_project(project_path, project_name)

    if prompter.confirm("Do you want to initialize a Git repository?", default=True):
        if _run_optional(config.GIT_INIT_COMMAND, project_path, run, "Error initializing Git"):
            success("Git repository initialized.")

    if prompter.confirm("Do you want to install dependencies now?", default=True):
        if _run_optional(config.INSTALL_COMMAND, project_path, run, "Error running npm install"):
            success(f"Dependencies installed successfully for {project_name}.")
    else:
        warn("You chose not to install dependencies. Run 'npm install' manually when ready.")

    return project_path
