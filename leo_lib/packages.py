"""Generators that add library and application packages to an npm workspace."""
import os
import re
import subprocess
from typing import List, Optional

from . import config
from .commands import Runner, describe_failure, run_command
from .console import error, success, warn
from .errors import LeoError
from .generator import generate_from_template, template_path
from .manifest import add_dependency, add_scripts, set_name
from .prompts import Prompter

# letters, digits and . _ ~ - only; the name is pasted into JSON templates and used as a directory
PACKAGE_NAME_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9._~-]*$")


def list_apps(root: str) -> List[str]:
    """Names of the application directories under root/apps, sorted."""
    apps_dir = os.path.join(root, config.APPS_DIR)
    if not os.path.isdir(apps_dir):
        raise LeoError("No `apps` directory found. Please ensure it exists.")
    return sorted(
        entry for entry in os.listdir(apps_dir) if os.path.isdir(os.path.join(apps_dir, entry))
    )


def check_package_name(name: str) -> None:
    if not PACKAGE_NAME_PATTERN.fullmatch(name):
        raise LeoError(
            f"Invalid package name '{name}': use letters, digits, '.', '_', '~' and '-', starting with a letter or digit."
        )


def create_library(root: str, name: str, kind: str, prompter: Optional[Prompter] = None) -> str:
    """
    Create packages/<name> from the template for kind ("ts-lib" or "react-lib") and make the
    app chosen by the user depend on it. Returns the new package directory.
    """
    if not name:
        raise LeoError("Please provide a library name")
    check_package_name(name)
    if kind not in config.LIBRARY_KINDS:
        raise LeoError(f"Unknown library kind '{kind}'. Expected one of: {', '.join(config.LIBRARY_KINDS)}")

    apps = list_apps(root)
    if not apps:
        raise LeoError("No apps found in the `apps` directory.")

    prompter = prompter or Prompter()
    selected_app = prompter.select(
        "Which app do you want to add the new library to as a dependency?", apps
    )

    library_path = os.path.join(root, config.PACKAGES_DIR, name)
    generate_from_template(template_path(kind), library_path, {"name": name})
    success(f"Successfully created {config.LIBRARY_KINDS[kind]}: {name}")

    app_manifest_path = os.path.join(root, config.APPS_DIR, selected_app, config.MANIFEST)
    if os.path.isfile(app_manifest_path):
        add_dependency(app_manifest_path, name)
        success(f"Successfully added {name} to {selected_app}'s dependencies")
    else:
        error(f"Failed to find package.json for {selected_app}")
    return library_path


def workspace_scripts(name: str) -> dict:
    return {
        f"{verb}:{name}": f"npm run {verb} --workspace={config.APPS_DIR}/{name}"
        for verb in config.WORKSPACE_APP_SCRIPTS
    }


def create_react_app(root: str, name: str, run: Runner = run_command) -> str:
    """Clone the React app template into apps/<name> and register its dev/build/preview scripts."""
    if not name:
        raise LeoError("Please provide an app name")
    check_package_name(name)

    apps_dir = os.path.join(root, config.APPS_DIR)
    app_path = os.path.join(apps_dir, name)
    if os.path.exists(app_path):
        raise LeoError(f'Error: An app with the name "{name}" already exists.')

    root_manifest_path = os.path.join(root, config.MANIFEST)
    if not os.path.isfile(root_manifest_path):
        raise LeoError(f"{config.MANIFEST} not found.")

    os.makedirs(apps_dir, exist_ok=True)
    try:
        run(config.degit_command(config.APP_TEMPLATE, name), apps_dir)
    except (subprocess.CalledProcessError, OSError) as e:
        raise LeoError(f"Error creating React app: {describe_failure(e)}") from e
    success(f"Successfully created React app: {name}")

    app_manifest_path = os.path.join(app_path, config.MANIFEST)
    if os.path.isfile(app_manifest_path):
        set_name(app_manifest_path, name)
        success(f"Updated package.json with the correct app name: {name}")
    else:
        error(f"package.json not found in {app_path}.")

    for script in add_scripts(root_manifest_path, workspace_scripts(name)):
        warn(f'Script "{script}" already exists in package.json.')
    success(f"Successfully updated root package.json with new scripts for {name}.")
    return app_path
