"""
Restructure a cloned npm-workspace project into a single application.

The steps run in a fixed order against an explicit project path. A missing required input raises
LeoError and leaves the steps already taken in place.
"""
import os
import shutil
import tempfile
from typing import Any, Dict

from . import config
from .console import success
from .errors import LeoError
from .manifest import merge_groups, read_json, remove_scripts, write_json
from .rewrite import apply_rewrites, rewrite_if_present


def _path(project_path: str, relative: str) -> str:
    return os.path.join(project_path, *relative.split("/"))


def copy_ui_kit(project_path: str) -> None:
    src = _path(project_path, config.UI_KIT_SRC)
    dest = _path(project_path, config.UI_KIT_DEST)
    if not os.path.isdir(src):
        raise LeoError("'ui-kit/src' not found.")
    os.makedirs(os.path.dirname(dest), exist_ok=True)
    shutil.copytree(src, dest, dirs_exist_ok=True)
    success("Copied 'ui-kit/src' to 'apps/web/src/ui-kit'.")


def move_tailwind_config(project_path: str) -> None:
    src = _path(project_path, config.TAILWIND_BASE_CONFIG)
    if not os.path.isfile(src):
        raise LeoError(f"'{config.TAILWIND_BASE_CONFIG_ROOT}' not found.")
    os.replace(src, _path(project_path, config.TAILWIND_BASE_CONFIG_ROOT))
    success(f"Moved '{config.TAILWIND_BASE_CONFIG_ROOT}' to the root.")

    target, search, replace = config.TAILWIND_CONFIG_REWRITE
    if rewrite_if_present(_path(project_path, target), search, replace):
        success("Updated import path in 'tailwind.config.ts'.")


def merge_manifests(root_manifest: Dict[str, Any], app_manifest: Dict[str, Any]) -> Dict[str, Any]:
    """
    Fold the workspace manifest into the app manifest.

    Root dependencies, devDependencies and scripts override same-named app entries. The ui-kit
    dependency and the workspace-only scripts are dropped.
    """
    merge_groups(app_manifest, root_manifest, config.MERGED_MANIFEST_GROUPS)
    if config.UI_KIT_PACKAGE in app_manifest["dependencies"]:
        del app_manifest["dependencies"][config.UI_KIT_PACKAGE]
        success("Removed 'ui-kit' dependency from 'apps/web/package.json'.")
    remove_scripts(app_manifest, config.WORKSPACE_ONLY_SCRIPTS)
    return app_manifest


def merge_root_manifest(project_path: str) -> None:
    root_manifest_path = _path(project_path, config.MANIFEST)
    app_manifest_path = _path(project_path, f"{config.WEB_APP_DIR}/{config.MANIFEST}")
    for path in (root_manifest_path, app_manifest_path):
        if not os.path.isfile(path):
            raise LeoError(f"'{os.path.relpath(path, project_path)}' not found.")

    merged = merge_manifests(read_json(root_manifest_path), read_json(app_manifest_path))
    write_json(app_manifest_path, merged)
    success("Merged root package.json into 'apps/web/package.json' and removed unwanted scripts.")


def remove_workspace_files(project_path: str) -> None:
    shutil.rmtree(_path(project_path, config.PACKAGES_DIR), ignore_errors=True)
    shutil.rmtree(_path(project_path, config.NODE_MODULES_DIR), ignore_errors=True)
    root_manifest_path = _path(project_path, config.MANIFEST)
    if os.path.isfile(root_manifest_path):
        os.remove(root_manifest_path)
    success("Removed monorepo-specific files.")

    scripts_path = _path(project_path, config.SCRIPTS_DIR)
    if os.path.isdir(scripts_path):
        shutil.rmtree(scripts_path)
        success("Removed 'scripts' folder.")


def hoist_web_app(project_path: str) -> None:
    web_app_path = _path(project_path, config.WEB_APP_DIR)
    if not os.path.isdir(web_app_path):
        raise LeoError(f"'{config.WEB_APP_DIR}' not found.")
    # take the app out of apps/ first so hoisted entries may replace apps/ itself
    staging = tempfile.mkdtemp(prefix=".leo-hoist-", dir=project_path)
    staged_app = os.path.join(staging, "web")
    os.replace(web_app_path, staged_app)
    shutil.rmtree(_path(project_path, config.APPS_DIR))

    for entry in sorted(os.listdir(staged_app)):
        dest = os.path.join(project_path, entry)
        # the app's copy wins over anything already at the root
        if os.path.isdir(dest) and not os.path.islink(dest):
            shutil.rmtree(dest)
        elif os.path.lexists(dest):
            os.remove(dest)
        os.replace(os.path.join(staged_app, entry), dest)
    shutil.rmtree(staging)
    success("Moved 'apps/web' to the root level.")


def update_import_paths(project_path: str) -> None:
    for target in apply_rewrites(project_path, config.IMPORT_REWRITES):
        success(f"Updated import path in '{target.split('/', 1)[1]}'.")


def update_components_json(project_path: str) -> None:
    components_path = _path(project_path, config.COMPONENTS_FILE)
    if not os.path.isfile(components_path):
        return
    components = read_json(components_path)
    for (section, field), value in config.COMPONENT_ALIASES.items():
        group = components.get(section)
        if not isinstance(group, dict):
            group = components[section] = {}
        group[field] = value
    write_json(components_path, components)
    success("Updated 'components.json' for Single App.")


def transform_monorepo_to_single_app(project_path: str) -> None:
    copy_ui_kit(project_path)
    move_tailwind_config(project_path)
    merge_root_manifest(project_path)
    remove_workspace_files(project_path)
    hoist_web_app(project_path)
    update_import_paths(project_path)
    update_components_json(project_path)
