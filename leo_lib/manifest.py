"""Reading and editing package.json-style JSON documents."""
import json
from typing import Any, Dict, Iterable, List, Mapping

from .errors import LeoError


def read_json(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise LeoError(f"Invalid JSON in {path}: {e}") from e
        except UnicodeDecodeError as e:
            raise LeoError(f"{path} is not UTF-8 text: {e}") from e
    if not isinstance(data, dict):
        raise LeoError(f"Expected a JSON object in {path}")
    return data


def write_json(path: str, data: Mapping[str, Any]) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
        f.write("\n")


def merge_groups(target: Dict[str, Any], source: Mapping[str, Any], groups: Iterable[str]) -> Dict[str, Any]:
    """
    Shallow-merge each named group (e.g. "dependencies") of source into target.

    Entries from source win when both define the same key.
    """
    for group in groups:
        target[group] = {**(target.get(group) or {}), **(source.get(group) or {})}
    return target


def remove_scripts(manifest: Dict[str, Any], names: Iterable[str]) -> List[str]:
    """Delete the named scripts that are present; return the ones removed."""
    scripts = manifest.get("scripts") or {}
    removed = [name for name in names if name in scripts]
    for name in removed:
        del scripts[name]
    return removed


def add_dependency(manifest_path: str, name: str, version: str = "*") -> None:
    manifest = read_json(manifest_path)
    dependencies = manifest.get("dependencies")
    if not isinstance(dependencies, dict):
        dependencies = manifest["dependencies"] = {}
    dependencies[name] = version
    write_json(manifest_path, manifest)


def set_name(manifest_path: str, name: str) -> None:
    manifest = read_json(manifest_path)
    manifest["name"] = name
    write_json(manifest_path, manifest)


def rename_lock_file(lock_path: str, name: str) -> None:
    """Set the project name at the top of a package-lock.json and on its root package entry."""
    lock = read_json(lock_path)
    lock["name"] = name
    packages = lock.get("packages")
    if isinstance(packages, dict) and isinstance(packages.get(""), dict):
        packages[""]["name"] = name
    write_json(lock_path, lock)


def add_scripts(manifest_path: str, scripts: Mapping[str, str]) -> List[str]:
    """
    Add scripts that are not yet defined in the manifest.

    Existing values are kept; the names that already existed are returned so the caller can warn.
    """
    manifest = read_json(manifest_path)
    current = manifest.get("scripts")
    if not isinstance(current, dict):
        current = manifest["scripts"] = {}
    skipped: List[str] = []
    for key, value in scripts.items():
        if key in current:
            skipped.append(key)
        else:
            current[key] = value
    write_json(manifest_path, manifest)
    return skipped
