import os
import subprocess
from typing import Callable, List

from . import config
from .errors import LeoError
from .manifest import read_json

Runner = Callable[[List[str], str], None]


def run_command(args: List[str], cwd: str) -> None:
    """Run an external tool in cwd with inherited stdio, raising CalledProcessError on a non-zero exit."""
    subprocess.run(args, cwd=cwd, check=True)


def describe_failure(exc: Exception) -> str:
    if isinstance(exc, subprocess.CalledProcessError):
        cmd = exc.cmd if isinstance(exc.cmd, str) else " ".join(exc.cmd)
        return f"Command failed: {cmd} (exit code {exc.returncode})"
    return str(exc)


def check_workspace(root: str) -> None:
    """Ensure root holds an npm workspace manifest; generators only run inside one."""
    manifest_path = os.path.join(root, config.MANIFEST)
    if not os.path.isfile(manifest_path):
        raise LeoError(f"{config.MANIFEST} not found.")
    if not read_json(manifest_path).get("workspaces"):
        raise LeoError("This command can only be executed in an npm workspace.")
