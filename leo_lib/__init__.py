"""
leo_lib: scaffold a React starter project and grow it as an npm workspace.

Public API:
- scaffold_project(cwd: str, prompter=None, run=run_command, template=PROJECT_TEMPLATE) -> str
- transform_monorepo_to_single_app(project_path: str) -> None
- create_library(root: str, name: str, kind: str, prompter=None) -> str
- create_react_app(root: str, name: str, run=run_command) -> str
- check_workspace(root: str) -> None

The scaffolder:
- Clones the starter template with `npx degit` into a directory named after the project.
- Optionally flattens the cloned workspace (apps/web + packages/ui-kit) into a single application,
  merging manifests and rewriting the few import paths and config pointers that change.
- Renames the project in package.json and package-lock.json, then offers `git init` and `npm install`.
- Generates TypeScript and React library packages from YAML file-tree templates with ${...}
  placeholders, and wires them into an app's dependencies.
"""
from .bootstrap import normalize_project_name, scaffold_project
from .commands import check_workspace, run_command
from .errors import LeoError
from .flatten import transform_monorepo_to_single_app
from .packages import create_library, create_react_app

__all__ = [
    "LeoError",
    "check_workspace",
    "create_library",
    "create_react_app",
    "normalize_project_name",
    "run_command",
    "scaffold_project",
    "transform_monorepo_to_single_app",
]
