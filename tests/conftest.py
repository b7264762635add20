import json
import subprocess
from pathlib import Path
from typing import Any, Dict, List, Optional

import pytest


def write_json(path: Path, data: Dict[str, Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")


def read_json(path: Path) -> Dict[str, Any]:
    return json.loads(path.read_text(encoding="utf-8"))


def write_text(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def build_starter(project: Path) -> Path:
    """Lay out a minimal copy of the workspace starter the scaffolder clones."""
    write_json(
        project / "package.json",
        {
            "name": "vega-react-starter",
            "private": True,
            "workspaces": ["apps/*", "packages/*"],
            "scripts": {
                "dev:web": "npm run dev --workspace=apps/web",
                "build:web": "npm run build --workspace=apps/web",
                "preview:web": "npm run preview --workspace=apps/web",
                "create:ts-lib": "node scripts/create-ts-lib.js",
                "create:react-lib": "node scripts/create-react-lib.js",
                "create:react-app": "node scripts/create-react-app.js",
                "lint": "eslint . --max-warnings 0",
            },
            "dependencies": {"clsx": "^2.1.1"},
            "devDependencies": {"typescript": "^5.5.3", "eslint": "^9.9.0"},
        },
    )
    write_json(
        project / "package-lock.json",
        {"name": "vega-react-starter", "lockfileVersion": 3, "packages": {"": {"name": "vega-react-starter"}}},
    )
    write_json(
        project / "apps/web/package.json",
        {
            "name": "web",
            "scripts": {"dev": "vite", "build": "tsc -b && vite build", "lint": "eslint ."},
            "dependencies": {"react": "^18.3.1", "ui-kit": "*", "clsx": "^2.0.0"},
            "devDependencies": {"vite": "^5.4.1"},
        },
    )
    write_text(
        project / "apps/web/tailwind.config.ts",
        "import baseConfig from '../../packages/ui-kit/src/tailwind/base-tailwind-config';\n"
        "export default { presets: [baseConfig] };\n",
    )
    write_text(
        project / "apps/web/src/main.tsx",
        "import '../../../packages/ui-kit/src/styles/index.css';\nimport App from './App';\n",
    )
    write_text(project / "apps/web/src/App.tsx", "import { Button } from 'ui-kit';\n")
    write_text(project / "apps/web/src/routes/index.tsx", "import { Card } from 'ui-kit';\n")
    write_text(project / "apps/web/index.html", "<div id=\"root\"></div>\n")
    write_text(project / "packages/ui-kit/src/ui/button.tsx", "export const Button = () => null;\n")
    write_text(project / "packages/ui-kit/src/styles/index.css", "@tailwind base;\n")
    write_text(project / "packages/ui-kit/src/tailwind/base-tailwind-config.cjs", "module.exports = {};\n")
    write_text(project / "packages/ui-kit/package.json", "{}\n")
    write_text(project / "node_modules/.package-lock.json", "{}\n")
    write_text(project / "scripts/create-ts-lib.js", "// generator\n")
    write_json(
        project / "components.json",
        {
            "style": "default",
            "tailwind": {
                "config": "packages/ui-kit/src/tailwind/base-tailwind-config.cjs",
                "css": "packages/ui-kit/src/styles/globals.css",
                "baseColor": "slate",
            },
            "aliases": {"components": "packages/ui-kit/src", "utils": "packages/ui-kit/src/utils"},
        },
    )
    return project


class FakePrompter:
    """Answers questions from queues and records what was asked."""

    def __init__(self, text: Optional[List[str]] = None, select: Optional[List[str]] = None,
                 confirm: Optional[List[bool]] = None) -> None:
        self._text = list(text or [])
        self._select = list(select or [])
        self._confirm = list(confirm or [])
        self.asked: List[str] = []
        self.choices: List[List[str]] = []

    def text(self, message: str) -> str:
        self.asked.append(message)
        return self._text.pop(0)

    def select(self, message: str, choices: List[str], default: Optional[str] = None) -> str:
        self.asked.append(message)
        self.choices.append(list(choices))
        return self._select.pop(0)

    def confirm(self, message: str, default: bool = True) -> bool:
        self.asked.append(message)
        return self._confirm.pop(0)


class FakeRunner:
    """Records commands; `npx degit` lays out the starter, failures are configured per program."""

    def __init__(self, fail: Optional[List[str]] = None, clone=build_starter) -> None:
        self.calls: List[List[str]] = []
        self.cwds: List[str] = []
        self._fail = set(fail or [])
        self._clone = clone

    def __call__(self, args: List[str], cwd: str) -> None:
        self.calls.append(list(args))
        self.cwds.append(cwd)
        program = args[1] if args[0] == "npx" else args[0]
        if program in self._fail:
            raise subprocess.CalledProcessError(1, args)
        if program == "degit" and self._clone is not None:
            self._clone(Path(cwd) / args[-1])


@pytest.fixture
def starter(tmp_path: Path) -> Path:
    return build_starter(tmp_path / "starter")
