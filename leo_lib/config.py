"""Fixed template sources, paths, commands and edit tables used by the scaffolder."""
from typing import Dict, List, Tuple

PROJECT_TEMPLATE = "v-sekulic/vega-react-starter"
APP_TEMPLATE = "v-sekulic/vite-react-template"

STRUCTURE_SINGLE_APP = "Single application"
STRUCTURE_MONOREPO = "Monorepo (npm workspaces)"
STRUCTURE_CHOICES = [STRUCTURE_SINGLE_APP, STRUCTURE_MONOREPO]

MANIFEST = "package.json"
LOCK_FILE = "package-lock.json"
COMPONENTS_FILE = "components.json"

APPS_DIR = "apps"
PACKAGES_DIR = "packages"
NODE_MODULES_DIR = "node_modules"
SCRIPTS_DIR = "scripts"

# Workspace layout consumed by the flattening transform
WEB_APP_DIR = "apps/web"
UI_KIT_SRC = "packages/ui-kit/src"
UI_KIT_DEST = "apps/web/src/ui-kit"
TAILWIND_BASE_CONFIG = "packages/ui-kit/src/tailwind/base-tailwind-config.cjs"
TAILWIND_BASE_CONFIG_ROOT = "base-tailwind-config.cjs"
UI_KIT_PACKAGE = "ui-kit"

MERGED_MANIFEST_GROUPS = ["dependencies", "devDependencies", "scripts"]

WORKSPACE_ONLY_SCRIPTS = [
    "create:ts-lib",
    "create:react-lib",
    "dev:web",
    "build:web",
    "preview:web",
    "create:react-app",
]

# (target file, search, replace); targets relative to the project root
TAILWIND_CONFIG_REWRITE: Tuple[str, str, str] = (
    "apps/web/tailwind.config.ts",
    "../../packages/ui-kit/src/tailwind/base-tailwind-config",
    "./base-tailwind-config",
)

IMPORT_REWRITES: List[Tuple[str, str, str]] = [
    ("src/main.tsx", "../../../packages/ui-kit/src/styles/index.css", "./ui-kit/styles/index.css"),
    ("src/routes/index.tsx", "from 'ui-kit'", "from '@/ui-kit/ui'"),
    ("src/App.tsx", "from 'ui-kit'", "from '@/ui-kit/ui'"),
]

# (section, field) -> value written into components.json
COMPONENT_ALIASES: Dict[Tuple[str, str], str] = {
    ("tailwind", "config"): "./base-tailwind-config.ts",
    ("tailwind", "css"): "./src/ui-kit/styles/globals.css",
    ("aliases", "components"): "src/ui-kit",
    ("aliases", "utils"): "src/ui-kit/utils",
}

LIBRARY_KINDS = {
    "ts-lib": "TypeScript library",
    "react-lib": "React library",
}

WORKSPACE_APP_SCRIPTS = ["dev", "build", "preview"]


def degit_command(source: str, dest: str) -> List[str]:
    return ["npx", "degit", source, dest]


GIT_INIT_COMMAND = ["git", "init"]
INSTALL_COMMAND = ["npm", "install"]


def component_command(name: str) -> List[str]:
    return ["npx", "shadcn@latest", "add", name]
