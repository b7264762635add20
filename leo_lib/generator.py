import os
import re
from typing import Any, Dict, List, Mapping, Optional, Tuple

try:
    import yaml  # type: ignore
except Exception as e:  # pragma: no cover
    raise RuntimeError(
        "PyYAML is required to render package templates. Please install it: pip install pyyaml"
    ) from e

from .errors import LeoError

PLACEHOLDER_PATTERN = re.compile(r"\$\{([a-zA-Z0-9_\-\.]+)\}")

TEMPLATES_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "templates")


def template_path(kind: str) -> str:
    """Return the path of the bundled file-tree template for a generator kind (e.g. "ts-lib")."""
    path = os.path.join(TEMPLATES_DIR, f"{kind}.yaml")
    if not os.path.isfile(path):
        raise LeoError(f"No template bundled for '{kind}'.")
    return path


def _load_yaml(path: str) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def _ensure_dir(path: str) -> None:
    os.makedirs(path, exist_ok=True)


def render_string(template: str, context: Mapping[str, Any]) -> str:
    """
    Replace ${key} placeholders in template with values from context.

    The spelling of the key selects the casing of the value:
    - ${name}  -> value as given
    - ${Name}  -> value with its first character upper-cased
    - ${NAME}  -> value upper-cased
    Placeholders without a value are left untouched.
    """

    def classify_key(k: str) -> Tuple[str, str]:
        # Returns (canonical_key, style): style in {"lower", "title", "upper"}
        canonical = k.lower()
        if k.upper() == k and any(ch.isalpha() for ch in k):
            return canonical, "upper"
        first_alpha_idx = next((i for i, ch in enumerate(k) if ch.isalpha()), None)
        if first_alpha_idx is not None:
            first_alpha = k[first_alpha_idx]
            rest = ''.join(ch for ch in k[first_alpha_idx + 1:] if ch.isalpha())
            if first_alpha.isupper() and (not rest or rest.lower() == rest):
                return canonical, "title"
        return canonical, "lower"

    def apply_style(val: str, style: str) -> str:
        if style == "upper":
            return val.upper()
        if style == "title":
            return (val[:1].upper() + val[1:]) if val else val
        return val

    def repl(match: re.Match[str]) -> str:
        raw_key = match.group(1)
        canonical_key, style = classify_key(raw_key)
        val = context.get(raw_key)
        if val is None:
            val = context.get(canonical_key)
        if val is None:
            for k in context.keys():
                if str(k).lower() == canonical_key:
                    val = context[k]
                    break
        if val is None:
            return match.group(0)
        return apply_style(str(val), style)

    return PLACEHOLDER_PATTERN.sub(repl, template)


def _create_path(base_dir: str, name: str, is_dir: bool) -> str:
    # name may contain subdirectories like "src/components"
    path = os.path.join(base_dir, name)
    dir_path = path if is_dir else os.path.dirname(path)
    if dir_path:
        _ensure_dir(dir_path)
    return path


def _process_file(base_dir: str, block: Mapping[str, Any], context: Mapping[str, Any]) -> str:
    name = render_string(str(block.get("name", "")), context)
    path = _create_path(base_dir, name, is_dir=False)

    content = block.get("content", None)
    data = render_string(content, context) if isinstance(content, str) else ""

    with open(path, "w", encoding="utf-8") as f:
        f.write(data)
    return path


def _process_directory(base_dir: str, block: Mapping[str, Any], context: Mapping[str, Any]) -> List[str]:
    name = render_string(str(block.get("name", "")), context)
    dir_path = _create_path(base_dir, name, is_dir=True)
    written: List[str] = []
    content = block.get("content", None)
    if isinstance(content, list):
        for child in content:
            if not isinstance(child, dict):
                continue
            t = child.get("type")
            if t == "directory":
                written.extend(_process_directory(dir_path, child, context))
            elif "name" in child:
                written.append(_process_file(dir_path, child, context))
    return written


def generate_from_template(template_path: str, output_dir: str, params: Optional[Mapping[str, Any]] = None) -> List[str]:
    """
    Render the YAML file-tree template at template_path into output_dir.

    - the template top level is a mapping with a single key 'root' whose value is a list of blocks.
    - each block has type (file|directory), name, and content (text, or a list of child blocks).
    - params maps placeholder names to values.

    Returns the paths of the files written, in template order.
    """
    tmpl = _load_yaml(template_path)
    root = tmpl.get("root") if isinstance(tmpl, dict) else None
    if not isinstance(root, list):
        raise LeoError(f"{template_path} must contain a top-level 'root' list")

    context: Dict[str, Any] = dict(params or {})

    _ensure_dir(output_dir)

    written: List[str] = []
    for block in root:
        if not isinstance(block, dict):
            continue
        t = block.get("type")
        if t == "directory":
            written.extend(_process_directory(output_dir, block, context))
        elif t == "file":
            written.append(_process_file(output_dir, block, context))
    return written
