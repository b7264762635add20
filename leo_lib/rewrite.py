import os
from typing import Iterable, List, Tuple

from .errors import LeoError

Rewrite = Tuple[str, str, str]


def rewrite_if_present(path: str, search: str, replace: str) -> bool:
    """
    Replace the first occurrence of search in the text file at path.

    Returns False without touching anything when the file does not exist or does not contain search.
    """
    if not os.path.isfile(path):
        return False
    with open(path, "r", encoding="utf-8") as f:
        try:
            content = f.read()
        except UnicodeDecodeError as e:
            raise LeoError(f"{path} is not UTF-8 text: {e}") from e
    if search not in content:
        return False
    with open(path, "w", encoding="utf-8") as f:
        f.write(content.replace(search, replace, 1))
    return True


def apply_rewrites(root: str, rewrites: Iterable[Rewrite]) -> List[str]:
    """Apply (target, search, replace) rows relative to root; return the targets that changed."""
    changed: List[str] = []
    for target, search, replace in rewrites:
        if rewrite_if_present(os.path.join(root, target), search, replace):
            changed.append(target)
    return changed
