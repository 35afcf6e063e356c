# src/jsveil/core/tree.py
import os
from pathlib import Path
from typing import List, Tuple

from jsveil.config import PREVIEW_CHILD_LIMIT

def generate_directory_preview(root_dir: Path, child_limit: int = PREVIEW_CHILD_LIMIT) -> Tuple[str, bool]:
    """
    Renders the top level of `root_dir`, plus the first few entries of each
    subdirectory. Returns the text and whether any subdirectory was seen.
    """
    names = os.listdir(root_dir)
    if not names:
        return "- (empty directory)\n", False

    lines: List[str] = []
    has_subdirectories = False

    for name in names:
        entry = root_dir / name
        if not entry.is_dir():
            lines.append(f"- {name}")
            continue

        has_subdirectories = True
        lines.append(f"- {name} (dir)")
        try:
            children = os.listdir(entry)
        except OSError:
            lines.append("  └── (unreadable)")
            continue

        for child in children[:child_limit]:
            lines.append(f"  └── {child}")
        if len(children) > child_limit:
            lines.append(f"  └── ... and {len(children) - child_limit} more")

    return "\n".join(lines) + "\n", has_subdirectories
