# src/jsveil/models.py
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Tuple

@dataclass(frozen=True)
class RunConfig:
    """Immutable settings resolved from the command line."""
    target_dir: Path
    backup: bool = False

@dataclass(frozen=True)
class FileSet:
    """Files found by discovery, in traversal order."""
    js_files: Tuple[Path, ...] = ()
    vue_files: Tuple[Path, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.js_files and not self.vue_files

@dataclass(frozen=True)
class ScriptBlockMatch:
    """The first <script> element of a markup file, split into its parts."""
    open_tag: str
    content: str
    close_tag: str
    offset: int
    length: int

@dataclass(frozen=True)
class TransformProfile:
    name: str
    options: Mapping[str, Any]

@dataclass
class RunStats:
    """Outcome counters accumulated across one run."""
    js_files: int = 0
    vue_files: int = 0
    errors: int = 0
