# src/jsveil/core/scanner.py
import os
import stat
from pathlib import Path
from typing import List

from jsveil.config import JS_EXTENSION, VUE_EXTENSION
from jsveil.errors import DiscoveryAccessError
from jsveil.models import FileSet
from jsveil.utils import console

class ProjectScanner:
    def __init__(self, root_dir: Path):
        self.root_dir = root_dir

    def find_files(self, extension: str) -> List[Path]:
        """
        Depth-first search for files whose extension matches `extension`
        (case-insensitive). Siblings come in directory-listing order.
        Unreadable entries are reported and skipped.
        """
        return list(self._walk(self.root_dir, extension.lower()))

    def discover(self) -> FileSet:
        return FileSet(
            js_files=tuple(self.find_files(JS_EXTENSION)),
            vue_files=tuple(self.find_files(VUE_EXTENSION)),
        )

    def _walk(self, directory: Path, extension: str):
        try:
            entries = _list_dir(directory)
        except DiscoveryAccessError as e:
            _report(e)
            return

        for entry in entries:
            try:
                mode = _stat_mode(entry)
            except DiscoveryAccessError as e:
                _report(e)
                continue

            if stat.S_ISDIR(mode):
                yield from self._walk(Path(entry.path), extension)
            elif os.path.splitext(entry.name)[1].lower() == extension:
                yield Path(entry.path)


def _list_dir(directory: Path) -> List[os.DirEntry]:
    try:
        with os.scandir(directory) as it:
            return list(it)
    except OSError as e:
        raise DiscoveryAccessError(directory, e) from e


def _stat_mode(entry: os.DirEntry) -> int:
    try:
        # Follows symlinks, like a plain stat
        return entry.stat().st_mode
    except OSError as e:
        raise DiscoveryAccessError(Path(entry.path), e) from e


def _report(err: DiscoveryAccessError):
    reason = err.cause.strerror or err.cause
    console.warn(f"  > [Warning] Skipping {err.path} (cannot access: {reason})")


def find_files(root_dir: Path, extension: str) -> List[Path]:
    return ProjectScanner(root_dir).find_files(extension)


def discover(root_dir: Path) -> FileSet:
    return ProjectScanner(root_dir).discover()
