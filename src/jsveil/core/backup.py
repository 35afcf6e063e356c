# src/jsveil/core/backup.py
import shutil
import time
from pathlib import Path
from typing import Optional

from jsveil.config import BACKUP_SUFFIX

def backup_dir_name(source_dir: Path, timestamp_ms: int) -> str:
    return f"{source_dir.name}{BACKUP_SUFFIX}{timestamp_ms}"

def backup(source_dir: Path, timestamp_ms: Optional[int] = None) -> Path:
    """
    Copies `source_dir` to a sibling `<name>_backup_<epochMillis>` directory.
    Copy errors propagate; a partially written backup is left as is.
    """
    if timestamp_ms is None:
        timestamp_ms = int(time.time() * 1000)

    target_dir = source_dir.parent / backup_dir_name(source_dir, timestamp_ms)
    shutil.copytree(source_dir, target_dir, dirs_exist_ok=True)
    return target_dir
