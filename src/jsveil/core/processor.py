# src/jsveil/core/processor.py
import os
from pathlib import Path

from jsveil.config import MARKUP_PREVIEW_CHARS, SAFE_PROFILE, STANDARD_PROFILE
from jsveil.core.transform import obfuscate, select_profile
from jsveil.core.vue import extract_script, replace_script
from jsveil.errors import NoScriptBlockError, TransformError
from jsveil.models import FileSet, RunStats
from jsveil.utils import console


def _read_text(path: Path) -> str:
    # newline="" keeps CRLF files byte-identical outside the rewritten span
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()


def _write_text(path: Path, content: str):
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(content)


def _rel(path: Path, root_dir: Path) -> str:
    return Path(os.path.relpath(path, root_dir)).as_posix()


def process_js_file(path: Path, root_dir: Path, stats: RunStats) -> bool:
    """Obfuscates a whole .js file in place with the standard profile."""
    rel_path = _rel(path, root_dir)
    console.progress(f"Processing JS file: {rel_path}")

    try:
        code = _read_text(path)
        _write_text(path, obfuscate(code, STANDARD_PROFILE))
    except TransformError as e:
        console.error(f"Failed to obfuscate JS file: {path}\n  {e}")
        stats.errors += 1
        return False
    except (OSError, UnicodeError) as e:
        console.error(f"Failed to process JS file: {path}\n  {e}")
        stats.errors += 1
        return False

    stats.js_files += 1
    return True


def process_vue_file(path: Path, root_dir: Path, stats: RunStats) -> bool:
    """
    Obfuscates the first <script> block of a .vue file in place.
    Complex-looking scripts get the safe profile. On any failure the file
    is left as it was.
    """
    rel_path = _rel(path, root_dir)
    console.progress(f"Processing Vue file: {rel_path}")

    markup = ""
    safe_mode = False
    try:
        markup = _read_text(path)
        match = extract_script(markup)
        if match is None:
            raise NoScriptBlockError(path)

        console.note(f"Found <script> block, length: {match.length}")
        profile = select_profile(match.content)
        safe_mode = profile is SAFE_PROFILE
        if safe_mode:
            console.note("Complex syntax detected, obfuscating in safe mode...")

        new_markup = replace_script(markup, match, obfuscate(match.content, profile))
        _write_text(path, new_markup)

    except NoScriptBlockError as e:
        console.error(f"No <script> block found: {_rel(e.path, root_dir)}")
        console.note(f"Content preview: {markup[:MARKUP_PREVIEW_CHARS]}...")
        stats.errors += 1
        return False

    except TransformError as e:
        if safe_mode:
            console.error(f"Could not obfuscate even in safe mode: {e}")
        else:
            console.error(f"Failed to obfuscate script content: {e}")
        console.note(f"Skipping, file left unchanged: {rel_path}")
        stats.errors += 1
        return False

    except (OSError, UnicodeError) as e:
        console.error(f"Failed to process Vue file: {path}\n  {e}")
        stats.errors += 1
        return False

    stats.vue_files += 1
    console.success(f"Processed Vue file{' (safe mode)' if safe_mode else ''}: {rel_path}")
    return True


def process_files(file_set: FileSet, root_dir: Path, stats: RunStats) -> RunStats:
    """Processes every discovered file in order: all JS files, then all Vue files."""
    for path in file_set.js_files:
        process_js_file(path, root_dir, stats)

    for path in file_set.vue_files:
        process_vue_file(path, root_dir, stats)

    return stats
