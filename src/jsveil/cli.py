# src/jsveil/cli.py
import sys
import argparse
from pathlib import Path
from typing import List, Optional

# Module imports
from jsveil.config import VUE_LIST_LIMIT
from jsveil.core.backup import backup
from jsveil.core.processor import process_files
from jsveil.core.scanner import discover
from jsveil.core.tree import generate_directory_preview
from jsveil.errors import FatalArgumentError
from jsveil.models import RunConfig, RunStats
from jsveil.utils import console
from jsveil.utils.console import Console

USAGE = "Usage: jsveil <directory> [--backup]"

class ArgumentParser(argparse.ArgumentParser):
    """Reports parse errors as FatalArgumentError instead of exiting with status 2."""

    def error(self, message):
        raise FatalArgumentError(f"Error: {message}", show_usage=True)

def create_arg_parser():
    parser = ArgumentParser(
        prog="jsveil",
        # Only the exact --backup flag enables a backup
        allow_abbrev=False,
        description="Obfuscate every .js file and the <script> block of every .vue file in a directory tree, in place."
    )
    parser.add_argument("target_dir", type=str, nargs="?", default=None, help="Directory to obfuscate")
    parser.add_argument("--backup", action="store_true", help="Copy the directory to a sibling backup folder first")
    return parser

def resolve_run_config(argv: Optional[List[str]] = None) -> RunConfig:
    """Parses the command line into a RunConfig. Raises FatalArgumentError."""
    parser = create_arg_parser()
    # Extra arguments are tolerated and ignored
    args, _ = parser.parse_known_args(argv)

    if not args.target_dir:
        raise FatalArgumentError("Please specify the directory to obfuscate", show_usage=True)

    target_dir = Path(args.target_dir).resolve()
    if not target_dir.is_dir():
        raise FatalArgumentError(f"Error: directory {target_dir} does not exist!")

    return RunConfig(target_dir=target_dir, backup=args.backup)

def print_summary(stats: RunStats):
    console.success("\nObfuscation complete!")
    console.plain(f"Processed {stats.js_files} JS files")
    console.plain(f"Processed {stats.vue_files} Vue files")
    if stats.errors > 0:
        console.error(f"Failed: {stats.errors} files")

def run(config: RunConfig) -> RunStats:
    root_dir = config.target_dir

    # 1. Backup (finishes before anything is touched)
    if config.backup:
        console.info(f"Creating backup of: {root_dir}")
        backup_dir = backup(root_dir)
        console.info(f"Backup written to: {backup_dir}")

    console.info(f"Using absolute path: {root_dir}")
    console.info(f"Scanning directory: {root_dir}")

    # 2. Preview
    console.note("Directory contents:")
    has_subdirectories = False
    try:
        preview, has_subdirectories = generate_directory_preview(root_dir)
        console.note(preview.rstrip("\n"))
    except OSError as e:
        console.error(f"Failed to read directory contents: {e}")

    # 3. Discovery
    console.info("Searching for files...")
    file_set = discover(root_dir)
    console.success(f"Found {len(file_set.js_files)} JS files and {len(file_set.vue_files)} Vue files")

    if file_set.is_empty:
        console.warn("Warning: no files to obfuscate were found!")
        if has_subdirectories:
            console.note("Hint: the directory has subdirectories; check their contents and file permissions")

    if file_set.vue_files:
        console.progress(f"Vue files found (first {VUE_LIST_LIMIT}):")
        for path in file_set.vue_files[:VUE_LIST_LIMIT]:
            console.progress(f"- {path.relative_to(root_dir).as_posix()}")
        if len(file_set.vue_files) > VUE_LIST_LIMIT:
            console.progress(f"- ... and {len(file_set.vue_files) - VUE_LIST_LIMIT} more")

    # 4. Transform & write back
    stats = process_files(file_set, root_dir, RunStats())

    # 5. Report
    print_summary(stats)
    return stats

def main(argv: Optional[List[str]] = None):
    Console.setup()
    try:
        try:
            config = resolve_run_config(argv)
        except FatalArgumentError as e:
            console.error(str(e))
            if e.show_usage:
                console.note(USAGE)
            sys.exit(1)

        run(config)

    except KeyboardInterrupt:
        print("\nCancelled.")
        sys.exit(1)

    except Exception as e:
        print(f"An unexpected error occurred: {e}", file=sys.stderr)
        sys.exit(1)

if __name__ == "__main__":
    main()
