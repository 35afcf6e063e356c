# src/jsveil/utils/obfuscator.py
import json
import os
import shlex
import shutil
import subprocess
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Mapping, Optional

from jsveil.config import ENGINE_ENV_VAR, ENGINE_EXECUTABLE
from jsveil.errors import TransformError


@dataclass(frozen=True)
class ObfuscationResult:
    code: str

    def get_obfuscated_code(self) -> str:
        return self.code


class JavaScriptObfuscator:
    """Thin binding around the `javascript-obfuscator` Node.js CLI."""
    _command: Optional[List[str]] = None

    @classmethod
    def get_command(cls) -> List[str]:
        if cls._command is None:
            override = os.environ.get(ENGINE_ENV_VAR, "").strip()
            executable = shutil.which(ENGINE_EXECUTABLE)
            npx = shutil.which("npx")
            if override:
                try:
                    cls._command = shlex.split(override)
                except ValueError as e:
                    raise TransformError(f"Invalid {ENGINE_ENV_VAR} value {override!r}: {e}") from e
            elif executable:
                cls._command = [executable]
            elif npx:
                # Fetches the package on first use
                cls._command = [npx, "--yes", ENGINE_EXECUTABLE]
            else:
                raise TransformError(
                    f"{ENGINE_EXECUTABLE} not found. Install it with "
                    f"'npm install -g {ENGINE_EXECUTABLE}' or set {ENGINE_ENV_VAR}."
                )
        return cls._command

    @classmethod
    def reset(cls):
        cls._command = None

    @staticmethod
    def obfuscate(source: str, options: Mapping[str, Any]) -> ObfuscationResult:
        """
        Runs the engine on `source` with the given option set.
        The options are handed over as a JSON config file, so they keep the
        engine's own camelCase names.
        """
        command = JavaScriptObfuscator.get_command()

        with tempfile.TemporaryDirectory(prefix="jsveil-") as tmp:
            tmp_dir = Path(tmp)
            input_file = tmp_dir / "input.js"
            output_file = tmp_dir / "output.js"
            config_file = tmp_dir / "config.json"

            input_file.write_text(source, encoding="utf-8")
            config_file.write_text(json.dumps(dict(options)), encoding="utf-8")

            try:
                result = subprocess.run(
                    [*command, str(input_file), "--output", str(output_file), "--config", str(config_file)],
                    capture_output=True,
                    text=True,
                    encoding="utf-8",
                )
            except OSError as e:
                raise TransformError(f"Could not start {command[0]}: {e}") from e

            if result.returncode != 0:
                details = (result.stderr or result.stdout).strip()
                raise TransformError(details or f"{ENGINE_EXECUTABLE} exited with status {result.returncode}")

            if not output_file.exists():
                raise TransformError(f"{ENGINE_EXECUTABLE} produced no output")

            return ObfuscationResult(output_file.read_text(encoding="utf-8"))
