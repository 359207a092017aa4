"""Shell command execution guarded by an enable flag and a command allow-list."""

from __future__ import annotations

import re
import subprocess
import sys
from dataclasses import dataclass
from typing import Iterable

_LAUNCH_TIMEOUT = 5
_COMMAND_TIMEOUT = 60


class ShellError(RuntimeError):
    """Raised when a command is refused or does not finish in time."""


@dataclass(frozen=True)
class ShellOutput:
    """Captured result of a finished command."""

    stdout: str
    stderr: str
    exit_code: int


class ShellExecutor:
    """Runs commands through the platform shell."""

    def __init__(self, enabled: bool, allowed_commands: Iterable[str] = ()) -> None:
        self.enabled = enabled
        self.allowed_commands = list(allowed_commands)

    def validate_command(self, command: str) -> None:
        """Raise ShellError unless the command may run."""
        if not self.enabled:
            raise ShellError("Shell execution is disabled in configuration")
        if not self.allowed_commands:
            return
        words = command.split()
        first_word = words[0] if words else ""
        base_cmd = re.split(r"[/\\]", first_word)[-1]
        base_cmd = base_cmd.removesuffix(".exe")
        if base_cmd not in self.allowed_commands:
            raise ShellError(
                f"Command '{base_cmd}' is not in the allowed list: {self.allowed_commands}"
            )

    def execute(self, command: str, working_dir: str | None = None) -> ShellOutput:
        """Run a command and capture its output."""
        self.validate_command(command)

        cmd_lower = command.strip().lower()
        is_launch = cmd_lower.startswith("start ") or "start /" in cmd_lower
        if sys.platform == "win32":
            argv = ["cmd", "/C", command]
        else:
            argv = ["sh", "-c", command]
        timeout = _LAUNCH_TIMEOUT if is_launch else _COMMAND_TIMEOUT

        try:
            completed = subprocess.run(
                argv,
                cwd=working_dir,
                capture_output=True,
                timeout=timeout,
            )
        except subprocess.TimeoutExpired as exc:
            if is_launch:
                raise ShellError("应用已启动（后台运行中）") from exc
            raise ShellError(f"Command timed out after {timeout} seconds") from exc

        exit_code = completed.returncode if completed.returncode >= 0 else -1
        return ShellOutput(
            stdout=completed.stdout.decode("utf-8", errors="replace"),
            stderr=completed.stderr.decode("utf-8", errors="replace"),
            exit_code=exit_code,
        )