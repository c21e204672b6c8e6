"""Subprocess runner for macOS system utilities."""

from __future__ import annotations

import os
import subprocess
from dataclasses import dataclass

# OS utilities are only looked up on this fixed search path
DEFAULT_SEARCH_PATH = "/usr/sbin:/usr/bin:/sbin:/bin:/usr/local/bin"


@dataclass
class CommandResult:
    """Result of a subprocess command execution."""
    success: bool
    stdout: str
    stderr: str
    return_code: int


def run_cmd(
    args: list[str],
    timeout: int = 30,
    search_path: str = DEFAULT_SEARCH_PATH,
    encoding: str = "utf-8",
) -> CommandResult:
    """Execute a command with a fixed PATH and return a structured result.

    Args:
        args: Command and arguments list.
        timeout: Timeout in seconds.
        search_path: PATH used both for locating the command and in its
            environment.
        encoding: Output encoding.

    Returns:
        CommandResult with stdout, stderr, return code, and success flag.
    """
    env = dict(os.environ)
    env["PATH"] = search_path
    try:
        proc = subprocess.run(
            args,
            capture_output=True,
            timeout=timeout,
            env=env,
            text=True,
            encoding=encoding,
            errors="replace",
        )
        return CommandResult(
            success=proc.returncode == 0,
            stdout=proc.stdout,
            stderr=proc.stderr,
            return_code=proc.returncode,
        )
    except subprocess.TimeoutExpired:
        return CommandResult(
            success=False,
            stdout="",
            stderr=f"Command timed out after {timeout} seconds",
            return_code=-1,
        )
    except FileNotFoundError:
        return CommandResult(
            success=False,
            stdout="",
            stderr=f"Command not found: {args[0] if args else '(empty)'}",
            return_code=-1,
        )
    except OSError as e:
        return CommandResult(
            success=False,
            stdout="",
            stderr=f"OS error executing command: {e}",
            return_code=-1,
        )
