"""
Shell helpers - run a command string and launch files or URLs.

Launching is fire-and-forget: os.startfile on Windows (and `open` /
`xdg-open` elsewhere) hands the target to the OS and returns immediately,
so awaiting the launch waits for the hand-off only, never for the launched
program to exit.

run_command is the general capability: it captures output and therefore
waits for everything that holds its pipes. Never use it to launch programs.
"""

import asyncio
import logging
import os
import shlex
import subprocess
import sys
from typing import Optional

logger = logging.getLogger("astra.services.shell")


class ShellCommandError(Exception):
    """A shell command exited with a non-zero status."""
    
    def __init__(self, cmd: str, returncode: int, stderr: str = ""):
        self.cmd = cmd
        self.returncode = returncode
        self.stderr = stderr
        message = f"Command failed with exit code {returncode}: {cmd}"
        if stderr:
            message += f" ({stderr.strip()})"
        super().__init__(message)


async def run_command(cmd: str) -> str:
    """
    Run ``cmd`` through the system shell and return its stdout.
    
    Raises:
        ShellCommandError: the command exited with a non-zero status
        OSError: the shell itself could not be started
    """
    kwargs = {}
    if sys.platform == "win32":
        kwargs["creationflags"] = subprocess.CREATE_NO_WINDOW
    
    logger.debug(f"Running: {cmd}")
    process = await asyncio.create_subprocess_shell(
        cmd,
        stdin=asyncio.subprocess.DEVNULL,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
        **kwargs,
    )
    stdout, stderr = await process.communicate()
    
    if process.returncode != 0:
        raise ShellCommandError(cmd, process.returncode, stderr.decode(errors="replace"))
    
    return stdout.decode(errors="replace")


def build_launch_command(target: str, platform: Optional[str] = None) -> str:
    """
    POSIX shell command that opens ``target`` with the default handler.
    
    Windows does not go through a shell at all (see launch_target).
    """
    platform = platform or sys.platform
    if platform == "darwin":
        return f"open {shlex.quote(target)}"
    return f"xdg-open {shlex.quote(target)}"


async def launch_target(target: str, platform: Optional[str] = None) -> None:
    """
    Open a URL, executable or shortcut without waiting for it to exit.
    
    On Windows the target goes straight to os.startfile, so no command
    line is ever parsed. Elsewhere the opener runs in its own session with
    every stdio stream on DEVNULL: whatever it spawns inherits no pipe of
    ours, and only the opener's own exit is awaited.
    
    Raises:
        ShellCommandError: the opener exited with a non-zero status
        OSError: the target could not be handed to the OS
    """
    platform = platform or sys.platform
    logger.info(f"Launching {target}")
    
    if platform == "win32":
        await asyncio.to_thread(os.startfile, target)
        return
    
    cmd = build_launch_command(target, platform)
    process = await asyncio.create_subprocess_shell(
        cmd,
        stdin=asyncio.subprocess.DEVNULL,
        stdout=asyncio.subprocess.DEVNULL,
        stderr=asyncio.subprocess.DEVNULL,
        start_new_session=True,
    )
    returncode = await process.wait()
    if returncode != 0:
        raise ShellCommandError(cmd, returncode)
