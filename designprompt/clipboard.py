"""Clipboard sink for the generated artifacts.

Copying tries the system clipboard through ``pyperclip`` in a worker thread
first.  If that is unavailable or fails, a single synchronous fallback pipes
the text into a selection-based command (``xclip -selection clipboard`` by
default).  Either outcome is reported to the user as a notification.
"""

from __future__ import annotations

import asyncio
import subprocess

import pyperclip

from .config import ClipboardSettings
from .utils import notify


async def copy_async(text: str) -> None:
    """Copy *text* via ``pyperclip`` without blocking the event loop.

    Raises:
        pyperclip.PyperclipException: If no clipboard mechanism is available.
    """
    await asyncio.to_thread(pyperclip.copy, text)


def copy_with_fallback_command(text: str, settings: ClipboardSettings) -> bool:
    """Pipe *text* into the configured fallback command.

    Returns:
        ``True`` if the command ran and exited with status 0.
    """
    try:
        completed = subprocess.run(
            settings.fallback_command,
            input=text,
            text=True,
            capture_output=True,
            timeout=settings.timeout,
            check=False,
        )
    except (FileNotFoundError, PermissionError, subprocess.TimeoutExpired):
        return False
    return completed.returncode == 0


async def copy_text(
    text: str,
    label: str,
    settings: ClipboardSettings | None = None,
) -> bool:
    """Copy an artifact to the clipboard and notify the user of the outcome.

    Args:
        text: The artifact content.
        label: Display name used in notifications (``"prompt"`` or ``"code"``).
        settings: Fallback command settings; defaults are used when omitted.

    Returns:
        ``True`` if either the primary or the fallback path succeeded.
    """
    settings = settings or ClipboardSettings()

    if not text.strip():
        notify("Nothing to copy!", style="yellow")
        return False

    try:
        await copy_async(text)
        copied = True
    except pyperclip.PyperclipException:
        copied = copy_with_fallback_command(text, settings)

    if copied:
        notify(f"{label.capitalize()} copied to clipboard!")
    else:
        notify(f"Failed to copy {label} to clipboard", style="red")
    return copied
