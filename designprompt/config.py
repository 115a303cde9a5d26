"""designprompt tool settings.

Typed settings for the command-line caller: how artifacts are displayed,
where the starter document is written, and how the clipboard fallback is
invoked.  All settings use Pydantic v2 models so they can be validated at
construction time and serialised to/from JSON or environment variables.

These are tool settings only; design choices are never persisted.
"""

from __future__ import annotations

import os
import shlex
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field


class ClipboardSettings(BaseModel):
    """How the synchronous clipboard fallback is invoked."""

    fallback_command: list[str] = Field(
        default_factory=lambda: ["xclip", "-selection", "clipboard"],
        min_length=1,
        description="Command that reads the text to copy from stdin",
    )
    timeout: int = Field(default=5, ge=1, description="Fallback timeout in seconds")


class Settings(BaseModel):
    """Global designprompt settings.

    Instances are created once by the CLI entry point (from the environment
    or a settings file) and passed to the output and clipboard helpers.
    """

    syntax_theme: str = Field(default="monokai")
    line_numbers: bool = Field(default=False)
    output_path: Path = Field(default=Path("./index.html"))
    clipboard: ClipboardSettings = Field(default_factory=ClipboardSettings)

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the settings to a JSON file.

        Args:
            path: Destination file.  Parent directories are created.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Settings":
        """Load previously-saved settings from JSON.

        Raises:
            FileNotFoundError: If the file does not exist.
            pydantic.ValidationError: If the content is not valid settings.
        """
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Settings":
        """Build ``Settings`` from environment variables.

        Recognised variables (all optional):
            DP_SYNTAX_THEME, DP_LINE_NUMBERS, DP_OUTPUT_PATH,
            DP_CLIPBOARD_COMMAND, DP_CLIPBOARD_TIMEOUT.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("DP_SYNTAX_THEME"):
            kwargs["syntax_theme"] = os.environ["DP_SYNTAX_THEME"]
        if os.environ.get("DP_LINE_NUMBERS"):
            kwargs["line_numbers"] = os.environ["DP_LINE_NUMBERS"].strip().lower() in {
                "1", "true", "yes", "on",
            }
        if os.environ.get("DP_OUTPUT_PATH"):
            kwargs["output_path"] = Path(os.environ["DP_OUTPUT_PATH"])

        clipboard_kwargs: dict[str, Any] = {}
        if os.environ.get("DP_CLIPBOARD_COMMAND"):
            clipboard_kwargs["fallback_command"] = shlex.split(
                os.environ["DP_CLIPBOARD_COMMAND"]
            )
        if os.environ.get("DP_CLIPBOARD_TIMEOUT"):
            clipboard_kwargs["timeout"] = int(os.environ["DP_CLIPBOARD_TIMEOUT"])

        return cls(clipboard=ClipboardSettings(**clipboard_kwargs), **kwargs)
