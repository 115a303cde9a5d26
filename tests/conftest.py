"""Shared pytest fixtures for the designprompt test suite.

Provides reusable fixtures for:
- The default configuration and common variations of it
- A UI-shaped camelCase configuration record
- Template renderers and code assemblers
- Tool settings with a harmless clipboard fallback command
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from designprompt.config import ClipboardSettings, Settings
from designprompt.generator import CodeAssembler, Configuration, TemplateRenderer


# ---------------------------------------------------------------------------
# Configurations
# ---------------------------------------------------------------------------

@pytest.fixture
def default_config() -> Configuration:
    """The documented default configuration."""
    return Configuration()


@pytest.fixture
def light_config(default_config: Configuration) -> Configuration:
    """Defaults with the Light theme."""
    return default_config.with_options(theme="Light")


@pytest.fixture
def plain_config() -> Configuration:
    """A configuration that needs no CDN tags at all."""
    return Configuration(
        css_framework="Custom CSS",
        typography="Comic Sans",
        js_library="Vanilla JS",
    )


@pytest.fixture
def ui_record() -> dict[str, Any]:
    """A configuration record shaped like the UI layer sends it."""
    return {
        "projectType": "Dashboard",
        "designStyle": "Glassmorphism",
        "theme": "Light",
        "primaryColor": "#10B981",
        "paletteType": "Analogous",
        "shadowDepth": 3,
        "deviceTarget": "Responsive",
        "cssFramework": "Bootstrap 5",
        "typography": "Inter",
        "animationType": "Fade",
        "accessibilityLevel": "AAA",
        "jsLibrary": "Vue",
    }


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

@pytest.fixture
def renderer() -> TemplateRenderer:
    """A renderer over the packaged templates."""
    return TemplateRenderer()


@pytest.fixture
def assembler(renderer: TemplateRenderer) -> CodeAssembler:
    return CodeAssembler(renderer)


@pytest.fixture
def tmp_template_dir(tmp_path: Path) -> Path:
    """A throwaway template directory with a couple of templates."""
    template_dir = tmp_path / "templates"
    (template_dir / "nested").mkdir(parents=True)
    (template_dir / "hello.txt.j2").write_text("Hello {{ name }}!\n", encoding="utf-8")
    (template_dir / "nested" / "quote.js.j2").write_text(
        "say('{{ text | js_quote }}');\n", encoding="utf-8"
    )
    return template_dir


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------

@pytest.fixture
def clipboard_settings() -> ClipboardSettings:
    """Fallback settings pointing at a command that always succeeds."""
    return ClipboardSettings(fallback_command=["cat"], timeout=5)


@pytest.fixture
def settings(tmp_path: Path, clipboard_settings: ClipboardSettings) -> Settings:
    return Settings(
        output_path=tmp_path / "out" / "index.html",
        clipboard=clipboard_settings,
    )
