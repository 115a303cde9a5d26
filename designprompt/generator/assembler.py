"""Starter document assembly.

Composes the CDN, markup, stylesheet and script resolvers into one complete
HTML document, and exposes ``generate`` which returns both the design prompt
and the document for a configuration.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from .behavior import resolve_script
from .cdn import resolve_cdn_links
from .markup import resolve_markup
from .models import Configuration, GenerationResult
from .prompt import render_prompt
from .styles import resolve_stylesheet
from .templates import TemplateRenderer, default_renderer

DOCUMENT_TEMPLATE = "document.html.j2"


class CodeAssembler:
    """Builds the starter HTML/CSS/JS document for a configuration.

    Holds only a template renderer; every call is a pure function of the
    configuration passed in.
    """

    def __init__(self, renderer: TemplateRenderer | None = None) -> None:
        self.renderer = renderer or default_renderer()

    def build_context(self, config: Configuration) -> dict[str, Any]:
        """Resolve every document section for *config*."""
        return {
            "title": config.project_type,
            "cdn_links": resolve_cdn_links(config),
            "stylesheet": resolve_stylesheet(config),
            "markup": resolve_markup(config),
            "script": resolve_script(config, self.renderer),
        }

    def assemble(self, config: Configuration) -> str:
        """Return the complete starter document as a string."""
        return self.renderer.render(DOCUMENT_TEMPLATE, self.build_context(config))

    async def write(self, config: Configuration, output_path: str | Path) -> Path:
        """Render the starter document to *output_path*.

        Parent directories are created automatically.
        """
        return await self.renderer.render_to_file(
            DOCUMENT_TEMPLATE, output_path, self.build_context(config)
        )


def assemble_document(config: Configuration) -> str:
    """Return the starter document for *config* using the packaged templates."""
    return CodeAssembler().assemble(config)


def generate(config: Configuration) -> GenerationResult:
    """Produce the design prompt and the starter document for *config*."""
    return GenerationResult(
        prompt_text=render_prompt(config),
        document_text=assemble_document(config),
    )
