"""Tests for starter document assembly and the generate() facade.

Covers:
- Document skeleton (doctype, head, body)
- Section placement (CDN tags, style, markup, script)
- The default configuration's documented markers
- Isolation between unrelated axes
- Determinism
- Writing the document to disk
"""

from __future__ import annotations

from pathlib import Path

import pytest

from designprompt.generator import (
    CodeAssembler,
    Configuration,
    GenerationResult,
    assemble_document,
    generate,
    render_prompt,
    resolve_markup,
    resolve_script,
    resolve_stylesheet,
)
from designprompt.generator.cdn import font_links, framework_links


# ---------------------------------------------------------------------------
# Skeleton
# ---------------------------------------------------------------------------


class TestDocumentSkeleton:
    @pytest.mark.unit
    def test_head(self, default_config, assembler):
        document = assembler.assemble(default_config)
        assert document.startswith(
            "<!DOCTYPE html>\n"
            '<html lang="en">\n'
            "<head>\n"
            '    <meta charset="UTF-8">\n'
            '    <meta name="viewport" content="width=device-width, initial-scale=1.0">\n'
            "    <title>Landing Page</title>\n"
        )

    @pytest.mark.unit
    def test_tail(self, default_config, assembler):
        document = assembler.assemble(default_config)
        assert document.endswith("        });\n    </script>\n</body>\n</html>")

    @pytest.mark.unit
    def test_cdn_tags_one_per_line(self, default_config, assembler):
        document = assembler.assemble(default_config)
        assert (
            "    <title>Landing Page</title>\n"
            '    <script src="https://cdn.tailwindcss.com"></script>\n'
            '    <link rel="stylesheet" href="https://cdn.jsdelivr.net/npm/geist@1.0.0/style.css">\n'
            "    <style>\n"
        ) in document

    @pytest.mark.unit
    def test_no_cdn_tags(self, plain_config, assembler):
        document = assembler.assemble(plain_config)
        assert "    <title>Landing Page</title>\n    <style>\n" in document

    @pytest.mark.unit
    def test_sections_in_order(self, default_config, assembler):
        document = assembler.assemble(default_config)
        positions = [
            document.index("<title>"),
            document.index("cdn.tailwindcss.com"),
            document.index("<style>"),
            document.index("</style>"),
            document.index("<body>"),
            document.index('<header class="header">'),
            document.index("<script>\n"),
            document.index("// Vanilla JavaScript"),
            document.index("</body>"),
        ]
        assert positions == sorted(positions)

    @pytest.mark.unit
    def test_resolver_outputs_embedded_verbatim(self, ui_record, assembler):
        config = Configuration.from_record(ui_record)
        document = assembler.assemble(config)
        assert f"    <style>\n{resolve_stylesheet(config)}\n    </style>\n" in document
        assert f"<body>\n{resolve_markup(config)}\n\n    <script>\n" in document
        assert f"    <script>\n{resolve_script(config)}\n    </script>\n" in document

    @pytest.mark.unit
    def test_title_is_project_type(self, assembler):
        document = assembler.assemble(Configuration(project_type="Portfolio"))
        assert "<title>Portfolio</title>" in document


# ---------------------------------------------------------------------------
# Default configuration markers
# ---------------------------------------------------------------------------


class TestDefaultDocument:
    @pytest.mark.unit
    def test_markers(self, default_config):
        document = assemble_document(default_config)
        assert '<script src="https://cdn.tailwindcss.com"></script>' in document
        assert 'class="min-h-screen px-8 py-12 lg:px-16 lg:py-20 dark"' in document
        assert "box-shadow: 0 4px 8px rgba(0,0,0,0.15);" in document
        assert "animation: rotate 3s ease-in-out infinite alternate;" in document
        assert "// Vanilla JavaScript" in document

    @pytest.mark.unit
    def test_vanilla_script_mentions_project_twice(self, default_config):
        document = assemble_document(default_config)
        script = document[document.index("    <script>\n"):]
        assert script.count("Landing Page") == 2


# ---------------------------------------------------------------------------
# Axis isolation
# ---------------------------------------------------------------------------


class TestAxisIsolation:
    @pytest.mark.unit
    def test_js_library_switch_changes_only_script(self, default_config):
        react = default_config.with_options(js_library="React")
        assert resolve_markup(react) == resolve_markup(default_config)
        assert resolve_stylesheet(react) == resolve_stylesheet(default_config)
        assert framework_links(react) == framework_links(default_config)
        assert font_links(react) == font_links(default_config)
        assert resolve_script(react) != resolve_script(default_config)

    @pytest.mark.unit
    def test_theme_switch(self, default_config, light_config):
        dark_doc = assemble_document(default_config)
        light_doc = assemble_document(light_config)
        assert "background: #1a1a1a;" in dark_doc
        assert "background: #ffffff;" in light_doc
        assert 'lg:py-20 dark"' in dark_doc
        assert 'class="min-h-screen px-8 py-12 lg:px-16 lg:py-20"' in light_doc
        for marker in (
            "box-shadow: 0 4px 8px rgba(0,0,0,0.15);",
            "animation: rotate 3s ease-in-out infinite alternate;",
            '<script src="https://cdn.tailwindcss.com"></script>',
        ):
            assert dark_doc.count(marker) == light_doc.count(marker)


# ---------------------------------------------------------------------------
# Facade and determinism
# ---------------------------------------------------------------------------


class TestGenerate:
    @pytest.mark.unit
    def test_returns_both_artifacts(self, default_config):
        result = generate(default_config)
        assert isinstance(result, GenerationResult)
        assert result.prompt_text == render_prompt(default_config)
        assert result.document_text == assemble_document(default_config)

    @pytest.mark.unit
    @pytest.mark.parametrize("library", ["Vanilla JS", "Alpine.js", "React", "Vue", "GSAP"])
    def test_idempotent(self, library):
        config = Configuration(js_library=library, device_target="Responsive")
        assert generate(config) == generate(Configuration(js_library=library, device_target="Responsive"))

    @pytest.mark.unit
    def test_unknown_values_never_raise(self):
        config = Configuration(
            theme="Sepia",
            device_target="Watch",
            css_framework="Foundation",
            typography="Comic Sans",
            animation_type="Wobble",
            js_library="Svelte",
            shadow_depth=42,
        )
        result = generate(config)
        assert result.document_text.startswith("<!DOCTYPE html>")
        assert "Medium shadows" in result.prompt_text


# ---------------------------------------------------------------------------
# Writing to disk
# ---------------------------------------------------------------------------


class TestWrite:
    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_write_creates_parents(self, default_config, assembler, tmp_path: Path):
        target = tmp_path / "site" / "nested" / "index.html"
        written = await assembler.write(default_config, target)
        assert written == target
        assert target.read_text(encoding="utf-8") == assembler.assemble(default_config)

    @pytest.mark.unit
    def test_default_renderer(self):
        assert CodeAssembler().renderer is CodeAssembler().renderer
