"""Design prompt and starter document generation.

Maps a ``Configuration`` to two text artifacts: a natural-language design
prompt and a self-contained HTML/CSS/JS starter document.  Every resolver is
a pure function of the configuration.

Quick usage::

    from designprompt.generator import Configuration, generate

    config = Configuration(theme="Light", js_library="React")
    result = generate(config)
    print(result.prompt_text)
    print(result.document_text)
"""

from designprompt.generator.assembler import CodeAssembler, assemble_document, generate
from designprompt.generator.behavior import resolve_script
from designprompt.generator.catalog import (
    DEFAULTS,
    SHADOW_DEPTH_LABELS,
    AnimationType,
    CssFramework,
    DeviceTarget,
    JsLibrary,
    ShadowDepth,
    Theme,
    Typography,
    option_catalog,
    resolve_shadow_label,
)
from designprompt.generator.cdn import resolve_cdn_links
from designprompt.generator.colors import is_valid_hex
from designprompt.generator.markup import resolve_markup
from designprompt.generator.models import Configuration, GenerationResult
from designprompt.generator.prompt import render_prompt
from designprompt.generator.styles import resolve_stylesheet
from designprompt.generator.templates import TemplateRenderer

__all__ = [
    "DEFAULTS",
    "SHADOW_DEPTH_LABELS",
    "AnimationType",
    "CodeAssembler",
    "Configuration",
    "CssFramework",
    "DeviceTarget",
    "GenerationResult",
    "JsLibrary",
    "ShadowDepth",
    "TemplateRenderer",
    "Theme",
    "Typography",
    "assemble_document",
    "generate",
    "is_valid_hex",
    "option_catalog",
    "render_prompt",
    "resolve_cdn_links",
    "resolve_markup",
    "resolve_script",
    "resolve_shadow_label",
    "resolve_stylesheet",
]
