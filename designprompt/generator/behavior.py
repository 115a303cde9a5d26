"""Inline script selection for the starter document.

Exactly one script template is chosen per configuration, keyed by the JS
library.  Anything unrecognised gets the Vanilla JS template.
"""

from __future__ import annotations

from .catalog import JsLibrary
from .models import Configuration
from .templates import TemplateRenderer, default_renderer

# React and Vue mount into the main content area that holds the hero section.
MOUNT_SELECTOR = ".main-content"

SCRIPT_TEMPLATES: dict[str, str] = {
    JsLibrary.ALPINE.value: "scripts/alpine.js.j2",
    JsLibrary.REACT.value: "scripts/react.js.j2",
    JsLibrary.VUE.value: "scripts/vue.js.j2",
    JsLibrary.GSAP.value: "scripts/gsap.js.j2",
    JsLibrary.VANILLA.value: "scripts/vanilla.js.j2",
}

DEFAULT_SCRIPT_TEMPLATE = SCRIPT_TEMPLATES[JsLibrary.VANILLA.value]


def script_template_for(js_library: str) -> str:
    """Template path for *js_library*; Vanilla JS when unrecognised."""
    return SCRIPT_TEMPLATES.get(js_library, DEFAULT_SCRIPT_TEMPLATE)


def resolve_script(
    config: Configuration,
    renderer: TemplateRenderer | None = None,
) -> str:
    """Return the inline script body for *config*'s JS library."""
    renderer = renderer or default_renderer()
    return renderer.render(
        script_template_for(config.js_library),
        {
            "project_type": config.project_type,
            "primary_color": config.primary_color,
            "mount_selector": MOUNT_SELECTOR,
        },
    )
