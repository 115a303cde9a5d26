"""CDN dependency resolution.

Maps the CSS framework, typography and JS library axes to the ``<link>`` and
``<script>`` tags the starter document needs in its ``<head>``.  Values with
no mapping contribute no tags.
"""

from __future__ import annotations

from .catalog import CssFramework, JsLibrary, Typography
from .models import Configuration

_GOOGLE_FONTS_PRECONNECT: tuple[str, ...] = (
    '<link rel="preconnect" href="https://fonts.googleapis.com">',
    '<link rel="preconnect" href="https://fonts.gstatic.com" crossorigin>',
)

FRAMEWORK_CDN: dict[str, tuple[str, ...]] = {
    CssFramework.TAILWIND.value: (
        '<script src="https://cdn.tailwindcss.com"></script>',
    ),
    CssFramework.BOOTSTRAP.value: (
        '<link href="https://cdn.jsdelivr.net/npm/bootstrap@5.3.0/dist/css/bootstrap.min.css" rel="stylesheet">',
    ),
    CssFramework.BULMA.value: (
        '<link rel="stylesheet" href="https://cdn.jsdelivr.net/npm/bulma@0.9.4/css/bulma.min.css">',
    ),
}

FONT_CDN: dict[str, tuple[str, ...]] = {
    Typography.GEIST.value: (
        '<link rel="stylesheet" href="https://cdn.jsdelivr.net/npm/geist@1.0.0/style.css">',
    ),
    Typography.INTER.value: (
        *_GOOGLE_FONTS_PRECONNECT,
        '<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600;700&display=swap" rel="stylesheet">',
    ),
    Typography.ROBOTO.value: (
        *_GOOGLE_FONTS_PRECONNECT,
        '<link href="https://fonts.googleapis.com/css2?family=Roboto:wght@400;500;700&display=swap" rel="stylesheet">',
    ),
    Typography.POPPINS.value: (
        *_GOOGLE_FONTS_PRECONNECT,
        '<link href="https://fonts.googleapis.com/css2?family=Poppins:wght@400;500;600;700&display=swap" rel="stylesheet">',
    ),
}

LIBRARY_CDN: dict[str, tuple[str, ...]] = {
    JsLibrary.ALPINE.value: (
        '<script defer src="https://unpkg.com/alpinejs@3.x.x/dist/cdn.min.js"></script>',
    ),
    JsLibrary.REACT.value: (
        '<script crossorigin src="https://unpkg.com/react@18/umd/react.development.js"></script>',
        '<script crossorigin src="https://unpkg.com/react-dom@18/umd/react-dom.development.js"></script>',
    ),
    JsLibrary.VUE.value: (
        '<script src="https://unpkg.com/vue@3/dist/vue.global.js"></script>',
    ),
    JsLibrary.GSAP.value: (
        '<script src="https://cdnjs.cloudflare.com/ajax/libs/gsap/3.12.2/gsap.min.js"></script>',
    ),
}


def framework_links(config: Configuration) -> list[str]:
    """Tags loading the CSS framework, if it has a CDN build."""
    return list(FRAMEWORK_CDN.get(config.css_framework, ()))


def font_links(config: Configuration) -> list[str]:
    """Tags loading the web font."""
    return list(FONT_CDN.get(config.typography, ()))


def library_links(config: Configuration) -> list[str]:
    """Tags loading the JS library; Vanilla JS needs none."""
    return list(LIBRARY_CDN.get(config.js_library, ()))


def resolve_cdn_links(config: Configuration) -> list[str]:
    """Return every CDN tag for *config*: framework, then font, then library."""
    return [
        *framework_links(config),
        *font_links(config),
        *library_links(config),
    ]
