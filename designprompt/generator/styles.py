"""Inline stylesheet generation for the starter document.

The stylesheet is assembled from small rule blocks: custom properties, base
rules, component rules, an optional responsive section and the shared
keyframe definitions.  Every lookup falls back to a neutral value for
options it does not recognise.
"""

from __future__ import annotations

from .catalog import AnimationType, DeviceTarget, ShadowDepth, Theme, Typography
from .models import Configuration

_RULE_INDENT = " " * 8
_BODY_INDENT = " " * 12


# ---------------------------------------------------------------------------
# Lookup tables
# ---------------------------------------------------------------------------

DEFAULT_FONT_FAMILY = "'Geist', system-ui, sans-serif"

FONT_FAMILIES: dict[str, str] = {
    Typography.GEIST.value: DEFAULT_FONT_FAMILY,
    Typography.INTER.value: "'Inter', sans-serif",
    Typography.ROBOTO.value: "'Roboto', sans-serif",
    Typography.POPPINS.value: "'Poppins', sans-serif",
}

SHADOWS: dict[str, str] = {
    ShadowDepth.NONE.value: "none",
    ShadowDepth.LIGHT.value: "0 2px 4px rgba(0,0,0,0.1)",
    ShadowDepth.MEDIUM.value: "0 4px 8px rgba(0,0,0,0.15)",
    ShadowDepth.HEAVY.value: "0 10px 25px rgba(0,0,0,0.2)",
}

# Parallax is a static compositing hint rather than a keyframe animation.
ANIMATION_DECLARATIONS: dict[str, str] = {
    AnimationType.ROTATE.value: "animation: rotate 3s ease-in-out infinite alternate;",
    AnimationType.FADE.value: "animation: fadeIn 2s ease-in-out;",
    AnimationType.SLIDE.value: "animation: slideIn 1s ease-out;",
    AnimationType.SCALE.value: "animation: scale 2s ease-in-out infinite alternate;",
    AnimationType.BOUNCE.value: "animation: bounce 2s infinite;",
    AnimationType.PARALLAX.value: "transform: translateZ(0);",
}

KEYFRAMES: dict[str, tuple[str, ...]] = {
    "rotate": (
        "0% { transform: rotate(0deg); }",
        "100% { transform: rotate(5deg); }",
    ),
    "fadeIn": (
        "from { opacity: 0; }",
        "to { opacity: 1; }",
    ),
    "slideIn": (
        "from { transform: translateX(-100%); }",
        "to { transform: translateX(0); }",
    ),
    "scale": (
        "0% { transform: scale(1); }",
        "100% { transform: scale(1.05); }",
    ),
    "bounce": (
        "0%, 20%, 53%, 80%, 100% { transform: translate3d(0,0,0); }",
        "40%, 43% { transform: translate3d(0, -10px, 0); }",
        "70% { transform: translate3d(0, -5px, 0); }",
        "90% { transform: translate3d(0, -2px, 0); }",
    ),
}


# ---------------------------------------------------------------------------
# Single-axis resolvers
# ---------------------------------------------------------------------------

def font_family(typography: str) -> str:
    """CSS font stack for *typography*; Geist when unrecognised."""
    return FONT_FAMILIES.get(typography, DEFAULT_FONT_FAMILY)


def text_color(theme: str) -> str:
    """Body text colour: light on Dark, dark grey otherwise."""
    return "#f8f9fa" if theme == Theme.DARK.value else "#333"


def background_color(theme: str) -> str:
    """Page background: near-black for Dark, light for anything else."""
    if theme == Theme.DARK.value:
        return "#1a1a1a"
    if theme == Theme.AUTO.value:
        return "#f8f9fa"
    return "#ffffff"


def container_width(device_target: str) -> str:
    """Container max-width: narrow for Mobile, wide for anything else."""
    return "480px" if device_target == DeviceTarget.MOBILE.value else "1200px"


def shadow_declaration(label: str) -> str:
    """``box-shadow`` declaration for a depth label; Medium when unknown."""
    value = SHADOWS.get(label, SHADOWS[ShadowDepth.MEDIUM.value])
    return f"box-shadow: {value};"


def animation_declaration(animation_type: str) -> str:
    """Declaration animating the headings, or ``""`` for no animation."""
    return ANIMATION_DECLARATIONS.get(animation_type, "")


# ---------------------------------------------------------------------------
# Block builders
# ---------------------------------------------------------------------------

def css_block(header: str, lines: list[str] | tuple[str, ...]) -> str:
    """Render ``header { ... }`` with one indented line per entry.

    Empty entries are dropped so optional declarations leave no blank lines.
    """
    body = "\n".join(f"{_BODY_INDENT}{line}" for line in lines if line)
    return f"{_RULE_INDENT}{header} {{\n{body}\n{_RULE_INDENT}}}"


def responsive_css(device_target: str) -> str:
    """Media queries for the device target; Desktop gets none."""
    if device_target == DeviceTarget.MOBILE.value:
        return css_block("@media (max-width: 768px)", [
            ".hero-title { font-size: 2rem; }",
            ".title { font-size: 2rem; }",
        ])
    if device_target == DeviceTarget.RESPONSIVE.value:
        return "\n\n".join([
            css_block("@media (max-width: 768px)", [
                ".hero-title { font-size: 2rem; }",
                ".title { font-size: 2rem; }",
                ".hero-section { padding: 2rem 0; }",
            ]),
            css_block("@media (min-width: 1200px)", [
                ".hero-title { font-size: 4rem; }",
            ]),
        ])
    return ""


def keyframes_css() -> str:
    """All keyframe definitions; emitted whatever animation is selected."""
    return "\n\n".join(
        css_block(f"@keyframes {name}", frames) for name, frames in KEYFRAMES.items()
    )


# ---------------------------------------------------------------------------
# Stylesheet
# ---------------------------------------------------------------------------

def resolve_stylesheet(config: Configuration) -> str:
    """Return the complete inline stylesheet body for *config*."""
    animation = animation_declaration(config.animation_type)
    shadow = shadow_declaration(config.shadow_depth_label)

    blocks = [
        css_block(":root", [
            f"--primary-color: {config.primary_color};",
            f"--font-family: {font_family(config.typography)};",
        ]),
        css_block("*", [
            "margin: 0;",
            "padding: 0;",
            "box-sizing: border-box;",
        ]),
        css_block("body", [
            "font-family: var(--font-family);",
            "line-height: 1.6;",
            f"color: {text_color(config.theme)};",
            f"background: {background_color(config.theme)};",
        ]),
        css_block(".container", [
            f"max-width: {container_width(config.device_target)};",
            "margin: 0 auto;",
            "padding: 0 1rem;",
        ]),
        css_block(".header", [
            "padding: 2rem 0;",
            "text-align: center;",
        ]),
        css_block(".title", [
            "font-size: 2.5rem;",
            "font-weight: bold;",
            "color: var(--primary-color);",
            "margin-bottom: 0.5rem;",
            animation,
        ]),
        css_block(".subtitle", [
            "font-size: 1.1rem;",
            "opacity: 0.8;",
        ]),
        css_block(".hero-section", [
            "text-align: center;",
            "padding: 4rem 0;",
        ]),
        css_block(".hero-title", [
            "font-size: 3rem;",
            "margin-bottom: 1rem;",
            animation,
        ]),
        css_block(".hero-description", [
            "font-size: 1.2rem;",
            "margin-bottom: 2rem;",
            "opacity: 0.9;",
        ]),
        css_block(".cta-button", [
            "background: var(--primary-color);",
            "color: white;",
            "padding: 1rem 2rem;",
            "border: none;",
            "border-radius: 0.5rem;",
            "font-size: 1.1rem;",
            "font-weight: 500;",
            "cursor: pointer;",
            "transition: transform 0.2s ease;",
            shadow,
        ]),
        # Hover always lifts to the heaviest shadow.
        css_block(".cta-button:hover", [
            "transform: translateY(-2px);",
            shadow_declaration(ShadowDepth.HEAVY.value),
        ]),
        responsive_css(config.device_target),
        keyframes_css(),
    ]
    return "\n\n".join(block for block in blocks if block)
