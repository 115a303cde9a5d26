"""Natural-language design prompt generation."""

from __future__ import annotations

from .models import Configuration

PROMPT_TEMPLATE = (
    "Create a {project_type} with {design_style} design style using {theme} theme. "
    "Use {primary_color} as the primary accent color with {palette_type} color palette "
    "and {shadow_depth} shadows for depth. "
    "The design should be optimized for {device_target} devices using {css_framework}. "
    "Apply {typography} typography with {animation_type} animations. "
    "Ensure the design is modern, accessible (WCAG {accessibility_level}), "
    "and user-friendly with proper spacing and visual hierarchy."
)


def render_prompt(config: Configuration) -> str:
    """Render the design prompt for *config*.

    Pure substitution into ``PROMPT_TEMPLATE``; the shadow depth appears as
    its label, never its index.
    """
    return PROMPT_TEMPLATE.format(**config.resolved_values())
