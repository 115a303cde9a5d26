"""Option catalog for the design configurator.

Holds the closed value sets for every selectable axis, the suggested values
for the free-text axes, the ordered shadow depth table, and the default
configuration record.  Enum members are ``str`` subclasses, so the lookup
tables in the resolvers accept either a member or its plain string value.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class Theme(str, Enum):
    """Colour scheme of the generated page."""
    DARK = "Dark"
    LIGHT = "Light"
    AUTO = "Auto"


class DeviceTarget(str, Enum):
    """Device class the layout is optimised for."""
    MOBILE = "Mobile"
    DESKTOP = "Desktop"
    RESPONSIVE = "Responsive"


class CssFramework(str, Enum):
    """CSS framework loaded from a CDN."""
    TAILWIND = "Tailwind CSS"
    BOOTSTRAP = "Bootstrap 5"
    BULMA = "Bulma"
    CUSTOM = "Custom CSS"


class Typography(str, Enum):
    """Web font family."""
    GEIST = "Geist"
    INTER = "Inter"
    ROBOTO = "Roboto"
    POPPINS = "Poppins"


class AnimationType(str, Enum):
    """Entrance/idle animation applied to the headings."""
    ROTATE = "Rotate"
    FADE = "Fade"
    SLIDE = "Slide"
    SCALE = "Scale"
    BOUNCE = "Bounce"
    PARALLAX = "Parallax"
    NONE = "None"


class JsLibrary(str, Enum):
    """JavaScript library driving the page's interactivity."""
    VANILLA = "Vanilla JS"
    ALPINE = "Alpine.js"
    REACT = "React"
    VUE = "Vue"
    GSAP = "GSAP"


class ShadowDepth(str, Enum):
    """Resolved shadow depth labels, in ordinal order."""
    NONE = "None"
    LIGHT = "Light"
    MEDIUM = "Medium"
    HEAVY = "Heavy"


# ---------------------------------------------------------------------------
# Shadow depth table
# ---------------------------------------------------------------------------

# Index i of the slider maps to SHADOW_DEPTH_LABELS[i].
SHADOW_DEPTH_LABELS: tuple[str, ...] = tuple(depth.value for depth in ShadowDepth)

DEFAULT_SHADOW_LABEL = ShadowDepth.MEDIUM.value


def resolve_shadow_label(index: int) -> str:
    """Return the label for a shadow depth index.

    Indices outside ``0..3`` resolve to ``"Medium"``.
    """
    if 0 <= index < len(SHADOW_DEPTH_LABELS):
        return SHADOW_DEPTH_LABELS[index]
    return DEFAULT_SHADOW_LABEL


# ---------------------------------------------------------------------------
# Suggested values for the free-text axes
# ---------------------------------------------------------------------------

PROJECT_TYPES: tuple[str, ...] = (
    "Landing Page",
    "Dashboard",
    "Portfolio",
    "E-commerce Store",
    "Blog",
    "SaaS Application",
    "Mobile App",
)

DESIGN_STYLES: tuple[str, ...] = (
    "Minimalist",
    "Modern",
    "Glassmorphism",
    "Neumorphism",
    "Brutalist",
    "Material Design",
    "Flat Design",
)

PALETTE_TYPES: tuple[str, ...] = (
    "Monochrome",
    "Complementary",
    "Analogous",
    "Triadic",
    "Pastel",
)

ACCESSIBILITY_LEVELS: tuple[str, ...] = ("A", "AA", "AAA")


# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

DEFAULTS: dict[str, Any] = {
    "project_type": "Landing Page",
    "design_style": "Minimalist",
    "theme": Theme.DARK.value,
    "primary_color": "#3B82F6",
    "palette_type": "Monochrome",
    "shadow_depth": 2,
    "device_target": DeviceTarget.DESKTOP.value,
    "css_framework": CssFramework.TAILWIND.value,
    "typography": Typography.GEIST.value,
    "animation_type": AnimationType.ROTATE.value,
    "accessibility_level": "AA",
    "js_library": JsLibrary.VANILLA.value,
}


def option_catalog() -> dict[str, tuple[str, ...]]:
    """Return every axis with its offered values, keyed by field name."""
    return {
        "project_type": PROJECT_TYPES,
        "design_style": DESIGN_STYLES,
        "theme": tuple(t.value for t in Theme),
        "palette_type": PALETTE_TYPES,
        "shadow_depth": SHADOW_DEPTH_LABELS,
        "device_target": tuple(d.value for d in DeviceTarget),
        "css_framework": tuple(f.value for f in CssFramework),
        "typography": tuple(t.value for t in Typography),
        "animation_type": tuple(a.value for a in AnimationType),
        "accessibility_level": ACCESSIBILITY_LEVELS,
        "js_library": tuple(j.value for j in JsLibrary),
    }
