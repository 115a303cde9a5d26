"""HTML body markup for the starter document."""

from __future__ import annotations

import textwrap

from .catalog import CssFramework, DeviceTarget, Theme
from .models import Configuration

TAILWIND_PADDING: dict[str, str] = {
    DeviceTarget.MOBILE.value: "px-4 py-6",
    DeviceTarget.DESKTOP.value: "px-8 py-12 lg:px-16 lg:py-20",
}

# Any target other than Mobile/Desktop gets the progressive three-tier set.
TAILWIND_RESPONSIVE_PADDING = "px-4 py-6 md:px-8 md:py-12 lg:px-16 lg:py-20"

_BODY_TEMPLATE = textwrap.dedent("""\
    <div{wrapper_attr}>
        <header class="header">
            <div class="container">
                <h1 class="title">{project_type}</h1>
                <p class="subtitle">Built with {css_framework}</p>
            </div>
        </header>

        <main class="main-content">
            <div class="container">
                <section class="hero-section">
                    <h2 class="hero-title">Welcome to Your {project_type}</h2>
                    <p class="hero-description">This is a {design_style} design with {theme} theme.</p>
                    <button class="cta-button">Get Started</button>
                </section>
            </div>
        </main>
    </div>""")


def tailwind_padding(device_target: str) -> str:
    return TAILWIND_PADDING.get(device_target, TAILWIND_RESPONSIVE_PADDING)


def bootstrap_theme(theme: str) -> str:
    return "bg-dark text-light" if theme == Theme.DARK.value else "bg-light text-dark"


def wrapper_classes(config: Configuration) -> str:
    """Class list for the page wrapper, or ``""`` when the framework needs none."""
    if config.css_framework == CssFramework.TAILWIND.value:
        classes = ["min-h-screen", tailwind_padding(config.device_target)]
        if config.theme == Theme.DARK.value:
            classes.append("dark")
        return " ".join(classes)
    if config.css_framework == CssFramework.BOOTSTRAP.value:
        return f"min-vh-100 {bootstrap_theme(config.theme)}"
    return ""


def resolve_markup(config: Configuration) -> str:
    """Return the body fragment: page header plus hero section."""
    classes = wrapper_classes(config)
    body = _BODY_TEMPLATE.format(
        wrapper_attr=f' class="{classes}"' if classes else "",
        project_type=config.project_type,
        css_framework=config.css_framework,
        design_style=config.design_style.lower(),
        theme=config.theme.lower(),
    )
    return textwrap.indent(body, " " * 4)
