"""Command-line caller for the design configurator.

Builds a ``Configuration`` from a JSON record and/or per-option flags,
generates the design prompt and the starter document, and displays, writes
or copies them.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path

from pydantic import ValidationError
from rich.text import Text

from .clipboard import copy_text
from .config import Settings
from .generator import (
    DEFAULTS,
    CodeAssembler,
    Configuration,
    GenerationResult,
    generate,
    option_catalog,
)
from .utils import (
    console,
    load_json,
    print_code,
    print_error,
    print_options_table,
    print_prompt,
    print_success,
    print_summary_table,
)

# CLI flag -> Configuration field.  --primary-color is handled separately
# because it passes through the hex gate.
_OPTION_FLAGS: dict[str, str] = {
    "--project-type": "project_type",
    "--design-style": "design_style",
    "--theme": "theme",
    "--palette-type": "palette_type",
    "--shadow-depth": "shadow_depth",
    "--device-target": "device_target",
    "--css-framework": "css_framework",
    "--typography": "typography",
    "--animation-type": "animation_type",
    "--accessibility-level": "accessibility_level",
    "--js-library": "js_library",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="designprompt",
        description="Generate a design prompt and a starter HTML/CSS/JS document",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  designprompt\n"
            "  designprompt --theme Light --js-library React --show code\n"
            "  designprompt --config choices.json --output site/index.html\n"
            "  designprompt --primary-color '#10B981' --copy prompt\n"
        ),
    )

    catalog = option_catalog()
    for flag, field in _OPTION_FLAGS.items():
        if field == "shadow_depth":
            parser.add_argument(
                flag,
                type=int,
                choices=range(len(catalog["shadow_depth"])),
                default=None,
                help="Shadow depth index: "
                + ", ".join(f"{i}={label}" for i, label in enumerate(catalog[field]))
                + f" (default: {DEFAULTS[field]})",
            )
            continue
        parser.add_argument(
            flag,
            default=None,
            help=f"One of: {', '.join(catalog[field])} (default: {DEFAULTS[field]})",
        )

    parser.add_argument(
        "--primary-color",
        default=None,
        help=f"Hex colour #RGB or #RRGGBB; invalid values are ignored (default: {DEFAULTS['primary_color']})",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="JSON configuration record used as the base for the flags above",
    )
    parser.add_argument(
        "--settings",
        default=None,
        help="JSON settings file (default: read DP_* environment variables)",
    )
    parser.add_argument(
        "--show",
        choices=("prompt", "code", "both"),
        default="both",
        help="Which artifact to display (default: both)",
    )
    parser.add_argument(
        "--plain",
        action="store_true",
        help="Write raw text to stdout without styling",
    )
    parser.add_argument(
        "--output", "-o",
        nargs="?",
        const="",
        default=None,
        help="Write the starter document to a file (default path from settings)",
    )
    parser.add_argument(
        "--copy",
        choices=("prompt", "code"),
        default=None,
        help="Copy an artifact to the clipboard",
    )
    parser.add_argument(
        "--list-options",
        action="store_true",
        help="List every option and its values, then exit",
    )
    return parser


def build_configuration(args: argparse.Namespace) -> Configuration:
    """Combine the optional JSON record with the per-option flags.

    Raises:
        FileNotFoundError: If ``--config`` names a missing file.
        json.JSONDecodeError: If the record is not valid JSON.
        ValueError: If the record is not a JSON object.
        pydantic.ValidationError: If the record has ill-typed values.
    """
    config = Configuration()
    if args.config:
        config = Configuration.from_record(load_json(args.config))

    changes = {
        field: getattr(args, field)
        for field in _OPTION_FLAGS.values()
        if getattr(args, field) is not None
    }
    if changes:
        config = config.with_options(**changes)
    if args.primary_color is not None:
        config = config.with_primary_color(args.primary_color)
    return config


def display(result: GenerationResult, config: Configuration, args: argparse.Namespace, settings: Settings) -> None:
    """Show the requested artifacts."""
    show_prompt = args.show in ("prompt", "both")
    show_code = args.show in ("code", "both")

    if args.plain:
        if show_prompt:
            sys.stdout.write(result.prompt_text + "\n")
        if show_code:
            if show_prompt:
                sys.stdout.write("\n")
            sys.stdout.write(result.document_text + "\n")
        return

    summary = {
        name.replace("_", " ").title(): value
        for name, value in config.resolved_values().items()
    }
    print_summary_table(summary, title="Configuration")
    if show_prompt:
        print_prompt(result.prompt_text)
    if show_code:
        print_code(
            result.document_text,
            theme=settings.syntax_theme,
            line_numbers=settings.line_numbers,
        )


async def run(args: argparse.Namespace, settings: Settings) -> int:
    """Generate, display, write and copy according to *args*.

    Returns:
        The process exit status.
    """
    config = build_configuration(args)
    result = generate(config)
    display(result, config, args, settings)

    if args.output is not None:
        output_path = Path(args.output) if args.output else settings.output_path
        written = await CodeAssembler().write(config, output_path)
        if not args.plain:
            print_success(f"Starter document written to {written}")

    if args.copy:
        text = result.prompt_text if args.copy == "prompt" else result.document_text
        if not await copy_text(text, args.copy, settings.clipboard):
            return 1
    return 0


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``designprompt`` / ``python -m designprompt``."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.list_options:
        print_options_table(option_catalog(), DEFAULTS)
        return

    try:
        settings = Settings.load(Path(args.settings)) if args.settings else Settings.from_env()
    except FileNotFoundError:
        console.print(Text.assemble(("Error:", "bold red"), f" Settings file not found: {args.settings}"))
        sys.exit(1)
    except (ValidationError, ValueError) as exc:
        console.print(Text.assemble(("Error:", "bold red"), f" Invalid settings: {exc}"))
        sys.exit(1)

    try:
        status = asyncio.run(run(args, settings))
    except FileNotFoundError:
        print_error(f"Configuration file not found: {args.config}")
        sys.exit(1)
    except json.JSONDecodeError as exc:
        print_error(f"Configuration file is not valid JSON: {exc}")
        sys.exit(1)
    except (ValidationError, ValueError) as exc:
        print_error(f"Invalid configuration: {exc}")
        sys.exit(1)

    if status:
        sys.exit(status)


if __name__ == "__main__":
    main()
