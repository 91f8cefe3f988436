"""CLI entry point for site generation."""

import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path

from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .bundle import archive_name, build_archive, site_slug, write_site
from .config import get_settings
from .enrich import refine_description
from .generator import generate_site
from .models import default_profile, profile_from_dict
from .themes import THEMES
from .validation import validate_profile


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="site-builder",
        description="Generate a static business website (index.html, style.css, script.js) from a profile.",
    )
    parser.add_argument(
        "profile",
        type=Path,
        nargs="?",
        help="Path to a business profile JSON file",
    )
    parser.add_argument(
        "--demo",
        action="store_true",
        help="Use the built-in demo profile instead of a file",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help="Theme id (overrides the profile's themeId)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Output directory (default: {SITE_BUILDER_OUTPUT_DIR}/{business-slug})",
    )
    parser.add_argument(
        "--zip",
        action="store_true",
        help="Write a {business-slug}-website.zip archive instead of loose files",
    )
    parser.add_argument(
        "--refine",
        action="store_true",
        help="Polish the description with Haiku before generating",
    )
    parser.add_argument(
        "--force",
        action="store_true",
        help="Generate even if the profile fails validation",
    )
    parser.add_argument(
        "--list-themes",
        action="store_true",
        help="Print the available themes and exit",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def _print_themes(console: Console):
    table = Table(title="Themes")
    table.add_column("id", style="bold cyan")
    table.add_column("name")
    table.add_column("serif")
    for theme in THEMES.values():
        table.add_row(theme.theme_id, theme.label, "forced" if theme.force_serif else "")
    console.print(table)


def _print_errors(console: Console, errors: dict[str, str]):
    table = Table(title="Profile has problems", title_style="bold red")
    table.add_column("field", style="bold")
    table.add_column("problem")
    for field_name, message in errors.items():
        table.add_row(field_name, message)
    console.print(table)


def main(argv: list[str] | None = None):
    load_dotenv()

    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True)],
    )

    console = Console()

    if args.list_themes:
        _print_themes(console)
        return

    if not args.demo and args.profile is None:
        parser.error("a profile path is required (or pass --demo)")

    try:
        if args.demo:
            profile = default_profile()
        else:
            profile = profile_from_dict(json.loads(args.profile.read_text(encoding="utf-8")))

        if args.refine:
            with console.status("[bold cyan]Refining description...[/]"):
                refined = refine_description(profile.name, profile.description)
            profile = replace(profile, description=refined)

        errors = validate_profile(profile)
        if errors and not args.force:
            _print_errors(console, errors)
            console.print("[yellow]Fix the profile or pass --force to generate anyway.[/]")
            sys.exit(2)

        site = generate_site(profile, args.theme)

        output = args.output or get_settings().output_dir / site_slug(profile.name)
        if args.zip:
            output.mkdir(parents=True, exist_ok=True)
            archive_path = output / archive_name(profile.name)
            archive_path.write_bytes(build_archive(site))
            console.print(f"\n[bold green]Done![/] Archive saved to [bold]{archive_path}[/]\n")
        else:
            write_site(site, output)
            console.print(f"\n[bold green]Done![/] Site written to [bold]{output}[/]\n")
    except KeyboardInterrupt:
        console.print("\n[yellow]Cancelled.[/]")
        sys.exit(1)
    except (OSError, ValueError) as e:
        console.print(f"\n[bold red]Error:[/] {e}\n")
        sys.exit(1)


if __name__ == "__main__":
    main()
