"""Orchestration: profile + theme id -> normalize -> sections -> three artifacts."""

from .document import assemble_markup, assemble_script, assemble_stylesheet
from .models import BusinessProfile, GeneratedSite
from .normalize import normalize_profile
from .sections import SECTION_RENDERERS
from .themes import resolve_theme


def generate_site(profile: BusinessProfile, theme_id: str | None = None) -> GeneratedSite:
    """
    Generate the markup, stylesheet and behavior script for a profile.

    Pure and synchronous: no I/O, no clock, no randomness, so identical input
    gives byte-identical output and it is safe to call on every keystroke.

    Args:
        profile: Business data to render
        theme_id: Overrides profile.theme_id when given; unknown ids fall
            back to the default theme

    Returns:
        GeneratedSite with all three artifacts
    """
    theme = resolve_theme(profile.theme_id if theme_id is None else theme_id)
    content = normalize_profile(profile)

    sections = [render(content, theme) for render in SECTION_RENDERERS]

    markup = assemble_markup(
        sections,
        theme=theme,
        font_style=profile.font_style,
        theme_color=profile.theme_color,
        title=content.name,
        summary=content.description,
    )

    return GeneratedSite(
        markup=markup,
        stylesheet=assemble_stylesheet(profile.theme_color),
        behavior_script=assemble_script(),
    )


def generate_html(profile: BusinessProfile, theme_id: str | None = None) -> str:
    return generate_site(profile, theme_id).markup


def generate_css(theme_color: str) -> str:
    return assemble_stylesheet(theme_color)


def generate_js() -> str:
    return assemble_script()
