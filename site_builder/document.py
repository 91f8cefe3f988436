"""Document shell plus the standalone stylesheet and behavior script."""

from markupsafe import Markup

from .normalize import escape_text
from .themes import ThemeConfig

NAV_HEIGHT = 80  # px, matches the nav's h-20

TAILWIND_CDN = "https://cdn.tailwindcss.com"
FONT_AWESOME_CSS = "https://cdnjs.cloudflare.com/ajax/libs/font-awesome/6.4.0/css/all.min.css"

FONTS = {
    "serif": (
        "https://fonts.googleapis.com/css2?family=Instrument+Serif:ital@0;1&family=Inter:wght@400;700&display=swap",
        "'Instrument Serif', serif",
    ),
    "sans": (
        "https://fonts.googleapis.com/css2?family=Plus+Jakarta+Sans:wght@400;500;600;700;800&display=swap",
        "'Plus Jakarta Sans', sans-serif",
    ),
}


def resolve_font(font_style: str, theme: ThemeConfig) -> tuple[str, str]:
    """(stylesheet URL, CSS font stack). Serif-forced themes ignore the user's choice."""
    if theme.force_serif or font_style == "serif":
        return FONTS["serif"]
    return FONTS["sans"]


def _primary_rules(theme_color: str) -> str:
    return (
        f":root {{ --primary: {theme_color}; }}\n"
        ".text-primary { color: var(--primary); }\n"
        ".bg-primary { background-color: var(--primary); }\n"
        ".border-primary { border-color: var(--primary); }\n"
        ".icon-badge { background-color: color-mix(in srgb, var(--primary) 12%, transparent); }\n"
    )


def inline_color(theme_color: str) -> str:
    """Theme color safe for a raw-text <style> block, where entities are not decoded."""
    return (theme_color or "").replace("<", "")


def assemble_stylesheet(theme_color: str) -> str:
    """External style.css exposing --primary for restyling without regeneration."""
    return "/* Theme color */\n" + _primary_rules(theme_color)


def assemble_script() -> str:
    """Smooth in-page anchor scrolling that clears the fixed nav bar."""
    return f"""document.querySelectorAll('a[href^="#"]').forEach(function (anchor) {{
    anchor.addEventListener('click', function (e) {{
        var href = this.getAttribute('href');
        if (href === '#' || href === '') return;
        var target = document.querySelector(href);
        if (!target) return;
        e.preventDefault();
        var navHeight = {NAV_HEIGHT};
        var offsetPosition = target.getBoundingClientRect().top + window.pageYOffset - navHeight;
        window.scrollTo({{ top: offsetPosition, behavior: 'smooth' }});
    }});
}});
"""


def assemble_markup(
    sections: list[str],
    theme: ThemeConfig,
    font_style: str,
    theme_color: str,
    title: Markup,
    summary: Markup,
) -> str:
    """
    Wrap rendered sections in a complete HTML document.

    Args:
        sections: Fragments in page order
        theme: Resolved theme (body classes, serif override)
        font_style: "sans" or "serif"
        theme_color: Raw CSS color; "<" is dropped since it lands inside <style>
        title: Escaped business name
        summary: Escaped description for the meta tag

    Returns:
        The full index.html text
    """
    font_url, font_stack = resolve_font(font_style, theme)
    inline_css = _primary_rules(inline_color(theme_color))

    parts = [
        "<!DOCTYPE html>",
        '<html lang="en" class="scroll-smooth">',
        "<head>",
        '    <meta charset="UTF-8">',
        '    <meta name="viewport" content="width=device-width, initial-scale=1.0">',
        f"    <title>{title}</title>",
        f'    <meta name="description" content="{summary}">',
        f'    <meta name="theme" content="{theme.theme_id}">',
        f'    <script src="{TAILWIND_CDN}"></script>',
        f'    <link rel="stylesheet" href="{FONT_AWESOME_CSS}">',
        f'    <link href="{escape_text(font_url)}" rel="stylesheet">',
        '    <link rel="stylesheet" href="style.css">',
        "    <style>",
        inline_css,
        f"body {{ font-family: {font_stack}; }}",
        "    </style>",
        "</head>",
        f'<body class="{theme.background} {theme.text}">',
        *sections,
        "<script>",
        assemble_script(),
        "</script>",
        "</body>",
        "</html>",
        "",
    ]
    return "\n".join(parts)
