"""Derive render-safe values from a raw BusinessProfile.

Everything user-authored passes through escape_text here, so section
renderers only ever see Markup (already escaped) or values we built.
"""

import re
from dataclasses import dataclass

from markupsafe import Markup, escape

from .models import BusinessProfile

FALLBACK_HERO_IMAGE = (
    "https://images.unsplash.com/photo-1497366216548-37526070297c"
    "?auto=format&fit=crop&q=80&w=1200"
)

SOCIAL_PLATFORMS = ("instagram", "facebook", "linkedin")

DEFAULT_ICON = "fa-star"

WHATSAPP_BASE = "https://wa.me/"

_GRID_CLASSES = {
    1: "grid-cols-1",
    2: "grid-cols-1 md:grid-cols-2",
    3: "grid-cols-1 md:grid-cols-2 lg:grid-cols-3",
}

_NON_DIGITS = re.compile(r"[^0-9]")
_ICON_UNSAFE = re.compile(r"[^a-z0-9-]")
_SAFE_LINK = re.compile(r"^https?://", re.IGNORECASE)


@dataclass(frozen=True)
class ServiceCard:
    icon: Markup
    title: Markup
    description: Markup


@dataclass(frozen=True)
class NormalizedProfile:
    name: Markup
    description: Markup
    address: Markup
    phone: Markup
    whatsapp_link: Markup
    hero_image: Markup
    about_image: Markup
    logo_image: Markup | None
    social_links: tuple[tuple[Markup, Markup], ...]
    grid_class: str
    services: tuple[ServiceCard, ...]


def normalize_phone_digits(raw: str | None) -> str:
    """Keep only 0-9: '+91 98765-43210' -> '919876543210'."""
    return _NON_DIGITS.sub("", raw or "")


def escape_text(raw) -> Markup:
    """Escape & < > " ' so the value is safe in element content and attributes."""
    if raw is None:
        return Markup("")
    return escape(str(raw))


def whatsapp_link(digits: str) -> str:
    """Chat deep link. Empty digits give a bare https://wa.me/ link."""
    return f"{WHATSAPP_BASE}{digits}"


def resolve_hero_image(profile: BusinessProfile) -> str:
    return (profile.hero_image or "").strip() or FALLBACK_HERO_IMAGE


def resolve_about_image(profile: BusinessProfile) -> str:
    return (profile.about_image or "").strip() or resolve_hero_image(profile)


def filter_social_links(profile: BusinessProfile) -> list[tuple[str, str]]:
    """
    Return (platform, url) pairs for platforms with an http(s) URL set.

    Order follows SOCIAL_PLATFORMS, not the profile's mapping order;
    platforms outside SOCIAL_PLATFORMS are ignored.
    """
    links = profile.social_links or {}
    result = []
    for platform in SOCIAL_PLATFORMS:
        url = (links.get(platform) or "").strip()
        if _SAFE_LINK.match(url):
            result.append((platform, url))
    return result


def resolve_grid_column_class(columns) -> str:
    """Tailwind grid classes for 1/2/3 columns; anything else is treated as 3."""
    return _GRID_CLASSES.get(columns, _GRID_CLASSES[3])


def _icon_class(icon_name: str) -> str:
    icon = _ICON_UNSAFE.sub("", (icon_name or "").strip().lower())
    if not icon:
        return DEFAULT_ICON
    if not icon.startswith("fa-"):
        icon = f"fa-{icon}"
    return icon


def normalize_profile(profile: BusinessProfile) -> NormalizedProfile:
    """Resolve every render input for one generation call."""
    digits = normalize_phone_digits(profile.whatsapp_number)
    logo = (profile.logo_image or "").strip()
    return NormalizedProfile(
        name=escape_text(profile.name),
        description=escape_text(profile.description),
        address=escape_text(profile.address),
        phone=escape_text(profile.phone_display),
        whatsapp_link=escape_text(whatsapp_link(digits)),
        hero_image=escape_text(resolve_hero_image(profile)),
        about_image=escape_text(resolve_about_image(profile)),
        logo_image=escape_text(logo) if logo else None,
        social_links=tuple(
            (escape_text(platform), escape_text(url))
            for platform, url in filter_social_links(profile)
        ),
        grid_class=resolve_grid_column_class(profile.service_columns),
        services=tuple(
            ServiceCard(
                icon=escape_text(_icon_class(item.icon_name)),
                title=escape_text(item.title),
                description=escape_text(item.description),
            )
            for item in profile.services
        ),
    )
