"""BusinessProfile dataclass — the input record for site generation."""

from collections.abc import Mapping
from dataclasses import dataclass, field


@dataclass(frozen=True)
class ServiceItem:
    id: str  # upstream list key, never rendered
    title: str
    description: str = ""
    icon_name: str = "fa-star"  # Font Awesome class, e.g. "fa-mug-hot"


@dataclass(frozen=True)
class BusinessProfile:
    name: str
    description: str = ""
    phone_display: str = ""
    whatsapp_number: str = ""
    address: str = ""
    services: tuple[ServiceItem, ...] = ()
    theme_color: str = "#16a34a"  # CSS color, used verbatim
    theme_id: str = "modern"
    hero_image: str | None = None  # URL or data: URI
    about_image: str | None = None
    logo_image: str | None = None
    social_links: Mapping[str, str | None] = field(default_factory=dict)
    service_columns: int = 3  # 1, 2 or 3
    font_style: str = "sans"  # "sans" or "serif"


@dataclass(frozen=True)
class GeneratedSite:
    markup: str
    stylesheet: str
    behavior_script: str

    def files(self) -> dict[str, str]:
        """The three artifacts keyed by the file names they ship under."""
        return {
            "index.html": self.markup,
            "style.css": self.stylesheet,
            "script.js": self.behavior_script,
        }


def default_profile() -> BusinessProfile:
    """Return a fresh demo profile for the editor and the CLI's --demo flag."""
    return BusinessProfile(
        name="Green Valley Cafe",
        description=(
            "Experience the finest organic coffee and handcrafted pastries in the heart "
            "of the city. We pride ourselves on sourcing local ingredients and creating "
            "a cozy atmosphere for all our neighbors."
        ),
        phone_display="+91 98765 43210",
        whatsapp_number="919876543210",
        address="123 Garden Street, Eco Park, Bangalore - 560001",
        services=(
            ServiceItem("1", "Specialty Coffee", "Single-origin beans roasted in small batches.", "fa-mug-hot"),
            ServiceItem("2", "Artisan Bakery", "Breads and pastries baked fresh every morning.", "fa-bread-slice"),
            ServiceItem("3", "Vegan Breakfast", "Plant-based plates made from local produce.", "fa-leaf"),
            ServiceItem("4", "Event Catering", "Coffee bars and platters for your gatherings.", "fa-utensils"),
        ),
        theme_color="#16a34a",
        theme_id="modern",
        social_links={"instagram": "", "facebook": "", "linkedin": ""},
    )


# camelCase keys sent by the browser editor -> dataclass field names
_FIELD_ALIASES = {
    "phoneDisplay": "phone_display",
    "phone": "phone_display",
    "whatsappNumber": "whatsapp_number",
    "whatsapp": "whatsapp_number",
    "themeColor": "theme_color",
    "themeId": "theme_id",
    "heroImage": "hero_image",
    "heroImageUrl": "hero_image",
    "aboutImage": "about_image",
    "aboutImageUrl": "about_image",
    "logoImage": "logo_image",
    "logoUrl": "logo_image",
    "socialLinks": "social_links",
    "socials": "social_links",
    "serviceColumns": "service_columns",
    "fontStyle": "font_style",
}

_TEXT_FIELDS = (
    "description", "phone_display", "whatsapp_number", "address",
    "theme_color", "theme_id", "font_style",
)
_IMAGE_FIELDS = ("hero_image", "about_image", "logo_image")


def parse_services(raw) -> tuple[ServiceItem, ...]:
    """
    Build ServiceItems from the loose shapes the editor sends.

    Accepts a comma-separated string ("Coffee, Bakery"), a list of strings,
    or a list of dicts with title/description/icon keys.
    """
    if raw is None:
        return ()
    if isinstance(raw, str):
        raw = [s.strip() for s in raw.split(",")]
    elif not isinstance(raw, (list, tuple)):
        raise ValueError("services must be a comma-separated string or a list.")

    items = []
    for i, entry in enumerate(raw):
        if isinstance(entry, ServiceItem):
            items.append(entry)
        elif isinstance(entry, Mapping):
            title = str(entry.get("title") or "").strip()
            if not title:
                continue
            items.append(ServiceItem(
                id=str(entry.get("id") or i + 1),
                title=title,
                description=str(entry.get("description") or ""),
                icon_name=str(entry.get("iconName") or entry.get("icon_name") or entry.get("icon") or "fa-star"),
            ))
        else:
            title = str(entry).strip()
            if title:
                items.append(ServiceItem(id=str(i + 1), title=title))
    return tuple(items)


def profile_from_dict(data: Mapping) -> BusinessProfile:
    """
    Build a BusinessProfile from a JSON payload (camelCase or snake_case keys).

    Raises:
        ValueError: payload is not a mapping, has no business name, or has
            malformed services/socialLinks/serviceColumns
    """
    if not isinstance(data, Mapping):
        raise ValueError("Profile must be a JSON object.")

    values = {_FIELD_ALIASES.get(key, key): value for key, value in data.items()}

    name = str(values.get("name") or "").strip()
    if not name:
        raise ValueError("Profile is missing a business name.")

    kwargs = {"name": name, "services": parse_services(values.get("services"))}
    for key in _TEXT_FIELDS:
        if values.get(key) is not None:
            kwargs[key] = str(values[key])
    for key in _IMAGE_FIELDS:
        if values.get(key):
            kwargs[key] = str(values[key])

    socials = values.get("social_links") or {}
    if not isinstance(socials, Mapping):
        raise ValueError("socialLinks must be an object of platform -> URL.")
    kwargs["social_links"] = {str(k): (str(v) if v else None) for k, v in socials.items()}

    columns = values.get("service_columns")
    if columns is not None:
        try:
            kwargs["service_columns"] = int(columns)
        except (TypeError, ValueError):
            raise ValueError(f"serviceColumns must be 1, 2 or 3, got {columns!r}")

    return BusinessProfile(**kwargs)
