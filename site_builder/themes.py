"""Theme registry — every visual parameter that varies by theme lives here.

Each theme is one ThemeConfig row of Tailwind class tokens. Section renderers
read these fields and never branch on the theme id.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ThemeConfig:
    theme_id: str
    label: str
    background: str  # <body> background
    text: str
    muted_text: str
    nav_background: str
    alt_background: str  # services band
    card_background: str
    card_border: str
    card_shadow: str
    footer_background: str
    footer_muted_text: str
    border_weight: str
    radius: str  # cards, images
    button_shape: str
    heading_weight: str
    social_button: str  # on page background
    footer_social_button: str
    force_serif: bool = False


# Persisted/exported values: never rename or reorder.
THEME_IDS = (
    "modern",
    "midnight",
    "executive",
    "organic",
    "neobrutalist",
    "luxury",
    "editorial",
    "futuristic",
    "vibrant",
    "vintage",
)

DEFAULT_THEME = "modern"

_SOCIAL_LIGHT = "bg-slate-100 text-slate-600 hover:bg-slate-200"
_SOCIAL_DARK = "bg-white/10 text-white hover:bg-white/20"
_SOCIAL_GLASS = "bg-white/5 backdrop-blur-sm text-white border border-white/10 hover:bg-white/10"
_SOCIAL_BRUTAL = "border-4 border-black bg-white text-black hover:bg-yellow-400 shadow-[4px_4px_0px_0px_rgba(0,0,0,1)]"
_SOCIAL_LUXURY = "border border-[#d4af37]/30 text-[#d4af37] hover:border-[#d4af37] hover:bg-[#d4af37] hover:text-black"
_SOCIAL_CYAN = "border border-cyan-400/30 text-cyan-400 hover:bg-cyan-400 hover:text-black"
_SOCIAL_VIBRANT = "bg-white shadow-xl text-indigo-600 hover:bg-indigo-600 hover:text-white"
_SOCIAL_VINTAGE = "border border-orange-200 text-orange-800 hover:bg-orange-800 hover:text-orange-50"

THEMES: dict[str, ThemeConfig] = {
    "modern": ThemeConfig(
        theme_id="modern",
        label="Modern",
        background="bg-white",
        text="text-slate-900",
        muted_text="text-slate-600",
        nav_background="bg-white/90 backdrop-blur-md border-b border-slate-100",
        alt_background="bg-slate-50",
        card_background="bg-white",
        card_border="border-gray-100",
        card_shadow="shadow-sm hover:shadow-2xl",
        footer_background="bg-slate-900 text-white",
        footer_muted_text="text-slate-400",
        border_weight="border",
        radius="rounded-3xl",
        button_shape="rounded-full",
        heading_weight="font-black",
        social_button=_SOCIAL_LIGHT,
        footer_social_button=_SOCIAL_DARK,
    ),
    "midnight": ThemeConfig(
        theme_id="midnight",
        label="Midnight",
        background="bg-slate-950",
        text="text-slate-100",
        muted_text="text-slate-400",
        nav_background="bg-slate-950/80 backdrop-blur-xl border-b border-white/5",
        alt_background="bg-slate-900",
        card_background="bg-white/5 backdrop-blur-sm",
        card_border="border-white/10",
        card_shadow="shadow-lg shadow-black/40",
        footer_background="bg-black text-slate-100",
        footer_muted_text="text-slate-500",
        border_weight="border",
        radius="rounded-2xl",
        button_shape="rounded-full",
        heading_weight="font-bold",
        social_button=_SOCIAL_GLASS,
        footer_social_button=_SOCIAL_GLASS,
    ),
    "executive": ThemeConfig(
        theme_id="executive",
        label="Executive",
        background="bg-slate-50",
        text="text-slate-800",
        muted_text="text-slate-500",
        nav_background="bg-white border-b border-slate-200 shadow-sm",
        alt_background="bg-white",
        card_background="bg-white",
        card_border="border-slate-200",
        card_shadow="shadow-md",
        footer_background="bg-slate-800 text-white",
        footer_muted_text="text-slate-300",
        border_weight="border",
        radius="rounded-lg",
        button_shape="rounded-md",
        heading_weight="font-semibold",
        social_button=_SOCIAL_LIGHT,
        footer_social_button=_SOCIAL_DARK,
    ),
    "organic": ThemeConfig(
        theme_id="organic",
        label="Organic",
        background="bg-[#faf7f2]",
        text="text-stone-800",
        muted_text="text-stone-500",
        nav_background="bg-[#faf7f2]/90 backdrop-blur-md",
        alt_background="bg-[#f1ece1]",
        card_background="bg-white/70",
        card_border="border-stone-200",
        card_shadow="shadow-sm",
        footer_background="bg-stone-900 text-stone-100",
        footer_muted_text="text-stone-400",
        border_weight="border",
        radius="rounded-[2rem]",
        button_shape="rounded-full",
        heading_weight="font-bold",
        social_button=_SOCIAL_LIGHT,
        footer_social_button=_SOCIAL_DARK,
    ),
    "neobrutalist": ThemeConfig(
        theme_id="neobrutalist",
        label="Neo-Brutalist",
        background="bg-yellow-50",
        text="text-black",
        muted_text="text-black/70",
        nav_background="bg-white border-b-4 border-black",
        alt_background="bg-pink-100",
        card_background="bg-white",
        card_border="border-black",
        card_shadow="shadow-[8px_8px_0px_0px_rgba(0,0,0,1)]",
        footer_background="bg-black text-white",
        footer_muted_text="text-white/70",
        border_weight="border-4",
        radius="rounded-none",
        button_shape="rounded-none",
        heading_weight="font-black uppercase",
        social_button=_SOCIAL_BRUTAL,
        footer_social_button=_SOCIAL_BRUTAL,
    ),
    "luxury": ThemeConfig(
        theme_id="luxury",
        label="Luxury",
        background="bg-black",
        text="text-[#f5f0e6]",
        muted_text="text-[#f5f0e6]/60",
        nav_background="bg-black/90 backdrop-blur-md border-b border-[#d4af37]/20",
        alt_background="bg-[#0d0d0d]",
        card_background="bg-transparent",
        card_border="border-[#d4af37]/30",
        card_shadow="shadow-none",
        footer_background="bg-[#0d0d0d] text-[#f5f0e6]",
        footer_muted_text="text-[#f5f0e6]/50",
        border_weight="border",
        radius="rounded-none",
        button_shape="rounded-none",
        heading_weight="font-normal tracking-wide",
        social_button=_SOCIAL_LUXURY,
        footer_social_button=_SOCIAL_LUXURY,
        force_serif=True,
    ),
    "editorial": ThemeConfig(
        theme_id="editorial",
        label="Editorial",
        background="bg-white",
        text="text-neutral-900",
        muted_text="text-neutral-600",
        nav_background="bg-white border-b-2 border-neutral-900",
        alt_background="bg-neutral-100",
        card_background="bg-white",
        card_border="border-neutral-900",
        card_shadow="shadow-none",
        footer_background="bg-neutral-900 text-white",
        footer_muted_text="text-neutral-400",
        border_weight="border-t-2",
        radius="rounded-none",
        button_shape="rounded-none",
        heading_weight="font-normal italic",
        social_button=_SOCIAL_LIGHT,
        footer_social_button=_SOCIAL_DARK,
        force_serif=True,
    ),
    "futuristic": ThemeConfig(
        theme_id="futuristic",
        label="Futuristic",
        background="bg-[#050816]",
        text="text-cyan-50",
        muted_text="text-cyan-100/60",
        nav_background="bg-[#050816]/80 backdrop-blur-xl border-b border-cyan-400/20",
        alt_background="bg-[#0a0f24]",
        card_background="bg-cyan-400/5",
        card_border="border-cyan-400/30",
        card_shadow="shadow-[0_0_30px_rgba(34,211,238,0.15)]",
        footer_background="bg-black text-cyan-50",
        footer_muted_text="text-cyan-100/50",
        border_weight="border",
        radius="rounded-xl",
        button_shape="rounded-lg",
        heading_weight="font-bold tracking-tight",
        social_button=_SOCIAL_CYAN,
        footer_social_button=_SOCIAL_CYAN,
    ),
    "vibrant": ThemeConfig(
        theme_id="vibrant",
        label="Vibrant",
        background="bg-gradient-to-br from-indigo-50 via-white to-pink-50",
        text="text-slate-900",
        muted_text="text-slate-600",
        nav_background="bg-white/70 backdrop-blur-lg shadow-sm",
        alt_background="bg-indigo-50/60",
        card_background="bg-white",
        card_border="border-transparent",
        card_shadow="shadow-xl shadow-indigo-100",
        footer_background="bg-indigo-950 text-white",
        footer_muted_text="text-indigo-200",
        border_weight="border",
        radius="rounded-[2.5rem]",
        button_shape="rounded-full",
        heading_weight="font-extrabold",
        social_button=_SOCIAL_VIBRANT,
        footer_social_button=_SOCIAL_VIBRANT,
    ),
    "vintage": ThemeConfig(
        theme_id="vintage",
        label="Vintage",
        background="bg-[#fdf6e3]",
        text="text-orange-950",
        muted_text="text-orange-900/70",
        nav_background="bg-[#fdf6e3] border-b-2 border-orange-200",
        alt_background="bg-[#f7ecd0]",
        card_background="bg-[#fffaf0]",
        card_border="border-orange-200",
        card_shadow="shadow-sm",
        footer_background="bg-orange-950 text-orange-50",
        footer_muted_text="text-orange-200",
        border_weight="border-2",
        radius="rounded-md",
        button_shape="rounded-md",
        heading_weight="font-bold",
        social_button=_SOCIAL_VINTAGE,
        footer_social_button=_SOCIAL_VINTAGE,
        force_serif=True,
    ),
}


def lookup(theme_id: str) -> ThemeConfig:
    """Registry access for a known theme id. Use resolve_theme for user input."""
    return THEMES[theme_id]


def resolve_theme(theme_id) -> ThemeConfig:
    """
    Map any requested theme id to a registry entry.

    Known ids map to their own entry; anything else (None, "", typos,
    non-strings) maps to the default theme. Never raises.
    """
    if isinstance(theme_id, str) and theme_id in THEMES:
        return lookup(theme_id)
    return lookup(DEFAULT_THEME)
