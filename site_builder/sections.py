"""Section renderers: nav, hero, about, services, footer.

Every renderer takes (NormalizedProfile, ThemeConfig) and returns an HTML
fragment. Values from NormalizedProfile are already escaped.
"""

from .normalize import NormalizedProfile
from .themes import ThemeConfig

NAV_LINKS = (
    ("about", "About"),
    ("services", "Services"),
    ("contact", "Contact"),
)


def _social_row(content: NormalizedProfile, button_class: str) -> str:
    """Round icon buttons for each configured social platform."""
    base = "w-10 h-10 rounded-full flex items-center justify-center transition-all hover:scale-110"
    links = [
        f'<a href="{url}" target="_blank" rel="noopener noreferrer" '
        f'class="{base} {button_class}" aria-label="{platform}">'
        f'<i class="fab fa-{platform}"></i></a>'
        for platform, url in content.social_links
    ]
    row = "".join(links)
    return f'<div class="social-links flex gap-4">{row}</div>'


def render_nav(content: NormalizedProfile, theme: ThemeConfig) -> str:
    logo = ""
    if content.logo_image:
        logo = f'<img src="{content.logo_image}" alt="{content.name} logo" class="h-10 w-10 object-cover {theme.radius}">'

    links = "".join(
        f'<a href="#{anchor}" class="hover:text-primary transition">{label}</a>'
        for anchor, label in NAV_LINKS
    )

    return f"""
    <nav class="fixed top-0 w-full z-[100] h-20 flex items-center {theme.nav_background}">
        <div class="max-w-7xl mx-auto px-6 w-full flex items-center justify-between">
            <a href="#" class="flex items-center gap-3 text-xl {theme.heading_weight} tracking-tight">{logo}<span>{content.name}</span></a>
            <div class="hidden md:flex items-center gap-8 text-sm font-bold uppercase tracking-widest {theme.muted_text}">{links}</div>
            <a href="{content.whatsapp_link}" target="_blank" rel="noopener noreferrer" class="whatsapp-link bg-primary text-white px-6 py-3 {theme.button_shape} font-bold text-sm">Chat Now</a>
        </div>
    </nav>"""


def render_hero(content: NormalizedProfile, theme: ThemeConfig) -> str:
    return f"""
    <header class="relative min-h-screen flex items-center pt-20 px-6 overflow-hidden">
        <div class="absolute inset-0 z-0 opacity-20"><img src="{content.hero_image}" alt="" class="w-full h-full object-cover"></div>
        <div class="max-w-4xl mx-auto text-center relative z-10">
            <h1 class="text-6xl md:text-8xl {theme.heading_weight} mb-8 leading-tight">{content.name}</h1>
            <p class="text-xl {theme.muted_text} mb-12">{content.description}</p>
            <div class="flex flex-wrap justify-center gap-4">
                <a href="#services" class="bg-primary text-white px-10 py-5 {theme.button_shape} font-bold text-lg shadow-xl">Our Services</a>
                <a href="#contact" class="{theme.border_weight} border-primary text-primary px-10 py-5 {theme.button_shape} font-bold text-lg">Contact Us</a>
            </div>
        </div>
    </header>"""


def render_about(content: NormalizedProfile, theme: ThemeConfig) -> str:
    return f"""
    <section id="about" class="py-32 px-6">
        <div class="max-w-7xl mx-auto grid md:grid-cols-2 gap-12 items-center">
            <img src="{content.about_image}" alt="About {content.name}" class="{theme.radius} {theme.card_shadow} aspect-square object-cover w-full">
            <div>
                <h2 class="text-4xl {theme.heading_weight} mb-6">Experience Excellence</h2>
                <p class="text-lg {theme.muted_text} leading-relaxed mb-8">{content.description}</p>
                {_social_row(content, theme.social_button)}
            </div>
        </div>
    </section>"""


def render_services(content: NormalizedProfile, theme: ThemeConfig) -> str:
    cards = [
        f"""
                <div class="service-card p-8 {theme.card_background} {theme.radius} {theme.border_weight} {theme.card_border} {theme.card_shadow} transition-all duration-500">
                    <div class="icon-badge w-16 h-16 {theme.radius} flex items-center justify-center mb-6">
                        <i class="fas {card.icon} text-2xl text-primary"></i>
                    </div>
                    <h3 class="text-xl {theme.heading_weight} mb-3">{card.title}</h3>
                    <p class="{theme.muted_text} leading-relaxed text-sm">{card.description}</p>
                </div>"""
        for card in content.services
    ]
    cards_html = "".join(cards)

    return f"""
    <section id="services" class="py-32 px-6 text-center {theme.alt_background}">
        <div class="max-w-7xl mx-auto">
            <h2 class="text-4xl {theme.heading_weight} mb-16">What We Do</h2>
            <div class="services-grid grid {content.grid_class} gap-8 text-left">{cards_html}</div>
        </div>
    </section>"""


def render_footer(content: NormalizedProfile, theme: ThemeConfig) -> str:
    quick_links = "".join(
        f'<li><a href="#{anchor}" class="hover:underline">{label}</a></li>'
        for anchor, label in NAV_LINKS
    )

    return f"""
    <footer id="contact" class="py-20 px-6 {theme.footer_background}">
        <div class="max-w-7xl mx-auto grid md:grid-cols-3 gap-12">
            <div>
                <h3 class="text-2xl {theme.heading_weight} mb-6">{content.name}</h3>
                <p class="{theme.footer_muted_text} mb-2"><i class="fas fa-location-dot mr-2"></i>{content.address}</p>
                <p class="{theme.footer_muted_text} mb-6"><i class="fas fa-phone mr-2"></i>{content.phone}</p>
                {_social_row(content, theme.footer_social_button)}
            </div>
            <div>
                <h4 class="font-bold mb-6">Quick Links</h4>
                <ul class="space-y-3 {theme.footer_muted_text}">{quick_links}</ul>
            </div>
            <div>
                <h4 class="font-bold mb-6">Connect</h4>
                <a href="{content.whatsapp_link}" target="_blank" rel="noopener noreferrer" class="whatsapp-link bg-primary text-white block w-full text-center py-4 {theme.button_shape} font-bold"><i class="fab fa-whatsapp mr-2"></i>WhatsApp Direct</a>
            </div>
        </div>
    </footer>"""


SECTION_RENDERERS = (
    render_nav,
    render_hero,
    render_about,
    render_services,
    render_footer,
)
