import re
from dataclasses import replace

import pytest

from site_builder.generator import generate_css, generate_html, generate_js, generate_site
from site_builder.models import BusinessProfile, GeneratedSite, ServiceItem
from site_builder.themes import THEME_IDS

WA_LINK = re.compile(r"https://wa\.me/([^\"'<\s]*)")


@pytest.mark.parametrize("theme_id", THEME_IDS)
def test_every_theme_generates_all_artifacts(profile, theme_id):
    site = generate_site(profile, theme_id)
    assert isinstance(site, GeneratedSite)
    assert site.markup and site.stylesheet and site.behavior_script
    assert "Green Valley Cafe" in site.markup
    assert site.markup.startswith("<!DOCTYPE html>")
    assert site.markup.rstrip().endswith("</html>")


@pytest.mark.parametrize("theme_id", ["spacecraft", "", "Modern", " modern"])
def test_unknown_theme_matches_default(profile, theme_id):
    assert generate_site(profile, theme_id) == generate_site(profile, "modern")


def test_unknown_profile_theme_matches_default(profile):
    assert generate_site(replace(profile, theme_id="spacecraft")) == generate_site(profile, "modern")


def test_profile_theme_id_used_when_no_override(profile):
    assert generate_site(replace(profile, theme_id="luxury")) == generate_site(profile, "luxury")
    assert generate_site(replace(profile, theme_id="luxury")) != generate_site(profile, "modern")


@pytest.mark.parametrize("raw", ["+91 98765 43210", "(91) 98765-43210", "+91.98765.43210", "abc", ""])
def test_deep_links_are_digits_only(profile, raw):
    markup = generate_site(replace(profile, whatsapp_number=raw)).markup
    suffixes = WA_LINK.findall(markup)
    assert suffixes
    for suffix in suffixes:
        assert suffix.isdigit() or suffix == ""


def test_empty_whatsapp_degrades_to_bare_link(profile):
    markup = generate_site(replace(profile, whatsapp_number="")).markup
    assert 'href="https://wa.me/"' in markup


def test_user_text_is_escaped(profile):
    p = replace(profile, name="Tom & Jerry <Cafe>", description="<script>alert(1)</script> & more")
    markup = generate_site(p).markup
    assert "Tom &amp; Jerry &lt;Cafe&gt;" in markup
    assert "&lt;script&gt;alert(1)&lt;/script&gt; &amp; more" in markup
    assert "<Cafe>" not in markup
    assert "<script>alert(1)" not in markup


def test_attribute_text_is_escaped(profile):
    p = replace(profile, social_links={"instagram": 'https://x.test/"><script>'})
    markup = generate_site(p).markup
    assert '"><script>' not in markup


@pytest.mark.parametrize("columns,expected", [
    (1, 'grid grid-cols-1 gap-8'),
    (2, 'grid grid-cols-1 md:grid-cols-2 gap-8'),
    (3, 'grid grid-cols-1 md:grid-cols-2 lg:grid-cols-3 gap-8'),
])
def test_grid_columns(profile, columns, expected):
    p = replace(profile, service_columns=columns)
    first = generate_site(p).markup
    assert expected in first
    assert generate_site(p).markup == first


def test_empty_services(profile):
    markup = generate_site(replace(profile, services=())).markup
    assert 'id="services"' in markup
    assert "service-card" not in markup


def test_deterministic(profile):
    assert generate_site(profile) == generate_site(profile)


def test_green_valley_example(cafe):
    site = generate_site(cafe)
    assert "https://wa.me/919876543210" in site.markup
    assert site.markup.count('class="service-card') == 1
    assert "Coffee" in site.markup
    assert "#16a34a" in site.stylesheet


def test_spacecraft_example(cafe):
    assert generate_site(replace(cafe, theme_id="spacecraft")) == generate_site(cafe)


def test_font_choice(profile):
    assert "Plus+Jakarta+Sans" in generate_site(profile, "modern").markup
    assert "Instrument+Serif" in generate_site(replace(profile, font_style="serif"), "modern").markup
    # luxury overrides the user's sans choice
    assert "Instrument+Serif" in generate_site(profile, "luxury").markup


def test_artifacts_share_color(profile):
    site = generate_site(replace(profile, theme_color="#ff6600"))
    assert "--primary: #ff6600;" in site.stylesheet
    assert "--primary: #ff6600;" in site.markup
    assert site.behavior_script in site.markup


def test_theme_color_cannot_break_out_of_style(profile):
    markup = generate_site(replace(profile, theme_color="red;}</style><script>x()</script>")).markup
    assert "</style><script>x()" not in markup


def test_minimal_profile_never_raises():
    site = generate_site(BusinessProfile(name="X", service_columns=9, font_style="gothic"))
    assert "X" in site.markup


def test_convenience_entry_points(profile):
    site = generate_site(profile)
    assert generate_html(profile) == site.markup
    assert generate_css(profile.theme_color) == site.stylesheet
    assert generate_js() == site.behavior_script


def test_files_mapping(profile):
    files = generate_site(profile).files()
    assert list(files) == ["index.html", "style.css", "script.js"]


def test_service_order_preserved(profile):
    p = replace(profile, services=tuple(ServiceItem(str(i), f"Item {i}") for i in range(5)))
    markup = generate_site(p).markup
    positions = [markup.index(f"Item {i}<") for i in range(5)]
    assert positions == sorted(positions)


def test_blank_hero_image_uses_stock_photo(profile):
    markup = generate_site(replace(profile, hero_image="   ")).markup
    assert "images.unsplash.com" in markup
    assert 'src="   "' not in markup


def test_script_social_links_are_dropped(profile):
    markup = generate_site(replace(profile, social_links={"instagram": "javascript:alert(1)"})).markup
    assert "javascript:" not in markup
    assert "fa-instagram" not in markup


@pytest.mark.parametrize("color", ["#16a34a", "rgb(22, 163, 74)", "var(--brand, 'teal')", "a&b"])
def test_inline_color_matches_stylesheet(profile, color):
    site = generate_site(replace(profile, theme_color=color))
    assert f"--primary: {color};" in site.markup
    assert f"--primary: {color};" in site.stylesheet
