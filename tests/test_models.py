import pytest

from site_builder.models import ServiceItem, default_profile, parse_services, profile_from_dict


def test_default_profile_is_fresh_per_call():
    first = default_profile()
    first.social_links["instagram"] = "https://instagram.com/changed"
    assert default_profile().social_links["instagram"] == ""
    assert default_profile() == default_profile()


def test_profile_from_camel_case_payload():
    p = profile_from_dict({
        "name": "  Blue Door Salon ",
        "description": "Cuts and color.",
        "phoneDisplay": "+1 555 010 2030",
        "whatsappNumber": "15550102030",
        "themeId": "vibrant",
        "themeColor": "#e11d48",
        "heroImage": "",
        "socialLinks": {"instagram": "https://instagram.com/bluedoor", "facebook": ""},
        "serviceColumns": "2",
        "fontStyle": "serif",
        "services": [{"id": "a", "title": "Haircut", "description": "Any length", "iconName": "fa-scissors"}],
    })
    assert p.name == "Blue Door Salon"
    assert p.phone_display == "+1 555 010 2030"
    assert p.theme_id == "vibrant"
    assert p.hero_image is None
    assert p.service_columns == 2
    assert p.social_links == {"instagram": "https://instagram.com/bluedoor", "facebook": None}
    assert p.services == (ServiceItem("a", "Haircut", "Any length", "fa-scissors"),)


def test_profile_from_snake_case_payload():
    p = profile_from_dict({"name": "Shop", "whatsapp_number": "123", "theme_id": "luxury"})
    assert p.whatsapp_number == "123"
    assert p.theme_id == "luxury"


@pytest.mark.parametrize("payload", [{}, {"name": "   "}, {"name": None}])
def test_profile_requires_name(payload):
    with pytest.raises(ValueError):
        profile_from_dict(payload)


def test_profile_rejects_non_mapping():
    with pytest.raises(ValueError):
        profile_from_dict(["name"])


def test_profile_rejects_bad_columns():
    with pytest.raises(ValueError):
        profile_from_dict({"name": "Shop", "serviceColumns": "three"})


def test_parse_services_from_comma_string():
    items = parse_services("Coffee, Bakery, , Catering")
    assert [s.title for s in items] == ["Coffee", "Bakery", "Catering"]
    assert all(s.icon_name == "fa-star" for s in items)


def test_parse_services_skips_blank_titles():
    assert parse_services([{"title": ""}, "  ", {"title": "Tea"}])[0].title == "Tea"
    assert len(parse_services([{"title": ""}, "  ", {"title": "Tea"}])) == 1


def test_parse_services_none():
    assert parse_services(None) == ()


@pytest.mark.parametrize("services", [5, True, {"title": "Tea"}])
def test_parse_services_rejects_other_shapes(services):
    with pytest.raises(ValueError, match="services"):
        parse_services(services)


def test_profile_with_bad_services_raises_value_error():
    with pytest.raises(ValueError):
        profile_from_dict({"name": "Cafe", "services": 5})
