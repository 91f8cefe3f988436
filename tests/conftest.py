import pytest

from site_builder.models import BusinessProfile, ServiceItem, default_profile


@pytest.fixture
def profile() -> BusinessProfile:
    return default_profile()


@pytest.fixture
def cafe() -> BusinessProfile:
    return BusinessProfile(
        name="Green Valley Cafe",
        description="Organic coffee and pastries.",
        phone_display="+91 98765 43210",
        whatsapp_number="+91 98765 43210",
        address="123 Garden Street, Bangalore",
        services=(ServiceItem("s1", "Coffee", "Fresh roasted daily.", "fa-mug-hot"),),
        theme_color="#16a34a",
        theme_id="modern",
    )
