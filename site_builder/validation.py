"""Editor-side form checks, run before download or publish.

The generator renders anything it is given; these rules only decide whether
a profile is complete enough to ship.
"""

import re

from .models import BusinessProfile
from .normalize import normalize_phone_digits

PHONE_PATTERN = re.compile(r"^\+?[0-9\s-]{10,}$")


def validate_profile(profile: BusinessProfile) -> dict[str, str]:
    """
    Check a profile the way the builder form does.

    Returns:
        {field: message} for each failing field; empty when the profile is valid
    """
    errors = {}

    if len(profile.name.strip()) < 3:
        errors["name"] = "Business name must be at least 3 characters."

    if len(profile.description.strip()) < 10:
        errors["description"] = "Description must be at least 10 characters."

    if not PHONE_PATTERN.match(profile.phone_display or ""):
        errors["phone_display"] = "Invalid phone number format."

    digits = normalize_phone_digits(profile.whatsapp_number)
    if not 10 <= len(digits) <= 15:
        errors["whatsapp_number"] = "Enter a WhatsApp number with 10-15 digits (e.g. 919876543210)."

    if len(profile.address.strip()) < 5:
        errors["address"] = "Address is too short."

    if not profile.services:
        errors["services"] = "At least one service required."

    return errors
