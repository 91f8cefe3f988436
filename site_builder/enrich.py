"""Description refinement via Haiku.

Optional helper for the editor. Generation never calls it; whatever it
returns is treated as ordinary profile text.
"""

import logging

import anthropic

from .config import get_settings

logger = logging.getLogger(__name__)

MAX_DESCRIPTION_CHARS = 250

SYSTEM_PROMPT = (
    "You are a professional marketing copywriter. Rewrite business descriptions "
    "for small business websites to make them more professional, catchy, and "
    f"SEO-friendly. Keep it under {MAX_DESCRIPTION_CHARS} characters. "
    "Respond with the rewritten description only, no quotes or other text."
)


def refine_description(name: str, description: str, client=None) -> str:
    """
    Ask Haiku for a polished version of a business description.

    Args:
        name: Business name, for context
        description: Current draft
        client: Optional anthropic.Anthropic instance (built from settings if omitted)

    Returns:
        The rewritten description, or the original if the API call fails
        or returns nothing usable.

    Raises:
        ValueError: no client given and ANTHROPIC_API_KEY is not set
    """
    if not description or not description.strip():
        return description

    settings = get_settings()
    if client is None:
        if not settings.anthropic_api_key:
            raise ValueError("ANTHROPIC_API_KEY not set.")
        client = anthropic.Anthropic(api_key=settings.anthropic_api_key)

    try:
        response = client.messages.create(
            model=settings.model,
            max_tokens=300,
            system=SYSTEM_PROMPT,
            messages=[{
                "role": "user",
                "content": f'Business name: "{name}"\nOriginal: "{description}"',
            }],
        )
    except anthropic.APIError as e:
        logger.warning("Description refinement failed for %r: %s", name, e)
        return description

    text = "".join(
        block.text for block in response.content if getattr(block, "type", "text") == "text"
    ).strip().strip('"').strip()

    if not text:
        logger.warning("Empty refinement for %r, keeping original description", name)
        return description

    logger.debug("Refined description for %r (%d -> %d chars)", name, len(description), len(text))
    return text
