# This project was developed with assistance from AI tools.
"""Character-based token estimation."""

import math

# Rough average for English text
CHARS_PER_TOKEN = 4


def estimate_tokens(text: str) -> int:
    """Estimate the token count of ``text`` as ceil(characters / 4)."""
    return math.ceil(len(text) / CHARS_PER_TOKEN)
