"""Reading-time estimation for post bodies."""

import math

WORDS_PER_MINUTE = 200


def count_words(body: str) -> int:
    """Count whitespace-separated words in ``body``."""
    return len(body.split())


def estimate_reading_time(body: str) -> int:
    """Estimate minutes needed to read ``body``.

    Rounds up, so a single word takes one minute. An empty or
    whitespace-only body takes zero minutes.

    Args:
        body: Post body text

    Returns:
        Reading time in whole minutes
    """
    return math.ceil(count_words(body) / WORDS_PER_MINUTE)
