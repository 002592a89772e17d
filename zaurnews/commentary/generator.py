"""Pick the assistant's commentary for a news item."""

from __future__ import annotations

import logging
from datetime import datetime

from zaurnews.commentary.data import (
    CATEGORY_COMMENTARY,
    DISCOVERY_COMMENTS,
    KEYWORD_RESPONSES,
    MOODS,
    THOUGHTS,
)
from zaurnews.seeded import hash_string, seeded_random, time_seed

logger = logging.getLogger(__name__)


def _keyword_comment(title: str) -> str | None:
    """Response for the first keyword (in table order) found in the title."""
    lowered = title.lower()
    for keyword, responses in KEYWORD_RESPONSES.items():
        if keyword.lower() in lowered:
            return responses[hash_string(title) % len(responses)]
    return None


def _category_comment(title: str, category: str, used_comments: set[str]) -> str | None:
    """Probe the category list for an unused comment.

    When every option is already used the hashed pick is returned anyway.
    """
    options = CATEGORY_COMMENTARY.get(category) or []
    if not options:
        return None

    seed = hash_string(title + category)
    for attempt in range(len(options)):
        candidate = options[(seed + attempt) % len(options)]
        if candidate not in used_comments:
            return candidate
    return options[seed % len(options)]


def generate_comment(
    title: str | None,
    category: str | None,
    base_comment: str | None = None,
    used_comments: set[str] | None = None,
) -> str | None:
    """Return the comment for an item, or None when nothing applies.

    A previously saved ``base_comment`` always wins. Otherwise a keyword
    response is tried, then the category fallback. The chosen comment is added
    to ``used_comments`` so later items in the same pass avoid repeating it.
    """
    if base_comment:
        return base_comment
    if used_comments is None:
        used_comments = set()

    title = title or ""
    category = category or ""

    candidate = _keyword_comment(title)
    if candidate is not None and candidate not in used_comments:
        used_comments.add(candidate)
        return candidate

    comment = _category_comment(title, category, used_comments)
    if comment is None:
        logger.debug("No commentary for %r in category %r", title[:60], category)
        return None
    used_comments.add(comment)
    return comment


def discovery_comment(seed: int) -> str:
    return DISCOVERY_COMMENTS[int(seeded_random(seed + 1) * len(DISCOVERY_COMMENTS))]


def pick_mood(seed: int) -> str:
    return MOODS[int(seeded_random(seed) * len(MOODS))]


def header_thought(now: datetime) -> str:
    """The panel's opening line; stable for a whole calendar day."""
    return THOUGHTS[int(seeded_random(time_seed(now)) * len(THOUGHTS))]
