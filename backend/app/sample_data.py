"""
Tarot Reader Backend — Sample Data Seeder
=========================================

What:  Populates a fresh store with three example readings.
Why:   The store starts empty on every boot; sample readings give the
       frontend something to show immediately.
When:  Once, inside create_app(), before the server accepts connections.

The content is fixed but the ids are fresh on every run. Timestamps are
backdated (two days ago, one day ago, now) so the default newest-first
listing is always: financial, relationship, career.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import List, Optional

from app.models.reading import Reading
from app.store import ReadingStore

logger = logging.getLogger(__name__)

# (question, cards, interpretation, age)
SAMPLE_READINGS = [
    (
        "What does the future hold for my career?",
        ("The Fool", "The Magician", "The High Priestess"),
        "The Fool suggests new beginnings and taking a leap of faith in your career. "
        "The Magician indicates you have all the tools and skills necessary for success. "
        "The High Priestess advises trusting your intuition when making important career decisions.",
        timedelta(days=2),
    ),
    (
        "Should I pursue this new relationship?",
        ("The Lovers", "Two of Cups", "The Sun"),
        "The Lovers card strongly indicates a meaningful connection. "
        "The Two of Cups reinforces partnership and mutual attraction. "
        "The Sun brings joy and positivity, suggesting this relationship has great potential for happiness.",
        timedelta(days=1),
    ),
    (
        "How can I improve my financial situation?",
        ("Nine of Pentacles", "The Emperor", "Three of Wands"),
        "The Nine of Pentacles suggests financial independence is within reach through self-discipline. "
        "The Emperor advises taking control and creating structure in your financial planning. "
        "The Three of Wands indicates your long-term investments and planning will pay off.",
        timedelta(0),
    ),
]


def seed_sample_readings(store: ReadingStore, now: Optional[datetime] = None) -> List[Reading]:
    """
    Insert the three sample readings into `store`.

    Args:
        store: The store to populate (normally empty).
        now:   Reference time for backdating; defaults to the current UTC time.

    Returns:
        The inserted readings, oldest first.
    """
    now = now or datetime.now(timezone.utc)
    seeded = [
        store.add(Reading.new(question, cards, interpretation, created_at=now - age))
        for question, cards, interpretation, age in SAMPLE_READINGS
    ]
    logger.info("Seeded %d sample readings", len(seeded))
    return seeded
