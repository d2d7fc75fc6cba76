"""
Tarot Reader Backend — Reading Record
=====================================

What:  The in-memory record representing one tarot consultation.
Why:   A plain frozen dataclass is the storage shape; the API contract lives
       separately in app/schemas/reading.py.
Who:   Built by ReadingStore.create() and by the sample data seeder.

Lifecycle:
    1. Created by POST /api/readings (server-generated id and timestamp)
       or by the startup seeder (fresh id, backdated timestamp)
    2. Never mutated: frozen, and cards are held as a tuple
    3. Never deleted; discarded when the process exits
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Iterable, Optional, Tuple


@dataclass(frozen=True)
class Reading:
    """A stored tarot reading. `created_at` is always timezone-aware UTC."""

    question: str
    cards: Tuple[str, ...]
    interpretation: str
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def new(
        cls,
        question: str,
        cards: Iterable[str],
        interpretation: str,
        created_at: Optional[datetime] = None,
    ) -> "Reading":
        """Build a reading with a fresh id, copying `cards` into a tuple."""
        return cls(
            question=question,
            cards=tuple(cards),
            interpretation=interpretation,
            created_at=created_at or datetime.now(timezone.utc),
        )

    def __repr__(self) -> str:
        return f"<Reading(id={self.id}, cards={len(self.cards)}, created_at='{self.created_at}')>"
