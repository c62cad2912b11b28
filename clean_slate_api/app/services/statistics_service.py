"""
Service layer for participant statistics.

Statistics are recomputed from the full collection on every request;
nothing is cached.  Category values are keyed by their text: an
explicit ``null`` is counted under ``"null"`` and a value that was
never sent under ``"undefined"``.  Offices are grouped by their code
(the part of ``congressionalOffice`` before the first ``|``).
"""

from __future__ import annotations

import math
from collections import Counter
from typing import Dict, List

from ..core.store import ParticipantStore, utc_now_iso
from ..schemas.participant import Participant, ParticipantStatistics, to_text

MISSING_KEY = "undefined"

# Survey completion is not tracked yet; every stored submission counts
# as complete.
COMPLETION_RATE = 100


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _category(participant: Participant, field_name: str) -> str:
    if not participant.answered(field_name):
        return MISSING_KEY
    return to_text(getattr(participant, field_name))


def _distribution(participants: List[Participant], field_name: str) -> Dict[str, int]:
    return dict(Counter(_category(p, field_name) for p in participants))


class StatisticsService:
    """Service computing aggregate statistics over the participant store."""

    @classmethod
    def compute(cls, store: ParticipantStore) -> ParticipantStatistics:
        """Return totals and distributions for the current participants.

        ``avgTraitsSelected`` is the mean number of selected traits,
        rounded half up; it is 0 when there are no participants.
        """
        participants = store.list_all()
        return ParticipantStatistics(
            total_participants=len(participants),
            unique_offices=len({p.office_key for p in participants}),
            profile_distribution=_distribution(participants, "audience_profile"),
            concern_distribution=_distribution(participants, "primary_concern"),
            avg_traits_selected=cls.average_traits(participants),
            completion_rate=COMPLETION_RATE,
            last_updated=utc_now_iso(),
        )

    @staticmethod
    def average_traits(participants: List[Participant]) -> int:
        if not participants:
            return 0
        total = sum(p.traits_count for p in participants)
        return _round_half_up(total / len(participants))
