"""
In‑memory participant store.

``ParticipantStore`` owns the ordered list of participant records and
the id counter.  Nothing else mutates them: the application creates
one store in ``create_app`` and hands it to request handlers through
the ``get_store`` dependency, so tests can build as many independent
stores as they like.

There is no locking.  Handlers run on a single event loop and no
store method awaits, so each call runs to completion before another
request can touch the store.  All data is lost when the process
exits.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime, timezone
from typing import Any, List, Mapping, Optional

from fastapi import Request

from .errors import ParticipantNotFound
from ..schemas.participant import Participant

logger = logging.getLogger(__name__)

FIRST_ID = 1

_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)")


def utc_now_iso() -> str:
    """Current UTC time as ISO‑8601 with millisecond precision and a ``Z`` suffix."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_id(value: Any) -> Optional[int]:
    """Leading integer of ``value`` or ``None`` when it has none."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    match = _LEADING_INT.match(str(value))
    if match is None:
        return None
    return int(match.group(1))


class ParticipantStore:
    """Ordered, process‑local collection of participants."""

    def __init__(self) -> None:
        self._participants: List[Participant] = []
        self._next_id = FIRST_ID

    def __len__(self) -> int:
        return len(self._participants)

    def insert(self, fields: Mapping[str, Any]) -> Participant:
        """Store a new participant built from ``fields`` and return it.

        Keys are stored as given, except ``id`` and ``timestamp`` which
        are always assigned here.  Nothing is required.
        """
        record = dict(fields)
        record["id"] = self._next_id
        record["timestamp"] = utc_now_iso()
        participant = Participant.model_validate(record)
        self._next_id += 1
        self._participants.append(participant)
        logger.info("Created participant %s", participant.id)
        return participant

    def list_all(self) -> List[Participant]:
        return list(self._participants)

    def get_by_id(self, participant_id: Any) -> Participant:
        """Return the participant with the given id.

        ``participant_id`` may be a string taken straight from the URL.
        Like ``parseInt`` on the front‑end, leading digits are used and
        anything after them is ignored (``"7abc"`` is 7); a value without
        leading digits matches nothing.

        Raises
        ------
        ParticipantNotFound
            If no participant has that id.
        """
        wanted = parse_id(participant_id)
        if wanted is None:
            raise ParticipantNotFound(participant_id)
        for participant in self._participants:
            if participant.id == wanted:
                return participant
        raise ParticipantNotFound(participant_id)

    def filter_by_office(self, text: str) -> List[Participant]:
        """Participants whose office value contains ``text`` (case‑sensitive).

        A list‑valued office matches when one of its items equals
        ``text``; other non‑string values never match.
        """
        return [
            p for p in self._participants
            if isinstance(p.congressional_office, (str, list)) and text in p.congressional_office
        ]

    def filter_by_profile(self, profile: str) -> List[Participant]:
        return [p for p in self._participants if p.audience_profile == profile]

    def search(self, query: Optional[str]) -> List[Participant]:
        """Case‑insensitive substring search over name, office and profile.

        An empty or missing query returns every participant.  Fields
        that were never sent count as empty strings.
        """
        if not query:
            return self.list_all()
        needle = query.lower()
        return [p for p in self._participants if needle in self._search_text(p)]

    def clear(self) -> None:
        """Remove every participant and restart ids at 1."""
        removed = len(self._participants)
        self._participants = []
        self._next_id = FIRST_ID
        logger.info("Cleared %d participants", removed)

    @staticmethod
    def _search_text(participant: Participant) -> str:
        parts = ("name", "congressional_office", "audience_profile")
        return " ".join(participant.display(part) for part in parts).lower()


def get_store(request: Request) -> ParticipantStore:
    """FastAPI dependency returning the store owned by the running app."""
    return request.app.state.store
