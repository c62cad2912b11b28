"""
Pydantic schemas for participant survey records.

A participant is whatever the messaging tool submits: a handful of
well known answers (name, office, profile, concern and three lists of
picked words) plus any other key the form happens to send.  Known
answers are attributes, everything else is kept verbatim in
``model_extra`` and echoed back unchanged.

Submissions are never rejected for their shape.  A known answer holds
whatever the client sent (a number for ``name``, a string for
``selectedTraits``), and the helpers below render such values the way
the front‑end's JavaScript would when building search text, statistic
keys and CSV cells.

``congressionalOffice`` follows a ``key|displayName`` convention.  The
part before the first ``|`` is the office code used for grouping, the
part after it is the human readable office name.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

OFFICE_SEPARATOR = "|"


def to_text(value: Any) -> str:
    """Render a JSON value as JavaScript's ``String(value)`` would."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return join_text(value, ",")
    if isinstance(value, dict):
        return "[object Object]"
    return str(value)


def join_text(values: Any, separator: str) -> str:
    """Join a list answer for display; ``null`` items become empty strings.

    Missing or empty answers give ``""`` and a single value that is
    not a list is rendered on its own.
    """
    if not values:
        return ""
    if not isinstance(values, (list, tuple)):
        return to_text(values)
    return separator.join("" if item is None else to_text(item) for item in values)


class ParticipantBase(BaseModel):
    """Answers shared by incoming submissions and stored records."""

    model_config = ConfigDict(extra="allow")

    name: Any = Field(None, description="Respondent name")
    congressional_office: Any = Field(
        None,
        alias="congressionalOffice",
        description="Office as 'code|Display Name'",
    )
    audience_profile: Any = Field(None, alias="audienceProfile", description="Audience profile label")
    primary_concern: Any = Field(None, alias="primaryConcern", description="Primary concern label")
    adjectives: Any = Field(None, description="Adjectives picked by the respondent")
    priorities: Any = Field(None, description="Priorities in the order given")
    selected_traits: Any = Field(None, alias="selectedTraits", description="Selected traits")

    def answered(self, field_name: str) -> bool:
        """True when the submission carried ``field_name``, even as ``null``."""
        return field_name in self.model_fields_set

    def display(self, field_name: str) -> str:
        """Text of an answer; ``""`` when it was never sent."""
        if not self.answered(field_name):
            return ""
        return to_text(getattr(self, field_name))

    @property
    def office_key(self) -> Optional[str]:
        """Office code: text before the first ``|`` (whole value if none)."""
        if self.congressional_office is None:
            return None
        return to_text(self.congressional_office).partition(OFFICE_SEPARATOR)[0]

    @property
    def office_name(self) -> Optional[str]:
        """Display name: text after the first ``|``, ``None`` when missing or empty."""
        if self.congressional_office is None:
            return None
        return to_text(self.congressional_office).partition(OFFICE_SEPARATOR)[2] or None

    @property
    def traits_count(self) -> int:
        """Number of selected traits; answers without a length count as 0."""
        if isinstance(self.selected_traits, (str, list)):
            return len(self.selected_traits)
        return 0


class ParticipantCreate(ParticipantBase):
    """Schema for submitting a participant.

    Nothing is required and nothing is rejected.  ``id`` and
    ``timestamp`` may be sent but are always replaced by the store.
    """


class Participant(ParticipantBase):
    """A stored participant record."""

    id: int
    timestamp: str = Field(..., description="Creation time, ISO‑8601 UTC")

    @property
    def extra_fields(self) -> dict:
        return dict(self.model_extra or {})


class ParticipantStatistics(BaseModel):
    """Aggregates over the whole participant collection."""

    model_config = ConfigDict(populate_by_name=True)

    total_participants: int = Field(..., alias="totalParticipants")
    unique_offices: int = Field(..., alias="uniqueOffices")
    profile_distribution: Dict[str, int] = Field(..., alias="profileDistribution")
    concern_distribution: Dict[str, int] = Field(..., alias="concernDistribution")
    avg_traits_selected: int = Field(..., alias="avgTraitsSelected")
    completion_rate: int = Field(..., alias="completionRate")
    last_updated: str = Field(..., alias="lastUpdated")


class HealthStatus(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    status: str
    participant_count: int = Field(..., alias="participantCount")
    uptime: float


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str
