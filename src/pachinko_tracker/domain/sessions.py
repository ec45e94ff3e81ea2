"""Domain models for play sessions."""

from dataclasses import dataclass
from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

COUNT_FIELDS = ("starting_count", "investment", "ending_count", "payout")
MIN_YEAR = 1900
MAX_YEAR = 9998


@dataclass(frozen=True)
class SessionRecord:
    """Represents a stored play session."""

    id: str
    date: datetime
    player_id: str
    machine_id: str
    starting_count: int
    investment: int
    ending_count: int
    payout: int
    notes: str

    @property
    def profit(self) -> int:
        """Payout minus investment."""
        return self.payout - self.investment

    @property
    def is_win(self) -> bool:
        return self.profit > 0


@dataclass(frozen=True)
class ResolvedSession:
    """Session joined with employee and machine display names."""

    session: SessionRecord
    player: str
    machine: str


class _SessionFields(BaseModel):
    model_config = ConfigDict(extra="ignore")

    @field_validator(*COUNT_FIELDS, mode="before", check_fields=False)
    @classmethod
    def blank_count_to_zero(cls, value: object) -> object:
        if value is None or value == "":
            return 0
        if isinstance(value, bool):
            raise ValueError("must be an integer")
        return value

    @field_validator("player_id", "machine_id", mode="before", check_fields=False)
    @classmethod
    def reference_to_str(cls, value: object) -> object:
        if value is None:
            raise ValueError("is required")
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("notes", mode="before", check_fields=False)
    @classmethod
    def blank_notes(cls, value: object) -> object:
        return "" if value is None else value

    @field_validator("date", check_fields=False)
    @classmethod
    def assume_utc(cls, value: datetime | None) -> datetime | None:
        if value is None:
            return value
        if not MIN_YEAR <= value.year <= MAX_YEAR:
            raise ValueError(f"year must be between {MIN_YEAR} and {MAX_YEAR}")
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value


class SessionInput(_SessionFields):
    """Validated payload for creating a session."""

    date: datetime | None = None
    player_id: str = Field(min_length=1)
    machine_id: str = Field(min_length=1)
    starting_count: int = Field(default=0, ge=0)
    investment: int = Field(default=0, ge=0)
    ending_count: int = Field(default=0, ge=0)
    payout: int = Field(default=0, ge=0)
    notes: str = ""


class SessionPatch(_SessionFields):
    """Validated partial payload for updating a session."""

    date: datetime | None = None
    player_id: str | None = Field(default=None, min_length=1)
    machine_id: str | None = Field(default=None, min_length=1)
    starting_count: int | None = Field(default=None, ge=0)
    investment: int | None = Field(default=None, ge=0)
    ending_count: int | None = Field(default=None, ge=0)
    payout: int | None = Field(default=None, ge=0)
    notes: str | None = None

    def changes(self) -> dict[str, object]:
        """Return only the fields the caller supplied."""
        return {
            key: value
            for key, value in self.model_dump(exclude_unset=True).items()
            if value is not None
        }
