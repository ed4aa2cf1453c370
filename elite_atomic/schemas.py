from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from elite_atomic.schedule import to_epoch_millis


class Variant(Enum):
    """Lichess variant keys. Add members here as new variants are scheduled."""

    ATOMIC = "atomic"


@dataclass(frozen=True)
class TimeControl:
    """Clock settings for an arena: initial time in minutes, increment in seconds."""

    clock_time: int
    clock_increment: int

    @property
    def label(self) -> str:
        """Lichess-style notation, e.g. '3+2'."""
        return f"{self.clock_time}+{self.clock_increment}"


def _form_bool(value: bool) -> str:
    return "true" if value else "false"


class TournamentRequest(BaseModel):
    """
    Validated payload for the lichess arena creation endpoint.

    Built once per run and sent as a form-encoded body via `to_form`.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    clock_time: int = Field(ge=0)
    clock_increment: int = Field(ge=0)
    minutes: int = Field(gt=0)
    starts_at: datetime
    variant: Variant
    rated: bool
    berserkable: bool
    min_rating: int | None = None

    @field_validator("starts_at")
    @classmethod
    def _require_timezone(cls, v: datetime) -> datetime:
        if v.tzinfo is None:
            raise ValueError("starts_at must be timezone-aware")
        return v

    @computed_field
    @property
    def start_date(self) -> int:
        """Start time in milliseconds since the Unix epoch."""
        return to_epoch_millis(self.starts_at)

    @property
    def time_control(self) -> TimeControl:
        return TimeControl(self.clock_time, self.clock_increment)

    def to_form(self) -> dict[str, str]:
        """Form fields as lichess expects them, every value stringified."""
        form = {
            "name": self.name,
            "clockTime": str(self.clock_time),
            "clockIncrement": str(self.clock_increment),
            "minutes": str(self.minutes),
            "startDate": str(self.start_date),
            "variant": self.variant.value,
            "rated": _form_bool(self.rated),
            "berserkable": _form_bool(self.berserkable),
        }
        if self.min_rating is not None:
            form["conditions.minRating.rating"] = str(self.min_rating)

        return form
