"""Record models for the three collections the store returns."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from yetzira.models.status import StatusLabel


class Ship(BaseModel):
    """A ship on the map canvas.

    ``lat`` and ``lng`` are percentage offsets on a normalised canvas,
    conventionally in [0, 100], not geographic coordinates.
    """

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    id: str | None = None
    name: str | None = None  # display label containers refer to
    lat: float = 0.0
    lng: float = 0.0


class Container(BaseModel):
    """A shipping container and its logistics status."""

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    id: str
    ship: str | None = None  # display label, not an enforced reference
    status: str = ""

    @field_validator("status", mode="before")
    @classmethod
    def _null_status(cls, value: object) -> object:
        return "" if value is None else value

    @property
    def status_label(self) -> StatusLabel:
        return StatusLabel.parse(self.status)


class Unit(BaseModel):
    """An aggregate production record: ``qty`` identical sub-units at one
    floor/facade position.

    ``qty`` may be null in the source; every aggregate reads it through
    ``quantity``, which treats null as zero.
    """

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    id: str
    floor: int
    facade: str
    qty: int | None = Field(default=None, ge=0)
    status: str = ""
    progress: int = Field(default=0, ge=0, le=100)

    @field_validator("status", mode="before")
    @classmethod
    def _null_status(cls, value: object) -> object:
        return "" if value is None else value

    @field_validator("progress", mode="before")
    @classmethod
    def _null_progress(cls, value: object) -> object:
        return 0 if value is None else value

    @property
    def quantity(self) -> int:
        """Sub-unit count, with a null ``qty`` read as 0."""
        return self.qty or 0

    @property
    def status_label(self) -> StatusLabel:
        return StatusLabel.parse(self.status)

    @property
    def position(self) -> tuple[int, str]:
        """The (floor, facade) key used by the project grid."""
        return (self.floor, self.facade)
