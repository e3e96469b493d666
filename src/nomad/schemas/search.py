"""Home-page search form schemas."""

from datetime import date
from typing import Annotated

from pydantic import BaseModel, ValidationInfo, field_validator

from nomad.schemas.fields import GuestCount, RoomCount, check_out_after_check_in, required


class SearchForm(BaseModel):
    destination_query: Annotated[str, required("Please enter a destination")]
    destination_id: str | None = None
    check_in: date
    check_out: date
    guests: GuestCount = 2
    rooms: RoomCount = 1

    @field_validator("check_out")
    @classmethod
    def check_stay_length(cls, value: date, info: ValidationInfo) -> date:
        return check_out_after_check_in(value, info)


class SearchNavigation(BaseModel):
    """Navigation state for the hotel search page."""

    model_config = {"from_attributes": True}

    destination_id: str
    destination_name: str
    check_in: date
    check_out: date
    guests: int
    rooms: int
    auto_selected: bool
