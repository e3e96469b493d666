"""Generic page-numbered pagination types shared by list endpoints.

PaginatedResponse[T]: Pydantic model for HTTP responses (serializable).
Paginated[T]:         plain dataclass for service-layer returns (not serializable).

Pages are 1-based. ``total_pages`` is ``ceil(total / page_size)``, so an empty
result has zero pages.
"""

from dataclasses import dataclass

from pydantic import BaseModel


class PaginatedResponse[T](BaseModel):
    """Pydantic model for paginated HTTP responses.

    ``from_attributes`` is set so ``model_validate`` can read a ``Paginated``
    dataclass directly::

        HotelPage = PaginatedResponse[HotelSummary]
        HotelPage.model_validate(result.page)
    """

    model_config = {"from_attributes": True}

    items: list[T]
    total: int
    page: int
    page_size: int
    total_pages: int


@dataclass
class Paginated[T]:
    """Plain dataclass for paginated results inside the service layer."""

    items: list[T]
    total: int
    page: int
    page_size: int

    @property
    def total_pages(self) -> int:
        return -(-self.total // self.page_size)
