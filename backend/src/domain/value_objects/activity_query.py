"""Listing query value object."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ActivityQuery:
    """
    Immutable descriptor of a filtered, sorted and paginated listing.
    
    Attributes:
        page: 1-based page number
        page_size: Maximum number of records per page
        order_by: Name of the field to sort on
        order_direction: "asc" for ascending, anything else sorts descending
        search: Optional case-insensitive substring matched against the search field
        active: Optional filter on the active flag
    """

    page: int = 1
    page_size: int = 10
    order_by: str = "createdAt"
    order_direction: str = "desc"
    search: Optional[str] = None
    active: Optional[bool] = None

    def __post_init__(self) -> None:
        """Validate pagination bounds."""
        if self.page < 1:
            raise ValueError("Page must be greater than or equal to 1")
        if self.page_size < 1:
            raise ValueError("Page size must be greater than or equal to 1")

    @property
    def ascending(self) -> bool:
        return self.order_direction == "asc"

    @property
    def skip(self) -> int:
        return self.page_size * (self.page - 1)

    @property
    def limit(self) -> int:
        return self.page_size

    def total_pages(self, total: int) -> int:
        """Number of pages needed to show `total` records."""
        return -(-total // self.page_size)
