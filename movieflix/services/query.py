"""Query value objects: genre filter and page request.

Both are validated on construction and immutable afterwards, so the
repository can trust whatever it receives.
"""

from dataclasses import dataclass, field
from enum import Enum

from movieflix.errors import InvalidRequest


@dataclass(frozen=True)
class GenreFilter:
    """Optional equality predicate on a movie's genre id.

    ``None`` and ``0`` both mean "no filter". An id that matches no genre is
    not an error; it simply selects nothing.
    """

    genre_id: int | None = None

    @classmethod
    def of(cls, genre_id: int | None) -> "GenreFilter":
        if not genre_id:
            return cls()
        return cls(genre_id=genre_id)

    @property
    def is_active(self) -> bool:
        return self.genre_id is not None


class Direction(str, Enum):
    ASC = "asc"
    DESC = "desc"


SORTABLE_FIELDS = ("id", "title", "year")


@dataclass(frozen=True)
class Order:
    field: str
    direction: Direction = Direction.ASC

    @classmethod
    def parse(cls, raw: str) -> "Order":
        """Parse ``field`` or ``field,direction``."""
        name, _, direction = (part.strip() for part in raw.partition(","))
        if name not in SORTABLE_FIELDS:
            raise InvalidRequest(
                f"Cannot sort by '{name}'; allowed fields: {', '.join(SORTABLE_FIELDS)}"
            )
        if not direction:
            return cls(field=name)
        try:
            return cls(field=name, direction=Direction(direction.lower()))
        except ValueError:
            raise InvalidRequest(f"Invalid sort direction '{direction}'") from None


DEFAULT_SORT = (Order("title"),)


@dataclass(frozen=True)
class PageRequest:
    page: int = 0
    size: int = 20
    sort: tuple[Order, ...] = field(default=DEFAULT_SORT)

    def __post_init__(self):
        if self.page < 0:
            raise InvalidRequest("Page index must not be less than zero")
        if self.size < 1:
            raise InvalidRequest("Page size must not be less than one")
        if not self.sort:
            object.__setattr__(self, "sort", DEFAULT_SORT)

    @classmethod
    def of(
        cls,
        page: int = 0,
        size: int = 20,
        sort: list[str] | None = None,
        max_size: int | None = None,
    ) -> "PageRequest":
        """Build a request from raw boundary values, clamping ``size`` to ``max_size``."""
        if max_size is not None and size > max_size:
            size = max_size
        orders = tuple(Order.parse(raw) for raw in sort or [] if raw.strip())
        return cls(page=page, size=size, sort=orders)

    @property
    def offset(self) -> int:
        return self.page * self.size
