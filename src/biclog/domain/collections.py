"""EntityList — ordered records with id lookup and column formatting."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Generic, NamedTuple, TypeVar, overload

from biclog.domain.entities import Entity
from biclog.errors import NotFoundError

E = TypeVar("E", bound=Entity)

ID_HEADER = "ID"


class DisplayFormat(NamedTuple):
    """Padded headers and ``str.format`` templates for a two-column table."""

    id_header: str
    name_header: str
    id_format: str
    name_format: str


class EntityList(Sequence[E], Generic[E]):
    """Records in the order storage returned them (id ascending).

    Ids are unique within a list. The list is built per command and never
    cached between invocations.
    """

    def __init__(self, items: Iterable[E] = ()) -> None:
        self._items: list[E] = list(items)
        ids = [item.id for item in self._items]
        if len(ids) != len(set(ids)):
            msg = "Duplicate ids in entity list"
            raise ValueError(msg)

    @overload
    def __getitem__(self, index: int) -> E: ...

    @overload
    def __getitem__(self, index: slice) -> EntityList[E]: ...

    def __getitem__(self, index: int | slice) -> E | EntityList[E]:
        if isinstance(index, slice):
            return EntityList(self._items[index])
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[E]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, EntityList):
            return self._items == other._items
        if isinstance(other, list):
            return self._items == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"EntityList({self._items!r})"

    @property
    def ids(self) -> list[int]:
        return [item.id for item in self._items]

    def get_with_id(self, entity_id: int) -> E:
        """Return a copy of the record with *entity_id*.

        Raises:
            NotFoundError: If no record in the list has that id.
        """
        for item in self._items:
            if item.id == entity_id:
                return item.model_copy()
        raise NotFoundError(f"no object with id {entity_id}", {"id": entity_id})

    def format_for_display(self, name_header: str = "NAME") -> DisplayFormat:
        """Compute aligned headers and row templates for the id and name columns.

        Column widths are the longest value in each column across the
        whole list, headers included, so every row lines up. The id
        column is right-aligned, the name column left-aligned.
        """
        id_width = max([len(ID_HEADER), *(len(str(item.id)) for item in self._items)])
        name_width = max([len(name_header), *(len(item.name) for item in self._items)])
        return DisplayFormat(
            id_header=f"{ID_HEADER:>{id_width}}",
            name_header=f"{name_header:<{name_width}}",
            id_format=f"{{:>{id_width}}}",
            name_format=f"{{:<{name_width}}}",
        )

    def display_lines(self, name_header: str = "NAME", separator: str = "  ") -> list[str]:
        """Render the header line followed by one line per record."""
        fmt = self.format_for_display(name_header)
        lines = [separator.join([fmt.id_header, fmt.name_header])]
        for item in self._items:
            lines.append(
                separator.join([fmt.id_format.format(item.id), fmt.name_format.format(item.name)])
            )
        return lines
