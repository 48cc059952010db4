"""Service for the status filter toggles."""

from dataclasses import dataclass

from ..models import FILTER_ALL, Board, Column


@dataclass
class StatusFilter:
    """The active status filter: one column, or everything."""

    column: Column | None = None  # None shows all columns

    @property
    def selection(self) -> str:
        """Selection value as passed to Board.filter_by_column."""
        return self.column.value if self.column else FILTER_ALL

    @property
    def is_active(self) -> bool:
        return self.column is not None


class FilterService:
    """Service for toggling and applying the status filter."""

    def toggle(self, current: StatusFilter, selected: Column | str) -> StatusFilter:
        """
        Toggle a status filter button.

        Selecting the active column clears the filter back to "all";
        selecting any other column makes it the active one. Selecting "all"
        or anything unrecognised clears the filter.
        """
        column = Column.parse(selected)
        if column is None or column == current.column:
            return StatusFilter()
        return StatusFilter(column=column)

    def apply(self, board: Board, filter_: StatusFilter) -> Board:
        """Apply filter to a board."""
        return board.filter_by_column(filter_.selection)
