"""Grid sizing, cell layout and rendering utilities."""

from typing import List, Sequence, Tuple

from .models import BingoBoard, BingoCell, FREE_TEXT


# (minimum phrase count, grid size), largest first
GRID_SIZE_THRESHOLDS: List[Tuple[int, int]] = [
    (24, 5),
    (16, 4),
    (9, 3),
    (4, 2),
]
MIN_GRID_SIZE = 1
FREE_CENTER_GRID_SIZE = 5
# Room for the two-character selection mark plus one character of text
MIN_CELL_WIDTH = 3


def grid_size_for(phrase_count: int) -> int:
    """Grid dimension N for an N x N board holding `phrase_count` phrases."""
    for minimum, size in GRID_SIZE_THRESHOLDS:
        if phrase_count >= minimum:
            return size
    return MIN_GRID_SIZE


def center_index(grid_size: int) -> int:
    """Row-major index of the middle cell."""
    return (grid_size * grid_size) // 2


def uses_free_center(grid_size: int, preference: bool) -> bool:
    """The free centre is only ever placed on a 5x5 board."""
    return grid_size == FREE_CENTER_GRID_SIZE and preference


def cells_needed(grid_size: int, free_center: bool) -> int:
    """Number of phrase cells to fill."""
    return grid_size * grid_size - (1 if free_center else 0)


def cell_id(index: int) -> str:
    return f"cell-{index}"


def materialize_cells(
    grid_size: int,
    selection: Sequence[str],
    free_center: bool,
) -> List[BingoCell]:
    """Lay the selection out row-major, inserting the free cell at the centre."""
    cells: List[BingoCell] = []
    center = center_index(grid_size)
    phrase_iter = iter(selection)

    for index in range(grid_size * grid_size):
        if free_center and index == center:
            cells.append(BingoCell(id=cell_id(index), text=FREE_TEXT, selected=True, is_free=True))
            continue
        cells.append(BingoCell(id=cell_id(index), text=next(phrase_iter, ""), selected=False))

    return cells


def render_board(board: BingoBoard, cell_width: int = 16) -> str:
    """
    Render the board as a fixed-width text grid.

    Selected cells are prefixed with `x`, long texts are truncated with `~`.
    """
    if cell_width < MIN_CELL_WIDTH:
        raise ValueError(f"cell_width must be at least {MIN_CELL_WIDTH}, got {cell_width}")
    if not board.cells:
        return ""

    def fmt(cell: BingoCell) -> str:
        mark = "x " if cell.selected else "  "
        text = cell.text
        room = cell_width - len(mark)
        if len(text) > room:
            text = text[:room - 1] + "~"
        return (mark + text).ljust(cell_width)

    border = "+" + "+".join("-" * cell_width for _ in range(board.grid_size)) + "+"
    lines = [border]
    for row in range(board.grid_size):
        start = row * board.grid_size
        row_cells = board.cells[start:start + board.grid_size]
        lines.append("|" + "|".join(fmt(cell) for cell in row_cells) + "|")
        lines.append(border)

    return "\n".join(lines)
