"""
Board builder: turns a PhraseSet into a playable BingoBoard.

Building happens in four steps:
1. Parse every phrase line (priority marker, OR-alternatives)
2. Size the grid from the parsed phrase count
3. Select phrases: priority first, shuffled regular phrases after, cut or padded to fit
4. Shuffle the selection again and lay it out row-major around the optional free centre

All randomness goes through the injected `rng`, so a stubbed source gives a
fully reproducible board.
"""

import logging
import random
from typing import List, Optional, Sequence, TypeVar

from .models import PhraseSet, ParsedPhrase, BingoBoard
from .parsing import parse_phrases, pick_index
from .grid import grid_size_for, uses_free_center, cells_needed, materialize_cells

logger = logging.getLogger(__name__)

T = TypeVar("T")


def shuffle(items: Sequence[T], rng: random.Random) -> List[T]:
    """Return a Fisher-Yates shuffled copy of `items`."""
    result = list(items)
    for i in range(len(result) - 1, 0, -1):
        j = pick_index(rng, i + 1)
        result[i], result[j] = result[j], result[i]
    return result


def dedupe(texts: Sequence[str]) -> List[str]:
    """Drop exact duplicates, keeping the first occurrence."""
    seen = set()
    unique: List[str] = []
    for text in texts:
        if text not in seen:
            seen.add(text)
            unique.append(text)
    return unique


def select_phrases(
    parsed: Sequence[ParsedPhrase],
    needed: int,
    rng: random.Random,
) -> List[str]:
    """
    Pick exactly `needed` cell texts from the parsed phrases.

    Priority and regular phrases are deduplicated separately; a phrase that is
    both `*X` and `X` can therefore appear twice. Priority phrases lead the
    pool so they survive the cut. Short pools are padded with empty strings.

    Returns the selection in placement order.
    """
    priority = dedupe([p.text for p in parsed if p.priority])
    regular = dedupe([p.text for p in parsed if not p.priority])

    if len(priority) > needed:
        logger.warning(
            "%d priority phrases exceed board capacity of %d; keeping the first %d",
            len(priority), needed, needed,
        )

    pool = priority + shuffle(regular, rng)
    selection = pool[:needed]
    selection.extend([""] * (needed - len(selection)))

    return shuffle(selection, rng)


def build_board(
    phrase_set: PhraseSet,
    use_free_center: bool = True,
    rng: Optional[random.Random] = None,
) -> BingoBoard:
    """
    Build a fresh board for a phrase set.

    Args:
        phrase_set: Source phrase set (read only)
        use_free_center: Caller's free centre preference, honoured on 5x5 boards only
        rng: Random source; a new `random.Random()` when omitted

    Returns:
        A BingoBoard with exactly grid_size ** 2 cells
    """
    if rng is None:
        rng = random.Random()

    parsed = parse_phrases(phrase_set.phrases, rng)
    grid_size = grid_size_for(len(parsed))
    free_center = uses_free_center(grid_size, use_free_center)

    selection = select_phrases(parsed, cells_needed(grid_size, free_center), rng)
    cells = materialize_cells(grid_size, selection, free_center)

    logger.debug(
        "Built %dx%d board for %s from %d phrases (free centre: %s)",
        grid_size, grid_size, phrase_set.code, len(parsed), free_center,
    )

    return BingoBoard(
        code=phrase_set.code,
        title=phrase_set.title,
        grid_size=grid_size,
        uses_free_center=free_center,
        cells=cells,
    )


def toggle_cell(board: BingoBoard, cell_id: str) -> BingoBoard:
    """Return a copy of the board with one non-free cell's selection flipped."""
    cells = [
        cell.model_copy(update={"selected": not cell.selected})
        if cell.id == cell_id and not cell.is_free
        else cell.model_copy()
        for cell in board.cells
    ]
    return board.model_copy(update={"cells": cells})
