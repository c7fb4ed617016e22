"""Board generation for phrase bingo."""

from .models import PhraseSet, ParsedPhrase, BingoCell, BingoBoard, FREE_TEXT
from .parsing import parse_phrase, parse_phrases, split_alternatives, PRIORITY_MARKER, ALTERNATIVE_SEPARATOR
from .grid import grid_size_for, center_index, uses_free_center, cells_needed, materialize_cells, render_board
from .builder import build_board, toggle_cell, select_phrases, shuffle, dedupe

__all__ = [
    # Building
    "build_board",
    "toggle_cell",
    "select_phrases",
    "shuffle",
    "dedupe",
    # Models
    "PhraseSet",
    "ParsedPhrase",
    "BingoCell",
    "BingoBoard",
    "FREE_TEXT",
    # Parsing
    "parse_phrase",
    "parse_phrases",
    "split_alternatives",
    "PRIORITY_MARKER",
    "ALTERNATIVE_SEPARATOR",
    # Grid utilities
    "grid_size_for",
    "center_index",
    "uses_free_center",
    "cells_needed",
    "materialize_cells",
    "render_board",
]
