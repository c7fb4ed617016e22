"""Data models for bingo boards."""

from typing import List
from pydantic import BaseModel, Field


FREE_TEXT = "FREE"


class PhraseSet(BaseModel):
    """A named collection of candidate phrases owned by a profile."""
    code: str
    title: str
    phrases: List[str] = Field(default_factory=list)
    created_at: str = ""
    is_public: bool = False
    free_space: bool = True
    rating_total: float = Field(default=0, ge=0)
    rating_count: int = Field(default=0, ge=0)
    rating_average: float = Field(default=0, ge=0)
    owner_profile_id: str = "guest"


class ParsedPhrase(BaseModel):
    """A phrase line after the priority marker is stripped and one alternative chosen."""
    text: str = Field(..., min_length=1)
    priority: bool = False


class BingoCell(BaseModel):
    """A single cell on the board."""
    id: str
    text: str = ""
    selected: bool = False
    is_free: bool = False


class BingoBoard(BaseModel):
    """One playable instantiation of a PhraseSet."""
    code: str
    title: str
    grid_size: int = Field(..., ge=1)
    uses_free_center: bool = False
    cells: List[BingoCell] = Field(default_factory=list)

    @property
    def selected_indices(self) -> List[int]:
        """Row-major indices of every selected cell."""
        return [i for i, cell in enumerate(self.cells) if cell.selected]
