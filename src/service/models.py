"""
Pydantic models for the service layer.

Input contracts, play sessions, suggestion results and configuration. The
board models themselves live in `src.board.models`.
"""

from typing import List, Optional, Literal
from pydantic import BaseModel, Field, ConfigDict, field_validator

from ..board.models import BingoBoard


Role = Literal["system", "user", "assistant"]


class Message(BaseModel):
    """A single chat message sent to the LLM."""
    role: Role
    content: str


class PhraseSetInput(BaseModel):
    """Validated fields a caller may set when creating or editing a phrase set."""
    title: str = Field(..., min_length=1)
    phrases: List[str] = Field(..., min_length=1)
    is_public: bool = False
    free_space: bool = True
    owner_profile_id: str = "guest"

    @field_validator("title", mode="before")
    @classmethod
    def _strip_title(cls, value):
        return value.strip() if isinstance(value, str) else value

    @field_validator("phrases")
    @classmethod
    def _clean_phrases(cls, value: List[str]) -> List[str]:
        cleaned = [phrase.strip() for phrase in value if phrase.strip()]
        if not cleaned:
            raise ValueError("phrases must contain at least one non-empty string")
        return cleaned

    @field_validator("owner_profile_id", mode="before")
    @classmethod
    def _default_owner(cls, value):
        if not isinstance(value, str) or not value.strip():
            return "guest"
        return value.strip()


class SnapshotCell(BaseModel):
    """Stored form of one board cell."""
    text: str = ""
    is_free: bool = False


class PlaySession(BaseModel):
    """A player's persisted board and progress."""
    id: str
    profile_id: str = "guest"
    phrase_set_code: str
    phrase_set_title: str = ""
    grid_size: int = Field(..., ge=1)
    uses_free_center: bool = False
    free_center_preference: Optional[bool] = None  # None follows the phrase set
    board_snapshot: List[SnapshotCell] = Field(default_factory=list)
    checked_cells: List[int] = Field(default_factory=list)
    notes: Optional[str] = None
    created_at: str = ""

    @classmethod
    def snapshot_cells(cls, board: BingoBoard) -> List[SnapshotCell]:
        return [SnapshotCell(text=cell.text, is_free=cell.is_free) for cell in board.cells]


class PhraseSuggestion(BaseModel):
    """Suggested phrases for a genre."""
    genre: str
    phrases: List[str] = Field(default_factory=list)
    from_fallback: bool = False


class SuggestionConfig(BaseModel):
    """LLM settings for phrase suggestion."""
    model_config = ConfigDict(extra='allow')

    model: str = "claude-3-5-haiku-20241022"
    temperature: float = 1.0
    max_tokens: Optional[int] = 1024
    count: int = Field(default=30, ge=1)
    fallback: bool = True
    # Additional kwargs are allowed and passed to LiteLLM


class AppConfig(BaseModel):
    """Configuration for the bingo service."""
    confidence: float = Field(default=5, gt=0)
    public_limit: int = Field(default=30, ge=1)
    code_length: int = Field(default=6, ge=4)
    default_free_space: bool = True
    suggestion: SuggestionConfig = Field(default_factory=SuggestionConfig)
