"""Application layer for phrase bingo."""

from .models import (
    Message,
    Role,
    PhraseSetInput,
    SnapshotCell,
    PlaySession,
    PhraseSuggestion,
    SuggestionConfig,
    AppConfig,
)
from .errors import BingoError, NotFoundError, ForbiddenError, InvalidInputError, SuggestionError
from .store import RecordStore, InMemoryStore
from .codes import generate_code, create_unique_code, CODE_ALPHABET
from .llm_client import LLMClient
from .suggestions import PhraseSuggester, parse_phrase_list, fallback_phrases
from .bingo_service import BingoService

__all__ = [
    "Message",
    "Role",
    "PhraseSetInput",
    "SnapshotCell",
    "PlaySession",
    "PhraseSuggestion",
    "SuggestionConfig",
    "AppConfig",
    "BingoError",
    "NotFoundError",
    "ForbiddenError",
    "InvalidInputError",
    "SuggestionError",
    "RecordStore",
    "InMemoryStore",
    "generate_code",
    "create_unique_code",
    "CODE_ALPHABET",
    "LLMClient",
    "PhraseSuggester",
    "parse_phrase_list",
    "fallback_phrases",
    "BingoService",
]
