import logging
import random
import uuid
from datetime import datetime, timezone
from typing import Callable, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..board import PhraseSet, BingoBoard, BingoCell, build_board, toggle_cell
from ..board.grid import cell_id
from ..ranking import search_public
from .codes import create_unique_code, normalize_code
from .errors import NotFoundError, ForbiddenError, InvalidInputError
from .models import AppConfig, PhraseSetInput, PlaySession, PhraseSuggestion
from .store import RecordStore, InMemoryStore
from .suggestions import PhraseSuggester

logger = logging.getLogger(__name__)

MIN_RATING = 1
MAX_RATING = 5


def _accept_all(text: str) -> bool:
    return False


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class BingoService(BaseModel):
    """
    Application layer around the board builder and the ranker.

    Validates input, stores phrase sets and play sessions behind RecordStore
    interfaces, and delegates suggestion to a PhraseSuggester.

    Attributes:
        config: Service configuration
        phrase_sets: Store of PhraseSet records keyed by code
        sessions: Store of PlaySession records keyed by id
        is_objectionable: Content predicate; True blocks the text
        suggester: Optional phrase suggester
        rng: Random source for board builds; fresh per build when None
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    config: AppConfig = Field(default_factory=AppConfig)
    phrase_sets: RecordStore = Field(default_factory=InMemoryStore)
    sessions: RecordStore = Field(default_factory=InMemoryStore)
    is_objectionable: Callable[[str], bool] = _accept_all
    suggester: Optional[PhraseSuggester] = None
    rng: Optional[random.Random] = None

    @classmethod
    def create(cls, config: Optional[AppConfig] = None, **kwargs) -> "BingoService":
        """Factory method wiring a suggester from the config's suggestion settings."""
        if config is None:
            config = AppConfig()
        if "suggester" not in kwargs:
            kwargs["suggester"] = PhraseSuggester.create(config.suggestion)
        return cls(config=config, **kwargs)

    # ---- phrase sets ----

    def _validate_input(self, data) -> PhraseSetInput:
        if isinstance(data, PhraseSetInput):
            return data
        if not isinstance(data, dict):
            raise InvalidInputError("Body must be an object")
        data = {"free_space": self.config.default_free_space, **data}
        try:
            return PhraseSetInput(**data)
        except ValidationError as e:
            messages = "; ".join(f"{'.'.join(map(str, err['loc']))}: {err['msg']}" for err in e.errors())
            raise InvalidInputError(messages) from e

    def _check_content(self, title: str, phrases: List[str]) -> None:
        blocked = [text for text in [title, *phrases] if self.is_objectionable(text)]
        if blocked:
            logger.warning("Blocked %d objectionable entries", len(blocked))
            raise InvalidInputError("Title or phrases contain objectionable content")

    def create_phrase_set(self, data) -> PhraseSet:
        """
        Validate and store a new phrase set under a fresh share code.

        Args:
            data: PhraseSetInput or a dict of its fields

        Raises:
            InvalidInputError: On invalid or objectionable input
        """
        validated = self._validate_input(data)
        self._check_content(validated.title, validated.phrases)

        code = create_unique_code(self.phrase_sets.contains, length=self.config.code_length)
        phrase_set = PhraseSet(
            code=code,
            created_at=_now(),
            **validated.model_dump(),
        )
        self.phrase_sets.put(code, phrase_set)

        logger.info("Created phrase set %s with %d phrases", code, len(phrase_set.phrases))
        return phrase_set

    def get_phrase_set(self, code: str) -> PhraseSet:
        """Raises NotFoundError if no set has this code."""
        phrase_set = self.phrase_sets.get(normalize_code(code))
        if phrase_set is None:
            raise NotFoundError(f"Phrase set not found: {code}")
        return phrase_set

    def list_phrase_sets(self, owner: Optional[str] = None) -> List[PhraseSet]:
        return [s for s in self.phrase_sets.list() if owner is None or s.owner_profile_id == owner]

    def update_phrase_set(self, code: str, data) -> PhraseSet:
        """
        Replace the editable fields of an existing set.

        Raises:
            NotFoundError: If the set does not exist
            ForbiddenError: If the caller is not the owner
            InvalidInputError: On invalid or objectionable input
        """
        existing = self.get_phrase_set(code)
        validated = self._validate_input(data)

        if validated.owner_profile_id and existing.owner_profile_id and existing.owner_profile_id != validated.owner_profile_id:
            raise ForbiddenError(f"Profile {validated.owner_profile_id} does not own {existing.code}")

        self._check_content(validated.title, validated.phrases)

        updated = existing.model_copy(update={
            "title": validated.title,
            "phrases": validated.phrases,
            "is_public": validated.is_public,
            "free_space": validated.free_space,
        })
        self.phrase_sets.put(updated.code, updated)
        return updated

    def rate_phrase_set(self, code: str, rating: float) -> PhraseSet:
        """
        Add one rating to a set's aggregate.

        Raises:
            NotFoundError: If the set does not exist
            InvalidInputError: If rating is not a number in [1, 5]
        """
        phrase_set = self.get_phrase_set(code)

        if isinstance(rating, bool) or not isinstance(rating, (int, float)) or not MIN_RATING <= rating <= MAX_RATING:
            raise InvalidInputError(f"rating must be between {MIN_RATING} and {MAX_RATING}, got {rating!r}")

        total = phrase_set.rating_total + rating
        count = phrase_set.rating_count + 1
        rated = phrase_set.model_copy(update={
            "rating_total": total,
            "rating_count": count,
            "rating_average": round(total / count, 2),
        })
        self.phrase_sets.put(rated.code, rated)

        logger.info("Rated %s %s (now %.2f over %d)", rated.code, rating, rated.rating_average, count)
        return rated

    def search_public(self, query: str = "") -> List[PhraseSet]:
        """Public sets matching `query`, best first."""
        return search_public(
            self.phrase_sets.list(),
            query,
            limit=self.config.public_limit,
            confidence=self.config.confidence,
        )

    # ---- boards and sessions ----

    def build_board(self, code: str, use_free_center: Optional[bool] = None) -> BingoBoard:
        """Build a board for a stored set; None uses the set's free space preference."""
        phrase_set = self.get_phrase_set(code)
        if use_free_center is None:
            use_free_center = phrase_set.free_space
        return build_board(phrase_set, use_free_center, rng=self.rng)

    def start_session(
        self,
        code: str,
        profile_id: str = "guest",
        use_free_center: Optional[bool] = None,
    ) -> PlaySession:
        """Build a board and persist it as a new play session."""
        board = self.build_board(code, use_free_center)
        session = PlaySession(
            id=uuid.uuid4().hex,
            profile_id=profile_id,
            phrase_set_code=board.code,
            phrase_set_title=board.title,
            grid_size=board.grid_size,
            uses_free_center=board.uses_free_center,
            free_center_preference=use_free_center,
            board_snapshot=PlaySession.snapshot_cells(board),
            checked_cells=board.selected_indices,
            created_at=_now(),
        )
        self.sessions.put(session.id, session)
        return session

    def get_session(self, session_id: str) -> PlaySession:
        session = self.sessions.get(session_id)
        if session is None:
            raise NotFoundError(f"Play session not found: {session_id}")
        return session

    def session_board(self, session: PlaySession) -> BingoBoard:
        """Rebuild the board a session was snapshotted from, with its checks applied."""
        checked = set(session.checked_cells)
        cells = [
            BingoCell(
                id=cell_id(index),
                text=cell.text,
                selected=cell.is_free or index in checked,
                is_free=cell.is_free,
            )
            for index, cell in enumerate(session.board_snapshot)
        ]
        return BingoBoard(
            code=session.phrase_set_code,
            title=session.phrase_set_title,
            grid_size=session.grid_size,
            uses_free_center=session.uses_free_center,
            cells=cells,
        )

    def toggle_session_cell(self, session_id: str, index: int) -> PlaySession:
        """
        Toggle one cell of a session's board. Free cells stay checked.

        Raises:
            NotFoundError: If the session does not exist
            InvalidInputError: If index is outside the board
        """
        session = self.get_session(session_id)
        if not 0 <= index < len(session.board_snapshot):
            raise InvalidInputError(f"Cell index {index} out of range for {session.grid_size}x{session.grid_size} board")

        board = toggle_cell(self.session_board(session), cell_id(index))
        updated = session.model_copy(update={"checked_cells": board.selected_indices})
        self.sessions.put(updated.id, updated)
        return updated

    def reshuffle_session(self, session_id: str) -> PlaySession:
        """Replace a session's board with a fresh build and clear its checks."""
        session = self.get_session(session_id)
        board = self.build_board(session.phrase_set_code, session.free_center_preference)
        updated = session.model_copy(update={
            "phrase_set_title": board.title,
            "grid_size": board.grid_size,
            "uses_free_center": board.uses_free_center,
            "board_snapshot": PlaySession.snapshot_cells(board),
            "checked_cells": board.selected_indices,
        })
        self.sessions.put(updated.id, updated)
        return updated

    def set_session_notes(self, session_id: str, notes: Optional[str]) -> PlaySession:
        """Attach free-form notes to a session; blank or None clears them."""
        if notes is not None and not isinstance(notes, str):
            raise InvalidInputError("notes must be a string or None")
        session = self.get_session(session_id)
        cleaned = notes.strip() if notes else ""
        updated = session.model_copy(update={"notes": cleaned or None})
        self.sessions.put(updated.id, updated)
        return updated

    # ---- suggestions ----

    def suggest_phrases(self, genre: str) -> PhraseSuggestion:
        """
        Suggest phrases for a genre, dropping objectionable ones.

        Raises:
            InvalidInputError: If genre is blank or no suggester is configured
            SuggestionError: If generation fails
        """
        if not isinstance(genre, str) or not genre.strip():
            raise InvalidInputError("genre must be a non-empty string")
        if self.suggester is None:
            raise InvalidInputError("Phrase suggestion is not configured")

        suggestion = self.suggester.suggest(genre)
        clean = [phrase for phrase in suggestion.phrases if not self.is_objectionable(phrase)]
        if len(clean) < len(suggestion.phrases):
            logger.warning("Dropped %d objectionable suggestions", len(suggestion.phrases) - len(clean))

        return suggestion.model_copy(update={"phrases": clean})
