"""
AI-assisted phrase suggestion.

Asks an LLM for a JSON array of phrases for a genre. When the call or the
reply fails, an offline list built from generic prefixes and nouns can stand
in so the create flow still gets something to work with.
"""

import json
import logging
import random
import re
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..board.builder import shuffle, dedupe
from .errors import SuggestionError
from .llm_client import LLMClient
from .models import PhraseSuggestion, SuggestionConfig
from .prompts import build_suggestion_prompt

logger = logging.getLogger(__name__)


FALLBACK_NOUNS: List[str] = [
    "brainstorm", "coffee run", "surprise moment", "inside joke", "photo op",
    "group selfie", "awkward pause", "celebration cheer", "playlist swap",
    "dance break", "story time", "confetti toss", "snack break", "new idea",
    "high five", "laughter burst", "quick poll", "cheer moment",
    "unexpected cameo", "shout-out", "side quest", "channel check", "group hug",
    "mic drop", "energy boost", "inside reference", "photo bomb",
    "happy accident", "bonus round", "victory lap",
]

FALLBACK_PREFIXES: List[str] = [
    "impromptu", "unexpected", "classic", "legendary", "unplanned", "hilarious",
    "wholesome", "crowd-favorite", "last-minute", "surprise", "serendipitous",
    "off-script", "unrehearsed", "spur-of-the-moment", "blink-and-miss",
    "camera-ready", "playlist-worthy", "memeable", "overheard", "chaotic-good",
    "viral-ready", "unscripted", "backstage", "legend-in-the-making",
    "unexpectedly wholesome",
]

GENRE_SUFFIXES = ["story", "cameo", "tradition", "remix"]

_FENCE_RE = re.compile(r"```(?:json)?\n?")


def parse_phrase_list(content: str, limit: Optional[int] = None) -> List[str]:
    """
    Parse an LLM reply into a list of phrases.

    Markdown code fences are stripped before the JSON array is decoded.
    Non-string and blank entries are skipped; duplicates are dropped.

    Raises:
        SuggestionError: If the reply is not a non-empty JSON array of strings
    """
    cleaned = _FENCE_RE.sub("", content).strip()
    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as e:
        raise SuggestionError(f"Reply is not valid JSON: {e}") from e

    if not isinstance(data, list):
        raise SuggestionError(f"Expected a JSON array, got {type(data).__name__}")

    phrases = dedupe([item.strip() for item in data if isinstance(item, str) and item.strip()])
    if not phrases:
        raise SuggestionError("Invalid phrase list returned from LLM")

    return phrases[:limit] if limit is not None else phrases


def fallback_phrases(genre: str, count: int, rng: Optional[random.Random] = None) -> List[str]:
    """Offline suggestions: shuffled prefix/noun pairs plus a few genre phrases."""
    if rng is None:
        rng = random.Random()

    normalized = genre.strip().lower()
    combos = [
        f"{prefix} {noun}"
        for prefix in shuffle(FALLBACK_PREFIXES, rng)
        for noun in shuffle(FALLBACK_NOUNS, rng)
    ]
    if normalized:
        combos.extend(f"{normalized} {suffix}" for suffix in GENRE_SUFFIXES)

    return dedupe(shuffle(combos, rng))[:count]


class PhraseSuggester(BaseModel):
    """
    Generates bingo phrases for a genre through an LLM.

    Attributes:
        llm_client: Client used for the completion call
        count: Number of phrases to request and return
        fallback: Return offline phrases instead of raising when the LLM fails
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    llm_client: LLMClient
    count: int = Field(default=30, ge=1)
    fallback: bool = True
    rng: Optional[random.Random] = None

    @classmethod
    def create(cls, config: Optional[SuggestionConfig] = None, **kwargs) -> "PhraseSuggester":
        """
        Factory method building the LLM client from a SuggestionConfig.

        Extra fields on the config are forwarded to LiteLLM.
        """
        if config is None:
            config = SuggestionConfig()

        llm_kwargs = dict(config.__pydantic_extra__ or {})
        llm_client = LLMClient(
            model=config.model,
            temperature=config.temperature,
            max_tokens=config.max_tokens,
            **llm_kwargs
        )
        return cls(llm_client=llm_client, count=config.count, fallback=config.fallback, **kwargs)

    def suggest(self, genre: str) -> PhraseSuggestion:
        """
        Suggest phrases for `genre`.

        Raises:
            SuggestionError: If generation fails and fallback is disabled
        """
        normalized = genre.strip().lower()
        logger.info("Generating %d phrases for genre %r", self.count, normalized)

        try:
            content = self.llm_client.complete_text(build_suggestion_prompt(genre, self.count))
            phrases = parse_phrase_list(content, limit=self.count)
        except Exception as e:
            if not self.fallback:
                if isinstance(e, SuggestionError):
                    raise
                raise SuggestionError(f"Failed to generate phrases for {genre!r}: {e}") from e
            logger.warning("Phrase generation failed for %r, using fallback phrases: %s", normalized, e)
            return PhraseSuggestion(
                genre=normalized,
                phrases=fallback_phrases(normalized, self.count, self.rng),
                from_fallback=True,
            )

        return PhraseSuggestion(genre=normalized, phrases=phrases)
