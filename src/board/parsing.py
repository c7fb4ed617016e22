"""Phrase line parsing."""

import random
from typing import Iterable, List, Optional

from .models import ParsedPhrase


PRIORITY_MARKER = "*"
ALTERNATIVE_SEPARATOR = "|"


def pick_index(rng: random.Random, size: int) -> int:
    """Uniform index in [0, size) drawn from rng.random()."""
    return min(int(rng.random() * size), size - 1)


def split_alternatives(text: str) -> List[str]:
    """Split on the OR separator, trimming options and dropping empty ones."""
    return [part.strip() for part in text.split(ALTERNATIVE_SEPARATOR) if part.strip()]


def parse_phrase(raw: str, rng: random.Random) -> Optional[ParsedPhrase]:
    """
    Parse one raw phrase line.

    A leading `*` marks the phrase as priority. The remainder is split on `|`
    and one of the non-empty options is chosen uniformly at random.

    Returns None when nothing usable is left on the line.
    """
    text = raw.strip()
    if not text:
        return None

    priority = False
    if text.startswith(PRIORITY_MARKER):
        priority = True
        text = text[len(PRIORITY_MARKER):].strip()

    options = split_alternatives(text)
    if not options:
        return None

    if len(options) == 1:
        choice = options[0]
    else:
        choice = options[pick_index(rng, len(options))]

    return ParsedPhrase(text=choice, priority=priority)


def parse_phrases(lines: Iterable[str], rng: random.Random) -> List[ParsedPhrase]:
    """Parse every line, silently dropping the ones that resolve to nothing."""
    parsed: List[ParsedPhrase] = []
    for line in lines:
        phrase = parse_phrase(line, rng)
        if phrase is not None:
            parsed.append(phrase)
    return parsed
