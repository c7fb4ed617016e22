"""Share code generation."""

import secrets
from typing import Callable


CODE_ALPHABET = "ABCDEFGHJKLMNPQRSTUVWXYZ23456789"  # no I, O, 0 or 1
DEFAULT_CODE_LENGTH = 6
MAX_ATTEMPTS = 1000


def normalize_code(code: str) -> str:
    return code.strip().upper()


def generate_code(length: int = DEFAULT_CODE_LENGTH, alphabet: str = CODE_ALPHABET) -> str:
    """Random code of `length` characters drawn from `alphabet`."""
    return "".join(secrets.choice(alphabet) for _ in range(length))


def create_unique_code(
    exists: Callable[[str], bool],
    length: int = DEFAULT_CODE_LENGTH,
    alphabet: str = CODE_ALPHABET,
) -> str:
    """
    Generate codes until one is not taken.

    Raises:
        RuntimeError: If no free code is found within MAX_ATTEMPTS tries
    """
    for _ in range(MAX_ATTEMPTS):
        code = generate_code(length, alphabet)
        if not exists(code):
            return code
    raise RuntimeError(f"Could not find a free code of length {length} after {MAX_ATTEMPTS} attempts")
