"""Prompt templates for phrase suggestion."""

from .suggestion_prompt import SUGGESTION_PROMPT, build_suggestion_prompt

__all__ = [
    "SUGGESTION_PROMPT",
    "build_suggestion_prompt",
]
