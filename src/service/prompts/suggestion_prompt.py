SUGGESTION_PROMPT = """Generate exactly {count} fun, creative bingo phrases for the theme "{genre}".

Requirements:
- Each phrase should be 2-6 words
- Make them specific and memorable
- Mix obvious and unexpected items
- Keep them family-friendly
- Return ONLY a JSON array of strings, nothing else

Example for "beach": ["sunscreen application", "lost flip flop", "sandcastle competition", "seagull attack", "beach volleyball"]

Now generate {count} phrases for "{genre}":"""


def build_suggestion_prompt(genre: str, count: int = 30) -> str:
    """Fill the suggestion template for a genre."""
    return SUGGESTION_PROMPT.format(genre=genre.strip(), count=count)
