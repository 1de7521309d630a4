import re


def normalize_for_match(s: str) -> str:
    """Normalize a game name for comparison: strip tags, punctuation, and lowercase."""
    # Strip parenthesized/bracketed tags
    s = re.sub(r"\([^)]*\)", "", s)
    s = re.sub(r"\[[^\]]*\]", "", s)
    # Apostrophes join words ("Baldur's" -> "baldurs")
    s = re.sub(r"['’]", "", s)
    # Replace non-alphanumeric with space
    s = re.sub(r"[^A-Za-z0-9 ]+", " ", s)
    s = s.lower().strip()
    s = re.sub(r"\s+", " ", s)
    return s


def slugify(game_name: str) -> str:
    """Turn a user-supplied game name into the path segment providers expect.

    'Hollow Knight: Silksong (2025)' -> 'hollow-knight-silksong'
    """
    return normalize_for_match(game_name).replace(' ', '-')
