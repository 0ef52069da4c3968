from __future__ import annotations
import math
from blog.config import CONFIG


def calculate_reading_time(content: str, words_per_minute: int | None = None) -> int:
    """Minutes to read `content`, rounded up, never less than 1."""
    wpm = words_per_minute or int(CONFIG["words_per_minute"])
    return max(1, math.ceil(len(content.split()) / wpm))
