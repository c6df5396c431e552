"""
Answer normalization and comparison for quiz sessions.
"""

from typing import Iterable, List, Optional, Tuple
from difflib import SequenceMatcher


def normalize_answer(text: Optional[str]) -> str:
    """Lowercase, then strip surrounding whitespace."""
    if text is None:
        return ''
    return str(text).lower().strip()


def answers_match(user_input: Optional[str], stored_answer: Optional[str]) -> bool:
    """Exact comparison of both answers after normalization. No partial credit."""
    return normalize_answer(user_input) == normalize_answer(stored_answer)


def find_similar(word: str, candidates: Iterable[str],
                 threshold: float = 0.6) -> List[Tuple[str, float]]:
    """
    Rank candidates by similarity to word.
    Returns list of (candidate, similarity_score) tuples, best first.

    Only used for suggestions (e.g. mistyped commands), never for grading.
    """
    if not word:
        return []

    needle = word.lower()
    similar = []

    for candidate in candidates:
        similarity = SequenceMatcher(None, needle, candidate.lower()).ratio()
        if similarity >= threshold:
            similar.append((candidate, similarity))

    similar.sort(key=lambda x: x[1], reverse=True)
    return similar
