"""
Match score normalization.
"""

MIN_SCORE = 0
MAX_SCORE = 100


def clamp_score(score: int) -> int:
    """Clamp a score into [MIN_SCORE, MAX_SCORE]."""
    if score < MIN_SCORE:
        return MIN_SCORE
    if score > MAX_SCORE:
        return MAX_SCORE
    return score
