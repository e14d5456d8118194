"""
Keyword-based sentiment scoring for check-in notes.
"""
from wellness.schemas.checkin import SentimentLabel, SentimentResult

POSITIVE_WORDS = ("good", "great", "happy", "joy", "excited", "calm", "content", "relieved")
NEGATIVE_WORDS = ("sad", "depressed", "anxious", "stressed", "angry", "mad", "tired", "lonely")

WORD_WEIGHT = 0.4
MOOD_WEIGHT = 0.2
LABEL_THRESHOLD = 0.2


def sentiment_label(score: float) -> SentimentLabel:
    """Map a score to its label. Exactly +/-0.2 is Neutral."""
    if score > LABEL_THRESHOLD:
        return SentimentLabel.POSITIVE
    if score < -LABEL_THRESHOLD:
        return SentimentLabel.NEGATIVE
    return SentimentLabel.NEUTRAL


def analyze_sentiment(note: str, mood_value: int) -> SentimentResult:
    """
    Score a note together with the self-reported mood.

    Each lexicon word found anywhere in the lowercased note (substring match,
    so "sad" also hits "sadly") moves the score by 0.4, once per word no matter
    how often it occurs. The mood adds mood_value * 0.2 and the total is
    clamped to [-1, 1].

    Args:
        note: Free-text note, may be empty
        mood_value: Self-reported mood in [-2, 2]

    Returns:
        SentimentResult with score in [-1, 1] and its label
    """
    normalized = (note or "").lower()
    score = 0.0
    for word in POSITIVE_WORDS:
        if word in normalized:
            score += WORD_WEIGHT
    for word in NEGATIVE_WORDS:
        if word in normalized:
            score -= WORD_WEIGHT

    score += mood_value * MOOD_WEIGHT

    score = max(-1.0, min(1.0, score))

    return SentimentResult(score=score, label=sentiment_label(score))
