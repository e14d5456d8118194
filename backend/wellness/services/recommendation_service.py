"""
Rule-based recommendations from the latest sentiment score.
"""
from wellness.schemas.insight import Recommendation, UrgencyTier

# (upper bound inclusive, urgency, title, description), checked in order
RECOMMENDATION_TIERS = [
    (
        -0.6,
        UrgencyTier.HIGH,
        "Consider reaching out for support",
        "Your recent check-ins show a strong negative sentiment. Consider contacting a friend, "
        "family member, or a professional. If you are in immediate danger, contact emergency services.",
    ),
    (
        -0.2,
        UrgencyTier.MEDIUM,
        "Try a grounding or breathing exercise",
        "Short breathing exercises (4-4-4) for 5 minutes can reduce anxiety. "
        "Also consider a brief walk and hydration.",
    ),
    (
        0.2,
        UrgencyTier.LOW,
        "Do a short mood-boosting activity",
        "Try a 10-minute guided meditation, listen to an uplifting playlist, "
        "or write three things you're grateful for.",
    ),
]

DEFAULT_RECOMMENDATION = Recommendation(
    title="Keep up the good work!",
    description="Your recent mood looks positive. Continue routines that support your wellbeing "
    "and consider journaling to capture what is working.",
    urgency=UrgencyTier.NONE,
)


def get_recommendation(score: float) -> Recommendation:
    """Pick the first tier whose upper bound is >= score; above 0.2 is the positive message."""
    for upper_bound, urgency, title, description in RECOMMENDATION_TIERS:
        if score <= upper_bound:
            return Recommendation(title=title, description=description, urgency=urgency)
    return DEFAULT_RECOMMENDATION.model_copy()
