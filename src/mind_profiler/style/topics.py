"""
Topic Distribution

Score a corpus against the library's topic categories, normalize to
percentages in one pass and describe the dominant topics.
"""

import math

from mind_profiler.models.analytics import TopicDistribution, TopicShare
from .markers import MarkerLibrary, TopicCategory


# Topics at or below this share are dropped from the distribution
MIN_TOPIC_PERCENTAGE = 5

# A single topic above this share is described on its own
DOMINANT_TOPIC_PERCENTAGE = 60


def normalize_percentages(counts: list[float]) -> list[int]:
    """
    Convert counts into integer percentages that sum to 100.

    Uses the largest-remainder method: floor every share, then hand the
    leftover points to the largest fractional parts (earliest first on
    ties). If every count is zero the categories share 100 equally.
    """
    if not counts:
        return []

    total = sum(counts)
    if total <= 0:
        return [100 // len(counts)] * len(counts)

    exact = [count / total * 100 for count in counts]
    floors = [math.floor(value) for value in exact]
    leftover = 100 - sum(floors)

    by_remainder = sorted(range(len(exact)), key=lambda i: (-(exact[i] - floors[i]), i))
    for i in by_remainder[:leftover]:
        floors[i] += 1

    return floors


def interpret_topics(top: list[TopicShare]) -> str:
    """Describe the top one or two topics."""
    if not top:
        return "Diverse intellectual interests without clear dominance"

    primary = top[0]
    if len(top) == 1 or primary.percentage > DOMINANT_TOPIC_PERCENTAGE:
        return (
            f"Strong focus on {primary.name.lower()} suggests "
            f"{primary.psychological_implication.lower()}"
        )

    secondary = top[1]
    return (
        f"Cognitive blend of {primary.name.lower()} ({primary.percentage}%) and "
        f"{secondary.name.lower()} ({secondary.percentage}%) indicates "
        f"{primary.psychological_implication.lower()} with "
        f"{secondary.psychological_implication.lower()}"
    )


def cognitive_style_for(top: list[TopicShare], topics: tuple[TopicCategory, ...]) -> str:
    """Style label of the leading topic."""
    if not top:
        return "Generalist thinker"

    for category in topics:
        if category.name == top[0].name:
            return category.cognitive_style
    return "Interdisciplinary thinker"


def analyze_topic_distribution(text: str, markers: MarkerLibrary) -> TopicDistribution:
    """
    Compute the topic distribution of a corpus.

    Args:
        text: Full corpus text
        markers: Marker library providing the topic categories

    Returns:
        TopicDistribution with shares above the minimum, largest first
    """
    text = text.lower()
    topics = markers.topics

    counts = [category.rule.score(text) for category in topics]
    percentages = normalize_percentages(counts)

    shares = [
        TopicShare(
            name=category.name,
            percentage=percentage,
            color_token=category.color,
            psychological_implication=category.implication,
        )
        for category, percentage in zip(topics, percentages)
        if percentage > MIN_TOPIC_PERCENTAGE
    ]
    # Stable sort keeps declaration order among equal shares
    shares.sort(key=lambda share: -share.percentage)

    top = shares[:2]
    return TopicDistribution(
        dominant=tuple(shares),
        interpretation=interpret_topics(top),
        cognitive_style=cognitive_style_for(top, topics),
    )
