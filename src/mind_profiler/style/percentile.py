"""
Percentile Calibration

Maps a raw [0, 1] score to a percentile using contextual bands. Within
a band the percentile is a linear interpolation of the score across the
band's score range, so identical inputs always give the same percentile.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class PercentileBand:
    """A percentile range covering scores in (score_floor, score_ceiling]."""
    name: str
    low: int
    high: int
    score_floor: float
    score_ceiling: float = 1.0

    def percentile(self, score: float) -> int:
        """Interpolate ``score`` into this band's percentile range."""
        span = self.score_ceiling - self.score_floor
        position = (score - self.score_floor) / span if span > 0 else 1.0
        position = max(0.0, min(1.0, position))
        # Rounding absorbs float error so a score at the ceiling maps to ``high``
        return int(self.low + round(position * (self.high - self.low), 6))


# Formality: academic writing sits around the 85-95th percentile,
# business writing 65-80, casual writing 15-40
ACADEMIC = PercentileBand("academic", 85, 95, score_floor=0.8)
PROFESSIONAL = PercentileBand("professional", 65, 80, score_floor=0.6)
BALANCED = PercentileBand("balanced", 45, 65, score_floor=0.4)
CASUAL = PercentileBand("casual", 15, 40, score_floor=0.0, score_ceiling=0.4)

# Complexity: philosophy/academic 85-95, technical 70-85,
# business 50-70, popular writing 25-50
HIGHLY_COMPLEX = PercentileBand("highly_complex", 85, 95, score_floor=0.7)
COMPLEX = PercentileBand("complex", 70, 85, score_floor=0.5)
MODERATE = PercentileBand("moderate", 50, 70, score_floor=0.3)
SIMPLE = PercentileBand("simple", 25, 50, score_floor=0.0, score_ceiling=0.3)


def formality_band(score: float, contraction_rate: float) -> PercentileBand:
    """Select the formality band; contractions keep a text out of the upper bands."""
    if score > 0.8 and contraction_rate < 0.01:
        return ACADEMIC
    elif score > 0.6 and contraction_rate < 0.03:
        return PROFESSIONAL
    elif score > 0.4:
        return BALANCED
    else:
        return CASUAL


def complexity_band(score: float, avg_sentence_length: float) -> PercentileBand:
    """Select the complexity band; upper bands also require long sentences."""
    if score > 0.7 and avg_sentence_length > 22:
        return HIGHLY_COMPLEX
    elif score > 0.5 and avg_sentence_length > 18:
        return COMPLEX
    elif score > 0.3:
        return MODERATE
    else:
        return SIMPLE


def formality_percentile(score: float, contraction_rate: float) -> int:
    """Percentile for a formality score given the contraction rate (per word)."""
    return formality_band(score, contraction_rate).percentile(score)


def complexity_percentile(score: float, avg_sentence_length: float) -> int:
    """Percentile for a complexity score given the average sentence length."""
    return complexity_band(score, avg_sentence_length).percentile(score)
