"""
Style Metrics

Formality and complexity scoring from marker counts and sentence/word
statistics. Rates are matches per word (or per 1000 words) so that
corpora of different sizes are comparable.
"""

import string
from dataclasses import dataclass

from mind_profiler.ingest.splitter import TextSegmentation, sentence_length
from mind_profiler.models.analytics import (
    ComplexityAnalysis,
    ComplexitySubdimensions,
    FormalityAnalysis,
    FormalitySubdimensions,
)
from .markers import MarkerLibrary
from .percentile import complexity_percentile, formality_percentile


# Words longer than this are candidates for rare vocabulary
RARE_WORD_MIN_LENGTH = 9


def clamp01(value: float) -> float:
    """Clamp a value to [0, 1]."""
    return max(0.0, min(1.0, value))


@dataclass
class TextStatistics:
    """Sentence and word statistics for a text."""
    word_count: int
    sentence_count: int
    avg_sentence_length: float  # words per sentence
    avg_word_length: float      # characters per word
    embedded_sentence_count: int
    rare_word_count: int

    @property
    def embedded_rate(self) -> float:
        """Share of sentences with more than two comma-delimited segments."""
        return self.embedded_sentence_count / self.sentence_count if self.sentence_count else 0.0

    @property
    def rare_word_rate(self) -> float:
        return self.rare_word_count / self.word_count if self.word_count else 0.0

    @classmethod
    def from_segmentation(
        cls,
        segmentation: TextSegmentation,
        common_long_words: frozenset[str] = frozenset(),
    ) -> "TextStatistics":
        """Compute statistics over a segmented text."""
        sentences = segmentation.sentences
        words = segmentation.words

        sentence_count = len(sentences)
        word_count = len(words)

        avg_sentence_length = (
            sum(sentence_length(s) for s in sentences) / sentence_count if sentence_count else 0.0
        )
        avg_word_length = sum(len(w) for w in words) / word_count if word_count else 0.0

        embedded = sum(1 for s in sentences if is_embedded_sentence(s))
        rare = sum(1 for w in words if is_rare_word(w, common_long_words))

        return cls(
            word_count=word_count,
            sentence_count=sentence_count,
            avg_sentence_length=avg_sentence_length,
            avg_word_length=avg_word_length,
            embedded_sentence_count=embedded,
            rare_word_count=rare,
        )


def is_embedded_sentence(sentence: str) -> bool:
    """A sentence is embedded if commas split it into more than two segments."""
    return "," in sentence and len(sentence.split(",")) > 2


def is_rare_word(word: str, common_long_words: frozenset[str] = frozenset()) -> bool:
    """Long words outside the common-long-word list count as rare."""
    bare = word.strip(string.punctuation + "“”‘’").lower()
    return len(bare) >= RARE_WORD_MIN_LENGTH and bare not in common_long_words


def score_formality(
    segmentation: TextSegmentation,
    stats: TextStatistics,
    markers: MarkerLibrary,
) -> FormalityAnalysis:
    """
    Score formality as the balance of formal against informal diction.

    The score is ``formal - informal + 0.5`` with both rates in matches
    per 1000 words, clamped to [0, 1].
    """
    text = segmentation.lower
    words = max(stats.word_count, 1)

    formal_ratio = markers.count("formal", text) / words
    informal_ratio = markers.count("informal", text) / words
    contraction_rate = markers.count("contractions", text) / words
    hedging_rate = markers.count("hedging", text) / words
    modality_rate = markers.count("modality", text) / words

    score = clamp01(formal_ratio * 1000 - informal_ratio * 1000 + 0.5)

    return FormalityAnalysis(
        score=score,
        percentile=formality_percentile(score, contraction_rate),
        subdimensions=FormalitySubdimensions(
            tone_register=clamp01(formal_ratio * 100),
            modality_usage=clamp01(modality_rate * 20),
            contraction_rate=clamp01(contraction_rate * 50),
            hedging_frequency=clamp01(hedging_rate * 20),
        ),
    )


def complexity_score(
    avg_sentence_length: float,
    avg_word_length: float,
    embedded_rate: float,
    rare_word_rate: float,
    technical_rate: float,
) -> float:
    """Weighted blend of sentence, lexical, structural and vocabulary complexity."""
    sentence_complexity = clamp01(avg_sentence_length / 30)
    lexical_complexity = clamp01((avg_word_length - 3) / 5)
    structural_complexity = clamp01(embedded_rate * 2)
    vocabulary_complexity = clamp01((rare_word_rate + technical_rate) * 5)

    return clamp01(
        sentence_complexity * 0.3
        + lexical_complexity * 0.2
        + structural_complexity * 0.3
        + vocabulary_complexity * 0.2
    )


def score_complexity(
    segmentation: TextSegmentation,
    stats: TextStatistics,
    markers: MarkerLibrary,
) -> ComplexityAnalysis:
    """Score syntactic and lexical complexity."""
    text = segmentation.lower
    technical_rate = markers.count("technical", text) / max(stats.word_count, 1)
    subordinators_per_sentence = markers.count("subordination", text) / max(stats.sentence_count, 1)

    score = complexity_score(
        stats.avg_sentence_length,
        stats.avg_word_length,
        stats.embedded_rate,
        stats.rare_word_rate,
        technical_rate,
    )

    return ComplexityAnalysis(
        score=score,
        percentile=complexity_percentile(score, stats.avg_sentence_length),
        subdimensions=ComplexitySubdimensions(
            clause_density=clamp01(subordinators_per_sentence / 2),
            dependency_length=clamp01(stats.avg_sentence_length / 20),
            embedded_structure_rate=clamp01(stats.embedded_rate * 3),
            lexical_rarity=clamp01(stats.rare_word_rate * 10),
        ),
    )
