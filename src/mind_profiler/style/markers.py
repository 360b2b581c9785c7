"""
Linguistic Marker Library

Declarative tables of the surface features the engine counts. Each
feature is a ``MarkerRule``: a list of case-insensitive regular
expressions plus a weight. Rules are grouped into a ``MarkerLibrary``
that is built once and handed to the engine, so an alternate library
(another language, a tuned vocabulary) needs no engine changes.
"""

import re
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Mapping

from mind_profiler.models.analytics import Archetype


def _words(*words: str) -> tuple[str, ...]:
    """Whole-word (or whole-phrase) patterns."""
    return tuple(rf"\b{re.escape(w)}\b" for w in words)


def _stems(*stems: str) -> tuple[str, ...]:
    """Patterns matching any word that starts with one of ``stems``."""
    return tuple(rf"\b{re.escape(s)}\w*" for s in stems)


@dataclass(frozen=True)
class MarkerRule:
    """A named feature and the patterns that detect it."""
    feature_name: str
    patterns: tuple[str, ...]
    weight: float = 1.0
    _compiled: tuple[re.Pattern, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if self.weight < 0:
            raise ValueError(f"Marker weight must be non-negative: {self.feature_name}={self.weight}")
        object.__setattr__(
            self, "_compiled", tuple(re.compile(p, re.IGNORECASE) for p in self.patterns)
        )

    def count(self, text: str) -> int:
        """Total non-overlapping matches of every pattern in ``text``."""
        return sum(1 for pattern in self._compiled for _ in pattern.finditer(text))

    def score(self, text: str) -> float:
        """Weighted match count."""
        return self.count(text) * self.weight


@dataclass(frozen=True)
class TopicCategory:
    """A topic with its keywords and fixed interpretation strings."""
    name: str
    rule: MarkerRule
    implication: str
    color: str
    cognitive_style: str


# Feature categories every library must define
REQUIRED_CATEGORIES = (
    "formal",
    "informal",
    "contractions",
    "hedging",
    "modality",
    "subordination",
    "technical",
    "nested_hypotheticals",
    "anaphoric_reasoning",
    "analogy",
    "dialectical",
    "didactic",
    "abstract_terms",
    "discourse_connectives",
    "assertive",
)

OTHER_TOPIC_COLOR = "#6b7280"


@dataclass(frozen=True)
class MarkerLibrary:
    """Immutable collection of every marker table the engine uses."""
    categories: Mapping[str, MarkerRule]
    archetypes: Mapping[Archetype, MarkerRule]
    topics: tuple[TopicCategory, ...]
    common_long_words: frozenset[str] = frozenset()

    def __post_init__(self):
        missing = [name for name in REQUIRED_CATEGORIES if name not in self.categories]
        if missing:
            raise ValueError(f"Marker library is missing categories: {', '.join(missing)}")

        uncovered = [a.value for a in Archetype if a not in self.archetypes]
        if uncovered:
            raise ValueError(f"Marker library has no markers for archetypes: {', '.join(uncovered)}")

        if not self.topics:
            raise ValueError("Marker library needs at least one topic")

        object.__setattr__(self, "categories", MappingProxyType(dict(self.categories)))
        object.__setattr__(self, "archetypes", MappingProxyType(dict(self.archetypes)))
        object.__setattr__(self, "topics", tuple(self.topics))
        object.__setattr__(self, "common_long_words", frozenset(w.lower() for w in self.common_long_words))

    def rule(self, name: str) -> MarkerRule:
        """Look up a feature category by name."""
        try:
            return self.categories[name]
        except KeyError:
            raise KeyError(f"Unknown marker category: {name}") from None

    def count(self, name: str, text: str) -> int:
        """Count matches of a named category in text."""
        return self.rule(name).count(text)

    def with_categories(self, **rules: MarkerRule) -> "MarkerLibrary":
        """Return a copy with some categories replaced."""
        merged = dict(self.categories)
        merged.update(rules)
        return replace(self, categories=merged)


def _rule(name: str, *patterns: str, weight: float = 1.0) -> MarkerRule:
    return MarkerRule(feature_name=name, patterns=tuple(patterns), weight=weight)


DEFAULT_CATEGORIES = {
    "formal": _rule("formal", *_words(
        "shall", "ought", "whilst", "furthermore", "moreover",
        "nevertheless", "consequently", "henceforth",
    )),
    "informal": _rule("informal", *_words(
        "gonna", "wanna", "kinda", "yeah", "cool", "awesome", "stuff", "things",
    )),
    "contractions": _rule(
        "contractions",
        r"\b(?:don|can|won|isn|aren|haven|didn|couldn)['’]t\b",
    ),
    "hedging": _rule("hedging", *_words(
        "perhaps", "possibly", "might", "could", "probably", "likely",
    ), *_stems("seem", "appear")),
    "modality": _rule("modality", *_words("might", "could", "would", "should", "may")),
    "subordination": _rule("subordination", *_words(
        "because", "although", "whereas", "while", "since", "unless", "which", "whom", "whose",
    )),
    "technical": _rule("technical", *_stems(
        "methodolog", "algorithm", "framework", "paradigm", "heuristic",
        "optimization", "implementation", "specification", "architecture",
        "infrastructure", "systematic", "empirical",
    )),
    "nested_hypotheticals": _rule(
        "nested_hypotheticals",
        *(
            rf"\b{w}\b[^.!?]*?\bthen\b[^.!?]*?\b{w}\b"
            for w in ("if", "suppose", "assuming", "given", "provided")
        ),
    ),
    "anaphoric_reasoning": _rule("anaphoric_reasoning", *_words(
        "this suggests", "this implies", "therefore", "thus", "hence",
        "this indicates", "this demonstrates", "this reveals",
    )),
    "analogy": _rule("analogy", *_words(
        "like", "similar to", "analogous", "comparable", "parallel",
        "mirrors", "resembles", "akin to",
    )),
    "dialectical": _rule("dialectical", *_words(
        "however", "but", "yet", "although", "nonetheless", "conversely",
        "on the other hand", "in contrast",
    )),
    "didactic": _rule("didactic", *_words(
        "should", "must", "need to", "important to", "essential",
        "crucial", "vital", "necessary",
    )),
    "abstract_terms": _rule("abstract_terms", *_stems(
        "concept", "theor", "framework", "methodolog", "analys", "synthes",
    )),
    "discourse_connectives": _rule("discourse_connectives", *_words(
        "however", "furthermore", "nevertheless", "therefore",
    )),
    "assertive": _rule("assertive", *_words(
        "clearly", "obviously", "certainly", "undoubtedly", "indeed",
    )),
}

DEFAULT_ARCHETYPE_MARKERS = {
    Archetype.DECONSTRUCTOR: _rule("deconstructor", *_words(
        "however", "nevertheless", "on the other hand", "conversely",
        "but rather", "instead of", "challenges the notion", "questions whether",
    )),
    Archetype.SYNTHESIST: _rule("synthesist", *_words(
        "furthermore", "moreover", "in addition", "builds upon",
    ), *_stems("integrat", "synthesiz", "combin", "bridg")),
    Archetype.ALGORITHMIC_THINKER: _rule("algorithmic_thinker", *_words(
        "therefore", "thus", "consequently", "follows that",
    ), *_stems("algorithm", "systematic", "methodolog", "framework")),
    Archetype.RHETORICAL_STRATEGIST: _rule("rhetorical_strategist", *_words(
        "what if",
    ), *_stems("consider", "imagin", "suppos", "persuasi", "compelling", "argument", "rhetoric")),
    Archetype.ARCHITECT: _rule("architect", *_stems(
        "structur", "foundation", "framework", "architect",
        "design", "construct", "building", "organiz",
    )),
    Archetype.CATALOGUER: _rule("cataloguer", *_words(
        "such as", "for example", "namely", "list", "lists",
    ), *_stems("includ", "categoriz", "classif", "enumerat")),
}

DEFAULT_TOPICS = (
    TopicCategory(
        name="Philosophy",
        rule=_rule("philosophy", *_stems(
            "philosoph", "ethic", "moralit", "consciousness", "existen", "metaphysic",
        )),
        implication="Indicates abstract thinking and concern with fundamental questions",
        color="#8b5cf6",
        cognitive_style="Abstract theorist",
    ),
    TopicCategory(
        name="Technology",
        rule=_rule("technology", *_words("artificial intelligence"), *_stems(
            "technolog", "digital", "algorithm", "programming", "software",
        )),
        implication="Suggests systematic thinking and implementation-oriented mindset",
        color="#3b82f6",
        cognitive_style="Systems implementer",
    ),
    TopicCategory(
        name="Science",
        rule=_rule("science", *_stems(
            "research", "experiment", "hypothes", "theor", "evidence", "methodolog",
        )),
        implication="Demonstrates empirical thinking and systematic investigation approach",
        color="#10b981",
        cognitive_style="Empirical investigator",
    ),
    TopicCategory(
        name="Arts",
        rule=_rule("arts", *_stems(
            "creativ", "artistic", "aesthetic", "expression", "imagination", "cultur",
        )),
        implication="Reflects appreciation for subjective experience and creative synthesis",
        color="#ec4899",
        cognitive_style="Creative synthesist",
    ),
    TopicCategory(
        name="Business",
        rule=_rule("business", *_stems(
            "strateg", "market", "business", "profit", "management", "organization",
        )),
        implication="Shows practical orientation and systems-level thinking",
        color="#f59e0b",
        cognitive_style="Strategic optimizer",
    ),
)

# Long words too common to count as rare vocabulary
COMMON_LONG_WORDS = frozenset({
    "something", "everything", "anything", "nothing", "understand", "different",
    "important", "information", "government", "development", "management", "statement",
})

DEFAULT_MARKERS = MarkerLibrary(
    categories=DEFAULT_CATEGORIES,
    archetypes=DEFAULT_ARCHETYPE_MARKERS,
    topics=DEFAULT_TOPICS,
    common_long_words=COMMON_LONG_WORDS,
)
