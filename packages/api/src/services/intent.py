# This project was developed with assistance from AI tools.
"""Rule-based intent classifier.

Maps free text to an intent category by walking an ordered list of keyword
rules and taking the first match -- rule order is the priority. Each rule
fixes the category, its base tags, and a hand-tuned confidence. Secondary
tags (urgency, level of detail) are added independently afterwards.
"""

import logging
from dataclasses import dataclass

from db.enums import IntentCategory

from ..schemas.intent import IntentAnalysis

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _IntentRule:
    keywords: tuple[str, ...]
    category: IntentCategory
    tags: tuple[str, ...]
    confidence: float


# Creation requests split further by what is being created.
_CREATION_KEYWORDS = ("write", "create", "generate")
_CREATION_RULES: tuple[_IntentRule, ...] = (
    _IntentRule(
        ("code", "function", "script"),
        IntentCategory.CODE_GENERATION,
        ("programming", "development", "code"),
        0.9,
    ),
    _IntentRule(
        ("story", "poem", "article"),
        IntentCategory.CREATIVE_WRITING,
        ("creative", "writing", "content"),
        0.85,
    ),
)
_GENERIC_CREATION = _IntentRule((), IntentCategory.CREATIVE_WRITING, ("content-creation",), 0.7)

_RULES: tuple[_IntentRule, ...] = (
    _IntentRule(
        ("analyze", "data", "chart"),
        IntentCategory.DATA_ANALYSIS,
        ("analytics", "data", "insights"),
        0.8,
    ),
    _IntentRule(
        ("summarize", "summary"),
        IntentCategory.CONTENT_SUMMARIZATION,
        ("summary", "condense", "extract"),
        0.9,
    ),
    _IntentRule(
        ("translate", "language"),
        IntentCategory.TRANSLATION,
        ("translation", "language", "multilingual"),
        0.95,
    ),
    _IntentRule(
        ("what", "how", "why", "?"),
        IntentCategory.QUESTION_ANSWERING,
        ("qa", "information", "help"),
        0.8,
    ),
    _IntentRule(
        ("brainstorm", "ideas", "suggest"),
        IntentCategory.BRAINSTORMING,
        ("ideas", "creative", "suggestions"),
        0.85,
    ),
    _IntentRule(
        ("solve", "problem", "fix"),
        IntentCategory.PROBLEM_SOLVING,
        ("problem-solving", "troubleshooting", "solution"),
        0.8,
    ),
)
_FALLBACK = _IntentRule((), IntentCategory.OTHER, ("general", "assistance"), 0.6)

# Applied regardless of which primary rule fired: (keywords, tag)
_SECONDARY_TAGS: tuple[tuple[tuple[str, ...], str], ...] = (
    (("urgent", "quick"), "urgent"),
    (("detailed", "comprehensive"), "detailed"),
    (("simple", "basic"), "simple"),
)


def _contains_any(text: str, keywords: tuple[str, ...]) -> bool:
    return any(kw in text for kw in keywords)


def _match_rule(text: str) -> _IntentRule:
    if _contains_any(text, _CREATION_KEYWORDS):
        for rule in _CREATION_RULES:
            if _contains_any(text, rule.keywords):
                return rule
        return _GENERIC_CREATION

    for rule in _RULES:
        if _contains_any(text, rule.keywords):
            return rule
    return _FALLBACK


def classify_intent(text: str) -> IntentAnalysis:
    """Classify a user request into an intent category.

    Args:
        text: The user's natural-language request (already length-validated).

    Returns:
        IntentAnalysis with the first matching category, its tags plus any
        secondary tags (duplicates removed, first occurrence kept), and the
        rule's confidence.
    """
    lowered = text.lower()
    rule = _match_rule(lowered)

    tags = list(rule.tags)
    for keywords, tag in _SECONDARY_TAGS:
        if _contains_any(lowered, keywords):
            tags.append(tag)

    analysis = IntentAnalysis(
        intent_category=rule.category,
        tags=list(dict.fromkeys(tags)),
        confidence=rule.confidence,
    )
    logger.debug(
        "Classified intent as %s (confidence=%.2f)", analysis.intent_category.value, rule.confidence
    )
    return analysis
