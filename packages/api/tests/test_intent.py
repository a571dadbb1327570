# This project was developed with assistance from AI tools.
"""Tests for the rule-based intent classifier."""

import pytest
from db.enums import IntentCategory

from src.services.intent import classify_intent


def test_code_request_is_code_generation():
    result = classify_intent("Write a python function to calculate fibonacci")
    assert result.intent_category == IntentCategory.CODE_GENERATION
    assert result.confidence == 0.9
    assert {"programming", "development", "code"} <= set(result.tags)


def test_translation_request():
    result = classify_intent("Translate this text to Spanish: Hello world")
    assert result.intent_category == IntentCategory.TRANSLATION
    assert result.confidence == 0.95
    assert result.tags == ["translation", "language", "multilingual"]


@pytest.mark.parametrize(
    ("text", "category", "confidence"),
    [
        ("Create a poem about autumn", IntentCategory.CREATIVE_WRITING, 0.85),
        ("Generate a tagline for my bakery", IntentCategory.CREATIVE_WRITING, 0.7),
        ("Plot this chart for me", IntentCategory.DATA_ANALYSIS, 0.8),
        ("Summarize the meeting notes", IntentCategory.CONTENT_SUMMARIZATION, 0.9),
        ("Why is the sky blue", IntentCategory.QUESTION_ANSWERING, 0.8),
        ("Brainstorm names for a cat", IntentCategory.BRAINSTORMING, 0.85),
        ("Fix my bike chain", IntentCategory.PROBLEM_SOLVING, 0.8),
        ("Hello there", IntentCategory.OTHER, 0.6),
    ],
)
def test_each_rule_category(text, category, confidence):
    result = classify_intent(text)
    assert result.intent_category == category
    assert result.confidence == confidence


def test_first_matching_rule_wins():
    """'data' (analysis rule) outranks 'summary' and the question mark."""
    result = classify_intent("Can you give me a summary of this data?")
    assert result.intent_category == IntentCategory.DATA_ANALYSIS


def test_creation_keyword_takes_priority_over_question():
    result = classify_intent("How do I write a script that renames files?")
    assert result.intent_category == IntentCategory.CODE_GENERATION


def test_question_mark_alone_is_question_answering():
    result = classify_intent("Is it raining in Paris?")
    assert result.intent_category == IntentCategory.QUESTION_ANSWERING
    assert result.tags == ["qa", "information", "help"]


def test_matching_is_case_insensitive():
    result = classify_intent("TRANSLATE THIS")
    assert result.intent_category == IntentCategory.TRANSLATION


def test_secondary_tags_added_after_primary_rule():
    result = classify_intent("Quick: write a detailed but simple story")
    assert result.intent_category == IntentCategory.CREATIVE_WRITING
    assert result.tags == ["creative", "writing", "content", "urgent", "detailed", "simple"]


def test_secondary_tags_on_fallback():
    result = classify_intent("urgent help needed")
    assert result.intent_category == IntentCategory.OTHER
    assert result.tags == ["general", "assistance", "urgent"]


def test_tags_are_deduplicated():
    """'detailed' is added once even though two secondary keywords hit."""
    result = classify_intent("A detailed and comprehensive plan, quick and urgent")
    assert len(result.tags) == len(set(result.tags))
    assert result.tags.count("detailed") == 1
    assert result.tags.count("urgent") == 1


@pytest.mark.parametrize(
    "text",
    ["x", "?", "write", "data data data", "a" * 10_000, "Suggest ideas to solve a problem"],
)
def test_always_one_category_and_non_empty_unique_tags(text):
    result = classify_intent(text)
    assert result.intent_category in IntentCategory
    assert result.tags
    assert len(result.tags) == len(set(result.tags))
    assert 0 <= result.confidence <= 1


def test_classification_is_deterministic():
    text = "Analyze the quarterly numbers"
    assert classify_intent(text) == classify_intent(text)
