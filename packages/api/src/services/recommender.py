# This project was developed with assistance from AI tools.
"""Model recommendation catalog.

A static baseline per intent category, adjusted by two overrides that run
in a fixed order: budget first, then speed. The speed override looks up
whatever model the budget step left in place, so a budget downgrade can
change (or cancel) the fast alternative.

Recommendations are best-effort -- an unsatisfiable budget keeps the current
choice rather than failing.
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType

from db.enums import IntentCategory, ModelName, ModelProvider, SpeedPreference

from ..schemas.recommendation import ModelRecommendation

logger = logging.getLogger(__name__)

BASELINE_RECOMMENDATIONS: MappingProxyType[IntentCategory, ModelRecommendation] = MappingProxyType(
    {
        IntentCategory.CREATIVE_WRITING: ModelRecommendation(
            model_name=ModelName.CLAUDE_3_SONNET,
            provider=ModelProvider.ANTHROPIC,
            reasoning="Claude excels at creative writing with nuanced understanding "
            "and engaging prose",
            estimated_cost=0.015,
            performance_score=0.95,
        ),
        IntentCategory.CODE_GENERATION: ModelRecommendation(
            model_name=ModelName.GPT_4O,
            provider=ModelProvider.OPENAI,
            reasoning="GPT-4o has excellent code generation capabilities with strong reasoning",
            estimated_cost=0.03,
            performance_score=0.92,
        ),
        IntentCategory.DATA_ANALYSIS: ModelRecommendation(
            model_name=ModelName.GPT_4O,
            provider=ModelProvider.OPENAI,
            reasoning="GPT-4o performs well on analytical tasks and data interpretation",
            estimated_cost=0.03,
            performance_score=0.90,
        ),
        IntentCategory.CONTENT_SUMMARIZATION: ModelRecommendation(
            model_name=ModelName.GPT_4O_MINI,
            provider=ModelProvider.OPENAI,
            reasoning="GPT-4o-mini is cost-effective for summarization tasks",
            estimated_cost=0.01,
            performance_score=0.85,
        ),
        IntentCategory.TRANSLATION: ModelRecommendation(
            model_name=ModelName.GEMINI_PRO,
            provider=ModelProvider.GOOGLE,
            reasoning="Gemini has strong multilingual capabilities",
            estimated_cost=0.02,
            performance_score=0.88,
        ),
        IntentCategory.QUESTION_ANSWERING: ModelRecommendation(
            model_name=ModelName.CLAUDE_3_HAIKU,
            provider=ModelProvider.ANTHROPIC,
            reasoning="Claude Haiku is fast and accurate for Q&A tasks",
            estimated_cost=0.005,
            performance_score=0.87,
        ),
        IntentCategory.BRAINSTORMING: ModelRecommendation(
            model_name=ModelName.GPT_4O,
            provider=ModelProvider.OPENAI,
            reasoning="GPT-4o generates diverse and creative ideas",
            estimated_cost=0.03,
            performance_score=0.93,
        ),
        IntentCategory.PROBLEM_SOLVING: ModelRecommendation(
            model_name=ModelName.CLAUDE_3_OPUS,
            provider=ModelProvider.ANTHROPIC,
            reasoning="Claude Opus has superior reasoning capabilities for complex problems",
            estimated_cost=0.06,
            performance_score=0.96,
        ),
        IntentCategory.OTHER: ModelRecommendation(
            model_name=ModelName.GPT_35_TURBO,
            provider=ModelProvider.OPENAI,
            reasoning="GPT-3.5-turbo is a reliable general-purpose model",
            estimated_cost=0.002,
            performance_score=0.80,
        ),
    }
)


@dataclass(frozen=True)
class _Alternative:
    model_name: ModelName
    provider: ModelProvider
    performance_score: float
    cost: float | None = None


# Scanned in order; the first model within budget wins.
CHEAP_MODELS: tuple[_Alternative, ...] = (
    _Alternative(ModelName.GPT_35_TURBO, ModelProvider.OPENAI, 0.80, cost=0.002),
    _Alternative(ModelName.CLAUDE_3_HAIKU, ModelProvider.ANTHROPIC, 0.87, cost=0.005),
    _Alternative(ModelName.GEMINI_FLASH, ModelProvider.GOOGLE, 0.82, cost=0.008),
)

FAST_ALTERNATIVES: MappingProxyType[ModelName, _Alternative] = MappingProxyType(
    {
        ModelName.GPT_4O: _Alternative(ModelName.GPT_4O_MINI, ModelProvider.OPENAI, 0.85),
        ModelName.CLAUDE_3_OPUS: _Alternative(
            ModelName.CLAUDE_3_HAIKU, ModelProvider.ANTHROPIC, 0.87
        ),
        ModelName.CLAUDE_3_SONNET: _Alternative(
            ModelName.CLAUDE_3_HAIKU, ModelProvider.ANTHROPIC, 0.87
        ),
    }
)


def _apply_budget(rec: ModelRecommendation, budget: float | None) -> ModelRecommendation:
    if budget is None or rec.estimated_cost is None or budget >= rec.estimated_cost:
        return rec

    affordable = next((m for m in CHEAP_MODELS if m.cost <= budget), None)
    if affordable is None:
        logger.debug("No model fits budget %.4f; keeping %s", budget, rec.model_name.value)
        return rec

    return ModelRecommendation(
        model_name=affordable.model_name,
        provider=affordable.provider,
        reasoning=f"Budget-optimized choice: {affordable.model_name.value} for cost efficiency",
        estimated_cost=affordable.cost,
        performance_score=affordable.performance_score,
    )


def _apply_speed(rec: ModelRecommendation, speed: SpeedPreference) -> ModelRecommendation:
    if speed != SpeedPreference.FAST:
        return rec

    alternative = FAST_ALTERNATIVES.get(rec.model_name)
    if alternative is None:
        return rec

    return rec.model_copy(
        update={
            "model_name": alternative.model_name,
            "provider": alternative.provider,
            "reasoning": f"{rec.reasoning} (speed-optimized variant)",
            "performance_score": alternative.performance_score,
        }
    )


def recommend_model(
    intent_category: IntentCategory,
    budget: float | None = None,
    speed: SpeedPreference = SpeedPreference.BALANCED,
) -> ModelRecommendation:
    """Recommend a model for an intent, honouring budget and speed preferences.

    Args:
        intent_category: Classified intent of the request.
        budget: Optional ceiling on estimated cost. Triggers the cheap-model
            scan only when below the baseline's cost.
        speed: 'fast' swaps in a faster sibling of the (post-budget) model
            when one exists; other values leave the choice alone.

    Returns:
        A fresh ModelRecommendation; the baseline table is never mutated.
    """
    baseline = BASELINE_RECOMMENDATIONS.get(
        intent_category, BASELINE_RECOMMENDATIONS[IntentCategory.OTHER]
    )
    rec = _apply_budget(baseline, budget)
    rec = _apply_speed(rec, speed)
    return rec.model_copy()
