# This project was developed with assistance from AI tools.
"""Prompt generation and refinement.

Generation picks an intent-specific template; refinement appends tone and
complexity instructions in a fixed order and records each change. Both are
pure -- refinement treats its own input as the raw prompt, so calls compose.
"""

from db.enums import Complexity, IntentCategory, ModelName, Tone

from ..inference.tokens import estimate_tokens
from ..schemas.prompt import PromptGeneration

_INTENT_TEMPLATES: dict[IntentCategory, str] = {
    IntentCategory.CREATIVE_WRITING: "You are a creative writer. Please help me with: {input}",
    IntentCategory.CODE_GENERATION: "You are a software developer. Please write code for: {input}",
    IntentCategory.DATA_ANALYSIS: "You are a data analyst. Please analyze: {input}",
    IntentCategory.CONTENT_SUMMARIZATION: "Please provide a concise summary of: {input}",
    IntentCategory.TRANSLATION: "Please translate the following text: {input}",
    IntentCategory.QUESTION_ANSWERING: "Please answer this question: {input}",
    IntentCategory.BRAINSTORMING: "Please help me brainstorm ideas for: {input}",
    IntentCategory.PROBLEM_SOLVING: "Please help me solve this problem: {input}",
    IntentCategory.OTHER: "Please help me with: {input}",
}

_TONE_INSTRUCTIONS: dict[Tone, str] = {
    Tone.PROFESSIONAL: "Please provide a professional, formal response.",
    Tone.CASUAL: "Please provide a friendly, conversational response.",
    Tone.CREATIVE: "Please provide a creative, imaginative response.",
    Tone.TECHNICAL: "Please provide a detailed, technical response.",
}

_COMPLEXITY_INSTRUCTIONS: dict[Complexity, str] = {
    Complexity.SIMPLE: "Please keep the response simple and easy to understand.",
    Complexity.DETAILED: "Please provide a comprehensive, detailed response.",
}

_DETAILED_EXTRA = "Please include specific examples and step-by-step explanations."
_TECHNICAL_EXTRA = "Please use technical terminology and provide technical context."
_QUESTION_EXTRA = (
    "Please structure your response clearly and address all aspects of the question."
)

_SEPARATOR = "\n\n"


def generate_prompt(model: ModelName, intent: IntentCategory, user_input: str) -> PromptGeneration:
    """Build the initial prompt for an intent.

    ``model`` is accepted for parity with the request contract; templates do
    not vary by model.
    """
    template = _INTENT_TEMPLATES.get(intent, _INTENT_TEMPLATES[IntentCategory.OTHER])
    raw_prompt = template.format(input=user_input)
    return PromptGeneration(
        raw_prompt=raw_prompt,
        optimized_prompt=raw_prompt,
        improvements=["Initial prompt generated"],
        estimated_tokens=estimate_tokens(raw_prompt),
    )


def refine_prompt(prompt: str, tone: Tone, complexity: Complexity) -> PromptGeneration:
    """Append tone and complexity instructions to a prompt.

    Steps, in order (each appends a sentence and an improvement note):
      1. Tone instruction, unless tone is casual (the implicit default)
      2. Complexity instruction (always)
      3. Examples / step-by-step request for detailed complexity
      4. Terminology request for technical tone
      5. Structure request when the input contains a question mark

    Args:
        prompt: Prompt to refine; becomes ``raw_prompt`` of the result.
        tone: Desired response tone.
        complexity: Desired level of detail.

    Returns:
        PromptGeneration with the refined text and token estimate.
    """
    parts = [prompt]
    improvements: list[str] = []

    if tone != Tone.CASUAL:
        parts.append(_TONE_INSTRUCTIONS[tone])
        improvements.append(f"Applied {tone.value} tone")

    parts.append(_COMPLEXITY_INSTRUCTIONS[complexity])
    improvements.append(f"Applied {complexity.value} complexity level")

    if complexity == Complexity.DETAILED:
        parts.append(_DETAILED_EXTRA)
        improvements.append("Added detailed instruction")

    if tone == Tone.TECHNICAL:
        parts.append(_TECHNICAL_EXTRA)
        improvements.append("Added technical context instruction")

    if "?" in prompt:
        parts.append(_QUESTION_EXTRA)
        improvements.append("Enhanced question structure")

    optimized = _SEPARATOR.join(parts)
    return PromptGeneration(
        raw_prompt=prompt,
        optimized_prompt=optimized,
        improvements=improvements,
        estimated_tokens=estimate_tokens(optimized),
    )
