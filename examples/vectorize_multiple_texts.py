"""Vectorize several texts with the same ten prompts and check their shape."""

import asyncio
import os
import random

from dim import (
    DimError,
    FakeModelCaller,
    ModelParameters,
    OpenAIModelCaller,
    ProviderSettings,
    Vector,
    VectorizationOptions,
    configure_logging_from_env,
    vectorize_many,
)

TEXTS = [
    "Hi, this is dim. I am here to vectorize whatever you want.",
    "The weather is beautiful today. Perfect for a walk outside.",
    "Artificial intelligence is transforming how we live and work.",
    "Remember to drink water and stay hydrated throughout the day.",
    "The quick brown fox jumps over the lazy dog.",
]

PROMPTS = [
    "Score the sentiment intensity of the text from 1 (extremely negative) to 9 (extremely positive). Format your response exactly like this example: {'sentiment_score': 7}",
    "Rate the formality of the text from 1 (highly informal, slang-heavy) to 9 (highly formal, academic/professional). Format your response exactly like this example: {'formality_score': 4}",
    "Assess the emotional intensity of the text from 1 (neutral/clinical) to 9 (highly emotional, passionate, or provocative). Format your response exactly like this example: {'emotional_score': 8}",
    "Score how subjective the text is from 1 (purely factual/objective) to 9 (heavily opinionated/subjective). Format your response exactly like this example: {'subjectivity_score': 6}",
    "Rate the linguistic complexity of the text from 1 (simple vocabulary/short sentences) to 9 (dense jargon/long, intricate sentences). Format your response exactly like this example: {'complexity_score': 3}",
    "Score the dominant intent: 1-3 (informative/educational), 4-6 (persuasive/argumentative), 7-9 (narrative/storytelling). Format your response exactly like this example: {'intent_score': 5}",
    "Rate how urgent or time-sensitive the text feels from 1 (no urgency) to 9 (immediate action required). Format your response exactly like this example: {'urgency_score': 2}",
    "Score the specificity of details from 1 (vague/abstract) to 9 (highly specific/concrete examples). Format your response exactly like this example: {'specificity_score': 7}",
    "Rate the politeness of the tone from 1 (rude/confrontational) to 9 (extremely polite/deferential). Format your response exactly like this example: {'politeness_score': 8}",
    "Categorize the text's primary domain: 1-3 (technical/scientific), 4-6 (casual/everyday), 7-9 (artistic/creative). Format your response exactly like this example: {'domain_score': 4}",
]


async def main() -> None:
    """Vectorize all texts and report whether every vector has the same length."""
    configure_logging_from_env()
    settings = ProviderSettings.from_env()

    vectors = [Vector.from_text(text) for text in TEXTS]
    parameters = ModelParameters(model=settings.model, temperature=0.0, seed=42)
    options = VectorizationOptions(max_concurrency=8)

    if os.getenv("DIM_API_BASE"):
        async with OpenAIModelCaller.from_settings(settings) as caller:
            results = await vectorize_many(vectors, PROMPTS, caller, parameters, options=options)
    else:
        caller = FakeModelCaller(
            {p: f"{{'score': {random.randint(1, 9)}}}" for p in PROMPTS},
            delays={p: random.uniform(0.0, 0.05) for p in PROMPTS},
        )
        results = await vectorize_many(vectors, PROMPTS, caller, parameters, options=options)

    print("\n=== Vectorization Results ===\n")
    for i, (vector, result) in enumerate(zip(vectors, results), start=1):
        print(f"Text #{i}")
        if isinstance(result, DimError):
            print(f"Failed: {result}")
        else:
            print(f"Vector: {vector.get_vector()}")
        print()

    lengths = {v.dimensionality() for v in vectors if v.dimensionality()}
    print("=== Validation ===")
    print(f"All vectors have same length: {len(lengths) <= 1}")
    print(f"Vector dimension: {sorted(lengths)}")


if __name__ == "__main__":
    asyncio.run(main())
