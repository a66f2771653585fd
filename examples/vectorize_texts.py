"""Vectorize one text with two prompts.

Runs against a FakeModelCaller unless DIM_API_BASE points at an
OpenAI-compatible server (OpenAI, Ollama, LM Studio, ...).
"""

import asyncio
import os

from dim import (
    FakeModelCaller,
    ModelParameters,
    OpenAIModelCaller,
    ProviderSettings,
    Vector,
    configure_logging_from_env,
    vectorize,
)

PROMPTS = [
    "output in json. Rate the text's offensiveness from 0.0 to 10.0. {'offensiveness': your score}",
    "output in json. Rate the text's friendliness from 0.0 to 10.0. {'friendliness': your score}",
]


async def main() -> None:
    """Vectorize a single text and print the result."""
    configure_logging_from_env()
    settings = ProviderSettings.from_env()

    vector = Vector.from_text("Hi, this is dim. I am here to vectorize whatever you want.")
    parameters = ModelParameters(model=settings.model, temperature=0.0)

    if os.getenv("DIM_API_BASE"):
        async with OpenAIModelCaller.from_settings(settings) as caller:
            await vectorize(vector, PROMPTS, caller, parameters)
    else:
        caller = FakeModelCaller(
            {PROMPTS[0]: "{'offensiveness': 0.5}", PROMPTS[1]: "{'friendliness': 8.0}"}
        )
        await vectorize(vector, PROMPTS, caller, parameters)

    print(f"Vector: {vector.get_vector()}")
    print(f"Dimensionality: {vector.dimensionality()}")


if __name__ == "__main__":
    asyncio.run(main())
