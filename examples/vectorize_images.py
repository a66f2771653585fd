"""Vectorize an image file.

Usage:
    python examples/vectorize_images.py path/to/image.jpg

Needs Pillow (pip install 'dim-vectorizer[images]') and a vision model. Without
DIM_API_BASE a FakeModelCaller answers instead.
"""

import asyncio
import os
import sys

from dim import (
    AggregateFailure,
    FakeModelCaller,
    ModelParameters,
    OpenAIModelCaller,
    ProviderSettings,
    Vector,
    configure_logging_from_env,
    vectorize,
)

PROMPTS = [
    "output in json. Rate the image's offensiveness from 0.0 to 10.0. {'offensiveness': your score}",
    "output in json. Rate the image's friendliness from 0.0 to 10.0. {'friendliness': your score}",
]


async def main(image_path: str) -> None:
    """Load an image, vectorize it and print the result."""
    configure_logging_from_env()
    settings = ProviderSettings.from_env()

    vector = Vector.from_image_file(image_path)
    parameters = ModelParameters(model=settings.model, temperature=0.0)

    try:
        if os.getenv("DIM_API_BASE"):
            async with OpenAIModelCaller.from_settings(settings) as caller:
                await vectorize(vector, PROMPTS, caller, parameters)
        else:
            caller = FakeModelCaller({p: '{"score": 5.0}' for p in PROMPTS})
            await vectorize(vector, PROMPTS, caller, parameters)
    except AggregateFailure as exc:
        print(f"Vectorization failed at prompt {exc.index}: {exc.error}")
        return

    print(f"Vector: {vector.get_vector()}")
    print(f"Vector Length: {vector.dimensionality()}")


if __name__ == "__main__":
    if len(sys.argv) != 2:
        sys.exit(__doc__)
    asyncio.run(main(sys.argv[1]))
