"""Model-calling capabilities."""

from dim.providers.protocol import ModelCaller
from dim.providers.fake_provider import FakeModelCaller
from dim.providers.openai_provider import OpenAIModelCaller
from dim.providers.litellm_provider import LiteLLMModelCaller

__all__ = [
    "ModelCaller",
    "FakeModelCaller",
    "OpenAIModelCaller",
    "LiteLLMModelCaller",
]
