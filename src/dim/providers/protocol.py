"""Model-calling capability protocol."""

from typing import Protocol, runtime_checkable

from dim.types import ModelRequest


@runtime_checkable
class ModelCaller(Protocol):
    """Protocol for sending one request to a model and getting raw text back."""

    async def call(self, request: ModelRequest) -> str:
        """Send a request to the model.

        Args:
            request: Serialized input, prompt text and model parameters.

        Returns:
            The raw text content of the model's reply.
        """
        ...
