"""Core type definitions for dim."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class DataType(Enum):
    """Kind of content held by a Vector."""

    TEXT = "text"
    IMAGE = "image"
    AUDIO = "audio"
    VIDEO = "video"


@dataclass(frozen=True, slots=True)
class TextPayload:
    text: str

    @property
    def data_type(self) -> DataType:
        return DataType.TEXT


@dataclass(frozen=True, slots=True)
class ImagePayload:
    """Encoded image bytes plus the MIME type used in the data URL."""

    data: bytes
    mime_type: str = "image/png"

    @property
    def data_type(self) -> DataType:
        return DataType.IMAGE


@dataclass(frozen=True, slots=True)
class AudioPayload:
    """Reserved. Samples are kept but cannot be sent to a model yet."""

    samples: tuple[float, ...]
    sample_rate: int

    @property
    def data_type(self) -> DataType:
        return DataType.AUDIO


@dataclass(frozen=True, slots=True)
class VideoPayload:
    """Reserved. Frames are kept but cannot be sent to a model yet."""

    frames: tuple[Any, ...]
    fps: float

    @property
    def data_type(self) -> DataType:
        return DataType.VIDEO


Payload = TextPayload | ImagePayload | AudioPayload | VideoPayload


@dataclass(frozen=True, slots=True)
class ModelParameters:
    """Settings shared by every request of one vectorization run.

    Unset optional fields are left out of the request so the provider
    default applies.
    """

    model: str
    temperature: float | None = None
    max_tokens: int | None = None
    seed: int | None = None

    def __post_init__(self) -> None:
        if not self.model:
            raise ValueError("model must be a non-empty string")
        if self.temperature is not None and not 0.0 <= self.temperature <= 2.0:
            raise ValueError(
                f"temperature must be between 0.0 and 2.0, got {self.temperature}"
            )
        if self.max_tokens is not None and self.max_tokens <= 0:
            raise ValueError(f"max_tokens must be positive, got {self.max_tokens}")

    def to_request_fields(self) -> dict[str, Any]:
        fields: dict[str, Any] = {"model": self.model}
        if self.temperature is not None:
            fields["temperature"] = self.temperature
        if self.max_tokens is not None:
            fields["max_tokens"] = self.max_tokens
        if self.seed is not None:
            fields["seed"] = self.seed
        return fields


@dataclass(frozen=True, slots=True)
class ModelRequest:
    """One prompt about the shared input, ready for a model caller.

    ``content`` is the OpenAI chat message content: a string for text
    input, a list of content parts for images.
    """

    prompt: str
    content: str | list[dict[str, Any]]
    parameters: ModelParameters

    def to_messages(self) -> list[dict[str, Any]]:
        return [{"role": "user", "content": self.content}]
