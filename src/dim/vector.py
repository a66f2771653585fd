"""Content container holding one input and its score vector."""

from __future__ import annotations

import io
from collections.abc import Iterable, Sequence
from os import PathLike
from typing import Any

from dim.types import (
    AudioPayload,
    DataType,
    ImagePayload,
    Payload,
    TextPayload,
    VideoPayload,
)

try:
    from PIL import Image  # type: ignore[import-not-found]

    HAS_PILLOW = True
except ImportError:
    HAS_PILLOW = False

_PNG_MODES = {"1", "L", "LA", "I", "P", "RGB", "RGBA"}


class Vector:
    """A piece of content plus the scores produced for it.

    The scores start empty. A successful vectorization run writes exactly
    one score per prompt, in prompt order.
    """

    __slots__ = ("_payload", "_vector")

    def __init__(self, payload: Payload, vector: Iterable[float] = ()) -> None:
        self._payload = payload
        self._vector: list[float] = [float(v) for v in vector]

    @classmethod
    def from_text(cls, text: str) -> Vector:
        return cls(TextPayload(text))

    @classmethod
    def from_image(cls, data: bytes, mime_type: str = "image/png") -> Vector:
        return cls(ImagePayload(bytes(data), mime_type))

    @classmethod
    def from_image_file(cls, path: str | PathLike[str]) -> Vector:
        """Load an image from disk and store it re-encoded as PNG.

        Raises:
            ImportError: If Pillow is not installed.
        """
        if not HAS_PILLOW:
            raise ImportError(
                "Pillow is required to load image files. "
                "Install with: pip install 'dim-vectorizer[images]'"
            )
        with Image.open(path) as image:
            if image.mode not in _PNG_MODES:
                image = image.convert("RGBA")
            buffer = io.BytesIO()
            image.save(buffer, format="PNG")
        return cls.from_image(buffer.getvalue(), "image/png")

    @classmethod
    def from_audio(cls, samples: Sequence[float], sample_rate: int) -> Vector:
        return cls(AudioPayload(tuple(samples), sample_rate))

    @classmethod
    def from_video(cls, frames: Sequence[Any], fps: float) -> Vector:
        return cls(VideoPayload(tuple(frames), fps))

    @property
    def payload(self) -> Payload:
        return self._payload

    @property
    def data(self) -> Any:
        """The raw content: text, image bytes, audio samples or video frames."""
        match self._payload:
            case TextPayload(text=text):
                return text
            case ImagePayload(data=data):
                return data
            case AudioPayload(samples=samples):
                return samples
            case VideoPayload(frames=frames):
                return frames

    def data_type(self) -> DataType:
        return self._payload.data_type

    def dimensionality(self) -> int:
        return len(self._vector)

    def get_vector(self) -> list[float]:
        return list(self._vector)

    def extend(self, scores: Iterable[float]) -> None:
        self._vector.extend(float(s) for s in scores)

    def overwrite_vector(self, scores: Iterable[float]) -> None:
        self._vector = [float(s) for s in scores]

    def __len__(self) -> int:
        return len(self._vector)

    def __repr__(self) -> str:
        return (
            f"Vector(data_type={self.data_type().value!r}, "
            f"vector={self._vector!r})"
        )
