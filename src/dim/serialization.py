"""Turn a payload and a prompt into a chat request."""

from __future__ import annotations

import base64
from typing import Any

from dim.errors import UnsupportedDataTypeError
from dim.types import (
    ImagePayload,
    ModelParameters,
    ModelRequest,
    Payload,
    TextPayload,
)


def image_data_url(payload: ImagePayload) -> str:
    encoded = base64.b64encode(payload.data).decode("ascii")
    return f"data:{payload.mime_type};base64,{encoded}"


def serialize_payload(payload: Payload) -> str | dict[str, Any]:
    """Encode the payload once so it can be shared by every request.

    Text stays a string. Images become an ``image_url`` content part.

    Raises:
        UnsupportedDataTypeError: For audio and video payloads.
    """
    match payload:
        case TextPayload(text=text):
            return text
        case ImagePayload():
            return {
                "type": "image_url",
                "image_url": {"url": image_data_url(payload), "detail": "high"},
            }
        case _:
            raise UnsupportedDataTypeError(
                f"cannot send {payload.data_type.value} content to a model"
            )


def build_request(
    serialized: str | dict[str, Any],
    prompt: str,
    parameters: ModelParameters,
) -> ModelRequest:
    if isinstance(serialized, str):
        content: str | list[dict[str, Any]] = (
            f"{prompt}\n\nText to analyze: {serialized}"
        )
    else:
        content = [{"type": "text", "text": prompt}, serialized]
    return ModelRequest(prompt=prompt, content=content, parameters=parameters)
