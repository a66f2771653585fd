"""Turn content into fixed-length vectors by asking a language model questions about it."""

__version__ = "0.1.0"

from dim.types import (
    AudioPayload,
    DataType,
    ImagePayload,
    ModelParameters,
    ModelRequest,
    Payload,
    TextPayload,
    VideoPayload,
)
from dim.errors import (
    AggregateFailure,
    DimError,
    ExtractionError,
    TransportError,
    UnsupportedDataTypeError,
    VectorizationError,
)
from dim.vector import Vector
from dim.extraction import extract_score
from dim.config import ProviderSettings
from dim.vectorization import VectorizationOptions, vectorize, vectorize_many
from dim.providers import (
    FakeModelCaller,
    LiteLLMModelCaller,
    ModelCaller,
    OpenAIModelCaller,
)
from dim.logging import configure_logging, configure_logging_from_env, get_logger

__all__ = [
    "__version__",
    "AggregateFailure",
    "AudioPayload",
    "configure_logging",
    "configure_logging_from_env",
    "DataType",
    "DimError",
    "extract_score",
    "ExtractionError",
    "FakeModelCaller",
    "get_logger",
    "ImagePayload",
    "LiteLLMModelCaller",
    "ModelCaller",
    "ModelParameters",
    "ModelRequest",
    "OpenAIModelCaller",
    "Payload",
    "ProviderSettings",
    "TextPayload",
    "TransportError",
    "UnsupportedDataTypeError",
    "Vector",
    "VectorizationError",
    "VectorizationOptions",
    "VideoPayload",
    "vectorize",
    "vectorize_many",
]
