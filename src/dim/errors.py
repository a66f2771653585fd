"""Error types raised while vectorizing content."""

from __future__ import annotations


class DimError(Exception):
    """Base class for all dim errors."""


class UnsupportedDataTypeError(DimError):
    """Raised when a payload has no serialization for model requests."""


class VectorizationError(DimError):
    """A single prompt failed to produce a score."""

    kind = "vectorization"

    def __init__(self, message: str, index: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.index = index

    def __str__(self) -> str:
        if self.index is None:
            return self.message
        return f"prompt {self.index}: {self.kind} error: {self.message}"


class TransportError(VectorizationError):
    """The model-calling capability did not return a response."""

    kind = "transport"


class ExtractionError(VectorizationError):
    """A response did not decode to exactly one numeric value."""

    kind = "extraction"

    def __init__(
        self,
        reason: str,
        raw_response: str,
        index: int | None = None,
    ) -> None:
        super().__init__(reason, index=index)
        self.reason = reason
        self.raw_response = raw_response


class AggregateFailure(DimError):
    """A vectorization run failed; wraps the lowest-index prompt failure."""

    def __init__(
        self,
        error: VectorizationError,
        failed_indices: list[int],
        prompt_count: int,
    ) -> None:
        super().__init__(
            f"vectorization failed for {len(failed_indices)} of {prompt_count} "
            f"prompt(s); first failure: {error}"
        )
        self.error = error
        self.failed_indices = failed_indices
        self.prompt_count = prompt_count

    @property
    def index(self) -> int | None:
        return self.error.index
