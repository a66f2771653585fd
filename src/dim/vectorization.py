"""Concurrent multi-prompt vectorization.

Every prompt becomes one model call about the same content. The calls run
concurrently and each reply is reduced to one score. Scores are gathered by
prompt index, never by completion order. The container is written once,
and only when every prompt has produced a score.
"""

from __future__ import annotations

import asyncio
import uuid
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, cast

from dim.errors import (
    AggregateFailure,
    DimError,
    ExtractionError,
    TransportError,
    UnsupportedDataTypeError,
    VectorizationError,
)
from dim.extraction import extract_score
from dim.logging import get_logger
from dim.providers.protocol import ModelCaller
from dim.serialization import build_request, serialize_payload
from dim.types import ModelParameters
from dim.vector import Vector

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class VectorizationOptions:
    """Tuning for a vectorization run.

    Attributes:
        cancel_on_failure: Cancel in-flight sibling calls as soon as one
            prompt fails. When False every call runs to completion, so the
            reported failure is always the lowest failing index.
        max_concurrency: Upper bound on simultaneous model calls. None means
            one call per prompt at once.
    """

    cancel_on_failure: bool = True
    max_concurrency: int | None = None

    def __post_init__(self) -> None:
        if self.max_concurrency is not None and self.max_concurrency < 1:
            raise ValueError(
                f"max_concurrency must be at least 1, got {self.max_concurrency}"
            )


class _PromptFailed(Exception):
    """Raised inside a task to make the task group cancel its siblings."""


def _semaphore(options: VectorizationOptions) -> asyncio.Semaphore | None:
    if options.max_concurrency is None:
        return None
    return asyncio.Semaphore(options.max_concurrency)


async def vectorize(
    vector: Vector,
    prompts: Sequence[str],
    model_caller: ModelCaller,
    model_parameters: ModelParameters,
    *,
    options: VectorizationOptions | None = None,
) -> list[float]:
    """Score ``vector``'s content against every prompt and store the result.

    Args:
        vector: Container whose content is sent with every prompt.
        prompts: Questions about the content, each expected to yield one number.
        model_caller: Shared capability that performs the model calls.
        model_parameters: Settings sent unchanged with every call.
        options: Cancellation and concurrency tuning.

    Returns:
        The scores in prompt order; also written to ``vector``.

    Raises:
        ValueError: If ``prompts`` is empty.
        UnsupportedDataTypeError: If the content cannot be sent to a model.
        AggregateFailure: If any prompt failed. ``vector`` is left unchanged.
            It wraps the lowest-index failure recorded. With the default
            ``cancel_on_failure=True`` siblings are cancelled once one prompt
            fails, so which failures get recorded depends on timing. Pass
            ``VectorizationOptions(cancel_on_failure=False)`` for reports that
            are reproducible.
    """
    options = options or VectorizationOptions()
    return await _vectorize(
        vector, prompts, model_caller, model_parameters, options, _semaphore(options)
    )


async def _vectorize(
    vector: Vector,
    prompts: Sequence[str],
    model_caller: ModelCaller,
    model_parameters: ModelParameters,
    options: VectorizationOptions,
    semaphore: asyncio.Semaphore | None,
) -> list[float]:
    prompts = list(prompts)
    if not prompts:
        raise ValueError("at least one prompt is required")

    serialized = serialize_payload(vector.payload)
    log = logger.bind(
        run_id=uuid.uuid4().hex[:12],
        prompt_count=len(prompts),
        data_type=vector.data_type().value,
    )
    log.info("vectorize_started", model=model_parameters.model)

    scores: list[float | None] = [None] * len(prompts)
    failures: dict[int, VectorizationError] = {}

    async def call_model(index: int, prompt: str) -> str:
        request = build_request(serialized, prompt, model_parameters)
        try:
            if semaphore is None:
                return await model_caller.call(request)
            async with semaphore:
                return await model_caller.call(request)
        except Exception as exc:
            if isinstance(exc, VectorizationError):
                message = exc.message
            else:
                message = f"{type(exc).__name__}: {exc}"
            raise TransportError(message, index=index) from exc

    async def score_prompt(index: int, prompt: str) -> None:
        try:
            raw = await call_model(index, prompt)
            try:
                score = extract_score(raw)
            except ExtractionError as exc:
                exc.index = index
                raise
        except VectorizationError as exc:
            failures[index] = exc
            log.warning("prompt_failed", index=index, kind=exc.kind, error=exc.message)
            if options.cancel_on_failure:
                raise _PromptFailed(index) from exc
            return
        scores[index] = score
        log.debug("prompt_scored", index=index, score=score)

    try:
        async with asyncio.TaskGroup() as task_group:
            for index, prompt in enumerate(prompts):
                task_group.create_task(score_prompt(index, prompt))
    except* _PromptFailed:
        pass

    if failures:
        failed_indices = sorted(failures)
        first = failures[failed_indices[0]]
        log.warning(
            "vectorize_failed",
            index=first.index,
            kind=first.kind,
            failed_indices=failed_indices,
        )
        raise AggregateFailure(first, failed_indices, len(prompts)) from first

    result = cast(list[float], scores)
    vector.overwrite_vector(result)
    log.info("vectorize_completed", dimensionality=len(result))
    return list(result)


async def vectorize_many(
    vectors: Sequence[Vector],
    prompts: Sequence[str],
    model_caller: ModelCaller,
    model_parameters: ModelParameters,
    *,
    options: VectorizationOptions | None = None,
) -> list[list[float] | DimError]:
    """Vectorize several containers with the same prompts.

    Each container succeeds or fails on its own. The result list follows
    the order of ``vectors`` and holds either the scores or the error for
    that container. ``options.max_concurrency`` bounds calls across all
    containers together.
    """
    if not prompts:
        raise ValueError("at least one prompt is required")
    options = options or VectorizationOptions()
    semaphore = _semaphore(options)

    async def run_one(vector: Vector) -> list[float] | DimError:
        try:
            return await _vectorize(
                vector, prompts, model_caller, model_parameters, options, semaphore
            )
        except (AggregateFailure, UnsupportedDataTypeError) as exc:
            return exc

    async with asyncio.TaskGroup() as task_group:
        tasks: list[asyncio.Task[Any]] = [
            task_group.create_task(run_one(vector)) for vector in vectors
        ]

    results = [task.result() for task in tasks]
    failed = sum(1 for r in results if isinstance(r, DimError))
    logger.info("vectorize_many_completed", vectors=len(vectors), failed=failed)
    return results
