"""Fake model caller for testing."""

from __future__ import annotations

import asyncio
from collections.abc import Mapping

from dim.types import ModelRequest


class FakeModelCaller:
    """Fake caller that answers from a prompt -> response table.

    A response that is an exception instance is raised instead of returned.
    Per-prompt delays let tests force any completion order.
    """

    def __init__(
        self,
        responses: Mapping[str, str | BaseException],
        delays: Mapping[str, float] | None = None,
    ) -> None:
        """Initialize with canned responses.

        Args:
            responses: Raw response text (or exception) keyed by prompt.
            delays: Seconds to sleep before answering, keyed by prompt.
        """
        self._responses = dict(responses)
        self._delays = dict(delays or {})
        self.requests: list[ModelRequest] = []
        self.completed: list[str] = []
        self.cancelled: list[str] = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def call(self, request: ModelRequest) -> str:
        """Return the canned response for ``request.prompt``.

        Raises:
            KeyError: When no response is configured for the prompt.
        """
        self.requests.append(request)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            delay = self._delays.get(request.prompt, 0.0)
            try:
                await asyncio.sleep(delay)
            except asyncio.CancelledError:
                self.cancelled.append(request.prompt)
                raise

            response = self._responses[request.prompt]
            self.completed.append(request.prompt)
            if isinstance(response, BaseException):
                raise response
            return response
        finally:
            self.in_flight -= 1
