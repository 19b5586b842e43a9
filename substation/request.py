from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Request:
    """Application environment plus the input a handler works on."""

    env: Any
    input: Any

    def success(self, output: Any) -> Response:
        return Response(request=self, output=output, success=True)

    def error(self, output: Any) -> Response:
        return Response(request=self, output=output, success=False)


@dataclass(frozen=True)
class Response:
    """Outcome of one handler invocation.

    ``success`` discriminates the two variants and never changes after
    construction. Handlers should build responses through
    :meth:`Request.success` and :meth:`Request.error` so ``request`` points back
    at the request they were given.
    """

    request: Request
    output: Any
    success: bool

    @property
    def env(self) -> Any:
        return self.request.env

    @property
    def input(self) -> Any:
        return self.request.input
