from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from .request import Request, Response


@dataclass(frozen=True)
class Pivot:
    """Turn a plain ``func(request) -> output`` into a handler that always succeeds."""

    func: Callable[[Request], Any]

    def __call__(self, request: Request) -> Response:
        return request.success(self.func(request))


@dataclass(frozen=True)
class Wrapper:
    """Run ``handler`` and pass its output through ``presenter``, keeping the variant."""

    handler: Callable[[Request], Response]
    presenter: Callable[[Any], Any]

    def __call__(self, request: Request) -> Response:
        response = self.handler(request)
        return Response(request=response.request, output=self.presenter(response.output), success=response.success)
