from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Protocol

from .request import Response
from .utils import Resolver, coerce_callable

logger = logging.getLogger(__name__)


class Observer(Protocol):
    def __call__(self, response: Response) -> Any: ...


def _null_observer(response: Response) -> None:
    return None


NULL_OBSERVER: Observer = _null_observer


@dataclass(frozen=True)
class ObserverChain:
    """Notify each observer in order; the first failure stops the chain."""

    observers: tuple[Callable[[Response], Any], ...] = ()

    def __call__(self, response: Response) -> None:
        for observer in self.observers:
            observer(response)

    call = __call__


@dataclass(frozen=True)
class LoggingObserver:
    logger: logging.Logger | None = None
    level: int = logging.INFO

    def __call__(self, response: Response) -> None:
        outcome = "success" if response.success else "failure"
        (self.logger or logger).log(self.level, "%s: input=%r output=%r", outcome, response.input, response.output)


def coerce_observer(config: Any, resolver: Resolver | None = None) -> Callable[[Response], Any]:
    if config is None:
        return NULL_OBSERVER
    if isinstance(config, (list, tuple)):
        observers = tuple(coerce_callable(item, resolver) for item in config)
        if len(observers) == 1:
            return observers[0]
        return ObserverChain(observers)
    return coerce_callable(config, resolver)
