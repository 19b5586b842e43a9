from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property
from types import MappingProxyType
from typing import Any, Callable, Mapping

from .errors import CoercionError, MissingHandlerError, UnknownActionError
from .observer import coerce_observer
from .request import Request, Response
from .utils import Resolver, coerce_callable, normalize_keys, normalize_name


@dataclass(frozen=True)
class Action:
    """One registered handler and the observer notified with its responses."""

    handler: Callable[[Request], Response]
    observer: Callable[[Response], Any]

    @classmethod
    def coerce(cls, config: Any, resolver: Resolver | None = None) -> Action:
        entry = normalize_keys(config)
        if entry.get("action") is None:
            raise MissingHandlerError(code="MISSING_HANDLER", message="no `action` configured")
        handler = coerce_callable(entry["action"], resolver)
        observer = coerce_observer(entry.get("observer"), resolver)
        return cls(handler=handler, observer=observer)

    def call(self, request: Request) -> Response:
        response = self.handler(request)
        self.observer(response)
        return response

    __call__ = call


@dataclass(frozen=True)
class Dispatcher:
    """Routes action names to registered handlers.

    Build instances with :meth:`coerce`::

        dispatcher = Dispatcher.coerce({
            "some_use_case": {
                "action": some_use_case,
                "observer": [audit, notify],
            },
        })
        response = dispatcher.call("some_use_case", input, env)

    The action mapping cannot change after construction.
    """

    actions: Mapping[str, Action] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "actions", MappingProxyType(dict(self.actions)))

    @classmethod
    def coerce(cls, config: Mapping[Any, Any], resolver: Resolver | None = None) -> Dispatcher:
        actions = {name: Action.coerce(entry, resolver) for name, entry in normalize_keys(config).items()}
        return cls(actions=actions)

    def call(self, name: Any, input: Any, env: Any) -> Response:
        return self._fetch(name).call(Request(env=env, input=input))

    @cached_property
    def _action_names(self) -> frozenset[str]:
        return frozenset(self.actions)

    def action_names(self) -> frozenset[str]:
        return self._action_names

    def __contains__(self, name: object) -> bool:
        try:
            return normalize_name(name) in self.actions
        except CoercionError:
            return False

    def _fetch(self, name: Any) -> Action:
        try:
            return self.actions[normalize_name(name)]
        except (CoercionError, KeyError) as e:
            raise UnknownActionError(code="UNKNOWN_ACTION", message=f"no action registered as {name!r}") from e
