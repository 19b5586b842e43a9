from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SubstationError(Exception):
    code: str
    message: str

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


class MissingHandlerError(SubstationError):
    pass


class CoercionError(SubstationError):
    pass


class UnknownActionError(SubstationError):
    pass


class ConfigInvalid(SubstationError):
    pass
