from __future__ import annotations

import json
import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, TextIO

from .config import load_config
from .dispatcher import Dispatcher
from .request import Response

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppEnvironment:
    """Application env handed to handlers as ``request.env``."""

    dispatcher: Dispatcher
    logger: logging.Logger = field(default=logger)

    def dispatch(self, name: Any, input: Any) -> Response:
        return self.dispatcher.call(name, input, self)


def run_dispatch(
    *,
    config_path: Path,
    action: str | None = None,
    input: Any = None,
    list_actions: bool = False,
    out: TextIO | None = None,
) -> int:
    out = out or sys.stdout
    dispatcher = load_config(config_path).build()
    if list_actions:
        for name in sorted(dispatcher.action_names()):
            out.write(name + "\n")
        return 0
    if action is None:
        raise ValueError("an action name is required unless listing actions")

    response = AppEnvironment(dispatcher=dispatcher).dispatch(action, input)
    out.write(json.dumps({"success": response.success, "output": response.output}, ensure_ascii=False, default=str) + "\n")
    return 0 if response.success else 1
