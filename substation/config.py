from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

from .dispatcher import Dispatcher
from .errors import ConfigInvalid
from .resolver import import_resolver
from .schema import SchemaRegistry, read_json
from .utils import Resolver

logger = logging.getLogger(__name__)

CONFIG_SCHEMA = "dispatcher_config.schema.json"


@dataclass(frozen=True)
class DispatcherConfig:
    schema_version: str
    actions: Mapping[str, Mapping[str, Any]]

    def build(self, resolver: Resolver = import_resolver) -> Dispatcher:
        return Dispatcher.coerce(self.actions, resolver=resolver)


def load_config(config_path: Path, schemas: SchemaRegistry | None = None) -> DispatcherConfig:
    try:
        raw = read_json(config_path)
    except (OSError, ValueError) as e:
        raise ConfigInvalid(code="CONFIG_INVALID", message=f"cannot read {config_path}: {e}") from e
    (schemas or SchemaRegistry()).validate(raw, CONFIG_SCHEMA)

    # The `action` key is optional in the schema so a missing handler
    # surfaces as MissingHandlerError when the dispatcher is built.
    actions = {name: dict(entry) for name, entry in raw["actions"].items()}
    logger.debug("loaded %d action(s) from %s", len(actions), config_path)
    return DispatcherConfig(schema_version=str(raw["schema_version"]), actions=actions)
