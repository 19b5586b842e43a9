from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from substation.app import run_dispatch


def main(argv: list[str] | None = None, *, runner=run_dispatch) -> int:
    p = argparse.ArgumentParser(description="Dispatch one action from a dispatcher config")
    p.add_argument("--config", required=True, type=Path, help="Path to a dispatcher config JSON file")
    p.add_argument("--action", default=None, help="Name of the action to dispatch")
    p.add_argument("--input", default="null", type=json.loads, help="Action input as JSON (default: null)")
    p.add_argument("--list", action="store_true", help="Print the registered action names and exit")
    p.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
    args = p.parse_args(argv)
    if not args.list and not args.action:
        p.error("--action is required unless --list is given")

    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    return runner(
        config_path=args.config,
        action=args.action,
        input=args.input,
        list_actions=args.list,
    )


if __name__ == "__main__":
    raise SystemExit(main())
