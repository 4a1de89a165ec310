"""Minimal sanity checks for the loaded toolchain configuration."""

from __future__ import annotations

import json
import os
import sys

REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from chain_config import find_problems, load_config, matches_network_id  # noqa: E402

# Chain id to test the development network's matching rule against; override via env.
SAMPLE_CHAIN_ID = os.getenv("CHAIN_CONFIG_SAMPLE_CHAIN_ID", "5777")


def main() -> None:
    config = load_config()
    print("Config:", json.dumps(config.to_dict(), sort_keys=True))

    development = config.networks["development"]
    print("Matches chain id", SAMPLE_CHAIN_ID + ":", matches_network_id(development, SAMPLE_CHAIN_ID))

    problems = find_problems(config)
    print("Problems:", problems or "none")


if __name__ == "__main__":
    main()
