"""
Configuration for the blockchain development toolchain.

This module centralizes the named deployment networks, the test-runner timeout,
and compiler settings. Endpoint host and port are read from the process
environment (optionally seeded from a local ``.env`` file) at load time and are
passed through untouched; checking them is left to whatever consumes the
configuration.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Union

from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger(__name__)

# Environment bindings
HOST_ENV_VAR = "HOST"
PORT_ENV_VAR = "PORT"

# Static settings
DEVELOPMENT_NETWORK = "development"
ANY_NETWORK_ID = "*"
DEFAULT_MOCHA_TIMEOUT_MS = 20000
# Disabled compiler pin, kept for reference only; never applied to `compilers`.
INACTIVE_SOLC_VERSION = "^0.4.24"

LOG_LEVEL_ENV_VAR = "CHAIN_CONFIG_LOG_LEVEL"
LOG_FORMAT_ENV_VAR = "CHAIN_CONFIG_LOG_FORMAT"
LOG_FORMATS = ("json", "plain")


def _load_log_level() -> str:
    raw_level = os.getenv(LOG_LEVEL_ENV_VAR, "INFO").strip().upper()
    if isinstance(logging.getLevelName(raw_level), int):
        return raw_level
    return "INFO"


def _load_log_format() -> str:
    raw_format = os.getenv(LOG_FORMAT_ENV_VAR, "json").strip().lower()
    if raw_format in LOG_FORMATS:
        return raw_format
    return "json"


LOG_LEVEL = _load_log_level()
LOG_FORMAT = _load_log_format()


def load_dotenv_file(path: Optional[Union[str, Path]] = None) -> bool:
    """
    Load variables from a ``.env`` file into ``os.environ``.

    Variables already present in the environment win over the file.

    Returns:
        True if a file was found and loaded, otherwise False.
    """
    if path is None:
        path = find_dotenv(usecwd=True)
        if not path:
            return False
    path = Path(path)
    if not path.is_file():
        return False
    loaded = load_dotenv(dotenv_path=path, override=False)
    logger.debug("loaded dotenv file path=%s", path)
    return loaded


def _read_only(mapping: Mapping[str, Any]) -> Mapping[str, Any]:
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True, slots=True)
class NetworkConfig:
    """A named deployment target."""

    name: str
    host: Optional[str] = None
    port: Optional[Union[str, int]] = None
    network_id: Union[str, int] = ANY_NETWORK_ID

    def to_dict(self) -> Dict[str, Any]:
        return {"host": self.host, "port": self.port, "network_id": self.network_id}


@dataclass(frozen=True, slots=True)
class MochaConfig:
    """Options handed to the external test runner."""

    timeout: int = DEFAULT_MOCHA_TIMEOUT_MS

    def to_dict(self) -> Dict[str, Any]:
        return {"timeout": self.timeout}


@dataclass(frozen=True, slots=True)
class ToolchainConfig:
    """Complete toolchain configuration, held immutably once loaded."""

    networks: Mapping[str, NetworkConfig] = field(default_factory=lambda: _read_only({}))
    mocha: MochaConfig = field(default_factory=MochaConfig)
    compilers: Mapping[str, Any] = field(default_factory=lambda: _read_only({}))

    def __post_init__(self) -> None:
        # Freeze caller-supplied mappings too.
        object.__setattr__(self, "networks", _read_only(self.networks))
        object.__setattr__(self, "compilers", _read_only(self.compilers))

    def to_dict(self) -> Dict[str, Any]:
        """Return the exported shape as plain, JSON-serializable dicts."""
        return {
            "networks": {name: network.to_dict() for name, network in self.networks.items()},
            "mocha": self.mocha.to_dict(),
            "compilers": dict(self.compilers),
        }


def load_config(env: Optional[Mapping[str, str]] = None, *, dotenv: bool = True) -> ToolchainConfig:
    """
    Build the toolchain configuration.

    Args:
        env: Mapping to read endpoint variables from. Defaults to ``os.environ``,
            in which case a ``.env`` file is loaded first when ``dotenv`` is set.
        dotenv: Whether to seed ``os.environ`` from a ``.env`` file.

    Returns:
        The loaded configuration. Missing variables come through as ``None``.
    """
    if env is None:
        if dotenv:
            load_dotenv_file()
        env = os.environ

    development = NetworkConfig(
        name=DEVELOPMENT_NETWORK,
        host=env.get(HOST_ENV_VAR),
        port=env.get(PORT_ENV_VAR),
        network_id=ANY_NETWORK_ID,
    )
    return ToolchainConfig(
        networks={development.name: development},
        mocha=MochaConfig(timeout=DEFAULT_MOCHA_TIMEOUT_MS),
        compilers={},
    )


default_config = load_config()
