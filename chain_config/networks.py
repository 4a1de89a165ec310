"""
Consumer-side helpers for looking up and checking configured networks.

Nothing here mutates the configuration; problems are reported to the caller
rather than fixed up.
"""

from __future__ import annotations

from typing import Any, List, Optional

from chain_config.config import ANY_NETWORK_ID, NetworkConfig, ToolchainConfig


class ConfigError(Exception):
    """Base exception for configuration lookup errors."""

    def __init__(self, message: str, *, code: Optional[str] = None) -> None:
        super().__init__(message)
        self.code = code


class UnknownNetworkError(ConfigError):
    """Raised when a network name is not configured."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown network: {name!r}", code="unknown_network")
        self.name = name


def network_names(config: ToolchainConfig) -> List[str]:
    return list(config.networks)


def get_network(config: ToolchainConfig, name: str) -> NetworkConfig:
    """Return the named network or raise UnknownNetworkError."""
    try:
        return config.networks[name]
    except KeyError:
        raise UnknownNetworkError(name) from None


def matches_network_id(network: NetworkConfig, chain_id: Any) -> bool:
    """
    Check a chain id reported by a node against the network's matching rule.

    The wildcard ``"*"`` accepts any chain id; otherwise ids are compared as
    strings so ``1337`` and ``"1337"`` are equivalent.
    """
    if network.network_id == ANY_NETWORK_ID:
        return True
    if chain_id is None:
        return False
    return str(chain_id).strip() == str(network.network_id).strip()


def find_problems(config: ToolchainConfig, name: Optional[str] = None) -> List[str]:
    """
    Report unset or empty endpoint values.

    Args:
        config: Loaded configuration.
        name: Restrict the report to one network; all networks when omitted.

    Returns:
        Human-readable problem descriptions, empty when everything is set.
    """
    networks = [get_network(config, name)] if name is not None else list(config.networks.values())
    problems: List[str] = []
    for network in networks:
        for attr in ("host", "port"):
            value = getattr(network, attr)
            if value is None:
                problems.append(f"networks.{network.name}.{attr} is not set")
            elif not str(value).strip():
                problems.append(f"networks.{network.name}.{attr} is empty")
    return problems
