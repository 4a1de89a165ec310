"""
Development toolchain configuration.

Exposes the named deployment networks, test-runner options, and compiler
settings as an immutable record. See DESIGN.md for details.
"""

from chain_config.config import (
    MochaConfig,
    NetworkConfig,
    ToolchainConfig,
    default_config,
    load_config,
)
from chain_config.networks import (
    ConfigError,
    UnknownNetworkError,
    find_problems,
    get_network,
    matches_network_id,
    network_names,
)

__all__ = [
    "ConfigError",
    "MochaConfig",
    "NetworkConfig",
    "ToolchainConfig",
    "UnknownNetworkError",
    "default_config",
    "find_problems",
    "get_network",
    "load_config",
    "matches_network_id",
    "network_names",
]
