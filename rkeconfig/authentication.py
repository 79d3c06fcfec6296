"""Authentication settings of an RKE cluster and their schema form."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class AuthnConfig:
    """Authentication strategy and extra subject alternative names."""

    strategy: str = ""
    sans: list[str] = field(default_factory=list)


def flatten_authentication(config: AuthnConfig) -> list[dict[str, Any]]:
    """Turn an authentication config into its one-element schema list."""
    obj: dict[str, Any] = {}
    if config.sans:
        obj["sans"] = list(config.sans)
    if config.strategy:
        obj["strategy"] = config.strategy
    return [obj]


def expand_authentication(data: list[Any] | None) -> AuthnConfig:
    """Build an authentication config from its schema list."""
    config = AuthnConfig()
    if not data or data[0] is None:
        return config
    item = data[0]

    sans = item.get("sans")
    if isinstance(sans, list) and sans:
        config.sans = list(sans)

    strategy = item.get("strategy")
    if isinstance(strategy, str) and strategy:
        config.strategy = strategy

    return config