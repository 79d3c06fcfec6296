"""Authorization settings of an RKE cluster and their schema form."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class AuthzConfig:
    """Authorization mode and its options."""

    mode: str = ""
    options: dict[str, str] = field(default_factory=dict)


def flatten_authorization(config: AuthzConfig) -> list[dict[str, Any]]:
    """Turn an authorization config into its one-element schema list."""
    obj: dict[str, Any] = {}
    if config.mode:
        obj["mode"] = config.mode
    if config.options:
        obj["options"] = dict(config.options)
    return [obj]


def expand_authorization(data: list[Any] | None) -> AuthzConfig:
    """Build an authorization config from its schema list."""
    config = AuthzConfig()
    if not data or data[0] is None:
        return config
    item = data[0]

    mode = item.get("mode")
    if isinstance(mode, str) and mode:
        config.mode = mode

    options = item.get("options")
    if isinstance(options, dict) and options:
        config.options = dict(options)

    return config