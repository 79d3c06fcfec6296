"""Convert RKE cluster configuration sections between dataclasses and flat schema data."""

__version__ = "0.1.0"