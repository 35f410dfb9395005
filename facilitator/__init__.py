"""Facilitator: configuration resolution for a chain-bridging facilitator."""

__version__ = "0.1.0"
