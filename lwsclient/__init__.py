"""Asynchronous client and response models for a Monero light wallet server."""

__version__ = "0.1.0"
__all__ = ["client", "models", "util"]