"""Agent and transaction management service."""

__version__ = "0.3.0"

__all__ = ["__version__"]
