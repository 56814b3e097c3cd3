"""Owner-controlled mintable token contract model and its binary schema codec."""

__version__ = "0.1.0"
__all__ = ["contract", "schemas", "token", "utils"]