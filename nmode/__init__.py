"""Configuration model, network edges, wire format and file-system helpers for neuro-modular evolution."""

__version__ = "0.1.0"
__all__ = ["parsing", "evaluation", "settings", "mutation", "edge", "codec", "filesystem"]