"""Bionic Brokerage — assistente de corretagem apoiado por LLM."""

__all__ = ["__version__"]

__version__ = "0.1.0"
