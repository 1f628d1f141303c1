"""Typed models for decoding and encoding Schwab market data API responses."""

__version__ = "0.0.3"