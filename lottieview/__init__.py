"""Lottie gradient and bezier decoding, viewer gesture and frame-time helpers, and sample downloads."""

__version__ = "0.1.0"

__all__ = ["catalog", "download", "geometry", "gradient", "stats", "touch"]