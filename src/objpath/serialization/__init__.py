from .codec import decode, detect_format, encode

__all__ = ["decode", "detect_format", "encode"]
