"""LZHUF compression, binary-to-C header conversion and instrumented sorting."""

__version__ = "1.0.0"
__all__ = ["lzhuf", "bin2c", "sorting", "sortdemo"]