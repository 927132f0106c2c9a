"""Bit streams, header, game events, player info, LZSS and naming helpers for TF2 demo files."""

__version__ = "0.1.0"