"""
Codecs for FitSim.

This module reads and writes the one-size-per-line files that describe the
initial free blocks and the allocation requests.
"""

from .sizes import decode_size, decode_sizes, encode_sizes, load_sizes, save_sizes

__all__ = [
    "decode_size",
    "decode_sizes",
    "encode_sizes",
    "load_sizes",
    "save_sizes",
]
