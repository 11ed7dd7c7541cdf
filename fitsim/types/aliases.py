"""
Type aliases for FitSim.

This module defines type aliases used throughout the simulator
for better type safety and code clarity.
"""

from typing import NewType

# Core type aliases
ByteSize = NewType('ByteSize', int)
BlockIndex = NewType('BlockIndex', int)
