from __future__ import annotations
from typing import Optional


class FitSimError(Exception):
    def __init__(self, message: str, **kwargs):
        super().__init__(message)
        self.message = message
        self.context = kwargs


class ConfigurationError(FitSimError, ValueError):
    pass


class InvalidBlockSize(FitSimError, ValueError):
    def __init__(self, message: str, size: Optional[int] = None, index: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.size = size
        self.index = index


class AllocationError(FitSimError):
    def __init__(self, message: str, requested_size: Optional[int] = None,
                 block_size: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.requested_size = requested_size
        self.block_size = block_size


class SizeFileError(FitSimError):
    def __init__(self, message: str, path: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.path = path
