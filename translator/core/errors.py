# -*- coding: utf-8 -*-
from typing import Optional


class LoadError(Exception):
    """
    Raised when a translation directory cannot be aggregated:
    unreadable file, invalid JSON or a root that cannot be listed.
    """

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.path = path

    def __str__(self) -> str:
        return self.message
