# -*- coding: utf-8 -*-
from dataclasses import dataclass
from typing import Any, Optional, Protocol, runtime_checkable


@dataclass(frozen=True)
class Record:
    locale: str
    key: str
    message: str  # may contain "{name}" placeholders


@runtime_checkable
class Translatable(Protocol):
    """
    Implemented by domain objects that carry their own translations.
    get_translation returns "" when the object has no override for (locale, key).
    """

    def get_translation(self, locale: str, key: str) -> str:
        ...


def resolve_translatable(obj: Any) -> Optional[Translatable]:
    if isinstance(obj, Translatable):
        return obj
    return None
