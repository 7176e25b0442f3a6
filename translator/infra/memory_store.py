# -*- coding: utf-8 -*-
import logging
import threading
from typing import List, Tuple

from translator.core.translator import Translator
from translator.domain.models import Record

log = logging.getLogger("memory_translator")


class MemoryTranslator(Translator):
    """
    Append-only in-memory translation store.

    Records are scanned in insertion order, so the first registration of a
    (locale, key) pair wins over later duplicates. A miss retries once with
    the fallback locale.
    """

    def __init__(self, fallback_locale: str):
        super().__init__(fallback_locale)
        self._records: List[Record] = []
        # Guards appends and snapshot reads of _records
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def records(self) -> Tuple[Record, ...]:
        with self._lock:
            return tuple(self._records)

    def register(self, locale: str, key: str, message: str) -> None:
        with self._lock:
            self._records.append(Record(locale=locale, key=key, message=message))
        log.debug("Registered %s.%s", locale, key)

    def _find(self, locale: str, key: str) -> Tuple[bool, str]:
        for r in self.records():
            if r.locale == locale and r.key == key:
                return True, r.message
        return False, ""

    def resolve(self, locale: str, key: str) -> str:
        found, message = self._find(locale, key)
        if found:
            return message
        if locale != self._fallback:
            _, message = self._find(self._fallback, key)
            return message
        return ""
