# -*- coding: utf-8 -*-
from typing import Any, Mapping, Optional

from translator.domain.models import resolve_translatable
from translator.utils.placeholders import substitute

Placeholders = Optional[Mapping[str, Any]]


class Translator:
    """
    Common contract of every translation backend.

    Subclasses provide register() and resolve(); the struct-aware and
    placeholder-aware variants are shared. Lookups never raise: a missing
    translation resolves to "".
    """

    def __init__(self, fallback_locale: str):
        self._fallback = fallback_locale

    @property
    def fallback_locale(self) -> str:
        return self._fallback

    def register(self, locale: str, key: str, message: str) -> None:
        """
        Register a translation message for locale. Messages may use placeholders:
        t.register("en", "welcome", "Hello {name}, welcome!")
        """
        raise NotImplementedError

    def resolve(self, locale: str, key: str) -> str:
        """
        Translation of key for locale, else the fallback locale translation, else "".
        """
        raise NotImplementedError

    def resolve_struct(self, subject: Any, locale: str, key: str) -> str:
        """
        Ask subject for its own translation first when it is Translatable;
        an empty answer (or a plain object) falls through to resolve().
        """
        tr = resolve_translatable(subject)
        if tr is not None:
            message = tr.get_translation(locale, key)
            if message:
                return message
        return self.resolve(locale, key)

    def translate(self, locale: str, key: str, placeholders: Placeholders = None) -> str:
        """
        t.translate("en", "welcome", {"name": "John"})
        """
        return substitute(self.resolve(locale, key), placeholders)

    def translate_struct(self, subject: Any, locale: str, key: str, placeholders: Placeholders = None) -> str:
        return substitute(self.resolve_struct(subject, locale, key), placeholders)
