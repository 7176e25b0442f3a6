# -*- coding: utf-8 -*-
import json
import logging
import os
import threading
from typing import Any, Dict, List, Tuple

from translator.core.errors import LoadError
from translator.core.translator import Translator
from translator.utils.files import find_files, get_subdirectories
from translator.utils.paths import dot_get, stringify

log = logging.getLogger("json_translator")

# (file stem, file path, parsed content)
SourceFile = Tuple[str, str, Any]


def _first_key_wins(pairs: List[Tuple[str, Any]]) -> Dict[str, Any]:
    # Duplicate keys inside one object keep the first value
    result: Dict[str, Any] = {}
    for k, v in pairs:
        result.setdefault(k, v)
    return result


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


class JsonTranslator(Translator):
    """
    File-backed translator. Aggregates a directory of JSON files into one document:

      root/*.json          default (locale-less) keys
      root/<locale>/*.json keys of <locale>

    A directory holding a single JSON file contributes that file's content directly
    (root keys are hoisted to the top of the document, a locale file becomes the
    locale object). With several files each one is nested under its file stem:
    "<locale>.<stem>.*", or "<stem>.*" for the root. Directories below the locale
    level are ignored.

    Lookups use dotted paths ("en.page.title") with one retry against the fallback
    locale. register() is accepted but does nothing: file translations are read-only.
    """

    def __init__(self, fallback_locale: str, root_dir: str):
        super().__init__(fallback_locale)
        self.root_dir = root_dir
        # (document, locale directories) published together by load()
        self._state: Tuple[Dict[str, Any], List[str]] = ({}, [])
        # Serializes concurrent load() calls
        self._load_lock = threading.Lock()
        self.load()

    def load(self) -> None:
        """
        (Re)build the aggregated document from root_dir.
        The new document is published only after every file was read and parsed,
        so a failed reload keeps the previous translations in place.
        """
        with self._load_lock:
            try:
                locales = get_subdirectories(self.root_dir)
            except OSError as e:
                log.error("Failed to list translations directory %s: %s", self.root_dir, e)
                raise LoadError(f"Cannot list translations directory {self.root_dir}: {e}", self.root_dir) from e

            document: Dict[str, Any] = {}
            files_total = 0
            # "" stands for the root directory itself (default keys)
            for locale in locales + [""]:
                files = self._resolve_files(os.path.join(self.root_dir, locale))
                files_total += len(files)
                self._merge(document, locale, files)

            self._state = (document, locales)
        log.info("Translations loaded from %s: %d locales, %d files", self.root_dir, len(locales), files_total)

    def _resolve_files(self, directory: str) -> List[SourceFile]:
        directory = os.path.normpath(directory)
        try:
            paths = find_files(directory, ".json")
        except OSError as e:
            log.error("Failed to scan %s: %s", directory, e)
            raise LoadError(f"Cannot scan {directory}: {e}", directory) from e

        result: List[SourceFile] = []
        for path in paths:
            if os.path.dirname(path) != directory:
                continue
            stem = os.path.splitext(os.path.basename(path))[0]
            try:
                with open(path, "r", encoding="utf-8") as f:
                    content = json.load(f, object_pairs_hook=_first_key_wins, parse_constant=_reject_constant)
            except OSError as e:
                log.error("Failed to read %s: %s", path, e)
                raise LoadError(f"Cannot read {path}: {e}", path) from e
            except ValueError as e:
                log.error("Invalid json in %s: %s", path, e)
                raise LoadError(f"Invalid json for {path}", path) from e
            result.append((stem, path, content))
        return result

    def _merge(self, document: Dict[str, Any], locale: str, files: List[SourceFile]) -> None:
        # First occurrence of a key wins, later ones are dropped
        if len(files) == 1:
            _, path, content = files[0]
            if locale == "":
                if not isinstance(content, dict):
                    log.error("Root translation file %s is not a JSON object", path)
                    raise LoadError(f"Root translation file must hold a JSON object: {path}", path)
                for k, v in content.items():
                    document.setdefault(k, v)
            else:
                document.setdefault(locale, content)
        elif locale == "":
            for stem, _, content in files:
                document.setdefault(stem, content)
        else:
            document.setdefault(locale, {stem: content for stem, _, content in files})

    def locales(self) -> List[str]:
        return list(self._state[1])

    def document(self) -> str:
        """
        The aggregated document as JSON text.
        """
        return json.dumps(self._state[0], ensure_ascii=False)

    def register(self, locale: str, key: str, message: str) -> None:
        log.debug("Ignoring register(%s, %s): json translations are read-only", locale, key)

    @staticmethod
    def _path(locale: str, key: str) -> str:
        return f"{locale}.{key}" if locale else key

    def resolve(self, locale: str, key: str) -> str:
        data = self._state[0]
        found, value = dot_get(data, self._path(locale, key))
        if not found:
            found, value = dot_get(data, self._path(self._fallback, key))
        return stringify(value) if found else ""
