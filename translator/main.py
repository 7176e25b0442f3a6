#!/usr/bin/env python3
# -*- coding: utf-8 -*-
import logging
from typing import Annotated, Dict, List, Optional

import typer

from translator.core.config import TranslatorConfig, load_config
from translator.core.errors import LoadError
from translator.core.logging import setup_logging
from translator.core.translator import Translator
from translator.infra.json_store import JsonTranslator
from translator.infra.memory_store import MemoryTranslator

app = typer.Typer(
    name="translator",
    help="Translate a message key with the configured translator",
    add_completion=False,
)


def new_memory_translator(fallback_locale: str) -> MemoryTranslator:
    """
    Create a translator backed by registered in-memory records.
    """
    return MemoryTranslator(fallback_locale)


def new_json_translator(fallback_locale: str, root_dir: str) -> JsonTranslator:
    """
    Create a translator backed by a directory of JSON files.
    Raises LoadError when the directory cannot be aggregated.
    """
    return JsonTranslator(fallback_locale, root_dir)


def new_translator_from_config(config: TranslatorConfig) -> Translator:
    if config.driver == "memory":
        return new_memory_translator(config.fallback_locale)
    return new_json_translator(config.fallback_locale, config.locales_dir)


def parse_placeholders(tokens: List[str]) -> Dict[str, str]:
    """
    Parse "name=value" tokens. The value may contain further "=" signs.
    """
    result: Dict[str, str] = {}
    for tok in tokens:
        name, sep, value = tok.partition("=")
        if not sep or not name:
            raise ValueError(f"placeholder must look like name=value: {tok!r}")
        result[name] = value
    return result


@app.command()
def translate_cmd(
    key: Annotated[str, typer.Argument(help="Translation key, dots address nested keys")],
    placeholders: Annotated[
        Optional[List[str]],
        typer.Argument(help="Placeholder values as name=value"),
    ] = None,
    locale: Annotated[
        Optional[str],
        typer.Option("--locale", "-l", help="Locale to translate to (default: fallback locale)"),
    ] = None,
) -> None:
    """Print the translation of KEY."""
    setup_logging()
    log = logging.getLogger("main")

    try:
        values = parse_placeholders(placeholders or [])
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(2)

    config = load_config()
    try:
        translator = new_translator_from_config(config)
    except LoadError as e:
        log.error("Failed to load translations: %s", e)
        raise typer.Exit(1)

    target = locale if locale is not None else config.fallback_locale
    typer.echo(translator.translate(target, key, values))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
