# -*- coding: utf-8 -*-
from typing import Any, Mapping, Optional


def substitute(message: str, placeholders: Optional[Mapping[str, Any]] = None) -> str:
    """
    Replace every literal "{name}" in message with placeholders[name].
    Placeholders missing from the message are ignored, unknown "{...}" tokens stay as is.
    """
    if not message or not placeholders:
        return message
    for name, value in placeholders.items():
        message = message.replace("{" + name + "}", str(value))
    return message
