# src/confix/core/interpolation.py
"""
Interpolação de strings contra o dicionário de assigns.

Formatos de placeholder suportados:
    - ``%{name}``      → ``str(assigns["name"])`` (None vira string vazia)
    - ``%<name>fmt``   → conversão printf do valor (ex.: ``%<port>05d``)
    - ``%%``           → ``%`` literal

Qualquer outra sequência iniciada por ``%`` é mantida como está.

A interpolação é aplicada somente na leitura; o valor armazenado nunca é
alterado, de modo que mudanças posteriores em `assigns` afetam as
próximas leituras.
"""

from __future__ import annotations

import re
from typing import Any, Mapping

from .errors import InterpolationError


_PLACEHOLDER = re.compile(
    r"%(?:"
    r"(?P<escape>%)"
    r"|\{(?P<name>\w+)\}"
    r"|<(?P<fname>\w+)>(?P<spec>[-+ 0#]*\d*(?:\.\d+)?[diouxXeEfFgGcrsa])"
    r")"
)


def interpolate(text: str, assigns: Mapping[Any, Any]) -> str:
    def _lookup(name: str) -> Any:
        if name in assigns:
            return assigns[name]
        raise InterpolationError(name, text)

    def _replace(match: "re.Match[str]") -> str:
        if match.group("escape"):
            return "%"
        if match.group("name"):
            value = _lookup(match.group("name"))
            return "" if value is None else str(value)
        return ("%" + match.group("spec")) % (_lookup(match.group("fname")),)

    if "%" not in text:
        return text
    return _PLACEHOLDER.sub(_replace, text)
