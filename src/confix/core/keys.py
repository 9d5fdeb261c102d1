# src/confix/core/keys.py
"""
Validação de nomes de settings e configs.

Nomes declarados precisam ser tokens no formato de identificador para que
possam ser usados tanto em caminhos pontuados (``a.b.c``) quanto em acesso
por atributo.

Invariantes:
    - Apenas letras ASCII, dígitos e `_` são aceitos
    - Nome vazio é inválido
    - A validação é aplicada somente em tempo de declaração; chaves de
      runtime são validadas contra o schema
"""

from __future__ import annotations

import re

from .errors import InvalidKeyError


_KEY_PATTERN = re.compile(r"[A-Za-z0-9_]+")


def is_valid_key(name: object) -> bool:
    return isinstance(name, str) and _KEY_PATTERN.fullmatch(name) is not None


def validate_key(name: object) -> str:
    """Retorna `name` se válido; levanta `InvalidKeyError` caso contrário."""
    if not is_valid_key(name):
        raise InvalidKeyError(name)
    return name  # type: ignore[return-value]
