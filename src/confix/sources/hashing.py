# src/confix/sources/hashing.py
"""
Hashing canônico de configuração.

Este módulo gera um hash determinístico do estado efetivo de uma árvore de
configuração (ou de um mapeamento já resolvido), útil para identificar a
configuração carregada em logs e auditorias.

Princípios fundamentais:
    - Hashing determinístico e reprodutível
    - Independente da ordem original das chaves
    - Baseado em serialização JSON canônica
    - Algoritmo criptográfico estável (SHA-256)

Decisões arquiteturais:
    - Para nós de configuração, o hash é calculado sobre `to_hash()`:
      defaults e valores interpolados participam, exatamente como seriam
      lidos pela aplicação
    - Valores não serializáveis em JSON são representados por `str()`

Invariantes:
    - Configurações estruturalmente equivalentes produzem o mesmo hash
    - O valor gerado é sempre uma string hexadecimal de 64 caracteres

Limites explícitos:
    - Não persiste o hash
    - Não carrega nem resolve configuração
"""


import json
import hashlib
from typing import Any, Dict, Mapping, Union

from confix.core.node import ConfigNode


def compute_config_hash(config: Union[ConfigNode, Mapping[str, Any]]) -> str:
    """
    Gera um hash SHA-256 da configuração efetiva.

    Política de hashing:
        - Serialização JSON canônica (chaves ordenadas, separadores compactos)
        - Codificação UTF-8

    Args:
        config: Nó de configuração (root ou filho) ou mapeamento resolvido.

    Returns:
        str: Hash SHA-256 hexadecimal da configuração.

    Raises:
        TypeError: Se o objeto fornecido não for um nó nem um mapeamento.
    """

    if isinstance(config, ConfigNode):
        data: Dict[str, Any] = config.to_hash()
    elif isinstance(config, Mapping):
        data = dict(config)
    else:
        raise TypeError(
            f"Config para hashing deve ser ConfigNode ou dict, recebido: {type(config).__name__}"
        )

    canonical_json = json.dumps(
        data,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        default=str,
    )

    return hashlib.sha256(canonical_json.encode("utf-8")).hexdigest()
