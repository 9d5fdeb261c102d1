# src/confix/sources/merge.py
"""
Deep-merge de mapeamentos de configuração.

Este módulo implementa a política de deep-merge utilizada para combinar o
arquivo de defaults com o arquivo local de overrides antes de aplicar o
resultado a uma árvore de configuração via `update`.

Política de merge (por valor):
    - dict + dict → merge recursivo por chave
    - list no override → sobrescrita total (sem merge elemento a elemento)
    - None em qualquer lado → sobrescrita direta (declara ou limpa o valor)
    - int + float → sobrescrita direta (YAML/JSON não distinguem na prática)
    - demais escalares → sobrescrita apenas se o tipo for o mesmo
    - qualquer outra combinação → `ConfigTypeConflictError`, com o caminho
      pontuado da chave

Invariantes:
    - A mesma entrada sempre produz a mesma saída
    - Nenhum input é mutado nem compartilhado com o resultado
    - Chaves não sobrescritas são preservadas
"""

from copy import deepcopy
from typing import Any, Dict

from .errors import ConfigTypeConflictError


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _replaceable(base_value: Any, override_value: Any) -> bool:
    if base_value is None or override_value is None:
        return True
    if isinstance(override_value, list):
        return True
    if _is_number(base_value) and _is_number(override_value):
        return True
    return type(base_value) is type(override_value)


def _merge_value(path: str, base_value: Any, override_value: Any) -> Any:
    if isinstance(base_value, dict) and isinstance(override_value, dict):
        return _merge_dicts(path, base_value, override_value)

    if not _replaceable(base_value, override_value):
        raise ConfigTypeConflictError(
            f"Conflito de tipo na chave '{path}': "
            f"{type(base_value).__name__} vs {type(override_value).__name__}"
        )
    return deepcopy(override_value)


def _merge_dicts(prefix: str, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    result = {key: deepcopy(value) for key, value in base.items()}
    for key, override_value in override.items():
        path = f"{prefix}.{key}" if prefix else str(key)
        if key in result:
            result[key] = _merge_value(path, result[key], override_value)
        else:
            result[key] = deepcopy(override_value)
    return result


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Realiza um deep-merge determinístico entre dois dicionários de configuração.

    Args:
        base (Dict[str, Any]): Configuração base (ex.: defaults).
        override (Dict[str, Any]): Overrides explícitos da configuração.

    Returns:
        Dict[str, Any]: Nova configuração resultante do deep-merge.

    Raises:
        ConfigTypeConflictError: Se base e override não forem dicts, ou se
            uma chave tiver tipos incompatíveis nos dois lados.
    """
    if not isinstance(base, dict) or not isinstance(override, dict):
        raise ConfigTypeConflictError(
            f"Deep-merge requer dicts no nível raiz, recebido: "
            f"{type(base).__name__} vs {type(override).__name__}"
        )
    return _merge_dicts("", base, override)
