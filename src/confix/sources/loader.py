# src/confix/sources/loader.py
"""
Loader de configuração a partir de arquivos YAML/JSON.

Este módulo é a camada fina de I/O sobre o motor de configuração: lê
arquivos, resolve defaults + overrides locais via deep-merge e aplica o
mapeamento resultante a uma árvore de configuração com `update`.

A configuração é resolvida a partir de:
    - um arquivo de defaults (obrigatório)
    - um arquivo local de overrides (opcional)

Princípios fundamentais:
    - O formato é inferido pela extensão do arquivo
    - Erros estruturais são tratados como falhas fatais
    - O motor de configuração valida as chaves; o loader valida apenas a
      estrutura do arquivo

Invariantes:
    - O arquivo de defaults é obrigatório
    - Overrides nunca mutam os defaults
    - Uma falha de validação no `update` não deixa valores parciais
      aplicados

Limites explícitos:
    - Não valida tipos de valores
    - Não persiste configuração
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Type, Union

import yaml  # PyYAML

from confix.core.declarative import Configuration

from .errors import (
    ConfigParseError,
    InvalidConfigRootTypeError,
    SourceNotFoundError,
    UnsupportedConfigFormatError,
)
from .hashing import compute_config_hash
from .merge import deep_merge

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def load_mapping(path: PathLike) -> Dict[str, Any]:
    """
    Carrega um arquivo de configuração e valida sua estrutura básica.

    Formatos suportados:
        - YAML (.yaml, .yml)
        - JSON (.json)

    Arquivos vazios são interpretados como dicionários vazios.

    Args:
        path: Caminho para o arquivo de configuração.

    Returns:
        Dict[str, Any]: Conteúdo do arquivo carregado como dicionário.

    Raises:
        SourceNotFoundError: Se o arquivo não existir.
        UnsupportedConfigFormatError: Se o formato do arquivo não for suportado.
        ConfigParseError: Se o conteúdo não for UTF-8 válido ou não puder ser
            parseado.
        InvalidConfigRootTypeError: Se o conteúdo raiz não for um dicionário.
    """
    path = Path(path)
    if not path.exists():
        raise SourceNotFoundError(f"Arquivo de configuração não encontrado: {path}")

    suffix = path.suffix.lower()
    if suffix not in {".yaml", ".yml", ".json"}:
        raise UnsupportedConfigFormatError(f"Formato não suportado: {path.suffix}")

    try:
        raw = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ConfigParseError(f"Arquivo não é UTF-8 válido: {path}: {e}") from e

    try:
        if suffix == ".json":
            data = json.loads(raw) if raw.strip() else None
        else:
            data = yaml.safe_load(raw)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigParseError(f"Falha ao parsear {path}: {e}") from e

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"Config root deve ser dict, recebido: {type(data).__name__}"
        )

    logger.debug("Arquivo de configuração lido: %s (%d chaves)", path, len(data))
    return data


def resolve_mapping(*, defaults_path: PathLike, local_path: Optional[PathLike] = None) -> Dict[str, Any]:
    """Resolve defaults + override local (quando o arquivo local existir)."""
    effective = load_mapping(defaults_path)

    if local_path is not None:
        local_file = Path(local_path)
        if local_file.exists():
            effective = deep_merge(effective, load_mapping(local_file))
        else:
            logger.debug("Arquivo local ausente, usando apenas defaults: %s", local_file)

    return effective


def load_config(
    target: Union[Configuration, Type[Configuration]],
    *,
    defaults_path: PathLike,
    local_path: Optional[PathLike] = None,
) -> Configuration:
    """
    Carrega arquivos de configuração e os aplica a uma árvore de configuração.

    Política de resolução:
        - O arquivo de defaults é obrigatório
        - O arquivo local é opcional; quando presente, tem prioridade
        - O mapeamento resolvido é aplicado via `update`

    Args:
        target: Instância de `Configuration` ou subclasse a instanciar.
        defaults_path: Caminho para o arquivo de configuração base.
        local_path: Caminho opcional para overrides locais.

    Returns:
        Configuration: A configuração atualizada.

    Raises:
        SourceNotFoundError: Se o arquivo de defaults não existir.
        UnsupportedConfigFormatError: Se o formato do arquivo não for suportado.
        ConfigParseError: Se algum arquivo não puder ser parseado.
        InvalidConfigRootTypeError: Se o conteúdo não for um dicionário.
        ConfigTypeConflictError: Se ocorrer conflito estrutural durante o merge.
        UndefinedSetting: Se o arquivo referenciar chaves não declaradas.
    """
    config = target() if isinstance(target, type) else target

    effective = resolve_mapping(defaults_path=defaults_path, local_path=local_path)
    config.update(effective)

    # hash do mapeamento resolvido; assigns podem ser definidos depois do load
    logger.info(
        "Configuração %s carregada de %s (hash=%s)",
        type(config).__name__,
        defaults_path,
        compute_config_hash(effective),
    )
    return config
