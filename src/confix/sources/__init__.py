# src/confix/sources/__init__.py
"""
Camada de fontes de configuração do confix.

Este pacote lê arquivos de configuração (YAML/JSON), resolve defaults e
overrides locais via deep-merge determinístico e aplica o resultado a uma
árvore de configuração através de `update`, o único ponto de entrada em
lote do core.

Responsabilidades do pacote:
    - Carregamento de arquivos de configuração (defaults + overrides locais)
    - Resolução de configuração final via deep-merge determinístico
    - Validação estrutural básica do arquivo (tipo raiz)
    - Geração de hash canônico para rastreabilidade

Limites explícitos:
    - Não declara schemas
    - Não valida chaves (responsabilidade do core)
    - Não persiste configuração
"""

from .errors import (
    ConfigParseError,
    ConfigSourceError,
    ConfigTypeConflictError,
    InvalidConfigRootTypeError,
    SourceNotFoundError,
    UnsupportedConfigFormatError,
)
from .hashing import compute_config_hash
from .loader import load_config, load_mapping, resolve_mapping
from .merge import deep_merge

__all__ = [
    "ConfigParseError",
    "ConfigSourceError",
    "ConfigTypeConflictError",
    "InvalidConfigRootTypeError",
    "SourceNotFoundError",
    "UnsupportedConfigFormatError",
    "compute_config_hash",
    "deep_merge",
    "load_config",
    "load_mapping",
    "resolve_mapping",
]
