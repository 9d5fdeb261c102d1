# src/confix/core/__init__.py
"""
Core do confix: motor da árvore de configuração.

Componentes:
    - keys          → validação de nomes declarados
    - schema        → `Schema` e DSL de declaração (setting/config/template)
    - templates     → registro de templates reutilizáveis (root)
    - store         → `ValueStore`, armazenamento plano por caminho qualificado
    - interpolation → interpolação de strings contra `assigns`
    - node          → `ConfigNode`/`Config`, motor de get/set/update/to_hash
    - declarative   → `Configuration`, nó root declarado por classe
    - errors        → hierarquia de exceções

Princípios fundamentais:
    - Todos os valores vivem no store do root, indexados por caminho
    - Nós filhos são proxies materializados sob demanda
    - Schemas são imutáveis depois da primeira instanciação

Limites explícitos:
    - Não realiza I/O
    - Não registra logs
    - Não é thread-safe
"""

from .declarative import Configuration
from .errors import (
    CannotModifyConfiguration,
    ConfigError,
    DuplicateKeyError,
    InterpolationError,
    InvalidKeyError,
    ReservedKeyError,
    SchemaDeclarationError,
    SchemaSealedError,
    TemplateBlockRequiredError,
    TemplateNotFoundError,
    UndefinedSetting,
)
from .interpolation import interpolate
from .keys import is_valid_key, validate_key
from .node import Config, ConfigNode
from .schema import Schema
from .store import ValueStore
from .templates import TemplateRegistry

__all__ = [
    "CannotModifyConfiguration",
    "Config",
    "ConfigError",
    "ConfigNode",
    "Configuration",
    "DuplicateKeyError",
    "InterpolationError",
    "InvalidKeyError",
    "ReservedKeyError",
    "Schema",
    "SchemaDeclarationError",
    "SchemaSealedError",
    "TemplateBlockRequiredError",
    "TemplateNotFoundError",
    "TemplateRegistry",
    "UndefinedSetting",
    "ValueStore",
    "interpolate",
    "is_valid_key",
    "validate_key",
]
