# src/confix/__init__.py
"""
confix: configuração declarativa em árvore.

Este pacote raiz define o namespace público do confix: um objeto host
declara, em tempo de definição de classe, uma árvore de settings e
configs aninhados; instâncias expõem esses settings como valores com
default e interpolação, acessíveis por atributo, por índice ou por
caminho pontuado a partir de qualquer nó.

Arquitetura em alto nível:
    - core    → schema, store, nós de configuração e erros
    - sources → leitura de YAML/JSON, deep-merge e hashing (camada de I/O)

Limites explícitos:
    - Não valida tipos de valores
    - Não persiste configuração de volta em arquivos
    - Não é thread-safe (modelo de dono único)
"""

from .core import (
    CannotModifyConfiguration,
    Config,
    ConfigError,
    ConfigNode,
    Configuration,
    Schema,
    UndefinedSetting,
)

__version__ = "0.1.0"

__all__ = [
    "CannotModifyConfiguration",
    "Config",
    "ConfigError",
    "ConfigNode",
    "Configuration",
    "Schema",
    "UndefinedSetting",
    "__version__",
]
