# src/confix/core/declarative.py
"""
Configuração declarativa: o nó root.

Este módulo define `Configuration`, a classe base de objetos host que
declaram uma árvore de configuração em tempo de definição de classe:

    class AppConfig(Configuration):

        @classmethod
        def define(cls, schema):
            schema.setting("database_url")

            def external_api(api):
                api.setting("client_id")
                api.setting("client_secret")

            schema.config("external_api", block=external_api)

    cfg = AppConfig()
    cfg.database_url = "postgres://localhost/app"
    cfg.external_api.client_id = "MyApp"
    cfg["external_api.client_secret"]

Cada subclasse recebe o seu próprio `Schema` root, montado por
`__init_subclass__` a partir de todos os `define` encontrados no MRO
(da base para a subclasse). O schema é selado quando a primeira instância
é criada.

Decisões arquiteturais:
    - O root é o único dono do `ValueStore` da árvore
    - O store é criado sob demanda, no primeiro acesso
    - Uma instância também pode ser criada a partir de um schema explícito:
      ``Configuration(schema)``

Invariantes:
    - Subclasses nunca compartilham schema com a classe base
    - Instâncias de uma mesma classe compartilham schema, nunca valores

Limites explícitos:
    - Não lê arquivos (ver `confix.sources`)
    - Não valida tipos de valores
"""

from __future__ import annotations

from typing import Any, ClassVar, Dict, Mapping, Optional

from .errors import ReservedKeyError
from .node import ConfigNode
from .schema import Schema
from .store import ValueStore


class Configuration(ConfigNode):
    """
    Nó root de uma árvore de configuração.

    Além das operações comuns de `ConfigNode`, o root expõe o store:
    `values()`, `fetch()`, `assigns` e `configs`.

    Atributos de instância:
        Toda atribuição por atributo é tratada como escrita de setting;
        ``self.conexao = x`` em uma subclasse levanta `UndefinedSetting`
        se `conexao` não for declarado. Estado próprio do host deve ser
        declarado em `__slots__` da subclasse (ou como property com
        setter); descritores da classe sempre têm precedência.

    Invariantes:
        - Nenhum setting ou config de primeiro nível pode ter o nome de um
          membro da subclasse (método, property ou slot)
    """

    __slots__ = ("_store",)

    config_schema: ClassVar[Optional[Schema]] = None

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        schema = Schema()
        for klass in reversed(cls.__mro__):
            define = klass.__dict__.get("define")
            if define is not None:
                # classmethod, staticmethod ou função simples recebendo o schema
                define.__get__(None, cls)(schema)

        declared = set(schema.settings) | set(schema.children)
        clashes = sorted(declared & set(dir(cls)))
        if clashes:
            raise ReservedKeyError(clashes[0])
        cls.config_schema = schema

    def __init__(self, schema: Optional[Schema] = None) -> None:
        schema = schema if schema is not None else type(self).config_schema
        if schema is None:
            raise TypeError(
                "Configuration requires a schema; subclass it with a define() hook "
                "or pass a Schema instance"
            )
        if not schema.is_root:
            raise TypeError(f"schema {schema.path_from_root!r} is not a root schema")

        schema.seal()
        super().__init__(schema, parent=None)
        object.__setattr__(self, "_store", None)

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[Any, Any]], schema: Optional[Schema] = None) -> "Configuration":
        config = cls(schema)
        config.update(data)
        return config

    # -----------------------------
    # Store
    # -----------------------------
    @property
    def _value_store(self) -> ValueStore:
        if self._store is None:
            object.__setattr__(self, "_store", ValueStore())
        return self._store

    def fetch(self, key: str, default: Any = None) -> Any:
        """Lê um caminho totalmente qualificado diretamente do store."""
        return self._value_store.fetch(key, default)

    def values(self) -> Dict[str, Any]:
        """Valores explicitamente atribuídos, por caminho qualificado."""
        return self._value_store.snapshot()

    @property
    def configs(self) -> Dict[str, ConfigNode]:
        return self._value_store.configs

    def __repr__(self) -> str:
        return f"<{type(self).__name__}>"
