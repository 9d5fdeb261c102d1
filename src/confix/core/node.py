# src/confix/core/node.py
"""
Nós de configuração: motor de leitura e escrita.

Este módulo define o `ConfigNode`, a face pública de qualquer nível de
uma árvore de configuração (root ou filho), e o `Config`, o nó filho
materializado sob demanda.

Um nó resolve as operações `get`, `set`, `update` e `to_hash` contra o seu
próprio `Schema` e delega todo o armazenamento ao `ValueStore` do root,
usando o caminho da chave expandido a partir do root.

Formas de acesso equivalentes:
    - método: ``node.get("three")`` / ``node.set("three", v)``
    - índice: ``node["three"]`` / ``node["three"] = v``
    - atributo: ``node.three`` / ``node.three = v``
    - caminho pontuado a partir de qualquer nó: ``root["two.four.five"]``

Princípios fundamentais:
    - Nós filhos nunca armazenam valores
    - Um único dispatcher genérico (`get`/`set`) atende todas as formas
    - Acesso a chave não declarada sempre falha com `UndefinedSetting`

Invariantes:
    - O mesmo config filho, acessado por qualquer forma ou caminho, é
      sempre a mesma instância (cache no root)
    - Escritas em lote (`update`) são validadas por completo antes de
      qualquer mutação do store
    - Interpolação ocorre apenas na leitura

Limites explícitos:
    - Não valida tipos de valores
    - Não realiza I/O nem logging
    - Não é thread-safe
"""

from __future__ import annotations

from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Dict,
    Iterator,
    List,
    Mapping,
    Optional,
    Tuple,
)

from .errors import CannotModifyConfiguration, UndefinedSetting
from .schema import Schema

if TYPE_CHECKING:  # pragma: no cover
    from .store import ValueStore


_MISSING = object()

# Atributos reais das instâncias; qualquer outro nome é tratado como chave.
_NODE_ATTRIBUTES = frozenset({"_schema", "_parent", "_store"})

Assignment = Tuple[str, Any]


class ConfigNode:
    """
    Base comum de nós root e filhos.

    Decisões arquiteturais:
        - `__getattr__` só é consultado quando o atributo não existe na
          classe; por isso o `Schema` rejeita nomes que coincidem com
          membros do nó (`ReservedKeyError`)
        - Atribuição de atributos é roteada para `set`, exceto para os
          atributos internos e para descritores definidos na classe
    """

    __slots__ = ("_schema", "_parent")

    def __init__(self, schema: Schema, parent: Optional["ConfigNode"] = None) -> None:
        object.__setattr__(self, "_schema", schema)
        object.__setattr__(self, "_parent", parent)

    # -----------------------------
    # Navegação
    # -----------------------------
    @property
    def schema(self) -> Schema:
        return self._schema

    @property
    def parent(self) -> Optional["ConfigNode"]:
        return self._parent

    @property
    def config_root(self) -> "ConfigNode":
        node = self
        while node._parent is not None:
            node = node._parent
        return node

    @property
    def is_child(self) -> bool:
        return self._parent is not None

    @property
    def assigns(self) -> Dict[Any, Any]:
        return self._root_store().assigns

    def expand_key(self, key: str) -> str:
        return self._schema.expand_key(key)

    # -----------------------------
    # Leitura
    # -----------------------------
    def get(self, key: Any, default: Any = None) -> Any:
        """
        Lê um setting ou retorna um config filho.

        Se o valor não foi atribuído (ou é None), retorna `default`; sem
        default explícito, usa o default declarado no schema. Strings são
        interpoladas contra `assigns`.

        Raises:
            UndefinedSetting: Se a chave não estiver declarada.
            InterpolationError: Se um placeholder não existir em `assigns`.
        """
        node, name = self._locate(str(key))
        return node._read(name, default)

    def _read(self, name: str, default: Any) -> Any:
        schema = self._schema
        if default is None:
            default = schema.defaults.get(name)

        if name in schema.children:
            return self._child(name)
        if not schema.is_key_defined(name):
            raise UndefinedSetting(schema.expand_key(name))

        return self._root_store().fetch(schema.expand_key(name), default)

    # -----------------------------
    # Escrita
    # -----------------------------
    def set(self, key: Any, value: Any = _MISSING) -> None:
        """
        Atribui um setting.

        Formas aceitas:
            - ``set(key, value)``
            - ``set(mapping)`` → escrita em lote, equivalente a `update`
            - ``set(child_key, mapping)`` → equivalente a
              ``self[child_key].update(mapping)``

        Raises:
            UndefinedSetting: Se a chave não estiver declarada.
            CannotModifyConfiguration: Se a chave for um config filho e o
                valor não for um mapeamento.
            TypeError: Se nenhum valor for informado para uma chave simples.
        """
        if value is _MISSING:
            if isinstance(key, Mapping):
                self.update(key)
                return
            raise TypeError("set() takes a key and a value, or a single mapping")

        plan: List[Assignment] = []
        self._plan(str(key), value, plan)
        self._apply(plan)

    def update(self, mapping: Optional[Mapping[Any, Any]]) -> "ConfigNode":
        """
        Atualiza (recursivamente) este nó a partir de um mapeamento.

        Mapeamentos aninhados sob chaves de configs filhos são aplicados
        nos filhos; demais valores são atribuídos como settings. Todas as
        chaves são validadas antes da primeira escrita: em caso de erro,
        o store permanece inalterado.

        É o ponto de entrada usado por loaders de arquivos de configuração.
        """
        if not mapping:
            return self

        plan: List[Assignment] = []
        for key, value in mapping.items():
            self._plan(str(key), value, plan)
        self._apply(plan)
        return self

    def _plan(self, key: str, value: Any, plan: List[Assignment]) -> None:
        node, name = self._locate(key)
        schema = node._schema

        if name in schema.children:
            if not isinstance(value, Mapping):
                raise CannotModifyConfiguration(schema.expand_key(name))
            child = node._child(name)
            for child_key, child_value in value.items():
                child._plan(str(child_key), child_value, plan)
            return

        if not schema.is_key_defined(name):
            raise UndefinedSetting(schema.expand_key(name))
        plan.append((schema.expand_key(name), value))

    def _apply(self, plan: List[Assignment]) -> None:
        store = self._root_store()
        for fq_key, value in plan:
            store.store(fq_key, value)

    # -----------------------------
    # Exportação
    # -----------------------------
    def to_hash(self) -> Dict[str, Any]:
        """Snapshot recursivo no formato do schema (settings, depois filhos)."""
        result: Dict[str, Any] = {}
        for name in self._schema.settings:
            result[name] = self._read(name, None)
        for name in self._schema.children:
            result[name] = self._child(name).to_hash()
        return result

    to_dict = to_hash

    # -----------------------------
    # Delegação estilo dicionário (sobre snapshot)
    # -----------------------------
    def each(self, fn: Callable[[str, Any], Any]) -> Dict[str, Any]:
        snapshot = self.to_hash()
        for key, value in snapshot.items():
            fn(key, value)
        return snapshot

    def map(self, fn: Callable[[str, Any], Any]) -> List[Any]:
        return [fn(key, value) for key, value in self.to_hash().items()]

    def select(self, fn: Callable[[str, Any], bool]) -> Dict[str, Any]:
        return {key: value for key, value in self.to_hash().items() if fn(key, value)}

    def except_(self, *keys: Any) -> Dict[str, Any]:
        excluded = {str(key) for key in keys}
        return {key: value for key, value in self.to_hash().items() if key not in excluded}

    def symbolize_keys(self) -> Dict[str, Any]:
        # chaves já são str; mantido para paridade de API
        return dict(self.to_hash())

    def keys(self) -> List[str]:
        return list(self._schema.settings) + list(self._schema.children)

    def items(self) -> List[Tuple[str, Any]]:
        return list(self.to_hash().items())

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __len__(self) -> int:
        return len(self._schema.settings) + len(self._schema.children)

    def __contains__(self, key: object) -> bool:
        key = str(key)
        return self._schema.is_key_defined(key) or self._schema.child_schema(key) is not None

    # -----------------------------
    # Açúcar sintático
    # -----------------------------
    def __getitem__(self, key: Any) -> Any:
        return self.get(key)

    def __setitem__(self, key: Any, value: Any) -> None:
        self.set(key, value)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("__") or name in _NODE_ATTRIBUTES:
            raise AttributeError(name)
        return self.get(name)

    def __setattr__(self, name: str, value: Any) -> None:
        if name in _NODE_ATTRIBUTES or hasattr(getattr(type(self), name, None), "__set__"):
            object.__setattr__(self, name, value)
        else:
            self.set(name, value)

    def __dir__(self) -> List[str]:
        return sorted(set(super().__dir__()) | set(self.keys()))

    # -----------------------------
    # Suporte
    # -----------------------------
    def _locate(self, key: str) -> Tuple["ConfigNode", str]:
        # Caminhos pontuados descem pelos configs filhos a partir deste nó.
        *path, name = key.split(".")
        node = self
        for segment in path:
            if segment not in node._schema.children:
                raise UndefinedSetting(self._schema.expand_key(key))
            node = node._child(segment)
        return node, name

    def _child(self, name: str) -> "Config":
        store = self._root_store()
        fq_key = self._schema.expand_key(name)
        node = store.cached_config(fq_key)
        if node is None:
            node = store.cache_config(fq_key, Config(self._schema.children[name], parent=self))
        return node

    def _root_store(self) -> "ValueStore":
        return self.config_root._value_store

    @property
    def _value_store(self) -> "ValueStore":
        raise TypeError(f"{self!r} is not attached to a root configuration")


class Config(ConfigNode):
    """Config filho, criado na primeira vez que a sua chave é acessada."""

    __slots__ = ()

    def __repr__(self) -> str:
        return f"<Config {self._schema.path_from_root}>"
