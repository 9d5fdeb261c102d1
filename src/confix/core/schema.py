# src/confix/core/schema.py
"""
Schema declarativo de configuração.

Este módulo define o `Schema`, a representação explícita da forma de uma
árvore de configuração: quais settings existem em cada nível, seus valores
padrão, quais configs filhos existem e quais templates reutilizáveis estão
disponíveis.

Um schema é construído uma única vez, em tempo de declaração, através de
três operações de DSL:
    - `setting(name, default=None)`
    - `config(name, template=None, block=None)`
    - `template(name, block)`

Depois que a primeira instância de configuração é criada a partir dele,
o schema é selado e passa a ser somente leitura.

Princípios fundamentais:
    - Cada nível da árvore é um valor `Schema`, não um tipo gerado
    - Filhos pertencem ao pai; o pai é apenas um link de navegação (fraco)
    - Templates vivem exclusivamente no schema root

Invariantes:
    - `settings` preserva a ordem de declaração e contém apenas nomes
      declarados diretamente neste nível
    - `settings` e `children` são conjuntos disjuntos
    - `path_from_root` é `""` no root e `pai.path_from_root + "." + nome`
      nos demais níveis (sem ponto inicial)

Limites explícitos:
    - Não armazena valores de runtime
    - Não valida tipos de valores
    - Não permite remover declarações
"""

from __future__ import annotations

import weakref
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from .errors import (
    DuplicateKeyError,
    ReservedKeyError,
    SchemaSealedError,
    TemplateNotFoundError,
)
from .keys import validate_key
from .templates import SchemaBlock, TemplateRegistry


KeyPath = Union[str, Sequence[str]]


@lru_cache(maxsize=None)
def _node_attribute_names() -> frozenset:
    # importação tardia: declarative depende deste módulo
    from .declarative import Configuration

    return frozenset(dir(Configuration)) | {"define"}


def _declarable_key(name: object) -> str:
    """Valida o token e rejeita nomes que colidem com membros dos nós."""
    key = validate_key(name)
    if key.startswith("__") or key in _node_attribute_names():
        raise ReservedKeyError(key)
    return key


class Schema:
    """
    Nó da árvore de schema de configuração.

    Cada instância descreve um nível da árvore: o root (sem nome e sem pai)
    ou um config filho declarado via `config(...)`.

    Decisões arquiteturais:
        - Coleções são expostas como visões somente leitura
        - A referência ao pai é fraca; a posse flui do root para os filhos
        - Redeclarar um nome com o mesmo tipo substitui a declaração
          anterior; redeclarar com o outro tipo é erro
        - Declarações após o selamento levantam `SchemaSealedError`

    Invariantes:
        - Apenas o root possui `templates`
        - Um schema selado tem todos os descendentes selados
    """

    def __init__(self, name: Optional[str] = None, parent: Optional["Schema"] = None) -> None:
        self._name = name
        self._parent_ref = weakref.ref(parent) if parent is not None else None
        self._path_from_root = parent.expand_key(name) if parent is not None else ""

        self._settings: List[str] = []
        self._defaults: Dict[str, Any] = {}
        self._children: Dict[str, Schema] = {}
        self._templates: Optional[TemplateRegistry] = TemplateRegistry() if parent is None else None
        self._sealed = False

    # -----------------------------
    # Atributos
    # -----------------------------
    @property
    def name(self) -> Optional[str]:
        return self._name

    @property
    def parent_schema(self) -> Optional["Schema"]:
        return self._parent_ref() if self._parent_ref is not None else None

    @property
    def path_from_root(self) -> str:
        return self._path_from_root

    @property
    def is_root(self) -> bool:
        return self._parent_ref is None

    @property
    def root(self) -> "Schema":
        schema = self
        while schema.parent_schema is not None:
            schema = schema.parent_schema
        return schema

    @property
    def settings(self) -> Tuple[str, ...]:
        return tuple(self._settings)

    @property
    def defaults(self) -> Mapping[str, Any]:
        return MappingProxyType(self._defaults)

    @property
    def children(self) -> Mapping[str, "Schema"]:
        return MappingProxyType(self._children)

    @property
    def templates(self) -> Optional[TemplateRegistry]:
        return self._templates

    @property
    def sealed(self) -> bool:
        return self._sealed

    # -----------------------------
    # DSL
    # -----------------------------
    def setting(self, name: str, default: Any = None) -> None:
        """
        Declara um setting neste nível do schema.

        Um default None não é registrado; redeclarar o setting sem default
        remove o default anterior.

        Raises:
            InvalidKeyError: Se o nome não for um token válido.
            ReservedKeyError: Se o nome coincidir com um membro dos nós
                (ex.: `map`, `parent`, `values`).
            DuplicateKeyError: Se o nome já for um config filho.
            SchemaSealedError: Se o schema já tiver sido instanciado.
        """
        self._check_open()
        name = _declarable_key(name)
        if name in self._children:
            raise DuplicateKeyError(
                f"'{self.expand_key(name)}' is already declared as a child configuration"
            )

        if name not in self._settings:
            self._settings.append(name)
        if default is not None:
            self._defaults[name] = default
        else:
            self._defaults.pop(name, None)

    def config(
        self,
        name: str,
        template: Optional[str] = None,
        block: Optional[SchemaBlock] = None,
    ) -> "Schema":
        """
        Declara um config filho e retorna o seu schema.

        Política de resolução de template:
            - sem template e sem bloco → template com o mesmo nome do filho
              (obrigatório)
            - template explícito → deve existir no registro do root
            - o template é aplicado primeiro e o bloco depois; ambos podem
              declarar settings e configs no filho

        Args:
            name: Nome do config filho.
            template: Nome de um template registrado no root.
            block: Procedimento que recebe o schema filho e o completa.

        Returns:
            Schema: O schema filho registrado.

        Raises:
            InvalidKeyError: Se o nome não for um token válido.
            ReservedKeyError: Se o nome coincidir com um membro dos nós
                (ex.: `map`, `parent`, `values`).
            TemplateNotFoundError: Se o template não puder ser resolvido.
            DuplicateKeyError: Se o nome já for um setting.
            SchemaSealedError: Se o schema já tiver sido instanciado.
        """
        self._check_open()
        name = _declarable_key(name)
        if name in self._settings:
            raise DuplicateKeyError(f"'{self.expand_key(name)}' is already declared as a setting")

        registry = self.root.templates
        if template is None and block is None:
            if name not in registry:
                raise TemplateNotFoundError(
                    f"no template or block specified, and no template :{name} found"
                )
            template = name
        elif template is not None and template not in registry:
            raise TemplateNotFoundError(f"template :{template} not found")

        child = Schema(name, parent=self)
        if template is not None:
            registry.get(template)(child)
        if block is not None:
            block(child)

        self._children[name] = child
        return child

    def template(self, name: str, block: SchemaBlock) -> None:
        """Registra um template no root da árvore."""
        root = self.root
        root._check_open()
        root._templates.define(name, block)

    # -----------------------------
    # Suporte
    # -----------------------------
    def expand_key(self, key: str) -> str:
        return f"{self._path_from_root}.{key}" if self._path_from_root else str(key)

    def is_key_defined(self, key: KeyPath) -> bool:
        """
        Indica se `key` resolve para um setting declarado.

        `key` pode ser um caminho pontuado ou uma sequência de segmentos.
        O nome isolado de um config filho não é um setting definido.
        """
        segments = key.split(".") if isinstance(key, str) else list(key)
        schema = self
        while segments:
            head = segments.pop(0)
            if head in schema._children:
                schema = schema._children[head]
                continue
            return head in schema._settings and not segments
        return False

    def child_schema(self, key: KeyPath) -> Optional["Schema"]:
        """Retorna o schema do config filho em `key` (pontuado), ou None."""
        segments = key.split(".") if isinstance(key, str) else list(key)
        schema: Optional[Schema] = self
        for segment in segments:
            schema = schema._children.get(segment)
            if schema is None:
                return None
        return schema

    def seal(self) -> None:
        """Torna este schema e todos os descendentes somente leitura."""
        self._sealed = True
        for child in self._children.values():
            child.seal()

    def _check_open(self) -> None:
        if self._sealed:
            where = self._path_from_root or "<root>"
            raise SchemaSealedError(f"schema {where} is sealed; declare before instantiating")

    def __repr__(self) -> str:
        return f"Schema({self._path_from_root!r}, settings={self._settings!r}, children={list(self._children)!r})"
