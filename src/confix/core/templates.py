# src/confix/core/templates.py
"""
Registro de templates de schema.

Templates são fragmentos reutilizáveis de schema: procedimentos que, dado
um schema filho, declaram settings e configs nele. Um config filho herda
um template implicitamente (quando nenhum template/bloco é informado e
existe um template com o mesmo nome do filho) ou explicitamente (pelo
nome do template).

Decisões arquiteturais:
    - Existe exatamente um registro por árvore, mantido pelo schema root
    - O registro não aplica templates; apenas os armazena e resolve
    - A ordem de registro é preservada

Invariantes:
    - Todo template registrado possui um procedimento chamável
    - Redefinir um nome substitui o procedimento anterior

Limites explícitos:
    - Não valida o conteúdo que o procedimento declara
    - Não conhece nós de configuração nem valores
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Dict, List

from .errors import TemplateBlockRequiredError, TemplateNotFoundError

if TYPE_CHECKING:  # pragma: no cover
    from .schema import Schema


SchemaBlock = Callable[["Schema"], None]


@dataclass
class TemplateRegistry:
    """Mapeamento nome de template -> procedimento de mutação de schema."""

    _templates: Dict[str, SchemaBlock] = field(default_factory=dict, init=False, repr=False)

    def define(self, name: str, block: SchemaBlock) -> None:
        if block is None or not callable(block):
            raise TemplateBlockRequiredError(f"block required for template :{name}")
        self._templates[str(name)] = block

    def get(self, name: str) -> SchemaBlock:
        name = str(name)
        if name not in self._templates:
            raise TemplateNotFoundError(f"template :{name} not found")
        return self._templates[name]

    def names(self) -> List[str]:
        return list(self._templates)

    def __contains__(self, name: object) -> bool:
        return str(name) in self._templates

    def __len__(self) -> int:
        return len(self._templates)
