# src/confix/core/store.py
"""
Value Store: armazenamento único de valores de uma árvore de configuração.

Existe exatamente um store por instância root. Nós filhos nunca guardam
valores: toda leitura e escrita é encaminhada ao store do root usando o
caminho totalmente qualificado da chave.

Campos canônicos:
- values: caminho qualificado -> valor (apenas settings folha)
- assigns: variáveis disponíveis para interpolação de strings
- configs: cache de nós filhos materializados (caminho qualificado -> nó)

Invariantes:
- Caminhos de configs filhos nunca aparecem como chaves em `values`
- O mesmo caminho em `configs` sempre devolve a mesma instância
- Não há sincronização; o modelo é de dono único
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .interpolation import interpolate


@dataclass
class ValueStore:
    values: Dict[str, Any] = field(default_factory=dict)
    assigns: Dict[Any, Any] = field(default_factory=dict)
    configs: Dict[str, Any] = field(default_factory=dict, repr=False)

    def fetch(self, key: str, default: Any = None) -> Any:
        """Lê um valor; ausente ou None cai no default. Strings são interpoladas."""
        value = self.values.get(key)
        if value is None:
            value = default
        if isinstance(value, str):
            value = interpolate(value, self.assigns)
        return value

    def store(self, key: str, value: Any) -> None:
        self.values[key] = value

    def snapshot(self) -> Dict[str, Any]:
        return dict(self.values)

    def cached_config(self, key: str) -> Optional[Any]:
        return self.configs.get(key)

    def cache_config(self, key: str, node: Any) -> Any:
        self.configs[key] = node
        return node
