# src/confix/core/errors.py
"""
Exceções canônicas do motor de configuração do confix.

Este módulo define a hierarquia oficial de exceções levantadas durante a
declaração de schemas e durante o acesso (leitura/escrita) a nós de
configuração.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Toda falha interrompe imediatamente a operação que a originou
    - Nenhuma falha é silenciada ou recuperada internamente

Invariantes:
    - Todas as exceções do core herdam de `ConfigError`
    - Erros de acesso sempre carregam o caminho totalmente qualificado
    - Erros de declaração são também `ValueError` (erros de argumento)

Limites explícitos:
    - Não registra logs
    - Não realiza fallback ou recovery
    - Não cobre erros de leitura de arquivos (ver `confix.sources.errors`)
"""

from __future__ import annotations


class ConfigError(Exception):
    """
    Exceção base para erros do motor de configuração.

    Permite captura genérica de qualquer falha do core, separando-as de
    falhas de I/O da camada `confix.sources`.
    """


class UndefinedSetting(ConfigError, AttributeError):
    """
    Exceção levantada quando uma chave não resolve para um setting ou
    config filho declarado.

    A mensagem sempre carrega o caminho totalmente qualificado tentado
    (ex.: ``two.five``), independentemente do nó a partir do qual o
    acesso foi feito.

    Decisões arquiteturais:
        - Também é um `AttributeError`, de modo que `hasattr` reporta
          apenas chaves declaradas
        - Acesso a chave não declarada nunca retorna None silenciosamente
    """

    def __init__(self, key: str) -> None:
        super().__init__(f"setting '{key}' does not exist")
        self.key = key


class CannotModifyConfiguration(ConfigError):
    """Escrita de valor escalar sobre uma chave que é um config filho."""

    def __init__(self, key: str) -> None:
        super().__init__(
            f"you cannot set option {key} as it refers to a child configuration"
        )
        self.key = key


class InterpolationError(ConfigError, KeyError):
    """Placeholder de interpolação referencia um assign inexistente."""

    def __init__(self, name: str, text: str) -> None:
        super().__init__(f"key '{name}' not found in assigns while interpolating {text!r}")
        self.name = name
        self.text = text

    def __str__(self) -> str:
        # KeyError.__str__ aplica repr() à mensagem
        return str(self.args[0])


# ---------------------------------------------------------------------------
# Declaração de schema
# ---------------------------------------------------------------------------

class SchemaDeclarationError(ConfigError, ValueError):
    """
    Exceção base para erros de declaração de schema.

    Erros de declaração ocorrem no momento em que a classe de configuração
    é definida, antes de qualquer instância existir.
    """


class InvalidKeyError(SchemaDeclarationError):
    """Nome de setting/config fora do alfabeto `[A-Za-z0-9_]`."""

    def __init__(self, key: object) -> None:
        super().__init__(f"invalid key: {key}")
        self.key = key


class ReservedKeyError(InvalidKeyError):
    """
    Nome válido que coincide com um membro dos nós de configuração.

    Um setting chamado `map` ou `parent` ficaria inacessível por atributo,
    pois o membro da classe tem precedência sobre `__getattr__`.
    """

    def __init__(self, key: object) -> None:
        SchemaDeclarationError.__init__(
            self, f"reserved key: {key} clashes with a configuration node attribute"
        )
        self.key = key


class TemplateNotFoundError(SchemaDeclarationError):
    """Template implícito (pelo nome) ou explícito não registrado no root."""


class TemplateBlockRequiredError(SchemaDeclarationError):
    """Template declarado sem procedimento de mutação."""


class DuplicateKeyError(SchemaDeclarationError):
    """Nome já declarado no mesmo schema com outro tipo (setting vs config)."""


class SchemaSealedError(SchemaDeclarationError):
    """Declaração feita sobre um schema já instanciado."""
