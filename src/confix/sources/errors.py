# src/confix/sources/errors.py
"""
Exceções canônicas da camada de fontes de configuração do confix.

Este módulo define a hierarquia de exceções utilizadas durante a leitura
de arquivos de configuração e a resolução (deep-merge) de defaults e
overrides locais, antes que o mapeamento resultante seja aplicado a uma
árvore de configuração.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Erros estruturais são tratados como falhas fatais
    - Mensagens de erro são claras e direcionadas ao usuário

Invariantes:
    - Todas as exceções desta camada herdam de `ConfigSourceError`
    - Nenhuma exceção representa erro de acesso a settings (ver
      `confix.core.errors`)

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não depende do motor de configuração
"""


class ConfigSourceError(Exception):
    """
    Exceção base para erros de leitura e resolução de fontes de configuração.

    Permite distinguir falhas de I/O e de estrutura de arquivos das falhas
    de declaração ou acesso do core.
    """


class SourceNotFoundError(ConfigSourceError):
    """
    Exceção levantada quando o arquivo de configuração obrigatório
    (defaults) não é encontrado no caminho especificado.

    Decisões arquiteturais:
        - O arquivo de defaults é obrigatório
        - O arquivo local é opcional e nunca gera este erro

    Limites explícitos:
        - Não tenta inferir ou criar defaults automaticamente
    """


class UnsupportedConfigFormatError(ConfigSourceError):
    """
    Exceção levantada quando a extensão do arquivo não é suportada.

    Formatos suportados:
        - YAML (.yaml, .yml)
        - JSON (.json)

    Limites explícitos:
        - Não tenta inferir formato por conteúdo
    """


class ConfigParseError(ConfigSourceError):
    """Falha ao parsear YAML/JSON."""


class InvalidConfigRootTypeError(ConfigSourceError):
    """
    Exceção levantada quando o conteúdo raiz do arquivo não é um
    dicionário (`dict`).

    A árvore de configuração só pode ser atualizada a partir de um
    mapeamento cuja forma espelhe o schema; listas ou escalares no root
    são inválidos.
    """


class ConfigTypeConflictError(ConfigSourceError):
    """
    Exceção levantada quando ocorre conflito de tipos durante o deep-merge.

    Exemplo de conflito:
        - base:     {"database": {"pool": 5}}
        - override: {"database": "sqlite://"}

    Invariantes:
        - Nenhum merge parcial é produzido em caso de conflito

    Limites explícitos:
        - Não realiza coerção ou conversão de tipos
    """
