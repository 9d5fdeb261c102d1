# tests/conftest.py
"""
Fixtures compartilhados para testes do confix.

Este módulo define fixtures reutilizáveis que fornecem:
- uma árvore de configuração de exemplo cobrindo settings, configs
  aninhados, defaults e templates (implícito e explícito)
- uma configuração semelhante ao uso real (engine + steps) para os testes
  da camada de fontes
- conteúdos YAML de defaults e de override local

Decisões arquiteturais:
    - Fixtures de classe retornam a *classe*, não uma instância, para que
      os testes controlem o momento da instanciação
    - Conteúdos YAML são fornecidos como string; os testes decidem se
      escrevem em disco (via `tmp_path`)

Invariantes:
    - Cada teste recebe uma instância nova (valores nunca vazam entre testes)
    - Nenhuma fixture realiza I/O

Limites explícitos:
    - Não substituir testes de integração
    - Não conter lógica condicional complexa
"""

import pytest

from confix import Configuration


class ExampleConfig(Configuration):
    """
    Árvore de exemplo:

        one
        two.three
        two.four.five      (default 'five')
        six.eight          (template :six, implícito)
        seven.eight        (template :six, explícito)
        seven.nine         (bloco junto do template)
    """

    @classmethod
    def define(cls, schema):
        schema.setting("one")

        def two(two):
            two.setting("three")
            two.config("four", block=lambda four: four.setting("five", "five"))

        schema.config("two", block=two)

        schema.template("six", lambda six: six.setting("eight"))
        schema.config("six")
        schema.config("seven", "six", block=lambda seven: seven.setting("nine"))


class AppConfig(Configuration):
    """Configuração semelhante ao uso real: engine + steps declarados por template."""

    @classmethod
    def define(cls, schema):
        def engine(engine):
            engine.setting("fail_fast", False)
            engine.setting("log_level", "INFO")
            engine.setting("log_dir", "%{root}/logs")

        schema.config("engine", block=engine)

        schema.template("step", lambda step: step.setting("enabled", True))

        def steps(steps):
            steps.config("ingest", "step")
            steps.config("train", "step", block=lambda train: train.setting("epochs", 10))

        schema.config("steps", block=steps)


@pytest.fixture
def example_config_cls():
    return ExampleConfig


@pytest.fixture
def config():
    """Instância nova de `ExampleConfig`, sem nenhum valor atribuído."""
    return ExampleConfig()


@pytest.fixture
def app_config_cls():
    return AppConfig


@pytest.fixture
def project_like_config_defaults_yaml() -> str:
    """
    YAML de configuração padrão (defaults) semelhante ao uso real.

    Representa o conteúdo típico de um arquivo `config.defaults.yaml`, base
    sobre a qual a configuração local é aplicada via deep-merge.

    Returns:
        str: Conteúdo YAML representando configuração padrão (defaults).
    """

    return """\
engine:
  fail_fast: true
  log_level: INFO
steps:
  ingest:
    enabled: true
  train:
    enabled: true
"""


@pytest.fixture
def project_like_config_local_yaml() -> str:
    """
    YAML de configuração local (override) semelhante ao uso real.

    Returns:
        str: Conteúdo YAML representando configuração local de override.
    """

    return """\
engine:
  log_level: DEBUG
steps:
  train:
    enabled: false
    epochs: 3
"""
