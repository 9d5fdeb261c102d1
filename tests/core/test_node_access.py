# tests/core/test_node_access.py
"""
Testes de leitura e escrita em nós de configuração.

Este módulo valida que:
- as três formas de acesso (atributo, índice, método) são equivalentes
- configs filhos são sempre a mesma instância, por qualquer caminho
- caminhos pontuados a partir do root equivalem à navegação nó a nó
- chaves não declaradas e escritas sobre configs filhos falham explicitamente

Invariantes:
    - Nenhuma chave não declarada retorna None silenciosamente
    - Mensagens de erro carregam o caminho totalmente qualificado
"""

import pytest

from confix import CannotModifyConfiguration, Config, UndefinedSetting


# -----------------------------
# Setting simples (root)
# -----------------------------

@pytest.mark.parametrize(
    "assign",
    [
        lambda c: setattr(c, "one", "Hello"),
        lambda c: c.__setitem__("one", "Hello"),
        lambda c: c.set("one", "Hello"),
    ],
    ids=["attribute", "index", "method"],
)
def test_root_setting_is_accessible_by_every_form(config, assign):
    assign(config)

    assert config.one == "Hello"
    assert config["one"] == "Hello"
    assert config.get("one") == "Hello"


def test_unset_setting_without_default_reads_none(config):
    assert config.one is None


def test_get_returns_explicit_default_when_unset(config):
    assert config.get("one", "fallback") == "fallback"

    config.one = "value"
    assert config.get("one", "fallback") == "value"


def test_stored_none_falls_back_to_default(config):
    config.two.four.five = None
    assert config.two.four.five == "five"


def test_set_undefined_root_setting_raises(config):
    with pytest.raises(UndefinedSetting):
        config["four"] = "Test"

    with pytest.raises(UndefinedSetting):
        config.four = "Test"

    assert config.values() == {}


def test_get_undefined_setting_raises_with_path(config):
    with pytest.raises(UndefinedSetting) as excinfo:
        config.two["nope"]

    assert excinfo.value.key == "two.nope"
    assert str(excinfo.value) == "setting 'two.nope' does not exist"


def test_undefined_attribute_raises_undefined_setting(config):
    """
    Acesso por atributo a chave não declarada falha com `UndefinedSetting`.

    `UndefinedSetting` também é um `AttributeError`, o que mantém `hasattr`
    coerente: apenas chaves declaradas são reportadas como existentes.
    """
    with pytest.raises(UndefinedSetting) as excinfo:
        config.two.four.missing

    assert excinfo.value.key == "two.four.missing"
    assert isinstance(excinfo.value, AttributeError)
    assert not hasattr(config, "missing")
    assert hasattr(config, "one")


# -----------------------------
# Configs intermediários
# -----------------------------

def test_intermediate_config_is_config_node(config):
    assert isinstance(config.two, Config)
    assert isinstance(config.two.four, Config)


def test_intermediate_config_is_same_instance_for_every_form(config):
    assert config.two is config["two"]
    assert config.two is config.get("two")
    assert config.two.four is config["two.four"]
    assert config["two"]["four"] is config.two.four


def test_intermediate_config_is_cached_on_root(config):
    four = config.two.four

    assert config.configs["two"] is config.two
    assert config.configs["two.four"] is four


def test_child_knows_parent_and_root(config):
    four = config.two.four

    assert four.parent is config.two
    assert four.config_root is config
    assert four.is_child
    assert not config.is_child
    assert config.parent is None


def test_scalar_assignment_to_child_config_raises(config):
    with pytest.raises(CannotModifyConfiguration):
        config["two"] = "Hallo"

    with pytest.raises(CannotModifyConfiguration):
        config.two.four = 5

    assert config.values() == {}


# -----------------------------
# Settings em configs filhos
# -----------------------------

@pytest.mark.parametrize(
    "child",
    [
        lambda c: c.two,
        lambda c: c["two"],
        lambda c: c.get("two"),
    ],
    ids=["attribute", "index", "method"],
)
def test_child_setting_is_accessible_by_every_form(config, child):
    child(config).three = "Hello"

    assert config.two.three == "Hello"
    assert config["two"].three == "Hello"
    assert config.get("two")["three"] == "Hello"


def test_child_values_are_stored_on_root(config):
    config.two.three = "Hello"

    assert config.values() == {"two.three": "Hello"}


# -----------------------------
# Indexadores pontuados
# -----------------------------

def test_dotted_access_reads_root_setting(config):
    config.one = "Hello"
    assert config["one"] == "Hello"


def test_dotted_access_reads_level_one_setting(config):
    config.two.three = "Hello2"
    assert config["two.three"] == "Hello2"


def test_dotted_access_reads_level_two_setting(config):
    config.two.four.five = "Hello3"
    assert config["two.four.five"] == "Hello3"
    assert config.two["four.five"] == "Hello3"


def test_dotted_access_writes_through(config):
    config["two.four.five"] = "Written"
    assert config.two.four.five == "Written"


def test_dotted_access_matches_node_walk_including_defaults(config):
    assert config["two.four.five"] == config.two.four.five == "five"


@pytest.mark.parametrize("key", ["two.five", "one.five", "nope.three", "two..three"])
def test_dotted_access_to_undefined_setting_raises(config, key):
    with pytest.raises(UndefinedSetting):
        config[key] = "Test"

    with pytest.raises(UndefinedSetting):
        config[key]


def test_undefined_dotted_error_carries_qualified_path(config):
    with pytest.raises(UndefinedSetting) as excinfo:
        config.two["four.six"]

    assert excinfo.value.key == "two.four.six"


# -----------------------------
# Assinatura de set
# -----------------------------

def test_set_without_value_raises_type_error(config):
    with pytest.raises(TypeError):
        config.set("one")


def test_set_with_too_many_values_raises_type_error(config):
    with pytest.raises(TypeError):
        config.set("one", 1, 2)


def test_node_properties_cannot_be_overwritten(config):
    with pytest.raises(AttributeError):
        config.two.parent = None
