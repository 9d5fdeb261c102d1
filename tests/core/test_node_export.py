# tests/core/test_node_export.py
"""
Testes de exportação de nós: `values()`, `to_hash()` e delegação estilo
dicionário (`each`, `map`, `select`, `except_`, `symbolize_keys`).

Invariantes:
    - `values()` contém apenas caminhos explicitamente atribuídos
    - `to_hash()` espelha a forma do schema, independente do que foi atribuído
    - Operações de delegação trabalham sobre snapshot, não sobre visão viva
"""

import pytest

from confix import Configuration


@pytest.fixture
def filled(config):
    config.one = "One"
    config.two.three = "Three"
    config.two.four.five = "Five"
    return config


def test_values_reports_all_assigned_paths_from_root(filled):
    assert filled.values() == {
        "one": "One",
        "two.three": "Three",
        "two.four.five": "Five",
    }


def test_values_excludes_defaults_and_unset(config):
    config.two.three = "Three"
    assert config.values() == {"two.three": "Three"}


def test_values_is_a_copy(filled):
    snapshot = filled.values()
    snapshot["one"] = "changed"
    assert filled.one == "One"


def test_to_hash_is_recursive(filled):
    assert filled.to_hash() == {
        "one": "One",
        "two": {"three": "Three", "four": {"five": "Five"}},
        "six": {"eight": None},
        "seven": {"eight": None, "nine": None},
    }


def test_to_hash_from_any_level(filled):
    assert filled.two.to_hash() == {"three": "Three", "four": {"five": "Five"}}


def test_to_hash_reports_defaults_and_none_for_unset(config):
    assert config.to_hash() == {
        "one": None,
        "two": {"three": None, "four": {"five": "five"}},
        "six": {"eight": None},
        "seven": {"eight": None, "nine": None},
    }


def test_to_hash_lists_settings_before_children(config):
    assert list(config.to_hash()) == ["one", "two", "six", "seven"]
    assert list(config.seven.to_hash()) == ["eight", "nine"]


def test_end_to_end_example(config):
    """Cenário completo: default antes da atribuição e snapshot depois."""
    assert config.two.four.five == "five"

    config.one = "Hello"
    config.two.three = "World"

    assert config.two.to_hash() == {"three": "World", "four": {"five": "five"}}
    assert config.to_hash()["one"] == "Hello"
    assert config.to_hash()["two"] == {"three": "World", "four": {"five": "five"}}


def test_end_to_end_full_snapshot_equality():
    """
    Árvore mínima (one, two.three, two.four.five): o snapshot completo é
    comparado por igualdade, antes e depois das atribuições.
    """

    class Minimal(Configuration):
        @classmethod
        def define(cls, schema):
            schema.setting("one")

            def two(two):
                two.setting("three")
                two.config("four", block=lambda four: four.setting("five", "five"))

            schema.config("two", block=two)

    config = Minimal()
    assert config.to_hash() == {"one": None, "two": {"three": None, "four": {"five": "five"}}}

    config.one = "Hello"
    config.two.three = "World"

    assert config.to_hash() == {"one": "Hello", "two": {"three": "World", "four": {"five": "five"}}}
    assert config.values() == {"one": "Hello", "two.three": "World"}


# -----------------------------
# Delegação estilo dicionário
# -----------------------------

def test_each_yields_snapshot_pairs(filled):
    seen = []
    result = filled.two.each(lambda key, value: seen.append((key, value)))

    assert seen == [("three", "Three"), ("four", {"five": "Five"})]
    assert result == filled.two.to_hash()


def test_map_select_except(filled):
    assert filled.two.map(lambda key, value: key) == ["three", "four"]
    assert filled.select(lambda key, value: isinstance(value, str)) == {"one": "One"}
    assert filled.two.except_("four") == {"three": "Three"}


def test_symbolize_keys_returns_plain_snapshot(filled):
    assert filled.two.symbolize_keys() == {"three": "Three", "four": {"five": "Five"}}


def test_snapshot_does_not_write_back(filled):
    snapshot = filled.two.to_hash()
    snapshot["three"] = "changed"
    assert filled.two.three == "Three"


def test_keys_items_iter_len(filled):
    assert filled.keys() == ["one", "two", "six", "seven"]
    assert list(filled) == filled.keys()
    assert len(filled.seven) == 2
    assert dict(filled.two.items()) == {"three": "Three", "four": {"five": "Five"}}


def test_contains_reports_declared_keys(config):
    assert "one" in config
    assert "two" in config
    assert "two.four" in config
    assert "two.four.five" in config
    assert "four" in config.two
    assert "missing" not in config
    assert "two.five" not in config
