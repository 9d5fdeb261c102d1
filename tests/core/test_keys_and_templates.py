# tests/core/test_keys_and_templates.py
"""
Testes do validador de nomes e do registro de templates.
"""

import pytest

from confix.core import (
    InvalidKeyError,
    TemplateBlockRequiredError,
    TemplateNotFoundError,
    TemplateRegistry,
    is_valid_key,
    validate_key,
)


@pytest.mark.parametrize("name", ["a", "A", "snake_case", "CamelCase", "_private", "v2", "123"])
def test_valid_keys(name):
    assert is_valid_key(name)
    assert validate_key(name) == name


@pytest.mark.parametrize("name", ["", "a-b", "a.b", "a b", "é", "tab\t", None, 1, b"bytes"])
def test_invalid_keys(name):
    assert not is_valid_key(name)
    with pytest.raises(InvalidKeyError):
        validate_key(name)


def test_registry_preserves_registration_order():
    registry = TemplateRegistry()
    registry.define("b", lambda s: None)
    registry.define("a", lambda s: None)

    assert registry.names() == ["b", "a"]
    assert len(registry) == 2
    assert "a" in registry
    assert "c" not in registry


def test_registry_redefinition_replaces_block():
    first, second = (lambda s: None), (lambda s: None)
    registry = TemplateRegistry()
    registry.define("x", first)
    registry.define("x", second)

    assert registry.get("x") is second
    assert registry.names() == ["x"]


def test_registry_get_unknown_raises():
    with pytest.raises(TemplateNotFoundError):
        TemplateRegistry().get("missing")


def test_registry_requires_callable_block():
    with pytest.raises(TemplateBlockRequiredError):
        TemplateRegistry().define("x", None)
