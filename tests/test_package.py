import pytest


def test_package_structure_is_acyclic() -> None:
    """
    Verifies that the package structure is sound and free of circular imports.

    Ensures that `src.label_lib` can be imported and that every name in
    `__all__` is actually exposed.
    """
    import src.label_lib

    # Basic check to ensure it's a valid package
    assert hasattr(src.label_lib, "__path__")

    for name in src.label_lib.__all__:
        assert hasattr(src.label_lib, name), name


def test_registry_layouts_match_families(registry) -> None:
    """Every slot of every board layout names a registered family."""
    from src.label_lib import constants as C

    for layout in C.BOARD_LAYOUTS.values():
        for family in layout["slots"].values():
            assert family in registry


def test_registry_rejects_duplicate_families() -> None:
    from src.label_lib import MultiGrammar, Registry

    with pytest.raises(ValueError, match="Duplicate"):
        Registry([MultiGrammar("x", []), MultiGrammar("x", [])])


def test_init_registry_is_idempotent(registry) -> None:
    from src.label_lib import get_registry, init_registry

    assert init_registry() is registry
    assert get_registry() is registry


def test_grammar_check_tool_passes(registry) -> None:
    from tools.check_grammars import check_family

    for name in registry.names():
        failures, ambiguous = check_family(registry.family(name))
        assert failures == [], name
        assert ambiguous == [], name


def test_get_registry_before_init_raises(monkeypatch) -> None:
    from src.label_lib.registry import get_registry

    monkeypatch.setattr("src.label_lib.registry._registry", None)
    with pytest.raises(RuntimeError, match="init_registry"):
        get_registry()
