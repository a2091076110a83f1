"""Tests for legal-status classification."""

import pytest

from inpi_check.availability.status import (
    DEFAULT_TABLE,
    TABLE_VERSION,
    StatusCategory,
    StatusTable,
    is_terminal_status,
)


@pytest.mark.parametrize(
    "status",
    [
        "Indeferido",
        "PEDIDO INDEFERIDO",
        "Negado",
        "Arquivado definitivamente",
        "Pedido definitivamente arquivado",
        "Registro extinto",
        "Caducada",
        "Registro cancelado",
        "Nulidade procedente",
        "Registro nulo",
        "Renúncia total",
    ],
)
def test_terminal_statuses(status: str) -> None:
    """Test every terminal stem is recognized regardless of case and accents."""
    assert is_terminal_status(status) is True
    assert DEFAULT_TABLE.classify(status) is StatusCategory.TERMINAL


@pytest.mark.parametrize(
    "status",
    [
        "Registro de marca em vigor",
        "Alto Renome",
        "Aguardando exame de mérito",
        "Pedido publicado",
        "Deferido",
        "Sobrestado",
    ],
)
def test_blocking_statuses(status: str) -> None:
    """Test known blocking statuses are not terminal."""
    assert is_terminal_status(status) is False
    assert DEFAULT_TABLE.classify(status) is StatusCategory.BLOCKING


@pytest.mark.parametrize("status", ["Aguardando prazo", "???", "", None, 42])
def test_unknown_statuses_block(status: object) -> None:
    """Test unrecognized or unusable statuses default to blocking."""
    category = DEFAULT_TABLE.classify(status)
    assert category is StatusCategory.UNKNOWN
    assert category.blocks
    assert is_terminal_status(status) is False


def test_terminal_stem_wins_over_blocking_stem() -> None:
    """Test 'indeferido' is terminal even though it contains 'deferid'."""
    assert DEFAULT_TABLE.classify("Indeferido") is StatusCategory.TERMINAL
    assert DEFAULT_TABLE.classify("Pedido definitivamente arquivado") is StatusCategory.TERMINAL


def test_custom_table() -> None:
    """Test a configured table replaces the default stems."""
    table = StatusTable.from_config(terminal_stems=["expired"], version="test-1")

    assert table.version == "test-1"
    assert table.is_terminal("EXPIRED registration") is True
    assert table.is_terminal("Arquivado") is False
    assert table.classify("Arquivado") is StatusCategory.UNKNOWN


def test_custom_stems_are_normalized() -> None:
    """Test configured stems get the same normalization as statuses."""
    table = StatusTable.from_config(terminal_stems=["Renúncia"])
    assert table.is_terminal("renuncia parcial") is True


def test_from_config_defaults() -> None:
    """Test missing config parts fall back to the built-in table."""
    table = StatusTable.from_config()
    assert table == DEFAULT_TABLE
    assert table.version == TABLE_VERSION


def test_empty_blocking_stems() -> None:
    """Test an empty blocking tier leaves only terminal and unknown."""
    table = StatusTable.from_config(blocking_stems=[])
    assert table.classify("Registro de marca em vigor") is StatusCategory.UNKNOWN
    assert table.classify("Arquivado") is StatusCategory.TERMINAL
