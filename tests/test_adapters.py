"""Tests for raw record normalization."""

import pytest

from inpi_check.availability import decide, record_from_raw, records_from_raw


def test_infosimples_record() -> None:
    """Test the Infosimples field names."""
    record = record_from_raw(
        {
            "marca": "NATURA",
            "situacao": "Registro de marca em vigor",
            "processo": "006545120",
            "titular": "Natura Cosméticos S.A.",
            "classe": "NCL(11) 03",
        }
    )

    assert record.name == "NATURA"
    assert record.legal_status == "Registro de marca em vigor"
    assert record.number == "006545120"
    assert record.holder == "Natura Cosméticos S.A."
    assert record.nice_class == "NCL(11) 03"


@pytest.mark.parametrize(
    "raw",
    [
        {"denominacao": "ACME", "status": "Arquivado"},
        {"sinal": "ACME", "situacao_processual": "Arquivado"},
        {"title": "ACME", "situation": "Arquivado"},
        {"mark": "ACME", "legal_status": "Arquivado"},
    ],
)
def test_polymorphic_field_names(raw: dict) -> None:
    """Test name and status are found under the alternate keys."""
    record = record_from_raw(raw)
    assert record.name == "ACME"
    assert record.legal_status == "Arquivado"


def test_first_non_empty_key_wins() -> None:
    """Test empty values are skipped in favor of later keys."""
    record = record_from_raw({"marca": "  ", "nome": "ACME", "situacao": None, "status": "Indeferido"})
    assert record.name == "ACME"
    assert record.legal_status == "Indeferido"


def test_value_coercion() -> None:
    """Test numbers and lists are coerced, other values become empty."""
    record = record_from_raw(
        {
            "marca": "ACME",
            "situacao": {"codigo": 1},
            "processo": 908771230,
            "titular": ["Acme Ltda", None, "Outro"],
            "classe": True,
        }
    )

    assert record.number == "908771230"
    assert record.holder == "Acme Ltda; Outro"
    assert record.legal_status == ""
    assert record.nice_class == ""


def test_unresolvable_name_is_not_relevant() -> None:
    """Test a record whose name cannot be read does not block."""
    records = records_from_raw([{"marca": {"texto": "ACME"}, "situacao": "Registro de marca em vigor"}])
    verdict = decide("ACME", records)

    assert records[0].name == ""
    assert verdict.available is True


def test_records_from_raw_skips_non_mappings() -> None:
    """Test items that are not mappings are dropped."""
    records = records_from_raw([None, "NATURA", 7, {"marca": "NATURA", "situacao": "Alto Renome"}])

    assert len(records) == 1
    assert records[0].name == "NATURA"
