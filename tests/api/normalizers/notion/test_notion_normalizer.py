"""Testes do normalizer de páginas Notion → Item."""

from __future__ import annotations

from api.normalizers.notion import normalize_record, resolve_name
from tests.fakes.fake_record_store import make_record


def _rich(*parts: str) -> dict[str, object]:
    return {"type": "rich_text", "rich_text": [{"plain_text": part} for part in parts]}


def test_normalize_full_record() -> None:
    raw = make_record(
        "page-1",
        "  Fundação  ",
        level={"type": "number", "number": 2},
        upper=_rich("Obra", " A"),
        dependency=_rich("Projeto"),
        **{
            "early start": {"date": {"start": "2026-01-05"}},
            "late start": {"date": {"start": "2026-01-07T09:00:00.000+09:00"}},
            "early finish": {"date": None},
            "Done": {"checkbox": True},
        },
    )

    item = normalize_record(raw)

    assert item is not None
    assert item.id == "page-1"
    assert item.name == "Fundação"
    assert item.level == 2
    assert item.upper == "Obra A"
    assert item.dependency == "Projeto"
    assert item.early_start == "2026-01-05"
    assert item.late_start == "2026-01-07T09:00:00.000+09:00"
    assert item.early_finish is None
    assert item.late_finish is None
    assert item.done is True


def test_normalize_uses_fallback_name_field() -> None:
    raw = make_record("page-2", "Legacy", name_field="Name")

    item = normalize_record(raw)

    assert item is not None
    assert item.name == "Legacy"


def test_normalize_falls_back_when_primary_is_blank() -> None:
    raw = make_record("page-3", "   ")
    raw["properties"]["Name"] = {"title": [{"plain_text": "Fallback"}]}

    assert resolve_name(raw["properties"]) == "Fallback"


def test_primary_name_wins_over_fallback() -> None:
    raw = make_record("page-4", "Primary")
    raw["properties"]["Name"] = {"title": [{"plain_text": "Other"}]}

    item = normalize_record(raw)

    assert item is not None
    assert item.name == "Primary"


def test_normalize_excludes_blank_name() -> None:
    assert normalize_record(make_record("page-5", "   ")) is None
    assert normalize_record(make_record("page-6", None)) is None


def test_normalize_excludes_record_without_id() -> None:
    raw = make_record("", "Sem id")

    assert normalize_record(raw) is None
    assert normalize_record("not a page") is None


def test_wrong_shaped_fields_degrade_to_defaults() -> None:
    raw = make_record(
        "page-7",
        "Robusto",
        level={"number": "3"},
        upper={"rich_text": "not-a-list"},
        dependency=["garbage"],
        Done={"checkbox": "true"},
        **{"early start": {"date": "2026-01-01"}},
    )

    item = normalize_record(raw)

    assert item is not None
    assert item.level is None
    assert item.upper is None
    assert item.dependency is None
    assert item.early_start is None
    assert item.done is False


def test_boolean_is_not_a_level() -> None:
    raw = make_record("page-8", "Bool", level={"number": True})

    item = normalize_record(raw)

    assert item is not None
    assert item.level is None


def test_missing_properties_block() -> None:
    assert normalize_record({"id": "page-9"}) is None


def test_empty_rich_text_is_none() -> None:
    raw = make_record("page-10", "Vazio", upper=_rich(""))

    item = normalize_record(raw)

    assert item is not None
    assert item.upper is None
    assert item.done is False
