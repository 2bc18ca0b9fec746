import pytest
from datetime import date
from types import SimpleNamespace

from orderboard.core.errors import EmptyImportResult, UnknownOrderType
from orderboard.core.order_types import OrderType
from orderboard.core.reconciler import (
    STATUS_NEW,
    STATUS_UPDATE,
    analyze_import,
    reconcile_import,
)


def existing(order_id, order_number, order_type):
    return SimpleNamespace(id=order_id, order_number=order_number, type=order_type)


def test_new_candidates_keep_line_order():
    text = "B2,Bob,02/09/2025\nA1 Alice Smith 01/09/2025\n"
    candidates = reconcile_import(text, "instalacion", [])
    assert [c.order_number for c in candidates] == ["B2", "A1"]
    assert all(c.status == STATUS_NEW for c in candidates)
    assert candidates[1].customer_name == "Alice Smith"
    assert candidates[1].delivery_date == date(2025, 9, 1)
    assert candidates[0].type is OrderType.installation
    assert candidates[0].color == "bg-blue-500"
    assert candidates[0].order_id is None


def test_higher_priority_batch_updates_existing():
    orders = [existing(7, "X100", "instalacion")]
    candidates = reconcile_import("X100,Jane,15/08/2025", "pickup", orders)
    assert len(candidates) == 1
    assert candidates[0].status == STATUS_UPDATE
    assert candidates[0].order_id == 7
    assert candidates[0].type is OrderType.pickup


def test_lower_priority_batch_is_dropped():
    orders = [existing(7, "X100", "instalacion")]
    assert reconcile_import("X100,Jane,15/08/2025", "partial", orders) == []


def test_equal_priority_is_dropped():
    orders = [existing(7, "X100", "completo")]
    assert reconcile_import("X100,Jane,15/08/2025", "completo", orders) == []


def test_existing_unknown_type_is_superseded():
    orders = [existing(3, "L1", "legacy")]
    candidates = reconcile_import("L1 Ann 01/01/2026", "parcial", orders)
    assert candidates[0].status == STATUS_UPDATE


def test_bad_lines_are_skipped_not_fatal():
    text = "\n".join([
        "Pedido,Cliente,Fecha entrega",
        "A1,Alice,31/02/2025",
        "garbage",
        "",
        "B2,Bob,01/03/2025",
    ])
    report = analyze_import(text, "recogida", [])
    assert [c.order_number for c in report.candidates] == ["B2"]
    assert [(s.line_number, s.reason) for s in report.skipped] == [
        (2, "invalid_date"),
        (3, "invalid_line_format"),
    ]


def test_oversized_year_is_skipped_not_fatal():
    text = "A1,Alice,01/01/9999999999\nC3,Carl,01/01/" + "9" * 5000 + "\nB2,Bob,02/09/2025"
    report = analyze_import(text, "parcial", [])
    assert [c.order_number for c in report.candidates] == ["B2"]
    assert [(s.line_number, s.reason) for s in report.skipped] == [
        (1, "invalid_date"),
        (2, "invalid_date"),
    ]


def test_only_newline_separates_lines():
    candidates = reconcile_import("A1,Ali\x0bce Smith,01/09/2025\nB2,Bob,02/09/2025", "parcial", [])
    assert [c.order_number for c in candidates] == ["A1", "B2"]
    assert candidates[0].customer_name == "Ali\x0bce Smith"


def test_windows_line_endings():
    candidates = reconcile_import("A1,Alice,01/09/2025\r\nB2,Bob,02/09/2025\r\n", "parcial", [])
    assert [c.delivery_date for c in candidates] == [date(2025, 9, 1), date(2025, 9, 2)]


def test_source_file_is_recorded():
    candidates = reconcile_import("A1,Alice,01/09/2025", "parcial", [], source_file="batch.txt")
    assert candidates[0].source_file == "batch.txt"
    assert candidates[0].fields()["source_file"] == "batch.txt"
    assert candidates[0].fields()["type"] == "parcial"


def test_same_batch_duplicates_use_original_snapshot():
    text = "D1,First,01/09/2025\nD1,Second,02/09/2025"
    candidates = reconcile_import(text, "completo", [])
    assert [(c.customer_name, c.status) for c in candidates] == [("First", STATUS_NEW), ("Second", STATUS_NEW)]


def test_snapshot_is_taken_at_call_time():
    orders = [existing(1, "S1", "parcial")]
    report = analyze_import("S1,Sam,01/09/2025", "recogida", orders)
    orders.append(existing(2, "S2", "recogida"))
    assert report.candidates[0].order_id == 1


def test_first_match_wins_for_duplicate_existing_numbers():
    orders = [existing(1, "Z", "parcial"), existing(2, "Z", "recogida")]
    candidates = reconcile_import("Z,Zed,01/09/2025", "completo", orders)
    assert candidates[0].order_id == 1


def test_matching_is_exact():
    orders = [existing(1, "0042", "parcial")]
    candidates = reconcile_import("42,Case,01/09/2025", "completo", orders)
    assert candidates[0].status == STATUS_NEW


def test_reimport_is_idempotent():
    text = "A1,Alice,01/09/2025\nB2,Bob,02/09/2025"
    first = reconcile_import(text, "posdatado", [])
    imported = [existing(i, c.order_number, c.type.value) for i, c in enumerate(first, start=1)]
    assert reconcile_import(text, "posdatado", imported) == []


def test_empty_input():
    report = analyze_import("   \n\n", "parcial", [])
    assert report.candidates == []
    with pytest.raises(EmptyImportResult):
        report.ensure_not_empty()


def test_unknown_batch_type_is_rejected():
    with pytest.raises(UnknownOrderType):
        reconcile_import("A1,Alice,01/09/2025", "express", [])


def test_counts():
    orders = [existing(9, "U1", "parcial")]
    report = analyze_import("U1,U,01/09/2025\nN1,N,01/09/2025", "recogida", orders)
    assert report.new_count == 1
    assert report.update_count == 1
    assert report.ensure_not_empty() is report
