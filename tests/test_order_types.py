import pytest

from orderboard.core.errors import UnknownOrderType
from orderboard.core.order_types import (
    FALLBACK_COLOR,
    OrderType,
    color_of,
    hex_color_of,
    priority_of,
    supersedes,
)


def test_priority_table():
    assert priority_of(OrderType.pickup) == 5
    assert priority_of(OrderType.postdated) == 4
    assert priority_of(OrderType.installation) == 3
    assert priority_of(OrderType.complete) == 2
    assert priority_of(OrderType.partial) == 1
    assert priority_of("unknown") == 0
    assert priority_of(None) == 0


def test_labels_and_names_are_both_accepted():
    assert OrderType.parse("recogida") is OrderType.pickup
    assert OrderType.parse("PICKUP") is OrderType.pickup
    assert OrderType.parse(" Instalacion ") is OrderType.installation
    assert priority_of("posdatado") == 4


def test_parse_rejects_unknown():
    with pytest.raises(UnknownOrderType):
        OrderType.parse("express")
    with pytest.raises(ValueError):
        OrderType.parse(None)


def test_supersedes_is_strict():
    assert supersedes("pickup", "installation")
    assert supersedes(OrderType.partial, "legacy-type")
    assert not supersedes("complete", "complete")
    assert not supersedes("partial", "pickup")


def test_colors():
    assert color_of(OrderType.installation) == "bg-blue-500"
    assert color_of("recogida") == "bg-red-500"
    assert color_of("something else") == FALLBACK_COLOR
    assert hex_color_of("parcial") == "#A3E635"
    assert hex_color_of("nope") == "#9CA3AF"


def test_every_type_has_priority_and_color():
    for order_type in OrderType:
        assert priority_of(order_type) > 0
        assert color_of(order_type) != FALLBACK_COLOR
