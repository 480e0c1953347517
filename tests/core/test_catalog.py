"""Catalog Aggregator — build_catalog, build_order_view, find_order.

Tests:
    - One catalog entry per pizza type, in input order, with its size map
    - Duplicate (type, size) rows: last write wins
    - Order view resolves names/prices and only includes the order's lines
    - Missing pizza / pizza type raises ReferentialGapError
    - find_order returns the exact entity or raises ResourceNotFoundError
"""

from decimal import Decimal

import pytest

from pizzeria.core.catalog import (
    build_catalog, build_catalog_entry, build_order_view, find_order, image_path,
)
from pizzeria.core.domain_types import (
    Order, OrderDetail, OrderId, Pizza, PizzaId, PizzaType, PizzaTypeId,
)
from pizzeria.core.errors import ReferentialGapError, ResourceNotFoundError


def _type(type_id: str, name: str = "Margherita") -> PizzaType:
    return PizzaType(PizzaTypeId(type_id), name, "Classic", "Tomato, Mozzarella")


def _pizza(pizza_id: str, type_id: str, size: str, price: str) -> Pizza:
    return Pizza(PizzaId(pizza_id), PizzaTypeId(type_id), size, Decimal(price))


def _detail(detail_id: int, order_id: int, pizza_id: str, quantity: int) -> OrderDetail:
    return OrderDetail(detail_id, OrderId(order_id), PizzaId(pizza_id), quantity)


@pytest.fixture
def pizza_types():
    return [_type("A", "Margherita"), _type("B", "Diavola"), _type("C", "Funghi")]


@pytest.fixture
def pizzas():
    return [
        _pizza("a_s", "A", "S", "9.50"),
        _pizza("a_l", "A", "L", "14.25"),
        _pizza("b_m", "B", "M", "12.00"),
    ]


# ─── build_catalog ──────────────────────────────────────────────

def test_single_type_single_size_example():
    catalog = build_catalog(
        [_type("A", "Margherita")], [_pizza("p1", "A", "S", "9.50")],
    )
    assert len(catalog) == 1
    assert catalog[0].id == "A"
    assert catalog[0].name == "Margherita"
    assert catalog[0].sizes == {"S": Decimal("9.50")}


def test_one_entry_per_type_in_input_order(pizza_types, pizzas):
    catalog = build_catalog(pizza_types, pizzas)
    assert [e.id for e in catalog] == ["A", "B", "C"]


def test_sizes_are_union_of_matching_rows(pizza_types, pizzas):
    catalog = {e.id: e for e in build_catalog(pizza_types, pizzas)}
    assert catalog["A"].sizes == {"S": Decimal("9.50"), "L": Decimal("14.25")}
    assert catalog["B"].sizes == {"M": Decimal("12.00")}


def test_type_without_pizzas_gets_empty_sizes(pizza_types, pizzas):
    catalog = {e.id: e for e in build_catalog(pizza_types, pizzas)}
    assert catalog["C"].sizes == {}


def test_duplicate_size_last_write_wins():
    pizzas = [
        _pizza("a_s_old", "A", "S", "9.00"),
        _pizza("a_s_new", "A", "S", "10.00"),
    ]
    [entry] = build_catalog([_type("A")], pizzas)
    assert entry.sizes == {"S": Decimal("10.00")}


def test_description_is_ingredients_and_image_is_derived(pizza_types, pizzas):
    entry = build_catalog(pizza_types, pizzas)[0]
    assert entry.description == "Tomato, Mozzarella"
    assert entry.image == "/public/pizzas/A.webp"


def test_image_path_normalizes_separators():
    assert image_path("bbq_ckn", "/static/img/", ".png") == "/static/img/bbq_ckn.png"


def test_build_catalog_entry_ignores_other_types(pizzas):
    entry = build_catalog_entry(_type("B"), pizzas)
    assert entry.sizes == {"M": Decimal("12.00")}


def test_empty_inputs_give_empty_catalog():
    assert build_catalog([], []) == []


# ─── find_order ─────────────────────────────────────────────────

def test_find_order_returns_matching_entity():
    orders = [Order(OrderId(1), "2015-01-01", "11:38:36"), Order(OrderId(2), "2015-01-01", "11:57:40")]
    assert find_order(orders, 2) is orders[1]


def test_find_order_absent_id_raises_not_found():
    orders = [Order(OrderId(1), "2015-01-01", "11:38:36"), Order(OrderId(2), "2015-01-01", "11:57:40")]
    with pytest.raises(ResourceNotFoundError) as exc_info:
        find_order(orders, 3)
    assert exc_info.value.http_status == 404
    assert exc_info.value.resource_id == 3


def test_find_order_in_empty_collection_raises_not_found():
    with pytest.raises(ResourceNotFoundError):
        find_order([], 1)


# ─── build_order_view ───────────────────────────────────────────

def test_order_view_resolves_lines(pizza_types, pizzas):
    order = Order(OrderId(7), "2015-02-01", "12:00:00")
    details = [_detail(1, 7, "a_s", 2), _detail(2, 7, "b_m", 1)]
    view = build_order_view(order, details, pizzas, pizza_types)

    assert view.order is order
    assert [(line.quantity, line.pizza.id) for line in view.items] == [
        (2, "a_s"), (1, "b_m"),
    ]
    first = view.items[0].pizza
    assert first.name == "Margherita"
    assert first.size == "S"
    assert first.price == Decimal("9.50")


def test_order_view_only_includes_lines_of_that_order(pizza_types, pizzas):
    order = Order(OrderId(7), "2015-02-01", "12:00:00")
    details = [
        _detail(1, 7, "a_s", 2),
        _detail(2, 8, "a_l", 5),
        _detail(3, 7, "a_l", 4),
    ]
    view = build_order_view(order, details, pizzas, pizza_types)
    matching = sum(d.quantity for d in details if d.order_id == 7)
    assert view.total_quantity == matching == 6


def test_order_view_total_is_price_times_quantity(pizza_types, pizzas):
    order = Order(OrderId(7), "2015-02-01", "12:00:00")
    details = [_detail(1, 7, "a_s", 2), _detail(2, 7, "a_l", 1)]
    view = build_order_view(order, details, pizzas, pizza_types)
    assert view.total == Decimal("33.25")


def test_order_without_details_is_empty(pizza_types, pizzas):
    order = Order(OrderId(9), "2015-02-01", "12:00:00")
    view = build_order_view(order, [], pizzas, pizza_types)
    assert view.items == []
    assert view.total == Decimal("0")
    assert view.total_quantity == 0


def test_missing_pizza_raises_referential_gap(pizza_types, pizzas):
    order = Order(OrderId(7), "2015-02-01", "12:00:00")
    details = [_detail(5, 7, "calzone_xl", 1)]
    with pytest.raises(ReferentialGapError) as exc_info:
        build_order_view(order, details, pizzas, pizza_types)
    assert exc_info.value.entity == "Pizza"
    assert exc_info.value.missing_id == "calzone_xl"
    assert exc_info.value.http_status == 500


def test_missing_pizza_type_raises_referential_gap(pizza_types):
    order = Order(OrderId(7), "2015-02-01", "12:00:00")
    orphan = [_pizza("z_s", "Z", "S", "8.00")]
    with pytest.raises(ReferentialGapError) as exc_info:
        build_order_view(order, [_detail(1, 7, "z_s", 1)], orphan, pizza_types)
    assert exc_info.value.entity == "PizzaType"
    assert exc_info.value.missing_id == "Z"


def test_dangling_reference_in_other_order_is_ignored(pizza_types, pizzas):
    order = Order(OrderId(7), "2015-02-01", "12:00:00")
    details = [_detail(1, 7, "a_s", 1), _detail(2, 8, "calzone_xl", 1)]
    view = build_order_view(order, details, pizzas, pizza_types)
    assert len(view.items) == 1
