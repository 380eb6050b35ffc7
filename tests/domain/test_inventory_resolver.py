"""
🧪 test_inventory_resolver.py - unit-тести резолвера наявності колір × розмір.

Перевіряє:
- Сценарії з кольорами/розмірами без залишку
- Порядок та кількість елементів у результатах
- Пріоритет повідомлень validate_selection
- Відсутність мутацій вхідного товару
"""

import copy
from itertools import product as cartesian

import pytest

from storefront.domain.inventory import (
    ColorAvailability,
    Combination,
    IInventoryResolver,
    InventoryResolver,
    SelectionValidation,
    SizeAvailability,
    all_combinations,
    colors_for_size,
    find_color,
    find_size,
    is_available,
    lookup_stock,
    sizes_for_color,
    stock_for,
    validate_selection,
)
from storefront.domain.products import Product
from storefront.shared.utils.immutables import freeze


SCENARIO_A = {
    "colors": [{"color": "Black", "stock": 5}, {"color": "White", "stock": 0}],
    "sizes": [{"size": "9", "stock": 3}, {"size": "10", "stock": 0}],
}

PRODUCTS = [
    SCENARIO_A,
    {
        "colors": [{"color": "Navy", "stock": 1}, {"color": "Olive", "stock": 4}, {"color": "Sand", "stock": 0}],
        "sizes": [{"size": "S", "stock": 2}, {"size": "M", "stock": 0}, {"size": "L", "stock": 9}],
    },
    {"colors": [{"color": "Black", "stock": 0}], "sizes": [{"size": "42", "stock": 10}]},
    {"colors": [], "sizes": [{"size": "9", "stock": 1}]},
]


def _pairs_with_stock(record):
    return sum(
        1
        for color, size in cartesian(record["colors"], record["sizes"])
        if min(color["stock"], size["stock"]) > 0
    )


def test_resolver_satisfies_protocol():
    assert isinstance(InventoryResolver(), IInventoryResolver)


# ================================
# 📏 sizes_for_color / colors_for_size
# ================================
def test_sizes_for_color_uses_min_of_color_and_size_stock(sneaker_record):
    result = sizes_for_color(sneaker_record, "Black")

    assert result == [
        SizeAvailability(size="9", stock=3, available_stock=3, is_available=True),
        SizeAvailability(size="10", stock=0, available_stock=0, is_available=False),
        SizeAvailability(size="11", stock=7, available_stock=5, is_available=True),
    ]


def test_sizes_for_color_out_of_stock_color_marks_every_size_unavailable(sneaker_record):
    result = sizes_for_color(sneaker_record, "White")

    assert [item.size for item in result] == ["9", "10", "11"]
    assert all(item.available_stock == 0 and not item.is_available for item in result)


@pytest.mark.parametrize("record", PRODUCTS)
def test_sizes_for_color_returns_one_entry_per_size_in_order(record):
    for color in record["colors"]:
        result = sizes_for_color(record, color["color"])
        assert [item.size for item in result] == [size["size"] for size in record["sizes"]]


@pytest.mark.parametrize("record", PRODUCTS)
def test_colors_for_size_returns_one_entry_per_color_in_order(record):
    for size in record["sizes"]:
        result = colors_for_size(record, size["size"])
        assert [item.color for item in result] == [color["color"] for color in record["colors"]]


def test_colors_for_size_carries_display_metadata(sneaker_record):
    result = colors_for_size(sneaker_record, "11")

    assert result[0] == ColorAvailability(
        color="Black",
        stock=5,
        available_stock=5,
        is_available=True,
        hexcode="#000000",
        images=("black-1.jpg", "black-2.jpg"),
    )
    assert [(item.color, item.available_stock) for item in result] == [("Black", 5), ("White", 0), ("Red", 2)]
    assert result[2].hexcode is None


def test_colors_for_size_zero_stock_size(sneaker_record):
    result = colors_for_size(sneaker_record, "10")

    assert len(result) == 3
    assert not any(item.is_available for item in result)


@pytest.mark.parametrize(
    "record",
    [
        {},
        {"sizes": [{"size": "9", "stock": 3}]},
        {"colors": [{"color": "Black", "stock": 3}]},
        {"colors": None, "sizes": None},
        None,
    ],
)
def test_missing_arrays_degrade_to_empty(record):
    assert sizes_for_color(record, "Black") == []
    assert colors_for_size(record, "9") == []
    assert all_combinations(record) == []
    assert stock_for(record, "Black", "9") == 0


def test_unknown_names_degrade_to_empty(sneaker_record):
    assert sizes_for_color(sneaker_record, "Purple") == []
    assert sizes_for_color(sneaker_record, "black") == []          # точний збіг, регістр важливий
    assert colors_for_size(sneaker_record, "12") == []
    assert colors_for_size(sneaker_record, None) == []


# ================================
# 🧮 stock_for / is_available / lookup_stock
# ================================
def test_scenario_a_stock_for():
    assert stock_for(SCENARIO_A, "Black", "9") == 3
    assert stock_for(SCENARIO_A, "Black", "10") == 0
    assert stock_for(SCENARIO_A, "White", "9") == 0


@pytest.mark.parametrize(
    ("color", "size"),
    [(None, "9"), ("Black", None), ("", "9"), ("Black", ""), ("Purple", "9"), ("Black", "12")],
)
def test_stock_for_falsy_or_unknown_names_is_zero(color, size):
    assert stock_for(SCENARIO_A, color, size) == 0
    assert is_available(SCENARIO_A, color, size) is False


@pytest.mark.parametrize("record", PRODUCTS)
def test_is_available_matches_positive_stock(record):
    names_c = [c["color"] for c in record["colors"]] + ["Nope"]
    names_s = [s["size"] for s in record["sizes"]] + ["Nope"]
    for color, size in cartesian(names_c, names_s):
        assert is_available(record, color, size) == (stock_for(record, color, size) > 0)


def test_lookup_stock_distinguishes_missing_from_zero():
    assert lookup_stock(SCENARIO_A, "Black", "10") == 0
    assert lookup_stock(SCENARIO_A, "Purple", "10") is None
    assert lookup_stock(SCENARIO_A, None, "10") is None
    assert lookup_stock({"sizes": []}, "Black", "9") is None


def test_find_color_and_size_return_entries():
    resolver = InventoryResolver()

    assert resolver.find_color(SCENARIO_A, "White") == {"color": "White", "stock": 0}
    assert resolver.find_size(SCENARIO_A, "10") == {"size": "10", "stock": 0}
    assert resolver.find_color(SCENARIO_A, "Purple") is None
    assert resolver.find_size({}, "10") is None


def test_module_find_shortcuts_match_resolver():
    assert find_color(SCENARIO_A, "Black") == {"color": "Black", "stock": 5}
    assert find_size(SCENARIO_A, "9") == {"size": "9", "stock": 3}
    assert find_color(SCENARIO_A, None) is None
    assert find_size(SCENARIO_A, "") is None


@pytest.mark.parametrize("selection", [None, ""])
def test_empty_selection_never_matches_nameless_entries(selection):
    record = {"colors": [{"stock": 3}], "sizes": [{"stock": 4}]}

    assert sizes_for_color(record, selection) == []
    assert colors_for_size(record, selection) == []


def test_numeric_string_stock_resolves_like_ingested_product():
    record = {
        "_id": "p-1",
        "name": "Runner",
        "price": 10,
        "colors": [{"color": "Black", "stock": "4.0"}],
        "sizes": [{"size": "9", "stock": 10}],
    }

    assert stock_for(record, "Black", "9") == 4
    assert stock_for(Product.from_record(record), "Black", "9") == 4


def test_duplicate_names_first_entry_wins():
    record = {
        "colors": [{"color": "Black", "stock": 1}, {"color": "Black", "stock": 8}],
        "sizes": [{"size": "9", "stock": 5}],
    }

    assert stock_for(record, "Black", "9") == 1


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("4", 4),
        ("4.0", 4),
        ("2.5", 2),
        (" 7 ", 7),
        (-3, 0),
        ("abc", 0),
        ("NaN", 0),
        ("Infinity", 0),
        (None, 0),
        (2.9, 2),
        (True, 0),
    ],
)
def test_irregular_stock_values_are_read_defensively(raw, expected):
    record = {"colors": [{"color": "Black", "stock": raw}], "sizes": [{"size": "9", "stock": 10}]}

    assert stock_for(record, "Black", "9") == expected


# ================================
# 🧩 all_combinations
# ================================
def test_scenario_a_combinations():
    assert all_combinations(SCENARIO_A) == [
        Combination(color="Black", size="9", stock=3, color_hexcode=None, color_images=()),
    ]


def test_combinations_are_color_major_and_carry_color_metadata(sneaker_record):
    result = all_combinations(sneaker_record)

    assert [(c.color, c.size, c.stock) for c in result] == [
        ("Black", "9", 3),
        ("Black", "11", 5),
        ("Red", "9", 2),
        ("Red", "11", 2),
    ]
    assert result[0].color_hexcode == "#000000"
    assert result[0].color_images == ("black-1.jpg", "black-2.jpg")


@pytest.mark.parametrize("record", PRODUCTS)
def test_combinations_count_and_positive_stock(record):
    result = all_combinations(record)

    assert len(result) == _pairs_with_stock(record)
    assert all(item.stock > 0 for item in result)


# ================================
# ✅ validate_selection
# ================================
def test_scenario_b_product_without_colors():
    record = {"sizes": [{"size": "9", "stock": 3}]}

    assert sizes_for_color(record, "Black") == []
    assert validate_selection(record, None, "9").is_valid is True
    assert validate_selection(record, None, None) == SelectionValidation(False, "Please select a size")
    assert validate_selection({}, None, None).is_valid is True


def test_scenario_c_color_prompt_precedes_size_prompt(sneaker_record):
    result = validate_selection(sneaker_record, None, None)

    assert result == SelectionValidation(is_valid=False, message="Please select a color")


def test_size_prompt_after_color_chosen(sneaker_record):
    assert validate_selection(sneaker_record, "Black", None).message == "Please select a size"


def test_scenario_d_out_of_stock_message_names_the_pair():
    result = validate_selection(SCENARIO_A, "Black", "10")

    assert result.is_valid is False
    assert "Black" in result.message and "10" in result.message
    assert "out of stock" in result.message


def test_valid_selection(sneaker_record):
    assert validate_selection(sneaker_record, "Red", "11").to_dict() == {
        "isValid": True,
        "message": "Selection is valid",
    }


# ================================
# 🧊 Чистота та серіалізація
# ================================
@pytest.mark.parametrize("record", PRODUCTS)
def test_operations_do_not_mutate_and_are_idempotent(record):
    snapshot = copy.deepcopy(record)
    resolver = InventoryResolver()
    color = record["colors"][0]["color"] if record["colors"] else None
    size = record["sizes"][0]["size"]

    first = (
        resolver.sizes_for_color(record, color),
        resolver.colors_for_size(record, size),
        resolver.all_combinations(record),
        resolver.validate_selection(record, color, size),
    )
    second = (
        resolver.sizes_for_color(record, color),
        resolver.colors_for_size(record, size),
        resolver.all_combinations(record),
        resolver.validate_selection(record, color, size),
    )

    assert first == second
    assert record == snapshot


def test_frozen_record_is_accepted(sneaker_record):
    frozen = freeze(sneaker_record)

    assert all_combinations(frozen) == all_combinations(sneaker_record)
    assert stock_for(frozen, "Black", "11") == 5


def test_product_entity_and_raw_record_resolve_identically(sneaker_record):
    entity = Product.from_record(sneaker_record)

    assert sizes_for_color(entity, "Black") == sizes_for_color(sneaker_record, "Black")
    assert colors_for_size(entity, "9") == colors_for_size(sneaker_record, "9")
    assert all_combinations(entity) == all_combinations(sneaker_record)


def test_to_dict_uses_ui_field_names(sneaker_record):
    size_item = sizes_for_color(sneaker_record, "Black")[0]
    color_item = colors_for_size(sneaker_record, "9")[0]
    combination = all_combinations(sneaker_record)[0]

    assert size_item.to_dict() == {"size": "9", "stock": 3, "availableStock": 3, "isAvailable": True}
    assert color_item.to_dict()["availableStock"] == 3
    assert color_item.to_dict()["images"] == ["black-1.jpg", "black-2.jpg"]
    assert combination.to_dict() == {
        "color": "Black",
        "size": "9",
        "stock": 3,
        "colorHexcode": "#000000",
        "colorImages": ["black-1.jpg", "black-2.jpg"],
    }
