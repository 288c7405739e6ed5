from __future__ import annotations

import random

from skinsync.domain.ordering import collation_key, numeric_paint_index, skin_sort_key, sort_skins
from tests.helpers.skins import make_skin_item


def test_sort_orders_by_weapon_id_with_missing_first() -> None:
    items = [
        make_skin_item("weapon_m4a1", "1"),
        make_skin_item(None, "1"),
        make_skin_item("weapon_ak47", "1"),
    ]

    ordered = sort_skins(items)

    assert [item.weapon.id for item in ordered] == [None, "weapon_ak47", "weapon_m4a1"]


def test_sort_orders_paint_numerically_with_missing_first_and_text_last() -> None:
    items = [
        make_skin_item("w1", "abc"),
        make_skin_item("w1", "10"),
        make_skin_item("w1", None),
        make_skin_item("w1", "2"),
        make_skin_item("w1", "-3"),
    ]

    ordered = sort_skins(items)

    assert [item.paint_index for item in ordered] == [None, "-3", "2", "10", "abc"]


def test_sort_breaks_numeric_ties_on_raw_paint_string() -> None:
    items = [make_skin_item("w1", "5.0"), make_skin_item("w1", "zeta"), make_skin_item("w1", "5")]

    ordered = sort_skins(items)

    assert [item.paint_index for item in ordered] == ["5", "5.0", "zeta"]


def test_sort_orders_text_paint_indices_lexicographically() -> None:
    items = [make_skin_item("w1", "beta"), make_skin_item("w1", "alpha")]

    assert [item.paint_index for item in sort_skins(items)] == ["alpha", "beta"]


def test_sort_orders_names_like_a_locale_collation() -> None:
    names = ["Zebra", "éclair", "apple", "Banana", "eclair", None, "Apple"]
    items = [make_skin_item("w1", "1", name) for name in names]

    ordered = sort_skins(items)

    assert [item.name for item in ordered] == [
        None,
        "apple",
        "Apple",
        "Banana",
        "eclair",
        "éclair",
        "Zebra",
    ]


def test_sort_does_not_mutate_input() -> None:
    items = [make_skin_item("w2", "1"), make_skin_item("w1", "1")]
    before = list(items)

    ordered = sort_skins(items)

    assert items == before
    assert ordered is not items


def test_sorted_output_has_no_adjacent_inversions() -> None:
    rng = random.Random(20240611)
    weapons = [None, "weapon_ak47", "weapon_awp", "weapon_knife"]
    paints = [None, "0", "1", "7", "12", "100", "1e2", "vanilla", "5.5"]
    names = ["", "Asiimov", "asiimov", "Ödland", "Redline", None]
    items = [
        make_skin_item(rng.choice(weapons), rng.choice(paints), rng.choice(names))
        for _ in range(200)
    ]

    ordered = sort_skins(items)

    for earlier, later in zip(ordered, ordered[1:], strict=False):
        assert skin_sort_key(earlier) <= skin_sort_key(later)


def test_numeric_paint_index_rejects_non_finite_values() -> None:
    assert numeric_paint_index("12") == 12
    assert numeric_paint_index(" 7 ") == 7
    assert numeric_paint_index("nan") is None
    assert numeric_paint_index("inf") is None
    assert numeric_paint_index("1_000") is None
    assert numeric_paint_index("abc") is None


def test_numeric_paint_index_only_reads_ascii_digits() -> None:
    assert numeric_paint_index("\u0661\u0662") is None
    assert numeric_paint_index("\uff11\uff12") is None


def test_collation_key_prefers_lowercase_on_case_only_difference() -> None:
    assert collation_key("a") < collation_key("A")
    assert collation_key("A") < collation_key("b")
