"""Tests for option groups and resolving a customer's picks."""

from menu.product.options import (
    CartOptionSelection,
    add_on_total,
    build_option_groups,
    resolve_selection,
    selection_from_options,
)


class TestBuildOptionGroups:
    def test_beverage_groups(self):
        groups = build_option_groups("pistachio-series")
        assert [group.id for group in groups] == ["size", "ice", "sugar", "addons"]
        size = groups[0]
        assert size.default_option_id == "regular"
        assert size.option("small").price_delta == -3000
        assert size.option("large").price_delta == 5000

    def test_merchandise_groups(self):
        groups = build_option_groups("merchandise")
        assert [group.id for group in groups] == ["size", "addons"]
        assert groups[1].option("engrave").price_delta == 15000


class TestResolveSelection:
    def test_defaults_for_single_groups(self):
        options = resolve_selection(build_option_groups("matcha-club"))
        assert [(o.group, o.label) for o in options] == [
            ("Ukuran", "Regular"),
            ("Level Es", "Normal"),
            ("Level Gula", "Normal"),
        ]

    def test_picked_options_with_price_deltas(self):
        options = resolve_selection(
            build_option_groups("matcha-club"),
            singles={"size": "large", "ice": "less-ice"},
            multiples={"addons": ["boba", "boba", "extra-shot"]},
        )
        labels = [o.label for o in options]
        assert labels == ["Large", "Less Ice", "Normal", "Boba", "Extra Shot"]
        assert add_on_total(options) == 5000 + 8000 + 10000

    def test_unknown_multiple_option_keeps_id_as_label(self):
        options = resolve_selection(build_option_groups("merchandise"), multiples={"addons": ["sticker"]})
        assert options[-1] == CartOptionSelection(group="Tambahan", label="sticker", price_delta=None)


class TestSelectionFromOptions:
    def test_maps_labels_back_to_ids(self):
        groups = build_option_groups("matcha-club")
        options = resolve_selection(groups, singles={"size": "small"}, multiples={"addons": ["boba"]})
        singles, multiples = selection_from_options(groups, options)
        assert singles["size"] == "small"
        assert multiples == {"addons": ["boba"]}

    def test_unknown_entries_are_ignored(self):
        groups = build_option_groups("matcha-club")
        singles, multiples = selection_from_options(
            groups, [CartOptionSelection(group="Topping", label="Keju"), CartOptionSelection(group="Ukuran", label="XL")]
        )
        assert singles["size"] == "regular"
        assert multiples == {"addons": []}
