"""Option groups offered on the product detail screen.

A customer's choice is recorded as a list of ``CartOptionSelection`` entries
(group title, option label, price delta) so that cart lines stay readable
even if option ids change later.
"""

from typing import Literal

from menu.product.catalog import is_beverage_category
from shared.model import DomainModel


class Option(DomainModel):
    id: str
    label: str
    price_delta: int | None = None


class OptionGroup(DomainModel):
    id: str
    title: str
    type: Literal["single", "multiple"]
    options: list[Option]
    default_option_id: str | None = None

    def option(self, option_id: str) -> Option | None:
        return next((o for o in self.options if o.id == option_id), None)

    def option_by_label(self, label: str) -> Option | None:
        return next((o for o in self.options if o.label == label), None)


class CartOptionSelection(DomainModel):
    group: str
    label: str
    price_delta: int | None = None


def build_option_groups(category: str) -> list[OptionGroup]:
    if is_beverage_category(category):
        return [
            OptionGroup(
                id="size",
                title="Ukuran",
                type="single",
                default_option_id="regular",
                options=[
                    Option(id="small", label="Small", price_delta=-3000),
                    Option(id="regular", label="Regular"),
                    Option(id="large", label="Large", price_delta=5000),
                ],
            ),
            OptionGroup(
                id="ice",
                title="Level Es",
                type="single",
                default_option_id="normal",
                options=[
                    Option(id="no-ice", label="No Ice"),
                    Option(id="less-ice", label="Less Ice"),
                    Option(id="normal", label="Normal"),
                    Option(id="extra-ice", label="Extra Ice"),
                ],
            ),
            OptionGroup(
                id="sugar",
                title="Level Gula",
                type="single",
                default_option_id="normal",
                options=[
                    Option(id="no-sugar", label="No Sugar"),
                    Option(id="less-sugar", label="Less Sugar"),
                    Option(id="normal", label="Normal"),
                    Option(id="extra-sugar", label="Extra Sugar"),
                ],
            ),
            OptionGroup(
                id="addons",
                title="Tambahan",
                type="multiple",
                options=[
                    Option(id="boba", label="Boba", price_delta=8000),
                    Option(id="extra-shot", label="Extra Shot", price_delta=10000),
                    Option(id="whipped-cream", label="Whipped Cream", price_delta=5000),
                    Option(id="caramel-drizzle", label="Caramel Drizzle", price_delta=5000),
                ],
            ),
        ]

    return [
        OptionGroup(
            id="size",
            title="Ukuran",
            type="single",
            default_option_id="regular",
            options=[
                Option(id="small", label="Small"),
                Option(id="regular", label="Regular"),
                Option(id="large", label="Large"),
            ],
        ),
        OptionGroup(
            id="addons",
            title="Tambahan",
            type="multiple",
            options=[
                Option(id="gift-wrap", label="Gift Wrap", price_delta=10000),
                Option(id="engrave", label="Engrave", price_delta=15000),
            ],
        ),
    ]


def resolve_selection(
    groups: list[OptionGroup],
    singles: dict[str, str] | None = None,
    multiples: dict[str, list[str]] | None = None,
) -> list[CartOptionSelection]:
    """Turn option ids picked per group into ordered cart selections.

    Single groups without a pick use their default option. Unknown ids in a
    multiple group are kept with the id as label and no price delta.
    """
    singles = singles or {}
    multiples = multiples or {}
    selections: list[CartOptionSelection] = []

    for group in groups:
        if group.type == "single":
            option = group.option(singles.get(group.id) or group.default_option_id or "")
            if option is None:
                continue
            selections.append(CartOptionSelection(group=group.title, label=option.label, price_delta=option.price_delta))
            continue

        for option_id in dict.fromkeys(multiples.get(group.id) or []):
            option = group.option(option_id)
            selections.append(
                CartOptionSelection(
                    group=group.title,
                    label=option.label if option else option_id,
                    price_delta=option.price_delta if option else None,
                )
            )

    return selections


def selection_from_options(
    groups: list[OptionGroup], options: list[CartOptionSelection]
) -> tuple[dict[str, str], dict[str, list[str]]]:
    """Map stored selections back to option ids, ignoring unknown entries."""
    singles = {group.id: group.default_option_id for group in groups if group.type == "single" and group.default_option_id}
    multiples: dict[str, list[str]] = {group.id: [] for group in groups if group.type == "multiple"}

    for selection in options:
        group = next((g for g in groups if g.title == selection.group), None)
        if group is None:
            continue
        option = group.option_by_label(selection.label)
        if option is None:
            continue
        if group.type == "single":
            singles[group.id] = option.id
        elif option.id not in multiples[group.id]:
            multiples[group.id].append(option.id)

    return singles, multiples


def add_on_total(options: list[CartOptionSelection]) -> int:
    return sum(option.price_delta or 0 for option in options)
