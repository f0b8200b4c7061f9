from dataclasses import dataclass

import pytest

from menu.ordering import (
    MenuOrdering, append_item, array_move, flatten, group_menu_items,
    move_category, move_item, move_subcategory, reconcile_ordering,
    remove_item, slugify,
)


@dataclass
class Item:
    item_id: str
    title: str
    category: str
    subcategory: str = ''


@pytest.fixture
def menu():
    return [
        Item('c', 'Pinot Noir', 'Drink', 'Red Wine'),
        Item('a', 'Steak', 'Food', 'Mains'),
        Item('b', 'Burger', 'Food', 'Mains'),
        Item('d', 'Fries', 'Food', 'Sides'),
        Item('e', 'Lager', 'Drink', 'Beer'),
    ]


class TestSlugify:
    def test_case_and_whitespace_collapse(self):
        assert slugify("Food") == slugify("food") == slugify("  Food  ") == "food"

    def test_punctuation_and_spaces(self):
        assert slugify("Red  Wine & Sake!") == "red-wine-sake"
        assert slugify("--Soft -- Drinks--") == "soft-drinks"

    def test_empty(self):
        assert slugify("") == ""
        assert slugify(None) == ""


class TestGrouping:
    def test_items_sorted_by_title_without_ordering(self):
        items = [Item('a', 'Steak', 'Food', 'Mains'), Item('b', 'Burger', 'Food', 'Mains')]

        categories = group_menu_items(items)

        assert [c.id for c in categories] == ['food']
        assert categories[0].label == 'Food'
        assert [s.id for s in categories[0].sub_categories] == ['mains']
        assert [i.item_id for i in categories[0].sub_categories[0].items] == ['b', 'a']

    def test_categories_and_subcategories_sorted_by_label(self, menu):
        categories = group_menu_items(menu)

        assert [c.id for c in categories] == ['drink', 'food']
        assert [s.id for s in categories[0].sub_categories] == ['beer', 'red-wine']

    def test_flatten_yields_input_ids(self, menu):
        ordering = MenuOrdering(category_order=['food', 'missing', 'food'])

        ids = [item.item_id for item in flatten(group_menu_items(menu, ordering))]

        assert sorted(ids) == sorted(item.item_id for item in menu)
        assert len(ids) == len(menu)

    def test_persisted_order_wins_and_unknown_entries_ignored(self, menu):
        ordering = MenuOrdering(
            category_order=['ghost', 'food'],
            subcategory_order={'food': ['sides', 'mains']},
            item_order={'food::mains': ['a', 'zzz', 'a']},
        )

        categories = group_menu_items(menu, ordering)

        assert [c.id for c in categories] == ['food', 'drink']
        assert [s.id for s in categories[0].sub_categories] == ['sides', 'mains']
        assert [i.item_id for i in categories[0].sub_categories[1].items] == ['a', 'b']

    def test_blank_labels_fall_into_defaults(self):
        items = [Item('x', 'Water', '  ', ''), Item('y', 'Cola', 'Drinks', '')]

        categories = {c.id: c for c in group_menu_items(items)}

        assert categories['uncategorized'].label == 'Uncategorized'
        assert categories['uncategorized'].sub_categories[0].id == 'general'
        assert categories['drinks'].sub_categories[0].id == 'drinks'
        assert categories['drinks'].sub_categories[0].label == 'Drinks'

    def test_first_seen_label_is_kept(self):
        items = [Item('a', 'One', 'Food', 'Mains'), Item('b', 'Two', 'food', 'mains')]

        categories = group_menu_items(items)

        assert len(categories) == 1
        assert categories[0].label == 'Food'
        assert categories[0].sub_categories[0].label == 'Mains'


class TestReconcile:
    def test_stale_category_dropped_and_live_one_added(self):
        items = [Item('a', 'Steak', 'Food', 'Mains')]
        ordering = MenuOrdering(category_order=['drinks'])

        repaired, changed = reconcile_ordering(items, ordering)

        assert changed
        assert repaired.category_order == ['food']
        assert repaired.subcategory_order == {'food': ['mains']}
        assert repaired.item_order == {'food::mains': ['a']}

    def test_deleted_item_pruned(self):
        items = [Item('b', 'Burger', 'Food', 'Mains')]
        ordering = MenuOrdering(
            category_order=['food'],
            subcategory_order={'food': ['mains']},
            item_order={'food::mains': ['a', 'b']},
        )

        repaired, changed = reconcile_ordering(items, ordering)

        assert changed
        assert repaired.item_order['food::mains'] == ['b']

    def test_idempotent(self, menu):
        ordering = MenuOrdering(category_order=['food', 'gone'], item_order={'food::mains': ['a']})

        once, _ = reconcile_ordering(menu, ordering)
        twice, changed = reconcile_ordering(menu, once)

        assert twice == once
        assert not changed

    def test_persisted_category_order_is_not_reordered(self, menu):
        ordering = MenuOrdering(category_order=['food', 'drink'])

        repaired, _ = reconcile_ordering(menu, ordering)

        assert repaired.category_order == ['food', 'drink']
        assert [c.id for c in group_menu_items(menu, repaired)] == ['food', 'drink']

    def test_remainder_matches_display_order(self, menu):
        repaired, _ = reconcile_ordering(menu, MenuOrdering())

        displayed = [item.item_id for item in flatten(group_menu_items(menu))]
        reconciled = [item.item_id for item in flatten(group_menu_items(menu, repaired))]

        assert reconciled == displayed


class TestMutations:
    def test_append_item_creates_buckets(self):
        ordering = append_item(MenuOrdering(), Item('a', 'Steak', 'Food', 'Mains'))

        assert ordering.category_order == ['food']
        assert ordering.subcategory_order == {'food': ['mains']}
        assert ordering.item_order == {'food::mains': ['a']}

    def test_append_item_does_not_duplicate(self):
        item = Item('a', 'Steak', 'Food', 'Mains')

        ordering = append_item(append_item(MenuOrdering(), item), item)

        assert ordering.item_order == {'food::mains': ['a']}

    def test_remove_item_everywhere_leaves_input_untouched(self):
        original = MenuOrdering(item_order={'food::mains': ['a', 'b'], 'food::sides': ['a']})

        ordering = remove_item(original, 'a')

        assert ordering.item_order == {'food::mains': ['b'], 'food::sides': []}
        assert original.item_order['food::mains'] == ['a', 'b']

    def test_array_move(self):
        assert array_move(['a', 'b', 'c'], 0, 2) == ['b', 'c', 'a']
        assert array_move(['a', 'b', 'c'], 2, 0) == ['c', 'a', 'b']

    def test_move_category_clamps_index(self):
        ordering = MenuOrdering(category_order=['food', 'drink', 'dessert'])

        assert move_category(ordering, 'food', 99).category_order == ['drink', 'dessert', 'food']
        assert move_category(ordering, 'dessert', -5).category_order == ['dessert', 'food', 'drink']
        assert move_category(ordering, 'ghost', 0) == ordering

    def test_move_subcategory(self):
        ordering = MenuOrdering(subcategory_order={'food': ['mains', 'sides']})

        moved = move_subcategory(ordering, 'food', 'sides', 0)

        assert moved.subcategory_order == {'food': ['sides', 'mains']}

    def test_move_item_within_bucket(self):
        ordering = MenuOrdering(item_order={'food::mains': ['a', 'b', 'c']})

        moved = move_item(ordering, 'a', 'food::mains', 'food::mains', 1)

        assert moved.item_order['food::mains'] == ['b', 'a', 'c']

    def test_move_item_across_buckets(self):
        ordering = MenuOrdering(item_order={'food::mains': ['a', 'b'], 'food::sides': ['d']})

        moved = move_item(ordering, 'a', 'food::mains', 'food::sides', 10)

        assert moved.item_order == {'food::mains': ['b'], 'food::sides': ['d', 'a']}

    def test_move_item_into_new_bucket(self):
        ordering = MenuOrdering(item_order={'food::mains': ['a']})

        moved = move_item(ordering, 'a', 'food::mains', 'drink::beer', 0)

        assert moved.item_order == {'food::mains': [], 'drink::beer': ['a']}


class TestPayload:
    def test_malformed_payload_is_normalised(self):
        ordering = MenuOrdering.from_payload({
            'categoryOrder': ['food', 3, None],
            'subcategoryOrder': {'food': ['mains', 1], 'bad': 'nope'},
            'itemOrder': 'broken',
        })

        assert ordering.category_order == ['food']
        assert ordering.subcategory_order == {'food': ['mains']}
        assert ordering.item_order == {}

    def test_payload_uses_camel_case(self):
        payload = MenuOrdering(category_order=['food']).to_payload()

        assert payload == {'categoryOrder': ['food'], 'subcategoryOrder': {}, 'itemOrder': {}}
