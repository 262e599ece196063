import pytest

from app.services.pagination import clamp_page, list_page, page_query, parse_page_value


@pytest.mark.parametrize(
    "size, number, expected",
    [
        (10, 1, (10, 1)),
        (25, 3, (25, 3)),
        (0, 2, (10, 2)),
        (-5, 0, (10, 1)),
        (5, -1, (5, 1)),
    ],
)
def test_clamp_page(size, number, expected):
    assert clamp_page(size, number) == expected


@pytest.mark.parametrize("raw, expected", [("3", 3), ("-2", -2), ("abc", None), ("", None), (None, None)])
def test_parse_page_value(raw, expected):
    assert parse_page_value(raw) == expected


def test_unparsable_query_falls_back_like_values_below_one():
    assert page_query(page="abc", recordPerPage="x1") == (10, 1)
    assert page_query(page="2", recordPerPage="abc") == (10, 2)
    assert page_query(page="abc", recordPerPage="5") == (5, 1)


async def _seed_tables(store, count):
    await store.insert_many("tables", [
        {"table_number": number, "number_of_guests": 2} for number in range(1, count + 1)
    ])


async def test_second_page_of_twenty_five(store):
    await _seed_tables(store, 25)

    page = await list_page(store, "tables", page_size=10, page_number=2)

    assert page.total_count == 25
    assert [t["table_number"] for t in page.items] == list(range(11, 21))


async def test_last_partial_page(store):
    await _seed_tables(store, 25)

    page = await list_page(store, "tables", page_size=10, page_number=3)

    assert page.total_count == 25
    assert [t["table_number"] for t in page.items] == [21, 22, 23, 24, 25]


async def test_page_past_the_end_still_counts_everything(store):
    await _seed_tables(store, 5)

    page = await list_page(store, "tables", page_size=10, page_number=4)

    assert page.total_count == 5
    assert page.items == []


async def test_empty_collection(store):
    page = await list_page(store, "foods", page_size=10, page_number=1)

    assert page.total_count == 0
    assert page.items == []


async def test_invalid_arguments_fall_back_to_defaults(store):
    await _seed_tables(store, 12)

    page = await list_page(store, "tables", page_size=0, page_number=0)

    assert page.total_count == 12
    assert len(page.items) == 10
    assert page.items[0]["table_number"] == 1


async def test_idempotent_on_unchanged_collection(store):
    await _seed_tables(store, 13)

    first = await list_page(store, "tables", page_size=4, page_number=2)
    second = await list_page(store, "tables", page_size=4, page_number=2)

    assert first == second


async def test_page_far_beyond_any_row_is_empty(store):
    await _seed_tables(store, 3)

    page = await list_page(store, "tables", page_size=10, page_number=10**18)

    assert page.total_count == 3
    assert page.items == []


async def test_huge_page_size_returns_whole_collection(store):
    await _seed_tables(store, 4)

    page = await list_page(store, "tables", page_size=10**20, page_number=1)

    assert page.total_count == 4
    assert [t["table_number"] for t in page.items] == [1, 2, 3, 4]
