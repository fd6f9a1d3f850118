import pytest

from swapi_graphql.core.exceptions import InvalidArgumentError
from swapi_graphql.graphql.utils import (
    ConnectionArgs,
    connection_from_list,
    cursor_to_offset,
    offset_to_cursor,
)

RECORDS = ["a", "b", "c", "d", "e"]


def test_cursor_round_trip():
    for offset in (0, 1, 99):
        assert cursor_to_offset(offset_to_cursor(offset)) == offset


@pytest.mark.parametrize("cursor", [None, "", "garbage!", offset_to_cursor(3)[:-2] + "@@"])
def test_malformed_cursor_decodes_to_none(cursor):
    assert cursor_to_offset(cursor) is None


def test_no_args_returns_everything_in_order():
    page = connection_from_list(RECORDS)

    assert page.nodes == RECORDS
    assert [edge.cursor for edge in page.edges] == [offset_to_cursor(i) for i in range(5)]
    assert page.has_next_page is False
    assert page.has_previous_page is False
    assert page.total_count == 5
    assert page.start_cursor == offset_to_cursor(0)
    assert page.end_cursor == offset_to_cursor(4)


def test_first():
    page = connection_from_list(RECORDS, ConnectionArgs(first=2))

    assert page.nodes == ["a", "b"]
    assert page.has_next_page is True
    assert page.has_previous_page is False


def test_after_and_first():
    page = connection_from_list(RECORDS, ConnectionArgs(first=2, after=offset_to_cursor(1)))

    assert page.nodes == ["c", "d"]
    assert [edge.cursor for edge in page.edges] == [offset_to_cursor(2), offset_to_cursor(3)]
    assert page.has_next_page is True
    assert page.has_previous_page is True


def test_last():
    page = connection_from_list(RECORDS, ConnectionArgs(last=2))

    assert page.nodes == ["d", "e"]
    assert page.has_next_page is False
    assert page.has_previous_page is True


def test_before_and_last():
    page = connection_from_list(RECORDS, ConnectionArgs(last=2, before=offset_to_cursor(3)))

    assert page.nodes == ["b", "c"]
    assert page.has_next_page is True
    assert page.has_previous_page is True


def test_first_is_applied_before_last():
    page = connection_from_list(RECORDS, ConnectionArgs(first=4, last=2))

    assert page.nodes == ["c", "d"]


def test_after_and_before_bound_the_window():
    page = connection_from_list(
        RECORDS, ConnectionArgs(after=offset_to_cursor(0), before=offset_to_cursor(4))
    )

    assert page.nodes == ["b", "c", "d"]


def test_malformed_cursors_are_ignored():
    page = connection_from_list(RECORDS, ConnectionArgs(after="bogus", before="bogus", first=1))

    assert page.nodes == ["a"]


def test_after_past_the_end_is_empty():
    page = connection_from_list(RECORDS, ConnectionArgs(after=offset_to_cursor(10)))

    assert page.edges == []
    assert page.start_cursor is None
    assert page.end_cursor is None
    assert page.has_next_page is False
    assert page.has_previous_page is True


def test_first_zero_is_empty():
    page = connection_from_list(RECORDS, ConnectionArgs(first=0))

    assert page.edges == []
    assert page.has_next_page is True


def test_total_count_is_taken_verbatim():
    page = connection_from_list(RECORDS, total_count=82)

    assert page.total_count == 82


@pytest.mark.parametrize("args", [ConnectionArgs(first=-1), ConnectionArgs(last=-3)])
def test_negative_page_size_is_rejected(args):
    with pytest.raises(InvalidArgumentError):
        connection_from_list(RECORDS, args)


def test_with_nodes_drops_missing_and_keeps_cursors():
    page = connection_from_list(RECORDS, ConnectionArgs(first=3))

    swapped = page.with_nodes(["A", None, "C"])

    assert swapped.nodes == ["A", "C"]
    assert [edge.cursor for edge in swapped.edges] == [offset_to_cursor(0), offset_to_cursor(2)]
    assert swapped.has_next_page is True
    assert swapped.total_count == 5


def test_with_nodes_requires_alignment():
    page = connection_from_list(RECORDS, ConnectionArgs(first=2))

    with pytest.raises(ValueError):
        page.with_nodes(["only one"])
