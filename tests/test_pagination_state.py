import pytest

from uangkas.utils.kas.schema import PaginatedResponse
from uangkas.utils.pagination.state import (
    PaginationState, clamp_page, compute_has_next, compute_has_previous, compute_total_pages,
)


@pytest.mark.parametrize("total_items,size,expected", [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (50, 20, 3)])
def test_total_pages_is_ceiling(total_items, size, expected):
    assert compute_total_pages(total_items, size) == expected


def test_total_pages_rejects_zero_size():
    with pytest.raises(ValueError):
        compute_total_pages(10, 0)


def test_has_next_and_previous():
    assert compute_has_next(0, 3) is True
    assert compute_has_next(2, 3) is False
    assert compute_has_next(0, 0) is False
    assert compute_has_previous(0) is False
    assert compute_has_previous(1) is True


def test_clamp_page():
    assert clamp_page(-1, 5) == 0
    assert clamp_page(9, 5) == 4
    assert clamp_page(3, 0) == 0


def test_set_size_resets_page_to_first():
    s = PaginationState(page=3, size=10, total_items=100, total_pages=10)
    s.set_size(20)
    assert (s.page, s.size) == (0, 20)


def test_set_size_rejects_non_positive():
    s = PaginationState()
    with pytest.raises(ValueError):
        s.set_size(0)


def test_set_page_bounds():
    s = PaginationState(total_items=25, total_pages=3)
    s.set_page(2)
    assert s.page == 2
    with pytest.raises(ValueError):
        s.set_page(3)
    with pytest.raises(ValueError):
        s.set_page(-1)


def test_set_page_zero_allowed_when_empty():
    s = PaginationState()
    s.set_page(0)
    assert s.page == 0


def test_next_previous_follow_server_flags():
    s = PaginationState(page=0, total_pages=2, has_next=True, has_previous=False)
    assert s.previous_page() is False
    assert s.next_page() is True
    assert s.page == 1


def test_apply_server_response_overwrites_metadata():
    s = PaginationState(page=0, size=10)
    s.apply_server_response(PaginatedResponse(
        data=[], page=2, size=20, total_items=50, total_pages=3, has_next=False, has_previous=True,
    ))
    assert (s.page, s.size, s.total_items, s.total_pages) == (2, 20, 50, 3)
    assert s.has_previous and not s.has_next


def test_window_bounds():
    assert PaginationState().window_bounds() == (0, 0)
    s = PaginationState(page=2, size=20, total_items=50, total_pages=3)
    assert s.window_bounds() == (41, 50)
