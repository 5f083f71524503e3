import pytest

from src.highway_workforce.highway_workforce.common.pagination import page_params, paginate
from src.highway_workforce.highway_workforce.core.exceptions import ValidationError


def test_second_page_of_ten():
    page = paginate(range(1, 26), page=2, size=10)
    assert page.items == list(range(11, 21))
    assert page.total_items == 25
    assert page.total_pages == 3
    assert page.has_next and page.has_previous


def test_out_of_range_page_is_empty():
    page = paginate(range(5), page=4, size=10)
    assert page.items == []
    assert page.total_pages == 1
    assert not page.has_next


def test_sorting_applies_before_slicing():
    page = paginate([3, 1, 2], page=1, size=2, key=lambda x: x, reverse=True)
    assert page.items == [3, 2]


@pytest.mark.parametrize("page, size", [(0, 10), (1, 0)])
def test_invalid_page_or_size(page, size):
    with pytest.raises(ValidationError):
        paginate([], page=page, size=size)


def test_page_params_defaults_and_errors():
    assert page_params({}) == (1, 10)
    assert page_params({"page": "3", "size": "5"}) == (3, 5)
    with pytest.raises(ValidationError):
        page_params({"page": "x"})
