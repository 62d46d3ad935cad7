import pytest

from app.libs.pagination import Paginator, clamp_page
from app.search.services import escape_like


@pytest.mark.parametrize(
    "value, expected",
    [(1, 1), (3, 3), ("2", 2), (0, 1), (-4, 1), ("x", 1), (None, 1)],
)
def test_clamp_page(value, expected):
    assert clamp_page(value) == expected


def test_paginator_offset():
    assert Paginator(query=None, page=3, per_page=27).offset == 54
    assert Paginator(query=None, page=-1, per_page=27).offset == 0


def test_paginator_rejects_empty_pages():
    with pytest.raises(ValueError):
        Paginator(query=None, per_page=0)


def test_escape_like():
    assert escape_like("50%_off\\") == "50\\%\\_off\\\\"
    assert escape_like("kopi") == "kopi"
