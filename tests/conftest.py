# tests/conftest.py
import pytest

from teamforge.domain.categories import CategoryIndex
from teamforge.domain.models import Member


@pytest.fixture
def abc_index():
    """Three disjoint categories, two tags each."""
    return CategoryIndex.from_mapping({
        "A": {"color": "#a00", "tags": ["a1", "a2"]},
        "B": {"color": "#0b0", "tags": ["b1", "b2"]},
        "C": {"color": "#00c", "tags": ["c1", "c2"]},
    })


def make_member(member_id, *interests):
    return Member(id=str(member_id), name=f"Member {member_id}", interests=list(interests))
