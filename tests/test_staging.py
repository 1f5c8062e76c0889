import pytest

from cargo_loader.models import Good
from cargo_loader.staging import StagingList


def test_keeps_insertion_order():
    staged = StagingList()
    staged.add(Good("A", 1, 1))
    staged += Good("B", 2, 2)
    staged += Good("C", 3, 3)

    assert len(staged) == 3
    assert staged.size() == 3
    assert [g.name for g in staged] == ["A", "B", "C"]
    assert staged.get(1).name == "B"


def test_iadd_returns_same_list():
    staged = StagingList()
    original = staged
    staged += 5
    assert staged is original
    assert staged.get(0) == 5


@pytest.mark.parametrize("index", [-1, 0, 3])
def test_get_out_of_range(index):
    staged = StagingList()
    if index == 3:
        for n in range(3):
            staged += n
    with pytest.raises(IndexError):
        staged.get(index)
