import pytest
from hypothesis import given
from hypothesis import strategies as st

from treelab.cube import Cube


def test_volume_of_unit_edge_two():
    assert Cube(2).volume() == 8


def test_surface_area_of_unit_edge_two():
    assert Cube(2).surface_area() == 24


@given(st.integers(min_value=0, max_value=10_000))
def test_surface_area_and_volume_relation(length):
    cube = Cube(length)
    assert cube.surface_area() * length == 6 * cube.volume()


@given(st.integers(min_value=1, max_value=10_000))
def test_volume_grows_with_length(length):
    assert Cube(length + 1).volume() > Cube(length).volume()


def test_equality_by_length():
    assert Cube(400) == Cube(400)
    assert not (Cube(11) == Cube(42))


def test_find_target_in_list():
    cubes = [Cube(11), Cube(42), Cube(400), Cube(800)]
    target = Cube(400)
    found = [i for i, cube in enumerate(cubes) if cube == target]
    assert found == [2]


def test_setting_length_changes_results():
    cube = Cube(11)
    cube.length = 42
    assert cube == Cube(42)
    assert cube.volume() == Cube(42).volume()


def test_comparison_with_other_type_is_false():
    assert (Cube(3) == 3) is False


def test_cube_is_unhashable():
    with pytest.raises(TypeError):
        hash(Cube(1))