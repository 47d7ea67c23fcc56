from __future__ import annotations

import pytest

from gamemath import MutableVector3, Vector3


def test_set_components_returns_receiver():
    v = MutableVector3(1, 2, 3)
    assert v.set_components(4, 5, 6) is v
    assert v == Vector3(4, 5, 6)


def test_from_object_add():
    pos = Vector3(10, 64, -3)
    v = MutableVector3()
    assert v.from_object_add(pos, 1, -1, 0.5) is v
    assert v.to_tuple() == (11, 63, -2.5)
    assert pos == Vector3(10, 64, -3)


def test_from_object_add_with_self():
    v = MutableVector3(1, 1, 1)
    v.from_object_add(v, 1, 2, 3)
    assert v == Vector3(2, 3, 4)


def test_chaining():
    v = MutableVector3().set_components(1, 2, 3).from_object_add(Vector3(0, 0, 0), 5, 5, 5)
    assert v == Vector3(5, 5, 5)


def test_component_setters():
    v = MutableVector3(0, 0, 0)
    v.x = 1
    v.y = 2.5
    v.z = -1
    assert v.to_tuple() == (1, 2.5, -1)


def test_operations_return_new_immutable_vectors():
    v = MutableVector3(1, 2, 3)
    moved = v.up()
    assert type(moved) is Vector3
    assert v == Vector3(1, 2, 3)
    assert type(v.add(1, 1, 1)) is Vector3


def test_unknown_side_returns_receiver():
    v = MutableVector3(1, 2, 3)
    assert v.get_side(42) is v


def test_unhashable():
    with pytest.raises(TypeError):
        hash(MutableVector3(1, 2, 3))


def test_conversions():
    v = Vector3(1, 2, 3)
    m = v.as_mutable()
    assert isinstance(m, MutableVector3)
    m.set_components(0, 0, 0)
    assert v == Vector3(1, 2, 3)
    assert MutableVector3.from_vector(v) == v
    assert str(m) == "Vector3(x=0,y=0,z=0)"
    assert repr(MutableVector3(1, 2, 3)) == "Vector3(x=1,y=2,z=3)"
