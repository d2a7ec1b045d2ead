# -*- coding: utf-8 -*-
"""
Created on Mon Oct 19 15:02:11 2026

@author: bboyg
"""

import numpy as np
from reference_point import ReferencePoint, points_from_arrays, points_from_pairs

def test_point_is_value_type():
    a = ReferencePoint(1, 2)
    b = ReferencePoint(1.0, 2.0)
    assert a == b
    assert hash(a) == hash(b)
    assert isinstance(a.x, float) and isinstance(a.y, float)

def test_point_is_immutable():
    p = ReferencePoint(1.0, 2.0)
    try:
        p.x = 5.0
        assert False, "Expected frozen dataclass"
    except AttributeError:
        assert True

def test_from_array_checks_length():
    p = ReferencePoint.from_array(np.array([3.0, 4.0]))
    assert p == ReferencePoint(3.0, 4.0)
    assert np.allclose(p.as_array(), [3.0, 4.0])

    for bad in ([1.0], [1.0, 2.0, 3.0], [[1.0, 2.0]]):
        try:
            ReferencePoint.from_array(bad)
            assert False, "Expected arity error"
        except ValueError:
            assert True

def test_points_from_arrays():
    pts = points_from_arrays([0, 1, 2], [1, 3, 7])
    assert pts == (ReferencePoint(0, 1), ReferencePoint(1, 3), ReferencePoint(2, 7))

    try:
        points_from_arrays([0, 1, 2], [1, 3])
        assert False, "Expected length mismatch error"
    except ValueError:
        assert True

def test_points_from_pairs_shape():
    pts = points_from_pairs([[0, 1], [1, 3]])
    assert len(pts) == 2
    assert pts[1] == ReferencePoint(1, 3)

    assert points_from_pairs([]) == ()

    try:
        points_from_pairs([[0, 1, 2], [1, 3, 4]])
        assert False, "Expected shape error"
    except ValueError:
        assert True
