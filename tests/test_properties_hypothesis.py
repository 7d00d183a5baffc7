import math

import numpy as np
import pytest

hypothesis = pytest.importorskip("hypothesis", reason="hypothesis is a dev optional dependency")
from hypothesis import given, strategies as st  # type: ignore

from engine.animation.clock import AnimationClock
from engine.animation.color import interpolate_rgb
from engine.animation.edges import EdgeClassifier, EdgeWeight
from engine.animation.stages import StageScheduler
from engine.core.matrix import Matrix4
from engine.core.projection import project
from engine.core.vector import Vector3

finite = st.floats(-1e3, 1e3, allow_nan=False, allow_infinity=False)
angles = st.floats(-2 * math.pi, 2 * math.pi, allow_nan=False)


@given(x1=finite, y1=finite, z1=finite, x2=finite, y2=finite, z2=finite, s=st.floats(0.1, 500))
def test_projection_linearity(x1, y1, z1, x2, y2, z2, s):
    a = Vector3(x1, y1, z1)
    b = Vector3(x2, y2, z2)
    pa, pb, pab = project(a, s), project(b, s), project(a + b, s)
    np.testing.assert_allclose(pab, (pa.x + pb.x, pa.y + pb.y), rtol=1e-9, atol=1e-6)


@given(ax=angles, ay=angles, az=angles, b=angles, c=angles)
def test_matrix_multiply_associativity(ax, ay, az, b, c):
    m1 = Matrix4.rotation_from_euler(ax, ay, az)
    m2 = Matrix4.rotation_y(b)
    m3 = Matrix4.rotation_axis(Vector3(1.0, 1.0, 1.0).normalize(), c)
    left = m1.multiply(m2).multiply(m3)
    right = m1.multiply(m2.multiply(m3))
    np.testing.assert_allclose(left.elements, right.elements, atol=1e-12)


@given(t=st.floats(-1e7, 1e7, allow_nan=False), d=st.floats(1.0, 1e5))
def test_clock_progress_ranges(t, d):
    s = AnimationClock(d).state(t)
    assert 0.0 <= s.progress < 1.0
    assert 0.0 <= s.eased_progress <= 1.0


@given(deg=st.floats(-1e4, 1e4, allow_nan=False), idx=st.integers(0, 20))
def test_classifier_is_total_and_periodic(deg, idx):
    clf = EdgeClassifier()
    w = clf.classify(idx, deg)
    assert w in (EdgeWeight.THIN, EdgeWeight.THICK)
    if idx >= 8:
        assert w is EdgeWeight.THICK


@given(p=st.floats(-10, 10, allow_nan=False))
def test_stage_and_color_outputs_in_range(p):
    for v in StageScheduler().progress_map(p).values():
        assert 0.0 <= v <= 1.0
    rgb = interpolate_rgb(p, (255, 255, 255), (0, 5, 233))
    assert all(0 <= c <= 255 for c in rgb)
    assert 5 <= rgb[1] <= 255 and 233 <= rgb[2] <= 255
