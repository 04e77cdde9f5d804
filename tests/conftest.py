import numpy as np
import pytest

from nurbs2d.curve import Curve, make_curve
from nurbs2d.point import ControlPoint


@pytest.fixture
def linear_curve():
    c = Curve(1)
    c.add_control_point(ControlPoint(0, 0, 1))
    c.add_control_point(ControlPoint(10, 10, 1))
    return c


@pytest.fixture
def cubic_curve():
    return make_curve([(0, 0, 1), (10, 10, 1), (20, 0, 1), (30, 10, 1)], 3)


@pytest.fixture
def quarter_circle():
    ''' Rational quadratic arc of the unit circle, from (1, 0) to (0, 1).
    '''
    w = np.sqrt(2.0) / 2.0
    return make_curve([(1, 0, 1), (1, 1, w), (0, 1, 1)], 2)
