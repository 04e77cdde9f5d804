from nurbs2d import basis
from nurbs2d import curve
from nurbs2d import knot
from nurbs2d import nurbs
from nurbs2d import point

from nurbs2d.curve import Curve
from nurbs2d.point import ControlPoint


__version__ = '0.1.0'


tools = (curve.make_curve,
         curve.make_linear_curve,
         curve.generate_curve_points)

class _VirtualModule(object):
    def __init__(self, tools):
        for tool in tools:
            setattr(self, tool.__name__, tool)
tb = _VirtualModule(tools) # toolbox
