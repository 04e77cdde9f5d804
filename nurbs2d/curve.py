''' A pth-degree planar NURBS curve is defined by

            sum_(i=0)^(n) (Nip(u) * wi * Pi)
    C(u) =  --------------------------------
              sum_(i=0)^(n) (Nip(u) * wi)

(0 <= u <= 1).  The {Pi} are the control points (forming a control
polygon), the {wi} are the weights, and the {Nip(u)} are the pth-degree
B-spline basis functions defined on the clamped, uniform knot vector

    U = {0,...,0, u_(p+1),...,u_(m-p-1), 1,...,1}.

where (m = n + p + 1).

Curves are built incrementally: every appended control point triggers
the reconstruction of U, whereas modifying a control point in place
does not.  Evaluation never raises on inconsistent data (too few
control points or knots, degenerate weights); it returns None instead,
and sampling substitutes a fallback point.

'''

import logging

import numpy as np

from nurbs2d import basis
from nurbs2d import knot
from nurbs2d import nurbs
from nurbs2d import point


__all__ = ['Curve',
           'make_curve',
           'make_linear_curve',
           'generate_curve_points']


log = logging.getLogger(__name__)

# A weighted basis sum whose magnitude falls below TOL is degenerate.
TOL = 1e-10

# Fewest number of points eval_points ever returns.
MIN_POINTS = 2


class Curve(nurbs.NURBSObject):

    def __init__(self, p):

        ''' See nurbs2d.nurbs.NURBSObject.  The Curve starts with no
        control point at all.

        Parameters
        ----------
        p = the degree (order p + 1) of the Curve

        Examples
        --------
        >>> c = Curve(2)
        >>> c.add_control_point(ControlPoint(0, 0))
        >>> c.add_control_point(ControlPoint(10, 10, w=2))
        >>> c.add_control_point(ControlPoint(20, 0))
        >>> C = c.eval_point(0.5)

        '''

        super(Curve, self).__init__(p)
        self.cpts = []

    def __len__(self):
        return len(self.cpts)

    @property
    def n(self):
        ''' There are (n + 1) control points. '''
        return len(self.cpts) - 1

    @property
    def num_control_points(self):
        return len(self.cpts)

    def get_degree(self):
        return self.p

    @property
    def Pw(self):
        ''' Get the (n + 1) x 3 object matrix (wi*xi, wi*yi, wi). '''
        return point.points_to_obj_mat(self.cpts)

    @property
    def P(self):
        ''' Get the (n + 1) x 2 matrix of Euclidean control points. '''
        return np.array([cpt.xy for cpt in self.cpts]).reshape(-1, 2)

    @property
    def isrational(self):
        ''' Is the Curve rational? '''
        return any(cpt.weight != 1.0 for cpt in self.cpts)

    def copy(self):
        ''' Self copy.  The knot vector is carried over as is, even if
        it was set manually. '''
        c = self.__class__(self.p)
        c.cpts = [cpt.copy() for cpt in self.cpts]
        c.U = self.U
        return c

# CONTROL POINTS

    def add_control_point(self, cpt):

        ''' Append a control point and rebuild the knot vector.

        Parameters
        ----------
        cpt = the ControlPoint (copied), or an (x, y[, w]) sequence

        '''

        self.cpts.append(point.make_control_point(cpt))
        self.update_knots()

    append = add_control_point

    def get_control_point(self, i):
        ''' Return a copy of the ith control point, or None if there is
        no such control point. '''
        if 0 <= i < len(self.cpts):
            return self.cpts[i].copy()
        return None

    def update_control_point(self, i, x, y, w):

        ''' Modify the ith control point in place.  The knot vector is
        left untouched.

        Returns
        -------
        bool = False if there is no ith control point, in which case
               the Curve is not modified at all

        '''

        if not 0 <= i < len(self.cpts):
            return False
        self.cpts[i] = point.ControlPoint(x, y, w)
        return True

# KNOTS

    def update_knots(self):
        ''' Rebuild the (clamped, uniform) knot vector from the current
        number of control points. '''
        self.U = knot.uni_knot_vec(self.n, self.p)

    def set_knots(self, U):
        ''' Set the knot vector manually.  It is kept until the next
        control point is appended. '''
        self.U = U

# EVALUATION OF POINTS

    def eval_point(self, u):

        ''' Evaluate a point.

        Parameters
        ----------
        u = the parameter value of the point, clamped to [0, 1]

        Returns
        -------
        ControlPoint = the xy coordinates of the point (with unit
                       weight), or None if the Curve cannot be
                       evaluated at u

        '''

        n, p, U, cpts = self.n, self.p, self.U, self.cpts
        return rat_curve_point(n, p, U, cpts, u)

    evaluate = eval_point

    def eval_points(self, num):

        ''' Evaluate num points, uniformly spaced in parameter space.
        The last point is always evaluated at exactly u = 1.

        Parameters
        ----------
        num = the number of points to evaluate (truncated to an
              integer, at least 2)

        Returns
        -------
        [ControlPoint] = exactly max(num, 2) points, unless the Curve
                         has fewer than (p + 1) control points, in
                         which case no point is returned.  Points that
                         cannot be evaluated are replaced by the first
                         control point (or the origin).

        '''

        p, U, cpts = self.p, self.U, self.cpts
        if len(cpts) < p + 1 or len(U) == 0:
            return []
        num = max(int(num), MIN_POINTS)
        step = 1.0 / (num - 1)
        Cs = []
        for i in range(num):
            u = 1.0 if i == num - 1 else i * step
            C = self.eval_point(u)
            if C is None:
                log.debug('no point at u=%g, using fallback', u)
                C = cpts[0].copy() if cpts else point.ControlPoint()
            Cs.append(C)
        return Cs

    sample_points = eval_points


def rat_curve_point(n, p, U, cpts, u):

    ''' Compute a point on a rational B-spline curve at a fixed u
    parameter value.  Returns None if the point cannot be computed.

    Source: The NURBS Book (2nd Ed.), Pg. 124.

    '''

    if n < 0 or len(U) == 0:
        return None
    u = basis.clamp_param(u)
    span = basis.find_span(n, p, U, u)
    if span is None:
        return None
    if not p <= span < len(cpts):
        log.debug('span %d incompatible with p=%d, n=%d', span, p, n)
        return None
    N = basis.basis_funs(span, u, p, U)
    Cx = Cy = Cw = 0.0
    for j in range(p + 1):
        k = span - p + j
        if k >= len(cpts):
            continue
        x, y, w = cpts[k]._xyw
        Cx += N[j] * w * x
        Cy += N[j] * w * y
        Cw += N[j] * w
    if abs(Cw) < TOL:
        log.debug('degenerate weights at u=%g', u)
        return None
    return point.ControlPoint(Cx / Cw, Cy / Cw, 1.0)


# TOOLBOX


def make_curve(cpts=None, p=3, Pw=None):

    ''' Construct a Curve of degree p from either (not both) a list of
    control points or an object matrix.

    Parameters
    ----------
    cpts = the ControlPoints, or (x, y[, w]) sequences
    p = the degree of the Curve
    Pw = the object matrix, whose rows are (wi*xi, wi*yi, wi)

    Returns
    -------
    Curve = the Curve

    Examples
    --------
    >>> c = make_curve([(0, 0), (10, 10, 2), (20, 0)], 2)

    or, equivalently,

    >>> c = make_curve(Pw=[(0, 0, 1), (20, 20, 2), (20, 0, 1)], p=2)

    '''

    if Pw is not None:
        cpts = point.obj_mat_to_points(Pw)
    elif cpts is None:
        cpts = []
    c = Curve(p)
    for cpt in cpts:
        c.add_control_point(cpt)
    return c


def make_linear_curve(P0, P1):

    ''' Construct a straight line segment between the points P0 and P1.

    Parameters
    ----------
    P0, P1 = the start and end points of the line

    Returns
    -------
    Curve = the linear Curve

    '''

    return make_curve([P0, P1], 1)


def generate_curve_points(xs, ys, ws, p, num):

    ''' Sample a Curve defined by parallel arrays of coordinates and
    weights, and interleave the result into a flat array.

    Parameters
    ----------
    xs, ys, ws = the x, y coordinates and weights of the control points
                 (truncated to the shortest array)
    p = the degree of the Curve
    num = the number of points to sample

    Returns
    -------
    flat = the array [x0, y0, x1, y1, ...] of all sampled points

    '''

    c = Curve(p)
    for x, y, w in zip(xs, ys, ws):
        c.add_control_point(point.ControlPoint(x, y, w))
    return point.points_to_flat(c.eval_points(num))
