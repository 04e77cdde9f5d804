import numpy as np


__all__ = ['ControlPoint']


class ControlPoint(object):

    ''' A ControlPoint is defined in 3D homogeneous space (x, y, w).  Its
    purpose is twofold: to represent either a control point of a Curve,
    where the weight `w` may or may not be equal to one (but should be
    greater than zero), or more simply a 2D point in Euclidean space, as
    returned by Curve evaluation, in which case `w` is one (default).

    Unlike the rows of an object matrix, the x and y coordinates are
    stored as given, i.e. they are NOT multiplied by the weight.

    '''

    def __init__(self, x=0.0, y=0.0, w=1.0):

        ''' Initialize the ControlPoint with zero or more of the three
        coordinates.  Defaults to the origin, with unit weight.

        Examples
        --------
        >>> P0 = ControlPoint(10, 20)
        >>> P1 = ControlPoint(10, 20, w=2.0)

        '''

        self._xyw = np.array([x, y, w], dtype=float)

    def __repr__(self):
        return '{0}({1!r}, {2!r}, w={3!r})'.format(
            self.__class__.__name__, self.x, self.y, self.weight)

    @property
    def x(self):
        return float(self._xyw[0])

    @x.setter
    def x(self, new_x):
        self._xyw[0] = new_x

    @property
    def y(self):
        return float(self._xyw[1])

    @y.setter
    def y(self, new_y):
        self._xyw[1] = new_y

    @property
    def weight(self):
        return float(self._xyw[2])

    @weight.setter
    def weight(self, new_w):
        self._xyw[2] = new_w

    @property
    def xyw(self):
        ''' Get a copy of the xyw coordinates. '''
        return self._xyw.copy()

    @xyw.setter
    def xyw(self, new_xyw):
        ''' Set the xyw coordinates.  Use None to keep one or more
        coordinates intact, e.g. pt.xyw = None,2,None. '''
        for i, c in enumerate(new_xyw):
            if c is not None:
                self._xyw[i] = c

    @property
    def xy(self):
        ''' Get the xy coordinates only. '''
        return self._xyw[:2].copy()

    def copy(self):
        ''' Self copy. '''
        return self.__class__(*self._xyw)


def make_control_point(cpt):
    ''' Return a new ControlPoint from either an existing ControlPoint
    (copied) or an (x, y) / (x, y, w) sequence. '''
    if isinstance(cpt, ControlPoint):
        return cpt.copy()
    return ControlPoint(*cpt)

def points_to_obj_mat(points):
    ''' Return the object matrix of a list of ControlPoints, i.e. the
    (n + 1) x 3 matrix whose ith row is Pwi = (wi*xi, wi*yi, wi). '''
    Pw = np.zeros((len(points), 3))
    for i, cpt in enumerate(points):
        x, y, w = cpt._xyw
        Pw[i] = x * w, y * w, w
    return Pw

def obj_mat_to_points(Pw):
    ''' Idem points_to_obj_mat, vice versa. '''
    Pw = np.asarray(Pw, dtype=float)
    return [ControlPoint(wx / w, wy / w, w) for wx, wy, w in Pw]

def points_to_flat(points):
    ''' Interleave the xy coordinates of the given points in a flat
    array [x0, y0, x1, y1, ...]. '''
    flat = np.zeros(2 * len(points))
    for i, pt in enumerate(points):
        flat[2*i], flat[2*i+1] = pt.x, pt.y
    return flat
