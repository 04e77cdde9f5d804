import numpy as np


class NURBSObject(object):

    ''' A NURBSObject is meant to be subclassed into a NURBS Curve.  It
    is fully defined by its control points, a degree and an
    accompanying knot vector.  The degree is fixed upon instantiation.

    '''

    def __init__(self, p):
        ''' Initialize the NURBSObject with the degree p. '''
        try:
            if isinstance(p, bool) or int(p) != p or p < 0:
                raise ImproperDegree(p)
        except (TypeError, ValueError, OverflowError):
            raise ImproperDegree(p)
        self._p = int(p)
        self._U = np.zeros(0)

    @property
    def p(self):
        ''' Get the degree. '''
        return self._p

    @property
    def U(self):
        ''' Get the knot vector. '''
        return self._U

    @U.setter
    def U(self, new_U):
        ''' Set the knot vector.  No consistency check is performed
        against the control points or the degree; evaluation copes with
        inconsistent knot vectors by returning no result. '''
        new_U = np.array(new_U, dtype=float)
        if new_U.ndim != 1:
            raise ImproperKnotVector(new_U.shape)
        self._U = new_U


# EXCEPTIONS


class NURBSException(Exception):
    pass

class ImproperDegree(NURBSException):
    pass

class ImproperKnotVector(NURBSException):
    pass
