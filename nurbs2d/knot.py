import numpy as np


# Any denominator whose magnitude falls below TOL is considered zero.
TOL = 1e-10


# DEGREES AND LENGTHS


def effective_degree(n, p):
    ''' Return the degree actually used to build a knot vector for (n +
    1) control points, i.e. p clamped to n.  The stored degree of a
    Curve is never modified by this clamping. '''
    return max(min(p, n), 0)

def knot_vec_length(n, p):
    ''' Return the number of knots uni_knot_vec produces for (n + 1)
    control points and degree p. '''
    if n < 0:
        return 2
    return n + effective_degree(n, p) + 2


# BUILDING KNOT VECTORS


def uni_knot_vec(n, p):
    ''' Construct a clamped, uniform and normalized knot vector, i.e.
    the first p knots are 0, the knots past index n are 1 and all
    interior knots are equally spaced in [0, 1].  If p > n, n is used
    instead; with no control points at all (n < 0) the trivial vector
    [0, 1] is returned. '''
    if n < 0:
        return np.array([0.0, 1.0])
    p = effective_degree(n, p)
    m = n + p + 1
    U = np.zeros(m + 1)
    den = float(n - p + 1)
    for i in range(m + 1):
        if i < p:
            U[i] = 0.0
        elif i > n:
            U[i] = 1.0
        elif abs(den) < TOL:
            U[i] = float(i) / m
        else:
            U[i] = (i - p) / den
    return U
