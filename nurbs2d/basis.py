import logging

import numpy as np


log = logging.getLogger(__name__)

# Any divisor whose magnitude falls below TOL contributes nothing.
TOL = 1e-10

# Upper bound on the number of bisection steps in find_span.  A clean
# knot vector never needs more than log2(n) steps; only a corrupted
# (e.g. non-monotonic) one can reach it.
MAX_SPAN_ITERATIONS = 100


def clamp_param(u):
    ''' Clamp the parameter value u into [0, 1].  NaN maps to 0. '''
    u = float(u)
    if u != u:
        return 0.0
    return min(max(u, 0.0), 1.0)


def find_span(n, p, U, u):

    ''' Determine the knot span index, i.e. the index i such that u
    lies in [ u_i, u_(i+1) ).  u is first clamped into [0, 1].

    Returns None whenever the span cannot be located, i.e. if there are
    no control points (n < 0) or if U holds too few knots for n or p.
    Should the bisection fail to converge (corrupted knot vector), p is
    returned.

    Source: The NURBS Book (2nd Ed.), Pg. 68.

    '''

    m = len(U)
    if n < 0 or m < 2:
        log.debug('span not locatable: n=%d, %d knots', n, m)
        return None
    if n + 1 >= m or p >= m:
        log.debug('span not locatable: n=%d, p=%d, %d knots', n, p, m)
        return None
    u = clamp_param(u)
    if u >= U[n+1]:
        return n
    if u <= U[p]:
        return p
    low, high = p, n + 1
    mid = (low + high) // 2
    for _ in range(MAX_SPAN_ITERATIONS):
        if mid + 1 >= m:
            break
        if not (u < U[mid] or u >= U[mid+1]):
            return mid
        if u < U[mid]:
            high = mid
        else:
            low = mid
        mid = (low + high) // 2
    log.debug('span search did not converge at u=%g, using p=%d', u, p)
    return p


# In any given knot span, [ u_i, u_(i+1) ), at most p + 1 of the
# B-spline basis functions are nonzero, namely the functions
# (N_(i-p,p)(u),..., N_(i,p)(u)).
# NOTE: i is the knot span index of u


def basis_funs(i, u, p, U):

    ''' Compute all nonvanishing basis functions and store them in the
    array (N[0],...,N[p]).

    If the span i is incompatible with p and U (i < p or i + p beyond
    the last knot), all p + 1 values are zero.  Near-zero divisors
    (repeated knots) contribute zero instead of inf or NaN.

    Source: The NURBS Book (2nd Ed.), Pg. 70.

    '''

    N = np.zeros(p + 1)
    m = len(U)
    if i < p or i + p >= m:
        return N
    left = np.zeros(p + 1)
    right = np.zeros(p + 1)
    N[0] = 1.0
    for j in range(1, p + 1):
        if i + 1 < j or i + j >= m:
            continue
        left[j], right[j] = u - U[i+1-j], U[i+j] - u
        saved = 0.0
        for r in range(j):
            den = right[r+1] + left[j-r]
            tmp = 0.0 if abs(den) < TOL else N[r] / den
            N[r] = saved + right[r+1] * tmp
            saved = left[j-r] * tmp
        N[j] = saved
    return N
