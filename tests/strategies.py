"""
Hypothesis strategies shared by the point geometry tests.
"""

from hypothesis import strategies as st

from point_geometry.points import Point2, Point3, StereoPoint2


POINT_TYPES = [Point2, Point3, StereoPoint2]

# Integer-valued coordinates keep float addition exact, so group laws can be
# checked with ==.
exact_coordinates = st.integers(min_value=-10**6, max_value=10**6).map(float)
small_coordinates = st.integers(min_value=-1000, max_value=1000).map(float)
real_coordinates = st.floats(min_value=-1e6, max_value=1e6, allow_nan=False, allow_infinity=False)


def points_of(cls, coordinates=exact_coordinates):
    """Strategy producing points of the given type."""
    return st.lists(coordinates, min_size=cls.dimension, max_size=cls.dimension).map(cls.from_vector)


def vectors_of(cls, coordinates=real_coordinates):
    """Strategy producing flat coordinate lists matching a point type."""
    return st.lists(coordinates, min_size=cls.dimension, max_size=cls.dimension)
