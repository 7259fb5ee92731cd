from fractions import Fraction


def squared_distance(point_a, point_b):
    """
    Compute the squared Euclidean distance between two 2D points.

    Args:
        point_a (tuple): Coordinates (x, y) of the first point.
        point_b (tuple): Coordinates (x, y) of the second point.

    Returns:
        int or Fraction: Exact squared distance between point_a and point_b.
    """
    dx = point_a[0] - point_b[0]
    dy = point_a[1] - point_b[1]
    return dx * dx + dy * dy


def orientation(point_a, point_b, point_c):
    """
    Exact orientation test of three points.

    Args:
        point_a (tuple): Coordinates (x, y) of the first point.
        point_b (tuple): Coordinates (x, y) of the second point.
        point_c (tuple): Coordinates (x, y) of the point to classify.

    Returns:
        int: Positive if point_c lies left of the directed line a->b
        (counter-clockwise turn), negative if it lies right, zero if collinear.
    """
    return ((point_b[0] - point_a[0]) * (point_c[1] - point_a[1])
            - (point_b[1] - point_a[1]) * (point_c[0] - point_a[0]))


def in_circle(point_a, point_b, point_c, point_d):
    """
    Exact in-circle test.

    The triangle (a, b, c) must be counter-clockwise.

    Returns:
        int: Positive if point_d lies strictly inside the circle through a, b
        and c, negative if strictly outside, zero if on the circle.
    """
    adx = point_a[0] - point_d[0]
    ady = point_a[1] - point_d[1]
    bdx = point_b[0] - point_d[0]
    bdy = point_b[1] - point_d[1]
    cdx = point_c[0] - point_d[0]
    cdy = point_c[1] - point_d[1]

    ad = adx * adx + ady * ady
    bd = bdx * bdx + bdy * bdy
    cd = cdx * cdx + cdy * cdy

    return (adx * (bdy * cd - bd * cdy)
            - ady * (bdx * cd - bd * cdx)
            + ad * (bdx * cdy - bdy * cdx))


def on_segment(point, start, end):
    """Check whether a point collinear with start-end lies strictly between them."""
    if point == start or point == end:
        return False
    return (min(start[0], end[0]) <= point[0] <= max(start[0], end[0])
            and min(start[1], end[1]) <= point[1] <= max(start[1], end[1]))


def circumcenter(point_a, point_b, point_c):
    """
    Compute the exact center of the circle through three points.

    Args:
        point_a (tuple): Coordinates (x, y) of the first vertex.
        point_b (tuple): Coordinates (x, y) of the second vertex.
        point_c (tuple): Coordinates (x, y) of the third vertex.

    Returns:
        tuple: (Fraction, Fraction) center coordinates.

    Raises:
        ValueError: If the three points are collinear.
    """
    bx = point_b[0] - point_a[0]
    by = point_b[1] - point_a[1]
    cx = point_c[0] - point_a[0]
    cy = point_c[1] - point_a[1]

    denominator = 2 * (bx * cy - by * cx)
    if denominator == 0:
        raise ValueError(f"Collinear points have no circumcenter: {point_a}, {point_b}, {point_c}")

    b_len = bx * bx + by * by
    c_len = cx * cx + cy * cy

    center_x = point_a[0] + Fraction(cy * b_len - by * c_len, denominator)
    center_y = point_a[1] + Fraction(bx * c_len - cx * b_len, denominator)
    return center_x, center_y
