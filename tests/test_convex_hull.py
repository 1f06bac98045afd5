from algolib.convex_hull import convex_hull_graham


def test_empty():
    assert convex_hull_graham([]) == []


def test_not_enough_points():
    assert convex_hull_graham([(0.0, 0.0)]) == [(0.0, 0.0)]


def test_not_enough_points1():
    points = [(2.0, 2.0), (1.0, 1.0), (0.0, 0.0)]
    assert convex_hull_graham(points) == [(0.0, 0.0), (1.0, 1.0), (2.0, 2.0)]


def test_not_enough_points2():
    points = [(2.0, 2.0), (1.0, 2.0), (0.0, 0.0)]
    assert convex_hull_graham(points) == [(0.0, 0.0), (2.0, 2.0), (1.0, 2.0)]


def test_lots_of_points():
    points = [
        (4.4, 14.0), (6.7, 15.25), (6.9, 12.8), (2.1, 11.1), (9.5, 14.9),
        (13.2, 11.9), (10.3, 12.3), (6.8, 9.5), (3.3, 7.7), (0.6, 5.1),
        (5.3, 2.4), (8.45, 4.7), (11.5, 9.6), (13.8, 7.3), (12.9, 3.1),
        (11.0, 1.1),
    ]
    expected = [
        (11.0, 1.1), (12.9, 3.1), (13.8, 7.3), (13.2, 11.9), (9.5, 14.9),
        (6.7, 15.25), (4.4, 14.0), (2.1, 11.1), (0.6, 5.1), (5.3, 2.4),
    ]
    assert convex_hull_graham(points) == expected


def test_lots_of_points2():
    points = [
        (1.0, 0.0), (1.0, 1.0), (1.0, -1.0), (0.68957, 0.283647),
        (0.909487, 0.644276), (0.0361877, 0.803816), (0.583004, 0.91555),
        (-0.748169, 0.210483), (-0.553528, -0.967036), (0.316709, -0.153861),
        (-0.79267, 0.585945), (-0.700164, -0.750994), (0.452273, -0.604434),
        (-0.79134, -0.249902), (-0.594918, -0.397574), (-0.547371, -0.434041),
        (0.958132, -0.499614), (0.039941, 0.0990732), (-0.891471, -0.464943),
        (0.513187, -0.457062), (-0.930053, 0.60341), (0.656995, 0.854205),
    ]
    expected = [
        (1.0, -1.0), (1.0, 0.0), (1.0, 1.0), (0.583004, 0.91555),
        (0.0361877, 0.803816), (-0.930053, 0.60341), (-0.891471, -0.464943),
        (-0.700164, -0.750994), (-0.553528, -0.967036),
    ]
    assert convex_hull_graham(points) == expected


def test_square_with_interior_point():
    points = [(1.0, 1.0), (0.0, 0.0), (2.0, 0.0), (2.0, 2.0), (0.0, 2.0)]
    assert convex_hull_graham(points) == [(0.0, 0.0), (2.0, 0.0), (2.0, 2.0), (0.0, 2.0)]