from algolib.bellman_ford import bellman_ford


def add_edge(graph, v1, v2, cost):
    graph.setdefault(v1, {})[v2] = cost
    graph.setdefault(v2, {})


def test_single_vertex():
    graph = {0: {}}
    assert bellman_ford(graph, 0) == {0: None}


def test_single_edge():
    graph = {}
    add_edge(graph, 0, 1, 2)
    assert bellman_ford(graph, 0) == {0: None, 1: (0, 2)}
    assert bellman_ford(graph, 1) == {1: None}


def test_tree_1():
    graph = {}
    dists = {1: None}
    for i in range(1, 100):
        add_edge(graph, i, i * 2, i * 2)
        add_edge(graph, i, i * 2 + 1, i * 2 + 1)
        entry = dists[i]
        if entry is None:
            dists[i * 2] = (i, i * 2)
            dists[i * 2 + 1] = (i, i * 2 + 1)
        else:
            d = entry[1]
            dists[i * 2] = (i, d + i * 2)
            dists[i * 2 + 1] = (i, d + i * 2 + 1)
    assert bellman_ford(graph, 1) == dists


def _graph_1():
    graph = {}
    add_edge(graph, "a", "c", 12)
    add_edge(graph, "a", "d", 60)
    add_edge(graph, "b", "a", 10)
    add_edge(graph, "c", "b", 20)
    add_edge(graph, "c", "d", 32)
    add_edge(graph, "e", "a", 7)
    return graph


def test_graph_1():
    graph = _graph_1()
    assert bellman_ford(graph, "a") == {
        "a": None,
        "c": ("a", 12),
        "d": ("c", 44),
        "b": ("c", 32),
    }
    assert bellman_ford(graph, "b") == {
        "b": None,
        "a": ("b", 10),
        "c": ("a", 22),
        "d": ("c", 54),
    }
    assert bellman_ford(graph, "c") == {
        "c": None,
        "b": ("c", 20),
        "d": ("c", 32),
        "a": ("b", 30),
    }
    assert bellman_ford(graph, "d") == {"d": None}
    assert bellman_ford(graph, "e") == {
        "e": None,
        "a": ("e", 7),
        "c": ("a", 19),
        "d": ("c", 51),
        "b": ("c", 39),
    }


def _graph_2(two_to_one):
    graph = {}
    add_edge(graph, 0, 1, 6)
    add_edge(graph, 0, 3, 7)
    add_edge(graph, 1, 2, 5)
    add_edge(graph, 1, 3, 8)
    add_edge(graph, 1, 4, -4)
    add_edge(graph, 2, 1, two_to_one)
    add_edge(graph, 3, 2, -3)
    add_edge(graph, 3, 4, 9)
    add_edge(graph, 4, 0, 3)
    add_edge(graph, 4, 2, 7)
    return graph


def test_graph_2():
    graph = _graph_2(-2)
    assert bellman_ford(graph, 0) == {
        0: None,
        1: (2, 2),
        2: (3, 4),
        3: (0, 7),
        4: (1, -2),
    }
    assert bellman_ford(graph, 1) == {
        0: (4, -1),
        1: None,
        2: (4, 3),
        3: (0, 6),
        4: (1, -4),
    }
    assert bellman_ford(graph, 2) == {
        0: (4, -3),
        1: (2, -2),
        2: None,
        3: (0, 4),
        4: (1, -6),
    }
    assert bellman_ford(graph, 3) == {
        0: (4, -6),
        1: (2, -5),
        2: (3, -3),
        3: None,
        4: (1, -9),
    }
    assert bellman_ford(graph, 4) == {
        0: (4, 3),
        1: (2, 5),
        2: (4, 7),
        3: (0, 10),
        4: None,
    }


def test_graph_with_negative_loop():
    graph = _graph_2(-4)
    for start in range(5):
        assert bellman_ford(graph, start) is None


def test_negative_self_loop_on_start():
    graph = {0: {0: -1}}
    add_edge(graph, 0, 1, 3)
    assert bellman_ford(graph, 0) is None