import pytest


@pytest.fixture
def triangle_1():
    #       [1]        [1]
    #   A────────►B────────►C
    #   │                   ▲
    #   └───────────────────┘
    #            [4]
    return {"A": {"B": 1, "C": 4}, "B": {"C": 1}, "C": {}}


@pytest.fixture
def split_1():
    #      [1]
    #   A──────►B      C
    return {"A": {"B": 1}, "B": {}, "C": {}}


@pytest.fixture
def square_1():
    # Two equal-cost routes from A to C.
    #       [1]        [1]
    #   ┌────────►B─────────┐
    #   │                   ▼
    #   A                   C
    #   │                   ▲
    #   └────────►D─────────┘
    #       [1]        [1]
    return {"A": {"B": 1, "D": 1}, "B": {"C": 1}, "C": {}, "D": {"C": 1}}


@pytest.fixture
def line_1():
    # Symmetric chain, unit weights.
    #   A◄──►B◄──►C◄──►D
    return {
        "A": {"B": 1},
        "B": {"A": 1, "C": 1},
        "C": {"B": 1, "D": 1},
        "D": {"C": 1},
    }


@pytest.fixture
def graph_1():
    # Edges with [metric]:
    #   A─[1]─►B─[1]─►C─[2]─►D
    #   A─[1]─►E─[1]─►C─[1]─►F─[1]─►D
    #   A─[4]─►D
    return {
        "A": {"B": 1, "E": 1, "D": 4},
        "B": {"C": 1},
        "C": {"D": 2, "F": 1},
        "D": {},
        "E": {"C": 1},
        "F": {"D": 1},
    }


@pytest.fixture
def unweighted_1():
    return {"A": ["B", "C"], "B": ["D"], "C": ["D"], "D": ["A"], "E": []}
