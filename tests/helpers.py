from field import validate_field
from models import Field, Solution


def assert_valid_solution(field: Field, sol: Solution) -> None:
    sources, targets, _ = validate_field(field)
    target_of = {field[t]: t for t in targets}

    assert sorted(sol.paths) == sorted(field[s] for s in sources)

    used = set()
    for s in sources:
        label = field[s]
        path = sol.paths[label]
        assert path[0] == s
        assert path[-1] == target_of[label]
        for (r1, c1), (r2, c2) in zip(path, path[1:]):
            assert abs(r1 - r2) + abs(c1 - c2) == 1
        for p in path[1:-1]:
            assert field[p] == 0
        for p in path:
            assert p not in used
            used.add(p)
