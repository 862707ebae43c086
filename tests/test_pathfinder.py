from rlgdungeon.pathfinder import UNREACHABLE, Pathfinder


def open_grid(width, height, inner=0):
    return [
        [255 if r in (0, height - 1) or c in (0, width - 1) else inner for c in range(width)]
        for r in range(height)
    ]


def test_costs_start_unreachable():
    pf = Pathfinder(open_grid(5, 5))
    assert all(cell.cost == UNREACHABLE for row in pf.path for cell in row)


def test_floor_distance_is_king_moves():
    pf = Pathfinder(open_grid(8, 6))
    pf.dijkstra_floor(1, 1)
    for y in range(1, 5):
        for x in range(1, 7):
            assert pf.cost(x, y) == max(x - 1, y - 1)


def test_border_stays_unreachable():
    pf = Pathfinder(open_grid(6, 6))
    pf.dijkstra_floor(2, 2)
    pf2 = Pathfinder(open_grid(6, 6))
    pf2.dijkstra_all(2, 2)
    for p in (pf, pf2):
        assert p.cost(0, 0) == UNREACHABLE
        assert p.cost(5, 3) == UNREACHABLE


def test_from_links_lead_back_to_player():
    pf = Pathfinder(open_grid(9, 7))
    pf.dijkstra_floor(2, 3)
    x, y = 7, 5
    while (x, y) != (2, 3):
        cell = pf.path[y][x]
        parent = pf.path[cell.from_y][cell.from_x]
        assert parent.cost == cell.cost - 1
        x, y = cell.from_x, cell.from_y


def split_grid():
    grid = open_grid(9, 5)
    for r in range(1, 4):
        grid[r][4] = 100
    return grid


def test_rock_blocks_floor_search():
    pf = Pathfinder(split_grid())
    pf.dijkstra_floor(1, 2)
    assert pf.cost(4, 2) == UNREACHABLE
    assert pf.cost(7, 2) == UNREACHABLE
    assert pf.cost(3, 2) == 2


def test_tunnelling_search_crosses_rock():
    pf = Pathfinder(split_grid())
    pf.dijkstra_all(1, 2)
    floor = Pathfinder(split_grid())
    floor.dijkstra_floor(1, 2)
    assert pf.cost(4, 2) == floor.cost(3, 2) + 1
    assert pf.cost(5, 2) > pf.cost(4, 2) + 1
    assert pf.cost(7, 2) < UNREACHABLE


def test_hardness_of_departure_cell_sets_step_cost():
    grid = open_grid(5, 5)
    grid[2][2] = 170
    pf = Pathfinder(grid)
    pf.dijkstra_all(2, 2)
    assert pf.cost(2, 2) == 0
    assert {pf.cost(x, y) for x, y in [(1, 1), (2, 1), (3, 3), (1, 2)]} == {3}


def test_rerun_resets_costs():
    pf = Pathfinder(open_grid(7, 5))
    pf.dijkstra_floor(1, 1)
    pf.dijkstra_floor(5, 3)
    assert pf.cost(5, 3) == 0
    assert pf.cost(1, 1) == 4
    assert pf.path[1][1].from_x is not None