"""Tests for the demonstration helpers."""

from demo import LAYOUTS, cheapest_cost_a_star, cheapest_route
from grid2d import Grid2D
from grid_types import pt
from interactive_demo import LAYOUTS as FLASH_LAYOUTS
from interactive_demo import InteractiveDemo, flash_step


def flash_grid(name: str) -> Grid2D[int]:
    return Grid2D.from_char_str(FLASH_LAYOUTS[name].replace("|", "\n"), int)


class TestCheapestRoute:
    """Tests for the route-carrying Dijkstra demo."""

    def test_small_layout(self) -> None:
        """All three approaches agree on the worked example."""
        grid = Grid2D.from_char_str(LAYOUTS["small"], int)
        route = cheapest_route(grid)

        assert route is not None
        assert route.cost == grid.shortest_path() == cheapest_cost_a_star(grid) == 40

    def test_route_is_connected_and_costed(self) -> None:
        """The route is a chain of cardinal steps whose entry costs sum to the score."""
        grid = Grid2D.from_char_str(LAYOUTS["maze"], int)
        route = cheapest_route(grid)

        assert route is not None
        assert route.route[0] == pt(0, 0)
        assert route.route[-1] == grid.bounds.bottom_right()
        for a, b in zip(route.route, route.route[1:]):
            assert a.direction_to(b) is not None
        assert sum(grid[p] for p in route.route[1:]) == route.cost

    def test_maze_layout_avoids_nines(self) -> None:
        """The winding corridor of ones is cheaper than cutting through nines."""
        grid = Grid2D.from_char_str(LAYOUTS["maze"], int)
        route = cheapest_route(grid)

        assert route is not None
        assert route.cost == 14
        assert all(grid[p] == 1 for p in route.route[1:])

    def test_empty_grid(self) -> None:
        """No cells, no route."""
        assert cheapest_route(Grid2D.from_rows([])) is None
        assert cheapest_cost_a_star(Grid2D.from_rows([])) is None


class TestFlashStep:
    """Tests for the iterative neighborhood update."""

    def test_small_layout_first_step(self) -> None:
        """The ring of nines and the center all flash once."""
        grid = flash_grid("small")
        assert flash_step(grid) == 9
        assert str(grid) == "34543\n40004\n50005\n40004\n34543"

    def test_small_layout_second_step(self) -> None:
        """Nothing reaches 10 on the second step."""
        grid = flash_grid("small")
        flash_step(grid)
        assert flash_step(grid) == 0
        assert str(grid) == "45654\n51115\n61116\n51115\n45654"

    def test_large_layout_hundred_steps(self) -> None:
        """Flash counts accumulate over many steps."""
        grid = flash_grid("large")
        assert sum(flash_step(grid) for _ in range(10)) == 204
        assert sum(flash_step(grid) for _ in range(90)) == 1656 - 204

    def test_large_layout_synchronizes(self) -> None:
        """Eventually every cell flashes in the same step."""
        grid = flash_grid("large")
        steps = 0
        while True:
            steps += 1
            flash_step(grid)
            if all(value == 0 for _, value in grid.iter_horizontal()):
                break
        assert steps == 195


class TestInteractiveDemo:
    """Tests for the demo's state handling, without the terminal loop."""

    def test_advance_and_reset(self) -> None:
        """Advancing counts steps and flashes; reset restores the start."""
        demo = InteractiveDemo(flash_grid("small"))
        demo.advance()
        assert demo.steps == 1
        assert demo.total_flashes == 9
        assert demo.status_message == "Step 1: 9 flashes"

        demo.reset_grid()
        assert demo.steps == 0
        assert demo.grid == flash_grid("small")

    def test_display_renders(self) -> None:
        """The panel can be built before and after stepping."""
        demo = InteractiveDemo(flash_grid("small"))
        assert demo.generate_display() is not None
        demo.advance()
        assert demo.generate_display() is not None
