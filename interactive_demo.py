"""
Interactive demo of iterative cellular updates on a Grid2D.
Each step raises every cell by one; cells above 9 flash, raising their
eight neighbors, and flashed cells reset to 0.
"""

import logging
import sys

import readchar
from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

from ascii_render import render_grid
from grid2d import Grid2D
from grid_types import Point

# Added to a cell once it has flashed so it cannot flash again this step
FLASHED = 100


def flash_step(grid: Grid2D[int]) -> int:
    """Advance the grid one step in place. Returns the number of flashes."""
    grid.transform(lambda _, value: value + 1)

    flashing = True
    while flashing:
        flashing = False
        # Iterate the bounds, not the grid, since cells change as we go
        for p in grid.bounds.iter_horizontal():
            if 9 < grid[p] < FLASHED:
                flashing = True
                grid.transform_neighbors(p, lambda _, value: value + 1)
                grid[p] += FLASHED

    flashes = 0

    def settle(_: Point, value: int) -> int:
        nonlocal flashes
        if value > 9:
            flashes += 1
            return 0
        return value

    grid.transform(settle)
    return flashes


class InteractiveDemo:
    """Step through flash updates with keyboard commands."""

    def __init__(self, grid: Grid2D[int]) -> None:
        self.grid = grid.copy()
        self.original_grid = grid.copy()  # Keep a copy of the original state
        self.console = Console()
        self.steps = 0
        self.total_flashes = 0
        self.status_message = "Ready"

    def generate_display(self) -> Panel:
        """Generate the current display with grid and status."""
        flashed = [p for p, value in self.grid.iter_horizontal() if value == 0]
        grid_text = render_grid(self.grid, highlight=flashed, cell_width=2)

        status = Text()
        status.append("Step: ", style="bold")
        status.append(f"{self.steps}\n")
        status.append("Total flashes: ", style="bold")
        status.append(f"{self.total_flashes}\n\n")

        # Convert ANSI-colored grid text to Rich Text properly
        status.append(Text.from_ansi(grid_text))
        status.append("\n\n")
        status.append("Keys:\n", style="bold cyan")
        status.append("  N / Space - Advance one step\n")
        status.append("  R - Reset to original grid\n")
        status.append("  Q - Quit\n\n")

        status.append("─" * 40 + "\n", style="dim")
        status.append("Status: ", style="bold")
        status.append(self.status_message)

        return Panel(status, title="Grid Flash Demo", border_style="green", width=60)

    def advance(self) -> None:
        flashes = flash_step(self.grid)
        self.steps += 1
        self.total_flashes += flashes
        if all(value == 0 for _, value in self.grid.iter_horizontal()):
            self.status_message = f"✓ Step {self.steps}: every cell flashed together!"
        else:
            self.status_message = f"Step {self.steps}: {flashes} flashes"

    def reset_grid(self) -> None:
        """Reset the grid to its original state."""
        self.grid = self.original_grid.copy()
        self.steps = 0
        self.total_flashes = 0
        self.status_message = "Grid reset to original state"

    def run(self) -> None:
        with Live(self.generate_display(), console=self.console, refresh_per_second=4) as live:
            try:
                while True:
                    live.update(self.generate_display())

                    key = readchar.readkey()

                    if key.lower() == "q":
                        self.status_message = "Quitting..."
                        live.update(self.generate_display())
                        break
                    elif key.lower() == "r":
                        self.reset_grid()
                    elif key.lower() == "n" or key == " ":
                        self.advance()
                    else:
                        self.status_message = f"Unknown key: {repr(key)}"

            except KeyboardInterrupt:
                self.status_message = "Interrupted by user"
                live.update(self.generate_display())


LAYOUTS = dict(
    small="11111|19991|19191|19991|11111",
    large="5483143223|2745854711|5264556173|6141336146|6357385478|"
    "4167524645|2176841721|6882881134|4846848554|5283751526",
)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    layout = LAYOUTS[sys.argv[1] if len(sys.argv) > 1 else "small"]
    grid = Grid2D.from_char_str(layout.replace("|", "\n"), int)
    InteractiveDemo(grid).run()
