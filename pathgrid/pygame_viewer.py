# pathgrid/pygame_viewer.py (timer-paced stepping + grid editing)
from __future__ import annotations
import argparse
from dataclasses import dataclass
from typing import Optional
import logging
import pygame

from .errors import InvalidConfiguration
from .grid import DEFAULT_COLS, DEFAULT_ROWS, GridModel
from .maze import generate_maze
from .obstacles import DEFAULT_DENSITY, sprinkle
from .search import SearchStepper
from .snapshot import Snapshot
from .types import Algorithm, Coord, Role, Status, Tag

logger = logging.getLogger(__name__)

ALGORITHM_KEYS = {
    pygame.K_1: Algorithm.ASTAR,
    pygame.K_2: Algorithm.DIJKSTRA,
    pygame.K_3: Algorithm.BFS,
    pygame.K_4: Algorithm.DFS,
}

@dataclass
class Colors:
    BG = (18, 18, 22)
    WALL = (35, 35, 44)
    FLOOR = (230, 230, 240)
    START = (90, 200, 120)
    END = (220, 90, 90)
    VISITED = (120, 200, 215)
    FRONTIER = (40, 170, 200)
    PATH = (240, 200, 70)

class Viewer:
    def __init__(self, world: GridModel, cell_size: int = 24, fps: int = 60, speed: float = 50.0):
        self.world = world
        self.cell = cell_size
        self.fps = fps
        self.steps_per_sec = speed
        self.algorithm = Algorithm.ASTAR
        self.draw_mode = "wall"   # "wall" | "start" | "end"

        self.stepper = SearchStepper()
        self.snap: Optional[Snapshot] = None
        self.paused = False
        self._step_timer = 0.0
        self._dragging = False

        self.screen = pygame.display.set_mode((world.cols * cell_size, world.rows * cell_size))
        self.clock = pygame.time.Clock()
        self._update_caption()

    # ----------------- run control -----------------
    @property
    def running(self) -> bool:
        return self.stepper.status is Status.RUNNING

    def _begin(self) -> bool:
        try:
            self.snap = self.stepper.start(self.world, self.algorithm)
        except InvalidConfiguration as exc:
            logger.warning("cannot start: %s", exc)
            return False
        return True

    def start_or_pause(self) -> None:
        if self.running:
            self.paused = not self.paused
        elif self._begin():
            self.paused = False
        self._update_caption()

    def single_step(self) -> None:
        if not self.running and not self._begin():
            return
        self.paused = True
        self._advance()

    def reset_run(self) -> None:
        self.stepper.cancel()
        self.snap = None
        self.paused = False
        self._update_caption()

    def _advance(self) -> None:
        self.snap = self.stepper.step()
        if self.snap.status is Status.FOUND:
            self.stepper.reconstruct_path()
            self.snap = self.stepper.snapshot()
        if self.snap.status.terminal:
            logger.info("%s %s: explored=%d path=%d", self.algorithm.label, self.snap.status.value,
                        self.snap.explored, self.snap.path_cells)
        self._update_caption()

    # ----------------- editing (only between runs) -----------------
    def _replace_world(self, world: GridModel) -> None:
        self.reset_run()
        self.world = world

    def new_maze(self) -> None:
        self._replace_world(generate_maze(self.world.rows, self.world.cols))

    def random_walls(self) -> None:
        world = GridModel.empty(self.world.rows, self.world.cols, self.world.start, self.world.end)
        sprinkle(world, DEFAULT_DENSITY)
        self._replace_world(world)

    def clear(self) -> None:
        self._replace_world(GridModel.empty(self.world.rows, self.world.cols, self.world.start, self.world.end))

    def _cell_at(self, pos) -> Optional[Coord]:
        x, y = pos
        s = (y // self.cell, x // self.cell)
        return s if self.world.in_bounds(s) else None

    def edit_at(self, pos, drag: bool = False) -> None:
        if self.running:
            return
        s = self._cell_at(pos)
        if s is None:
            return
        if self.snap is not None:
            self.reset_run()
        if self.draw_mode == "start" and not drag:
            self.world.move_start(s)
        elif self.draw_mode == "end" and not drag:
            self.world.move_end(s)
        elif self.draw_mode == "wall":
            if drag:
                self.world.set_wall(s, True)
            else:
                self.world.toggle_wall(s)

    # ----------------- draw -----------------
    def _color(self, r: int, c: int):
        role = self.world.roles[r][c]
        if role is Role.WALL:
            return Colors.WALL
        if role is Role.START:
            return Colors.START
        if role is Role.END:
            return Colors.END
        if self.snap is None:
            return Colors.FLOOR
        tag = self.snap.tags[r][c]
        if tag is Tag.PATH:
            return Colors.PATH
        if tag is Tag.FRONTIER:
            return Colors.FRONTIER
        if tag is Tag.VISITED:
            return Colors.VISITED
        return Colors.FLOOR

    def draw(self) -> None:
        cell = self.cell
        scr = self.screen
        scr.fill(Colors.BG)
        for r in range(self.world.rows):
            for c in range(self.world.cols):
                rect = pygame.Rect(c * cell, r * cell, cell - 1, cell - 1)
                scr.fill(self._color(r, c), rect)
        pygame.display.flip()

    def _update_caption(self) -> None:
        parts = [f"{self.algorithm.label}", f"mode={self.draw_mode}"]
        if self.snap is not None:
            parts.append(f"{self.snap.status.value}")
            parts.append(f"explored={self.snap.explored}")
            parts.append(f"path={self.snap.path_cells}")
        if self.paused:
            parts.append("paused")
        parts.append(f"{self.steps_per_sec:.0f} steps/s")
        pygame.display.set_caption(" | ".join(parts))

    # ----------------- loop -----------------
    def run(self) -> None:
        running = True
        while running:
            dt = self.clock.tick(self.fps) / 1000.0
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_SPACE:
                        self.start_or_pause()
                    elif event.key == pygame.K_n:
                        self.single_step()
                    elif event.key == pygame.K_r:
                        self.reset_run()
                    elif event.key == pygame.K_c:
                        self.clear()
                    elif event.key == pygame.K_m:
                        self.new_maze()
                    elif event.key == pygame.K_w:
                        self.random_walls()
                    elif event.key == pygame.K_s:
                        self.draw_mode = "start"
                    elif event.key == pygame.K_e:
                        self.draw_mode = "end"
                    elif event.key == pygame.K_d:
                        self.draw_mode = "wall"
                    elif event.key in ALGORITHM_KEYS:
                        self.algorithm = ALGORITHM_KEYS[event.key]
                        self.reset_run()
                    elif event.key in (pygame.K_EQUALS, pygame.K_PLUS):
                        self.steps_per_sec = min(self.steps_per_sec * 1.5, 2000.0)
                    elif event.key == pygame.K_MINUS:
                        self.steps_per_sec = max(self.steps_per_sec / 1.5, 1.0)
                    self._update_caption()
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    self._dragging = True
                    self.edit_at(event.pos)
                elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                    self._dragging = False
                elif event.type == pygame.MOUSEMOTION and self._dragging:
                    self.edit_at(event.pos, drag=True)

            if self.running and not self.paused:
                self._step_timer += dt
                interval = 1.0 / self.steps_per_sec
                while self._step_timer >= interval and self.running:
                    self._advance()
                    self._step_timer -= interval
            else:
                self._step_timer = 0.0

            self.draw()

def main():
    parser = argparse.ArgumentParser(description="Interactive pathfinding viewer")
    parser.add_argument("--rows", type=int, default=DEFAULT_ROWS, help="Grid rows")
    parser.add_argument("--cols", type=int, default=DEFAULT_COLS, help="Grid columns")
    parser.add_argument("--load", type=str, default=None, help="Load a saved grid (.txt)")
    parser.add_argument("--maze", action="store_true", help="Start from a generated maze")
    parser.add_argument("--cell", type=int, default=24, help="Cell size in pixels")
    parser.add_argument("--fps", type=int, default=60, help="Frames per second")
    parser.add_argument("--speed", type=float, default=50.0, help="Search steps per second")
    args = parser.parse_args()

    if args.load:
        world = GridModel.load(args.load)
    elif args.maze:
        world = generate_maze(args.rows, args.cols)
    else:
        world = GridModel.empty(args.rows, args.cols)

    pygame.init()
    try:
        Viewer(world, cell_size=args.cell, fps=args.fps, speed=args.speed).run()
    finally:
        pygame.quit()

if __name__ == "__main__":
    main()
