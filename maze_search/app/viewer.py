#!/usr/bin/env python3
"""
Maze Search Viewer — step-driven BFS / A* with metrics panel

- Keyboard:
    [SPACE]      -> run/pause
    [N]          -> run one batch
    [R]          -> reset the search
    [G]          -> generate a new Perlin maze
    [B]/[A]      -> select algorithm (BFS / A*)
    [8]          -> toggle diagonal moves
    [L]          -> lock the view on the path head (zoomed)
    [+]/[-]      -> grow/shrink batch size
    [1]/[2]/[3]  -> bundled maps
    [Q]/[ESC]    -> quit

Options:
- CLI: --algo=bfs|astar --diagonal --size=WxH --seed=N --map=NAME
- ENV: MAZE_ALGO, MAZE_WIDTH, MAZE_HEIGHT, MAZE_SEED
"""

import logging
import sys
import time
from typing import List, Tuple, Optional, Set

import pygame

from maze_search import config
from maze_search.core.astar import AStarAlgo
from maze_search.core.bfs import BfsAlgo
from maze_search.core.maps import MAP_FILES, load_map
from maze_search.core.maze_gen import perlin_maze
from maze_search.core.types import Cell, Outcome, Scenario, StepResult

logger = logging.getLogger(__name__)

ALGO_LABELS = {"bfs": "BFS", "astar": "A*"}

PANEL_W = 360            # right band: metrics + buttons
GRID_MARGIN = 16
FONT_NAME = None  # default pygame font

# Colors
WHITE       = (255,255,255)
BLACK       = (  0,  0,  0)
BLUE        = ( 70,130,180)
RED         = (220, 50, 47)
WALL        = ( 20, 20, 20)
FLOOR       = (140,140,140)
OPEN_A      = (0,150,255,110)
CLOSED_A    = (255,0,120,90)
PATH_RED    = (235, 60, 60)

CARD_BG     = (24,28,36,220)
CARD_HI     = (255,255,255,18)
TEXT_LIGHT  = (230,235,240)
ACCENT_GOLD = (255,210,0)


# ---------- Option resolution ----------
def resolve_arg(name: str, default: Optional[str] = None) -> Optional[str]:
    """Value of `--name=value` (or `--name` as "1") from argv, else default."""
    value = default
    for arg in sys.argv[1:]:
        if arg == f"--{name}":
            value = "1"
        elif arg.startswith(f"--{name}="):
            value = arg.split("=", 1)[1]
    return value


def parse_size(raw: str) -> Tuple[int, int]:
    w, _, h = raw.lower().partition("x")
    return int(w), int(h or w)


def make_algo(key: str, diagonal: bool):
    if key == "astar":
        return AStarAlgo(name="A*", diagonal=diagonal)
    if key == "bfs":
        return BfsAlgo(name="BFS", diagonal=diagonal)
    raise ValueError(f"unknown algorithm {key!r} (expected 'bfs' or 'astar')")


def generated_scenario(width: int, height: int, seed: Optional[int], diagonal: bool) -> Scenario:
    start, goal = (0, 0), (width - 1, height - 1)
    grid = perlin_maze(width, height, seed, keep_open=(start, goal))
    return Scenario(grid, start, goal, diagonal=diagonal, name="generated")


def follow_origin(head: Cell, cell_size: int, view: pygame.Rect) -> Tuple[int, int]:
    """Grid origin (px) that puts the centre of `head` at the centre of `view`."""
    col, row = head
    return (view.centerx - col * cell_size - cell_size // 2,
            view.centery - row * cell_size - cell_size // 2)


def visible_range(origin: int, cell_size: int, lo: int, hi: int, count: int) -> range:
    """Indices of the cells along one axis that overlap the pixel span [lo, hi)."""
    first = max(0, (lo - origin) // cell_size)
    last = min(count, (hi - origin + cell_size - 1) // cell_size)
    return range(first, max(first, last))


# ---------- Simple UI Button ----------
class UIButton:
    def __init__(self, label: str, rect: pygame.Rect, callback, *, togglable: bool = False):
        self.label = label
        self.rect = rect
        self.callback = callback
        self.hover = False
        self.togglable = togglable
        self.active = False

    def set_active(self, value: bool):
        self.active = bool(value)

    def draw(self, screen: pygame.Surface, font: pygame.font.Font):
        base = pygame.Surface(self.rect.size, pygame.SRCALPHA)
        if self.active and self.togglable:
            bg = (58, 86, 160, 235)
        elif self.hover:
            bg = (46, 50, 60, 230)
        else:
            bg = (36, 40, 48, 220)
        pygame.draw.rect(base, bg, base.get_rect(), border_radius=10)
        screen.blit(base, self.rect.topleft)

        if self.active and self.togglable:
            pygame.draw.rect(screen, (120, 170, 255, 255), self.rect, width=2, border_radius=10)

        text = font.render(self.label, True, (235,238,242))
        screen.blit(text, text.get_rect(center=self.rect.center))

    def handle_mouse(self, event: pygame.event.Event):
        if event.type == pygame.MOUSEMOTION:
            self.hover = self.rect.collidepoint(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.callback()


# ---------- Viewer ----------
class Viewer:
    def __init__(self, scenario: Scenario, algo_key: str = "bfs", seed: Optional[int] = None):
        pygame.init()

        self.scenario = scenario
        self.seed = seed
        self.font_small = pygame.font.Font(FONT_NAME, 14)
        self.font = pygame.font.Font(FONT_NAME, 18)
        self.font_big = pygame.font.Font(FONT_NAME, 22)

        win_w = max(GRID_MARGIN*2 + scenario.grid.width * 16 + PANEL_W, 800)
        win_h = max(GRID_MARGIN*2 + scenario.grid.height * 16, 620)
        self.screen = pygame.display.set_mode((win_w, win_h), pygame.RESIZABLE)
        pygame.display.set_caption(f"Maze Search — {scenario.name}")

        self._buttons: List[UIButton] = []

        self.open_set: Set[Cell] = set()
        self.closed_set: Set[Cell] = set()
        self.path: List[Cell] = []

        self.running = False
        self.clock = pygame.time.Clock()
        self.batch = config.STEPS_PER_BATCH
        self.state = "Idle"
        self.selected_algo = algo_key
        self.lock = False
        self._last_step_t = 0.0
        self._last_metrics: dict = {}

        self.algo = make_algo(algo_key, scenario.diagonal)
        self._prepare()
        self._layout(win_w, win_h)

    # ---------- layout ----------
    def _layout(self, win_w: int, win_h: int):
        """Compute integer cell_size that fits window and center the grid."""
        grid = self.scenario.grid
        if self.lock:
            # fixed zoom; the origin follows the path head in _origin()
            self.cell_size = config.FOLLOW_CELL_SIZE
            self.canvas_rect = pygame.Rect(0, 0, max(1, win_w - PANEL_W), win_h)
            self._grid_origin = self.canvas_rect.topleft
            self._right_band = pygame.Rect(self.canvas_rect.right, 0, PANEL_W, win_h)
            self._build_buttons()
            return

        avail_w = max(1, win_w - PANEL_W - 2 * GRID_MARGIN)
        avail_h = max(1, win_h - 2 * GRID_MARGIN)
        self.cell_size = max(2, min(avail_w // max(1, grid.width), avail_h // max(1, grid.height)))

        grid_plate_w = grid.width * self.cell_size + 2 * GRID_MARGIN
        grid_plate_h = grid.height * self.cell_size + 2 * GRID_MARGIN
        left_x = max(0, (win_w - (grid_plate_w + PANEL_W)) // 2)
        top_y = max(0, (win_h - grid_plate_h) // 2)

        self.canvas_rect = pygame.Rect(left_x, top_y, grid_plate_w, grid_plate_h)
        self._grid_origin = (self.canvas_rect.x + GRID_MARGIN, self.canvas_rect.y + GRID_MARGIN)
        self._right_band = pygame.Rect(self.canvas_rect.right, 0,
                                       max(PANEL_W, win_w - self.canvas_rect.right), win_h)
        self._build_buttons()

    def run(self):
        while True:
            self._handle_events()
            if self.running:
                self._tick_algorithm()
            self._draw()
            self.clock.tick(60)

    # ---------- search driving ----------
    def _prepare(self):
        s = self.scenario
        self.algo.prepare(s.grid, s.start, s.goal)
        self._reset_overlays()

    def _run_batch(self, rounds: int) -> StepResult:
        s = self.scenario
        if isinstance(self.algo, BfsAlgo):
            return self.algo.step(s.grid, s.start, s.goal, repeat=rounds)
        res = self.algo.step(s.grid, s.start, s.goal)
        closed = list(res.closed)
        for _ in range(rounds - 1):
            if self.algo.outcome is not Outcome.IN_PROGRESS:
                break
            res = self.algo.step(s.grid, s.start, s.goal)
            closed.extend(res.closed)
        res.closed = closed
        return res

    def _tick_algorithm(self):
        t0 = time.time()
        if t0 - self._last_step_t >= 1.0 / config.TICKS_PER_SEC:
            self._last_step_t = t0
            self._do_step()

    def _do_step(self):
        res = self._run_batch(max(1, int(self.batch)))
        self.closed_set.update(res.closed)
        self.open_set = set(self.algo.frontier_cells())
        self.path = self.algo.get_path()
        self._last_metrics = res.metrics

        outcome = self.algo.outcome
        if outcome is Outcome.FOUND:
            self.state = "Done"; self.running = False
        elif outcome is Outcome.EXHAUSTED:
            self.state = "No path"; self.running = False
        else:
            self.state = "Running" if self.running else "Paused"
        self._refresh_active_states()

    def _handle_events(self):
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit(0)
            elif e.type == pygame.KEYDOWN:
                if e.key in (pygame.K_ESCAPE, pygame.K_q):
                    pygame.quit(); sys.exit(0)
                elif e.key == pygame.K_SPACE:
                    self._toggle_run()
                elif e.key == pygame.K_n:
                    self._do_step()
                elif e.key == pygame.K_r:
                    self._reset()
                elif e.key == pygame.K_g:
                    self._regenerate()
                elif e.key == pygame.K_b:
                    self._switch_algo("bfs")
                elif e.key == pygame.K_a:
                    self._switch_algo("astar")
                elif e.key == pygame.K_8:
                    self._toggle_diagonal()
                elif e.key == pygame.K_l:
                    self._toggle_lock()
                elif e.key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
                    self._scale_batch(config.BATCH_GROW)
                elif e.key in (pygame.K_MINUS, pygame.K_UNDERSCORE, pygame.K_KP_MINUS):
                    self._scale_batch(config.BATCH_SHRINK)
                elif e.key == pygame.K_1:
                    self._switch_map("01_open_field")
                elif e.key == pygame.K_2:
                    self._switch_map("02_corridors")
                elif e.key == pygame.K_3:
                    self._switch_map("03_sealed_goal")
            elif e.type == pygame.VIDEORESIZE:
                self.screen = pygame.display.set_mode((e.w, e.h), pygame.RESIZABLE)
                self._layout(e.w, e.h)
            elif e.type in (pygame.MOUSEMOTION, pygame.MOUSEBUTTONDOWN):
                for b in self._buttons:
                    b.handle_mouse(e)

    def _set_scenario(self, scenario: Scenario):
        self.scenario = scenario
        pygame.display.set_caption(f"Maze Search — {scenario.name}")
        self.algo = make_algo(self.selected_algo, scenario.diagonal)
        self.running = False; self.state = "Idle"
        self._prepare()
        self._layout(*self.screen.get_size())

    def _switch_map(self, key: str):
        if key not in MAP_FILES: return
        try:
            self._set_scenario(load_map(MAP_FILES[key]))
        except (OSError, ValueError, KeyError) as ex:
            print(f"Failed to load map {key}: {ex}")

    def _regenerate(self):
        g = self.scenario.grid
        if self.seed is not None:
            self.seed += 1
        logger.info("generating %dx%d maze (seed=%s)", g.width, g.height, self.seed)
        self._set_scenario(generated_scenario(g.width, g.height, self.seed, self.scenario.diagonal))

    def _switch_algo(self, key: str):
        self.selected_algo = key
        self.algo = make_algo(key, self.scenario.diagonal)
        self.running = False; self.state = "Idle"
        self._prepare()
        self._refresh_active_states()

    def _toggle_diagonal(self):
        self.scenario.diagonal = not self.scenario.diagonal
        self._switch_algo(self.selected_algo)

    def _toggle_lock(self):
        self.lock = not self.lock
        self._layout(*self.screen.get_size())

    def _toggle_run(self):
        if self.state in ("Done", "No path"):
            return
        self.running = not self.running
        self.state = "Running" if self.running else "Paused"
        self._refresh_active_states()

    def _scale_batch(self, factor: float):
        self.batch = max(1.0, min(config.MAX_STEPS_PER_BATCH, self.batch * factor))

    def _reset_overlays(self):
        self.open_set = set(self.algo.frontier_cells())
        self.closed_set.clear()
        self.path = []
        self._last_metrics = {"algo": self.algo.name, "popped": 0, "open_size": len(self.open_set),
                              "closed_count": 0, "path_len": 0}

    def _reset(self):
        self.running = False
        self.state = "Idle"
        self.algo.reset()
        self._prepare()
        self._refresh_active_states()

    # ---------- drawing ----------
    def _draw(self):
        self._draw_backdrop()
        self._draw_grid()
        self._draw_metrics_and_buttons()
        pygame.display.flip()

    def _draw_backdrop(self):
        w, h = self.screen.get_size()
        top = (24, 26, 32); bot = (36, 40, 48)
        for y in range(h):
            t = y / max(1, h-1)
            c = tuple(int(top[i] + (bot[i]-top[i]) * t) for i in range(3))
            pygame.draw.line(self.screen, c, (0, y), (w, y))

    def _origin(self) -> Tuple[int, int]:
        if not self.lock:
            return self._grid_origin
        head = self.path[-1] if self.path else self.scenario.start
        return follow_origin(head, self.cell_size, self.canvas_rect)

    def _draw_grid(self):
        cs = self.cell_size
        ox, oy = self._origin()
        grid = self.scenario.grid
        view = self.canvas_rect
        self.screen.set_clip(view)

        for row in visible_range(oy, cs, view.top, view.bottom, grid.height):
            for col in visible_range(ox, cs, view.left, view.right, grid.width):
                rect = pygame.Rect(ox + col*cs, oy + row*cs, cs, cs)
                pygame.draw.rect(self.screen, WALL if grid.is_block((col, row)) else FLOOR, rect)
                if cs >= 8:
                    pygame.draw.rect(self.screen, BLACK, rect, 1)

        overlay = pygame.Surface((cs, cs), pygame.SRCALPHA)
        overlay.fill(CLOSED_A)
        for (col,row) in self.closed_set:
            self.screen.blit(overlay, (ox + col*cs, oy + row*cs))
        overlay.fill(OPEN_A)
        for (col,row) in self.open_set:
            self.screen.blit(overlay, (ox + col*cs, oy + row*cs))

        # partial (or final) path as dots, like the original red circles
        radius = max(1, cs // 2 - 1)
        for (col,row) in self.path:
            pygame.draw.circle(self.screen, PATH_RED, (ox + col*cs + cs//2, oy + row*cs + cs//2), radius)

        self._draw_badge(self.scenario.start, "S", BLUE)
        self._draw_badge(self.scenario.goal,  "G", RED)
        self.screen.set_clip(None)

    def _draw_badge(self, cell: Cell, label: str, color: Tuple[int,int,int]):
        cs = self.cell_size
        ox, oy = self._origin()
        col,row = cell
        cx = ox + col*cs + cs//2
        cy = oy + row*cs + cs//2
        pygame.draw.circle(self.screen, color, (cx,cy), max(5, cs//2))
        if cs >= 14:
            txt = self.font_small.render(label, True, WHITE)
            self.screen.blit(txt, txt.get_rect(center=(cx,cy)))

    # ---------- buttons + metrics ----------
    def _build_buttons(self):
        self._buttons.clear()
        rb = self._right_band
        x = rb.x + 16
        y = rb.y + 250  # leaves space for metrics card above
        w = max(160, rb.width - 32)
        h = 34
        gap = 8

        def add(label, cb, *, togglable=False, store_as: Optional[str] = None):
            btn = UIButton(label, pygame.Rect(x, y, w, h), cb, togglable=togglable)
            self._buttons.append(btn)
            if store_as:
                setattr(self, store_as, btn)

        add("Run / Pause", self._toggle_run, togglable=True, store_as="btn_run"); y += h + gap
        add("Step Batch", self._do_step); y += h + gap
        add("Reset", self._reset); y += h + gap
        add("New Maze", self._regenerate); y += h + gap

        half = (w - 8) // 2
        self._buttons.append(UIButton("Batch −", pygame.Rect(x, y, half, h),
                                      lambda: self._scale_batch(config.BATCH_SHRINK)))
        self._buttons.append(UIButton("Batch +", pygame.Rect(x + half + 8, y, half, h),
                                      lambda: self._scale_batch(config.BATCH_GROW)))
        y += h + gap

        add("Algo: BFS", lambda: self._switch_algo("bfs"),   togglable=True, store_as="btn_algo_bfs"); y += h + gap
        add("Algo: A*",  lambda: self._switch_algo("astar"), togglable=True, store_as="btn_algo_astar"); y += h + gap
        add("Diagonal moves", self._toggle_diagonal, togglable=True, store_as="btn_diag"); y += h + gap
        add("Lock on path", self._toggle_lock, togglable=True, store_as="btn_lock")

        self._refresh_active_states()

    def _refresh_active_states(self):
        if hasattr(self, "btn_run"):
            self.btn_run.set_active(self.running)
        if hasattr(self, "btn_algo_bfs"):
            self.btn_algo_bfs.set_active(self.selected_algo == "bfs")
        if hasattr(self, "btn_algo_astar"):
            self.btn_algo_astar.set_active(self.selected_algo == "astar")
        if hasattr(self, "btn_diag"):
            self.btn_diag.set_active(self.scenario.diagonal)
        if hasattr(self, "btn_lock"):
            self.btn_lock.set_active(self.lock)

    def _draw_metrics_and_buttons(self):
        rb = self._right_band

        card = pygame.Surface((rb.width - 20, 230), pygame.SRCALPHA)
        pygame.draw.rect(card, CARD_BG, card.get_rect(), border_radius=14)
        hi = pygame.Surface((card.get_width(), 24), pygame.SRCALPHA)
        pygame.draw.rect(hi, CARD_HI, hi.get_rect(), border_radius=14)
        card.blit(hi, (0,0))
        self.screen.blit(card, (rb.x + 10, rb.y + 10))

        x0 = rb.x + 24
        y0 = rb.y + 18

        def line(text, big=False, color=TEXT_LIGHT):
            nonlocal y0
            f = self.font_big if big else self.font
            surf = f.render(text, True, color)
            self.screen.blit(surf, (x0, y0))
            y0 += surf.get_height() + 6

        line("Metrics", big=True, color=ACCENT_GOLD)
        m = self._last_metrics
        line(f"State: {self.state}")
        line(f"Popped: {m.get('popped', 0)}")
        line(f"Open: {m.get('open_size', 0)}")
        line(f"Visited: {m.get('closed_count', 0)}")
        line(f"Path Len: {len(self.path)}")
        line("-" * 26)
        line(f"Algo: {ALGO_LABELS.get(self.selected_algo, self.selected_algo)}"
             f"  ({8 if self.scenario.diagonal else 4}-connected)")
        line(f"Batch: {int(self.batch)} steps")

        for b in self._buttons:
            b.draw(self.screen, self.font)


# ---------- main ----------
def main():
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT, datefmt="%H:%M:%S")

    algo_key = (resolve_arg("algo", config.DEFAULT_ALGO) or "bfs").lower()
    if algo_key not in ALGO_LABELS:
        print(f"Unknown algorithm {algo_key!r}; use --algo=bfs or --algo=astar")
        sys.exit(2)
    diagonal = resolve_arg("diagonal") is not None
    seed_raw = resolve_arg("seed")
    seed = int(seed_raw) if seed_raw else config.MAZE_SEED

    map_key = resolve_arg("map")
    try:
        if map_key:
            scenario = load_map(MAP_FILES.get(map_key, map_key))
        else:
            width, height = parse_size(resolve_arg("size", f"{config.MAZE_WIDTH}x{config.MAZE_HEIGHT}"))
            scenario = generated_scenario(width, height, seed, diagonal)
    except (OSError, ValueError, KeyError) as ex:
        print(f"Failed to load maze: {ex}")
        sys.exit(1)
    if diagonal:
        scenario.diagonal = True

    Viewer(scenario, algo_key, seed).run()


if __name__ == "__main__":
    main()
