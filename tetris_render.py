"""
Rendering helpers for the Tetris project.

- Pre-render one cell Surface per color and blit it.
- Pre-render the static background (grid + side panel + preview frames).
- Cache HUD text surfaces; re-render only when values change.
- Cache a BOARD SURFACE of locked cells; rebuild only when the board changes.

Nothing here feeds back into GameState.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass, field
from typing import Dict, Tuple, List, Optional
from tetris_layout import Dims, COLS, ROWS, PREVIEW_CELLS
from tetris_piece import PieceType
from tetris_state import GameState, preview_piece, rows_until_difficulty
from tetris_board import Board

# Color names used by the catalog and difficulty rows
PALETTE: Dict[str, Tuple[int,int,int]] = {
    "cyan": (102,224,255),
    "blue": (106,119,255),
    "orange": (255,158,94),
    "yellow": (255,224,102),
    "green": (94,224,142),
    "purple": (200,119,255),
    "red": (255,102,119),
    "grey": (128,132,150),
}

TEXT = (200,210,240)


def format_clock(elapsed: float) -> str:
    """Elapsed seconds as "MM : SS"."""
    secs = int(elapsed)
    return f"{secs // 60:02d} : {secs % 60:02d}"


def difficulty_banner(s: GameState) -> str:
    n = rows_until_difficulty(s)
    return "NEW ROW INCOMING" if n == 0 else f"New row in: {n} blocks"


def hud_lines(s: GameState) -> List[str]:
    return [
        f"Score: {s.score}",
        f"High: {s.high_score}",
        f"Level: {s.level}",
        f"Time: {format_clock(s.elapsed)}",
        difficulty_banner(s),
    ]


@dataclass
class HudCache:
    lines: List[str] = field(default_factory=list)
    surfaces: List[pygame.Surface] = field(default_factory=list)
    next_type: Optional[PieceType] = None
    hold_type: Optional[PieceType] = None
    next_s: Optional[pygame.Surface] = None
    hold_s: Optional[pygame.Surface] = None
    labels: Optional[list] = None

class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self._make_static()
        self._make_cells()
        self.hud = HudCache()
        # Board surface cache (only locked cells)
        self.board_surface = pygame.Surface((dims.board_w, dims.board_h), pygame.SRCALPHA)
        self._board: Optional[Board] = None

    # ---------- Static background (grid + panel) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill((10,13,34))
        grid_col = (40,50,90)
        for x in range(COLS+1):
            X = d.board_x + x*d.cell
            pygame.draw.line(self.bg, grid_col, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(ROWS+1):
            Y = d.board_y + y*d.cell
            pygame.draw.line(self.bg, grid_col, (d.board_x, Y), (d.board_x + d.board_w, Y))
        panel_rect = pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.board_h)
        pygame.draw.rect(self.bg, (21,25,53), panel_rect)
        pygame.draw.rect(self.bg, (50,60,100), panel_rect, 1)
        side = d.preview_cell*PREVIEW_CELLS
        for top in (d.next_y, d.hold_y):
            frame = pygame.Rect(d.panel_x+6, top-6, side+12, side+12)
            pygame.draw.rect(self.bg, (15,18,40), frame)
            pygame.draw.rect(self.bg, (55,65,110), frame, 1)

    def _make_cells(self):
        self.cell_surf: Dict[str, pygame.Surface] = {}
        c = self.dims.cell
        for name, col in PALETTE.items():
            s = pygame.Surface((c-2, c-2))
            s.fill(col)
            self.cell_surf[name] = s

    # ---------- Board surface cache ----------
    def rebuild_board_surface(self, board: Board):
        """Rebuilds the locked-cells surface; a no-op if the board is unchanged."""
        if board is self._board:
            return
        self.board_surface.fill((0,0,0,0))
        c = self.dims.cell
        for cell in board:
            if 0 <= cell.y < ROWS:
                self.board_surface.blit(self.cell_surf[cell.color], (cell.x*c + 1, cell.y*c + 1))
        self._board = board

    def draw_cell(self, screen: pygame.Surface, color: str, bx: int, by: int):
        if by < 0:
            return
        rx = self.dims.board_x + bx*self.dims.cell + 1
        ry = self.dims.board_y + by*self.dims.cell + 1
        screen.blit(self.cell_surf[color], (rx, ry))

    def _preview(self, t: PieceType) -> pygame.Surface:
        pc = self.dims.preview_cell
        s = pygame.Surface((pc*PREVIEW_CELLS, pc*PREVIEW_CELLS), pygame.SRCALPHA)
        p = preview_piece(t)
        for x, y in p.cells:
            block = pygame.Surface((pc-2, pc-2))
            block.fill(PALETTE[p.color])
            s.blit(block, (x*pc + 1, y*pc + 1))
        return s

    # ---------- Whole frame ----------
    def draw(self, screen: pygame.Surface, s: GameState, big_font: pygame.font.Font):
        d = self.dims
        screen.blit(self.bg, (0,0))
        self.rebuild_board_surface(s.board)
        screen.blit(self.board_surface, (d.board_x, d.board_y))
        for x, y in s.active.cells:
            self.draw_cell(screen, s.active.color, x, y)
        self.draw_panel_hud(screen, s)
        if s.ended:
            msg = big_font.render("GAME OVER (R to Restart)", True, (255,220,220))
            rect = msg.get_rect(center=(d.board_x + d.board_w // 2, d.board_y + d.board_h // 2))
            screen.blit(msg, rect)

    # ---------- HUD / Panel ----------
    def draw_panel_hud(self, screen: pygame.Surface, s: GameState):
        d = self.dims
        f = self.font
        if self.hud.labels is None:
            self.hud.labels = [f.render("Next:", True, TEXT), f.render("Hold:", True, TEXT)]
        if s.next_type != self.hud.next_type:
            self.hud.next_type = s.next_type
            self.hud.next_s = self._preview(s.next_type)
        if s.hold_type != self.hud.hold_type:
            self.hud.hold_type = s.hold_type
            self.hud.hold_s = self._preview(s.hold_type)
        lines = hud_lines(s)
        if lines != self.hud.lines:
            self.hud.lines = lines
            self.hud.surfaces = [f.render(t, True, TEXT) for t in lines]

        screen.blit(self.hud.labels[0], (d.panel_x + 12, d.next_y - 24))
        screen.blit(self.hud.next_s, (d.panel_x + 12, d.next_y))
        screen.blit(self.hud.labels[1], (d.panel_x + 12, d.hold_y - 24))
        screen.blit(self.hud.hold_s, (d.panel_x + 12, d.hold_y))
        y = d.hold_y + d.preview_cell*PREVIEW_CELLS + 24
        for surf in self.hud.surfaces:
            screen.blit(surf, (d.panel_x + 12, y)); y += 22
