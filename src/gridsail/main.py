import logging
import math
import pygame
from typing import Tuple
from .controls import action_for_key
from .game_params import GameParams, DEFAULT
from .point_of_sail import Wind
from .ship import Ship
from .vector import Vector


# -----------------------------
# Pygame viz
# -----------------------------

def tile_to_screen(position: Vector, params: GameParams) -> Tuple[float, float]:
    """Grid tile to pixel center. Grid y points up, screen y points down."""
    cx, cy = params.width / 2, params.height / 2
    return cx + position.x * params.tile_size, cy - position.y * params.tile_size


def draw_arrow(surf, x, y, ang_deg, length, color, width=2):
    th = math.radians(ang_deg)
    x2 = x + length * math.cos(th)
    y2 = y - length * math.sin(th)
    pygame.draw.line(surf, color, (x, y), (x2, y2), width)
    # head
    h = 10
    left = (x2 - h * math.cos(th) + h * math.sin(th), y2 + h * math.sin(th) + h * math.cos(th))
    right = (x2 - h * math.cos(th) - h * math.sin(th), y2 + h * math.sin(th) - h * math.cos(th))
    pygame.draw.polygon(surf, color, [(x2, y2), left, right])


def draw_grid(surf, params: GameParams):
    cx, cy = params.width / 2, params.height / 2
    t = params.tile_size
    x = cx % t - t / 2
    while x < params.width:
        pygame.draw.line(surf, params.grid_color, (x, 0), (x, params.height))
        x += t
    y = cy % t - t / 2
    while y < params.height:
        pygame.draw.line(surf, params.grid_color, (0, y), (params.width, y))
        y += t


def draw_ship(surf, ship: Ship, params: GameParams):
    x, y = tile_to_screen(ship.position, params)
    # ring step is 45 degrees, counter-clockwise from east
    th = math.radians(45.0 * ship.heading.direction.value)
    c, s = math.cos(th), -math.sin(th)
    ship_len = params.tile_size * 0.9
    ship_wid = params.tile_size * 0.3
    p1 = (x + c * ship_len * 0.6, y + s * ship_len * 0.6)
    p2 = (x - c * ship_len * 0.4 - s * ship_wid, y - s * ship_len * 0.4 + c * ship_wid)
    p3 = (x - c * ship_len * 0.4 + s * ship_wid, y - s * ship_len * 0.4 - c * ship_wid)
    pygame.draw.polygon(surf, params.ship_color, [p1, p2, p3])


def main(params: GameParams = DEFAULT):
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    pygame.init()
    screen = pygame.display.set_mode((params.width, params.height))
    pygame.display.set_caption("Grid sail")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont(params.font_name, params.font_size)

    ship = Ship.spawn(params)
    wind = Wind(params.wind)

    while True:
        clock.tick(params.fps)
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit()
                return
            if e.type == pygame.KEYDOWN:
                if e.key == pygame.K_ESCAPE:
                    pygame.quit(); return
                if e.key == pygame.K_r:
                    ship = Ship.spawn(params)
                    continue
                action = action_for_key(e.key)
                if action is not None:
                    ship.apply(action, wind)

        # ----- Render
        screen.fill(params.bg)
        draw_grid(screen, params)
        draw_ship(screen, ship, params)

        # Wind arrow at top-right
        draw_arrow(screen, params.width - 60, 60, 45.0 * wind.direction.value, 40, params.wind_color, 3)

        # HUD
        lines = ship.status(wind).split("\n") + [
            "Arrows/WASD/HJKL: turn  |  Q E Z C: diagonals  |  SPACE: hold  |  R: reset  |  ESC: quit",
        ]
        for i, txt in enumerate(lines):
            surf = font.render(txt, True, params.text_color)
            screen.blit(surf, (5, 5 + (params.font_size + 4) * i))

        pygame.display.flip()


if __name__ == "__main__":
    main()
