"""Keyboard bindings: one key press becomes at most one Action."""

from typing import Dict, Optional
import pygame
from .direction import DOWN, DOWNLEFT, DOWNRIGHT, LEFT, RIGHT, UP, UPLEFT, UPRIGHT
from .ship import Action


KEY_ACTIONS: Dict[int, Action] = {
    # Cardinal headings: arrows, WASD, vi keys
    pygame.K_RIGHT: Action.move(RIGHT),
    pygame.K_d: Action.move(RIGHT),
    pygame.K_l: Action.move(RIGHT),
    pygame.K_LEFT: Action.move(LEFT),
    pygame.K_a: Action.move(LEFT),
    pygame.K_h: Action.move(LEFT),
    pygame.K_UP: Action.move(UP),
    pygame.K_w: Action.move(UP),
    pygame.K_k: Action.move(UP),
    pygame.K_DOWN: Action.move(DOWN),
    pygame.K_s: Action.move(DOWN),
    pygame.K_j: Action.move(DOWN),
    # Diagonals
    pygame.K_q: Action.move(UPLEFT),
    pygame.K_y: Action.move(UPLEFT),
    pygame.K_e: Action.move(UPRIGHT),
    pygame.K_u: Action.move(UPRIGHT),
    pygame.K_z: Action.move(DOWNLEFT),
    pygame.K_b: Action.move(DOWNLEFT),
    pygame.K_c: Action.move(DOWNRIGHT),
    pygame.K_n: Action.move(DOWNRIGHT),
    # Hold course
    pygame.K_SPACE: Action.wait(),
}


def action_for_key(key: int) -> Optional[Action]:
    return KEY_ACTIONS.get(key)
