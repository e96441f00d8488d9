# src/game/game.py
import sys
from dataclasses import dataclass
import pygame
from pygame import K_ESCAPE, K_LEFT, K_RIGHT
from .config import (
    WIDTH, HEIGHT, FPS, TITLE, MAX_TICKS_PER_FRAME,
    COLOR_BG, COLOR_PLAYER, COLOR_PLAT, COLOR_FG, COLOR_DIM,
    FONT_NAME, FONT_SIZE, HUD_POS
)
from .world import World

@dataclass
class InputState:
    left: bool = False
    right: bool = False
    quit: bool = False

def poll_input() -> InputState:
    """Drain the event queue once; quit is edge-triggered, arrows are held."""
    state = InputState()
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            state.quit = True
        if event.type == pygame.KEYDOWN and event.key == K_ESCAPE:
            state.quit = True
    keys = pygame.key.get_pressed()
    state.left = bool(keys[K_LEFT])
    state.right = bool(keys[K_RIGHT])
    return state

def draw_scene(screen: pygame.Surface, world: World):
    """Background, player and platforms; shared by the game window and the env."""
    screen.fill(COLOR_BG)
    pygame.draw.rect(screen, COLOR_PLAYER, world.player.rect)
    world.level.draw(screen, COLOR_PLAT)

def draw_world(screen: pygame.Surface, font: pygame.font.Font, world: World):
    draw_scene(screen, world)

    x, y = HUD_POS
    screen.blit(font.render(f"Score: {world.score}", True, COLOR_FG), (x, y))
    screen.blit(font.render(f"Best: {world.best_score}", True, COLOR_DIM), (x, y + FONT_SIZE + 4))

def run():
    try:
        pygame.init()
        pygame.display.set_caption(TITLE)
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        font = pygame.font.SysFont(FONT_NAME, FONT_SIZE, bold=True)
    except pygame.error as e:
        print(f"{TITLE}: {e}", file=sys.stderr)
        pygame.quit()
        sys.exit(1)

    clock = pygame.time.Clock()
    world = World()
    print(f"{TITLE} started (level seed {world.seed})")

    tick = 1.0 / FPS
    acc = 0.0
    running = True
    while running:
        acc += clock.tick(FPS) / 1000.0
        if acc > tick * MAX_TICKS_PER_FRAME:  # clamp stalls
            acc = tick * MAX_TICKS_PER_FRAME

        inp = poll_input()
        if inp.quit:
            running = False

        while acc >= tick:
            info = world.step(inp.left, inp.right)
            if info.reset:
                print(f"fell: best={world.best_score} deaths={world.deaths}")
            acc -= tick

        try:
            draw_world(screen, font, world)
            pygame.display.flip()
        except pygame.error as e:
            print(f"{TITLE}: {e}", file=sys.stderr)
            pygame.quit()
            sys.exit(1)

    pygame.quit()

if __name__ == "__main__":
    run()
