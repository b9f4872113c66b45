# render.py
import pygame  # type: ignore

from .config import WIDTH, HEIGHT, BG, GREEN, HEAD, RED, TEXT, SEGMENT_RADIUS, FOOD_RADIUS
from .game import Snapshot


def draw_game(
    screen: pygame.Surface,
    font: pygame.font.Font,
    snap: Snapshot,
    segment_radius: float = SEGMENT_RADIUS,
    food_radius: float = FOOD_RADIUS,
) -> None:
    screen.fill(BG)
    # food
    for x, y in snap.food:
        pygame.draw.circle(screen, RED, (round(x), round(y)), round(food_radius))
    # snake, tail first so the head is drawn on top
    for i in range(len(snap.segments) - 1, -1, -1):
        x, y = snap.segments[i]
        color = HEAD if i == 0 else GREEN
        pygame.draw.circle(screen, color, (round(x), round(y)), round(segment_radius))
    # score
    txt = font.render(f"Score: {snap.score}", True, TEXT)
    screen.blit(txt, (8, 6))


def draw_game_over(screen: pygame.Surface, font: pygame.font.Font, score: int) -> None:
    # Dim with translucent overlay
    overlay = pygame.Surface((WIDTH, HEIGHT), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 140))  # RGBA
    screen.blit(overlay, (0, 0))

    lines = (
        ("GAME OVER", -16, HEAD),
        ("Press R to restart", 16, TEXT),
        (f"Score: {score}", 44, TEXT),
    )
    for text, dy, color in lines:
        surf = font.render(text, True, color)
        screen.blit(surf, surf.get_rect(center=(WIDTH // 2, HEIGHT // 2 + dy)))
