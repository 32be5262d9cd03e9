import pygame
from typing import Tuple, Optional, Callable
from constants import (
    COLOR_UI_BAR_BG, COLOR_TEXT, COLOR_PET_EYES,
    BUTTON_BORDER_RADIUS, BUTTON_BORDER_WIDTH, BUTTON_SHADOW_OFFSET, STAT_BAR_BORDER_RADIUS,
)


class StatBar:
    """Labelled level bar (0-100) that eases toward its target value."""

    def __init__(self, x: int, y: int, width: int, height: int,
                 label: str, color: Tuple[int, int, int]):
        self.rect = pygame.Rect(x, y, width, height)
        self.label = label
        self.color = color
        self.target_value = 100
        self.current_value = 100.0

    def set_value(self, value: int):
        self.target_value = max(0, min(100, value))

    def update(self, dt: float):
        if abs(self.current_value - self.target_value) > 0.1:
            diff = self.target_value - self.current_value
            self.current_value += diff * min(1.0, 5 * dt)
        else:
            self.current_value = self.target_value

    def draw(self, surface: pygame.Surface, font: pygame.font.Font):
        lbl = font.render(f"{self.label} {self.target_value}", True, COLOR_TEXT)
        surface.blit(lbl, (self.rect.x, self.rect.y - 16))

        pygame.draw.rect(surface, COLOR_UI_BAR_BG, self.rect, border_radius=STAT_BAR_BORDER_RADIUS)
        fill_width = int((self.current_value / 100) * self.rect.width)
        if fill_width > 0:
            fill_rect = pygame.Rect(self.rect.x, self.rect.y, fill_width, self.rect.height)
            pygame.draw.rect(surface, self.color, fill_rect, border_radius=STAT_BAR_BORDER_RADIUS)


class RetroButton:
    """Touch-friendly button; fires on_click on release inside the button."""

    def __init__(self, x: int, y: int, width: int, height: int,
                 text: str, color: Tuple[int, int, int],
                 on_click: Optional[Callable] = None):
        self.rect = pygame.Rect(x, y, width, height)
        self.text = text
        self.color = color
        self.on_click = on_click
        self.pressed = False
        self.dimmed = False

    def draw(self, surface: pygame.Surface, font: pygame.font.Font):
        shadow_rect = self.rect.move(BUTTON_SHADOW_OFFSET, BUTTON_SHADOW_OFFSET)
        pygame.draw.rect(surface, COLOR_UI_BAR_BG, shadow_rect, border_radius=BUTTON_BORDER_RADIUS)

        offset = 2 if self.pressed else 0
        draw_rect = self.rect.move(offset, offset)
        color = tuple(c // 2 for c in self.color) if self.dimmed else self.color
        pygame.draw.rect(surface, color, draw_rect, border_radius=BUTTON_BORDER_RADIUS)
        pygame.draw.rect(surface, COLOR_PET_EYES, draw_rect, BUTTON_BORDER_WIDTH, border_radius=BUTTON_BORDER_RADIUS)

        text_surface = font.render(self.text, True, COLOR_PET_EYES)
        surface.blit(text_surface, text_surface.get_rect(center=draw_rect.center))

    def handle_event(self, pos: Tuple[int, int], event_type: int) -> bool:
        """Returns True when the click completed and on_click ran."""
        if event_type == pygame.MOUSEBUTTONDOWN:
            if self.rect.collidepoint(pos):
                self.pressed = True
        elif event_type == pygame.MOUSEBUTTONUP:
            was_pressed = self.pressed
            self.pressed = False
            if was_pressed and self.rect.collidepoint(pos):
                if self.on_click:
                    self.on_click()
                return True
        return False
