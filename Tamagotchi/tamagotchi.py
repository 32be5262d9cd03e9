#!/usr/bin/env python3
import os
import time
import math
import logging
import platform
import pygame

from constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, FPS, TICK_INTERVAL, LOG_LEVEL, TRANSITION_SECONDS, HUD_SECONDS, NEAR_DEATH_HEALTH,
    COLOR_BG, COLOR_TEXT, COLOR_PET_EYES, COLOR_BTN, COLOR_GAME_OVER, COLOR_DEAD_BODY, MOOD_COLORS,
    COLOR_HEALTH, COLOR_HUNGER, COLOR_HYGIENE, COLOR_SOCIAL, COLOR_REST,
)
from errors import InvalidStateError
from models import Mood, PetAction
from pet_entity import PetEngine
from ui_components import StatBar, RetroButton

logger = logging.getLogger(__name__)


def _plural(count, unit):
    return f"{count} {unit}" if count == 1 else f"{count} {unit}s"


def format_survival_time(seconds: int) -> str:
    """Spell out survival time, e.g. '1 hour, 2 minutes, and 5 seconds'.

    Zero units are left out, except seconds when nothing else is shown.
    """
    seconds = max(0, int(seconds))
    hours, rest = divmod(seconds, 3600)
    minutes, secs = divmod(rest, 60)

    text = ""
    if hours > 0:
        text = _plural(hours, "hour")
    if minutes > 0:
        if text:
            text += ", "
        text += _plural(minutes, "minute")
    if secs > 0 or not text:
        if text:
            text += ", and "
        text += _plural(secs, "second")
    return text


class GameEngine:
    """Window, buttons and the tick cadence around a PetEngine.

    Every game rule lives in PetEngine; this class only calls its entry
    points and draws what it reports. The cadence pauses while an action
    animation plays and resumes a full interval after it ends.
    """

    def __init__(self, pet: PetEngine = None, now=time.monotonic):
        pygame.init()
        if platform.system() == "Darwin":
            try:
                self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT), pygame.SCALED | pygame.RESIZABLE)
            except pygame.error:
                self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        else:
            self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption("Pocket Pet")
        self.clock = pygame.time.Clock()
        self.font = pygame.font.Font(None, 24)
        self.small_font = pygame.font.Font(None, 18)
        self.big_font = pygame.font.Font(None, 48)
        self.fps = FPS

        self._now = now
        self.pet = pet or PetEngine()
        self.ticks_run = 0
        self._next_tick_at = self._now() + TICK_INTERVAL
        self.transition_until = 0.0
        self.transition_name = None
        self.hud_text = None
        self.hud_expiry = 0.0
        self._last_drawn_pet = {}

        self.bars = {
            'health': StatBar(16, 30, 120, 12, "Health", COLOR_HEALTH),
            'hunger': StatBar(16, 70, 120, 12, "Hunger", COLOR_HUNGER),
            'hygiene': StatBar(16, 110, 120, 12, "Hygiene", COLOR_HYGIENE),
            'social': StatBar(16, 150, 120, 12, "Social", COLOR_SOCIAL),
            'rest': StatBar(16, 190, 120, 12, "Rest", COLOR_REST),
        }

        labels = [(PetAction.FEED, "Feed"), (PetAction.SHOWER, "Shower"),
                  (PetAction.SOCIALIZE, "Play"), (PetAction.SLEEP, "Sleep")]
        btn_w, btn_h, gap = 84, 36, 8
        self.action_buttons = {}
        for i, (action, label) in enumerate(labels):
            x = 16 + i * (btn_w + gap)
            self.action_buttons[action] = RetroButton(
                x, SCREEN_HEIGHT - btn_h - 12, btn_w, btn_h, label, COLOR_BTN,
                on_click=lambda a=action: self.perform(a),
            )
        self.btn_reset = RetroButton(
            SCREEN_WIDTH - btn_w - 16, SCREEN_HEIGHT - btn_h - 12, btn_w, btn_h, "Reset", (120, 80, 80),
            on_click=self.reset,
        )
        self.buttons = list(self.action_buttons.values()) + [self.btn_reset]
        self._sync_bars()

    # --- Engine wiring ---
    @property
    def paused(self) -> bool:
        return self._now() < self.transition_until

    def perform(self, action: PetAction):
        try:
            self.pet.perform_action(action)
        except InvalidStateError:
            self.show_hud("Game over! Press Reset")
            return
        self._start_transition(action.value)
        self.show_hud(f"{action.name.title()}!")

    def reset(self):
        self.pet.reset()
        self._start_transition('reset')
        self.show_hud("Reborn!")

    def _start_transition(self, name):
        self.transition_name = name
        self.transition_until = self._now() + TRANSITION_SECONDS[name]
        self._sync_bars()

    def _update_cadence(self):
        now = self._now()
        if now < self.transition_until:
            return
        if self.transition_name is not None:
            # Transition finished: resume counting from here
            self.transition_name = None
            self._next_tick_at = now + TICK_INTERVAL
            return
        if now >= self._next_tick_at:
            self.pet.tick()
            self.ticks_run += 1
            self._next_tick_at = now + TICK_INTERVAL
            self._sync_bars()

    def _sync_bars(self):
        for key, bar in self.bars.items():
            bar.set_value(getattr(self.pet, key))
        game_over = self.pet.game_over
        for btn in self.action_buttons.values():
            btn.dimmed = game_over

    def show_hud(self, text, duration=HUD_SECONDS):
        self.hud_text = text
        self.hud_expiry = self._now() + duration

    # --- Drawing ---
    @property
    def looks_dead(self) -> bool:
        """Dead face from near-death health on, not only once the game is over."""
        return self.pet.game_over or self.pet.health <= NEAR_DEATH_HEALTH

    def draw_pet(self, center):
        cx, cy = center
        mood = self.pet.mood
        looks_dead = self.looks_dead
        self._last_drawn_pet = {"dead": looks_dead, "mood": mood}
        radius = 50
        bob = math.sin(time.time() * 3) * 2 if not looks_dead else 0
        cy += bob
        body_color = COLOR_DEAD_BODY if looks_dead else MOOD_COLORS[mood.value]
        pygame.draw.ellipse(self.screen, body_color, (cx - radius, cy - radius * 0.8, radius * 2, radius * 1.6))

        eye_y = cy - radius * 0.2
        if looks_dead:
            for ex in (cx - 18, cx + 18):
                pygame.draw.line(self.screen, COLOR_PET_EYES, (ex - 6, eye_y - 6), (ex + 6, eye_y + 6), 3)
                pygame.draw.line(self.screen, COLOR_PET_EYES, (ex - 6, eye_y + 6), (ex + 6, eye_y - 6), 3)
        else:
            for ex in (cx - 18, cx + 18):
                pygame.draw.ellipse(self.screen, COLOR_PET_EYES, (ex - 5, eye_y - 7, 10, 14))
            if mood == Mood.GRUMPY:
                pygame.draw.line(self.screen, COLOR_PET_EYES, (cx - 26, eye_y - 14), (cx - 10, eye_y - 9), 3)
                pygame.draw.line(self.screen, COLOR_PET_EYES, (cx + 26, eye_y - 14), (cx + 10, eye_y - 9), 3)

        mouth_y = cy + radius * 0.3
        mouth = pygame.Rect(cx - 14, mouth_y - 5, 28, 12)
        if mood == Mood.HAPPY and not looks_dead:
            pygame.draw.arc(self.screen, COLOR_PET_EYES, mouth, math.pi, 2 * math.pi, 2)
        elif mood == Mood.DEPRESSIVE or looks_dead:
            pygame.draw.arc(self.screen, COLOR_PET_EYES, mouth.move(0, 6), 0, math.pi, 2)
        else:
            pygame.draw.line(self.screen, COLOR_PET_EYES, (cx - 12, mouth_y), (cx + 12, mouth_y), 2)

    def _render_hud(self, center):
        if not self.hud_text or self._now() > self.hud_expiry:
            self.hud_text = None
            return
        surf = self.font.render(self.hud_text, True, COLOR_TEXT)
        self.screen.blit(surf, surf.get_rect(center=(center[0], center[1] - 80)))

    def step(self, dt=None):
        """Process a single loop iteration (useful for headless tests). Returns False to stop."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
                for btn in self.buttons:
                    if btn.handle_event(event.pos, event.type):
                        break

        self._update_cadence()
        frame_dt = dt if dt is not None else 1.0 / max(1, self.fps)
        for bar in self.bars.values():
            bar.update(frame_dt)

        self.screen.fill(COLOR_BG)
        for bar in self.bars.values():
            bar.draw(self.screen, self.small_font)

        pet_center = (SCREEN_WIDTH // 2 + 60, SCREEN_HEIGHT // 2 - 10)
        self.draw_pet(pet_center)

        status = self.pet.status()
        info = f"{status.mood.name.title()} / {status.behavior.name.title()}"
        self.screen.blit(self.small_font.render(info, True, COLOR_TEXT), (SCREEN_WIDTH - 170, 12))
        clock_text = f"Alive {format_survival_time(status.survival_seconds)}"
        self.screen.blit(self.small_font.render(clock_text, True, COLOR_TEXT), (16, SCREEN_HEIGHT - 70))

        if status.game_over:
            over = self.big_font.render("GAME OVER", True, COLOR_GAME_OVER)
            self.screen.blit(over, over.get_rect(center=(pet_center[0], pet_center[1] + 80)))

        self._render_hud(pet_center)
        for btn in self.buttons:
            btn.draw(self.screen, self.font)

        pygame.display.flip()
        self.clock.tick(self.fps)
        return True

    def run(self):
        running = True
        while running:
            running = self.step()
        logger.info("Exiting after %d ticks", self.ticks_run)
        pygame.quit()


def main():
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if os.environ.get("SDL_VIDEODRIVER") == "dummy":
        logger.info("Running headless")
    GameEngine().run()


if __name__ == "__main__":
    main()
