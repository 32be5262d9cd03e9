import os

# --- GAMEPLAY ---
LEVEL_MIN = 0
LEVEL_MAX = 100
BASELINE_NEED = 100         # starting value for hunger/hygiene/social/rest
BASELINE_HEALTH = LEVEL_MAX

NEED_DECAY_PER_TICK = 1
CRITICAL_NEED = 20          # a need below this costs health
CRITICAL_NEED_PENALTY = 10  # health lost per critical need

# Mood thresholds: health > HAPPY -> HAPPY, health > GRUMPY -> GRUMPY, else DEPRESSIVE
HAPPY_THRESHOLD = 70
GRUMPY_THRESHOLD = 30

# --- BEHAVIOR DELTAS (added to the need the action targets) ---
# Grumpy pets react most to socializing. Keep it that way.
BEHAVIOR_DELTAS = {
    'playful':    {'feed': 30, 'shower': 25, 'socialize': 20, 'sleep': 35},
    'grumpy':     {'feed': 15, 'shower': 15, 'socialize': 30, 'sleep': 20},
    'depressive': {'feed': 10, 'shower': 10, 'socialize': 5,  'sleep': 15},
}

# --- HOST CONFIGURATION ---
SCREEN_WIDTH = 480
SCREEN_HEIGHT = 320
FPS = int(os.getenv("TAMAGOTCHI_FPS", "30"))
TICK_INTERVAL = float(os.getenv("TAMAGOTCHI_TICK_SECONDS", "1.0"))
LOG_LEVEL = os.getenv("TAMAGOTCHI_LOG_LEVEL", "INFO")

# Seconds the tick cadence stays paused while an action animation plays
TRANSITION_SECONDS = {
    'feed': 1.5,
    'shower': 2.0,
    'socialize': 2.0,
    'sleep': 2.0,
    'reset': 2.0,
}
HUD_SECONDS = 1.5
# At or below this health the pet is drawn as dead, even before game over
NEAR_DEATH_HEALTH = 20

# --- RETRO UI PALETTE ---
COLOR_BG = (40, 44, 52)
COLOR_PET_BODY = (171, 220, 255)
COLOR_PET_EYES = (33, 37, 43)
COLOR_UI_BAR_BG = (62, 68, 81)
COLOR_TEXT = (171, 178, 191)
COLOR_HEALTH = (152, 195, 121)
COLOR_HUNGER = (224, 108, 117)
COLOR_HYGIENE = (86, 182, 194)
COLOR_SOCIAL = (229, 192, 123)
COLOR_REST = (97, 175, 239)
COLOR_BTN = (100, 100, 100)
COLOR_GAME_OVER = (255, 0, 0)
COLOR_DEAD_BODY = (80, 80, 80)

# Body tint per mood
MOOD_COLORS = {
    'happy': COLOR_PET_BODY,
    'grumpy': (229, 170, 120),
    'depressive': (140, 140, 160),
}

BUTTON_BORDER_RADIUS = 6
BUTTON_BORDER_WIDTH = 2
BUTTON_SHADOW_OFFSET = 3
STAT_BAR_BORDER_RADIUS = 4
