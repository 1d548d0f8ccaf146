"""
Configuration for the coin collection game
"""

# Game parameters
GAME_CONFIG = {
    "width": 800,
    "height": 600,
    "coin_size": 32,
    "num_coins": 10,
    "player_speed": 0.3,      # px per ms
    "animation_delay": 150,   # ms per frame
    "player_width": 60,
    "player_height": 60,
    "restart_key": "r",
}

# ==============================================================================
# SPRITE SHEETS
# ==============================================================================

PLAYER_SHEET = {
    "image": "blordrough_quartermaster-NESW.png",
    "columns": 3,
    "frame_width": 48,
    "frame_height": 64,
}

# Facing down, standing still
PLAYER_START_FRAME = 7

COIN_SHEET = {
    "image": "coin_gold.png",
    "columns": 8,
    "frame_width": 32,
    "frame_height": 32,
}

COIN_ANIMATION = {
    "start_frame": 0,
    "end_frame": 7,
    "loop": True,
    "frame_delay": 80,
}

# ==============================================================================
# MOVEMENT
# Unit direction, walking frame range and idle frame for each facing
# ==============================================================================

DIRECTIONS = {
    "up":    {"velocity": (0, -1), "frames": (0, 2), "idle": 1},
    "right": {"velocity": (1, 0),  "frames": (3, 5), "idle": 4},
    "down":  {"velocity": (0, 1),  "frames": (6, 8), "idle": 7},
    "left":  {"velocity": (-1, 0), "frames": (9, 11), "idle": 10},
}

KEY_DIRECTIONS = {
    "w": "up",
    "a": "left",
    "s": "down",
    "d": "right",
    "ArrowUp": "up",
    "ArrowLeft": "left",
    "ArrowDown": "down",
    "ArrowRight": "right",
}

WALK_ANIMATION_LOOP = False

# ==============================================================================
# DRAWING
# ==============================================================================

COLORS = {
    "background": (135, 206, 235),
    "player": (255, 0, 0),
    "coin": (255, 215, 0),
    "text": (0, 0, 0),
    "win": (0, 128, 0),
}

HUD_CONFIG = {
    "score_x": 20,
    "score_y": 40,
    "score_font_size": 24,
    "win_font_size": 36,
    "hint_font_size": 24,
    "hint_offset": 40,
    "win_text": "All Coins Collected!",
    "hint_text": "Press 'R' to play again",
}
