"""
Configuration for the coin collection environment
"""

# Environment parameters
ENV_CONFIG = {
    # "render_mode": None,  # Set to "human" to watch episodes
    "frame_ms": 1000 / 30,
    "max_steps": 1800,  # 60 seconds at 30 FPS
}

# ==============================================================================
# EVALUATION SETTINGS
# ==============================================================================

EVAL_CONFIG = {
    "n_episodes": 10,
    "seed": 42,
}
