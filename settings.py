# settings.py

# Built-in identifier ranges (inclusive)
BUILTIN_MONSTER_MIN_ID = 0
BUILTIN_MONSTER_MAX_ID = 42
BUILTIN_CLASS_MIN_ID = 128
BUILTIN_CLASS_MAX_ID = 146

# Custom ids repeat in 128-wide bands: 0-127 monster, 128-255 class, 256-383 monster...
CUSTOM_CLASS_BAND_BIT = 128

# Collision capsule
MIN_CONTROLLER_HEIGHT = 1.6
ENEMIES_LAYER = "Enemies"

# Visual effects
GHOST_SHADER_NAME = "Daggerfall/Billboard/Ghost"
GHOST_ALPHA_CUTOFF = 0.1
LIGHT_AURA_LOCAL_POSITION = (0.0, 0.3, 0.2)

# Ground alignment
GROUND_PROBE_DISTANCE = 10.0

# Career rolls for brand-new class spawns
CLASS_LEVEL_SPREAD = 2
