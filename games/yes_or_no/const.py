# Obstacle ("NO" dot) sizes
MIN_DOT_SIZE        = 15      # px radius
MAX_DOT_SIZE        = 80      # px radius
INITIAL_DOT_COUNT   = 20      # target obstacle count per round
DOT_HUE_MIN         = 320     # degrees; band wraps past 360 into pinks
DOT_HUE_RANGE       = 60
DOT_SATURATION      = 0.70
DOT_LIGHTNESS       = 0.60

# Cursor ("YES" dot)
INITIAL_CURSOR_SIZE = 30      # px radius at round start
GROWTH_RATE         = 0.3     # growth per eaten dot, as a fraction of its radius

# Click-to-win shortcut
CLICK_RADIUS        = 5       # px added to each dot radius when hit-testing a click

# Placement
MAX_PLACEMENT_ATTEMPTS = 100
EXCLUSION_WIDTH     = 500     # center area kept clear for the overlay buttons
EXCLUSION_HEIGHT    = 400
SAFE_START_PADDING  = 50
SAFE_START_GRID     = 50

# Touch-first devices shrink everything and lose the click shortcut
COARSE_POINTER_SCALE = 0.65

# Drawing
BACKGROUND_TEXT     = "Be Mine <3"
BACKGROUND_FONT_SIZE = 120
BACKGROUND_TEXT_ALPHA = 38    # ~15% white
CURSOR_COLOR        = (255, 107, 157)   # #ff6b9d
OUTLINE_COLOR       = (255, 255, 255)
CURSOR_OUTLINE_W    = 3
DOT_OUTLINE_W       = 2
LABEL_SCALE         = 0.4     # label size relative to radius
CLEAR_COLOR         = (102, 51, 153)

# Overlays
OVERLAY_DIM         = (0, 0, 0, 150)
TITLE_COLOR         = (255, 255, 255)
HINT_COLOR          = (235, 220, 240)
BUTTON_COLOR        = (255, 107, 157)
BUTTON_W            = 240
BUTTON_H            = 64
TITLE_FONT_SIZE     = 56
HINT_FONT_SIZE      = 28
BUTTON_FONT_SIZE    = 34
