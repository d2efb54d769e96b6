# -----------------------------
# Configuration (tweak as needed)
# -----------------------------

SCREEN_W, SCREEN_H = 1280, 720     # initial window size, resizable afterwards
FPS = 60
BACKGROUND = (12, 14, 18)

# One morph cycle (current -> target geometry)
CYCLE_DURATION_MS = 8000
DEFAULT_EASING = "cubic_in_out"

# Parameter defaults (live-editable from the control panel)
DEFAULT_REPEAT_COUNT = 35
DEFAULT_AMPLITUDE = 300
DEFAULT_COLOR1 = "#ff111c"   # radial lines
DEFAULT_COLOR2 = "#1f79ed"   # long curve family
DEFAULT_COLOR3 = "#e9ee55"   # short curve family

# Slider ranges shown in the panel; writes from code are not clamped
REPEAT_COUNT_RANGE = (15, 70, 1)
AMPLITUDE_RANGE = (50, 500, 10)

# Curve families: (segment count, colour parameter)
CURVE_FAMILIES = (
    (10, "color2"),
    (7, "color3"),
)

# Stroke widths
RADIAL_LINE_WIDTH = 1.0
CURVE_LINE_WIDTH = 1.5

# Lightness wobble added over one cycle: sin(2*pi*t) * amplitude
LIGHTNESS_SWING = 0.1

# Samples per cubic segment when flattening the basis spline
BEZIER_STEPS = 8

# Control panel layout
PANEL_W = 260
PANEL_MARGIN = 12
PANEL_ROW_H = 22
PANEL_BG = (28, 30, 36)
PANEL_FG = (220, 220, 220)
PANEL_ACCENT = (90, 150, 240)
