"""Named chart dimension and style constants.

Dimensions in SVG user units (px); angles in degrees clockwise from 12 o'clock.
"""

# Canvas
WIDTH = 400
HEIGHT = 400
BACKGROUND = "white"

# Ring
OUTER_RADIUS = 160.0
INNER_RADIUS = 96.0               # 0 draws a plain pie
START_ANGLE = 0.0                 # first slice starts at 12 o'clock
GAP_ANGLE = 0.0                   # degrees removed between adjacent slices

# Slice outline
SLICE_STROKE = "white"
SLICE_STROKE_WIDTH = 1.0

# Labels
LABEL_FONT_SIZE = 11
LABEL_COLOR = "white"
LABEL_MIN_FRACTION = 0.04         # smaller slices are left unlabelled
TITLE_FONT_SIZE = 16
TITLE_COLOR = "#333"

# Slice fill colors, cycled by input order
PALETTE = [
    "#4682B4", "#E07B39", "#6AA84F", "#C0504D",
    "#8064A2", "#F1C232", "#4BACC6", "#999999",
]

# Sample data for `python -m donut.gen_donut`
SAMPLE_TITLE = "Budget"
SAMPLE_DATA = [
    ("Rent", 1450.0),
    ("Food", 620.0),
    ("Transport", 210.0),
    ("Utilities", 180.0),
    ("Savings", 500.0),
    ("Other", 90.0),
]
