"""
Central Configuration for the Movie Graph Analytics project.
Contains global constants, file paths, edge styling and execution flags.
Values defined here drive graph construction, the loaders and the demo entry points.
"""

# --- File System Paths ---
DATA_DIR = 'ml-100k'
RATINGS_FILE = 'u.data'
MOVIES_FILE = 'u.item'

# Info
GENRE_COLUMNS = [
    'unknown', 'Action', 'Adventure', 'Animation',
    'Children', 'Comedy', 'Crime', 'Documentary', 'Drama', 'Fantasy',
    'Film-Noir', 'Horror', 'Musical', 'Mystery', 'Romance', 'Sci-Fi',
    'Thriller', 'War', 'Western']

# --- Edge Styling (presentation only, never used by the algorithms) ---
# category -> (stroke colour, stroke width, animated)
EDGE_STYLES = {
    'both_selected': ('#ea384c', 2.0, True),          # red
    'selected_recommended': ('#3b82f6', 1.5, True),   # blue-500
    'recommended': ('#60a5fa', 1.0, False),           # blue-400
    'selected': ('#9ca3af', 1.0, False),              # gray-400
    'default': ('#d1d5db', 1.0, False),               # light gray
}

# --- Fallback Layout ---
LAYOUT_RADIUS = 300
LAYOUT_CENTER = (400, 350)

# --- Related Movies (content-based) ---
RELATED_TOP_K = 10

# --- Logging ---
LOG_LEVEL = 'INFO'
LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
