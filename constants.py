# Tracker Constants
FIXED_SESSIONS = 8  # Sessions pre-created for every new day
DAILY_TARGET = 12
MONTHLY_TARGET_SESSIONS = 310
MAX_SESSION_RATING = 10

# Clock Constants
TIMEZONE = "Asia/Dhaka"

# Storage Constants
DEFAULT_DATA_FILE = "mission_data.json"
DATA_FILE_ENV_VAR = "MISSION_TRACKER_DATA_FILE"

# Population Constants
POPULATION_SIZE = 2_000_000
ELITE_LIST_SIZE = 100
PEER_WINDOW_SIZE = 50
PEER_WINDOW_LEAD = 25  # Peers shown above the user in the window

# Elite list formula: sessions/day and efficiency both decay linearly with index
ELITE_BASE_SESSIONS_PER_DAY = 16.5
ELITE_SESSIONS_DECAY = 0.02
ELITE_BASE_EFFICIENCY = 98.0
ELITE_EFFICIENCY_DECAY = 0.05

# Interpolation Constants
# Assumed peak used to normalise a score into [0, MAX_TIER_PROGRESS]
REFERENCE_PEAK_SESSIONS_PER_DAY = 12
REFERENCE_PEAK_EFFICIENCY = 85
MAX_TIER_PROGRESS = 0.99

# Peer window formula
PEER_SESSIONS_EXPONENT = 3.5
PEER_SESSIONS_SCALE = 15
PEER_SESSIONS_FLOOR = 0.4
PEER_EFFICIENCY_JITTER = 10
# (percentile lower bound, base efficiency), checked top-down; below all -> PEER_MIN_EFFICIENCY
PEER_EFFICIENCY_BANDS = [
    (0.99, 90),
    (0.95, 80),
    (0.8, 60),
    (0.5, 40),
    (0.2, 25),
]
PEER_MIN_EFFICIENCY = 10

# Display Constants
USER_ENTRY_ID = "user"
USER_DISPLAY_NAME = "YOU (CANDIDATE)"
USER_ROW_STYLE = "background-color: rgba(99, 102, 241, 0.25); font-weight: bold"
BOT_NAMES = [
    "Abir_X", "Sajid_H", "Tausif_Z", "Nafis_07", "Mehedi_K",
    "Arafat_B", "Anika_D", "Jarin_S", "Sifat_V", "Piyal_L",
    "Tanvir_M", "Fahim_R", "Nayeem_W", "Tahmid_A", "Emon_N",
]

# Analytics Constants
# (exclusive upper bound, label); the last bucket catches everything above
SESSION_BUCKETS = [
    (6, "<6"),
    (8, "6-7"),
    (10, "8-9"),
    (12, "10-11"),
    (16, "12-15"),
]
TOP_SESSION_BUCKET = "16+"
HIGH_QUALITY_EFFICIENCY = 80

# Calendar Constants
WEEKDAYS = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
# (minimum rated sessions, fill colour), checked top-down; 1+ below all -> LOW_DAY_FILL
DAY_FILL_COLORS = [
    (16, "#9333ea"),
    (12, "#2563eb"),
    (10, "#0ea5e9"),
    (8, "#16a34a"),
    (6, "#ca8a04"),
]
LOW_DAY_FILL = "#dc2626"
