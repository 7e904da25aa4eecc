# Court Rotation
# Copyright (C) 2025  Court Rotation developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

# --- Constants ---
SAVE_FILE_PREFIX = "session-"
SAVE_FILE_EXTENSION = ".json"
DEFAULT_DATA_DIR_NAME = ".courtrotation"

# Players per round (2 vs 2)
PLAYERS_PER_ROUND = 4

# Enumeration bound: at most this many 4-player groups are considered per
# round, giving at most 3 * MAX_QUADS candidates.
MAX_QUADS = 200

# Scores within this distance of the minimum are treated as tied
SCORE_TOLERANCE = 1e-9

# Fixed penalty per participant resting two rounds in a row
REST_REPEAT_PENALTY = 5

# Fairness weights
WEIGHT_MIN = 0
WEIGHT_MAX = 5
DEFAULT_W_PARTNER = 3
DEFAULT_W_OPP = 2
DEFAULT_W_PREV = 2

# Weight keys (for display and serialization)
W_PARTNER = "w_partner"
W_OPP = "w_opp"
W_PREV = "w_prev"
WEIGHT_NAMES = {
    W_PARTNER: "Repeat partner",
    W_OPP: "Repeat opponent",
    W_PREV: "Same as previous round",
}

# Undo history depth; the oldest snapshot is dropped on overflow
UNDO_STACK_LIMIT = 50

# Default roster created for a new session day
DEFAULT_ROSTER_SIZE = 8
DEFAULT_ID_PREFIX = "P"
DEFAULT_NAME_PREFIX = "Player"
GUEST_ID_PREFIX = "guest"

# Display name honorifics
DEFAULT_HONORIFIC = "さん"
HONORIFIC_SUFFIXES = ("さん", "様", "くん", "君", "ちゃん", "氏")

# Session dates are stored as ISO calendar dates
SESSION_DATE_FORMAT = "%Y-%m-%d"

# Latest round timestamp accepted from a saved file (end of year 9998, in ms).
# Local display of the time must still fit in year 9999.
MAX_TIMESTAMP_MS = 253_370_764_799_999
