"""
Global constants used throughout the project
"""

# Attribute (or mapping key) holding a node's successors
NEIGHBOUR_KEY = "next_nodes"

# Closest pygments style to the dashboard's atom-one-dark-reasonable
JSON_THEME = "one-dark"

LOG_FORMAT = "%(levelname)s | %(name)s | %(message)s"

DATA = "data"
DEBUG = False
