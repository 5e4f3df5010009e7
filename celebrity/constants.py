"""
Global constants used throughout the project
"""

from celebrity.types import Entry

OUTPUT_DIR = "output"
DOT_FILENAME = "graph.dot"
IMAGE_FILENAME = "graph.png"

# Graphviz layout program used to rasterize the DOT file
LAYOUT_PROGRAM = "dot"

# Actors 4 to 7 know 1, 2 and 3, who only know each other.
# 42 is not at the party.
SAMPLE_PARTY: tuple[Entry, ...] = (
    (1, [1, 2, 3]),
    (2, [1, 3]),
    (3, [1, 2]),
    (4, [1, 2, 3, 42]),
    (5, [1, 2, 3, 4, 5]),
    (6, [1, 2, 3, 7]),
    (7, [1, 2, 3, 5, 6]),
)
