"""A tile-based puzzle game: collect every item, then reach the exit.

Map loading and validation, the game rules, a pygame window and the
text helpers they use.
"""

__version__ = "1.0.0"