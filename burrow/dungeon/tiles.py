# Glyphs used when a tile set is dumped as text
FLOOR = "."
ROCK = "#"

# RGB used by the rasterizer
FLOOR_COLOR = (150, 150, 50)
ROCK_COLOR = (0, 0, 0)

__all__ = ["FLOOR", "ROCK", "FLOOR_COLOR", "ROCK_COLOR"]
