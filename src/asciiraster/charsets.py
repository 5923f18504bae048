# Density ramp ordered dark to light: index 0 is the densest glyph, the last is blank
ASCII_RAMP = "@%#*+=-:. "
