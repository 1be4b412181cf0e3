"""Common CSS keyword values, importable so themes can avoid bare strings.

Example::

    from themer.keywords import FLEX, CENTER

    theme = {"display": FLEX, "alignItems": CENTER}
"""

ABSOLUTE = "absolute"
AUTO = "auto"
BLACK = "black"
BLOCK = "block"
BORDER_BOX = "border-box"
CENTER = "center"
COLUMN = "column"
FIXED = "fixed"
FLEX = "flex"
FLEX_END = "flex-end"
FLEX_START = "flex-start"
HIDDEN = "hidden"
INHERIT = "inherit"
INLINE_BLOCK = "inline-block"
INLINE_FLEX = "inline-flex"
NONE = "none"
NORMAL = "normal"
POINTER = "pointer"
RELATIVE = "relative"
ROW = "row"
SPACE_BETWEEN = "space-between"
TRANSPARENT = "transparent"
UPPERCASE = "uppercase"
WHITE = "white"
WRAP = "wrap"

__all__ = [
    "ABSOLUTE",
    "AUTO",
    "BLACK",
    "BLOCK",
    "BORDER_BOX",
    "CENTER",
    "COLUMN",
    "FIXED",
    "FLEX",
    "FLEX_END",
    "FLEX_START",
    "HIDDEN",
    "INHERIT",
    "INLINE_BLOCK",
    "INLINE_FLEX",
    "NONE",
    "NORMAL",
    "POINTER",
    "RELATIVE",
    "ROW",
    "SPACE_BETWEEN",
    "TRANSPARENT",
    "UPPERCASE",
    "WHITE",
    "WRAP",
]
