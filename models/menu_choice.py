from enum import IntEnum


class MenuChoice(IntEnum):
    """Numbered actions offered by the interactive menu."""
    ROTATE = 1
    FLIP_VERTICAL = 2
    FLIP_HORIZONTAL = 3
    GRAYSCALE = 4

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    MenuChoice.ROTATE: "Rotate",
    MenuChoice.FLIP_VERTICAL: "Flip Vertically",
    MenuChoice.FLIP_HORIZONTAL: "Flip Horizontally",
    MenuChoice.GRAYSCALE: "Grayscale",
}
