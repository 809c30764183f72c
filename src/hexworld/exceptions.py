"""Exception hierarchy for hexworld."""


class HexError(Exception):
    """Base class for all hexworld exceptions."""


class InvalidCoordinateError(HexError, ValueError):
    """Raised when explicit cube components do not satisfy ``q + r + s == 0``."""

    def __init__(self, q: int, r: int, s: int) -> None:
        self.components = (q, r, s)
        super().__init__(f"Cube coordinate ({q}, {r}, {s}) violates q + r + s == 0")


class InvalidDirectionError(HexError, ValueError):
    """Raised when a direction is not one of the six canonical unit vectors."""


class TileNotFoundError(HexError, KeyError):
    """Raised when a hex map has no tile stored at the requested coordinate."""

    def __init__(self, coordinate: object) -> None:
        self.coordinate = coordinate
        super().__init__(f"No tile stored at {coordinate!r}")

    def __str__(self) -> str:
        # KeyError would otherwise render the message with quotes
        return str(self.args[0])
