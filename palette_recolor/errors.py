"""Exception hierarchy for recolouring jobs."""

from __future__ import annotations


class RecolorError(Exception):
    """Base class for every error raised by a recolouring job."""


class PaletteParseError(RecolorError, ValueError):
    """A palette entry is not a ``#RRGGBB`` hex string."""

    def __init__(self, value: object, index: int | None = None) -> None:
        self.value = value
        self.index = index
        where = f" at position {index}" if index is not None else ""
        super().__init__(f"Invalid palette colour {value!r}{where}; expected '#RRGGBB'")


class EmptyPaletteError(RecolorError, ValueError):
    """The palette has no entries, so no nearest colour exists."""

    def __init__(self) -> None:
        super().__init__("Palette must contain at least one colour")


class UnknownPaletteError(RecolorError, KeyError):
    """No palette with the requested name exists in the catalog."""

    def __init__(self, name: str, suggestions: list[str] | None = None) -> None:
        self.name = name
        self.suggestions = suggestions or []
        msg = f"Unknown palette '{name}'"
        if self.suggestions:
            msg += f". Did you mean: {', '.join(self.suggestions)}?"
        super().__init__(msg)

    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0])


class WorkerFailure(RecolorError):
    """A chunk task terminated abnormally; the whole job fails."""

    def __init__(self, chunk_index: int) -> None:
        self.chunk_index = chunk_index
        super().__init__(f"Worker for chunk {chunk_index} failed")
