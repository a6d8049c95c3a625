"""Dark/light theme state and its single presentation marker on the document root."""

from __future__ import annotations


DARK_CLASS = "dark"
DARK_GLYPH = "☾"
LIGHT_GLYPH = "☀"


class RootMarker:
    """Class list of the rendered document root."""

    def __init__(self, classes: set[str] | None = None):
        self._classes: set[str] = set(classes or ())

    def add(self, name: str) -> None:
        self._classes.add(name)

    def discard(self, name: str) -> None:
        self._classes.discard(name)

    def __contains__(self, name: object) -> bool:
        return name in self._classes

    def class_attr(self) -> str:
        return " ".join(sorted(self._classes))


class ThemeController:
    def __init__(self, root: RootMarker | None = None, is_dark: bool = True):
        self.root = root if root is not None else RootMarker()
        self._is_dark = is_dark

    @property
    def is_dark(self) -> bool:
        return self._is_dark

    @property
    def glyph(self) -> str:
        return DARK_GLYPH if self._is_dark else LIGHT_GLYPH

    def mount(self) -> None:
        self._sync()

    def toggle(self) -> bool:
        self._is_dark = not self._is_dark
        self._sync()
        return self._is_dark

    def _sync(self) -> None:
        if self._is_dark:
            self.root.add(DARK_CLASS)
        else:
            self.root.discard(DARK_CLASS)
