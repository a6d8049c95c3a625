from folio.core.theme import DARK_CLASS, DARK_GLYPH, LIGHT_GLYPH, RootMarker, ThemeController


def test_initial_mount_is_dark_with_marker_present() -> None:
    theme = ThemeController()
    theme.mount()

    assert theme.is_dark is True
    assert DARK_CLASS in theme.root
    assert theme.glyph == DARK_GLYPH


def test_toggle_removes_then_restores_marker() -> None:
    theme = ThemeController()
    theme.mount()

    assert theme.toggle() is False
    assert DARK_CLASS not in theme.root
    assert theme.glyph == LIGHT_GLYPH

    assert theme.toggle() is True
    assert DARK_CLASS in theme.root
    assert theme.glyph == DARK_GLYPH


def test_toggle_pair_is_an_involution() -> None:
    for start in (True, False):
        theme = ThemeController(is_dark=start)
        theme.toggle()
        theme.toggle()
        assert theme.is_dark is start


def test_marker_leaves_other_root_classes_alone() -> None:
    root = RootMarker({"scroll-smooth"})
    theme = ThemeController(root=root)
    theme.mount()
    assert root.class_attr() == "dark scroll-smooth"

    theme.toggle()
    assert root.class_attr() == "scroll-smooth"
