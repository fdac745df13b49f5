from wordpicker.domain.picking.entities.panel import PanelPosition, PanelState


def test_default_panel_state() -> None:
    """Test a new panel sits at the default corner, expanded."""
    panel = PanelState()

    assert panel.position == PanelPosition(x=20, y=20)
    assert panel.width == 320
    assert not panel.minimized
    assert not panel.dragging


def test_drag_keeps_grab_offset() -> None:
    """Test the panel follows the pointer by the offset it was grabbed at."""
    panel = PanelState()

    assert panel.press(25, 30)
    assert panel.move(105, 230)
    panel.release()

    assert panel.position == PanelPosition(x=100, y=220)
    assert not panel.dragging


def test_move_after_release_is_ignored() -> None:
    panel = PanelState()
    panel.press(20, 20)
    panel.release()

    assert not panel.move(500, 500)
    assert panel.position == PanelPosition(x=20, y=20)


def test_press_in_content_does_not_start_drag() -> None:
    panel = PanelState()

    assert not panel.press(40, 80, in_content=True)
    assert not panel.dragging


def test_minimize_independent_of_drag() -> None:
    """Test minimizing changes width but not position or drag state."""
    panel = PanelState()
    panel.press(30, 30)

    assert panel.toggle_minimized()
    assert panel.width == 200
    assert panel.dragging

    panel.move(60, 60)
    assert panel.position == PanelPosition(x=50, y=50)

    assert not panel.toggle_minimized()
    assert panel.width == 320
