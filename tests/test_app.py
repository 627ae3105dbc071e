import pygame
import pytest

from aafgui.app import BACKGROUND, App
from aafgui.elements import ElementEvent


@pytest.fixture
def app(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    application = App()
    yield application
    application.close()


def _click(element):
    pos = (int(element.x + element.w / 2), int(element.y + element.h / 2))
    pygame.event.post(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=pos, button=1))


def test_initial_state(app):
    assert app.should_close is False
    assert app.accumulator == 0.0
    assert app.update_rate == pytest.approx(1.0 / 60.0)


def test_set_window_title(app):
    app.set_window_title("Hello, AAF!")
    app.begin()
    app.end()
    title, _ = pygame.display.get_caption()
    assert title == "Hello, AAF!"
    assert app.should_close is False
    assert app.screen.get_size() == pygame.display.get_surface().get_size()


def test_set_window_title_rejects_none(app):
    with pytest.raises(TypeError):
        app.set_window_title(None)


def test_quit_event_closes(app):
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    app.begin()
    app.end()
    assert app.should_close is True


def test_click_reaches_button_and_is_reset(app):
    button = app.gui.button("Click Me!", -1, -1)
    app.accumulator = app.update_rate
    _click(button)
    app.begin()
    assert button.event & ElementEvent.CLICK
    app.end()
    assert button.event == ElementEvent.NONE


def test_no_update_before_update_rate_elapses(app):
    button = app.gui.button("Click Me!", -1, -1)
    _click(button)
    app.begin()
    assert button.event == ElementEvent.NONE
    app.end()


def test_typing_into_focused_input(app):
    field = app.gui.text_input("", False, -1, -1, 200, 20)
    app.accumulator = app.update_rate
    _click(field)
    app.begin()
    app.end()
    assert app.gui.focus is field
    app.accumulator = app.update_rate
    pygame.event.post(pygame.event.Event(pygame.TEXTINPUT, text="hi"))
    app.begin()
    app.end()
    assert field.text == "hi"


def test_resize_recalculates_layout(app):
    label = app.gui.label("Hello, AAF!", -1, -1)
    label.x = 500
    pygame.event.post(
        pygame.event.Event(pygame.VIDEORESIZE, size=(800, 600), w=800, h=600)
    )
    app.begin()
    app.end()
    assert label.x == app.gui.theme.window_padding


def test_begin_clears_background(app):
    app.begin()
    w, h = app.screen.get_size()
    assert tuple(app.screen.get_at((w - 1, h - 1)))[:3] == BACKGROUND
    app.end()