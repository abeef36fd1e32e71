"""Tests for the blessed/curtsies terminal interface."""

import io
import termios
from unittest.mock import PropertyMock, patch

import blessed
import pytest

from glance.errors import TerminalError
from glance.terminal import TerminalInterface, WindowSize


class FakeInput:
    """Stands in for curtsies.Input, serving a fixed list of tokens."""

    instances = []

    def __init__(self, *args, **kwargs):
        self.kwargs = kwargs
        self.tokens = iter(['j', '<Ctrl-q>'])
        self.entered = False
        self.exited = False
        FakeInput.instances.append(self)

    def __enter__(self):
        self.entered = True
        return self

    def __exit__(self, *exc_info):
        self.exited = True

    def __next__(self):
        return next(self.tokens)


@pytest.fixture
def interface():
    stream = io.StringIO()
    term = blessed.Terminal(kind='xterm-256color', stream=stream, force_styling=True)
    return TerminalInterface(term)


def output(interface):
    return interface.stream.getvalue()


def test_writes_go_to_terminal_stream(interface):
    interface.write("hello")
    interface.flush()
    assert output(interface) == "hello"


def test_move_terminal_cursor(interface):
    interface.move_terminal_cursor(3, 2)
    assert output(interface) == interface.term.move_xy(3, 2)


def test_cursor_visibility(interface):
    interface.hide_cursor()
    interface.show_cursor()
    assert output(interface) == interface.term.hide_cursor + interface.term.normal_cursor


def test_clear_sequences(interface):
    interface.clear_screen()
    interface.clear_current_line()
    term = interface.term
    assert output(interface) == term.home + term.clear + term.clear_eol


def test_reverse_wraps_text(interface):
    term = interface.term
    assert interface.reverse("status") == term.reverse + "status" + term.normal


def test_window_size_is_read_fresh(interface):
    term_type = type(interface.term)
    with patch.object(term_type, 'width', PropertyMock(side_effect=[80, 100])):
        with patch.object(term_type, 'height', PropertyMock(side_effect=[24, 30])):
            assert interface.window_size() == WindowSize(width=80, height=24)
            assert interface.window_size() == WindowSize(width=100, height=30)


def test_read_key_requires_setup(interface):
    with pytest.raises(TerminalError):
        interface.read_key()


def test_session_reads_keys_and_restores(interface):
    FakeInput.instances.clear()
    with patch('glance.terminal.Input', FakeInput):
        with interface.session():
            assert interface.is_fullscreen
            assert interface.read_key() == 'j'
            assert interface.read_key() == '<Ctrl-q>'

    fake = FakeInput.instances[0]
    assert fake.entered and fake.exited
    assert fake.kwargs['keynames'] == 'curtsies'
    assert not interface.is_fullscreen
    assert output(interface).startswith(interface.term.enter_fullscreen)
    assert output(interface).endswith(interface.term.exit_fullscreen + interface.term.normal_cursor)


def test_session_restores_on_error(interface):
    with patch('glance.terminal.Input', FakeInput):
        with pytest.raises(OSError):
            with interface.session():
                raise OSError("write failed")

    assert not interface.is_fullscreen
    assert interface.term.exit_fullscreen in output(interface)


def test_setup_failure_raises_terminal_error(interface):
    error = termios.error(25, 'Inappropriate ioctl for device')
    with patch('glance.terminal.Input', side_effect=error):
        with pytest.raises(TerminalError):
            interface.setup()

    assert not interface.is_fullscreen
    assert interface.term.exit_fullscreen in output(interface)
