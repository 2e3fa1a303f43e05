"""Tests for the blessed/curtsies terminal boundary."""

import termios
from unittest.mock import MagicMock, Mock, patch

import pytest

from curtsies.events import PasteEvent

from hacksaw.model import Position
from hacksaw.terminal import Size, TerminalInterface
from hacksaw.view import Frame


def make_term(width=80, height=24):
    term = MagicMock()
    term.width = width
    term.height = height
    term.move_xy = Mock(side_effect=lambda x, y: f'[MOVE:{x},{y}]')
    term.color_rgb = Mock(side_effect=lambda r, g, b: f'[RGB:{r},{g},{b}]')
    term.clear_eol = ''
    term.normal = '[NORMAL]'
    term.hide_cursor = '[HIDE]'
    term.normal_cursor = '[SHOW]'
    term.home = '[HOME]'
    term.clear = '[CLEAR]'
    term.enter_fullscreen = '[FULL]'
    term.exit_fullscreen = '[EXITFULL]'
    return term


def printed(mock_print):
    return ''.join(str(call.args[0]) for call in mock_print.call_args_list)


def test_size_reserves_two_rows():
    terminal = TerminalInterface(make_term(100, 30))
    assert terminal.size() == Size(100, 28)


def test_size_never_negative():
    terminal = TerminalInterface(make_term(10, 1))
    assert terminal.size().height == 0


def test_draw_frame_paints_rows_status_and_message():
    terminal = TerminalInterface(make_term())
    frame = Frame(rows=["first", "~"], status="doc - 1 lines", message="hello",
                  cursor=Position(3, 1))

    with patch('builtins.print') as mock_print:
        terminal.draw_frame(frame, (1, 2, 3))

    out = printed(mock_print)
    assert out.startswith('[HIDE]')
    assert '[MOVE:0,0]first' in out
    assert '[MOVE:0,1]~' in out
    assert '[MOVE:0,2][RGB:1,2,3]doc - 1 lines[NORMAL]' in out
    assert '[MOVE:0,3]hello' in out
    assert out.endswith('[MOVE:3,1][SHOW]')


def test_draw_goodbye_clears_screen():
    terminal = TerminalInterface(make_term())
    with patch('builtins.print') as mock_print:
        terminal.draw_goodbye()
    out = printed(mock_print)
    assert '[CLEAR]' in out
    assert 'Terminated Hacksaw' in out


def test_setup_and_cleanup_manage_raw_mode():
    terminal = TerminalInterface(make_term())
    fake_input = MagicMock()
    with patch('hacksaw.terminal.Input', return_value=fake_input) as input_cls, \
         patch('builtins.print'):
        with terminal:
            assert terminal.is_fullscreen
            fake_input.__enter__.assert_called_once()
        input_cls.assert_called_once_with(keynames='curtsies', disable_terminal_start_stop=True)
    fake_input.__exit__.assert_called_once()
    assert not terminal.is_fullscreen


def test_cleanup_runs_when_body_raises():
    terminal = TerminalInterface(make_term())
    fake_input = MagicMock()
    with patch('hacksaw.terminal.Input', return_value=fake_input), \
         patch('builtins.print'):
        with pytest.raises(RuntimeError):
            with terminal:
                raise RuntimeError("boom")
    fake_input.__exit__.assert_called_once()
    assert not terminal.is_fullscreen


def test_cleanup_is_idempotent():
    terminal = TerminalInterface(make_term())
    with patch('builtins.print') as mock_print:
        terminal.cleanup()
        terminal.cleanup()
    mock_print.assert_not_called()


def test_setup_failure_becomes_oserror():
    terminal = TerminalInterface(make_term())
    fake_input = MagicMock()
    fake_input.__enter__.side_effect = termios.error(25, "Inappropriate ioctl for device")
    with patch('hacksaw.terminal.Input', return_value=fake_input), \
         patch('builtins.print'):
        with pytest.raises(OSError):
            terminal.setup()
    assert not terminal.is_fullscreen


def test_get_key_requires_setup():
    terminal = TerminalInterface(make_term())
    with pytest.raises(OSError):
        terminal.get_key()


def test_get_key_returns_token_string():
    terminal = TerminalInterface(make_term())
    terminal._curtsies_input = iter(['<UP>'])
    assert terminal.get_key() == '<UP>'
    with pytest.raises(OSError):
        terminal.get_key()


def test_setup_turns_off_flow_control():
    """Ctrl-S and Ctrl-Q must reach the editor instead of pausing output."""
    terminal = TerminalInterface(make_term())
    with patch('hacksaw.terminal.Input', return_value=MagicMock()) as input_cls, \
         patch('builtins.print'):
        terminal.setup()
    assert input_cls.call_args.kwargs['disable_terminal_start_stop'] is True


def test_status_bar_painted_through_colour_primitives():
    terminal = TerminalInterface(make_term())
    frame = Frame(rows=[], status="status", message="", cursor=Position(0, 0))
    with patch.object(terminal, 'set_fg_color') as set_fg_color, \
         patch.object(terminal, 'reset_color') as reset_color, \
         patch('builtins.print'):
        terminal.draw_frame(frame, (9, 8, 7))
    set_fg_color.assert_called_once_with((9, 8, 7))
    reset_color.assert_called_once()


def test_paste_is_split_into_single_keys():
    paste = PasteEvent()
    paste.events.extend(['h', 'i', '<Ctrl-j>'])
    terminal = TerminalInterface(make_term())
    terminal._curtsies_input = iter([paste, '<UP>'])
    assert [terminal.get_key() for _ in range(4)] == ['h', 'i', '<Ctrl-j>', '<UP>']


def test_empty_paste_yields_no_key():
    terminal = TerminalInterface(make_term())
    terminal._curtsies_input = iter([PasteEvent()])
    assert terminal.get_key() == ''
