#!/usr/bin/env python3
"""
Tests for the console helpers: stream text collapsing and input history.

Run with: uv run pytest test_console.py
"""
import pytest

from nbexport.console import format_stream_text, InputHistory


@pytest.mark.parametrize("raw, expected", [
    ('\rExecute\rExecute 1', 'Execute 1'),
    ('\rExecute\r\nExecute 2', 'Execute\nExecute 2'),
    ('\rExecute\rExecute\r\nExecute 3', 'Execute\nExecute 3'),
    ('\rExecute\rExecute\nExecute 4', 'Execute\nExecute 4'),
    ('\rExecute\r\r \r\rExecute\nExecute 5', 'Execute\nExecute 5'),
    ('\rExecute\rExecute\nExecute 6\rExecute 7', 'Execute\nExecute 7'),
    ('\rExecute\rExecute\nExecute 8\rExecute 9\r\r', 'Execute\n'),
    ('\rExecute\rExecute\nExecute 10\rExecute 11\r\n', 'Execute\nExecute 11\n'),
])
def test_format_stream_text(raw, expected):
    assert format_stream_text(raw) == expected


def test_format_stream_text_passthrough():
    assert format_stream_text('') == ''
    assert format_stream_text('plain text') == 'plain text'
    assert format_stream_text('line 1\nline 2\n') == 'line 1\nline 2\n'


def test_format_stream_text_progress_bar():
    raw = ''.join(f'\r{i}%' for i in range(0, 101, 10)) + '\ndone'
    assert format_stream_text(raw) == '100%\ndone'


def _history(*entries):
    history = InputHistory()
    for e in entries:
        history.add(e)
    return history


def test_input_history():
    history = _history('1', '2', '3', '4')
    assert history.complete_down('5') == '5'
    history.add('5')
    assert history.complete_up('') == '5'
    history.add('5')
    assert history.complete_up('5') == '4'
    assert history.complete_up('4') == '3'
    assert history.complete_up('2') == '2'
    assert history.complete_up('1') == '1'
    assert history.complete_up('') == ''

    # Add should reset position.
    history.add('6')
    assert history.complete_up('') == '6'
    assert history.complete_up('') == '5'
    assert history.complete_up('') == '4'
    assert history.complete_up('') == '3'
    assert history.complete_up('') == '2'
    assert history.complete_up('') == '1'


def test_input_history_up_and_down():
    history = _history('1', '2', '3', '4')
    assert history.complete_down('5') == '5'
    assert history.complete_down('') == ''
    assert history.complete_up('1') == '4'
    assert history.complete_down('4') == '4'
    assert history.complete_down('4') == '4'
    assert history.complete_up('1') == '3'
    assert history.complete_up('4') == '2'
    assert history.complete_down('3') == '3'
    assert history.complete_down('') == '4'
    assert history.complete_up('') == '3'
    assert history.complete_up('') == '2'
    assert history.complete_up('') == '1'
    assert history.complete_up('') == ''
    assert history.complete_up('1') == '1'
    assert history.complete_down('1') == '2'
    assert history.complete_down('2') == '3'
    assert history.complete_down('3') == '4'
    assert history.complete_down('') == ''
    history.add('5')
    assert history.complete_up('1') == '5'
    assert history.complete_up('1') == '4'
    assert history.complete_up('1') == '3'
    assert history.complete_up('1') == '2'
    assert history.complete_up('1') == '1'
    assert history.complete_up('1') == '1'
    assert history.complete_down('1') == '2'


def test_input_history_empty():
    history = InputHistory()
    assert history.complete_up('abc') == 'abc'
    assert history.complete_down('abc') == 'abc'
    assert history.cursor is None


def test_input_history_single_entry():
    history = _history('x = 1')
    assert history.complete_up('') == 'x = 1'
    assert history.complete_up('') == ''
    assert history.complete_down('y') == 'y'


def test_input_history_is_bounded():
    history = InputHistory(max_entries=3)
    for e in ['a', 'b', 'c', 'd', 'e']:
        history.add(e)
    assert history.entries == ['c', 'd', 'e']
    assert len(history) == 3
    assert [history.complete_up('') for _ in range(4)] == ['e', 'd', 'c', '']


def test_input_history_reset():
    history = _history('a', 'b')
    assert history.complete_up('') == 'b'
    history.reset()
    assert history.complete_up('') == 'b'


def test_input_history_from_config():
    from nbexport.services.export_config import HistoryConfig
    history = InputHistory.from_config(HistoryConfig(max_entries=2))
    for e in ['a', 'b', 'c']:
        history.add(e)
    assert history.entries == ['b', 'c']


def test_input_history_repeat_of_newest_resets_from_middle():
    history = _history('1', '2', '3')
    assert history.complete_up('') == '3'
    assert history.complete_up('') == '2'
    history.add('3')
    assert history.entries == ['1', '2', '3']
    assert history.complete_up('') == '3'
    assert history.complete_up('') == '2'


def test_input_history_repeat_of_recalled_newest_keeps_cursor():
    history = _history('1', '2', '3')
    assert history.complete_up('') == '3'
    history.add('3')
    assert history.cursor == 2
    assert history.complete_up('3') == '2'
