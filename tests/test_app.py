import io
import random
import sys

import pytest

from coinflip.app import level_button_position, main, run
from coinflip.levels import LEVEL_COUNT
from coinflip.play import PlayScene


def _play(commands, seed=0):
    out = io.StringIO()
    status = run(io.StringIO(commands), out, random.Random(seed))
    return status, out.getvalue()


def test_first_level_button_position():
    assert level_button_position(0) == (25, 130)


def test_level_buttons_are_distinct_and_spaced():
    positions = [level_button_position(i) for i in range(LEVEL_COUNT)]
    assert len(set(positions)) == LEVEL_COUNT
    assert level_button_position(1)[0] - level_button_position(0)[0] == 70
    assert level_button_position(4)[1] - level_button_position(0)[1] == 70
    assert level_button_position(4)[0] == level_button_position(0)[0]


@pytest.mark.parametrize("index", [-1, LEVEL_COUNT])
def test_level_button_out_of_range(index):
    with pytest.raises(ValueError):
        level_button_position(index)


def test_quit_from_main_menu():
    status, output = _play("quit\n")
    assert status == 0
    assert "Choose a level" not in output


def test_end_of_input_ends_game():
    status, output = _play("start\n")
    assert status == 0
    assert "Choose a level" in output


def test_enter_level_shows_board():
    status, output = _play("start\n1\nquit\n")
    assert status == 0
    assert "Entering level 1" in output
    assert PlayScene(1).render() in output


def test_click_prints_new_board():
    status, output = _play("start\n9\n0 0\nquit\n")
    scene = PlayScene(9)
    scene.click(0, 0)
    assert status == 0
    assert scene.render() in output


def test_invalid_inputs_are_reported():
    _, output = _play("dance\nstart\n42\n9\n7 7\nfoo\nquit\n")
    assert "Unknown command: dance" in output
    assert "No such level: 42" in output
    assert output.count("Invalid move") == 2


def test_back_returns_through_menus():
    _, output = _play("start\n2\nback\nback\nquit\n")
    assert output.count("Choose a level") == 2
    assert output.count("Type 'start'") == 2


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("start\nquit\n"))
    assert main(["--seed", "5"]) == 0
    assert "Choose a level" in capsys.readouterr().out