import pytest

from coinflip.coin import FIRST_FRAME, LAST_FRAME, Coin, coin_image


def _run_animation(coin):
    shown = []
    while coin.animating:
        shown.append(coin.tick())
    return shown


def test_coin_image_names():
    assert coin_image(1) == "Coin0001.png"
    assert coin_image(8) == "Coin0008.png"


@pytest.mark.parametrize("frame", [0, LAST_FRAME + 1, -3])
def test_coin_image_rejects_out_of_range(frame):
    with pytest.raises(ValueError):
        coin_image(frame)


def test_initial_image_matches_face():
    assert Coin(0, 0, True).image() == coin_image(FIRST_FRAME)
    assert Coin(0, 0, False).image() == coin_image(LAST_FRAME)


def test_face_is_normalised_to_bool():
    assert Coin(1, 2, 1).face_up is True
    assert Coin(1, 2, 0).face_up is False


def test_flip_gold_to_silver_runs_frames_forward():
    coin = Coin(0, 0, True)
    coin.flip()
    assert coin.face_up is False
    assert coin.animating
    frames = _run_animation(coin)
    assert frames == [coin_image(f) for f in range(FIRST_FRAME, LAST_FRAME + 1)]
    assert coin.image() == coin_image(LAST_FRAME)


def test_flip_silver_to_gold_runs_frames_backward():
    coin = Coin(0, 0, False)
    coin.flip()
    assert coin.face_up is True
    frames = _run_animation(coin)
    assert frames == [coin_image(f) for f in range(LAST_FRAME, FIRST_FRAME - 1, -1)]
    assert coin.image() == coin_image(FIRST_FRAME)


def test_image_unchanged_until_first_tick():
    coin = Coin(0, 0, False)
    before = coin.image()
    coin.flip()
    assert coin.image() == before


def test_tick_when_idle_keeps_image():
    coin = Coin(2, 3, True)
    assert coin.tick() == coin.image() == coin_image(FIRST_FRAME)
    assert not coin.animating


def test_double_flip_restores_face_and_image():
    coin = Coin(0, 0, True)
    coin.flip()
    _run_animation(coin)
    coin.flip()
    _run_animation(coin)
    assert coin.face_up is True
    assert coin.image() == coin_image(FIRST_FRAME)


def test_can_press_blocked_while_animating():
    coin = Coin(0, 0, True)
    assert coin.can_press()
    coin.flip()
    assert not coin.can_press()
    _run_animation(coin)
    assert coin.can_press()


def test_can_press_blocked_when_locked():
    coin = Coin(0, 0, True, locked=True)
    assert not coin.can_press()
    coin.locked = False
    assert coin.can_press()