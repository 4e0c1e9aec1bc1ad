import pytest

wx = pytest.importorskip("wx")

from simchat.ui.host import Colour  # noqa: E402
from simchat.ui.keys import Key  # noqa: E402
from simchat.ui.wx_host import key_from_wx, wx_colour  # noqa: E402

pytestmark = pytest.mark.gui


@pytest.mark.parametrize(
    ("code", "expected"),
    [
        (wx.WXK_LEFT, Key.LEFT_ARROW),
        (wx.WXK_BACK, Key.BACKSPACE),
        (wx.WXK_RETURN, Key.ENTER),
        (wx.WXK_NUMPAD_ENTER, Key.ENTER),
        (wx.WXK_SPACE, Key.SPACE),
        (ord("A"), Key.A),
        (ord("7"), Key.NUM7),
        (ord("/"), Key.SLASH),
    ],
)
def test_key_codes_map_to_keys(code, expected) -> None:
    assert key_from_wx(code) is expected


def test_unknown_key_codes_are_ignored() -> None:
    assert key_from_wx(wx.WXK_F5) is None


def test_colour_conversion_keeps_alpha() -> None:
    colour = wx_colour(Colour(10, 20, 30, 128))
    assert (colour.Red(), colour.Green(), colour.Blue(), colour.Alpha()) == (10, 20, 30, 128)
