from quirky_terminal.art import combine_art
from quirky_terminal.formatting import Style, colorize, strip_ansi
from quirky_terminal.modules import InfoItem
from quirky_terminal.renderer import compose_lines, draw, info_lines, palette_line


class FakeModule:
    def __init__(self, *items):
        self.items = list(items)

    def fetch(self):
        return self.items


def make_scene():
    return combine_art("aaaaa\nbb\nccc", "dddd\ne\nff", gap=2)


def make_module():
    return FakeModule(InfoItem("Header", colorize("ab@cd", Style.GREEN)), InfoItem("X", "y"))


def test_header_is_underlined_by_visible_length():
    lines = [strip_ansi(line) for line in info_lines([make_module()])]
    assert lines[:3] == ["ab@cd", "-----", "X: y"]


def test_palette_follows_blank_line():
    lines = info_lines([make_module()])
    assert lines[-2] == ""
    assert lines[-1] == palette_line()
    assert strip_ansi(palette_line()) == " ".join(["●"] * 6)
    assert palette_line().startswith(Style.RED.value)


def test_module_order_is_kept():
    first = FakeModule(InfoItem("B", "2"))
    second = FakeModule(InfoItem("A", "1"))
    lines = [strip_ansi(line) for line in info_lines([first, second])]
    assert lines[:2] == ["B: 2", "A: 1"]


def test_compose_pads_every_row_to_art_width_plus_margin():
    rows = [strip_ansi(row) for row in compose_lines(make_scene(), info_lines([make_module()]))]
    assert rows == [
        "aaaaa  dddd" + " " * 5 + "ab@cd",
        "bb     e" + " " * 8 + "-----",
        "ccc    ff" + " " * 7 + "X: y",
        " " * 16,
        " " * 16 + " ".join(["●"] * 6),
    ]


def test_compose_with_more_art_than_info():
    rows = [strip_ansi(row) for row in compose_lines("ab\nc\nd", ["info"])]
    assert rows == ["ab     info", "c      ", "d      "]


def test_draw_prints_scene_with_margins(capsys):
    draw(make_scene(), [make_module()])
    lines = [strip_ansi(line).rstrip() for line in capsys.readouterr().out.split("\n")]
    assert lines == [
        "",
        "aaaaa  dddd     ab@cd",
        "bb     e        -----",
        "ccc    ff       X: y",
        "",
        " " * 16 + " ".join(["●"] * 6),
        "",
        "",
    ]
