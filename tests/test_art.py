from quirky_terminal.art import NIGHT_OUT, THIRTY_YEARS_LATER, combine_art


def test_line_count_matches_taller_block():
    assert len(combine_art("a\nb\nc", "x", 1).split("\n")) == 3
    assert len(combine_art("a", "x\ny\nz\nw", 1).split("\n")) == 4


def test_right_segment_starts_at_fixed_column():
    left = "12345\n1\n123"
    combined = combine_art(left, "R\nR\nR", gap=3).split("\n")
    assert all(row.index("R") == 5 + 3 for row in combined)


def test_rows_past_right_block_keep_padding():
    combined = combine_art("abcd\nab\na", "X", gap=2).split("\n")
    assert combined == ["abcd  X", "ab    ", "a     "]


def test_rows_past_left_block_are_fully_padded():
    combined = combine_art("ab", "X\nY", gap=1).split("\n")
    assert combined == ["ab X", "   Y"]


def test_default_scene_shape():
    scene = combine_art(NIGHT_OUT, THIRTY_YEARS_LATER, gap=5).split("\n")
    left_width = max(len(line) for line in NIGHT_OUT.split("\n"))
    assert len(scene) == max(len(NIGHT_OUT.split("\n")), len(THIRTY_YEARS_LATER.split("\n")))
    assert scene[0].startswith("|\\_____/|")
    assert scene[0][left_width + 5 :] == THIRTY_YEARS_LATER.split("\n")[0]
