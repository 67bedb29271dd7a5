import pytest

from wirefdf.app import is_number, main, render
from wirefdf.drawing import WHITE
from wirefdf.geometry import WIN_HEIGHT, WIN_WIDTH


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", True),
        ("-7", True),
        ("+3", True),
        ("12a", False),
        ("4 x", True),
        ("--1", False),
        (None, False),
    ],
)
def test_is_number(text, expected):
    assert is_number(text) is expected


def test_main_requires_one_argument(capsys):
    assert main([]) == 1
    assert capsys.readouterr().out == "error: 1 ARGUMENT PLEASE"
    assert main(["a", "b"]) == 1


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.fdf")]) == 1
    assert capsys.readouterr().out == "error: Error opening file"


def _map_file(tmp_path):
    path = tmp_path / "small.fdf"
    path.write_text("0 0 0\n0 2 0\n0 0 0\n")
    return path


def test_render_draws_origin(tmp_path):
    image = render(_map_file(tmp_path))
    assert (image.width, image.height) == (WIN_WIDTH, WIN_HEIGHT)
    assert image.get_pixel(int(WIN_WIDTH * 0.5), round(WIN_HEIGHT * 0.1)) == WHITE
    assert image.get_pixel(0, 0) == 0


def test_main_writes_ppm(tmp_path, capsysbinary):
    assert main([str(_map_file(tmp_path))]) == 0
    out = capsysbinary.readouterr().out
    header = f"P6\n{WIN_WIDTH} {WIN_HEIGHT}\n255\n".encode("ascii")
    assert out.startswith(header)
    assert len(out) == len(header) + WIN_WIDTH * WIN_HEIGHT * 3