from pathlib import Path

import pytest
from PIL import Image

from fretdegrees.main import main, make_parser


def test_text_output(capsys: pytest.CaptureFixture[str]) -> None:
    main(["--text", "--triad", "V", "--log-level", "WARNING"])
    lines = capsys.readouterr().out.rstrip("\n").split("\n")
    assert len(lines) == 15
    assert "[5]" in lines[-1]


def test_text_output_without_selection(capsys: pytest.CaptureFixture[str]) -> None:
    main(["--text", "--log-level", "WARNING"])
    out = capsys.readouterr().out
    assert "[" not in out


def test_export(tmp_path: Path) -> None:
    path = tmp_path / "out.png"
    main(["--export", str(path), "--width", "340", "--height", "2000"])
    with Image.open(path) as image:
        assert image.size == (300, 300)


def test_rejects_unknown_triad() -> None:
    with pytest.raises(SystemExit):
        make_parser().parse_args(["--triad", "VIII"])


def test_export_and_text_are_exclusive(tmp_path: Path) -> None:
    with pytest.raises(SystemExit):
        make_parser().parse_args(["--text", "--export", str(tmp_path / "x.png")])


def test_defaults() -> None:
    args = make_parser().parse_args([])
    assert args.triad == ""
    assert args.width == 1024
    assert args.height == 768
    assert args.export is None
    assert not args.text
