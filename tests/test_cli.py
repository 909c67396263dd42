"""Tests for the kiosk command line."""
import pytest
from click.testing import CliRunner

from conftest import image_size, make_image_bytes
from kiosk.cli import main


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def source_image(tmp_path):
    path = tmp_path / "source.png"
    path.write_bytes(make_image_bytes(200, 200))
    return path


def test_crop_command(runner, source_image, tmp_path):
    output = tmp_path / "crop.png"
    result = runner.invoke(main, [
        "crop", str(source_image),
        "--left", "10", "--top", "10", "--width", "100", "--height", "50",
        "-o", str(output),
    ])
    assert result.exit_code == 0, result.output
    assert image_size(output.read_bytes()) == (100, 50)


def test_crop_command_out_of_bounds(runner, source_image, tmp_path):
    output = tmp_path / "crop.png"
    result = runner.invoke(main, [
        "crop", str(source_image),
        "--left", "150", "--top", "10", "--width", "100", "--height", "50",
        "-o", str(output),
    ])
    assert result.exit_code == 1
    assert not output.exists()


def test_resize_command(runner, source_image, tmp_path):
    output = tmp_path / "small.jpg"
    result = runner.invoke(main, ["resize", str(source_image), "--height", "50", "-o", str(output)])
    assert result.exit_code == 0, result.output
    assert image_size(output.read_bytes()) == (50, 50)
    assert "scale_x=4.000000 scale_y=4.000000" in result.output


def test_match_command(runner):
    result = runner.invoke(main, [
        "match", "--candidate", "100,100,100,100",
        "--known", "900,900,100,100",
        "--known", "110,105,100,100",
    ])
    assert result.exit_code == 0, result.output
    assert "match 1" in result.output


def test_match_command_no_match(runner):
    result = runner.invoke(main, ["match", "-c", "0,0,10,10", "-k", "500,500,10,10"])
    assert result.exit_code == 0
    assert "no match" in result.output


def test_match_command_bad_rectangle(runner):
    result = runner.invoke(main, ["match", "-c", "1,2,3"])
    assert result.exit_code == 2
