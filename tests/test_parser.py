import logging

import numpy as np
import pytest

from olio.parser import ParseError, ParsedScene, parse_file, parse_lines
from olio.sphere import Sphere
from olio.triangle import Triangle

CAMERA_LINE = "c 0 0 5 0 0 -1 1 1.6 0.9 320 180"


def test_sphere_scene_round_trip():
    result = parse_lines(["/ a comment", "", CAMERA_LINE, "s 1 2 3 0.5"])
    assert isinstance(result, ParsedScene)
    assert isinstance(result.scene, Sphere)
    assert np.allclose(result.scene.center, [1, 2, 3])
    assert result.scene.radius == 0.5
    assert result.image_size == (320, 180)


def test_camera_fields():
    camera = parse_lines([CAMERA_LINE]).camera
    assert np.allclose(camera.eye, [0, 0, 5])
    assert np.allclose(camera.target - camera.eye, [0, 0, -1])
    assert np.allclose(camera.up, [0, 1, 0])
    # viewport size at unit distance equals viewport size / focal length
    assert np.linalg.norm(camera.vertical) == pytest.approx(0.9)
    assert np.linalg.norm(camera.horizontal) == pytest.approx(1.6)


def test_view_direction_is_normalized():
    camera = parse_lines(["c 1 1 1 0 0 -7 1 2 2 10 10"]).camera
    assert np.linalg.norm(camera.target - camera.eye) == pytest.approx(1.0)
    assert np.allclose(camera.target - camera.eye, [0, 0, -1])


def test_looking_up_switches_up_vector():
    camera = parse_lines(["c 0 0 0 0 3 0 1 2 2 10 10"]).camera
    assert np.allclose(camera.up, [0, 0, 1])


def test_triangle_scene():
    result = parse_lines([CAMERA_LINE, "t 0 0 0 1 0 0 0 1 0"])
    assert isinstance(result.scene, Triangle)
    p0, p1, p2 = result.scene.points
    assert np.allclose(p0, [0, 0, 0])
    assert np.allclose(p1, [1, 0, 0])
    assert np.allclose(p2, [0, 1, 0])


def test_no_surface_is_allowed():
    result = parse_lines([CAMERA_LINE])
    assert result.scene is None


def test_unknown_commands_ignored():
    result = parse_lines([CAMERA_LINE, "x whatever 1 2", "s 0 0 0 1"])
    assert isinstance(result.scene, Sphere)
    assert result.scene.radius == 1.0
    assert result.scene.center.tolist() == [0.0, 0.0, 0.0]
    assert result.image_size == (320, 180)


def test_missing_camera():
    with pytest.raises(ParseError, match="one camera"):
        parse_lines(["s 0 0 0 1"])


def test_two_cameras():
    with pytest.raises(ParseError, match="one camera"):
        parse_lines([CAMERA_LINE, CAMERA_LINE])


def test_two_surfaces():
    with pytest.raises(ParseError, match="one surface"):
        parse_lines([CAMERA_LINE, "s 0 0 0 1", "t 0 0 0 1 0 0 0 1 0"])


@pytest.mark.parametrize(
    "line",
    ["c 0 0 5 0 0 -1 1 1 0 10 10", "c 0 0 5 0 0 -1 1 0 1 10 10"],
)
def test_bad_viewport_aspect(line):
    with pytest.raises(ParseError, match="viewport_aspect"):
        parse_lines([line])


def test_malformed_numbers():
    with pytest.raises(ParseError):
        parse_lines([CAMERA_LINE, "s 0 zero 0 1"])


def test_too_few_numbers():
    with pytest.raises(ParseError):
        parse_lines([CAMERA_LINE, "s 0 0 0"])


def test_aspect_mismatch_warns(caplog):
    with caplog.at_level(logging.WARNING, logger="olio.parser"):
        result = parse_lines(["c 0 0 5 0 0 -1 1 2 1 100 100"])
    assert result.image_size == (100, 100)
    assert any("aspect ratio" in record.getMessage() for record in caplog.records)


def test_parse_file(tmp_path):
    scene_file = tmp_path / "scene.txt"
    scene_file.write_text(f"/ comment\n{CAMERA_LINE}\ns 0 0 0 2\n", encoding="utf-8")
    result = parse_file(scene_file)
    assert isinstance(result.scene, Sphere)
    assert result.scene.radius == 2.0
    assert result.image_size == (320, 180)


def test_parse_missing_file(tmp_path):
    with pytest.raises(ParseError, match="does not exist"):
        parse_file(tmp_path / "missing.txt")