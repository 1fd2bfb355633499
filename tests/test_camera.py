import math

import pytest

from blastgrid.camera import Camera, CameraDirection, Vec3, look_at
from blastgrid.entity import Entity


def _apply(matrix, point):
    x, y, z = point
    return tuple(row[0] * x + row[1] * y + row[2] * z + row[3] for row in matrix[:3])


def test_vec3_cross_is_orthogonal_and_normalized_is_unit():
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(-2.0, 0.5, 4.0)
    c = a.cross(b)
    assert c.dot(a) == pytest.approx(0.0)
    assert c.dot(b) == pytest.approx(0.0)
    assert a.normalized().length() == pytest.approx(1.0)
    assert Vec3().normalized() == Vec3()


def test_look_at_maps_eye_to_origin_and_center_ahead():
    eye = Vec3(1.0, 2.0, 3.0)
    center = Vec3(4.0, 6.0, -2.0)
    m = look_at(eye, center, Vec3(0.0, 1.0, 0.0))
    assert _apply(m, eye) == pytest.approx((0.0, 0.0, 0.0), abs=1e-9)
    x, y, z = _apply(m, center)
    assert (x, y) == pytest.approx((0.0, 0.0), abs=1e-9)
    assert z == pytest.approx(-math.dist(tuple(eye), tuple(center)))


def test_default_vectors_are_orthonormal():
    cam = Camera(Vec3(0.0, 10.0, -3.0))
    assert tuple(cam.front) == pytest.approx((0.0, 0.0, -1.0), abs=1e-9)
    for v in (cam.front, cam.right, cam.up):
        assert v.length() == pytest.approx(1.0)
    assert cam.front.dot(cam.right) == pytest.approx(0.0, abs=1e-9)
    assert cam.up.dot(cam.right) == pytest.approx(0.0, abs=1e-9)
    assert _apply(cam.view_matrix(), cam.position) == pytest.approx((0.0, 0.0, 0.0), abs=1e-9)


def test_move_forward_and_back_round_trip():
    cam = Camera(Vec3(1.0, 2.0, 3.0))
    start = cam.position
    cam.move_camera(CameraDirection.FORWARD, 0.7)
    assert cam.position != start
    cam.move_camera(CameraDirection.BACKWARD, 0.7)
    assert tuple(cam.position) == pytest.approx(tuple(start))


def test_move_right_travels_along_right_vector():
    cam = Camera()
    cam.move_camera(CameraDirection.RIGHT, 2.0)
    moved = cam.position - Vec3()
    assert moved.dot(cam.right) == pytest.approx(Camera.SPEED * 2.0)
    cam.move_camera(CameraDirection.LEFT, 2.0)
    assert tuple(cam.position) == pytest.approx((0.0, 0.0, 0.0), abs=1e-9)


def test_mouse_movement_turns_camera():
    cam = Camera()
    cam.process_mouse_movement(900.0, 0.0)
    assert tuple(cam.front) == pytest.approx((1.0, 0.0, 0.0), abs=1e-9)
    assert cam.right.length() == pytest.approx(1.0)


def test_scroll_is_clamped():
    cam = Camera()
    cam.process_mouse_scroll(100.0)
    assert cam.zoom == Camera.MIN_ZOOM
    cam.process_mouse_scroll(-100.0)
    assert cam.zoom == Camera.MAX_ZOOM
    cam.process_mouse_scroll(5.0)
    assert cam.zoom == pytest.approx(Camera.MAX_ZOOM - 5.0)


def test_add_shake_accumulates():
    cam = Camera()
    cam.add_shake(0.05)
    cam.add_shake(0.05)
    assert cam.shake_amount == pytest.approx(0.1)


def test_follow_entity_centres_target_in_view():
    cam = Camera(Vec3(0.0, 10.0, -3.0))
    target = Entity((3.0, 4.0))
    cam.follow_entity(target, 10.0, 0.5, 0.0)
    assert cam.position.x == pytest.approx(3.0)
    x, y, z = _apply(cam.view_matrix(), target.position3d())
    assert (x, y) == pytest.approx((0.0, 0.0), abs=1e-9)
    assert z < 0


def test_follow_entity_decays_shake_and_zero_dt_keeps_position():
    cam = Camera(Vec3(1.0, 2.0, 3.0))
    target = Entity((0.0, 0.0))
    cam.follow_entity(target, 10.0, 0.0, 0.0)
    assert tuple(cam.position) == pytest.approx((1.0, 2.0, 3.0))
    cam.add_shake(1.0)
    cam.follow_entity(target, 10.0, 0.1, 0.0)
    assert 0.0 < cam.shake_amount < 1.0