import numpy as np

from olio.node import Node
from olio.ray import HitRecord, Ray
from olio.types import vec3


def test_ray_default_constructor():
    ray = Ray()
    assert ray.origin.tolist() == [0.0, 0.0, 0.0]
    assert ray.direction.tolist() == [0.0, 0.0, 0.0]


def test_ray_parameterized_constructor():
    ray = Ray(vec3(0, 0, 0), vec3(1, 1, 1))
    assert ray.origin.tolist() == [0.0, 0.0, 0.0]
    assert ray.direction.tolist() == [1.0, 1.0, 1.0]


def test_ray_set_origin_and_direction():
    ray = Ray()
    ray.origin = vec3(1, 2, 3)
    ray.direction = vec3(4, 5, 6)
    assert ray.origin.tolist() == [1.0, 2.0, 3.0]
    assert ray.direction.tolist() == [4.0, 5.0, 6.0]


def test_ray_at():
    ray = Ray(vec3(1, 2, 3), vec3(4, 5, 6))
    assert ray.at(2.0).tolist() == [9.0, 12.0, 15.0]


def test_ray_accepts_sequences_and_copies_them():
    origin = vec3(1, 2, 3)
    ray = Ray(origin, [0, 0, 1])
    origin[0] = 99
    assert ray.origin.tolist() == [1.0, 2.0, 3.0]
    assert ray.direction.tolist() == [0.0, 0.0, 1.0]


def test_hit_record_constructor():
    ray = Ray(vec3(1, 2, 3), vec3(0, 0, 1))
    record = HitRecord.from_ray(ray, 1.0, vec3(1, 2, 4), vec3(0, 0, -1))
    assert record.ray_t == 1.0
    assert record.point.tolist() == [1.0, 2.0, 4.0]
    assert record.normal.tolist() == [0.0, 0.0, -1.0]
    assert record.front_face is True
    assert record.surface is None


def test_hit_record_set_ray_t_and_point():
    record = HitRecord()
    record.ray_t = 2.0
    record.point = vec3(1, 1, 3)
    assert record.ray_t == 2.0
    assert record.point.tolist() == [1.0, 1.0, 3.0]


def test_hit_record_set_normal_from_ray_front():
    ray = Ray(vec3(1, 1, 1), vec3(0, 0, 1))
    record = HitRecord()
    record.set_normal(ray, vec3(0, 0, -1))
    assert record.normal.tolist() == [0.0, 0.0, -1.0]
    assert record.front_face is True


def test_hit_record_set_normal_from_ray_back_flips():
    ray = Ray(vec3(1, 1, 1), vec3(0, 0, 1))
    record = HitRecord()
    record.set_normal(ray, vec3(0, 0, 1))
    assert record.normal.tolist() == [0.0, 0.0, -1.0]
    assert record.front_face is False


def test_hit_record_set_normal_grazing_is_front():
    ray = Ray(vec3(0, 0, 0), vec3(1, 0, 0))
    record = HitRecord()
    record.set_normal(ray, vec3(0, 1, 0))
    assert record.front_face is True
    assert record.normal.tolist() == [0.0, 1.0, 0.0]


def test_hit_record_set_oriented_normal():
    record = HitRecord()
    face_normal = vec3(0, 0, 1)

    record.set_oriented_normal(face_normal, False)
    assert record.normal.tolist() == [0.0, 0.0, -1.0]
    assert record.front_face is False

    record.set_oriented_normal(face_normal, True)
    assert record.normal.tolist() == [0.0, 0.0, 1.0]
    assert record.front_face is True


def test_hit_record_stored_normal_opposes_ray():
    ray = Ray(vec3(0, 0, 0), vec3(1, 2, 3))
    for n in (vec3(1, 0, 0), vec3(-1, 0, 0), vec3(0, -2, 1)):
        record = HitRecord()
        record.set_normal(ray, n)
        assert np.dot(record.normal, ray.direction) <= 0


def test_hit_record_set_surface():
    surface = Node("surface")
    record = HitRecord()
    record.surface = surface
    assert record.surface is surface


def test_hit_record_point_is_copied():
    ray = Ray(vec3(0, 0, 0), vec3(0, 0, 1))
    point = vec3(0, 0, 5)
    record = HitRecord.from_ray(ray, 5.0, point, vec3(0, 0, -1))
    point[2] = -1
    assert record.point.tolist() == [0.0, 0.0, 5.0]