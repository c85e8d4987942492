import pytest

from enginecore.collider import BaseCollider, SphereCollider


def _recorder():
    calls = []
    return calls, lambda other: calls.append(other)


def test_base_collider_is_abstract():
    with pytest.raises(TypeError):
        BaseCollider()


def test_sphere_defaults():
    sphere = SphereCollider()
    assert sphere.radius == 1.0
    assert sphere.collider_type == "Sphere"
    assert sphere.group == ""


def test_group_name():
    sphere = SphereCollider()
    sphere.set_group_name("enemy")
    assert sphere.group == "enemy"


def test_enter_stay_exit_sequence():
    a, b = SphereCollider(), SphereCollider()
    enters, on_enter = _recorder()
    stays, on_stay = _recorder()
    exits, on_exit = _recorder()
    a.on_collision_enter = on_enter
    a.on_collision = on_stay
    a.on_collision_exit = on_exit

    a.begin()
    a.collision(b, True)
    assert enters == [b] and stays == [] and exits == []

    a.begin()
    a.collision(b, True)
    assert stays == [b]

    a.begin()
    a.collision(b, False)
    assert exits == [b]
    assert len(enters) == 1


def test_no_contact_fires_nothing():
    a, b = SphereCollider(), SphereCollider()
    calls, callback = _recorder()
    a.on_collision = callback
    a.collision(b, False)
    a.begin()
    a.collision(b, False)
    assert calls == []
    a.begin()
    a.collision(b, True)
    assert calls == [b]


def test_fallback_to_on_collision():
    a, b = SphereCollider(), SphereCollider()
    calls, callback = _recorder()
    a.on_collision = callback
    a.collision(b, True)
    a.begin()
    a.collision(b, False)
    assert calls == [b, b]


def test_contact_restarts_after_exit():
    a, b = SphereCollider(), SphereCollider()
    enters, on_enter = _recorder()
    a.on_collision_enter = on_enter
    a.collision(b, True)
    a.begin()
    a.collision(b, False)
    a.begin()
    a.begin()
    a.collision(b, True)
    assert enters == [b, b]


def test_inactive_collider_ignores_and_forgets():
    a, b = SphereCollider(), SphereCollider()
    enters, on_enter = _recorder()
    a.on_collision_enter = on_enter
    a.collision(b, True)
    a.is_active = False
    a.begin()
    a.collision(b, True)
    assert enters == [b]
    a.is_active = True
    a.begin()
    a.collision(b, True)
    assert enters == [b, b]


def test_update_refreshes_world_position():
    from enginecore.vector3 import Vector3

    sphere = SphereCollider()
    sphere.transform.translate = Vector3(1, 2, 3)
    sphere.update()
    assert sphere.world_position == Vector3(1, 2, 3)