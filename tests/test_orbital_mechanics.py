import math

import pytest

from classes.orbital_mechanics import (
    AnimationState, OrbitingBody, SolarSystemScene, angular_speed, orbit_position, orbit_ring,
    orbital_radius, planet_scale,
)
from catalog.solar_system import PLANETS


def test_orbital_radius_is_logarithmic():
    assert orbital_radius(1_000_000) == pytest.approx(8)
    assert orbital_radius(149_600_000) == pytest.approx(math.log(149.6) * 3 + 8)
    assert orbital_radius(57_910_000) < orbital_radius(149_600_000) < orbital_radius(4_495_100_000)


@pytest.mark.parametrize("bad", [0, -10])
def test_orbital_radius_rejects_non_positive(bad):
    with pytest.raises(ValueError):
        orbital_radius(bad)


def test_planet_scale_is_clamped():
    assert planet_scale(1000) == pytest.approx(0.8)
    assert planet_scale(69_911) == 2
    assert planet_scale(10) == 0.3
    assert 0.3 <= planet_scale(6371) <= 2
    with pytest.raises(ValueError):
        planet_scale(0)


def test_angular_speed_slows_outward():
    assert angular_speed(0) == pytest.approx(0.3)
    assert angular_speed(2) == pytest.approx(0.1)
    assert angular_speed(7) < angular_speed(6)


def test_orbit_position_around_center():
    assert orbit_position(0, 5) == (5, 0, 0)
    x, y, z = orbit_position(math.pi / 2, 5, center=(1, 2, 3))
    assert x == pytest.approx(1)
    assert y == 2
    assert z == pytest.approx(8)


def test_orbit_ring_is_closed():
    ring = orbit_ring(10)
    assert len(ring) == 65
    assert ring[0] == pytest.approx(ring[-1])
    assert all(math.hypot(x, z) == pytest.approx(10) for x, _, z in ring)


def test_animation_speed_is_clamped():
    animation = AnimationState()
    assert animation.set_speed(0) == 0.1
    assert animation.set_speed(9) == 5
    assert animation.set_speed(2.5) == 2.5
    assert animation.toggle_pause() is True
    animation.reset()
    assert animation.to_dict() == {"paused": False, "speed": 1.0}


def test_body_advance_applies_multiplier():
    body = OrbitingBody("mars", radius=10, speed=0.5, scale=1, spin=3)
    body.advance(2, 1.5)
    assert body.angle == pytest.approx(1.5)
    assert body.rotation == pytest.approx(4.5)


def test_scene_has_planets_and_moon():
    scene = SolarSystemScene(PLANETS)
    names = [body.name for body in scene.bodies]

    assert names[:8] == [p["name"] for p in PLANETS]
    assert names[-1] == "moon"
    assert scene.get("moon").parent is scene.get("earth")


def test_scene_without_earth_has_no_moon():
    scene = SolarSystemScene(PLANETS[:2])
    assert scene.get("moon") is None


def test_moon_follows_earth():
    scene = SolarSystemScene(PLANETS)
    scene.advance(3.7)
    earth = scene.get("earth")
    moon = scene.get("moon")

    ex, _, ez = earth.position
    mx, _, mz = moon.position
    assert math.hypot(mx - ex, mz - ez) == pytest.approx(3)


def test_paused_scene_does_not_move():
    scene = SolarSystemScene(PLANETS, AnimationState(paused=True))
    scene.advance(10)
    assert all(body.angle == 0 for body in scene.bodies)


def test_negative_delta_is_ignored():
    scene = SolarSystemScene(PLANETS)
    scene.advance(-1)
    assert scene.get("mercury").angle == 0


def test_selection():
    scene = SolarSystemScene(PLANETS)
    scene.select("Saturn")
    assert scene.snapshot()["selected"] == "saturn"

    with pytest.raises(LookupError):
        scene.select("vulcan")
    assert scene.selected == "saturn"

    scene.clear_selection()
    assert scene.snapshot()["selected"] is None


def test_angles_wrap_at_full_turn():
    body = OrbitingBody("earth", radius=10, speed=1, scale=1, spin=3)
    body.advance(2 * math.pi + 0.5, 1)
    assert body.angle == pytest.approx(0.5)
    assert 0 <= body.rotation < math.tau
    assert body.position[0] == pytest.approx(math.cos(0.5) * 10)


def test_long_scene_run_stays_finite():
    scene = SolarSystemScene(PLANETS, AnimationState(speed=5))
    scene.advance(1e9)
    snapshot = scene.snapshot()
    assert all(0 <= body["angle"] < math.tau for body in snapshot["bodies"])
    assert 0 <= snapshot["sun"]["rotation"] < math.tau
