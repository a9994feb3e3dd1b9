import math

import pytest

from classes.orbital_mechanics import orbital_radius


def test_planets_listed_in_order_from_the_sun(client):
    response = client.get("/api/planets")

    assert response.status_code == 200
    names = [planet["name"] for planet in response.get_json()]
    assert names == ["mercury", "venus", "earth", "mars", "jupiter", "saturn", "uranus", "neptune"]


def test_planet_lookup_by_name_and_id(client):
    by_name = client.get("/api/planets/EARTH")
    assert by_name.status_code == 200
    earth = by_name.get_json()
    assert earth["portuguese_name"] == "Terra"
    assert [moon["name"] for moon in earth["moons"]] == ["Lua"]
    assert earth["formatted"]["average_temperature"] == "15°C"

    by_id = client.get(f"/api/planets/{earth['id']}")
    assert by_id.get_json()["name"] == "earth"


def test_unknown_planet(client):
    assert client.get("/api/planets/pluto").status_code == 404
    assert client.get("/api/planets/pluto/moons").status_code == 404


def test_moons_of_a_planet(client):
    response = client.get("/api/planets/jupiter/moons")
    assert [moon["name"] for moon in response.get_json()] == ["Io", "Europa", "Ganimedes", "Calisto"]

    mars = client.get("/api/moons?planet=mars").get_json()
    assert {moon["name"] for moon in mars} == {"Fobos", "Deimos"}
    assert all(moon["planet"] == "mars" for moon in mars)


def test_retrograde_moon(client):
    triton = next(m for m in client.get("/api/moons?planet=neptune").get_json() if m["name"] == "Tritão")
    assert triton["is_retrograde"] is True

    response = client.get(f"/api/moons/{triton['id']}")
    assert response.get_json()["name"] == "Tritão"
    assert client.get("/api/moons/9999").status_code == 404


def test_compare_two_planets(client):
    response = client.get("/api/planets/compare?ids=earth&ids=mars")

    assert response.status_code == 200
    body = response.get_json()
    assert [p["name"] for p in body["planets"]] == ["earth", "mars"]
    rows = {row["field"]: row for row in body["comparison"]}
    assert len(rows) == 8
    assert rows["gravity"]["largest"] == "earth"
    assert rows["gravity"]["smallest"] == "mars"
    assert rows["moons_count"]["values"][0]["formatted"] == "1 lua"


def test_compare_accepts_comma_list(client):
    response = client.get("/api/planets/compare?ids=mercury,venus,earth")
    assert response.status_code == 200
    assert len(response.get_json()["planets"]) == 3


@pytest.mark.parametrize("query", ["ids=earth", "", "ids=a,b,c,d,e"])
def test_compare_needs_two_to_four_planets(client, query):
    assert client.get(f"/api/planets/compare?{query}").status_code == 400


def test_compare_unknown_planet(client):
    assert client.get("/api/planets/compare?ids=earth,pluto").status_code == 404


def test_weight_on_each_planet(client):
    response = client.get("/api/planets/weights?weight=70")

    assert response.status_code == 200
    results = {r["planet"]: r for r in response.get_json()["results"]}
    assert len(results) == 8
    assert results["earth"]["weight"] == 70.0
    assert results["jupiter"]["weight"] == pytest.approx(176.89)


@pytest.mark.parametrize("weight", ["", "abc", "0", "-5", "nan", "inf", "1001"])
def test_weight_is_validated(client, weight):
    assert client.get(f"/api/planets/weights?weight={weight}").status_code == 400


def test_comparison_fields_hide_attribute_names(client):
    fields = client.get("/api/comparison-fields").get_json()
    assert [f["name"] for f in fields][:3] == ["mass", "radius", "gravity"]
    assert all("attribute" not in f for f in fields)


def test_asteroid_filters(client):
    everything = client.get("/api/asteroids").get_json()
    assert len(everything) == 11

    comets = client.get("/api/asteroids?type=comet").get_json()
    assert {body["name"] for body in comets} == {"halley", "hale-bopp", "hyakutake"}

    dwarfs_in_belt = client.get("/api/asteroids?type=dwarf_planet&location=main_belt").get_json()
    assert [body["name"] for body in dwarfs_in_belt] == ["ceres"]


def test_asteroid_invalid_filter(client):
    assert client.get("/api/asteroids?type=planet").status_code == 400
    assert client.get("/api/asteroids?location=mars").status_code == 400


def test_single_asteroid_and_regions(client):
    assert client.get("/api/asteroids/Halley").get_json()["type"] == "comet"
    assert client.get("/api/asteroids/sedna").status_code == 404

    regions = client.get("/api/asteroid-regions").get_json()
    assert set(regions) == {"main_belt", "kuiper_belt", "oort_cloud"}


def test_scene_at_start(client):
    scene = client.get("/api/solar-system/scene").get_json()
    bodies = {body["name"]: body for body in scene["bodies"]}

    assert len(bodies) == 9
    earth = bodies["earth"]
    assert earth["angle"] == 0
    assert earth["position"]["x"] == pytest.approx(orbital_radius(149600000), abs=1e-3)
    assert bodies["moon"]["parent"] == "earth"
    assert bodies["moon"]["position"]["x"] == pytest.approx(earth["position"]["x"] + 3, abs=1e-3)
    assert scene["camera"]["position"] == [0, 80, 0]
    assert scene["selected"] is None


def test_scene_advances_with_time_and_speed(client):
    scene = client.get("/api/solar-system/scene?t=10&speed=2").get_json()
    bodies = {body["name"]: body for body in scene["bodies"]}

    assert bodies["mercury"]["angle"] == pytest.approx(0.3 * 10 * 2)
    assert bodies["earth"]["angle"] == pytest.approx(0.1 * 10 * 2)
    assert bodies["moon"]["angle"] == pytest.approx((2 * 10 * 2) % math.tau)
    assert scene["sun"]["rotation"] == pytest.approx((0.5 * 10 * 2) % math.tau)


def test_scene_paused_and_clamped(client):
    scene = client.get("/api/solar-system/scene?t=10&paused=true&speed=100").get_json()

    assert scene["animation"] == {"paused": True, "speed": 5}
    assert all(body["angle"] == 0 for body in scene["bodies"])


def test_scene_selection_and_rings(client):
    scene = client.get("/api/solar-system/scene?selected=Mars&rings=1").get_json()
    bodies = {body["name"]: body for body in scene["bodies"]}

    assert scene["selected"] == "mars"
    assert bodies["mars"]["selected"] is True
    assert len(bodies["mars"]["ring"]) == 65
    assert "ring" not in bodies["moon"]


@pytest.mark.parametrize("query", ["t=abc", "t=-1", "t=nan", "speed=inf", "paused=maybe", "t=1e308&speed=5", "t=2e9"])
def test_scene_rejects_bad_parameters(client, query):
    assert client.get(f"/api/solar-system/scene?{query}").status_code == 400


def test_scene_unknown_selection(client):
    assert client.get("/api/solar-system/scene?selected=vulcan").status_code == 404


def test_scene_positions_stay_on_orbit(client):
    scene = client.get("/api/solar-system/scene?t=7.3").get_json()
    for body in scene["bodies"]:
        if body["parent"] != "sun":
            continue
        position = body["position"]
        distance = math.hypot(position["x"], position["z"])
        assert distance == pytest.approx(body["orbital_radius"], abs=1e-3)


def test_scene_long_run_keeps_angles_wrapped(client):
    response = client.get("/api/solar-system/scene?t=1e9&speed=5")

    assert response.status_code == 200
    scene = response.get_json()
    for body in scene["bodies"]:
        assert 0 <= body["angle"] < math.tau
        assert 0 <= body["rotation"] < math.tau
    assert 0 <= scene["sun"]["rotation"] < math.tau


def test_weights_flag_heavier_or_lighter(client):
    results = {r["planet"]: r for r in client.get("/api/planets/weights?weight=70").get_json()["results"]}
    assert results["jupiter"]["compared_to_earth"] == "heavier"
    assert results["mars"]["compared_to_earth"] == "lighter"
    assert results["earth"]["compared_to_earth"] == "equal"


def test_gravity_drop_defaults_to_25_metres(client):
    response = client.get("/api/planets/gravity-drop")

    assert response.status_code == 200
    body = response.get_json()
    assert body["height"] == 25
    results = {r["planet"]: r for r in body["results"]}
    assert len(results) == 8
    assert results["earth"]["fall_time"] == pytest.approx(round(math.sqrt(50 / 9.81), 2))
    assert results["earth"]["impact_velocity"] == pytest.approx(round(math.sqrt(2 * 9.81 * 25), 2))
    assert results["jupiter"]["fall_time"] < results["earth"]["fall_time"] < results["mars"]["fall_time"]


def test_gravity_drop_custom_height(client):
    results = client.get("/api/planets/gravity-drop?height=100").get_json()["results"]
    mercury = next(r for r in results if r["planet"] == "mercury")
    assert mercury["fall_time"] == pytest.approx(round(math.sqrt(200 / 3.7), 2))


@pytest.mark.parametrize("height", ["abc", "0", "-2", "nan", "inf", "10001"])
def test_gravity_drop_height_is_validated(client, height):
    assert client.get(f"/api/planets/gravity-drop?height={height}").status_code == 400


def test_planet_lookup_ignores_non_ascii_digits(client):
    assert client.get("/api/planets/²").status_code == 404
