import logging
import math

from flask import Blueprint, request, jsonify, current_app
from models import db
from models.planets import Planet
from models.moons import Moon
from catalog.small_bodies import filter_bodies, get_body, REGIONS
from classes.planet_comparison import compare_planets, weights_across_planets, gravity_drop, public_fields, DEFAULT_DROP_HEIGHT
from classes.orbital_mechanics import SolarSystemScene, AnimationState, MAX_ELAPSED
from classes.validators import to_bool
from utils.helpers import planet_display

planets_bp = Blueprint("planets", __name__)
logger = logging.getLogger(__name__)

MIN_COMPARE = 2
MAX_COMPARE = 4


def ordered_planets():
    return Planet.query.order_by(Planet.order.asc(), Planet.id.asc()).all()

#__________________________________________________________________________________________ * Planets *__________________________________________________

@planets_bp.route("/planets", methods=["GET"])
def get_planets():
    return jsonify([planet.to_dict() for planet in ordered_planets()]), 200

@planets_bp.route("/planets/compare", methods=["GET"])
def compare():
    identifiers = request.args.getlist("ids")
    if len(identifiers) == 1 and "," in identifiers[0]:
        identifiers = identifiers[0].split(",")

    if not MIN_COMPARE <= len(identifiers) <= MAX_COMPARE:
        return jsonify({"error": f"Select between {MIN_COMPARE} and {MAX_COMPARE} planets to compare"}), 400

    planets = []
    for identifier in identifiers:
        planet = Planet.lookup(identifier)
        if not planet:
            return jsonify({"error": f"Planet not found: {identifier}"}), 404
        planets.append(planet)

    return jsonify({
        "planets": [planet.to_dict() for planet in planets],
        "comparison": compare_planets(planets),
    }), 200

@planets_bp.route("/planets/weights", methods=["GET"])
def weights():
    try:
        weight = float(request.args.get("weight", ""))
    except ValueError:
        return jsonify({"error": "Weight must be a positive number."}), 400

    try:
        results = weights_across_planets(weight, ordered_planets(), current_app.config.get("MAX_WEIGHT_KG"))
    except ValueError as e:
        return jsonify({"error": str(e)}), 400

    return jsonify({"weight_on_earth": weight, "results": results}), 200

@planets_bp.route("/planets/gravity-drop", methods=["GET"])
def drop_simulation():
    try:
        height = float(request.args.get("height", DEFAULT_DROP_HEIGHT))
    except ValueError:
        return jsonify({"error": "Height must be a positive number."}), 400

    try:
        results = gravity_drop(ordered_planets(), height, current_app.config.get("MAX_DROP_HEIGHT_M"))
    except ValueError as e:
        return jsonify({"error": str(e)}), 400

    return jsonify({"height": height, "results": results}), 200

@planets_bp.route("/planets/<identifier>", methods=["GET"])
def get_planet(identifier):
    planet = Planet.lookup(identifier)
    if not planet:
        return jsonify({"error": "Planet not found"}), 404

    data = planet.to_dict()
    data["formatted"] = planet_display(planet)
    data["moons"] = [moon.to_dict() for moon in planet.moons if moon.is_active]
    return jsonify(data), 200

@planets_bp.route("/planets/<identifier>/moons", methods=["GET"])
def get_planet_moons(identifier):
    planet = Planet.lookup(identifier)
    if not planet:
        return jsonify({"error": "Planet not found"}), 404
    return jsonify([moon.to_dict() for moon in planet.moons if moon.is_active]), 200

@planets_bp.route("/comparison-fields", methods=["GET"])
def comparison_fields():
    return jsonify(public_fields()), 200

#__________________________________________________________________________________________ * Moons *__________________________________________________

@planets_bp.route("/moons", methods=["GET"])
def get_moons():
    query = Moon.query.filter_by(is_active=True)

    planet_ref = request.args.get("planet")
    if planet_ref:
        planet = Planet.lookup(planet_ref)
        if not planet:
            return jsonify({"error": "Planet not found"}), 404
        query = query.filter_by(planet_id=planet.id)

    moons = query.order_by(Moon.planet_id.asc(), Moon.order.asc()).all()
    return jsonify([moon.to_dict() for moon in moons]), 200

@planets_bp.route("/moons/<int:moon_id>", methods=["GET"])
def get_moon(moon_id):
    moon = db.session.get(Moon, moon_id)
    if not moon or not moon.is_active:
        return jsonify({"error": "Moon not found"}), 404
    return jsonify(moon.to_dict()), 200

#__________________________________________________________________________________________ * Small bodies *__________________________________________________

@planets_bp.route("/asteroids", methods=["GET"])
def get_asteroids():
    try:
        bodies = filter_bodies(request.args.get("type"), request.args.get("location"))
    except ValueError as e:
        return jsonify({"error": str(e)}), 400
    return jsonify(bodies), 200

@planets_bp.route("/asteroids/<name>", methods=["GET"])
def get_asteroid(name):
    body = get_body(name)
    if not body:
        return jsonify({"error": "Object not found"}), 404
    return jsonify(body), 200

@planets_bp.route("/asteroid-regions", methods=["GET"])
def get_regions():
    return jsonify(REGIONS), 200

#__________________________________________________________________________________________ * 3D scene *__________________________________________________

@planets_bp.route("/solar-system/scene", methods=["GET"])
def scene():
    try:
        elapsed = float(request.args.get("t", 0))
        speed = float(request.args.get("speed", 1))
        paused = to_bool(request.args.get("paused"), default=False)
    except ValueError:
        return jsonify({"error": "Invalid scene parameters"}), 400

    if not math.isfinite(elapsed) or not math.isfinite(speed):
        return jsonify({"error": "Invalid scene parameters"}), 400
    if elapsed < 0:
        return jsonify({"error": "Elapsed time cannot be negative"}), 400
    if elapsed > MAX_ELAPSED:
        return jsonify({"error": f"Elapsed time must be at most {MAX_ELAPSED:g} seconds"}), 400

    solar_system = SolarSystemScene(ordered_planets(), AnimationState(speed=speed, paused=paused))
    solar_system.advance(elapsed)

    selected = request.args.get("selected")
    if selected:
        try:
            solar_system.select(selected)
        except LookupError as e:
            return jsonify({"error": str(e)}), 404

    return jsonify(solar_system.snapshot(include_rings=to_bool(request.args.get("rings"), default=False))), 200
