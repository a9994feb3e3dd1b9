"""Planet comparison fields, value formatting, the weight calculator and the gravity drop."""
import math

EARTH_GRAVITY = 9.81
DEFAULT_DROP_HEIGHT = 25  # metres

COMPARISON_FIELDS = [
    {"name": "mass", "display_name": "Massa", "unit": "kg", "type": "number", "order": 1, "attribute": "mass"},
    {"name": "radius", "display_name": "Raio", "unit": "km", "type": "number", "order": 2, "attribute": "radius"},
    {"name": "gravity", "display_name": "Gravidade", "unit": "m/s²", "type": "number", "order": 3, "attribute": "gravity"},
    {"name": "temperature", "display_name": "Temperatura", "unit": "°C", "type": "number", "order": 4,
     "attribute": "average_temperature"},
    {"name": "distance", "display_name": "Distância do Sol", "unit": "km", "type": "number", "order": 5,
     "attribute": "distance_from_sun"},
    {"name": "orbital_period", "display_name": "Período Orbital", "unit": "dias", "type": "number", "order": 6,
     "attribute": "orbital_period"},
    {"name": "rotation_period", "display_name": "Período de Rotação", "unit": "horas", "type": "number", "order": 7,
     "attribute": "rotation_period"},
    {"name": "moons_count", "display_name": "Número de Luas", "unit": "", "type": "number", "order": 8,
     "attribute": "moons_count"},
]

MASS_STEPS = [
    (1e24, "10²⁴"),
    (1e21, "10²¹"),
    (1e18, "10¹⁸"),
    (1e15, "10¹⁵"),
    (1e12, "10¹²"),
    (1e9, "10⁹"),
    (1e6, "10⁶"),
    (1e3, "10³"),
]


def get_comparison_field(name):
    return next((field for field in COMPARISON_FIELDS if field["name"] == name), None)

def comparison_value(planet, field_name):
    """Raw value of a comparison field for a planet; "" for unknown fields."""
    field = get_comparison_field(field_name)
    if field is None:
        return ""
    if isinstance(planet, dict):
        return planet.get(field["attribute"], "")
    return getattr(planet, field["attribute"], "")

def _number(value):
    return isinstance(value, (int, float)) and not isinstance(value, bool)

def _trim(value):
    """Drop a trailing .0 so 24.0 reads as 24."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value

def format_comparison_value(value, field_name):
    if value is None or value == "":
        return "N/A"

    if field_name == "mass":
        if _number(value):
            for factor, label in MASS_STEPS:
                if value >= factor:
                    return f"{value / factor:.2f} × {label} kg"
            return f"{value:.2f} kg"
        return f"{value} kg"

    if field_name == "radius":
        if _number(value):
            return f"{_trim(value):,} km"
        return f"{value} km"

    if field_name == "gravity":
        return f"{_trim(value)} m/s²"

    if field_name == "temperature":
        return f"{_trim(value)}°C"

    if field_name == "distance":
        if _number(value):
            if value >= 1e9:
                return f"{value / 1e9:.1f} bilhões km"
            if value >= 1e6:
                return f"{value / 1e6:.1f} milhões km"
            return f"{_trim(value):,} km"
        return f"{value} km"

    if field_name == "orbital_period":
        return f"{_trim(value)} dias"

    if field_name == "rotation_period":
        if _number(value):
            sign = " (retrógrada)" if value < 0 else ""
            return f"{_trim(abs(value))} horas{sign}"
        return f"{value} horas"

    if field_name == "moons_count":
        if _number(value):
            return "1 lua" if value == 1 else f"{value} luas"
        return f"{value} luas"

    return str(value)

def relative_to_earth(gravity):
    if gravity > EARTH_GRAVITY:
        return "heavier"
    if gravity < EARTH_GRAVITY:
        return "lighter"
    return "equal"

def weight_on_planet(weight_on_earth, planet_gravity):
    """Weight shown on a planet for a given weight on Earth."""
    if weight_on_earth == 0:
        return 0
    return weight_on_earth * planet_gravity / EARTH_GRAVITY

def weights_across_planets(weight_on_earth, planets, max_weight=None):
    if not _number(weight_on_earth) or not math.isfinite(weight_on_earth) or weight_on_earth <= 0:
        raise ValueError("Weight must be a positive number.")
    if max_weight is not None and weight_on_earth > max_weight:
        raise ValueError(f"Weight must be at most {max_weight} kg.")

    results = []
    for planet in planets:
        gravity = planet["gravity"] if isinstance(planet, dict) else planet.gravity
        name = planet["name"] if isinstance(planet, dict) else planet.name
        display = planet.get("portuguese_name") if isinstance(planet, dict) else planet.portuguese_name
        results.append({
            "planet": name,
            "portuguese_name": display,
            "gravity": gravity,
            "weight": round(weight_on_planet(weight_on_earth, gravity), 2),
            "compared_to_earth": relative_to_earth(gravity),
        })
    return results

def compare_planets(planets):
    """
    Build the comparison table for a set of planets.

    One row per comparison field with a raw and formatted value per planet,
    plus which planet holds the largest and smallest value.
    """
    rows = []
    for field in sorted(COMPARISON_FIELDS, key=lambda f: f["order"]):
        values = []
        for planet in planets:
            raw = comparison_value(planet, field["name"])
            name = planet["name"] if isinstance(planet, dict) else planet.name
            values.append({
                "planet": name,
                "value": raw,
                "formatted": format_comparison_value(raw, field["name"]),
            })

        numeric = [v for v in values if _number(v["value"])]
        rows.append({
            "field": field["name"],
            "display_name": field["display_name"],
            "unit": field["unit"],
            "values": values,
            "largest": max(numeric, key=lambda v: v["value"])["planet"] if numeric else None,
            "smallest": min(numeric, key=lambda v: v["value"])["planet"] if numeric else None,
        })
    return rows

def public_fields():
    return [
        {key: value for key, value in field.items() if key != "attribute"}
        for field in sorted(COMPARISON_FIELDS, key=lambda f: f["order"])
    ]

def fall_time(gravity, height):
    """Seconds for an object dropped from rest at ``height`` metres to land: sqrt(2h/g)."""
    if gravity <= 0:
        raise ValueError("Gravity must be positive.")
    return math.sqrt(2 * height / gravity)

def impact_velocity(gravity, height):
    """Landing speed in m/s of an object dropped from ``height`` metres: sqrt(2gh)."""
    return math.sqrt(2 * gravity * height)

def gravity_drop(planets, height=DEFAULT_DROP_HEIGHT, max_height=None):
    """Fall time and impact velocity of the same drop on each planet."""
    if not _number(height) or not math.isfinite(height) or height <= 0:
        raise ValueError("Height must be a positive number.")
    if max_height is not None and height > max_height:
        raise ValueError(f"Height must be at most {max_height} m.")

    results = []
    for planet in planets:
        gravity = planet["gravity"] if isinstance(planet, dict) else planet.gravity
        results.append({
            "planet": planet["name"] if isinstance(planet, dict) else planet.name,
            "portuguese_name": planet.get("portuguese_name") if isinstance(planet, dict) else planet.portuguese_name,
            "gravity": gravity,
            "fall_time": round(fall_time(gravity, height), 2),
            "impact_velocity": round(impact_velocity(gravity, height), 2),
            "compared_to_earth": relative_to_earth(gravity),
        })
    return results
