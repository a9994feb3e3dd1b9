"""
Orbital display math for the 3D Solar System scene.

Every body moves on a circle around its parent: the position is
``(cos(angle), 0, sin(angle)) * radius`` and the angle grows at a constant
per-body speed scaled by a global speed multiplier, wrapping at 2π. Radii and scales are
display units picked to keep the scene readable, not astronomical ones.
"""
import math

RING_SEGMENTS = 64

MOON_DISTANCE = 3
MOON_SPEED = 2
MOON_SCALE = 0.15

SUN_RADIUS = 2
SUN_SPIN = 0.5
PLANET_SPIN = 3

MIN_SPEED = 0.1
MAX_SPEED = 5

# seconds; angles are kept in [0, 2π) so longer runs add nothing
MAX_ELAPSED = 1e9

CAMERA_HOME = (0, 80, 0)
CAMERA_TARGET = (0, 0, 0)
CAMERA_MIN_DISTANCE = 3
CAMERA_MAX_DISTANCE = 200


def orbital_radius(distance_km):
    """Display radius for a body at ``distance_km`` from the Sun."""
    if distance_km <= 0:
        raise ValueError("Distance from the Sun must be positive.")
    return math.log(distance_km / 1_000_000) * 3 + 8

def planet_scale(radius_km):
    """Sphere scale for a planet of ``radius_km``, clamped to 0.3-2."""
    if radius_km <= 0:
        raise ValueError("Radius must be positive.")
    return max(0.3, min(2, math.log(radius_km / 1000) * 0.4 + 0.8))

def angular_speed(index):
    """Angular speed of the planet at ``index`` in display order."""
    return 0.3 / (index + 1)

def orbit_position(angle, radius, center=(0, 0, 0)):
    cx, cy, cz = center
    return (cx + math.cos(angle) * radius, cy, cz + math.sin(angle) * radius)

def orbit_ring(radius, segments=RING_SEGMENTS):
    """Points of a closed orbit ring, first and last points coincide."""
    return [
        orbit_position(i / segments * math.pi * 2, radius)
        for i in range(segments + 1)
    ]


class AnimationState:
    """Global pause flag and speed multiplier shared by the whole scene."""

    def __init__(self, speed=1.0, paused=False):
        self.paused = paused
        self.speed = 1.0
        self.set_speed(speed)

    def set_speed(self, speed):
        self.speed = max(MIN_SPEED, min(MAX_SPEED, float(speed)))
        return self.speed

    def toggle_pause(self):
        self.paused = not self.paused
        return self.paused

    def reset(self):
        self.paused = False
        self.speed = 1.0

    def to_dict(self):
        return {"paused": self.paused, "speed": self.speed}


class OrbitingBody:
    def __init__(self, name, radius, speed, scale, parent=None, angle=0.0, color=None, spin=PLANET_SPIN):
        self.name = name
        self.radius = radius
        self.speed = speed
        self.scale = scale
        self.parent = parent
        self.angle = angle
        self.rotation = 0.0
        self.color = color
        self.spin = spin

    @property
    def center(self):
        return self.parent.position if self.parent else (0, 0, 0)

    @property
    def position(self):
        return orbit_position(self.angle, self.radius, self.center)

    def advance(self, delta, multiplier):
        effective = self.speed * multiplier
        self.angle = (self.angle + delta * effective) % math.tau
        self.rotation = (self.rotation + delta * effective * self.spin) % math.tau

    def to_dict(self):
        x, y, z = self.position
        return {
            "name": self.name,
            "parent": self.parent.name if self.parent else "sun",
            "orbital_radius": round(self.radius, 4),
            "scale": round(self.scale, 4),
            "angular_speed": round(self.speed, 4),
            "angle": round(self.angle, 6),
            "rotation": round(self.rotation, 6),
            "position": {"x": round(x, 4), "y": round(y, 4), "z": round(z, 4)},
            "color": self.color,
        }


class SolarSystemScene:
    """
    Planets in display order plus the Moon orbiting Earth.

    ``planets`` are objects or dicts with ``name``, ``distance_from_sun``,
    ``radius`` and optionally ``color``.
    """

    def __init__(self, planets, animation=None):
        self.animation = animation or AnimationState()
        self.sun_rotation = 0.0
        self.selected = None
        self.bodies = []

        for index, planet in enumerate(planets):
            name = _field(planet, "name")
            self.bodies.append(OrbitingBody(
                name=name,
                radius=orbital_radius(_field(planet, "distance_from_sun")),
                speed=angular_speed(index),
                scale=planet_scale(_field(planet, "radius")),
                color=_field(planet, "color"),
            ))

        earth = self.get("earth")
        if earth is not None:
            # the moon only spins at the global speed
            self.bodies.append(OrbitingBody(
                name="moon",
                radius=MOON_DISTANCE,
                speed=MOON_SPEED,
                scale=MOON_SCALE,
                parent=earth,
                color="#C0C0C0",
                spin=1 / MOON_SPEED,
            ))

    def get(self, name):
        name = name.lower()
        return next((body for body in self.bodies if body.name == name), None)

    def advance(self, delta):
        if self.animation.paused or delta <= 0:
            return
        multiplier = self.animation.speed
        for body in self.bodies:
            body.advance(delta, multiplier)
        self.sun_rotation = (self.sun_rotation + delta * multiplier * SUN_SPIN) % math.tau

    def select(self, name):
        body = self.get(name)
        if body is None:
            raise LookupError(f"Unknown body: {name}")
        self.selected = body.name
        return body

    def clear_selection(self):
        self.selected = None

    def snapshot(self, include_rings=False):
        bodies = []
        for body in self.bodies:
            data = body.to_dict()
            data["selected"] = body.name == self.selected
            if include_rings and body.parent is None:
                data["ring"] = [list(point) for point in orbit_ring(body.radius)]
            bodies.append(data)

        return {
            "animation": self.animation.to_dict(),
            "sun": {"radius": SUN_RADIUS, "rotation": round(self.sun_rotation, 6)},
            "bodies": bodies,
            "selected": self.selected,
            "camera": {
                "position": list(CAMERA_HOME),
                "target": list(CAMERA_TARGET),
                "min_distance": CAMERA_MIN_DISTANCE,
                "max_distance": CAMERA_MAX_DISTANCE,
            },
        }


def _field(planet, name):
    if isinstance(planet, dict):
        return planet.get(name)
    return getattr(planet, name, None)
