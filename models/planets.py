from datetime import datetime
from models import db


class Planet(db.Model):
    __tablename__ = "planets"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(50), nullable=False, unique=True)
    portuguese_name = db.Column(db.String(50), nullable=False)
    radius = db.Column(db.Float, nullable=False)  # km
    mass = db.Column(db.Float, nullable=False)  # kg
    gravity = db.Column(db.Float, nullable=False)  # m/s²
    average_temperature = db.Column(db.Float, nullable=True)  # °C
    distance_from_sun = db.Column(db.Float, nullable=False)  # km
    orbital_period = db.Column(db.Float, nullable=True)  # days
    rotation_period = db.Column(db.Float, nullable=True)  # hours, negative is retrograde
    description = db.Column(db.Text, nullable=True)
    curiosities = db.Column(db.JSON, nullable=True)
    image_url = db.Column(db.String(255), nullable=True)
    color = db.Column(db.String(20), nullable=True)
    moons_count = db.Column(db.Integer, nullable=False, default=0)
    order = db.Column(db.Integer, nullable=False, default=0)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    moons = db.relationship(
        "Moon", back_populates="planet", cascade="all, delete-orphan", order_by="Moon.order"
    )

    @classmethod
    def lookup(cls, identifier):
        """Find a planet by numeric id or by case-insensitive name."""
        identifier = str(identifier).strip()
        if identifier.isdecimal():
            planet = db.session.get(cls, int(identifier))
            if planet:
                return planet
        return cls.query.filter(db.func.lower(cls.name) == identifier.lower()).first()

    def __repr__(self):
        return f"<Planet {self.name}>"

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "portuguese_name": self.portuguese_name,
            "radius": self.radius,
            "mass": self.mass,
            "gravity": self.gravity,
            "average_temperature": self.average_temperature,
            "distance_from_sun": self.distance_from_sun,
            "orbital_period": self.orbital_period,
            "rotation_period": self.rotation_period,
            "description": self.description,
            "curiosities": self.curiosities or [],
            "image_url": self.image_url,
            "color": self.color,
            "moons_count": self.moons_count,
            "order": self.order,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }
