from models import db


class Moon(db.Model):
    __tablename__ = "moons"

    id = db.Column(db.Integer, primary_key=True)
    planet_id = db.Column(db.Integer, db.ForeignKey("planets.id"), nullable=False)
    name = db.Column(db.String(50), nullable=False)
    description = db.Column(db.Text, nullable=True)
    mass = db.Column(db.Float, nullable=True)
    radius = db.Column(db.Float, nullable=True)
    distance_from_planet = db.Column(db.Float, nullable=True)  # km
    orbital_period = db.Column(db.Float, nullable=True)  # days, negative is retrograde
    image_url = db.Column(db.String(255), nullable=True)
    order = db.Column(db.Integer, nullable=False, default=0)
    is_active = db.Column(db.Boolean, nullable=False, default=True)

    planet = db.relationship("Planet", back_populates="moons")

    __table_args__ = (db.UniqueConstraint("planet_id", "name", name="uq_moon_planet_name"),)

    @property
    def is_retrograde(self):
        return self.orbital_period is not None and self.orbital_period < 0

    def to_dict(self):
        return {
            "id": self.id,
            "planet_id": self.planet_id,
            "planet": self.planet.name if self.planet else None,
            "name": self.name,
            "description": self.description,
            "mass": self.mass,
            "radius": self.radius,
            "distance_from_planet": self.distance_from_planet,
            "orbital_period": self.orbital_period,
            "is_retrograde": self.is_retrograde,
            "image_url": self.image_url,
            "order": self.order,
        }
