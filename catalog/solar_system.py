"""Hard-coded reference data for the planets and their principal moons.

Used by the ``seed`` command to fill the ``planets`` and ``moons`` tables.
Distances are in km, masses in kg, periods in days (orbital) and hours
(rotation). Negative periods mean retrograde motion.
"""

PLANETS = [
    {
        "name": "mercury",
        "portuguese_name": "Mercúrio",
        "radius": 2439.7,
        "mass": 3.3011e23,
        "gravity": 3.7,
        "average_temperature": 167,
        "distance_from_sun": 57910000,
        "orbital_period": 88,
        "rotation_period": 1407.6,
        "description": "O menor planeta do Sistema Solar e o mais próximo do Sol. Não possui atmosfera e tem temperaturas extremas.",
        "curiosities": [
            "Não possui atmosfera",
            "Temperaturas extremas entre -173°C e 427°C",
            "Um dia em Mercúrio dura 176 dias terrestres",
            "É o planeta mais rápido do Sistema Solar",
        ],
        "image_url": "/mercury-texture.png",
        "color": "#8C7853",
        "moons_count": 0,
    },
    {
        "name": "venus",
        "portuguese_name": "Vênus",
        "radius": 6051.8,
        "mass": 4.8675e24,
        "gravity": 8.87,
        "average_temperature": 464,
        "distance_from_sun": 108200000,
        "orbital_period": 225,
        "rotation_period": -5832.5,
        "description": "O planeta mais quente do Sistema Solar devido ao efeito estufa. Tem uma atmosfera extremamente densa.",
        "curiosities": [
            "Rotação retrógrada (gira no sentido contrário)",
            "Atmosfera densa de CO2",
            "Pressão atmosférica 92 vezes maior que a Terra",
            "É o planeta mais brilhante no céu noturno",
        ],
        "image_url": "/venus-texture.png",
        "color": "#FFC649",
        "moons_count": 0,
    },
    {
        "name": "earth",
        "portuguese_name": "Terra",
        "radius": 6371,
        "mass": 5.9724e24,
        "gravity": 9.81,
        "average_temperature": 15,
        "distance_from_sun": 149600000,
        "orbital_period": 365.25,
        "rotation_period": 24,
        "description": "Nosso planeta natal, o único conhecido com vida. Tem uma atmosfera rica em oxigênio e água líquida.",
        "curiosities": [
            "71% da superfície é coberta por água",
            "Possui campo magnético protetor",
            "Único planeta conhecido com vida",
            "Tem uma lua que estabiliza seu eixo",
        ],
        "image_url": "/earth-planet-texture-blue-green.jpg",
        "color": "#6B93D6",
        "moons_count": 1,
    },
    {
        "name": "mars",
        "portuguese_name": "Marte",
        "radius": 3389.5,
        "mass": 6.4171e23,
        "gravity": 3.71,
        "average_temperature": -65,
        "distance_from_sun": 227900000,
        "orbital_period": 687,
        "rotation_period": 24.6,
        "description": "O Planeta Vermelho, conhecido por sua cor avermelhada devido ao óxido de ferro em sua superfície.",
        "curiosities": [
            "Possui as maiores montanhas do Sistema Solar",
            "Evidências de água no passado",
            "Tem duas luas: Fobos e Deimos",
            "Dia marciano é similar ao terrestre (24h 37min)",
        ],
        "image_url": "/mars-red-texture.png",
        "color": "#CD5C5C",
        "moons_count": 2,
    },
    {
        "name": "jupiter",
        "portuguese_name": "Júpiter",
        "radius": 69911,
        "mass": 1.8982e27,
        "gravity": 24.79,
        "average_temperature": -110,
        "distance_from_sun": 778500000,
        "orbital_period": 4333,
        "rotation_period": 9.9,
        "description": "O maior planeta do Sistema Solar, um gigante gasoso com uma Grande Mancha Vermelha.",
        "curiosities": [
            "Grande Mancha Vermelha (tempestade gigante)",
            "Mais de 95 luas conhecidas",
            "Massa maior que todos os outros planetas juntos",
            "Tem um sistema de anéis tênue",
        ],
        "image_url": "/jupiter-gas-giant-planet-texture-bands.jpg",
        "color": "#D8CA9D",
        "moons_count": 95,
    },
    {
        "name": "saturn",
        "portuguese_name": "Saturno",
        "radius": 58232,
        "mass": 5.6834e26,
        "gravity": 10.44,
        "average_temperature": -140,
        "distance_from_sun": 1432000000,
        "orbital_period": 10759,
        "rotation_period": 10.7,
        "description": "Conhecido por seus anéis espetaculares, é um gigante gasoso com baixa densidade.",
        "curiosities": [
            "Anéis espetaculares compostos de gelo e rocha",
            "Menor densidade que a água",
            "Mais de 146 luas conhecidas",
            "Titã é sua maior lua, maior que Mercúrio",
        ],
        "image_url": "/saturn-realistic.jpg",
        "color": "#FAD5A5",
        "moons_count": 146,
    },
    {
        "name": "uranus",
        "portuguese_name": "Urano",
        "radius": 25362,
        "mass": 8.6810e25,
        "gravity": 8.69,
        "average_temperature": -195,
        "distance_from_sun": 2867000000,
        "orbital_period": 30687,
        "rotation_period": -17.2,
        "description": "Um gigante de gelo que gira de lado, com uma atmosfera rica em metano.",
        "curiosities": [
            "Gira de lado (eixo inclinado 98°)",
            "Atmosfera rica em metano",
            "Tem 27 luas conhecidas",
            "É o planeta mais frio do Sistema Solar",
        ],
        "image_url": "/uranus-realistic.jpg",
        "color": "#4FD0E7",
        "moons_count": 27,
    },
    {
        "name": "neptune",
        "portuguese_name": "Netuno",
        "radius": 24622,
        "mass": 1.0243e26,
        "gravity": 11.15,
        "average_temperature": -200,
        "distance_from_sun": 4515000000,
        "orbital_period": 60190,
        "rotation_period": 16.1,
        "description": "O planeta mais distante do Sol, um gigante de gelo com ventos extremamente rápidos.",
        "curiosities": [
            "Ventos mais rápidos do Sistema Solar (até 2100 km/h)",
            "Tem 14 luas conhecidas",
            "Foi descoberto por cálculos matemáticos",
            "Tritão é sua maior lua com órbita retrógrada",
        ],
        "image_url": "/neptune-realistic.jpg",
        "color": "#4B70DD",
        "moons_count": 14,
    },
]

MOONS = [
    # Earth
    {"name": "Lua", "planet": "earth", "mass": 7.342e22, "radius": 1737.4, "distance_from_planet": 384400,
     "orbital_period": 27.3, "description": "O único satélite natural da Terra, responsável pelas marés."},
    # Mars
    {"name": "Fobos", "planet": "mars", "mass": 1.0659e16, "radius": 11.3, "distance_from_planet": 9376,
     "orbital_period": 0.32, "description": "A maior e mais próxima lua de Marte."},
    {"name": "Deimos", "planet": "mars", "mass": 1.4762e15, "radius": 6.2, "distance_from_planet": 23463,
     "orbital_period": 1.26, "description": "A menor e mais distante lua de Marte."},
    # Jupiter
    {"name": "Io", "planet": "jupiter", "mass": 8.9319e22, "radius": 1821.6, "distance_from_planet": 421700,
     "orbital_period": 1.77, "description": "A lua mais vulcanicamente ativa do Sistema Solar."},
    {"name": "Europa", "planet": "jupiter", "mass": 4.7998e22, "radius": 1560.8, "distance_from_planet": 671034,
     "orbital_period": 3.55, "description": "Uma lua gelada com um oceano subterrâneo que pode abrigar vida."},
    {"name": "Ganimedes", "planet": "jupiter", "mass": 1.4819e23, "radius": 2634.1, "distance_from_planet": 1070412,
     "orbital_period": 7.15, "description": "A maior lua do Sistema Solar, maior que Mercúrio."},
    {"name": "Calisto", "planet": "jupiter", "mass": 1.0759e23, "radius": 2410.3, "distance_from_planet": 1882709,
     "orbital_period": 16.69, "description": "A lua mais distante das quatro luas galileanas de Júpiter."},
    # Saturn
    {"name": "Titã", "planet": "saturn", "mass": 1.3452e23, "radius": 2574.7, "distance_from_planet": 1221830,
     "orbital_period": 15.95, "description": "A maior lua de Saturno, com uma atmosfera densa e lagos de metano."},
    {"name": "Encélado", "planet": "saturn", "mass": 1.0802e20, "radius": 252.1, "distance_from_planet": 238020,
     "orbital_period": 1.37, "description": "Uma lua gelada com gêiseres de água que podem indicar um oceano subterrâneo."},
    # Uranus
    {"name": "Miranda", "planet": "uranus", "mass": 6.59e19, "radius": 235.8, "distance_from_planet": 129390,
     "orbital_period": 1.41, "description": "A menor das cinco luas principais de Urano, com uma superfície muito variada."},
    {"name": "Ariel", "planet": "uranus", "mass": 1.35e21, "radius": 578.9, "distance_from_planet": 191020,
     "orbital_period": 2.52, "description": "Uma lua com vales e falhas extensas em sua superfície."},
    {"name": "Umbriel", "planet": "uranus", "mass": 1.17e21, "radius": 584.7, "distance_from_planet": 266000,
     "orbital_period": 4.14, "description": "Uma lua escura com poucas características superficiais visíveis."},
    {"name": "Titânia", "planet": "uranus", "mass": 3.4e21, "radius": 788.9, "distance_from_planet": 436300,
     "orbital_period": 8.71, "description": "A maior lua de Urano, com vales e falhas extensas."},
    {"name": "Oberon", "planet": "uranus", "mass": 3.1e21, "radius": 761.4, "distance_from_planet": 583500,
     "orbital_period": 13.46, "description": "A segunda maior lua de Urano, com uma superfície antiga e craterizada."},
    # Neptune
    {"name": "Tritão", "planet": "neptune", "mass": 2.14e22, "radius": 1353.4, "distance_from_planet": 354759,
     "orbital_period": -5.88, "description": "A maior lua de Netuno, com uma órbita retrógrada e gêiseres de nitrogênio."},
    {"name": "Nereida", "planet": "neptune", "mass": 3.1e19, "radius": 170, "distance_from_planet": 5513400,
     "orbital_period": 360.14, "description": "Uma lua com uma órbita muito excêntrica ao redor de Netuno."},
]


def get_planet_data(name):
    """Catalog entry for a planet name, or None."""
    name = name.lower()
    return next((planet for planet in PLANETS if planet["name"] == name), None)


def moons_of(planet_name):
    return [moon for moon in MOONS if moon["planet"] == planet_name.lower()]
