def format_datetime(datetime_obj):
    """Format datetime to a readable string."""
    if not datetime_obj:
        return None
    return datetime_obj.strftime('%Y-%m-%d %H:%M:%S')

def format_mass(mass):
    if mass >= 1e24:
        return f"{mass / 1e24:.2f} × 10²⁴ kg"
    return f"{mass:.2e} kg"

def format_distance(distance):
    if distance >= 1e9:
        return f"{distance / 1e9:.2f} bilhões km"
    if distance >= 1e6:
        return f"{distance / 1e6:.2f} milhões km"
    # pt-BR groups thousands with dots
    return f"{distance:,.0f} km".replace(",", ".")

def format_temperature(temp):
    if isinstance(temp, float) and temp.is_integer():
        temp = int(temp)
    return f"{temp}°C"

def format_period(days):
    if days >= 365:
        return f"{days / 365:.1f} anos terrestres"
    return f"{days:.1f} dias terrestres"

def planet_display(planet):
    """Formatted copy of the headline planet figures."""
    return {
        "mass": format_mass(planet.mass),
        "distance_from_sun": format_distance(planet.distance_from_sun),
        "average_temperature": format_temperature(planet.average_temperature)
        if planet.average_temperature is not None else None,
        "orbital_period": format_period(planet.orbital_period) if planet.orbital_period is not None else None,
    }
