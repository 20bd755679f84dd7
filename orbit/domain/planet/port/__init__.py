from orbit.domain.planet.port.repository import PlanetRepository

__all__ = ["PlanetRepository"]
