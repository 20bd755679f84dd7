from orbit.domain.planet.service.planet import PlanetService

__all__ = ["PlanetService"]
