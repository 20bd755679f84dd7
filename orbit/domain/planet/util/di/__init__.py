from orbit.domain.planet.util.di.provider import PlanetProvider

__all__ = ["PlanetProvider"]
