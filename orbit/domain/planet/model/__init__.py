"""Planet domain model."""

from orbit.domain.planet.model.aggregate import Planet
from orbit.domain.planet.model.value import NewPlanet, PlanetFilter, PlanetPage

__all__ = ["NewPlanet", "Planet", "PlanetFilter", "PlanetPage"]
