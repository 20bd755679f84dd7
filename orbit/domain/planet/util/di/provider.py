from dishka import provide

from orbit.domain.planet.service.planet import PlanetService
from orbit.util.di.base import Provider
from orbit.util.di.scope import Scope


class PlanetProvider(Provider):
    service = provide(PlanetService, scope=Scope.UOW)
