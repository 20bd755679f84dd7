from dishka import Provider as DishkaProvider

from orbit.util.di.scope import Scope


class Provider(DishkaProvider):
    """Base for all Orbit DI providers.

    Defaults to the APP scope; factories that need a fresh instance per unit
    of work declare ``scope=Scope.UOW`` explicitly.
    """

    scope = Scope.APP
