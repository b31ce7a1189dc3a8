from dishka import Provider as _DishkaProvider

from amcore.util.di.scope import Scope


class Provider(_DishkaProvider):
    """Base for amcore DI providers. Factories default to the UOW scope."""

    scope = Scope.UOW
