"""Provider metadata shared by every dishka provider in the club API."""

from typing import ClassVar, Literal

from dishka import Provider

# Components with a test double; everything else is always the real thing
Component = Literal["persistence", "images", "mailer"]


class ProviderBase(Provider):
    """Dishka provider tagged for production/mock selection.

    A mockable component is declared as a ``ProviderBase`` subclass setting
    ``__mock_component__``; its production and mock implementations subclass
    that again and set ``__is_mock__``. ``__depends_on__`` names components
    that must be unmocked together with this one.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
    __depends_on__: ClassVar[frozenset[Component]] = frozenset()
