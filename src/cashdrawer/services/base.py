"""BaseService — foundation for services that operate on one drawer."""

from __future__ import annotations

from typing import TYPE_CHECKING

from cashdrawer.config.models import DrawerConfig

if TYPE_CHECKING:
    from cashdrawer.domain.drawer import CashDrawer


class BaseService:
    """Base for service-layer classes.

    Every service receives the :class:`CashDrawer` it works on and the
    ``[drawer]`` config section used for labels and symbols.

    Usage::

        class AuditService(BaseService):
            def audit(self) -> ServiceResult:
                total = self._drawer.total()
                ...
    """

    def __init__(self, drawer: CashDrawer, config: DrawerConfig | None = None) -> None:
        self._drawer = drawer
        self._config = config or DrawerConfig()
