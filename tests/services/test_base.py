"""Tests for BaseService and service inheritance."""

from cashdrawer.config.models import DrawerConfig
from cashdrawer.domain.drawer import CashDrawer
from cashdrawer.services.base import BaseService
from cashdrawer.services.drawer import DrawerService


class TestBaseService:
    def test_drawer_stored(self, drawer: CashDrawer) -> None:
        service = BaseService(drawer)
        assert service._drawer is drawer

    def test_default_config(self, drawer: CashDrawer) -> None:
        assert BaseService(drawer)._config == DrawerConfig()

    def test_subclass_pattern(self, drawer: CashDrawer) -> None:
        """Verify the intended subclass usage pattern works."""

        class AuditService(BaseService):
            def audit(self) -> str:
                return f"{self._drawer.total()} {self._config.currency_label}"

        assert AuditService(drawer).audit() == "1022.00 Euro"


class TestServiceInheritance:
    def test_drawer_service_inherits(self) -> None:
        assert issubclass(DrawerService, BaseService)

    def test_config_injection(self, drawer: CashDrawer) -> None:
        config = DrawerConfig(currency_symbol="EUR")
        svc = DrawerService(drawer, config)
        assert svc._config is config
