from .base import RunContext, Service
from .bonus import ClaimRewardsService, DepartService
from .fuel import FuelService
from .hubs import HubsService
from .maintenance import MaintenanceService
from .marketing import MarketingService
from .stats import AllianceStatsService, CompanyStatsService, StaffMoraleService

SERVICES = {
    cls.name: cls
    for cls in (
        CompanyStatsService,
        AllianceStatsService,
        StaffMoraleService,
        HubsService,
        ClaimRewardsService,
        FuelService,
        MarketingService,
        MaintenanceService,
        DepartService,
    )
}

__all__ = ["RunContext", "Service", "SERVICES"]
