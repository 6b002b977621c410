from typing import Annotated

from fastapi import Depends, Request

from reviewhub.config import Settings
from reviewhub.services.dashboard import DashboardService


def get_dashboard_service(request: Request) -> DashboardService:
    return request.app.state.dashboard_service


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


DashboardDep = Annotated[DashboardService, Depends(get_dashboard_service)]
SettingsDep = Annotated[Settings, Depends(get_settings)]
