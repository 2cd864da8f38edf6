from webspaces.schemas.portal_information import LocalizationOut, PortalInformationOut
from webspaces.schemas.webspace import (
    CustomUrlConfig,
    EnvironmentConfig,
    LocalizationConfig,
    PortalConfig,
    UrlConfig,
    WebspaceConfig,
)

__all__ = [
    'CustomUrlConfig',
    'EnvironmentConfig',
    'LocalizationConfig',
    'LocalizationOut',
    'PortalConfig',
    'PortalInformationOut',
    'UrlConfig',
    'WebspaceConfig',
]
