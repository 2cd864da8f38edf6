from __future__ import annotations

from webspaces.models.localization import Localization
from webspaces.models.portal_information import PortalInformation
from webspaces.schemas.common import BaseSchema


class LocalizationOut(BaseSchema):
    language: str
    country: str | None = None
    locale: str

    @classmethod
    def from_localization(cls, localization: Localization) -> 'LocalizationOut':
        return cls(language=localization.language, country=localization.country, locale=localization.locale())


class PortalInformationOut(BaseSchema):
    type: str
    webspace: str
    portal: str
    localization: LocalizationOut | None = None
    url: str
    url_template: str
    redirect: str | None = None
    main: bool = False
    priority: int

    @classmethod
    def from_match(cls, info: PortalInformation) -> 'PortalInformationOut':
        localization = getattr(info, 'localization', None)
        return cls(
            type=info.match_type,
            webspace=info.webspace_key,
            portal=info.portal_key,
            localization=LocalizationOut.from_localization(localization) if localization else None,
            url=info.url,
            url_template=info.url_template,
            redirect=getattr(info, 'redirect', None),
            main=getattr(info, 'main', False),
            priority=info.priority,
        )
