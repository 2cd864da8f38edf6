from __future__ import annotations

from pydantic import Field, field_validator, model_validator

from webspaces.schemas.common import ConfigSchema


class LocalizationConfig(ConfigSchema):
    language: str = Field(min_length=1)
    country: str | None = None
    default: bool = False

    @field_validator('country')
    @classmethod
    def empty_country_is_none(cls, value: str | None) -> str | None:
        return value or None


class UrlConfig(ConfigSchema):
    url: str = Field(min_length=1)
    language: str | None = None
    country: str | None = None
    segment: str | None = None
    redirect: str | None = None
    main: bool = False

    @model_validator(mode='after')
    def validate_country_requires_language(self) -> 'UrlConfig':
        if self.country and not self.language:
            raise ValueError(f'url {self.url!r} sets a country without a language')
        return self


class CustomUrlConfig(ConfigSchema):
    url: str = Field(min_length=1)


class EnvironmentConfig(ConfigSchema):
    type: str = Field(min_length=1)
    urls: list[UrlConfig] = Field(default_factory=list)
    custom_urls: list[CustomUrlConfig] = Field(default_factory=list, alias='custom-urls')


class PortalConfig(ConfigSchema):
    key: str = Field(min_length=1)
    name: str
    localizations: list[LocalizationConfig] = Field(default_factory=list)
    environments: list[EnvironmentConfig] = Field(default_factory=list)

    @field_validator('environments')
    @classmethod
    def validate_unique_environments(cls, value: list[EnvironmentConfig]) -> list[EnvironmentConfig]:
        seen: set[str] = set()
        for environment in value:
            if environment.type in seen:
                raise ValueError(f'environment {environment.type!r} is declared twice')
            seen.add(environment.type)
        return value


class WebspaceConfig(ConfigSchema):
    key: str = Field(min_length=1)
    name: str
    localizations: list[LocalizationConfig] = Field(default_factory=list)
    segments: list[str] = Field(default_factory=list)
    default_templates: dict[str, str] = Field(default_factory=dict, alias='default-templates')
    excluded_templates: list[str] = Field(default_factory=list, alias='excluded-templates')
    portals: list[PortalConfig] = Field(default_factory=list)
