from __future__ import annotations

from pathlib import Path


class WebspaceError(Exception):
    pass


class InvalidTemplateError(WebspaceError):
    def __init__(self, webspace_key: str, template: str) -> None:
        self.webspace_key = webspace_key
        self.template = template
        super().__init__(
            f'Default template "{template}" of webspace "{webspace_key}" is not available or is excluded'
        )


class InvalidWebspaceConfigError(WebspaceError):
    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f'Invalid webspace configuration in {self.path.name}: {reason}')


class EnvironmentNotFoundError(WebspaceError):
    def __init__(self, environment: str) -> None:
        self.environment = environment
        super().__init__(f'Environment "{environment}" is not configured in any portal')

