from dataclasses import dataclass
from urllib.parse import urljoin

from schatkamer import settings


@dataclass
class SiteContext:
    # Identyfikacja środowiska
    base_url: str
    environment_name: str

    # Profil viewportu: desktop / tablet / mobile / reflow
    viewport_name: str = 'desktop'

    @property
    def viewport(self) -> dict[str, int]:
        return settings.VIEWPORTS[self.viewport_name]

    @property
    def is_mobile(self) -> bool:
        return self.viewport_name in ('mobile', 'reflow')

    def url(self, path: str = '') -> str:
        """Pełny URL dla ścieżki względnej ('omroep/236909/avrotros', '/zoeken?...')."""
        return urljoin(self.base_url, path.lstrip('/'))

    @classmethod
    def from_settings(cls, viewport_name: str | None = None) -> "SiteContext":
        return cls(
            base_url=settings.BASE_URL,
            environment_name=settings.ENV_NAME,
            viewport_name=viewport_name or settings.VIEWPORT,
        )
