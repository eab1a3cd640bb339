import re

from playwright.async_api import Locator

from schatkamer.pages.results_page import ResultsPage


def omroep_path(entity_id: int, slug: str) -> str:
    return f"omroep/{entity_id}/{slug}"


def persoon_path(entity_id: int, slug: str) -> str:
    return f"persoon/{entity_id}/{slug}"


def serie_path(entity_id: int, slug: str, episode_id: int | None = None, episode_slug: str | None = None) -> str:
    path = f"serie/{entity_id}/{slug}"
    if episode_id is not None:
        path += f"/aflevering/{episode_id}"
        if episode_slug:
            path += f"/{episode_slug}"
    return path


def verhaal_path(slug: str) -> str:
    return f"verhaal/{slug}"


# Znane encje na środowisku TST
AVROTROS          = omroep_path(236909, 'avrotros')
NTR               = omroep_path(223534, 'ntr')
MIES_BOUWMAN      = persoon_path(85227, 'mies-bouwman')
J_DUIN            = persoon_path(95029, 'j-duin')
SESAMSTRAAT       = serie_path(2101608030021453631, 'sesamstraat')
SESAMSTRAAT_EPISODE = serie_path(2101608030021453631, 'sesamstraat', 2101608040031067331, 'sesamstraat')
KLOKHUIS_EPISODE  = serie_path(2101608030021467131, 'het-klokhuis', 2101608040030110531)
KLOKHUIS_EPISODE_GEEN_TITEL = serie_path(2101608030021467131, 'het-klokhuis', 2101608040030110531, 'geen-titel')
FRANKS_VERHAAL    = verhaal_path('franks-componentenverhaal')


# ── EntityPage — omroep / persoon / serie / aflevering / verhaal ─────────────

class EntityPage(ResultsPage):
    URL_PATTERNS = {
        'omroep':  re.compile(r'/omroep/'),
        'persoon': re.compile(r'/persoon/'),
        'serie':   re.compile(r'/serie/'),
        'verhaal': re.compile(r'/verhaal/'),
    }

    BREADCRUMB     = ('role', 'navigation', {'name': 'breadcrumb'})
    DATE_LONG      = ('locator', r'text=/\d{1,2} \w+ \d{4}/')
    DATE_ANY       = ('locator', r'text=/\d{1,2}-\d{1,2}-\d{4}|\d{4}/')
    PARAGRAPH      = ('locator', 'p')
    MEDIA          = ('locator', 'video, iframe[src*="player"]')

    @property
    def breadcrumb(self) -> Locator:
        return self.loc(self.BREADCRUMB)

    @property
    def breadcrumb_home(self) -> Locator:
        return self.breadcrumb.get_by_role('link', name='Home')

    @property
    def first_paragraph(self) -> Locator:
        return self.loc(self.PARAGRAPH).first

    @property
    def long_date(self) -> Locator:
        return self.loc(self.DATE_LONG).first

    @property
    def any_date(self) -> Locator:
        return self.loc(self.DATE_ANY).first

    @property
    def media_player(self) -> Locator:
        return self.loc(self.MEDIA).first

    def section_heading(self, name: str | re.Pattern, level: int = 2) -> Locator:
        return self.page.get_by_role('heading', name=name, level=level)

    async def has_media_player(self) -> bool:
        return await self.loc(self.MEDIA).count() > 0
