import re

from playwright.async_api import Locator

from schatkamer.pages.base_page import BasePage
from schatkamer.pages.results_page import ResultsPage
from schatkamer.run_data import FlyoutData

# Flyout renderuje się asynchronicznie po wpisaniu znaku
FLYOUT_TIMEOUT = 2000


# ── SearchFlyout — podpowiedzi pod polem wyszukiwania ─────────────────────────

class SearchFlyout(BasePage):
    SEARCH_BOX     = ('role', 'textbox', {'name': re.compile(r'Zoek')})
    BTN_SEARCH     = ('role', 'button', {'name': 'Zoeken'})
    SECTION_MEDIA    = ('text', 'Media')
    SECTION_PERSONEN = ('text', 'Personen')
    LINK_ADVANCED  = ('role', 'link', {'name': re.compile(r'Zoeken op')})
    MEDIA_ITEMS    = ('role', 'link', {'name': re.compile(r'\((Serie|Programma)\)$')})
    OMROEP_ITEMS   = ('role', 'link', {'name': re.compile(r'\bOmroep$')})
    PERSONEN_ITEMS = ('role', 'link', {'name': re.compile(r'\(Persoon\)$')})

    ANY_RESULT = re.compile(r'Omroep|Serie|Programma|Persoon')

    @property
    def search_box(self) -> Locator:
        return self.loc(self.SEARCH_BOX)

    @property
    def media_section(self) -> Locator:
        return self.loc(self.SECTION_MEDIA).first

    @property
    def media_items(self) -> Locator:
        return self.loc(self.MEDIA_ITEMS)

    @property
    def omroep_items(self) -> Locator:
        return self.loc(self.OMROEP_ITEMS)

    def omroep_link(self, name: str) -> Locator:
        return self.page.get_by_role('link', name=f'{name} Omroep')

    @property
    def first_result(self) -> Locator:
        return self.page.get_by_role('link').filter(has_text=self.ANY_RESULT).first

    # ── Akcje ─────────────────────────────────────────────────────────────────

    async def type(self, query: str):
        self.log(f"Wpisuję: {query!r}")
        await self.search_box.fill(query)

    async def collect(self, timeout: float = FLYOUT_TIMEOUT) -> FlyoutData:
        """Zbiera stan flyoutu — oceniany przez FlyoutRules."""
        media_visible = await self.is_visible(self.SECTION_MEDIA, timeout=timeout)
        personen_visible = await self.is_visible(self.SECTION_PERSONEN, timeout=timeout)
        advanced_visible = await self.is_visible(self.LINK_ADVANCED, timeout=timeout)

        data = FlyoutData(
            media_visible=media_visible,
            personen_visible=personen_visible,
            advanced_link_visible=advanced_visible,
            media_count=await self.count(self.MEDIA_ITEMS) if media_visible else 0,
            omroep_count=await self.count(self.OMROEP_ITEMS),
            personen_count=await self.count(self.PERSONEN_ITEMS) if personen_visible else 0,
        )
        self.log(
            f"Flyout: media={data.media_count} omroep={data.omroep_count} "
            f"personen={data.personen_count}"
        )
        return data

    async def submit_with_enter(self, query: str) -> "SearchResultsPage":
        await self.type(query)
        await self.search_box.press('Enter')
        return await self._results()

    async def submit_with_button(self, query: str) -> "SearchResultsPage":
        await self.type(query)
        await self.loc(self.BTN_SEARCH).click()
        return await self._results()

    async def _results(self) -> "SearchResultsPage":
        await self.page.wait_for_url(SearchResultsPage.URL_PATTERN)
        await self.wait_for_load()
        return SearchResultsPage(self.page, self.context)


# ── SearchResultsPage — /zoeken?... ───────────────────────────────────────────

class SearchResultsPage(ResultsPage):
    URL_PATTERN = re.compile(r'/zoeken\?')
