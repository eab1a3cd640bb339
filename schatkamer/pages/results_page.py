import re

from playwright.async_api import Locator

from schatkamer.pages.base_page import BasePage
from schatkamer.run_data import PaginationData


# ── ResultsPage — lista wyników z filtrami (zoeken, omroep, persoon, serie) ──

class ResultsPage(BasePage):
    """
    Wspólne elementy list wyników: przełącznik "Alleen afspeelbaar",
    sortowanie, licznik wyników, filtry i paginacja.

    Stan przełącznika i strona są w query stringu: afspeelbaar=ja|nee, pagina=N.
    """
    H1              = ('role', 'heading', {'level': 1})
    PLAYABLE_SWITCH = ('role', 'switch')
    SORT            = ('role', 'button', {'name': re.compile(r'Oudste eerst|Nieuwste eerst|Relevantie')})
    RESULTS_LABEL   = ('text', re.compile(r'resultaten'))
    PAGINATION      = ('role', 'navigation', {'name': re.compile(r'Paginering|Pagination', re.IGNORECASE)})
    MAIN            = ('role', 'main')
    BTN_MORE_FILTERS = ('role', 'button', {'name': 'Toon meer filters'})
    BTN_LESS_FILTERS = ('role', 'button', {'name': 'Toon minder filters'})

    DEFAULT_FILTERS = ('Programma', 'Type', 'Datum', 'Omroep')
    EXTRA_FILTERS   = ('Collectie', 'Genre', 'Onderwerp')

    PLAYABLE_ON  = re.compile(r'afspeelbaar=ja')
    PLAYABLE_OFF = re.compile(r'afspeelbaar=nee')

    # ── Lokatory ──────────────────────────────────────────────────────────────

    def heading(self, name: str | re.Pattern | None = None) -> Locator:
        if name is None:
            return self.loc(self.H1)
        return self.page.get_by_role('heading', name=name, level=1)

    def filter_button(self, name: str | re.Pattern) -> Locator:
        return self.page.get_by_role('button', name=name)

    @property
    def playable_switch(self) -> Locator:
        return self.loc(self.PLAYABLE_SWITCH)

    @property
    def sort_button(self) -> Locator:
        return self.loc(self.SORT)

    @property
    def results_label(self) -> Locator:
        return self.loc(self.RESULTS_LABEL).first

    @property
    def pagination(self) -> Locator:
        return self.loc(self.PAGINATION)

    @property
    def first_result(self) -> Locator:
        return self.loc(self.MAIN).get_by_role('link').first

    # ── Akcje ─────────────────────────────────────────────────────────────────

    async def show_more_filters(self):
        await self.loc(self.BTN_MORE_FILTERS).click()

    async def toggle_playable(self, timeout: float = 5000) -> str:
        """Przełącza "Alleen afspeelbaar" i czeka aż URL odzwierciedli nowy stan."""
        was_on = await self.playable_switch.is_checked()
        await self.playable_switch.click()
        await self.page.wait_for_url(self.PLAYABLE_OFF if was_on else self.PLAYABLE_ON, timeout=timeout)
        self.log(f"Alleen afspeelbaar: {'ja → nee' if was_on else 'nee → ja'}")
        return self.page.url

    async def first_result_text(self) -> str | None:
        return await self.first_result.text_content()

    # ── Paginacja ─────────────────────────────────────────────────────────────

    async def has_pagination(self, timeout: float | None = 3000) -> bool:
        return await self.is_visible(self.PAGINATION, timeout=timeout)

    def page_link(self, number: int) -> Locator:
        return self.pagination.get_by_role('link', name=re.compile(rf'^{number}$'))

    @property
    def next_link(self) -> Locator:
        return self.pagination.get_by_role('link', name=re.compile(r'Volgende|Next', re.IGNORECASE))

    @property
    def previous_link(self) -> Locator:
        return self.pagination.get_by_role('link', name=re.compile(r'Vorige|Previous', re.IGNORECASE))

    async def go_to_page(self, number: int, forward: bool = True) -> PaginationData:
        """
        Klika numer strony, a gdy go nie ma — Volgende/Vorige.
        Zwraca pierwszy wynik i URL po przejściu.
        """
        fallback = self.next_link if forward else self.previous_link
        await self.page_link(number).or_(fallback).first.click()

        # Strona 1 może nie mieć parametru pagina w URL
        if number > 1:
            await self.page.wait_for_url(re.compile(rf'[?&]pagina={number}(&|$)'))
        else:
            await self.page.wait_for_url(lambda url: not re.search(r'[?&]pagina=(?!1(&|$))', url))
        await self.wait_for_load()
        self.log(f"Strona wyników: {number}")
        return PaginationData(
            visible=True,
            first_result=await self.first_result_text(),
            url=self.page.url,
        )
