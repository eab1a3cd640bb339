import re

from playwright.async_api import Locator, Page

from schatkamer.pages.base_page import BasePage
from schatkamer.pages.faq_page import FaqPage


# ── Footer — stopka (contentinfo) ─────────────────────────────────────────────

class Footer(BasePage):
    """
    Stopka jest na każdej stronie. Wszystkie lokatory są zawężone do
    contentinfo — nazwy omroepów i linków powtarzają się wyżej na stronie.
    """
    FOOTER            = ('role', 'contentinfo')
    LINK_ABOUT        = ('role', 'link', {'name': 'Over Beeld & Geluid'})
    LINK_FAQ          = ('role', 'link', {'name': 'Veelgestelde vragen & Contact'})
    LINK_AV_CONVENANT = ('role', 'link', {'name': 'AV-Convenant'})
    NEWSLETTER_HEADING = ('role', 'heading', {'name': 'Ontvang de nieuwsbrief en blijf op de hoogte'})
    NEWSLETTER_INPUT  = ('role', 'textbox')
    BTN_SUBSCRIBE     = ('role', 'button', {'name': 'Aanmelden'})
    ATTRIBUTION       = ('text', 'De Schatkamer is een initiatief van Beeld & Geluid')

    SECTIONS     = ('Organisatie', 'Ondersteuning', 'Omroepen')
    BROADCASTERS = re.compile(r'BNNVARA|AVROTROS|VPRO|EO|HUMAN')

    ABOUT_URL         = re.compile(r'beeldengeluid\.nl/organisatie')
    AV_CONVENANT_URL  = re.compile(r'/av-convenant$')

    @property
    def root(self) -> Locator:
        return self.loc(self.FOOTER)

    def _in_footer(self, selector: tuple) -> Locator:
        return self.loc(selector, scope=self.root)

    def section_heading(self, name: str) -> Locator:
        return self.root.get_by_role('heading', name=name)

    def broadcaster_link(self, name: str | re.Pattern | None = None) -> Locator:
        return self.root.get_by_role('link', name=name or self.BROADCASTERS).first

    @property
    def about_link(self) -> Locator:
        return self._in_footer(self.LINK_ABOUT)

    @property
    def faq_link(self) -> Locator:
        return self._in_footer(self.LINK_FAQ)

    @property
    def newsletter_heading(self) -> Locator:
        return self.loc(self.NEWSLETTER_HEADING)

    @property
    def newsletter_input(self) -> Locator:
        return self._in_footer(self.NEWSLETTER_INPUT)

    @property
    def subscribe_button(self) -> Locator:
        return self._in_footer(self.BTN_SUBSCRIBE)

    @property
    def attribution(self) -> Locator:
        return self.loc(self.ATTRIBUTION)

    # ── Akcje ─────────────────────────────────────────────────────────────────

    async def scroll_into_view(self):
        await self.root.scroll_into_view_if_needed()

    async def open_about_in_new_tab(self) -> Page:
        """Link zewnętrzny — otwiera nową kartę, zwraca jej Page."""
        async with self.page.context.expect_page() as new_page_info:
            await self.about_link.click()
        new_tab = await new_page_info.value
        self.log(f"Nowa karta: {new_tab.url}")
        return new_tab

    async def open_av_convenant(self):
        await self._in_footer(self.LINK_AV_CONVENANT).click()
        await self.wait_for_load()

    async def open_broadcaster(self, name: str | re.Pattern | None = None):
        await self.broadcaster_link(name).click()
        await self.wait_for_load()

    async def open_faq(self) -> FaqPage:
        await self.faq_link.click()
        await self.wait_for_load()
        return FaqPage(self.page, self.context)
