import re
from dataclasses import dataclass

from playwright.async_api import Locator

from schatkamer.pages.base_page import BasePage, probe_visible
from schatkamer.pages.cookie_dialog import dismiss_cookie_dialog


@dataclass(frozen=True)
class Carousel:
    heading: str
    items: re.Pattern
    index: int      # który przycisk "Navigeer naar rechts" na stronie


# ── HomePage ──────────────────────────────────────────────────────────────────

class HomePage(BasePage):
    TITLE = re.compile(r'De Schatkamer')
    SEARCH_PLACEHOLDER = "Zoek op programma's, personen, verhalen en omroepen."

    H1            = ('role', 'heading', {'level': 1})
    SEARCH_BOX    = ('role', 'textbox', {'name': re.compile(r'Zoek')})
    BTN_SEARCH    = ('role', 'button', {'name': 'Zoeken'})
    BTN_LOGIN     = ('role', 'button', {'name': 'Inloggen'})
    LINK_HOME     = ('role', 'link', {'name': 'Home'})
    SKIP_LINK     = ('role', 'button', {'name': re.compile(r'hoofdinhoud|main content|skip', re.IGNORECASE)})
    BANNER        = ('role', 'banner')
    MAIN          = ('role', 'main')
    FOOTER        = ('role', 'contentinfo')
    CAROUSEL_NEXT = ('role', 'button', {'name': 'Navigeer naar rechts'})
    BTN_MORE_OPTIONS = ('role', 'button', {'name': 'Meer opties'})
    MENU_ADD_TO_LIST = ('role', 'menuitem', {'name': 'Toevoegen aan lijst'})
    BTN_SHARE        = ('role', 'button', {'name': 'Delen'})
    # Na mobile wyszukiwarka bywa schowana za ikoną
    SEARCH_ICON   = ('locator', 'button:has-text("zoek"), a:has-text("zoek"), [aria-label*="zoek" i]')

    SHARE_MENU_SECTION = 'Demo 24-11-2025'
    STORIES_SECTION    = 'Lees iets anders'
    STORY_ITEMS        = re.compile(r'verhaal|Pokémon|Marvin')

    CAROUSELS = {
        'serie':     Carousel('Nostalgie', re.compile(r'SESAMSTRAAT|HET KLOKHUIS|DE STRAAT'), 0),
        'programma': Carousel("Programma's met meerdere streams", re.compile(r'Video met|Audio met|Programma met'), 1),
        'omroep':    Carousel('Omroepen van de week', re.compile(r'BNNVARA|AVROTROS|VPRO|EO|HUMAN|NTR'), 2),
        'persoon':   Carousel('Weet je nog?', re.compile(r'Mies Bouwman|Willem Ruis|Carry Tefsen'), 3),
    }

    # ── Lokatory ──────────────────────────────────────────────────────────────

    @property
    def h1(self) -> Locator:
        return self.loc(self.H1).first

    @property
    def search_box(self) -> Locator:
        return self.loc(self.SEARCH_BOX)

    @property
    def home_link(self) -> Locator:
        return self.loc(self.LINK_HOME).first

    @property
    def content_links(self) -> Locator:
        """Kafelki z obrazkiem — serie, programy, omroepy."""
        return self.page.get_by_role('link').filter(has=self.page.locator('img'))

    @property
    def story_links(self) -> Locator:
        return self.page.get_by_role('link').filter(has_text=self.STORY_ITEMS)

    def section_heading(self, name: str | re.Pattern, level: int = 2) -> Locator:
        return self.page.get_by_role('heading', name=name, level=level)

    # ── Karuzele ──────────────────────────────────────────────────────────────

    def carousel_heading(self, key: str) -> Locator:
        return self.section_heading(self.CAROUSELS[key].heading)

    def carousel_item(self, key: str) -> Locator:
        return self.page.get_by_role('link').filter(has_text=self.CAROUSELS[key].items).first

    async def scroll_carousel(self, key: str):
        carousel = self.CAROUSELS[key]
        self.log(f"Karuzela '{carousel.heading}' → w prawo")
        await self.loc(self.CAROUSEL_NEXT).nth(carousel.index).click()

    async def open_carousel_item(self, key: str):
        items = self.CAROUSELS[key].items
        await self.page.get_by_role('link').filter(has=self.page.get_by_text(items)).first.click()

    # ── Akcje ─────────────────────────────────────────────────────────────────

    async def open_share_menu(self):
        await self.loc(self.BTN_MORE_OPTIONS).first.click()

    async def reveal_search(self) -> bool:
        """
        Mobile: jeśli pole wyszukiwania jest schowane, klika widoczną ikonę lupy.
        Zwraca czy pole jest widoczne po próbie.
        """
        if await self.is_visible(self.SEARCH_BOX):
            return True
        if not self.is_mobile:
            return False

        # Selektor łapie też ukryty przycisk "Zoeken", klikamy tylko widoczną ikonę
        icons = self.loc(self.SEARCH_ICON)
        for i in range(await icons.count()):
            icon = icons.nth(i)
            if await probe_visible(icon):
                self.log("Pole wyszukiwania schowane, klikam ikonę")
                await icon.click()
                break
        return await self.is_visible(self.SEARCH_BOX)

    async def go_home(self):
        await self.home_link.click()
        await self.wait_for_load()

    async def console_errors_on_load(self) -> list[str]:
        """
        Otwiera stronę główną w nowej karcie tego samego kontekstu i zbiera
        błędy z konsoli od pierwszego requestu. Błędy favicon pomijane.
        """
        errors: list[str] = []

        def on_console(msg):
            if msg.type == 'error':
                errors.append(msg.text)

        fresh = await self.page.context.new_page()
        fresh.on('console', on_console)
        try:
            await fresh.goto(self.context.url())
            await dismiss_cookie_dialog(fresh, self.context)
            await fresh.wait_for_load_state('networkidle')
        finally:
            await fresh.close()

        critical = [e for e in errors if 'favicon' not in e]
        if critical:
            self.log(f"Błędy konsoli: {critical}")
        return critical
