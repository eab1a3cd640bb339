from pathlib import Path
import logging

from playwright.async_api import Locator, Page

from schatkamer import settings
from schatkamer.context import SiteContext

logger = logging.getLogger(__name__)


async def probe_visible(locator: Locator, timeout: float | None = None) -> bool:
    """
    Czy element jest widoczny — zawsze bool, nigdy wyjątek.

    Bez timeout sprawdza stan w tej chwili. Z timeout (ms) czeka maksymalnie
    tyle na pojawienie się elementu. Brak elementu, odłączony node, strict
    mode violation i timeout dają False.
    """
    try:
        if timeout is None:
            return await locator.is_visible()
        await locator.wait_for(state='visible', timeout=timeout)
        return True
    except Exception:
        return False


class BasePage:
    def __init__(self, page: Page, context: SiteContext):
        self.page = page
        self.context = context

    # ── Lokator ───────────────────────────────────────────────────────────────

    def loc(self, selector: tuple, scope: Locator | None = None) -> Locator:
        """
        Interpretuje tuple selektora i zwraca Playwright Locator.
        scope — opcjonalny kontener (np. stopka), domyślnie cała strona.

        Formaty:
          ('locator',      'css_or_xpath')
          ('role',         'button',       {'name': 'Zoeken'})
          ('text',         'Media',        {'exact': True})
        """
        root = scope if scope is not None else self.page
        kind = selector[0]

        if kind == 'locator':
            return root.locator(selector[1])
        elif kind == 'role':
            kwargs = selector[2] if len(selector) > 2 else {}
            return root.get_by_role(selector[1], **kwargs)
        elif kind == 'text':
            kwargs = selector[2] if len(selector) > 2 else {}
            return root.get_by_text(selector[1], **kwargs)
        else:
            raise ValueError(f"Nieznany typ selektora: {kind}")

    # ── Desktop / mobile ──────────────────────────────────────────────────────

    @property
    def is_mobile(self) -> bool:
        return self.context.is_mobile

    # ── Nawigacja ─────────────────────────────────────────────────────────────

    async def open(self, path: str = ''):
        """Nawiguje względem base_url i zamyka dialog cookies jeśli się pokazał."""
        url = self.context.url(path)
        self.log(f"Nawiguję do: {url}")
        await self.page.goto(url)
        await self.wait_for_load()
        await self.dismiss_cookies()

    async def wait_for_load(self):
        # domcontentloaded zamiast networkidle: odtwarzacze i karuzele
        # potrafią trzymać ruch sieciowy bez końca
        await self.page.wait_for_load_state('domcontentloaded')
        if settings.SETTLE_MS:
            await self.page.wait_for_timeout(settings.SETTLE_MS)

    async def dismiss_cookies(self):
        from schatkamer.pages.cookie_dialog import CookieDialog
        return await CookieDialog(self.page, self.context).dismiss()

    # ── Helpers ───────────────────────────────────────────────────────────────

    async def safe_click(self, selector: tuple):
        el = self.loc(selector)
        await el.scroll_into_view_if_needed()
        await el.click()

    async def count(self, selector: tuple) -> int:
        return await self.loc(selector).count()

    async def is_visible(self, selector: tuple, timeout: float | None = None) -> bool:
        # Pierwsze dopasowanie, sekcje i nagłówki powtarzają się na stronie
        return await probe_visible(self.loc(selector).first, timeout=timeout)

    async def screenshot(self, name: str, directory: Path | None = None) -> str | None:
        directory = directory or settings.ARTIFACTS_DIR
        path = Path(directory) / f"{name}.png"
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            await self.page.screenshot(path=str(path))
        except Exception as e:
            # screenshot nie może przerwać testu
            logger.warning(f"Screenshot nieudany ({path}): {e}")
            return None
        self.log(f"Screenshot zapisany: {path}")
        return str(path)

    def log(self, msg: str):
        logger.info(f"[{self.__class__.__name__}] {msg}")
