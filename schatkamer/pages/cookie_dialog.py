"""
Dialog zgody na cookies ("Privacy").

Gate: przed testem zamyka dialog jeśli jest widoczny — odmowa ma pierwszeństwo
przed akceptacją. Nie zakłada, że dialog istnieje (zgoda mogła już zapaść w tym
kontekście) ani który z dwóch przycisków jest dostępny.

Testy samego dialogu omijają gate: reset() czyści cookies i przeładowuje stronę,
dialog pokazuje się ponownie.
"""
import re

from playwright.async_api import Locator, Page, expect

from schatkamer.context import SiteContext
from schatkamer.pages.base_page import BasePage, probe_visible
from schatkamer.run_data import ConsentData

REFUSE_NAME = re.compile(r'Cookies weigeren|Weigeren', re.IGNORECASE)
ACCEPT_NAME = re.compile(r'Alles accepteren|Accepteren', re.IGNORECASE)

REFUSE = 'refuse'
ACCEPT = 'accept'


class CookieDialog(BasePage):
    DIALOG     = ('role', 'dialog', {'name': 'Privacy'})
    BTN_REFUSE = ('role', 'button', {'name': REFUSE_NAME})
    BTN_ACCEPT = ('role', 'button', {'name': ACCEPT_NAME})

    # Dokładne etykiety z obecnego UI
    BTN_REFUSE_EXACT = ('role', 'button', {'name': 'Cookies weigeren'})
    BTN_ACCEPT_EXACT = ('role', 'button', {'name': 'Alles accepteren'})

    @property
    def dialog(self) -> Locator:
        return self.loc(self.DIALOG)

    @property
    def refuse_button(self) -> Locator:
        return self.loc(self.BTN_REFUSE, scope=self.dialog)

    @property
    def accept_button(self) -> Locator:
        return self.loc(self.BTN_ACCEPT, scope=self.dialog)

    # ── Gate ──────────────────────────────────────────────────────────────────

    async def is_present(self) -> bool:
        return await probe_visible(self.dialog)

    async def available_actions(self) -> set[str]:
        actions = set()
        if await probe_visible(self.refuse_button):
            actions.add(REFUSE)
        if await probe_visible(self.accept_button):
            actions.add(ACCEPT)
        return actions

    async def dismiss(self) -> ConsentData:
        """
        Jedno przejście sprawdź-i-kliknij, bez ponowień.

        dialog nieobecny           → nic nie robi
        odmowa widoczna            → klika odmowę
        tylko akceptacja widoczna  → klika akceptację
        brak przycisków            → zostawia dialog

        Po kliknięciu czeka aż dialog zniknie. Nie nawiguje.
        """
        if not await self.is_present():
            return ConsentData(present=False)

        actions = await self.available_actions()
        if REFUSE in actions:
            action, button = REFUSE, self.refuse_button
        elif ACCEPT in actions:
            action, button = ACCEPT, self.accept_button
        else:
            self.log("Dialog widoczny, ale bez przycisku odmowy/akceptacji — zostawiam")
            return ConsentData(present=True, available_actions=actions)

        self.log(f"Zamykam dialog cookies: {action}")
        await button.click()
        await self.wait_until_hidden()
        return ConsentData(present=True, available_actions=actions, action=action)

    async def wait_until_hidden(self):
        await expect(self.dialog).to_be_hidden()

    # ── Omijanie gate ─────────────────────────────────────────────────────────

    async def reset(self):
        """Czyści cookies kontekstu i przeładowuje — dialog wraca."""
        self.log("Czyszczę cookies i przeładowuję stronę")
        await self.page.context.clear_cookies()
        await self.page.reload()
        await self.wait_for_load()

    async def refuse(self):
        await self.loc(self.BTN_REFUSE_EXACT, scope=self.dialog).click()

    async def accept(self):
        await self.loc(self.BTN_ACCEPT_EXACT, scope=self.dialog).click()


async def dismiss_cookie_dialog(page: Page, context: SiteContext | None = None) -> ConsentData:
    """Gate dla surowego Page, bez page objectu."""
    return await CookieDialog(page, context or SiteContext.from_settings()).dismiss()
