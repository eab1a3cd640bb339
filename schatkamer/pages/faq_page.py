import re

from playwright.async_api import Locator

from schatkamer.pages.base_page import BasePage


# ── FaqPage — Veelgestelde vragen & Contact ───────────────────────────────────

class FaqPage(BasePage):
    PATH = 'veelgestelde-vragen-contact'

    H1       = ('role', 'heading', {'name': 'Veelgestelde vragen & Contact', 'level': 1})
    QUESTION = ('role', 'button', {'name': re.compile(r'Wat is de Schatkamer\??')})
    ANSWER   = ('text', 'De Schatkamer is een online portal')

    async def open(self, path: str = PATH):
        await super().open(path)

    @property
    def heading(self) -> Locator:
        return self.loc(self.H1)

    @property
    def question(self) -> Locator:
        return self.loc(self.QUESTION)

    @property
    def answer(self) -> Locator:
        return self.loc(self.ANSWER)

    async def expand_by_click(self):
        await self.safe_click(self.QUESTION)

    async def expand_by_keyboard(self):
        await self.question.focus()
        await self.page.keyboard.press('Enter')
