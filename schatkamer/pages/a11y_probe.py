"""
Sondy dostępności (WCAG 2.2) — klawiatura, fokus, reflow, próbki elementów.
Zbiera fakty do A11yData, ocenę robi AccessibilityRules.
"""
from schatkamer.pages.base_page import BasePage
from schatkamer.run_data import A11yData, LinkSample

FOCUSED_TAG_JS = "() => document.activeElement?.tagName || ''"

FOCUSED_TOP_JS = """() => {
    const rect = document.activeElement?.getBoundingClientRect();
    return rect ? rect.top : 0;
}"""

FOCUS_INDICATOR_JS = """() => {
    const el = document.activeElement;
    if (!el) return false;
    const styles = window.getComputedStyle(el);
    return styles.outline !== 'none' ||
           styles.outlineWidth !== '0px' ||
           styles.boxShadow !== 'none' ||
           String(el.className).includes('focus');
}"""

FOCUSED_IN_VIEWPORT_JS = """() => {
    const el = document.activeElement;
    if (!el) return false;
    const rect = el.getBoundingClientRect();
    return rect.top >= 0 && rect.left >= 0 &&
           rect.bottom <= window.innerHeight && rect.right <= window.innerWidth;
}"""

# WCAG 1.4.12, minimalne odstępy tekstu
TEXT_SPACING_CSS = """
* {
  line-height: 1.5 !important;
  letter-spacing: 0.12em !important;
  word-spacing: 0.16em !important;
}
p {
  margin-bottom: 2em !important;
}
"""


class A11yProbe(BasePage):

    # ── Klawiatura i fokus ────────────────────────────────────────────────────

    async def tab(self, times: int = 1):
        for _ in range(times):
            await self.page.keyboard.press('Tab')

    async def focused_tag(self) -> str:
        return await self.page.evaluate(FOCUSED_TAG_JS)

    async def focused_top(self) -> float:
        return await self.page.evaluate(FOCUSED_TOP_JS)

    async def focus_indicator_visible(self) -> bool:
        return await self.page.evaluate(FOCUS_INDICATOR_JS)

    async def focused_in_viewport(self) -> bool:
        return await self.page.evaluate(FOCUSED_IN_VIEWPORT_JS)

    async def focus_walk(self, tabs: int = 5) -> list[str]:
        """Tab N razy, zwraca tagi kolejno fokusowanych elementów."""
        tags = []
        for _ in range(tabs):
            await self.tab()
            tags.append(await self.focused_tag())
        self.log(f"Fokus: {' → '.join(tags)}")
        return tags

    async def focus_positions(self, tabs: int = 5) -> list[float]:
        positions = []
        for _ in range(tabs):
            await self.tab()
            positions.append(await self.focused_top())
        return positions

    async def tab_until(self, tag: str = 'INPUT', max_tabs: int = 10) -> bool:
        for _ in range(max_tabs):
            await self.tab()
            if await self.focused_tag() == tag:
                return True
        return False

    # ── Strona ────────────────────────────────────────────────────────────────

    async def page_lang(self) -> str:
        return await self.page.evaluate("() => document.documentElement.lang")

    async def reflow_widths(self) -> tuple[int, int]:
        body = await self.page.evaluate("() => document.body.scrollWidth")
        viewport = await self.page.evaluate("() => window.innerWidth")
        return body, viewport

    async def apply_text_spacing(self):
        await self.page.add_style_tag(content=TEXT_SPACING_CSS)

    # ── Próbki elementów ──────────────────────────────────────────────────────

    async def sample_links(self, size: int = 10) -> list[LinkSample]:
        links = self.page.get_by_role('link')
        count = min(size, await links.count())
        samples = []
        for i in range(count):
            link = links.nth(i)
            samples.append(LinkSample(
                aria_label=await link.get_attribute('aria-label'),
                text=await link.text_content(),
            ))
        return samples

    async def sample_image_alts(self, size: int = 10) -> list[str | None]:
        images = self.page.locator('img')
        count = min(size, await images.count())
        return [await images.nth(i).get_attribute('alt') for i in range(count)]

    async def sample_button_boxes(self, size: int = 5) -> list[dict | None]:
        buttons = self.page.get_by_role('button')
        count = min(size, await buttons.count())
        return [await buttons.nth(i).bounding_box() for i in range(count)]

    async def sample_heading_texts(self, size: int = 5) -> list[str]:
        headings = self.page.locator('h1, h2, h3, h4, h5, h6')
        count = min(size, await headings.count())
        return [((await headings.nth(i).text_content()) or '').strip() for i in range(count)]

    async def collect(
        self,
        links: bool = False,
        images: bool = False,
        buttons: bool = False,
        focus_tabs: int = 0,
        h1: bool = False,
        reflow: bool = False,
        lang: bool = False,
    ) -> A11yData:
        """Zbiera tylko wskazane fakty — reszta zostaje None i rules ją pomijają."""
        data = A11yData()
        if links:
            data.links = await self.sample_links()
        if images:
            data.image_alts = await self.sample_image_alts()
        if buttons:
            data.button_boxes = await self.sample_button_boxes()
        if focus_tabs:
            data.focused_tags = await self.focus_walk(focus_tabs)
        if h1:
            data.h1_count = await self.page.get_by_role('heading', level=1).count()
        if reflow:
            data.body_scroll_width, data.viewport_width = await self.reflow_widths()
        if lang:
            data.lang = await self.page_lang()
        return data
