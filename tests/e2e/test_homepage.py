"""
Strona główna De Schatkamer — elementy, sekcje, stopka, nawigacja, responsywność.
"""
import re

import pytest
from playwright.async_api import expect

from schatkamer.pages.entity_page import EntityPage
from schatkamer.pages.footer import Footer
from schatkamer.pages.home_page import HomePage

pytestmark = pytest.mark.live


class TestPageLoad:
    """Tytuł, nagłówek, nawigacja w headerze."""

    async def test_title_and_heading(self, home: HomePage):
        await expect(home.page).to_have_title(HomePage.TITLE)
        await expect(home.h1).to_be_visible()

    async def test_main_navigation(self, home: HomePage):
        await expect(home.home_link).to_be_visible()
        await expect(home.loc(HomePage.BTN_LOGIN)).to_be_visible()
        await expect(home.search_box).to_be_visible()
        await expect(home.loc(HomePage.BTN_SEARCH)).to_be_visible()

    async def test_loads_within_navigation_timeout(self, home: HomePage):
        await home.page.wait_for_load_state('domcontentloaded')
        await expect(home.page).to_have_title(HomePage.TITLE)

    async def test_no_console_errors_on_load(self, home: HomePage):
        errors = await home.console_errors_on_load()
        assert errors == [], f"Błędy konsoli: {errors}"


class TestSearchBox:

    async def test_visible_and_editable(self, home: HomePage):
        await expect(home.search_box).to_be_visible()
        await expect(home.search_box).to_be_editable()

    async def test_placeholder(self, home: HomePage):
        await expect(home.search_box).to_have_attribute('placeholder', HomePage.SEARCH_PLACEHOLDER)


class TestContentSections:

    async def test_featured_content(self, home: HomePage):
        await expect(home.content_links.first).to_be_visible(timeout=10000)

    async def test_visible_images(self, home: HomePage):
        await home.page.wait_for_load_state('networkidle')
        images = home.page.locator('img')
        assert await images.count() > 0
        await expect(images.first).to_be_visible()

    async def test_multiple_sections(self, home: HomePage):
        await home.page.wait_for_load_state('networkidle')
        assert await home.page.get_by_role('heading').count() > 1


class TestFooter:
    """Stopka — zawężona do contentinfo."""

    async def test_sections(self, footer: Footer):
        await footer.scroll_into_view()
        for name in Footer.SECTIONS:
            await expect(footer.section_heading(name)).to_be_visible()

    async def test_links_have_href(self, footer: Footer):
        await footer.scroll_into_view()
        for link in (footer.about_link, footer.faq_link):
            await expect(link).to_be_visible()
            await expect(link).to_have_attribute('href', re.compile(r'.+'))

    async def test_broadcaster_links(self, footer: Footer):
        await footer.scroll_into_view()
        await expect(footer.broadcaster_link('BNNVARA')).to_be_visible()
        await expect(footer.broadcaster_link('NTR')).to_be_visible()

    async def test_newsletter(self, footer: Footer):
        await footer.scroll_into_view()
        await expect(footer.newsletter_heading).to_be_visible()
        await expect(footer.subscribe_button).to_be_visible()

    async def test_attribution(self, footer: Footer):
        await footer.scroll_into_view()
        await expect(footer.attribution).to_be_visible()


class TestNavigation:

    async def test_content_item_and_back(self, home: HomePage):
        await home.page.wait_for_load_state('networkidle')
        await home.content_links.first.click()

        await expect(home.page).not_to_have_url(home.context.url())
        await expect(home.page).to_have_url(re.compile(r'/(serie|programma|omroep)/'))

        await home.go_home()
        await expect(home.page).to_have_url(home.context.url())

    async def test_breadcrumb_optional_on_home(self, home: HomePage):
        # Strona główna może nie mieć breadcrumb, a jeśli ma, musi być widoczny
        breadcrumb = home.loc(EntityPage.BREADCRUMB)
        if await breadcrumb.count():
            await expect(breadcrumb).to_be_visible()


class TestLandmarksAndHeadings:

    async def test_single_h1(self, home: HomePage):
        assert await home.loc(HomePage.H1).count() == 1

    async def test_images_have_alt(self, home: HomePage):
        await home.page.wait_for_load_state('networkidle')
        images = home.page.locator('img')
        for i in range(min(await images.count(), 10)):
            assert await images.nth(i).get_attribute('alt') is not None, f"img #{i} bez alt"

    async def test_landmarks(self, home: HomePage):
        await expect(home.loc(HomePage.BANNER)).to_be_visible()
        await expect(home.loc(HomePage.FOOTER)).to_be_visible()
        await expect(home.loc(HomePage.MAIN)).to_be_visible()


@pytest.mark.parametrize('viewport_name', ['mobile', 'tablet'])
class TestResponsive:

    async def test_key_elements_visible(self, home: HomePage):
        assert await home.reveal_search(), "Pole wyszukiwania niedostępne"
        await expect(home.h1).to_be_visible()
