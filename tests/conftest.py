"""
Fixtures i hooki dla testów De Schatkamer.

Przeglądarka startuje raz na sesję. Kontekst przeglądarki jest tworzony od nowa
dla każdego testu i zawsze zamykany — cookie zgody z jednego testu nie
przecieka do następnego.

Testy oznaczone `live` idą na wdrożone środowisko i są pomijane, dopóki nie
podasz --live albo SCHATKAMER_LIVE=1.
"""
import logging
import re
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from playwright.async_api import Browser, BrowserContext, Page, async_playwright
from playwright.async_api import Error as PlaywrightError
from pytest_asyncio import is_async_test

from schatkamer import settings
from schatkamer.context import SiteContext
from schatkamer.pages.a11y_probe import A11yProbe
from schatkamer.pages.base_page import BasePage
from schatkamer.pages.footer import Footer
from schatkamer.pages.home_page import HomePage
from schatkamer.pages.search_page import SearchFlyout
from schatkamer.run_log import RunLog

logger = logging.getLogger(__name__)

run_log = RunLog()


# =============================================================================
# Hooki
# =============================================================================


def pytest_addoption(parser):
    parser.addoption(
        "--live",
        action="store_true",
        default=False,
        help="uruchom testy na wdrożonej stronie (SCHATKAMER_BASE_URL)",
    )


def pytest_configure(config):
    run_log.setup()
    logger.info(f"Środowisko: {settings.ENV_NAME} @ {settings.BASE_URL} | viewport: {settings.VIEWPORT}")


def pytest_unconfigure(config):
    run_log.close()


def pytest_collection_modifyitems(config, items):
    """Jedna pętla zdarzeń na sesję + pomijanie testów live."""
    live = config.getoption("--live") or settings.LIVE
    skip_live = pytest.mark.skip(reason="testy live wyłączone — użyj --live albo SCHATKAMER_LIVE=1")
    session_loop = pytest.mark.asyncio(loop_scope="session")

    for item in items:
        if is_async_test(item):
            item.add_marker(session_loop, append=False)
        if "live" in item.keywords and not live:
            item.add_marker(skip_live)


@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Zapamiętuje wynik na item (dla screenshotu) i loguje pełny traceback."""
    outcome = yield
    rep = outcome.get_result()
    setattr(item, f"rep_{rep.when}", rep)

    if rep.failed and call.excinfo is not None:
        run_log.write_raw_traceback(item.nodeid, call.excinfo.value)


# =============================================================================
# Przeglądarka
# =============================================================================


@pytest.fixture
def viewport_name() -> str:
    """Nadpisz przez @pytest.mark.parametrize('viewport_name', ['mobile'])."""
    return settings.VIEWPORT


@pytest.fixture
def site(viewport_name: str) -> SiteContext:
    return SiteContext.from_settings(viewport_name=viewport_name)


@pytest_asyncio.fixture(scope="session", loop_scope="session")
async def browser() -> AsyncGenerator[Browser, None]:
    async with async_playwright() as p:
        try:
            browser = await p.chromium.launch(headless=settings.HEADLESS, slow_mo=settings.SLOW_MO)
        except PlaywrightError as e:
            pytest.skip(f"Chromium niedostępny (playwright install chromium): {e}")
        yield browser
        await browser.close()


@pytest_asyncio.fixture(loop_scope="session")
async def browser_context(browser: Browser, site: SiteContext) -> AsyncGenerator[BrowserContext, None]:
    """Izolowany kontekst na test — własne cookies, własny viewport."""
    context = await browser.new_context(viewport=site.viewport, locale='nl-NL')
    context.set_default_timeout(settings.DEFAULT_TIMEOUT)
    context.set_default_navigation_timeout(settings.NAVIGATION_TIMEOUT)
    try:
        yield context
    finally:
        await context.close()


@pytest_asyncio.fixture(loop_scope="session")
async def page(request, browser_context: BrowserContext, site: SiteContext) -> AsyncGenerator[Page, None]:
    """Surowa karta bez nawigacji. Screenshot gdy test obleje."""
    page = await browser_context.new_page()
    yield page

    rep = getattr(request.node, "rep_call", None)
    if rep is not None and rep.failed:
        name = re.sub(r'[^\w.-]+', '_', request.node.name)
        await BasePage(page, site).screenshot(f"failure_{name}")


# =============================================================================
# Page objects
# =============================================================================


@pytest_asyncio.fixture(loop_scope="session")
async def home(page: Page, site: SiteContext) -> HomePage:
    """Strona główna po nawigacji i zamknięciu dialogu cookies."""
    home = HomePage(page, site)
    await home.open()
    return home


@pytest.fixture
def search(home: HomePage) -> SearchFlyout:
    return SearchFlyout(home.page, home.context)


@pytest.fixture
def footer(home: HomePage) -> Footer:
    return Footer(home.page, home.context)


@pytest.fixture
def probe(page: Page, site: SiteContext) -> A11yProbe:
    return A11yProbe(page, site)
