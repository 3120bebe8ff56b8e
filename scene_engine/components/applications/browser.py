from __future__ import annotations
import asyncio
import logging
import math
from dataclasses import dataclass, field
from pathlib import PurePosixPath
from typing import List, Optional

from PIL import Image

from ... import theme
from ...context import ApplicationSection, LayoutContext
from ...models import classes
from ...models.enums import Appearance, UIFamily
from ...models.geometry import Rectangle
from ...render.fonts import get_font
from ...render.procedural import flat_icon, noise_content
from ...render.resources import ResourceProvider
from ...render.surface import RasterSurface, cover_crop
from ...texts import DOMAINS
from ...utils.random_utils import get_random_elements, random_int_between, true_with_probability
from .application import Application, ApplicationRegion

logger = logging.getLogger(__name__)

HANDLE_HEIGHT = 40
TABBAR_HEIGHT = 30
FAVORITES_HEIGHT = 30
TAB_MARGIN = 5
AUTOCOMPLETE_ROW_HEIGHT = 30
MIN_CELL_SIZE = 80
MAX_GRID_COLUMNS = 6
MAX_TABS = 10
MIN_FAVORITES = 2
MAX_FAVORITES = 20
FAVORITES_PROBABILITY = 0.5
AUTOCOMPLETE_PROBABILITY = 0.5
GRID_PROBABILITY = 0.5
PLACEHOLDER_PAGE_SIZE = (320, 200)

HANDLE_COLOR = {Appearance.DARK: '#383838', Appearance.LIGHT: '#dcdcdc'}
TABBAR_COLOR = {Appearance.DARK: '#1a1a1a', Appearance.LIGHT: '#cecece'}
TEXTFIELD_COLOR = {Appearance.DARK: '#686868', Appearance.LIGHT: '#ffffff'}
SEPARATOR_COLOR = {Appearance.DARK: '#b0b0b0', Appearance.LIGHT: '#bebebe'}
AUTOCOMPLETE_COLOR = {Appearance.DARK: '#000000a0', Appearance.LIGHT: '#ffffffd0'}


@dataclass
class WebPage:
    domain: str
    image: Image.Image
    favicon: Image.Image


@dataclass
class Autocomplete:
    pages: List[WebPage]
    bounding_box: Rectangle
    is_grid: bool
    columns: int


@dataclass
class BrowserSection:
    tabs: List[WebPage]
    active_tab: int
    controls_box: Rectangle
    navbar: Rectangle
    tabbar: Rectangle
    content: Rectangle
    favorites: List[WebPage] = field(default_factory=list)
    favorites_box: Optional[Rectangle] = None
    autocomplete: Optional[Autocomplete] = None


class Browser(Application):
    """Web browser window with address bar, tabs, optional favorites bar and autocomplete popup."""
    variant = 'browser'

    def __init__(self, family: UIFamily, **kwargs):
        super().__init__(family, **kwargs)
        self.pages: List[WebPage] = []

    async def _load_page(self, resources: ResourceProvider, resource_id: str) -> WebPage:
        stem = PurePosixPath(resource_id).stem
        image, favicon = await asyncio.gather(resources.load(resource_id),
                                              resources.load(f"favicons/{stem}.png"))
        return WebPage(stem.replace('_', '.'), image, favicon)

    async def load_own_resources(self, resources: ResourceProvider) -> None:
        ids = resources.list_category('websites')
        results = await asyncio.gather(*(self._load_page(resources, i) for i in ids), return_exceptions=True)
        for resource_id, result in zip(ids, results):
            if isinstance(result, BaseException):
                logger.warning(f"Skipping website {resource_id}: {result}")
                continue
            self.pages.append(result)
        if not self.pages:
            logger.info("No website screenshots available, using generated pages")

    def _pick_pages(self, rng, amount: int) -> List[WebPage]:
        if self.pages:
            return get_random_elements(rng, self.pages, amount)
        return [WebPage(domain, noise_content(rng, PLACEHOLDER_PAGE_SIZE), flat_icon(rng, 32))
                for domain in get_random_elements(rng, DOMAINS, amount)]

    def _navbar(self, box: Rectangle, controls: Rectangle) -> Rectangle:
        if self.family == UIFamily.MAC:
            left = controls.x2 + 10
            return Rectangle(left, box.y, box.x2 - left, HANDLE_HEIGHT)
        return Rectangle(box.x, box.y, controls.x - box.x, HANDLE_HEIGHT)

    def _autocomplete(self, rng, navbar: Rectangle, content: Rectangle, box: Rectangle) -> Optional[Autocomplete]:
        width = navbar.width / 2
        columns = min(int(width // MIN_CELL_SIZE), MAX_GRID_COLUMNS)
        if columns <= 0:
            return None
        is_grid = true_with_probability(rng, GRID_PROBABILITY)
        cell = width / columns
        if is_grid:
            max_amount = math.ceil(content.height / cell) * columns
        else:
            max_amount = math.floor(content.height / AUTOCOMPLETE_ROW_HEIGHT)
        amount = random_int_between(rng, 1, max_amount)
        height = math.ceil(amount / columns) * cell if is_grid else amount * AUTOCOMPLETE_ROW_HEIGHT
        popup = Rectangle(box.x + (box.width - width) / 2, navbar.y + 0.75 * navbar.height, width, height)
        if popup.is_degenerate:
            return None
        return Autocomplete(self._pick_pages(rng, amount), popup, is_grid, columns)

    def layout_content(self, context: LayoutContext, section: ApplicationSection) -> BrowserSection:
        rng = context.rng
        box = section.bounding_box

        tabs = self._pick_pages(rng, random_int_between(rng, 1, MAX_TABS))
        active_tab = random_int_between(rng, 0, len(tabs))
        has_favorites = true_with_probability(rng, FAVORITES_PROBABILITY)
        has_autocomplete = true_with_probability(rng, AUTOCOMPLETE_PROBABILITY)

        controls = self.chrome.controls_box(box, HANDLE_HEIGHT)
        navbar = self._navbar(box, controls)
        favorites_height = FAVORITES_HEIGHT if has_favorites else 0
        tabbar = Rectangle(box.x, box.y + HANDLE_HEIGHT + favorites_height, box.width, TABBAR_HEIGHT)
        offset = HANDLE_HEIGHT + TABBAR_HEIGHT + favorites_height
        content = Rectangle(box.x, box.y + offset, box.width, box.height - offset)
        browser = BrowserSection(tabs, active_tab, controls, navbar, tabbar, content)

        if has_favorites:
            favorites_box = Rectangle(box.x, navbar.y2, box.width, FAVORITES_HEIGHT)
            if not favorites_box.is_degenerate:
                browser.favorites = self._pick_pages(rng, random_int_between(rng, MIN_FAVORITES, MAX_FAVORITES))
                browser.favorites_box = favorites_box
                context.annotate(self.layer, classes.FAVORITEBAR, favorites_box)

        if has_autocomplete:
            browser.autocomplete = self._autocomplete(rng, navbar, content, box)
            if browser.autocomplete is not None:
                context.annotate(self.layer, classes.AUTOCOMPLETE, browser.autocomplete.bounding_box)

        if not tabbar.is_degenerate:
            context.annotate(self.layer, classes.TABBAR, tabbar)
        if not navbar.is_degenerate:
            context.annotate(self.layer, classes.NAVBAR, navbar)

        context.extras['browser'] = browser
        return browser

    def draw(self, surface: RasterSurface, region: ApplicationRegion, context: LayoutContext) -> None:
        section = region.section
        browser: BrowserSection = region.content
        appearance = section.appearance
        box = section.bounding_box

        region.chrome.draw_frame(surface, box, appearance, section.is_active, with_handle=False)
        surface.fill_rect(Rectangle(box.x, box.y, box.width, HANDLE_HEIGHT), HANDLE_COLOR[appearance])
        region.chrome.draw_controls(surface, browser.controls_box, appearance, section.is_active, region.hovered)
        self._draw_navbar(surface, browser, appearance)
        self._draw_tabbar(surface, browser, appearance)
        if browser.favorites_box is not None:
            self._draw_favorites(surface, browser, appearance)
        if not browser.content.is_degenerate:
            page = browser.tabs[browser.active_tab].image
            surface.blit(page, browser.content, source=cover_crop(page.size, (browser.content.width, browser.content.height)))
        if browser.autocomplete is not None:
            self._draw_autocomplete(surface, browser.autocomplete, appearance)

    def _draw_navbar(self, surface: RasterSurface, browser: BrowserSection, appearance: Appearance) -> None:
        navbar = browser.navbar
        if navbar.is_degenerate:
            return
        color = theme.FONT_COLOR[appearance]
        field_width = navbar.width / 2
        field = Rectangle(navbar.center[0] - field_width / 2, navbar.y + navbar.height / 4,
                          field_width, navbar.height / 2)
        surface.fill_rect(field, TEXTFIELD_COLOR[appearance], radius=5)
        url = f"https://{browser.tabs[browser.active_tab].domain}"
        surface.text(field.center, url, get_font(13), color, anchor='mm')

        # back / forward buttons
        for i in range(2):
            button = Rectangle(navbar.x + i * 25, field.y, 20, field.height)
            surface.fill_rect(button, TEXTFIELD_COLOR[appearance], radius=5)
            cx, cy = button.center
            direction = -1 if i == 0 else 1
            surface.line([(cx - 3 * direction, cy - 5), (cx + 3 * direction, cy), (cx - 3 * direction, cy + 5)], color, 2)

    def _draw_tabbar(self, surface: RasterSurface, browser: BrowserSection, appearance: Appearance) -> None:
        tabbar = browser.tabbar
        if tabbar.is_degenerate:
            return
        surface.fill_rect(tabbar, TABBAR_COLOR[appearance])
        tab_width = tabbar.width / len(browser.tabs)
        favicon_size = tabbar.height - 2 * TAB_MARGIN
        font = get_font(12)
        for i, page in enumerate(browser.tabs):
            tab = Rectangle(tabbar.x + i * tab_width, tabbar.y, tab_width, tabbar.height)
            if i == browser.active_tab:
                surface.fill_rect(tab, HANDLE_COLOR[appearance])
            elif i + 1 != browser.active_tab and i + 1 != len(browser.tabs):
                surface.line([(tab.x2, tab.y + TAB_MARGIN), (tab.x2, tab.y2 - TAB_MARGIN)], SEPARATOR_COLOR[appearance])
            surface.blit(page.favicon, Rectangle(tab.x + 10, tab.y + TAB_MARGIN, favicon_size, favicon_size))
            if tab_width > favicon_size + 40:
                surface.text((tab.x + favicon_size + 20, tab.center[1]), page.domain, font,
                             theme.FONT_COLOR[appearance], anchor='lm')

    def _draw_favorites(self, surface: RasterSurface, browser: BrowserSection, appearance: Appearance) -> None:
        favorites = browser.favorites_box
        surface.fill_rect(favorites, HANDLE_COLOR[appearance])
        surface.line([(favorites.x, favorites.y), (favorites.x2, favorites.y)], SEPARATOR_COLOR[appearance])
        names = '      '.join(page.domain.rsplit('.', 1)[0] for page in browser.favorites)
        surface.text(favorites.center, names, get_font(12), theme.FONT_COLOR[appearance], anchor='mm')

    def _draw_autocomplete(self, surface: RasterSurface, popup: Autocomplete, appearance: Appearance) -> None:
        box = popup.bounding_box
        surface.shadow(box.inset(5), width=20)
        surface.blur_region(box, theme.BLUR_SIZE)
        surface.fill_rect(box, AUTOCOMPLETE_COLOR[appearance], radius=5)
        color = theme.FONT_COLOR[appearance]
        if popup.is_grid:
            cell = box.width / popup.columns
            font = get_font(14, bold=True)
            for i, page in enumerate(popup.pages):
                x = box.x + (i % popup.columns) * cell
                y = box.y + (i // popup.columns) * cell
                image_size = cell - 60
                if image_size > 0:
                    surface.blit(page.favicon, Rectangle(x + 30, y + 20, image_size, image_size))
                surface.text((x + cell / 2, y + cell - 25), page.domain.rsplit('.', 1)[0], font, color, anchor='mt')
        else:
            font = get_font(14)
            icon_size = AUTOCOMPLETE_ROW_HEIGHT - 10
            for i, page in enumerate(popup.pages):
                top = box.y + i * AUTOCOMPLETE_ROW_HEIGHT
                surface.blit(page.favicon, Rectangle(box.x + 10, top + 5, icon_size, icon_size))
                surface.text((box.x + 20 + icon_size, top + AUTOCOMPLETE_ROW_HEIGHT / 2), page.domain, font, color, anchor='lm')
