from __future__ import annotations
from dataclasses import dataclass
from typing import List, Tuple

from ... import theme
from ...context import ApplicationSection, LayoutContext
from ...models.enums import Appearance
from ...models.geometry import Rectangle
from ...render.fonts import get_font
from ...render.surface import RasterSurface
from ...texts import FILE_NAMES, LOREM_IPSUM
from ...utils.random_utils import get_random_element, random_between, random_int_between
from .application import Application, ApplicationRegion

HANDLE_HEIGHT = 40
ENTRY_HEIGHT = 60
BUTTON_HEIGHT = HANDLE_HEIGHT - 15
BUTTON_WIDTH = 40
MAX_BUTTONS = 10
TEXT_PADDING = 10
MIN_SIDEBAR_WIDTH = 200
MAX_SIDEBAR_WIDTH = 500
MAX_ENTRIES = 20

HANDLE_COLOR = {Appearance.DARK: '#383838', Appearance.LIGHT: '#dcdcdc'}
BUTTON_COLOR = {Appearance.DARK: '#5e5e5e', Appearance.LIGHT: '#f5f5f5'}


@dataclass
class NotesSection:
    entries: List[Tuple[str, str]]
    active_entry: int
    controls_box: Rectangle
    buttons: List[Rectangle]
    sidebar: Rectangle
    content: Rectangle


class Notes(Application):
    """Note taking app: toolbar, list of notes in a sidebar, and the open note."""
    variant = 'notes'

    def layout_content(self, context: LayoutContext, section: ApplicationSection) -> NotesSection:
        rng = context.rng
        box = section.bounding_box

        entries = [(get_random_element(rng, FILE_NAMES), get_random_element(rng, LOREM_IPSUM))
                   for _ in range(random_int_between(rng, 1, MAX_ENTRIES))]
        active_entry = random_int_between(rng, 0, len(entries))

        controls = self.chrome.controls_box(box, HANDLE_HEIGHT)
        buttons = []
        offset = controls.x2 + 20
        center_y = box.y + HANDLE_HEIGHT / 2
        while len(buttons) < MAX_BUTTONS and offset + BUTTON_WIDTH < box.x2:
            buttons.append(Rectangle(offset, center_y - BUTTON_HEIGHT / 2, BUTTON_WIDTH, BUTTON_HEIGHT))
            offset += BUTTON_WIDTH + random_int_between(rng, 4, 30)

        sidebar_width = min(random_between(rng, MIN_SIDEBAR_WIDTH, MAX_SIDEBAR_WIDTH), box.width / 2)
        body_height = box.height - HANDLE_HEIGHT
        sidebar = Rectangle(box.x, box.y + HANDLE_HEIGHT, sidebar_width, body_height)
        content = Rectangle(sidebar.x2, sidebar.y, box.width - sidebar_width, body_height)

        notes = NotesSection(entries, active_entry, controls, buttons, sidebar, content)
        context.extras['notes'] = notes
        return notes

    def draw(self, surface: RasterSurface, region: ApplicationRegion, context: LayoutContext) -> None:
        section = region.section
        notes: NotesSection = region.content
        appearance = section.appearance
        box = section.bounding_box
        color = theme.FONT_COLOR[appearance]

        region.chrome.draw_frame(surface, box, appearance, section.is_active, with_handle=False)
        surface.fill_rect(Rectangle(box.x, box.y, box.width, HANDLE_HEIGHT), HANDLE_COLOR[appearance])
        region.chrome.draw_controls(surface, notes.controls_box, appearance, section.is_active, region.hovered)
        for button in notes.buttons:
            surface.fill_rect(button, BUTTON_COLOR[appearance], radius=5)

        if notes.sidebar.is_degenerate:
            return
        surface.fill_rect(notes.sidebar, theme.CONTENT_SIDEBAR[appearance])
        surface.line([(notes.sidebar.x2, notes.sidebar.y), (notes.sidebar.x2, notes.sidebar.y2)],
                     theme.CONTENT_DIVIDER[appearance])

        title_font = get_font(13, bold=True)
        text_font = get_font(12)
        for i, (title, text) in enumerate(notes.entries):
            if (i + 1) * ENTRY_HEIGHT > notes.sidebar.height:
                break
            entry = Rectangle(notes.sidebar.x, notes.sidebar.y + i * ENTRY_HEIGHT, notes.sidebar.width, ENTRY_HEIGHT)
            if i == notes.active_entry:
                surface.fill_rect(entry.inset(4), theme.HIGHLIGHT_COLOR[appearance], radius=5)
            surface.text((entry.x + TEXT_PADDING, entry.y + TEXT_PADDING), title, title_font, color)
            surface.text((entry.x + TEXT_PADDING, entry.y + ENTRY_HEIGHT / 2 + 4), text[:30], text_font, color)
            surface.line([(entry.x + TEXT_PADDING, entry.y2), (entry.x2 - TEXT_PADDING, entry.y2)],
                         theme.CONTENT_DIVIDER[appearance])

        if notes.content.is_degenerate:
            return
        title, text = notes.entries[notes.active_entry]
        x, y = notes.content.x + 2 * TEXT_PADDING, notes.content.y + 2 * TEXT_PADDING
        surface.text((x, y), title, get_font(20, bold=True), color)
        # one lorem line per row, cut to the visible width
        chars = max(0, int((notes.content.width - 4 * TEXT_PADDING) / 7))
        for row, line in enumerate(LOREM_IPSUM):
            top = y + 40 + row * 20
            if top + 20 > notes.content.y2:
                break
            surface.text((x, top), (line if row else text)[:chars], text_font, color)
