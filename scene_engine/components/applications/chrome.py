"""
Window decorations of the two desktop families.

Applications hold one ``WindowChrome`` and ask it for the content area and
the control buttons instead of subclassing a family specific window.
"""
from typing import Protocol

from ... import theme
from ...models.enums import Appearance, UIFamily
from ...models.geometry import Rectangle
from ...render.surface import RasterSurface


class WindowChrome(Protocol):
    handle_height: int

    def controls_box(self, box: Rectangle, handle_height: float = None) -> Rectangle:
        ...

    def content_area(self, box: Rectangle) -> Rectangle:
        ...

    def draw_frame(self, surface: RasterSurface, box: Rectangle, appearance: Appearance,
                   is_active: bool, with_handle: bool = True, hovered: int = -1) -> None:
        ...

    def draw_controls(self, surface: RasterSurface, box: Rectangle, appearance: Appearance,
                      is_active: bool, hovered: int = -1) -> None:
        ...


class MacChrome:
    handle_height = 30
    border_radius = 4
    button_radius = 7
    shadow_width = 40

    def controls_box(self, box: Rectangle, handle_height: float = None) -> Rectangle:
        center_y = box.y + (handle_height or self.handle_height) / 2
        r = self.button_radius
        return Rectangle(box.x + 20 - r, center_y - r, 8 * r, 2 * r)

    def content_area(self, box: Rectangle) -> Rectangle:
        return Rectangle(box.x, box.y + self.handle_height, box.width, box.height - self.handle_height)

    def draw_frame(self, surface, box, appearance, is_active, with_handle=True, hovered=-1):
        surface.shadow(box, width=self.shadow_width)
        surface.fill_rect(box, theme.CONTENT_BACKGROUND[appearance], radius=self.border_radius)
        surface.stroke_rect(box, theme.MAC_APP_BORDER[appearance], radius=self.border_radius)
        if not with_handle:
            return
        handle = Rectangle(box.x, box.y, box.width, self.handle_height)
        if is_active:
            surface.vertical_gradient(handle, theme.MAC_HANDLEBAR_START[appearance],
                                      theme.MAC_HANDLEBAR_STOP[appearance])
        else:
            surface.fill_rect(handle, theme.MAC_HANDLEBAR_INACTIVE[appearance],
                              radius=self.border_radius, corners=(True, True, False, False))
        self.draw_controls(surface, self.controls_box(box), appearance, is_active, hovered)

    def draw_controls(self, surface, box, appearance, is_active, hovered=-1):
        colors = [theme.MAC_CLOSE_COLOR, theme.MAC_MINIMIZE_COLOR, theme.MAC_MAXIMIZE_COLOR]
        r = self.button_radius
        cy = box.y + box.height / 2
        for i, color in enumerate(colors):
            cx = box.x + r + i * 3 * r
            surface.fill_ellipse(cx, cy, r, color if is_active else theme.MAC_INACTIVE_COLOR[appearance])


class WinChrome:
    handle_height = 34
    button_width = 46
    shadow_width = 6

    def controls_box(self, box: Rectangle, handle_height: float = None) -> Rectangle:
        width = 3 * self.button_width
        return Rectangle(box.x2 - width, box.y, width, handle_height or self.handle_height)

    def content_area(self, box: Rectangle) -> Rectangle:
        return Rectangle(box.x, box.y + self.handle_height, box.width, box.height - self.handle_height)

    def draw_frame(self, surface, box, appearance, is_active, with_handle=True, hovered=-1):
        surface.shadow(box, width=self.shadow_width)
        surface.fill_rect(box, theme.CONTENT_BACKGROUND[appearance])
        surface.stroke_rect(box, theme.WIN_APP_BORDER)
        if not with_handle:
            return
        surface.fill_rect(Rectangle(box.x, box.y, box.width, self.handle_height), theme.WIN_HANDLEBAR[appearance])
        self.draw_controls(surface, self.controls_box(box), appearance, is_active, hovered)

    def draw_controls(self, surface, box, appearance, is_active, hovered=-1):
        color = theme.FONT_COLOR[appearance]
        w, h = self.button_width, box.height
        # minimize, maximize, close from left to right
        for i in range(3):
            cell = Rectangle(box.x + i * w, box.y, w, h)
            if i == hovered:
                surface.fill_rect(cell, theme.WIN_CLOSE_COLOR if i == 2 else theme.WIN_BUTTON_HOVER[appearance])
            cx, cy = cell.center
            if i == 0:
                surface.line([(cx - 5, cy), (cx + 5, cy)], color)
            elif i == 1:
                surface.stroke_rect(Rectangle(cx - h / 6, cy - h / 6, h / 3, h / 3), color)
            else:
                surface.line([(cx - 5, cy - 5), (cx + 5, cy + 5)], color)
                surface.line([(cx - 5, cy + 5), (cx + 5, cy - 5)], color)


CHROMES = {
    UIFamily.MAC: MacChrome(),
    UIFamily.WINDOWS: WinChrome(),
}
