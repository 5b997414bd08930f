"""Swipe-style image gallery: layout helpers, navigation state and a canvas widget."""

from __future__ import annotations

import enum
import math
import tkinter as tk
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from PIL import Image, ImageTk

from wxanim.animator import Animator
from wxanim.easing import AnimatedValue, ease_in_out_cubic

ANIMATION_DURATION_MS = 200
NAV_WIDTH_DIP = 30
ARROW_LINE_WIDTH_DIP = 5
DOT_RADIUS_DIP = 4
DOT_SPACING_DIP = 6
OVERLAY_COLOUR = "#ffffff"
OVERLAY_STIPPLE = "gray25"

Line = Tuple[Tuple[float, float], Tuple[float, float]]


class BitmapScaling(enum.IntEnum):
    """How an image is scaled into its cell."""

    CENTER = 0
    FIT = 1
    FILL_WIDTH = 2
    FILL_HEIGHT = 3


def scaled_image_size(
    image_width: float,
    image_height: float,
    area_width: float,
    area_height: float,
    scaling: BitmapScaling,
) -> Tuple[float, float]:
    """Return the drawn ``(width, height)`` of an image inside an area."""
    if image_width <= 0 or image_height <= 0:
        raise ValueError("Image dimensions must be positive")
    width, height = float(image_width), float(image_height)
    if scaling == BitmapScaling.FIT:
        scale = min(area_width / width, area_height / height)
    elif scaling == BitmapScaling.FILL_WIDTH:
        scale = area_width / width
    elif scaling == BitmapScaling.FILL_HEIGHT:
        scale = area_height / height
    else:
        scale = 1.0
    return width * scale, height * scale


def dots_layout(
    width: int, height: int, dot_count: int, dot_radius: int, dot_spacing: int
) -> List[Tuple[int, int]]:
    """Return the top-left corner of each page-indicator dot.

    The dots form a row centred horizontally near the bottom of the area;
    each dot is ``2 * dot_radius`` across.
    """
    if dot_count <= 0:
        return []
    dots_width = dot_count * dot_radius * 2 + (dot_count - 1) * dot_spacing
    x0 = width // 2 - dots_width // 2
    y = height - dot_radius * 4 - dot_radius
    step = dot_radius * 2 + dot_spacing
    return [(x0 + i * step, y) for i in range(dot_count)]


class GalleryNavigator:
    """Selection, arrow visibility and slide animation of a gallery."""

    def __init__(self, animator: Animator) -> None:
        self.animator = animator
        self.image_count = 0
        self.selected_index = 0
        self.offset = 0.0
        self.show_left_arrow = False
        self.show_right_arrow = False
        self.on_change: Optional[Callable[[], None]] = None

    @property
    def scroll_position(self) -> float:
        """Index of the image at the left edge, fractional while sliding."""
        if self.animator.is_running():
            return self.selected_index + self.offset
        return float(self.selected_index)

    def animate_to_previous(self) -> bool:
        """Slide to the previous image; return whether a slide started."""
        if self.animator.is_running() or self.selected_index <= 0:
            return False
        self._start_animation(0.0, -1.0, self.selected_index - 1)
        return True

    def animate_to_next(self) -> bool:
        """Slide to the next image; return whether a slide started."""
        if self.animator.is_running() or self.selected_index >= self.image_count - 1:
            return False
        self._start_animation(0.0, 1.0, self.selected_index + 1)
        return True

    def hover(self, x: float, y: float, width: float, nav_width: float) -> None:
        """Update arrow visibility for the pointer at ``(x, y)``."""
        if self._in_left(x, y, nav_width):
            self.show_left_arrow = True
        elif self._in_right(x, y, width, nav_width):
            self.show_right_arrow = True
        else:
            self.show_left_arrow = False
            self.show_right_arrow = False
        self._changed()

    def leave(self) -> None:
        """Hide both arrows when the pointer leaves the gallery."""
        self.show_left_arrow = False
        self.show_right_arrow = False
        self._changed()

    def click(self, x: float, y: float, width: float, nav_width: float) -> bool:
        """Handle a click; return whether it hit a visible arrow."""
        if self.show_left_arrow and self._in_left(x, y, nav_width):
            self.animate_to_previous()
            return True
        if self.show_right_arrow and self._in_right(x, y, width, nav_width):
            self.animate_to_next()
            return True
        return False

    def key(self, keysym: str) -> bool:
        """Handle a key press; return whether it was an arrow key."""
        if keysym == "Left":
            self.animate_to_previous()
            return True
        if keysym == "Right":
            self.animate_to_next()
            return True
        return False

    @staticmethod
    def _in_left(x: float, y: float, nav_width: float) -> bool:
        return 0 <= x < nav_width and y >= 0

    @staticmethod
    def _in_right(x: float, y: float, width: float, nav_width: float) -> bool:
        return width - nav_width <= x < width and y >= 0

    def _changed(self) -> None:
        if self.on_change is not None:
            self.on_change()

    def _start_animation(self, start: float, target: float, index_target: int) -> None:
        def on_value(_sender: AnimatedValue, _t_norm: float, value: float) -> None:
            self.offset = value

        def on_stop() -> None:
            self.selected_index = index_target
            self.offset = 0.0
            self._changed()

        self.animator.animated_values = [
            AnimatedValue(start, target, on_value, "xOffset", ease_in_out_cubic)
        ]
        self.animator.on_iteration = self._changed
        self.animator.on_stop = on_stop
        self.animator.start(ANIMATION_DURATION_MS)


def _arrow_lines(cx: float, cy: float, length: float, angle: float) -> List[Line]:
    rotation = -math.pi / 4 + angle
    cos_r, sin_r = math.cos(rotation), math.sin(rotation)

    def transform(px: float, py: float) -> Tuple[float, float]:
        px -= length / 4
        py -= length / 4
        return cx + px * cos_r - py * sin_r, cy + px * sin_r + py * cos_r

    corner = transform(0, 0)
    return [(corner, transform(length, 0)), (corner, transform(0, length))]


class BitmapGallery(tk.Canvas):
    """A canvas showing one image at a time, with arrows and page dots."""

    def __init__(self, master: tk.Misc, **kwargs) -> None:
        kwargs.setdefault("highlightthickness", 0)
        kwargs.setdefault("background", "black")
        kwargs.setdefault("takefocus", 1)
        super().__init__(master, **kwargs)
        self.images: List[Image.Image] = []
        self.scaling = BitmapScaling.CENTER
        self.navigator = GalleryNavigator(Animator(schedule=self.after))
        self.navigator.on_change = self.redraw
        self._photos: List[ImageTk.PhotoImage] = []
        self._cache: Dict[Tuple[int, int, int, BitmapScaling], ImageTk.PhotoImage] = {}

        self.bind("<Configure>", lambda _event: self.redraw())
        self.bind("<Key>", self._on_key)
        self.bind("<Button-1>", self._on_click)
        self.bind("<Double-Button-1>", self._on_click)
        self.bind("<Motion>", self._on_motion)
        self.bind("<Leave>", lambda _event: self.navigator.leave())

    def set_images(self, images: Sequence[Image.Image]) -> None:
        """Replace the shown images and redraw."""
        self.images = list(images)
        self.navigator.image_count = len(self.images)
        self._cache.clear()
        self.redraw()

    def _dip_scale(self) -> float:
        return self.winfo_fpixels("1i") / 96.0

    def _from_dip(self, value: float) -> int:
        return round(value * self._dip_scale())

    def _nav_width(self) -> int:
        return self._from_dip(NAV_WIDTH_DIP)

    def _cell_photo(self, index: int, width: int, height: int) -> ImageTk.PhotoImage:
        key = (index, width, height, self.scaling)
        cached = self._cache.get(key)
        if cached is not None:
            return cached
        image = self.images[index]
        scale = self._dip_scale()
        dip_w, dip_h = width / scale, height / scale
        w, h = scaled_image_size(image.width, image.height, dip_w, dip_h, self.scaling)
        pixel_w = max(1, round(w * scale))
        pixel_h = max(1, round(h * scale))
        resized = image.convert("RGBA").resize((pixel_w, pixel_h))
        cell = Image.new("RGBA", (width, height), (0, 0, 0, 0))
        offset = (round((dip_w - w) / 2 * scale), round((dip_h - h) / 2 * scale))
        cell.paste(resized, offset, resized)
        photo = ImageTk.PhotoImage(cell, master=self)
        self._cache[key] = photo
        return photo

    def redraw(self) -> None:
        """Clear the canvas and draw the gallery at the current size."""
        self.delete("all")
        self._photos = []
        if not self.images:
            return
        width, height = self.winfo_width(), self.winfo_height()
        if width <= 1 or height <= 1:
            return

        position = self.navigator.scroll_position
        for index in range(len(self.images)):
            left = (index - position) * width
            if left <= -width or left >= width:
                continue
            photo = self._cell_photo(index, width, height)
            self._photos.append(photo)
            self.create_image(left, 0, image=photo, anchor="nw")

        nav_width = self._nav_width()
        length = nav_width * 2 // 3
        line_width = self._from_dip(ARROW_LINE_WIDTH_DIP)
        if self.navigator.show_left_arrow:
            self._draw_navigation(0, nav_width, height, length, line_width, 0.0)
        if self.navigator.show_right_arrow:
            self._draw_navigation(
                width - nav_width, nav_width, height, length, line_width, math.pi
            )

        if len(self.images) > 1:
            radius = self._from_dip(DOT_RADIUS_DIP)
            spacing = self._from_dip(DOT_SPACING_DIP)
            dots = dots_layout(width, height, len(self.images), radius, spacing)
            for index, (x, y) in enumerate(dots):
                options = {"fill": OVERLAY_COLOUR, "outline": ""}
                if index != self.navigator.selected_index:
                    options["stipple"] = OVERLAY_STIPPLE
                self.create_oval(x, y, x + radius * 2, y + radius * 2, **options)

    def _draw_navigation(
        self,
        left: int,
        nav_width: int,
        height: int,
        length: float,
        line_width: int,
        angle: float,
    ) -> None:
        self.create_rectangle(
            left,
            0,
            left + nav_width,
            height,
            fill=OVERLAY_COLOUR,
            outline="",
            stipple=OVERLAY_STIPPLE,
        )
        cx, cy = left + nav_width // 2, height // 2
        for (x0, y0), (x1, y1) in _arrow_lines(cx, cy, length, angle):
            self.create_line(
                x0, y0, x1, y1, fill=OVERLAY_COLOUR, width=line_width, capstyle="round"
            )

    def _on_key(self, event: tk.Event) -> Optional[str]:
        if self.navigator.key(event.keysym):
            return "break"
        return None

    def _on_click(self, event: tk.Event) -> None:
        self.focus_set()
        self.navigator.click(event.x, event.y, self.winfo_width(), self._nav_width())

    def _on_motion(self, event: tk.Event) -> None:
        self.navigator.hover(event.x, event.y, self.winfo_width(), self._nav_width())