"""
Reusable GUI Components
"""
import customtkinter as ctk
from typing import Optional

from PIL import Image, ImageTk

from config import CLOCK_CONFIG, GRADIENT_CONFIG
from gradient_renderer import render_frame
from logger import get_logger

logger = get_logger(__name__)


class GradientCanvas(ctk.CTkCanvas):
    """Full-window canvas: gradient background with centered time text"""

    def __init__(self, parent, **kwargs):
        super().__init__(parent, highlightthickness=0, bd=0, **kwargs)

        self.phase: Optional[float] = None
        self._size = (1, 1)
        self._photo: Optional[ImageTk.PhotoImage] = None

        self._create_items()

        self.bind("<Configure>", self._on_resize)

    def _create_items(self):
        self.image_item = self.create_image(0, 0, anchor="nw")
        self.text_item = self.create_text(
            0, 0,
            text="",
            font=CLOCK_CONFIG["font"],
            fill=CLOCK_CONFIG["text_color"],
            anchor="center"
        )

    def _on_resize(self, event):
        size = (max(1, event.width), max(1, event.height))
        if size == self._size:
            return

        logger.debug("Canvas resized to %sx%s", *size)
        self._size = size
        self.coords(self.text_item, size[0] // 2, size[1] // 2)

        if self.phase is not None:
            self.paint_phase(self.phase)

    def paint_phase(self, phase: float):
        """Fill the canvas with the palette gradient at the given phase"""
        self.phase = phase
        self._show(render_frame(self._size, phase, scale=GRADIENT_CONFIG["render_scale"]))

    def _show(self, image: Image.Image):
        if self._photo is not None and (self._photo.width(), self._photo.height()) == image.size:
            self._photo.paste(image)
        else:
            # Tk drops the image unless a reference is kept
            self._photo = ImageTk.PhotoImage(image)
            self.itemconfigure(self.image_item, image=self._photo)

    def set_time(self, text: str):
        self.itemconfigure(self.text_item, text=text)
