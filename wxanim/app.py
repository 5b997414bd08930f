"""Main window: a gallery with a File menu for opening images."""

from __future__ import annotations

import tkinter as tk
from tkinter import filedialog
from typing import Iterable, List, Optional, Sequence

from PIL import Image

from wxanim.gallery import BitmapGallery, BitmapScaling

WINDOW_TITLE = "Hello World"
IMAGE_FILETYPES = [("Image files", "*.png *.jpeg *.jpg")]


def load_images(paths: Iterable[str]) -> List[Image.Image]:
    """Load every image file in ``paths``, in order."""
    images = []
    for path in paths:
        with Image.open(path) as image:
            image.load()
            images.append(image.copy())
    return images


class MainWindow:
    """The application window holding the gallery."""

    def __init__(self, root: tk.Tk) -> None:
        self.root = root
        root.title(WINDOW_TITLE)

        self.gallery = BitmapGallery(root)
        self.gallery.scaling = BitmapScaling.FILL_WIDTH
        self.gallery.pack(fill="both", expand=True)

        menubar = tk.Menu(root)
        file_menu = tk.Menu(menubar, tearoff=False)
        file_menu.add_command(
            label="Open...", accelerator="Ctrl+O", command=self.open_files
        )
        menubar.add_cascade(label="File", menu=file_menu)
        root.config(menu=menubar)
        root.bind_all("<Control-o>", lambda _event: self.open_files())

    def open_files(self) -> None:
        """Ask for image files and show them in the gallery."""
        paths = filedialog.askopenfilenames(
            parent=self.root, title="Open image", filetypes=IMAGE_FILETYPES
        )
        if not paths:
            return
        self.gallery.set_images(load_images(paths))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the gallery application."""
    root = tk.Tk()
    MainWindow(root)
    root.mainloop()
    return 0