"""A small paint editor for SLImage files."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from slimage.display import ICON_NAME, WINDOW_TITLE, image_to_ppm
from slimage.image import SLImage, create_empty_image, write_image

DEFAULT_COLOR = 0xFF000000
DEFAULT_RADIUS = 10

_U32_MASK = 0xFFFFFFFF
_U8_MASK = 0xFF

# X11 keycodes mapped to the colour channel step they apply.
_COLOR_KEYS = {
    79: 0x00050000,  # numpad 7: red up
    83: -0x00050000,  # numpad 4: red down
    80: 0x00000500,  # numpad 8: green up
    84: -0x00000500,  # numpad 5: green down
    81: 0x00000005,  # numpad 9: blue up
    85: -0x00000005,  # numpad 6: blue down
}
_RADIUS_KEYS = {
    20: -1,  # minus
    21: 1,  # plus
}
KEY_SAVE_AND_QUIT = 24  # q
KEY_SAVE = 39  # s
KEY_QUIT = 9  # escape


class EditorAction(enum.Enum):
    """What a key press did to the editor."""

    NONE = "none"
    COLOR = "color"
    RADIUS = "radius"
    SAVE = "save"
    SAVE_AND_QUIT = "save_and_quit"
    QUIT = "quit"

    @property
    def quits(self) -> bool:
        """Whether the editor should close after this action."""
        return self in (EditorAction.SAVE_AND_QUIT, EditorAction.QUIT)


@dataclass
class EditorState:
    """The image being edited together with the current brush."""

    image: SLImage
    color: int = DEFAULT_COLOR
    radius: int = DEFAULT_RADIUS

    def handle_key(self, keycode: int) -> EditorAction:
        """Apply the key with X11 ``keycode`` and report what it did."""
        action = EditorAction.NONE
        if keycode in _COLOR_KEYS:
            self.color = (self.color + _COLOR_KEYS[keycode]) & _U32_MASK
            print(f"Color: {self.color:X}")
            action = EditorAction.COLOR
        elif keycode in _RADIUS_KEYS:
            self.radius = (self.radius + _RADIUS_KEYS[keycode]) & _U8_MASK
            print(f"Brush Radius: {self.radius}")
            action = EditorAction.RADIUS
        elif keycode == KEY_SAVE_AND_QUIT:
            write_image(self.image)
            print("Saved image")
            action = EditorAction.SAVE_AND_QUIT
        elif keycode == KEY_SAVE:
            write_image(self.image)
            print("Saved image")
            action = EditorAction.SAVE
        elif keycode == KEY_QUIT:
            action = EditorAction.QUIT

        print(keycode)
        return action

    def paint(self, x: int, y: int) -> int:
        """Paint a filled circle of the brush colour centred on (x, y).

        Pixels outside the image are left alone. Returns how many pixels
        were painted.
        """
        image = self.image
        r = self.radius
        limit = r * r
        painted = 0
        for py in range(max(y - r, 0), min(y + r, image.y_size - 1) + 1):
            dy = py - y
            for px in range(max(x - r, 0), min(x + r, image.x_size - 1) + 1):
                dx = px - x
                if dx * dx + dy * dy <= limit:
                    image.data[py * image.x_size + px] = self.color
                    painted += 1
        return painted


def create_editor_window(image: SLImage) -> None:
    """Open an editor window on ``image`` and run it until it is closed."""
    import tkinter

    state = EditorState(image)

    try:
        root = tkinter.Tk()
    except tkinter.TclError as exc:
        raise RuntimeError("Failed to open display.") from exc

    try:
        root.title(WINDOW_TITLE)
        root.iconname(ICON_NAME)
        root.configure(background="white")
        canvas = tkinter.Canvas(
            root,
            width=image.x_size,
            height=image.y_size,
            highlightthickness=0,
            background="white",
        )
        canvas.pack()
        holder: dict[str, tkinter.PhotoImage] = {}

        def redraw() -> None:
            photo = tkinter.PhotoImage(master=root, data=image_to_ppm(image), format="PPM")
            holder["photo"] = photo
            canvas.delete("all")
            canvas.create_image(0, 0, anchor="nw", image=photo)

        def on_key(event: tkinter.Event) -> None:
            if state.handle_key(event.keycode).quits:
                root.quit()

        def on_button(event: tkinter.Event) -> None:
            state.paint(event.x, event.y)
            redraw()

        redraw()
        root.bind("<KeyPress>", on_key)
        canvas.bind("<ButtonPress>", on_button)
        root.focus_force()
        root.mainloop()
    finally:
        try:
            root.destroy()
        except tkinter.TclError:
            pass


def create_default_editor_window(x_size: int, y_size: int) -> None:
    """Open an editor window on a blank white image."""
    create_editor_window(create_empty_image(x_size, y_size))