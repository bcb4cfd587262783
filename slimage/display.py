"""Showing an SLImage in a window."""

from __future__ import annotations

from slimage.image import SLImage

WINDOW_TITLE = "SLImage Viewer"
ICON_NAME = "Hello"


def image_to_ppm(image: SLImage) -> bytes:
    """Encode ``image`` as a binary PPM, reading each pixel as 0x??RRGGBB."""
    count = image.size
    if len(image.data) < count:
        raise ValueError(f"image needs {count} pixels, has {len(image.data)}")

    header = f"P6\n{image.x_size} {image.y_size}\n255\n".encode("ascii")
    body = bytearray()
    for pixel in image.data[:count]:
        body += bytes(((pixel >> 16) & 0xFF, (pixel >> 8) & 0xFF, pixel & 0xFF))
    return header + bytes(body)


def view_image(image: SLImage) -> None:
    """Open a window showing ``image``; it closes on any key press."""
    import tkinter

    try:
        root = tkinter.Tk()
    except tkinter.TclError as exc:
        raise RuntimeError("Failed to open display.") from exc

    try:
        root.title(WINDOW_TITLE)
        root.iconname(ICON_NAME)
        root.configure(background="white")
        photo = tkinter.PhotoImage(master=root, data=image_to_ppm(image), format="PPM")
        canvas = tkinter.Canvas(
            root,
            width=image.x_size,
            height=image.y_size,
            highlightthickness=0,
            background="white",
        )
        canvas.create_image(0, 0, anchor="nw", image=photo)
        canvas.pack()
        root.bind("<KeyPress>", lambda _event: root.destroy())
        root.focus_force()
        root.mainloop()
    finally:
        try:
            root.destroy()
        except tkinter.TclError:
            pass