# slimage

A small toolkit for the SLImage raster format (`.slmg`). It reads and writes
image files, shows them in a viewer window and paints on a canvas with a
round brush. The windows use `tkinter` from the standard library. Nothing
outside the standard library is needed.

## The file format

An `.slmg` file is a flat, uncompressed stream. All integers are little-endian:

| Offset | Size               | Contents                               |
|--------|--------------------|----------------------------------------|
| 0      | 4 bytes            | magic header `FF A5 FF E8`             |
| 4      | 4 bytes            | width (`uint32`)                       |
| 8      | 4 bytes            | height (`uint32`)                      |
| 12     | 4 × width × height | pixels, one `uint32` each, row by row  |

`read_image` raises `InvalidImageError`, which is a subclass of
`ValueError`, in these cases:

- the file does not start with the magic header;
- the header is cut short;
- there are fewer pixels than width × height.

When an image is shown, each pixel is read as `0x??RRGGBB`. The top byte is
ignored.

## Installation

```
pip install .
```

## Command line

The `slimage` command takes a mode letter and a file name. Only the first
letter of the mode is looked at. An empty file name falls back to
`image.slmg`.

```
slimage w <filename> <width> <height>   # write a generated gradient test image
slimage r <filename>                    # read an image, print its size and view it
slimage e <filename>                    # open the editor on a blank 512x512 canvas
```

- **`w`** writes a tangent-based gradient pattern of the given size.
  - Width and height are parsed leniently: a leading integer is taken, and text with none counts as 0.
  - A negative size prints an error and exits with status 1.
- **`r`** prints `xSize: …` and `ySize: …`, then opens the viewer. Any key press closes the viewer.
  - A file that is not a valid SLImage prints `Not a valid SLImage` and exits with status 2.
  - A file that cannot be opened prints the error and exits with status 1.
- **`e`** needs a file name argument but does not use it. The editor always starts on a blank white 512×512 canvas named `unnamed.slmg`.
- **Missing arguments** print the usage line and exit with status 1.
- **An unknown mode** prints `Valid modes: w (Write), r (Read)` and exits with status 0.
- **No display.** If a window cannot be opened, the message is printed and the exit status is 1.

### Editor keys

Keys are matched by their X11 keycodes:

| Key              | Effect                                              |
|------------------|-----------------------------------------------------|
| numpad 7 / 4     | red part of the colour up / down by `0x05`          |
| numpad 8 / 5     | green part up / down by `0x05`                      |
| numpad 9 / 6     | blue part up / down by `0x05`                       |
| `-` / `=`        | brush radius down / up by 1                         |
| `s`              | save the image to its file name                     |
| `q`              | save the image and close the editor                 |
| Escape           | close the editor without saving                     |

- **Colour.** It starts at `0xFF000000` and wraps around as a 32-bit value.
- **Radius.** It starts at 10 and wraps around within 0–255.
- **Painting.** A mouse click paints a filled circle in the current colour. Parts of the circle that fall outside the image are left alone.
- **Console output.** Each key press prints its keycode. Colour and radius changes print the new value.

## Library use

```python
from slimage.image import (
    InvalidImageError,
    SLImage,
    create_empty_image,
    generate_test_data,
    read_image,
    white_image,
    write,
    write_image,
)

# Write a 64x32 gradient test image and read it back
pixels = generate_test_data(64, 32)
write("gradient.slmg", 64, 32, pixels)

image = read_image("gradient.slmg")
print(image.x_size, image.y_size, image.size)  # size is x_size * y_size

# A blank white image (every pixel 0xFFFFFFFF), saved as unnamed.slmg
blank = create_empty_image(16, 16)
write_image(blank)
```

`write` raises `ValueError` in these cases:

- a size does not fit in an unsigned 32-bit integer;
- fewer than width × height pixels are given;
- a pixel value is not an unsigned 32-bit integer.

Viewing and editing:

```python
from slimage.display import image_to_ppm, view_image
from slimage.editor import (
    EditorAction,
    EditorState,
    create_default_editor_window,
    create_editor_window,
)

ppm_bytes = image_to_ppm(image)   # the image as a binary (P6) PPM
view_image(image)                 # open a viewer window
create_editor_window(image)       # paint on an existing image
create_default_editor_window(256, 256)
```

`view_image` and the editor functions raise `RuntimeError` when no display
can be opened.

`EditorState` holds the image, the colour and the brush radius, and can be
driven without a window:

- `handle_key(keycode)` returns an `EditorAction`: `NONE`, `COLOR`, `RADIUS`, `SAVE`, `SAVE_AND_QUIT` or `QUIT`. The action's `quits` property tells whether the editor should close.
- `paint(x, y)` stamps the brush onto the image and returns how many pixels it painted.

## What it does not do

- The editor cannot be pointed at an existing file from the command line. It always starts on a blank canvas named `unnamed.slmg`, and saving writes to that name in the current directory.
- `create_editor_window` can edit a loaded image from Python.
- There is no conversion to or from other image formats, apart from the PPM bytes that `image_to_ppm` returns.

## Running the tests

```
pip install ".[test]"
pytest
```