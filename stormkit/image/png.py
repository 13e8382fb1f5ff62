"""PNG decoding into RGBA images."""

from __future__ import annotations

from io import BytesIO

from PIL import Image as PILImage

from stormkit.image.image import Image


def _rgba_pixels(mode: str, raw: bytes) -> list[tuple[int, int, int, int]]:
    if mode == "RGB":
        return [(r, g, b, 255) for r, g, b in zip(raw[0::3], raw[1::3], raw[2::3])]
    if mode == "RGBA":
        return list(zip(raw[0::4], raw[1::4], raw[2::4], raw[3::4]))
    if mode == "L":
        return [(g, g, g, 255) for g in raw]
    if mode == "LA":
        return [(g, g, g, a) for g, a in zip(raw[0::2], raw[1::2])]
    raise ValueError(f"PNG mode {mode!r} is unsupported.")


def read_png(data: bytes) -> Image:
    """Decode PNG bytes into an image of (r, g, b, a) tuples."""
    try:
        source = PILImage.open(BytesIO(data))
    except (OSError, SyntaxError) as exc:
        raise ValueError("Unable to read PNG info.") from exc
    with source:
        if source.format != "PNG":
            raise ValueError("Unable to read PNG info.")
        if source.mode in ("P", "PA"):
            raise ValueError("PNG Indexed color type is unsupported.")
        try:
            source.load()
        except (OSError, SyntaxError) as exc:
            raise ValueError("Unable to read PNG payload.") from exc
        decoded = source.convert("L") if source.mode == "1" else source
        pixels = _rgba_pixels(decoded.mode, decoded.tobytes())
        return Image.from_pixels(pixels, decoded.width, decoded.height)