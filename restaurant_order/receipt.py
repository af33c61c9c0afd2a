"""Receipt layout and PDF export."""

from __future__ import annotations

import io
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, Union

from restaurant_order.config import (
    CURRENCY_SYMBOL,
    FONT_PATH_ENV,
    RECEIPT_DPI,
    RECEIPT_FONT_PATH,
    RECEIPT_PAGE_HEIGHT_MM,
    RECEIPT_PAGE_WIDTH_MM,
    receipt_output_dir,
)
from restaurant_order.constant import BUSINESS_ADDRESS, BUSINESS_NAME, BUSINESS_PHONE, RECEIPT_FOOTER
from restaurant_order.log import get_logger
from restaurant_order.models import ReceiptRecord

_log = get_logger("receipt")

# Layout positions in millimetres from the top-left corner of an A4 page.
_CENTER_X = 105
_LEFT_X = 20
_RIGHT_RULE_X = 190
_QTY_X = 120
_PRICE_X = 150
_AMOUNT_X = 180
_TOTALS_LABEL_X = 140
_TABLE_HEADER_Y = 85
_ROW_STEP = 8
_FOOTER_Y = 270

_FONT_CANDIDATES: dict[str, tuple[str, ...]] = {
    "normal": (
        "/usr/share/fonts/TTF/DejaVuSans.ttf",
        "/usr/share/fonts/dejavu/DejaVuSans.ttf",
        "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
        "/usr/share/fonts/liberation/LiberationSans-Regular.ttf",
    ),
    "bold": (
        "/usr/share/fonts/TTF/DejaVuSans-Bold.ttf",
        "/usr/share/fonts/dejavu/DejaVuSans-Bold.ttf",
        "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",
        "/usr/share/fonts/liberation/LiberationSans-Bold.ttf",
    ),
    "italic": (
        "/usr/share/fonts/TTF/DejaVuSans-Oblique.ttf",
        "/usr/share/fonts/dejavu/DejaVuSans-Oblique.ttf",
        "/usr/share/fonts/truetype/dejavu/DejaVuSans-Oblique.ttf",
        "/usr/share/fonts/liberation/LiberationSans-Italic.ttf",
    ),
}


@dataclass(frozen=True)
class TextOp:
    """Text anchored at its baseline; `x` is the left edge or the centre."""

    x: float
    y: float
    text: str
    size: int = 10
    weight: str = "normal"
    align: str = "left"


@dataclass(frozen=True)
class LineOp:
    x0: float
    y0: float
    x1: float
    y1: float


DrawOp = Union[TextOp, LineOp]
ReceiptLayout = list[DrawOp]


class ReceiptCanvas(Protocol):
    """Drawing surface the formatter needs: positioned text, lines and export."""

    def text(self, x: float, y: float, text: str, *, size: int, weight: str, align: str) -> None: ...

    def line(self, x0: float, y0: float, x1: float, y1: float) -> None: ...

    def to_bytes(self) -> bytes: ...


def format_money(value: float) -> str:
    """Format an amount for display, rounding only here."""
    return f"{CURRENCY_SYMBOL}{value:.2f}"


def receipt_filename(record: ReceiptRecord) -> str:
    return f"receipt-{record.order_number}.pdf"


def layout_receipt(record: ReceiptRecord) -> ReceiptLayout:
    """
    Lay out a receipt as ordered draw operations.

    Rows advance by a fixed step and are not paginated: a long order runs
    into the totals block and footer.
    """
    ops: ReceiptLayout = [
        TextOp(_CENTER_X, 20, BUSINESS_NAME, size=18, weight="bold", align="center"),
        TextOp(_CENTER_X, 30, BUSINESS_ADDRESS, size=12, align="center"),
        TextOp(_CENTER_X, 35, f"Phone: {BUSINESS_PHONE}", size=12, align="center"),
        TextOp(_CENTER_X, 50, "RECEIPT", size=14, weight="bold", align="center"),
        TextOp(_LEFT_X, 60, f"Date: {record.created_at.strftime('%m/%d/%Y')}"),
        TextOp(_LEFT_X, 65, f"Time: {record.created_at.strftime('%I:%M:%S %p')}"),
        TextOp(_LEFT_X, 70, f"Order #: {record.order_number}"),
    ]
    if record.payment_method:
        ops.append(TextOp(_LEFT_X, 75, f"Payment Method: {record.payment_method}"))

    y = _TABLE_HEADER_Y
    for x, heading in ((_LEFT_X, "Item"), (_QTY_X, "Qty"), (_PRICE_X, "Price"), (_AMOUNT_X, "Amount")):
        ops.append(TextOp(x, y, heading, weight="bold"))
    ops.append(LineOp(_LEFT_X, y + 2, _RIGHT_RULE_X, y + 2))

    y += 10
    for item in record.items:
        ops.append(TextOp(_LEFT_X, y, item.name))
        ops.append(TextOp(_QTY_X, y, str(item.quantity)))
        ops.append(TextOp(_PRICE_X, y, format_money(item.price)))
        ops.append(TextOp(_AMOUNT_X, y, format_money(item.price * item.quantity)))
        y += _ROW_STEP

    ops.append(LineOp(_LEFT_X, y, _RIGHT_RULE_X, y))
    y += _ROW_STEP

    totals = record.totals
    for label, value, weight in (
        ("Subtotal:", totals.subtotal, "normal"),
        ("Tax:", totals.tax, "normal"),
        ("Total:", totals.total, "bold"),
    ):
        ops.append(TextOp(_TOTALS_LABEL_X, y, label, weight=weight))
        ops.append(TextOp(_AMOUNT_X, y, format_money(value), weight=weight))
        y += _ROW_STEP

    ops.append(TextOp(_CENTER_X, _FOOTER_Y, RECEIPT_FOOTER, weight="italic", align="center"))
    return ops


def resolve_font_path(weight: str = "normal") -> str | None:
    """
    Resolve a TrueType font for the given weight.

    Resolution order:
    1. RESTAURANT_ORDER_FONT_PATH (if set)
    2. RECEIPT_FONT_PATH (regular weight only)
    3. Known Linux fallbacks for the weight

    Returns None when nothing usable exists; the canvas then uses Pillow's
    built-in font.
    """
    env_override = os.environ.get(FONT_PATH_ENV, "").strip()
    candidates: list[str] = []
    if env_override:
        candidates.append(env_override)
    if weight == "normal":
        candidates.append(RECEIPT_FONT_PATH)
    candidates.extend(_FONT_CANDIDATES.get(weight, ()))
    if weight != "normal":
        candidates.extend(_FONT_CANDIDATES["normal"])

    seen: set[str] = set()
    for candidate in candidates:
        if not candidate or candidate in seen:
            continue
        seen.add(candidate)
        if Path(candidate).is_file():
            return candidate
    return None


class PillowCanvas:
    """Raster page drawn with Pillow and exported as a single-page PDF."""

    def __init__(
        self,
        width_mm: float = RECEIPT_PAGE_WIDTH_MM,
        height_mm: float = RECEIPT_PAGE_HEIGHT_MM,
        dpi: int = RECEIPT_DPI,
    ) -> None:
        from PIL import Image, ImageDraw

        self.dpi = dpi
        self.image = Image.new("L", (self._px(width_mm), self._px(height_mm)), color=255)
        self._draw = ImageDraw.Draw(self.image)
        self._fonts: dict[tuple[int, str], object] = {}

    def _px(self, mm: float) -> int:
        return int(round(mm * self.dpi / 25.4))

    def _font(self, size: int, weight: str) -> object:
        key = (size, weight)
        font = self._fonts.get(key)
        if font is not None:
            return font

        from PIL import ImageFont

        pixel_size = max(6, int(round(size * self.dpi / 72)))
        font_path = resolve_font_path(weight)
        if font_path is not None:
            try:
                font = ImageFont.truetype(font_path, pixel_size)
            except OSError:
                font = None
        if font is None:
            font = ImageFont.load_default(size=pixel_size)
        self._fonts[key] = font
        return font

    def text(self, x: float, y: float, text: str, *, size: int = 10, weight: str = "normal", align: str = "left") -> None:
        font = self._font(size, weight)
        bbox = self._draw.textbbox((0, 0), text, font=font)
        ascent = font.getmetrics()[0] if hasattr(font, "getmetrics") else bbox[3]
        left = self._px(x)
        if align == "center":
            left -= (bbox[2] - bbox[0]) // 2
        # Layout y is the baseline; Pillow draws from the ascender line.
        self._draw.text((left, self._px(y) - ascent), text, font=font, fill=0)

    def line(self, x0: float, y0: float, x1: float, y1: float) -> None:
        width = max(1, self._px(0.2))
        self._draw.line((self._px(x0), self._px(y0), self._px(x1), self._px(y1)), fill=0, width=width)

    def to_bytes(self) -> bytes:
        buffer = io.BytesIO()
        self.image.save(buffer, format="PDF", resolution=float(self.dpi))
        return buffer.getvalue()


def draw_layout(layout: ReceiptLayout, canvas: ReceiptCanvas) -> None:
    for op in layout:
        if isinstance(op, TextOp):
            canvas.text(op.x, op.y, op.text, size=op.size, weight=op.weight, align=op.align)
        else:
            canvas.line(op.x0, op.y0, op.x1, op.y1)


def render_receipt(record: ReceiptRecord, canvas: ReceiptCanvas | None = None) -> bytes:
    """Render `record` onto `canvas` (a fresh PillowCanvas by default) and serialise it."""
    if canvas is None:
        canvas = PillowCanvas()
    draw_layout(layout_receipt(record), canvas)
    return canvas.to_bytes()


def save_receipt(record: ReceiptRecord, directory: Path | str | None = None) -> Path:
    """Write the receipt PDF and return its path; file-system errors propagate."""
    target_dir = Path(directory) if directory is not None else receipt_output_dir()
    target_dir.mkdir(parents=True, exist_ok=True)
    path = target_dir / receipt_filename(record)
    path.write_bytes(render_receipt(record))
    _log.info("receipt_saved", order_number=record.order_number, path=str(path), items=len(record.items))
    return path
