from __future__ import annotations

import logging
from pathlib import Path

from fpdf import FPDF
from fpdf.enums import TableBordersLayout, TableCellFillMode
from fpdf.fonts import FontFace

from recibo.constants import format_amount, format_date, format_total
from recibo.models.receipt import LineItem, ReceiptForm
from recibo.settings import settings

logger = logging.getLogger(__name__)

FONTS_DIR = Path(__file__).parent / "fonts"
FONT_FAMILY = "DejaVuSans"
FONT_FILES = {"": "DejaVuSans.ttf", "B": "DejaVuSans-Bold.ttf"}

# Half of an A4 sheet, laid out landscape: 210 x 148 mm.
PAGE_FORMAT = (148, 210)

TITLE = "RECIBO DE PAGO"
INFO_HEADINGS = ["Detalle", "Información"]
ITEM_HEADINGS = ["Descripción del Producto/Servicio", "Monto"]

HEAD_FILL = (50, 50, 50)
HEAD_TEXT = (255, 255, 255)
INFO_FILL = (240, 240, 240)
ITEM_FILL = (255, 255, 255)
BLACK = (0, 0, 0)

TABLE_GAP = 5
SIGNATURE_W = 60
SIGNATURE_H = 25
SIGNATURE_BOTTOM_OFFSET = 60


def info_rows(form: ReceiptForm) -> list[list[str]]:
    return [
        ["Recibí de:", form.from_],
        ["Fecha:", format_date(form.date)],
        ["Concepto:", form.concept],
        ["Comentarios:", form.comments or "N/A"],
    ]


def item_rows(items: list[LineItem]) -> list[list[str]]:
    return [[item.description, format_amount(item.amount)] for item in items]


def total_row(total: int) -> list[str]:
    return ["Total:", format_total(total)]


class ReceiptPDF:
    """Lays out a payment receipt on a single landscape half-A4 page.

    Every ``_draw_*`` step receives the vertical offset where the previous
    step ended and returns the offset where it ended itself.
    """

    def __init__(self, signature_path: str | None = None) -> None:
        self.signature_path = Path(signature_path if signature_path is not None else settings.signature_path)

    def generate(self, form: ReceiptForm, total: int) -> bytes:
        pdf = FPDF(orientation="L", unit="mm", format=PAGE_FORMAT)
        pdf.set_margins(10, 10, 10)
        pdf.set_auto_page_break(auto=True, margin=10)
        pdf.add_page()

        for style, filename in FONT_FILES.items():
            pdf.add_font(FONT_FAMILY, style, str(FONTS_DIR / filename))

        y = self._draw_title(pdf, 10)
        y = self._draw_divider(pdf, y + 5)
        y = self._draw_info_table(pdf, y + 5, form)
        y = self._draw_items_table(pdf, y + TABLE_GAP, form.items)
        self._draw_total(pdf, y + TABLE_GAP, total)
        self._draw_signature(pdf, form.received_by)

        output = bytes(pdf.output())
        logger.debug(
            "PDF generated: from=%s items=%d total=%d size=%d bytes",
            form.from_,
            len(form.items),
            total,
            len(output),
        )
        return output

    def _draw_title(self, pdf: FPDF, y: float) -> float:
        pdf.set_font(FONT_FAMILY, "B", 16)
        pdf.set_text_color(*BLACK)
        self._centered_text(pdf, y, TITLE)
        return y

    def _draw_divider(self, pdf: FPDF, y: float) -> float:
        pdf.set_draw_color(0)
        pdf.line(10, y, pdf.w - 10, y)
        return y

    def _draw_info_table(self, pdf: FPDF, y: float, form: ReceiptForm) -> float:
        return self._draw_table(pdf, y, info_rows(form), headings=INFO_HEADINGS, body_fill=INFO_FILL)

    def _draw_items_table(self, pdf: FPDF, y: float, items: list[LineItem]) -> float:
        return self._draw_table(pdf, y, item_rows(items), headings=ITEM_HEADINGS, body_fill=ITEM_FILL)

    def _draw_total(self, pdf: FPDF, y: float, total: int) -> float:
        return self._draw_table(pdf, y, [total_row(total)], bold=True)

    def _draw_table(
        self,
        pdf: FPDF,
        y: float,
        rows: list[list[str]],
        headings: list[str] | None = None,
        body_fill: tuple[int, int, int] | None = None,
        bold: bool = False,
    ) -> float:
        pdf.set_y(y)
        pdf.set_font(FONT_FAMILY, "B" if bold else "", 10)
        pdf.set_text_color(*BLACK)

        data = [headings, *rows] if headings else rows
        with pdf.table(
            first_row_as_headings=headings is not None,
            headings_style=FontFace(emphasis="BOLD", color=HEAD_TEXT, fill_color=HEAD_FILL),
            borders_layout=TableBordersLayout.ALL if headings else TableBordersLayout.NONE,
            cell_fill_color=body_fill,
            cell_fill_mode=TableCellFillMode.ALL if body_fill else TableCellFillMode.NONE,
            line_height=7,
            text_align="LEFT",
        ) as table:
            for data_row in data:
                row = table.row()
                for datum in data_row:
                    row.cell(datum)
        return pdf.get_y()

    def _draw_signature(self, pdf: FPDF, received_by: str) -> float:
        x = (pdf.w - SIGNATURE_W) / 2
        y = pdf.h - SIGNATURE_BOTTOM_OFFSET

        if self.signature_path.is_file():
            pdf.image(str(self.signature_path), x=x, y=y, w=SIGNATURE_W, h=SIGNATURE_H)
        else:
            logger.warning("Signature image not found at %s, leaving the space blank", self.signature_path)

        line_y = y + SIGNATURE_H
        pdf.set_draw_color(0)
        pdf.line(x, line_y, x + SIGNATURE_W, line_y)

        pdf.set_font(FONT_FAMILY, "", 12)
        pdf.set_text_color(*BLACK)
        self._centered_text(pdf, line_y + 7, "Recibido Por:")
        self._centered_text(pdf, line_y + 15, received_by)
        return line_y + 15

    @staticmethod
    def _centered_text(pdf: FPDF, y: float, text: str) -> None:
        x = (pdf.w - pdf.get_string_width(text)) / 2
        pdf.text(x, y, text)
