from __future__ import annotations

import logging
import os
from typing import Optional

from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas

from storefront.config import settings
from storefront.models.order import Order
from storefront.services.pricing import line_total, unit_price
from storefront.utils.formatters import amount, money

log = logging.getLogger(__name__)


def generate_invoice_pdf(order: Order, export_dir: Optional[str] = None) -> str:
    export_dir = export_dir or settings.export_dir
    os.makedirs(export_dir, exist_ok=True)

    filename = f"order_{order.order_id}.pdf"
    path = os.path.join(export_dir, filename)

    c = canvas.Canvas(path, pagesize=A4)
    w, h = A4

    y = h - 50
    c.setFont("Helvetica-Bold", 14)
    c.drawString(40, y, f"INVOICE #{order.order_id}")
    y -= 20

    c.setFont("Helvetica", 11)
    c.drawString(40, y, f"Status: {order.status_label()}")
    y -= 16
    c.drawString(40, y, f"Date: {order.created_at.strftime('%Y-%m-%d %H:%M:%S')}")
    y -= 16
    c.drawString(40, y, f"Currency: {settings.currency}")
    y -= 24

    # header
    c.setFont("Helvetica-Bold", 10)
    c.drawString(40, y, "Item")
    c.drawString(310, y, "Qty")
    c.drawString(360, y, "Price")
    c.drawString(440, y, "Total")
    y -= 10
    c.line(40, y, 550, y)
    y -= 16

    c.setFont("Helvetica", 10)
    for line in order.lines():
        p = line.product
        item_name = f"[{p.type_name()}] {p.name} ({p.sku})"
        c.drawString(40, y, item_name[:45])
        c.drawRightString(340, y, str(line.qty))
        c.drawRightString(420, y, amount(unit_price(p)))
        c.drawRightString(550, y, amount(line_total(p, line.qty)))
        y -= 14
        if y < 80:
            c.showPage()
            y = h - 50
            c.setFont("Helvetica", 10)

    y -= 10
    c.line(40, y, 550, y)
    y -= 18
    c.setFont("Helvetica-Bold", 12)
    c.drawRightString(550, y, f"TOTAL: {money(order.total())}")

    c.save()
    log.info("invoice for order #%s written to %s", order.order_id, path)
    return path
