"""Host report endpoints."""
import logging
from typing import Dict, List, Literal

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

from quickbite.services.codec.models import Order
from quickbite.services.reports.aggregate import ItemSummary, aggregate_orders
from quickbite.services.reports.export import render_report

router = APIRouter()
logger = logging.getLogger(__name__)


class ReportRequest(BaseModel):
    """Orders to report on."""
    orders: List[Order]
    delimiter: Literal[",", "\t"] = ","


class SummaryRequest(BaseModel):
    """Orders to aggregate."""
    orders: List[Order]


@router.post("/api/reports", response_class=PlainTextResponse)
async def export_report(body: ReportRequest):
    """Render orders as CSV (",") or spreadsheet-paste TSV ("\\t")."""
    logger.info(f"[REPORTS] Export requested - {len(body.orders)} orders")
    return PlainTextResponse(render_report(body.orders, delimiter=body.delimiter))


@router.post("/api/reports/summary", response_model=Dict[str, ItemSummary])
async def summarize(body: SummaryRequest):
    """Per-item quantities, totals and notes across orders."""
    return aggregate_orders(body.orders)
