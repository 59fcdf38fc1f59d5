"""
Sales Analytics
Aggregates sales per product and lays the totals out as pie-chart segments
"""

import math
from typing import Iterable

# Segment colors, reused in order when there are more products than colors
PALETTE = [
    "#3B82F6",  # blue
    "#10B981",  # green
    "#F59E0B",  # yellow
    "#EF4444",  # red
    "#8B5CF6",  # purple
    "#06B6D4",  # cyan
    "#84CC16",  # lime
    "#F97316",  # orange
]

CHART_RADIUS = 100
CHART_CENTER = (128, 128)

UNKNOWN_PRODUCT = "Unknown product"


def summarize_sales(sales: Iterable[dict]) -> dict:
    """
    Sum serialized sales into dashboard totals

    Args:
        sales: Sales with a populated `product` reference

    Returns:
        {"total_sales", "sales_by_product", "total_transactions"} where
        sales_by_product maps product name -> {"quantity", "amount"}
    """
    total_sales = 0.0
    total_transactions = 0
    sales_by_product = {}

    for sale in sales:
        product = sale.get("product") or {}
        name = product.get("name") or UNKNOWN_PRODUCT

        bucket = sales_by_product.setdefault(name, {"quantity": 0, "amount": 0.0})
        bucket["quantity"] += sale["quantity"]
        bucket["amount"] += sale["total_amount"]

        total_sales += sale["total_amount"]
        total_transactions += 1

    return {
        "total_sales": total_sales,
        "sales_by_product": sales_by_product,
        "total_transactions": total_transactions,
    }


def product_color(index: int) -> str:
    return PALETTE[index % len(PALETTE)]


def _point(angle_degrees: float) -> tuple:
    radians = math.radians(angle_degrees)
    cx, cy = CHART_CENTER
    return (cx + CHART_RADIUS * math.cos(radians), cy + CHART_RADIUS * math.sin(radians))


def _fmt(value: float) -> str:
    return f"{value:.2f}"


def arc_path(start_angle: float, end_angle: float) -> str:
    """SVG path for one pie slice between two angles in degrees"""
    cx, cy = CHART_CENTER
    r = CHART_RADIUS

    if end_angle - start_angle >= 360:
        # A single slice covering the whole pie: start and end points
        # coincide, so draw it as two half arcs
        x1, y1 = _point(start_angle)
        x2, y2 = _point(start_angle + 180)
        return (
            f"M {_fmt(x1)} {_fmt(y1)} "
            f"A {r} {r} 0 1 1 {_fmt(x2)} {_fmt(y2)} "
            f"A {r} {r} 0 1 1 {_fmt(x1)} {_fmt(y1)} Z"
        )

    x1, y1 = _point(start_angle)
    x2, y2 = _point(end_angle)
    large_arc = 1 if end_angle - start_angle > 180 else 0

    return " ".join([
        f"M {cx} {cy}",
        f"L {_fmt(x1)} {_fmt(y1)}",
        f"A {r} {r} 0 {large_arc} 1 {_fmt(x2)} {_fmt(y2)}",
        "Z",
    ])


def pie_segments(sales_by_product: dict) -> list:
    """
    Lay out per-product amounts as consecutive pie slices

    Slices follow the mapping's order starting at 0 degrees. Each carries
    its share as a percentage, its start/end angle, a palette color and
    the SVG path. No slices are produced when there is nothing to chart.
    """
    items = list(sales_by_product.items())
    total = sum(data["amount"] for _, data in items)
    if not items or total <= 0:
        return []

    segments = []
    current_angle = 0.0

    for index, (product_name, data) in enumerate(items):
        share = data["amount"] / total
        angle = share * 360
        start_angle = current_angle
        end_angle = current_angle + angle
        current_angle = end_angle

        segments.append({
            "product_name": product_name,
            "amount": data["amount"],
            "quantity": data["quantity"],
            "percentage": share * 100,
            "start_angle": start_angle,
            "end_angle": end_angle,
            "color": product_color(index),
            "path": arc_path(start_angle, end_angle),
        })

    return segments
