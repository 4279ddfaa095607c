"""
Quote documents: row tables for the customer, sales and production copies.

No drawing happens here. Each document is a title plus ordered sections;
a section is a heading, an intro line, column headers and rows of display
strings. A renderer (PDF, HTML) lays them out.

Sections per document type:
    customer    Project Overview, Window Schedule, Price Breakdown, Terms
    sales       Project Overview, Window Schedule, Price Breakdown, Terms
    production  Project Overview, Production Work Order, Terms
"""

from .calculators.cost_estimator import CostEstimator
from .calculators.production_planner import ProductionPlanner
from .labels import format_currency, frame_label, glazing_label
from .models import Project, Room
from .pricing_model import DEFAULT_PRICING, PricingModel

DOC_TYPES = ("customer", "sales", "production")

TERMS_AND_CONDITIONS = [
    "This quote is valid for 30 days from the date issued.",
    "Prices are subject to change based on material costs and availability.",
    "Installation is optional and can be adjusted based on project requirements.",
    "All work complies with local building codes and industry standards.",
    "Payment terms: 50% deposit upon acceptance, 50% upon project completion.",
    "Any changes to specifications may affect the quoted price.",
    "Lead times are estimated and subject to change based on production schedule.",
]

PRICE_INTROS = {
    "customer": "Estimated pricing for your project.",
    "sales": "Internal cost breakdown for sales team.",
}


def _section(title: str, intro: str, columns: list, rows: list, **extra) -> dict:
    section = {"title": title, "intro": intro, "columns": columns, "rows": rows}
    section.update(extra)
    return section


def project_overview_rows(project: Project) -> list:
    return [
        ["Existing Frame Type", frame_label(project.frame_kind)],
        ["Default Glazing", glazing_label(project.glazing_type)],
        ["Frame Colour", project.frame_color or "Not Specified"],
        ["Installation Included", "Yes" if project.installation_requested else "No"],
    ]


def _format_dimension(value: float) -> str:
    return "%d" % value if value == int(value) else str(value)


def window_schedule_rows(room: Room) -> list:
    """
    Every window in entry order, including ones the quote excludes.

    Dimensions are the loaded values, so an unusable width or height shows as 0.
    """
    return [
        [str(i + 1), win.style, _format_dimension(win.width), _format_dimension(win.height),
         "Standard Configuration"]
        for i, win in enumerate(room.windows)
    ]


def price_breakdown_rows(breakdown: dict) -> list:
    return [
        ["Materials & Components Subtotal", format_currency(breakdown["subtotal"])],
        ["Waste & Profit Markup", format_currency(breakdown["markup"])],
        ["Factory Build Costs", format_currency(breakdown["factory"])],
        ["Total Base Price (ex. Installation)", format_currency(breakdown["base"])],
        ["Installation Cost", format_currency(breakdown["install"])],
    ]


def work_order_sections(project: Project, pricing: PricingModel) -> list:
    sections = []
    for entry in ProductionPlanner(pricing).plan_project(project):
        heading = "Room: %s | Window %d" % (entry["room"], entry["window_number"])
        sections.append(_section(
            heading + " - Cutting List", "",
            ["Component", "Cut Length", "Qty"],
            [[c["component"], c["cut_length"], str(c["quantity"])] for c in entry["cutting_list"]],
        ))
        sections.append(_section(
            heading + " - Glass Schedule", "",
            ["Pane ID", "Type", "Width", "Height", "Glazing"],
            [[g["pane_id"], g["pane_label"], g["pane_width"], g["pane_height"], g["glazing_label"]]
             for g in entry["glass_schedule"]],
        ))
    return sections


def build_document(project: Project, doc_type: str,
                   pricing: PricingModel = DEFAULT_PRICING) -> dict:
    """
    Assemble the row tables for one document type.

    Raises:
        ValueError: doc_type is not customer / sales / production
    """
    if doc_type not in DOC_TYPES:
        raise ValueError(f"Invalid document type: {doc_type}. Available: {list(DOC_TYPES)}")

    sections = [_section(
        "Project Overview",
        "This document provides detailed specifications for your window project.",
        ["Specification", "Details"],
        project_overview_rows(project),
    )]

    if doc_type == "production":
        sections.append(_section(
            "Production Work Order",
            "Detailed production instructions including cutting lists and glass schedules.",
            [], [],
        ))
        sections.extend(work_order_sections(project, pricing))
    else:
        for room in project.rooms:
            sections.append(_section(
                "Window Schedule - Room: %s" % room.name,
                "Detailed schedule of windows per room.",
                ["#", "Style Code", "Width (mm)", "Height (mm)", "Notes"],
                window_schedule_rows(room),
            ))
        breakdown = CostEstimator(pricing).estimate(project)
        sections.append(_section(
            "Price Breakdown",
            PRICE_INTROS[doc_type],
            ["Item", "Cost"],
            price_breakdown_rows(breakdown),
            total_label="Final Estimated Total:",
            total=format_currency(breakdown["final"]),
        ))

    sections.append(_section(
        "Terms and Conditions", "", ["#", "Term"],
        [[str(i + 1), term] for i, term in enumerate(TERMS_AND_CONDITIONS)],
    ))

    return {
        "doc_type": doc_type,
        "title": "Window Quotation",
        "subtitle": "%s Version" % doc_type.capitalize(),
        "quote_name": project.quote_name,
        "sections": sections,
    }
