from pydantic import BaseModel, ConfigDict
from typing import Any, List, Optional


# --- Requests (wire shape is camelCase, as the quoting frontend sends it) ---
# Scalar fields are Any: Project.from_body decides what a value means,
# so a stray bool or number never rejects the whole request.

class WindowIn(BaseModel):
    style: Any = ""
    width: Any = None
    height: Any = None


class RoomIn(BaseModel):
    name: Any = ""
    windows: Optional[List[WindowIn]] = None


class ProjectRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    quoteName: Any = None
    existingFrame: Any = None
    glazingType: Any = None
    installationCosts: Any = None
    frameColor: Any = None
    rooms: Optional[List[RoomIn]] = None


# --- Responses ---

class CostBreakdown(BaseModel):
    subtotal: float
    markup: float
    factory: float
    base: float
    install: float
    final: float


class CuttingListEntry(BaseModel):
    component: str
    length_mm: float
    cut_length: str
    quantity: int


class GlassScheduleEntry(BaseModel):
    pane_id: str
    pane_kind: str
    pane_label: str
    width_mm: float
    height_mm: float
    pane_width: str
    pane_height: str
    glazing_label: str


class WorkOrderEntry(BaseModel):
    room: str
    window_number: int
    style: str
    width_mm: float
    height_mm: float
    cut_width_mm: float
    cut_height_mm: float
    cutting_list: List[CuttingListEntry] = []
    glass_schedule: List[GlassScheduleEntry] = []


class ProductionPlan(BaseModel):
    openings: List[WorkOrderEntry] = []


class DocumentSection(BaseModel):
    model_config = ConfigDict(extra="allow")

    title: str
    intro: str = ""
    columns: List[str] = []
    rows: List[List[str]] = []


class QuoteDocument(BaseModel):
    doc_type: str
    title: str
    subtitle: str
    quote_name: Optional[str] = None
    sections: List[DocumentSection] = []
