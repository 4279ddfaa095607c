"""Display names for the enums. Each lookup has one explicit default."""

from .models import FrameKind, GlazingType, PaneKind

GLAZING_LABELS = {
    GlazingType.SINGLE_GLAZED.value: "6mm Laminated (Standard)",
    GlazingType.TOUGHENED.value: "6mm Toughened",
    GlazingType.DOUBLE_GLAZED.value: "Double Glazed",
    GlazingType.ACOUSTIC.value: "Acoustic Glazed",
}

PANE_LABELS = {
    PaneKind.AWNING: "Awning",
    PaneKind.FIXED: "Fixed",
    PaneKind.SLIDING: "Sliding",
}

FRAME_LABELS = {
    FrameKind.EXISTING_TIMBER: "Timber (-60mm Deduction)",
    FrameKind.EXISTING_ALUMINIUM: "Aluminium (Standard)",
}


def glazing_label(glazing_type) -> str:
    key = glazing_type.value if isinstance(glazing_type, GlazingType) else glazing_type
    if key in GLAZING_LABELS:
        return GLAZING_LABELS[key]
    return "N/A"


def pane_label(pane_kind: PaneKind) -> str:
    if pane_kind in PANE_LABELS:
        return PANE_LABELS[pane_kind]
    return "Unknown"


def frame_label(frame_kind: FrameKind) -> str:
    return FRAME_LABELS[frame_kind]


def format_currency(value: float) -> str:
    return "$%.2f" % value
