"""
Quote calculation API: stateless, nothing is stored.

POST /api/calculate              CostBreakdown for a project
POST /api/production             cutting lists + glass schedules per eligible opening
POST /api/documents/{doc_type}   row tables for the customer / sales / production copy
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from ..calculators.cost_estimator import CostEstimator
from ..calculators.production_planner import ProductionPlanner
from ..config import settings
from ..documents import build_document
from ..models import Project
from ..pricing_model import PricingModel
from ..schemas import CostBreakdown, ProductionPlan, ProjectRequest, QuoteDocument

logger = logging.getLogger(__name__)

router = APIRouter(tags=["quotes"])

# Built once at startup, read-only afterwards
pricing_model = PricingModel.from_settings(settings)


def get_pricing() -> PricingModel:
    return pricing_model


def _load(request: ProjectRequest) -> Project:
    return Project.from_body(request.model_dump())


@router.post("/calculate", response_model=CostBreakdown)
def calculate(request: ProjectRequest, pricing: PricingModel = Depends(get_pricing)):
    """Price the project. Full precision: round for display on the client."""
    return CostEstimator(pricing).estimate(_load(request))


@router.post("/production", response_model=ProductionPlan)
def production(request: ProjectRequest, pricing: PricingModel = Depends(get_pricing)):
    """Production work order for every eligible opening."""
    return {"openings": ProductionPlanner(pricing).plan_project(_load(request))}


@router.post("/documents/{doc_type}", response_model=QuoteDocument)
def document(doc_type: str, request: ProjectRequest,
             pricing: PricingModel = Depends(get_pricing)):
    """Row tables for one quote document. doc_type: customer | sales | production."""
    try:
        return build_document(_load(request), doc_type, pricing)
    except ValueError as e:
        logger.info("Rejected document request: %s", e)
        raise HTTPException(status_code=400, detail="Invalid document type")
