"""API routes for farm-level recommendations."""

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field
from sqlalchemy.ext.asyncio import AsyncSession

from farmadvisor.config import settings
from farmadvisor.database import get_db
from farmadvisor.dependencies import get_current_user_id
from farmadvisor.logging_config import LoggingContext, get_logger
from farmadvisor.recommend import (
    FarmSnapshot,
    RecommendationCategory,
    RecommendationKind,
    generate_recommendations,
)
from farmadvisor.records import build_farm_snapshot
from farmadvisor.schedules import Priority

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1/farms", tags=["farms"])


# =============================================================================
# Response Schemas
# =============================================================================


class RecommendationSchema(BaseModel):
    """A single recommendation."""

    code: str
    category: RecommendationCategory
    priority: Priority
    kind: RecommendationKind
    title: str
    message: str
    confidence: float
    confidence_label: str
    reasons: list[str] = Field(default_factory=list)

    class Config:
        from_attributes = True


class LandUsage(BaseModel):
    """Farm land usage figures."""

    total_farm_size: float
    used_plot_area: float
    utilization_percent: float | None = None


class FinancialSummary(BaseModel):
    """Month-to-date and year-to-date income and expenses."""

    currency: str
    monthly_income: float
    monthly_expenses: float
    monthly_profit: float
    yearly_income: float
    yearly_expenses: float
    yearly_profit: float


class FarmRecommendationsResponse(BaseModel):
    """Recommendations for a farm with the figures they were based on."""

    farm_id: str
    farm_name: str
    recommendations: list[RecommendationSchema]
    land_usage: LandUsage
    financial_summary: FinancialSummary
    crop_count: int
    livestock_count: int
    overdue_task_count: int
    pending_task_count: int

    @classmethod
    def from_snapshot(
        cls, snapshot: FarmSnapshot, recommendations: list[RecommendationSchema]
    ) -> "FarmRecommendationsResponse":
        return cls(
            farm_id=snapshot.farm_id,
            farm_name=snapshot.farm_name,
            recommendations=recommendations,
            land_usage=LandUsage(
                total_farm_size=snapshot.total_farm_size,
                used_plot_area=snapshot.used_plot_area,
                utilization_percent=snapshot.utilization_percent,
            ),
            financial_summary=FinancialSummary(
                currency=settings.currency_code,
                monthly_income=snapshot.monthly_income,
                monthly_expenses=snapshot.monthly_expenses,
                monthly_profit=snapshot.monthly_profit,
                yearly_income=snapshot.yearly_income,
                yearly_expenses=snapshot.yearly_expenses,
                yearly_profit=snapshot.yearly_profit,
            ),
            crop_count=snapshot.crop_count,
            livestock_count=snapshot.livestock_count,
            overdue_task_count=snapshot.overdue_task_count,
            pending_task_count=snapshot.pending_task_count,
        )


# =============================================================================
# Endpoints
# =============================================================================


@router.get("/{farm_id}/recommendations", response_model=FarmRecommendationsResponse)
async def get_farm_recommendations(
    farm_id: str,
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
) -> FarmRecommendationsResponse:
    """
    Get recommendations for a farm.

    Rules look at land usage, this month's profit, crop diversity, overdue
    tasks and livestock without health records.
    """
    with LoggingContext(farm_id=farm_id):
        snapshot = await build_farm_snapshot(db, user_id, farm_id)
        if snapshot is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Farm {farm_id} not found",
            )

        recommendations = generate_recommendations(snapshot)
        logger.info(f"Generated {len(recommendations)} recommendations")

    return FarmRecommendationsResponse.from_snapshot(
        snapshot,
        [RecommendationSchema.model_validate(r) for r in recommendations],
    )
