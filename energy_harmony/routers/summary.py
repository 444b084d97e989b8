from datetime import datetime
from fastapi import APIRouter, Depends
from energy_harmony.core.deps import get_current_user, get_summary_calculator
from energy_harmony.schemas.summary import SummaryResponse
from energy_harmony.services.summary import SummaryCalculator

router = APIRouter(
    prefix="/api/summary",
    tags=["Summary"],
    dependencies=[Depends(get_current_user)]
)

@router.get("", response_model=SummaryResponse)
def get_summary(
    calculator: SummaryCalculator = Depends(get_summary_calculator),
    user_id: int = Depends(get_current_user)
):
    return calculator.summarize(user_id, datetime.utcnow())
