from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from energy_harmony.core.database import get_db
from energy_harmony.core.deps import get_current_user
from energy_harmony.core.errors import NotFound
from energy_harmony.models.budget import Budget
from energy_harmony.schemas.budget import BudgetCreate, BudgetResponse

router = APIRouter(
    prefix="/api/budget",
    tags=["Budget"],
    dependencies=[Depends(get_current_user)]
)

@router.get("", response_model=BudgetResponse)
def get_current_budget(
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user)
):
    budget = db.query(Budget)\
        .filter(Budget.user_id == user_id)\
        .order_by(Budget.created_at.desc(), Budget.id.desc())\
        .first()
    if not budget:
        raise NotFound("No budget found")
    return budget

@router.post("", response_model=BudgetResponse, status_code=status.HTTP_201_CREATED)
def create_budget(
    data: BudgetCreate,
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user)
):
    budget = Budget(
        user_id=user_id,
        amount=data.amount,
        period=data.period
    )
    db.add(budget)
    db.commit()
    db.refresh(budget)
    return budget
