from energy_harmony.schemas.base import CamelModel

class SummaryResponse(CamelModel):
    current_usage: float
    daily_average: float
    weekly_total: float
    monthly_projection: float
    savings_percentage: float
