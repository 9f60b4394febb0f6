"""
Finance summary endpoint.

Returns total income, total expense, the resulting balance and the
number of members whose dues were collected in the latest dues month.
The figures are recomputed from all transactions on every request.
"""

from fastapi import APIRouter, Depends

from class_portal_api.app.api.deps import get_finance_service
from class_portal_api.app.schemas.transaction import FinanceSummary
from class_portal_api.app.services.finance_service import FinanceService

router = APIRouter()


@router.get("", response_model=FinanceSummary)
async def finance_summary(service: FinanceService = Depends(get_finance_service)) -> FinanceSummary:
    return await service.summarize()
