"""Payment schedule endpoints."""

from fastapi import APIRouter

from cabinet_pricing.infrastructure.exporters import payment_check_to_dict, schedule_to_dict
from cabinet_pricing.web.dependencies import ScheduleCommandDep
from cabinet_pricing.web.schemas.requests import PaymentCheckRequest, ScheduleRequest
from cabinet_pricing.web.schemas.responses import PaymentCheckSchema, PaymentScheduleSchema

router = APIRouter(prefix="/schedule", tags=["schedule"])


@router.post("", response_model=PaymentScheduleSchema)
async def create_schedule(
    request: ScheduleRequest,
    command: ScheduleCommandDep,
) -> PaymentScheduleSchema:
    """Split an order total into deposit and balance."""
    schedule = command.execute(
        request.total_amount,
        request.deposit_percentage,
        request.deposit_due_days,
        request.balance_due_days,
    )
    return PaymentScheduleSchema.model_validate(schedule_to_dict(schedule))


@router.post("/validate", response_model=PaymentCheckSchema)
async def validate_payment(
    request: PaymentCheckRequest,
    command: ScheduleCommandDep,
) -> PaymentCheckSchema:
    """Check an attempted payment against its schedule, to the cent.

    Raises:
        ScheduleMismatchError: The amount differs from the expected one (409).
    """
    terms = request.schedule
    schedule = command.execute(
        terms.total_amount,
        terms.deposit_percentage,
        terms.deposit_due_days,
        terms.balance_due_days,
    )
    check = command.check_payment(
        request.amount, schedule, request.payment_type.value, strict=True
    )
    return PaymentCheckSchema.model_validate(payment_check_to_dict(check))
