from typing import Optional

from fastapi import APIRouter, Depends, Query

from tire_pickup.dependencies import get_appointment_service
from tire_pickup.Domains.Appointment.Services.appointment_service import AppointmentService
from tire_pickup.Http.DTOs.appointment_schemas import (
    AppointmentCreatedResponse,
    AppointmentCreateRequest,
    AppointmentListResponse,
    AppointmentPatchRequest,
    AppointmentResponse,
)
from tire_pickup.Http.DTOs.common_schemas import APIErrorResponse, OkResponse
from tire_pickup.Http.Security.admin_auth import require_admin

router = APIRouter(prefix="/api/appointments", tags=["Appointments"])


@router.post(
    "",
    response_model=AppointmentCreatedResponse,
    status_code=201,
    summary="Request a pickup",
    description="Public booking form submission. The appointment id doubles as the confirmation number.",
    responses={400: {"model": APIErrorResponse}, 409: {"model": APIErrorResponse}},
)
async def create_appointment(
    body: AppointmentCreateRequest,
    service: AppointmentService = Depends(get_appointment_service),
):
    appointment = await service.create_appointment(body.model_dump())
    return AppointmentCreatedResponse(confirmation=appointment.id, appointment=appointment)


@router.get(
    "",
    response_model=AppointmentListResponse,
    summary="List appointments",
    description="Filter by a single `date`, or by an inclusive `startDate`/`endDate` range.",
    dependencies=[Depends(require_admin)],
    responses={401: {"model": APIErrorResponse}},
)
async def list_appointments(
    date: Optional[str] = None,
    start_date: Optional[str] = Query(default=None, alias="startDate"),
    end_date: Optional[str] = Query(default=None, alias="endDate"),
    service: AppointmentService = Depends(get_appointment_service),
):
    appointments = await service.list_appointments(
        date=date, start_date=start_date, end_date=end_date
    )
    return AppointmentListResponse(appointments=appointments)


@router.patch(
    "/{appointment_id}",
    response_model=AppointmentResponse,
    summary="Update an appointment",
    dependencies=[Depends(require_admin)],
    responses={401: {"model": APIErrorResponse}, 404: {"model": APIErrorResponse}},
)
async def update_appointment(
    appointment_id: str,
    body: AppointmentPatchRequest,
    service: AppointmentService = Depends(get_appointment_service),
):
    appointment = await service.update_appointment(
        appointment_id, body.model_dump(exclude_unset=True)
    )
    return AppointmentResponse(appointment=appointment)


@router.delete(
    "/{appointment_id}",
    response_model=OkResponse,
    summary="Delete an appointment",
    dependencies=[Depends(require_admin)],
    responses={401: {"model": APIErrorResponse}, 404: {"model": APIErrorResponse}},
)
async def delete_appointment(
    appointment_id: str, service: AppointmentService = Depends(get_appointment_service)
):
    await service.delete_appointment(appointment_id)
    return OkResponse()
