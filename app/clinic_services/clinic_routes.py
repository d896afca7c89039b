# app/clinic_services/clinic_routes.py
import logging
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.concurrency import run_in_threadpool

from app.clinic_models.clinic_schemas import ErrorResponse, SaveRecordResponse
from app.clinic_services.dependencies import get_record_store
from app.clinic_services.queue_services import (
    attend_patient,
    get_appointments,
    save_appointment,
    save_report,
)
from app.record_store.file_store import RecordStore

logger = logging.getLogger(__name__)

router = APIRouter()

SAVED_MESSAGE = "Appointment saved successfully"
SAVE_FAILED = "Failed to save appointment"


@router.get("/appointments", responses={500: {"model": ErrorResponse}})
async def get_appointments_endpoint(store: RecordStore = Depends(get_record_store)):
    """Return the waiting queue."""
    try:
        appointments = await run_in_threadpool(get_appointments, store)
    except Exception as e:
        logger.error(f"❌ Failed to read or parse appointments file: {e}", exc_info=True)
        return JSONResponse(status_code=500, content={"error": "Failed to read appointments file"})
    return JSONResponse(content=appointments)


@router.post("/attend-patient", response_class=PlainTextResponse)
async def attend_patient_endpoint(
    payload: Any = Body(None),
    store: RecordStore = Depends(get_record_store),
):
    """Move a patient from the queue to the attended list."""
    try:
        await run_in_threadpool(attend_patient, store, payload)
    except Exception as e:
        logger.error(f"❌ Error processing patient: {e}", exc_info=True)
        return PlainTextResponse("Error processing patient", status_code=500)
    return PlainTextResponse("Patient moved to attended list")


@router.post(
    "/save-appointment",
    response_model=SaveRecordResponse,
    responses={500: {"model": ErrorResponse}},
)
async def save_appointment_endpoint(
    record: Dict[str, Any] = Body(...),
    store: RecordStore = Depends(get_record_store),
):
    """Save a record. Stored in the reports collection."""
    try:
        await run_in_threadpool(save_appointment, store, record)
    except Exception as e:
        logger.error(f"❌ Failed to read or write reports file: {e}", exc_info=True)
        return JSONResponse(status_code=500, content={"error": SAVE_FAILED})
    return SaveRecordResponse(message=SAVED_MESSAGE)


@router.post(
    "/save-report",
    response_model=SaveRecordResponse,
    responses={500: {"model": ErrorResponse}},
)
async def save_report_endpoint(
    record: Dict[str, Any] = Body(...),
    store: RecordStore = Depends(get_record_store),
):
    """Save a record. Stored in the appointment queue."""
    try:
        await run_in_threadpool(save_report, store, record)
    except Exception as e:
        logger.error(f"❌ Failed to read or write appointments file: {e}", exc_info=True)
        return JSONResponse(status_code=500, content={"error": SAVE_FAILED})
    return SaveRecordResponse(message=SAVED_MESSAGE)
