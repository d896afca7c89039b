# app/clinic_services/queue_services.py
"""
Queue, report and attended-patient operations behind the clinic routes.
The save endpoints' targets are crossed: /save-appointment writes reports and
/save-report writes the appointment queue.
"""
import logging
from typing import Any, Dict, List

from app.record_store.file_store import ATTENDED, QUEUE, REPORTS, RecordStore
from app.shared.exceptions import BadRequestError

logger = logging.getLogger(__name__)


def get_appointments(store: RecordStore) -> List[Dict[str, Any]]:
    """Return the waiting queue exactly as stored."""
    return store.list_records(QUEUE)


def attend_patient(store: RecordStore, payload: Any) -> int:
    """Move ``payload["patient"]`` from the queue to the attended list."""
    patient = payload.get("patient") if isinstance(payload, dict) else None
    if not isinstance(patient, dict):
        raise BadRequestError("Request body has no patient object")

    return store.move_record(QUEUE, ATTENDED, patient.get("id"), patient)


def save_appointment(store: RecordStore, record: Dict[str, Any]) -> Dict[str, Any]:
    """Append to the reports collection."""
    logger.info(f"📥 save-appointment received: {record}")
    return store.append_record(REPORTS, record)


def save_report(store: RecordStore, record: Dict[str, Any]) -> Dict[str, Any]:
    """Append to the appointment queue."""
    logger.info(f"📥 save-report received: {record}")
    return store.append_record(QUEUE, record)
