"""
Startup seed data for the in-memory stores.

The demo ships with one historical record so a patient logging in as "Rohit"
has something on their dashboard before any prescription is written.
"""

import logging

from ..domain.entities import MedicalRecord
from ..domain.interfaces import IMedicalRecordRepository

logger = logging.getLogger(__name__)

SEED_RECORDS = (
    {
        "patient_name": "Rohit",
        "doctor_name": "Dr. Mehta",
        "summary": "Follow-up for fever. Stable.",
        "lab_report": "CBC normal. CRP slightly elevated.",
        "date": "2025-11-10",
    },
)


def seed_records(repo: IMedicalRecordRepository) -> int:
    """
    Populate an empty record store with the demo records.

    Idempotent: a store that already holds records is left untouched.

    Returns:
        Number of records inserted.
    """
    if repo.count() > 0:
        logger.debug("Record store already populated, skipping seed")
        return 0

    for data in SEED_RECORDS:
        repo.add(MedicalRecord(id=repo.new_id(), **data))

    logger.info(
        "Seed medical records inserted",
        extra={"context": {"count": len(SEED_RECORDS)}},
    )
    return len(SEED_RECORDS)
