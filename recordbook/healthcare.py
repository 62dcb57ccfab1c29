"""Patient and prescription records with a per-patient prescription lookup."""

from __future__ import annotations

import logging
from typing import Optional

from recordbook.index import GroupedIndex
from recordbook.models import Patient, Prescription
from recordbook.repository import Repository

logger = logging.getLogger(__name__)


class HealthRecords:
    """Patients, their prescriptions, and a prescription map keyed by patient id.

    The map is only as fresh as the last build_prescription_map() call.
    Prescriptions may reference patient ids that have no Patient record.
    """

    def __init__(self) -> None:
        self.patients: Repository[Patient] = Repository()
        self.prescriptions: Repository[Prescription] = Repository()
        self._by_patient: GroupedIndex[int, Prescription] = GroupedIndex()

    def add_patient(self, patient: Patient) -> None:
        self.patients.add(patient)

    def add_prescription(self, prescription: Prescription) -> None:
        self.prescriptions.add(prescription)

    def patient(self, patient_id: int) -> Optional[Patient]:
        return self.patients.get_by_id(patient_id)

    def build_prescription_map(self) -> None:
        """Regroup all current prescriptions by patient id."""
        self._by_patient.rebuild(self.prescriptions.get_all(), lambda p: p.patient_id)
        logger.debug(
            "Prescription map rebuilt: %d prescriptions across %d patients",
            len(self.prescriptions), len(self._by_patient),
        )

    def prescriptions_for(self, patient_id: int) -> list[Prescription]:
        """Prescriptions issued to a patient, empty if there are none."""
        return self._by_patient.lookup(patient_id)
