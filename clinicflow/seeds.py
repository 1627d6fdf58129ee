"""
Sample data - loaded once when the app is created.

The JSON files are never written back; restarting the process restores them.
"""
import json
import logging
import os

from pydantic import ValidationError

from clinicflow.models import Appointment, ClinicState, Patient, Prescription
from clinicflow.services.reducer import derive

logger = logging.getLogger(__name__)

SEED_FILES = {
    'patients': ('patients.json', Patient),
    'appointments': ('appointments.json', Appointment),
    'prescriptions': ('prescriptions.json', Prescription),
}


def _load_records(data_dir, filename, model):
    path = os.path.join(data_dir, filename)
    if not os.path.exists(path):
        logger.warning("Seed file %s not found, starting empty", path)
        return ()

    with open(path, encoding='utf-8') as f:
        raw = json.load(f)

    records = []
    for idx, item in enumerate(raw, start=1):
        try:
            records.append(model.model_validate(item))
        except ValidationError as e:
            logger.warning("Skipping %s record %d: %s", filename, idx, e)
    return tuple(records)


def load_seed_state(data_dir):
    """Build the initial ClinicState from the seed directory."""
    collections = {
        key: _load_records(data_dir, filename, model)
        for key, (filename, model) in SEED_FILES.items()
    }
    state = derive(ClinicState(**collections))
    logger.info("Seeded %s from %s", state.counts(), data_dir)
    return state
