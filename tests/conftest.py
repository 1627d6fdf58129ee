"""
Shared pytest fixtures for all tests.

Provides the Flask app and test client (seed data loaded, deterministic ids
and clock) and a small hand-built ClinicState for the reducer tests.
"""
import os

import pytest

# Ensure test environment
os.environ["FLASK_ENV"] = "testing"

from clinicflow import create_app  # noqa: E402
from clinicflow.extensions import store  # noqa: E402
from clinicflow.models import ClinicState  # noqa: E402
from clinicflow.services.store import new_id, sequential_ids, utcnow  # noqa: E402
from tests.factories import (  # noqa: E402
    FIXED_NOW,
    make_appointment,
    make_patient,
    make_payment,
    make_prescription,
)


# ============================================================================
# APP FIXTURES
# ============================================================================


@pytest.fixture
def app():
    """App built with TestingConfig and the packaged seed data."""
    app = create_app("testing")
    store.id_factory = sequential_ids(start=100)
    store.clock = lambda: FIXED_NOW
    yield app
    store.id_factory = new_id
    store.clock = utcnow


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def clinic_store(app):
    """The shared store, as loaded by the app fixture."""
    return store


# ============================================================================
# STATE FIXTURES
# ============================================================================


@pytest.fixture
def two_patient_state():
    """
    p1 owns a1 (fee 1000, 300 paid) and a2 (fee 500), with prescription pr1 on a1.
    p2 owns a3 (fee 800) with prescription pr2.
    """
    return ClinicState(
        patients=(make_patient("p1", "Asha Rao"), make_patient("p2", "Vikram Das")),
        appointments=(
            make_appointment("a1", "p1", 1000, [make_payment(300)]),
            make_appointment("a2", "p1", 500),
            make_appointment("a3", "p2", 800),
        ),
        prescriptions=(
            make_prescription("pr1", "p1", "a1"),
            make_prescription("pr2", "p2", "a3", medications=("Cetirizine",)),
        ),
    )
