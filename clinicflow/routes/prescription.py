"""
Prescription API Routes
Handles prescription creation, editing, deletion and printing
"""

from flask import Blueprint, Response, current_app, request, jsonify
from clinicflow.extensions import store
from clinicflow.models import PrescriptionData
from clinicflow.services import queries
from clinicflow.utils.decorators import require_confirmation
from clinicflow.utils.pdf_utils import generate_prescription_pdf
import logging

logger = logging.getLogger(__name__)

prescription_bp = Blueprint("prescription", __name__, url_prefix="/api/prescriptions")


def _prescription_to_dict(state, prescription):
    return {
        **prescription.to_dict(),
        "patient_name": queries.patient_name(state, prescription.patient_id),
    }


def _not_found(prescription_id):
    return jsonify(
        {"success": False, "error": f"Prescription with ID {prescription_id} not found"}
    ), 404


def render_prescription_document(appointment):
    """
    Build the PDF response for an appointment's prescription.
    Query param: inline=1 or preview=1 to open in browser (Content-Disposition: inline).
    """
    state = store.state
    patient = state.find_patient(appointment.patient_id)
    if not patient:
        return jsonify(
            {"success": False, "error": f"Patient with ID {appointment.patient_id} not found"}
        ), 404

    prescription = queries.prescription_for_appointment(state, appointment.id)
    pdf = generate_prescription_pdf(
        appointment,
        patient,
        prescription=prescription,
        doctor_info=current_app.config["DOCTOR_INFO"],
        clinic_info=current_app.config["CLINIC_INFO"],
    )

    inline = request.args.get("inline", request.args.get("preview")) in ("1", "true", "yes")
    download_name = f"prescription_{patient.id}_{appointment.id}.pdf"
    resp = Response(pdf, status=200, mimetype="application/pdf")
    resp.headers["Content-Length"] = str(len(pdf))
    resp.headers["Content-Disposition"] = (
        f'{"inline" if inline else "attachment"}; filename="{download_name}"'
    )
    resp.headers["Cache-Control"] = "no-store"
    return resp


@prescription_bp.route("", methods=["GET"])
def list_prescriptions():
    """
    List prescriptions, newest first.
    Query params: search (patient name or medication name)
    """
    state = store.state
    prescriptions = queries.search_prescriptions(state, request.args.get("search", "", type=str))
    return jsonify(
        {
            "success": True,
            "data": [_prescription_to_dict(state, pr) for pr in prescriptions],
            "total": len(prescriptions),
        }
    ), 200


@prescription_bp.route("/<prescription_id>", methods=["GET"])
def get_prescription(prescription_id):
    """
    Get a single prescription by ID with all its medications.
    """
    state = store.state
    prescription = state.find_prescription(prescription_id)
    if not prescription:
        return _not_found(prescription_id)
    return jsonify({"success": True, "data": _prescription_to_dict(state, prescription)}), 200


@prescription_bp.route("/appointment/<appointment_id>", methods=["GET"])
def get_appointment_prescription(appointment_id):
    """
    Get the prescription issued for a specific appointment.
    """
    state = store.state
    prescription = queries.prescription_for_appointment(state, appointment_id)
    if not prescription:
        return jsonify(
            {
                "success": False,
                "error": f"No prescription found for appointment {appointment_id}",
            }
        ), 404
    return jsonify({"success": True, "data": _prescription_to_dict(state, prescription)}), 200


@prescription_bp.route("", methods=["POST"])
def create_prescription():
    """
    Create a new prescription.

    Body:
        appointment_id: Appointment ID (required; the patient is taken from it)
        medications: list of {medication, dosage, frequency, duration, instructions}.
            Lines with a blank medication name are dropped; if none remain
            nothing is saved.
    """
    data = PrescriptionData.model_validate(request.get_json(silent=True) or {})
    prescription = store.save_prescription(data)
    logger.info(
        f"Prescription {prescription.id} created for patient {prescription.patient_id} "
        f"with {len(prescription.medications)} medication(s)"
    )
    return jsonify(
        {
            "success": True,
            "data": _prescription_to_dict(store.state, prescription),
            "message": "Prescription created successfully",
        }
    ), 201


@prescription_bp.route("/<prescription_id>", methods=["PUT"])
def update_prescription(prescription_id):
    data = PrescriptionData.model_validate(request.get_json(silent=True) or {})
    prescription = store.save_prescription(data, prescription_id=prescription_id)
    return jsonify(
        {
            "success": True,
            "data": _prescription_to_dict(store.state, prescription),
            "message": "Prescription updated successfully",
        }
    ), 200


@prescription_bp.route("/<prescription_id>", methods=["DELETE"])
@require_confirmation("Are you sure you want to delete this prescription?")
def delete_prescription(prescription_id):
    store.delete_prescription(prescription_id)
    return jsonify(
        {"success": True, "message": "Prescription deleted successfully"}
    ), 200


@prescription_bp.route("/<prescription_id>/print", methods=["GET"])
def print_prescription(prescription_id):
    """
    Printable prescription, looked up through its appointment.
    """
    state = store.state
    prescription = state.find_prescription(prescription_id)
    if not prescription:
        return _not_found(prescription_id)

    appointment = state.find_appointment(prescription.appointment_id)
    if not appointment:
        logger.warning(f"Prescription {prescription_id} references missing appointment {prescription.appointment_id}")
        return jsonify(
            {
                "success": False,
                "error": "Could not find the associated appointment for this prescription.",
            }
        ), 404
    return render_prescription_document(appointment)
