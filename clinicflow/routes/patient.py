from flask import Blueprint, request, jsonify
from clinicflow.extensions import store
from clinicflow.models import PatientData
from clinicflow.services import queries
from clinicflow.utils.decorators import require_confirmation
import logging

logger = logging.getLogger(__name__)

patient_bp = Blueprint('patient', __name__, url_prefix='/api/patients')


@patient_bp.route('', methods=['GET'])
def list_patients():
    """
    List patients
    Query params: search (name, email or phone)
    """
    search = request.args.get('search', '', type=str)
    patients = queries.search_patients(store.state, search)
    return jsonify({
        'success': True,
        'data': [p.to_dict() for p in patients],
        'total': len(patients)
    }), 200


@patient_bp.route('/<patient_id>', methods=['GET'])
def get_patient(patient_id):
    """
    Get single patient with their appointments and prescriptions, newest first
    """
    state = store.state
    patient = state.find_patient(patient_id)
    if not patient:
        return jsonify({
            'success': False,
            'error': f'Patient with ID {patient_id} not found'
        }), 404

    return jsonify({
        'success': True,
        'data': {
            **patient.to_dict(),
            'appointments': [a.to_dict() for a in queries.patient_appointments(state, patient_id)],
            'prescriptions': [pr.to_dict() for pr in queries.patient_prescriptions(state, patient_id)],
        }
    }), 200


@patient_bp.route('', methods=['POST'])
def create_patient():
    """
    Create a new patient
    Body: name (required), email, phone, dob, address, gender, medical_history, allergies
    """
    data = PatientData.model_validate(request.get_json(silent=True) or {})
    patient = store.create_patient(data)
    logger.info(f"Patient {patient.id} created")
    return jsonify({
        'success': True,
        'data': patient.to_dict(),
        'message': 'Patient created successfully'
    }), 201


@patient_bp.route('/<patient_id>', methods=['PUT'])
def update_patient(patient_id):
    """
    Replace the fields of a patient; the ID is kept
    """
    data = PatientData.model_validate(request.get_json(silent=True) or {})
    patient = store.update_patient(patient_id, data)
    return jsonify({
        'success': True,
        'data': patient.to_dict(),
        'message': 'Patient updated successfully'
    }), 200


@patient_bp.route('/<patient_id>', methods=['DELETE'])
@require_confirmation('Are you sure you want to delete this patient? This will also delete their appointments and prescriptions.')
def delete_patient(patient_id):
    """
    Delete a patient together with their appointments and prescriptions
    """
    removed = store.delete_patient(patient_id)
    return jsonify({
        'success': True,
        'removed': removed,
        'message': 'Patient deleted successfully'
    }), 200
