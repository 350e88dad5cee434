from flask import Blueprint, request, jsonify
from skillbridge import db
from skillbridge.registration import register_entrepreneur, register_freelance
from skillbridge.storage import delete_document, save_document
from skillbridge.utils import json_body

registration_bp = Blueprint('registration', __name__)


@registration_bp.route('/entrepreneur', methods=['POST'])
def entrepreneur():
    """Register an entrepreneur from a multipart form with an optional `document` file."""
    document = save_document(request.files.get('document'))

    try:
        result = register_entrepreneur(db.session, request.form, document=document)
    except Exception:
        delete_document(document)
        raise

    return jsonify({'message': 'Registration successful', **result}), 201


@registration_bp.route('/freelance', methods=['POST'])
def freelance():
    data = json_body(request)
    result = register_freelance(db.session, data)
    return jsonify({'message': 'Freelance registration successful', **result}), 200
