from flask import Blueprint, request, jsonify
from skillbridge import db
from skillbridge.auth import authenticate
from skillbridge.utils import json_body

auth_bp = Blueprint('auth', __name__)


@auth_bp.route('/login', methods=['POST'])
def login():
    data = json_body(request)
    email = data.get('email')
    password = data.get('password')

    user = authenticate(db.session, email, password)

    print(f"[DEBUG] User {user['id']} logged in as {user['role']}.")
    return jsonify(user), 200
