from flask import Blueprint, jsonify
from skillbridge import db
from skillbridge.matching import find_matches

match_bp = Blueprint('match', __name__)


@match_bp.route('/<int:entrepreneur_id>', methods=['GET'])
def get_matches(entrepreneur_id):
    """
    Fetch every freelancer whose skills overlap the entrepreneur's desired skills.
    """
    try:
        matches = find_matches(db.session, entrepreneur_id)
    except Exception as e:
        print(f"[ERROR] Failed to fetch matches for user ID {entrepreneur_id}: {e}")
        raise

    print(f"[DEBUG] Retrieved {len(matches)} matches for user ID {entrepreneur_id}.")
    return jsonify(matches), 200
