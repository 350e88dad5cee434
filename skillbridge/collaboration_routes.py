from flask import Blueprint, jsonify, request
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError
from skillbridge import db
from skillbridge.errors import ConflictError, NotFoundError
from skillbridge.utils import json_body, parse_int, require_fields, to_json_value

collaboration_bp = Blueprint('collaboration', __name__)


def collaboration_data(collab):
    return {
        'id': collab[0],
        'listingId': collab[1],
        'freelanceId': collab[2],
        'createdAt': to_json_value(collab[3]),
    }


# Link a freelancer to a listing they engage with
@collaboration_bp.route('', methods=['POST'])
def create_collaboration():
    data = json_body(request)
    require_fields(data, ('listingId', 'freelanceId'))
    listing_id = parse_int(data, 'listingId')
    freelance_id = parse_int(data, 'freelanceId')

    listing = db.session.execute(
        text("SELECT id FROM listings WHERE id = :listing_id;"),
        {'listing_id': listing_id},
    ).fetchone()
    if not listing:
        raise NotFoundError('Listing not found')

    freelance = db.session.execute(
        text("SELECT user_id FROM freelances WHERE user_id = :freelance_id;"),
        {'freelance_id': freelance_id},
    ).fetchone()
    if not freelance:
        raise NotFoundError('Freelance not found')

    try:
        result = db.session.execute(
            text("""
            INSERT INTO collaborations (listing_id, freelance_id)
            VALUES (:listing_id, :freelance_id)
            RETURNING id, listing_id, freelance_id, created_at;
            """),
            {'listing_id': listing_id, 'freelance_id': freelance_id},
        )
        collab = result.fetchone()
        db.session.commit()
    except IntegrityError as e:
        db.session.rollback()
        print(f"[DEBUG] Collaboration already exists for listing {listing_id} and freelance {freelance_id}.")
        raise ConflictError('This freelance already collaborates on this listing') from e

    print(f"[DEBUG] Created collaboration {collab[0]}.")
    return jsonify(collaboration_data(collab)), 201


@collaboration_bp.route('', methods=['GET'])
def get_collaborations():
    """Collaborations filtered by `listingId` and/or `freelanceId`."""
    listing_id = request.args.get('listingId', type=int)
    freelance_id = request.args.get('freelanceId', type=int)

    conditions = []
    params = {}
    if listing_id:
        conditions.append("listing_id = :listing_id")
        params['listing_id'] = listing_id
    if freelance_id:
        conditions.append("freelance_id = :freelance_id")
        params['freelance_id'] = freelance_id

    query = "SELECT id, listing_id, freelance_id, created_at FROM collaborations"
    if conditions:
        query += " WHERE " + " AND ".join(conditions)
    query += " ORDER BY id;"

    collaborations = db.session.execute(text(query), params).fetchall()
    return jsonify([collaboration_data(collab) for collab in collaborations]), 200
