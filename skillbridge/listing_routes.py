from flask import Blueprint, request, jsonify
from sqlalchemy import text
from skillbridge import db
from skillbridge.errors import NotFoundError, ValidationError
from skillbridge.models import BUDGET_LIMIT, ROLES
from skillbridge.registration import publish_listing
from skillbridge.utils import (
    check_lengths, clean, json_body, parse_int, parse_number, require_fields, to_json_value,
)

listing_bp = Blueprint('listing', __name__)

LISTING_COLUMNS = "id, title, description, desired_skills, estimated_budget, author_id, author_type, created_at"


def listing_data(listing):
    return {
        'id': listing[0],
        'title': listing[1],
        'description': listing[2],
        'desiredSkills': listing[3],
        'estimatedBudget': to_json_value(listing[4]),
        'authorId': listing[5],
        'authorType': listing[6],
        'createdAt': to_json_value(listing[7]),
    }


@listing_bp.route('', methods=['POST'])
def create_listing():
    data = json_body(request)
    require_fields(data, ('title', 'description', 'estimatedBudget', 'authorId'))
    check_lengths(data, {'title': 255})

    author_id = parse_int(data, 'authorId')
    estimated_budget = parse_number(data, 'estimatedBudget', max_value=BUDGET_LIMIT)
    author_type = clean(data.get('authorType')) or 'entrepreneur'
    if author_type not in ROLES:
        raise ValidationError(f"authorType must be one of: {', '.join(ROLES)}")

    author = db.session.execute(
        text("SELECT id FROM users WHERE id = :author_id"),
        {'author_id': author_id},
    ).fetchone()
    if not author:
        raise NotFoundError('Author not found')

    listing_id = publish_listing(
        db.session,
        author_id=author_id,
        author_type=author_type,
        title=clean(data['title']),
        description=clean(data['description']),
        estimated_budget=estimated_budget,
        desired_skills=clean(data.get('desiredSkills')),
    )
    db.session.commit()

    print(f"[DEBUG] Listing {listing_id} published by user ID {author_id}.")
    return jsonify({'message': 'Listing created successfully', 'id': listing_id}), 201


@listing_bp.route('', methods=['GET'])
def get_listings():
    """All listings, newest first, optionally only those of `authorId`."""
    author_id = request.args.get('authorId', type=int)

    if author_id:
        query = f"SELECT {LISTING_COLUMNS} FROM listings WHERE author_id = :author_id ORDER BY id DESC;"
        params = {'author_id': author_id}
    else:
        query = f"SELECT {LISTING_COLUMNS} FROM listings ORDER BY id DESC;"
        params = {}

    listings = db.session.execute(text(query), params).fetchall()
    return jsonify([listing_data(listing) for listing in listings]), 200


@listing_bp.route('/<int:listing_id>', methods=['GET'])
def get_listing(listing_id):
    listing = db.session.execute(
        text(f"SELECT {LISTING_COLUMNS} FROM listings WHERE id = :listing_id;"),
        {'listing_id': listing_id},
    ).fetchone()

    if not listing:
        raise NotFoundError('Listing not found')

    return jsonify(listing_data(listing)), 200
