from flask import Blueprint, jsonify
from sqlalchemy import text
from skillbridge import db
from skillbridge.errors import NotFoundError
from skillbridge.listing_routes import LISTING_COLUMNS, listing_data
from skillbridge.utils import to_json_value

entrepreneur_bp = Blueprint('entrepreneur', __name__)


def profile_data(profile):
    return {
        'id': profile[0],
        'userId': profile[1],
        'projectName': profile[2],
        'sector': profile[3],
        'desiredSkills': profile[4],
        'description': profile[5],
        'budget': to_json_value(profile[6]),
        'deadline': to_json_value(profile[7]),
        'document': profile[8],
    }


@entrepreneur_bp.route('/<int:user_id>/projects', methods=['GET'])
def get_projects(user_id):
    query = """
    SELECT id, user_id, project_name, sector, desired_skills, description, budget, deadline, document
    FROM entrepreneurs
    WHERE user_id = :user_id;
    """
    projects = db.session.execute(text(query), {'user_id': user_id}).fetchall()

    if not projects:
        print(f"[DEBUG] No project found for user ID {user_id}.")
        raise NotFoundError('Project not found')

    return jsonify([profile_data(project) for project in projects]), 200


@entrepreneur_bp.route('/<int:user_id>/budget-total', methods=['GET'])
def get_budget_total(user_id):
    """Sum of the entrepreneur's project budgets, 0 when there is none."""
    query = "SELECT SUM(budget) FROM entrepreneurs WHERE user_id = :user_id;"
    total = db.session.execute(text(query), {'user_id': user_id}).scalar()

    return jsonify({'budget': to_json_value(total) or 0}), 200


@entrepreneur_bp.route('/<int:user_id>', methods=['GET'])
def get_entrepreneur(user_id):
    query = """
    SELECT u.id, u.name, u.surname, u.email,
           e.city, e.phone, e.birth_date,
           e.project_name, e.sector, e.desired_skills, e.description,
           e.budget, e.deadline, e.document
    FROM users u
    JOIN entrepreneurs e ON u.id = e.user_id
    WHERE u.id = :user_id;
    """
    entrepreneur = db.session.execute(text(query), {'user_id': user_id}).fetchone()

    if not entrepreneur:
        raise NotFoundError('Entrepreneur not found')

    return jsonify({
        'id': entrepreneur[0],
        'name': entrepreneur[1],
        'surname': entrepreneur[2],
        'email': entrepreneur[3],
        'city': entrepreneur[4],
        'phone': entrepreneur[5],
        'birthDate': to_json_value(entrepreneur[6]),
        'projectName': entrepreneur[7],
        'sector': entrepreneur[8],
        'desiredSkills': entrepreneur[9],
        'description': entrepreneur[10],
        'budget': to_json_value(entrepreneur[11]),
        'deadline': to_json_value(entrepreneur[12]),
        'document': entrepreneur[13],
    }), 200


@entrepreneur_bp.route('/<int:user_id>/listings', methods=['GET'])
def get_published_listings(user_id):
    """Listings this entrepreneur has published, newest first."""
    query = f"SELECT {LISTING_COLUMNS} FROM listings WHERE author_id = :user_id ORDER BY id DESC;"
    listings = db.session.execute(text(query), {'user_id': user_id}).fetchall()

    if not listings:
        raise NotFoundError('No listing found')

    return jsonify([listing_data(listing) for listing in listings]), 200
