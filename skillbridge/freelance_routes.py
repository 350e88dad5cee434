from flask import Blueprint, jsonify
from sqlalchemy import text
from skillbridge import db
from skillbridge.errors import NotFoundError
from skillbridge.utils import to_json_value

freelance_bp = Blueprint('freelance', __name__)


@freelance_bp.route('/<int:user_id>', methods=['GET'])
def get_freelance(user_id):
    """Fetch a freelance profile together with its declared skills."""
    query = """
    SELECT u.id, u.name, u.surname, u.email,
           f.bio, f.portfolio, f.city, f.phone, f.birth_date,
           f.years_experience, f.hourly_rate, f.availability
    FROM users u
    JOIN freelances f ON u.id = f.user_id
    WHERE u.id = :user_id;
    """
    freelance = db.session.execute(text(query), {'user_id': user_id}).fetchone()

    if not freelance:
        raise NotFoundError('Freelance not found')

    skills_query = """
    SELECT s.name
    FROM skills s
    JOIN freelance_skills fs ON fs.skill_id = s.id
    WHERE fs.freelance_id = :user_id
    ORDER BY s.name;
    """
    skills = db.session.execute(text(skills_query), {'user_id': user_id}).fetchall()

    return jsonify({
        'id': freelance[0],
        'name': freelance[1],
        'surname': freelance[2],
        'email': freelance[3],
        'bio': freelance[4],
        'portfolio': freelance[5],
        'city': freelance[6],
        'phone': freelance[7],
        'birthDate': to_json_value(freelance[8]),
        'yearsExperience': freelance[9],
        'hourlyRate': to_json_value(freelance[10]),
        'availability': freelance[11],
        'skills': [skill[0] for skill in skills],
    }), 200
