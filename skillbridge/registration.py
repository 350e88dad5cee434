"""Account registration workflows.

Each workflow runs on the session it is given and either commits everything
it wrote (user, role profile, skills links or listing) or rolls all of it
back.
"""
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError

from skillbridge.errors import ConflictError, ValidationError
from skillbridge.models import BUDGET_LIMIT, HOURLY_RATE_LIMIT
from skillbridge.skills import link_freelance_skills, validate_skills
from skillbridge.utils import (
    check_lengths, clean, hash_password, parse_date, parse_int, parse_number, require_fields,
)

IDENTITY_FIELDS = ('name', 'surname', 'email', 'password')

# Text columns sized in models.py
IDENTITY_LIMITS = {'name': 100, 'surname': 100, 'email': 255, 'city': 100, 'phone': 50}
ENTREPRENEUR_LIMITS = dict(IDENTITY_LIMITS, projectName=255, sector=255)
FREELANCE_LIMITS = dict(IDENTITY_LIMITS, availability=255)


def email_taken(session, email):
    row = session.execute(
        text("SELECT id FROM users WHERE email = :email"),
        {'email': email},
    ).fetchone()
    return row is not None


def create_user(session, data, role):
    """Insert the identity row and return its id.

    The UNIQUE constraint on users.email catches a concurrent registration
    that slipped past the ``email_taken`` check.
    """
    try:
        result = session.execute(
            text("""
            INSERT INTO users (name, surname, email, password_hash, role)
            VALUES (:name, :surname, :email, :password_hash, :role)
            RETURNING id;
            """),
            {
                'name': clean(data.get('name')),
                'surname': clean(data.get('surname')),
                'email': clean(data.get('email')),
                'password_hash': hash_password(str(data.get('password'))),
                'role': role,
            },
        )
    except IntegrityError as e:
        raise ConflictError() from e
    return result.fetchone()[0]


def publish_listing(session, author_id, author_type, title, description, estimated_budget,
                    desired_skills=None):
    result = session.execute(
        text("""
        INSERT INTO listings (title, description, desired_skills, estimated_budget, author_id, author_type)
        VALUES (:title, :description, :desired_skills, :estimated_budget, :author_id, :author_type)
        RETURNING id;
        """),
        {
            'title': title,
            'description': description,
            'desired_skills': desired_skills,
            'estimated_budget': estimated_budget,
            'author_id': author_id,
            'author_type': author_type,
        },
    )
    return result.fetchone()[0]


def _check_identity(session, data):
    require_fields(data, IDENTITY_FIELDS)
    if '@' not in str(data['email']):
        raise ValidationError('email is not a valid address')
    if email_taken(session, clean(data['email'])):
        raise ConflictError()


def register_entrepreneur(session, data, document=None):
    """Create the user, the entrepreneur profile and the auto-published listing.

    ``document`` is the generated name of an already stored upload, if any.
    """
    require_fields(data, IDENTITY_FIELDS + ('projectName', 'budget'))
    check_lengths(data, ENTREPRENEUR_LIMITS)
    profile = {
        'city': clean(data.get('city')),
        'phone': clean(data.get('phone')),
        'birth_date': parse_date(data, 'birthDate'),
        'project_name': clean(data.get('projectName')),
        'sector': clean(data.get('sector')),
        'desired_skills': clean(data.get('desiredSkills')),
        'description': clean(data.get('description')) or '',
        'budget': parse_number(data, 'budget', max_value=BUDGET_LIMIT),
        'deadline': parse_date(data, 'deadline'),
        'document': document,
    }

    try:
        _check_identity(session, data)
        user_id = create_user(session, data, 'entrepreneur')

        session.execute(
            text("""
            INSERT INTO entrepreneurs (user_id, city, phone, birth_date, project_name, sector,
                                       desired_skills, description, budget, deadline, document)
            VALUES (:user_id, :city, :phone, :birth_date, :project_name, :sector,
                    :desired_skills, :description, :budget, :deadline, :document);
            """),
            dict(profile, user_id=user_id),
        )

        publish_listing(
            session,
            author_id=user_id,
            author_type='entrepreneur',
            title=profile['project_name'],
            description=profile['description'],
            estimated_budget=profile['budget'],
            desired_skills=profile['desired_skills'],
        )
        session.commit()
    except Exception:
        session.rollback()
        raise

    print(f"[DEBUG] Registered entrepreneur with user ID {user_id}")
    return {'id': user_id, 'role': 'entrepreneur', 'desiredSkills': profile['desired_skills']}


def register_freelance(session, data):
    """Create the user, the freelance profile and one link per declared skill."""
    require_fields(data, IDENTITY_FIELDS)
    check_lengths(data, FREELANCE_LIMITS)
    raw_skills = data.get('skills')
    if isinstance(raw_skills, (list, tuple)):
        raw_skills = ','.join(str(skill) for skill in raw_skills)
    validate_skills(raw_skills)
    profile = {
        'city': clean(data.get('city')),
        'phone': clean(data.get('phone')),
        'birth_date': parse_date(data, 'birthDate'),
        'years_experience': parse_int(data, 'yearsExperience'),
        'hourly_rate': parse_number(data, 'hourlyRate', max_value=HOURLY_RATE_LIMIT),
        'availability': clean(data.get('availability')),
    }

    try:
        _check_identity(session, data)
        user_id = create_user(session, data, 'freelance')

        session.execute(
            text("""
            INSERT INTO freelances (user_id, bio, portfolio, city, phone, birth_date,
                                    years_experience, hourly_rate, availability)
            VALUES (:user_id, '', '', :city, :phone, :birth_date,
                    :years_experience, :hourly_rate, :availability);
            """),
            dict(profile, user_id=user_id),
        )

        skills = link_freelance_skills(session, user_id, raw_skills)
        session.commit()
    except Exception:
        session.rollback()
        raise

    print(f"[DEBUG] Registered freelance with user ID {user_id} and skills {skills}")
    return {'id': user_id, 'role': 'freelance'}
