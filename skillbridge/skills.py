"""Skill vocabulary: normalization of free-text skill lists and resolution of
canonical skill ids.

Skill names are stored lower-cased under a UNIQUE constraint, so two
concurrent requests introducing the same skill can never create two rows.
The loser of the race gets no row back from its insert and re-reads the
winner's id instead of failing.
"""
from sqlalchemy import text

from skillbridge.errors import ValidationError

SKILL_NAME_LIMIT = 100


def normalize_skills(raw):
    """Split a comma separated skill string into trimmed, lower-cased,
    deduplicated names, keeping the order in which they first appear.

    >>> normalize_skills("React, react , REACT, Node.js")
    ['react', 'node.js']
    """
    if not raw:
        return []

    names = []
    for token in str(raw).split(','):
        name = token.strip().lower()
        if name and name not in names:
            names.append(name)
    return names


def find_skill_id(session, name):
    row = session.execute(
        text("SELECT id FROM skills WHERE name = :name"),
        {'name': name},
    ).fetchone()
    return row[0] if row else None


def resolve_skill_id(session, name):
    """Return the id of the skill called ``name``, creating it if needed."""
    skill_id = find_skill_id(session, name)
    if skill_id is not None:
        return skill_id

    inserted = session.execute(
        text("""
        INSERT INTO skills (name)
        VALUES (:name)
        ON CONFLICT (name) DO NOTHING
        RETURNING id;
        """),
        {'name': name},
    ).fetchone()
    if inserted:
        print(f"[DEBUG] Created skill '{name}' with ID {inserted[0]}")
        return inserted[0]

    # Another request created it between our lookup and our insert
    print(f"[DEBUG] Skill '{name}' was created concurrently, re-reading it.")
    skill_id = find_skill_id(session, name)
    if skill_id is None:
        raise RuntimeError(f"Skill '{name}' vanished after a uniqueness conflict")
    return skill_id


def validate_skills(raw):
    """Normalized names of ``raw``, rejecting an empty list or an oversized name."""
    names = normalize_skills(raw)
    if not names:
        raise ValidationError('At least one skill is required')
    too_long = [name for name in names if len(name) > SKILL_NAME_LIMIT]
    if too_long:
        raise ValidationError(f"Skill names are limited to {SKILL_NAME_LIMIT} characters")
    return names


def link_freelance_skills(session, freelance_id, raw):
    """Resolve every skill in ``raw`` and link it to the freelancer.

    Runs inside the caller's transaction. Returns the normalized names.
    """
    names = validate_skills(raw)

    # Sorted so concurrent registrations wait on new skill rows in the same order
    for name in sorted(names):
        skill_id = resolve_skill_id(session, name)
        session.execute(
            text("""
            INSERT INTO freelance_skills (freelance_id, skill_id)
            VALUES (:freelance_id, :skill_id);
            """),
            {'freelance_id': freelance_id, 'skill_id': skill_id},
        )
    return names
