from sqlalchemy import bindparam, text

from skillbridge.skills import normalize_skills

MATCH_QUERY = text("""
SELECT u.id, u.name, u.surname, u.email,
       f.years_experience, f.availability, s.name
FROM skills s
JOIN freelance_skills fs ON fs.skill_id = s.id
JOIN freelances f ON f.user_id = fs.freelance_id
JOIN users u ON u.id = f.user_id
WHERE s.name IN :names
ORDER BY u.id, s.name;
""").bindparams(bindparam('names', expanding=True))


def desired_skills_for(session, entrepreneur_user_id):
    row = session.execute(
        text("SELECT desired_skills FROM entrepreneurs WHERE user_id = :user_id"),
        {'user_id': entrepreneur_user_id},
    ).fetchone()
    return normalize_skills(row[0]) if row else []


def find_matches(session, entrepreneur_user_id):
    """
    Return every freelancer sharing at least one skill with the entrepreneur's
    desired skills, once per freelancer, with the matched skill names attached.
    An entrepreneur without profile or desired skills simply has no match.
    """
    wanted = desired_skills_for(session, entrepreneur_user_id)
    if not wanted:
        print(f"[DEBUG] No desired skills for entrepreneur {entrepreneur_user_id}.")
        return []

    rows = session.execute(MATCH_QUERY, {'names': wanted}).fetchall()

    matches = {}
    for row in rows:
        freelancer = matches.setdefault(row[0], {
            'id': row[0],
            'name': row[1],
            'surname': row[2],
            'email': row[3],
            'yearsExperience': row[4],
            'availability': row[5],
            'skills': [],
        })
        if row[6] not in freelancer['skills']:
            freelancer['skills'].append(row[6])

    print(f"[DEBUG] Wanted skills {wanted} matched {len(matches)} freelancers.")
    return list(matches.values())
