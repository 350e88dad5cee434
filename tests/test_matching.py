import pytest

from skillbridge import db
from skillbridge.matching import find_matches


@pytest.fixture
def freelancers(register_freelance):
    def register(email, skills):
        return register_freelance(email=email, skills=skills).get_json()['id']

    return {
        'python': register('py@example.com', 'Python, Django'),
        'both': register('both@example.com', 'design, PYTHON, Figma'),
        'design': register('design@example.com', 'Design'),
        'none': register('rust@example.com', 'Rust, Go'),
    }


def test_matches_by_skill_intersection(client, register_entrepreneur, freelancers):
    entrepreneur_id = register_entrepreneur(desiredSkills='Python, Design').get_json()['id']

    response = client.get(f'/matches/{entrepreneur_id}')

    assert response.status_code == 200
    matches = {match['id']: match for match in response.get_json()}
    assert set(matches) == {freelancers['python'], freelancers['both'], freelancers['design']}
    assert len(response.get_json()) == 3
    assert sorted(matches[freelancers['both']]['skills']) == ['design', 'python']
    assert matches[freelancers['python']]['skills'] == ['python']
    assert matches[freelancers['design']]['skills'] == ['design']


def test_match_record_fields(client, register_entrepreneur, register_freelance):
    freelance_id = register_freelance(skills='Python').get_json()['id']
    entrepreneur_id = register_entrepreneur(email='e@example.com').get_json()['id']

    [match] = client.get(f'/matches/{entrepreneur_id}').get_json()

    assert match == {
        'id': freelance_id,
        'name': 'Bob',
        'surname': 'Durand',
        'email': 'bob@example.com',
        'yearsExperience': 4,
        'availability': 'Weekdays',
        'skills': ['python'],
    }


def test_desired_skills_are_normalized(client, register_entrepreneur, freelancers):
    entrepreneur_id = register_entrepreneur(desiredSkills=' design ,DESIGN').get_json()['id']

    matches = client.get(f'/matches/{entrepreneur_id}').get_json()

    assert {match['id'] for match in matches} == {freelancers['both'], freelancers['design']}


def test_no_profile_means_no_match(client, freelancers):
    response = client.get('/matches/999')

    assert response.status_code == 200
    assert response.get_json() == []


def test_empty_desired_skills_means_no_match(app, register_entrepreneur, freelancers):
    entrepreneur_id = register_entrepreneur(desiredSkills='').get_json()['id']

    with app.app_context():
        assert find_matches(db.session, entrepreneur_id) == []


def test_freelancer_without_overlap_is_excluded(client, register_entrepreneur, freelancers):
    entrepreneur_id = register_entrepreneur(desiredSkills='COBOL').get_json()['id']

    assert client.get(f'/matches/{entrepreneur_id}').get_json() == []
