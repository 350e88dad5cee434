def test_freelance_profile_with_skills(client, register_freelance):
    freelance_id = register_freelance(skills='Python, django, PYTHON').get_json()['id']

    response = client.get(f'/freelances/{freelance_id}')

    assert response.status_code == 200
    profile = response.get_json()
    assert profile['email'] == 'bob@example.com'
    assert profile['yearsExperience'] == 4
    assert profile['hourlyRate'] == 45
    assert profile['birthDate'] == '1994-09-01'
    assert profile['skills'] == ['django', 'python']


def test_freelance_profile_not_found(client, register_entrepreneur):
    entrepreneur_id = register_entrepreneur().get_json()['id']

    assert client.get(f'/freelances/{entrepreneur_id}').status_code == 404
