import pytest


@pytest.fixture
def author_id(register_entrepreneur):
    return register_entrepreneur().get_json()['id']


def test_create_listing(client, author_id):
    response = client.post('/listings', json={
        'title': 'Mobile app',
        'description': 'iOS and Android ordering app',
        'desiredSkills': 'Flutter, Design',
        'estimatedBudget': 8000,
        'authorId': author_id,
        'authorType': 'entrepreneur',
    })

    assert response.status_code == 201
    listing_id = response.get_json()['id']

    listing = client.get(f'/listings/{listing_id}').get_json()
    assert listing['title'] == 'Mobile app'
    assert listing['desiredSkills'] == 'Flutter, Design'
    assert listing['estimatedBudget'] == 8000
    assert listing['authorId'] == author_id


@pytest.mark.parametrize('missing', ['title', 'description', 'estimatedBudget', 'authorId'])
def test_create_listing_missing_fields(client, author_id, missing):
    payload = {
        'title': 'Mobile app',
        'description': 'iOS and Android ordering app',
        'estimatedBudget': 8000,
        'authorId': author_id,
    }
    del payload[missing]

    response = client.post('/listings', json=payload)

    assert response.status_code == 400
    assert missing in response.get_json()['message']


def test_create_listing_rejects_unknown_author_type(client, author_id):
    response = client.post('/listings', json={
        'title': 'Logo', 'description': 'A logo', 'estimatedBudget': 200,
        'authorId': author_id, 'authorType': 'admin',
    })

    assert response.status_code == 400


def test_create_listing_unknown_author(client):
    response = client.post('/listings', json={
        'title': 'Logo', 'description': 'A logo', 'estimatedBudget': 200, 'authorId': 999,
    })

    assert response.status_code == 404


def test_list_listings_by_author(client, author_id, register_entrepreneur):
    other_id = register_entrepreneur(email='carol@example.com', projectName='Gym app').get_json()['id']

    everything = client.get('/listings').get_json()
    mine = client.get(f'/listings?authorId={author_id}').get_json()

    assert {listing['authorId'] for listing in everything} == {author_id, other_id}
    assert [listing['title'] for listing in mine] == ['Bakery website']


def test_listing_not_found(client):
    assert client.get('/listings/12').status_code == 404


def test_create_listing_body_must_be_an_object(client):
    assert client.post('/listings', json=[]).status_code == 400


def test_create_listing_budget_out_of_range(client, author_id):
    response = client.post('/listings', json={
        'title': 'Logo', 'description': 'A logo', 'estimatedBudget': '1e400', 'authorId': author_id,
    })

    assert response.status_code == 400


def test_create_listing_title_too_long(client, author_id):
    response = client.post('/listings', json={
        'title': 'T' * 256, 'description': 'A logo', 'estimatedBudget': 200, 'authorId': author_id,
    })

    assert response.status_code == 400
