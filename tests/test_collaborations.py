import pytest


@pytest.fixture
def listing_id(client, register_entrepreneur):
    author_id = register_entrepreneur().get_json()['id']
    return client.get(f'/listings?authorId={author_id}').get_json()[0]['id']


@pytest.fixture
def freelance_id(register_freelance):
    return register_freelance().get_json()['id']


def test_create_collaboration(client, listing_id, freelance_id):
    response = client.post('/collaborations', json={'listingId': listing_id, 'freelanceId': freelance_id})

    assert response.status_code == 201
    record = response.get_json()
    assert record['listingId'] == listing_id
    assert record['freelanceId'] == freelance_id
    assert record['id']

    listed = client.get(f'/collaborations?freelanceId={freelance_id}').get_json()
    assert [collab['id'] for collab in listed] == [record['id']]


def test_duplicate_collaboration(client, listing_id, freelance_id, count_rows):
    payload = {'listingId': listing_id, 'freelanceId': freelance_id}
    assert client.post('/collaborations', json=payload).status_code == 201

    response = client.post('/collaborations', json=payload)

    assert response.status_code == 400
    assert count_rows('collaborations') == 1


def test_collaboration_requires_fields(client):
    assert client.post('/collaborations', json={'listingId': 1}).status_code == 400


def test_collaboration_unknown_listing_or_freelance(client, listing_id, freelance_id):
    assert client.post('/collaborations', json={'listingId': 999, 'freelanceId': freelance_id}).status_code == 404
    assert client.post('/collaborations', json={'listingId': listing_id, 'freelanceId': 999}).status_code == 404


def test_collaboration_body_must_be_an_object(client):
    assert client.post('/collaborations', json='listing').status_code == 400
