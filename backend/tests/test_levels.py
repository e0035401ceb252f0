from fastapi.testclient import TestClient
from pronunciation_app.main import app

client = TestClient(app)

LEVEL = {'id': 'L1', 'number': 1, 'name': 'Beginner', 'requiredScore': 0, 'isBlocked': False}


def test_no_levels_is_404():
    assert client.get('/api/levels').status_code == 404


def test_create_and_get_level():
    r = client.post('/api/levels/createLevel', json=LEVEL)
    assert r.status_code == 200
    assert r.json() == LEVEL
    r2 = client.get('/api/levels/L1')
    assert r2.status_code == 200
    assert r2.json() == LEVEL
    assert client.get('/api/levels').json() == [LEVEL]


def test_get_missing_level_is_404():
    assert client.get('/api/levels/nope').status_code == 404


def test_update_echoes_request_body():
    client.post('/api/levels/createLevel', json=LEVEL)
    body = {'number': 2, 'name': 'Intermediate', 'requiredScore': 50, 'isBlocked': True}
    r = client.put('/api/levels/L1', json=body)
    assert r.status_code == 200
    assert r.json() == dict(body, id='L1')
    stored = client.get('/api/levels/L1').json()
    assert stored['name'] == 'Intermediate'
    assert stored['isBlocked'] is True


def test_update_missing_level_is_404():
    r = client.put('/api/levels/ghost', json=LEVEL)
    assert r.status_code == 404
    assert client.get('/api/levels/L1').status_code == 404


def test_delete_level_and_all_levels():
    client.post('/api/levels/createLevel', json=LEVEL)
    client.post('/api/levels/createLevel', json=dict(LEVEL, id='L2', number=2))
    r = client.delete('/api/levels/L1')
    assert r.status_code == 200
    assert r.text == 'Level deleted!'
    assert client.get('/api/levels/L1').status_code == 404
    assert client.delete('/api/levels/L1').status_code == 404

    r2 = client.delete('/api/levels')
    assert r2.status_code == 200
    assert r2.text == 'All levels deleted!'
    assert client.get('/api/levels').status_code == 404


def test_level_words_and_cascade_delete():
    client.post('/api/levels/createLevel', json=LEVEL)
    client.post('/api/words/createWord', json={'id': 'w1', 'wordName': 'apple', 'levelId': 'L1'})
    r = client.get('/api/levels/L1/words')
    assert r.status_code == 200
    assert [w['id'] for w in r.json()] == ['w1']

    client.delete('/api/levels/L1')
    assert client.get('/api/words/w1').status_code == 404


def test_update_with_different_body_id_saves_under_body_id():
    client.post('/api/levels/createLevel', json=LEVEL)
    body = dict(LEVEL, id='L2', name='Advanced')
    r = client.put('/api/levels/L1', json=body)
    assert r.status_code == 200
    assert r.json() == body
    assert client.get('/api/levels/L1').json() == LEVEL
    assert client.get('/api/levels/L2').json() == body
