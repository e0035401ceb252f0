from fastapi.testclient import TestClient
from pronunciation_app.main import app

client = TestClient(app)


def _seed():
    client.post('/api/levels/createLevel', json={'id': 'L1', 'number': 1, 'name': 'Beginner'})
    client.post('/api/categories/createCategory', json={'id': 'c1', 'categoryName': 'Food'})
    client.post('/api/categories/createCategory', json={'id': 'c2', 'categoryName': 'Fruit'})


def test_no_words_is_404():
    assert client.get('/api/words').status_code == 404


def test_create_word_with_level_and_categories():
    _seed()
    r = client.post('/api/words/createWord', json={
        'id': 'w1',
        'wordName': 'apple',
        'definition': 'a round fruit',
        'phoneticSpelling': '/ˈæp.əl/',
        'sentence': 'I eat an apple.',
        'isActive': True,
        'levelId': 'L1',
        'categoryIds': ['c1', 'c2', 'missing'],
    })
    assert r.status_code == 200
    body = r.json()
    assert body['wordName'] == 'apple'
    assert body['levelId'] == 'L1'
    assert body['isActive'] is True
    assert sorted(body['categoryIds']) == ['c1', 'c2']

    got = client.get('/api/words/w1').json()
    assert got['phoneticSpelling'] == '/ˈæp.əl/'
    assert sorted(got['categoryIds']) == ['c1', 'c2']

    cats = client.get('/api/words/w1/categories').json()
    assert sorted(c['categoryName'] for c in cats) == ['Food', 'Fruit']


def test_word_without_pronunciations_or_stage_words():
    client.post('/api/words/createWord', json={'id': 'w1', 'wordName': 'pear'})
    assert client.get('/api/words/w1/pronunciations').json() == []
    assert client.get('/api/words/w1/stageWords').json() == []
    assert client.get('/api/words/ghost/pronunciations').status_code == 404


def test_update_word_replaces_category_links():
    _seed()
    client.post('/api/words/createWord', json={'id': 'w1', 'wordName': 'apple', 'levelId': 'L1', 'categoryIds': ['c1', 'c2']})
    r = client.put('/api/words/w1', json={'wordName': 'Apple', 'categoryIds': ['c2']})
    assert r.status_code == 200
    body = r.json()
    assert body['id'] == 'w1'
    assert body['wordName'] == 'Apple'
    assert body['categoryIds'] == ['c2']
    assert body['levelId'] is None
    assert client.get('/api/categories/c1/words').json() == []


def test_update_missing_word_is_404():
    assert client.put('/api/words/ghost', json={'wordName': 'x'}).status_code == 404
    assert client.get('/api/words').status_code == 404


def test_delete_word_removes_links_and_children():
    _seed()
    client.post('/api/words/createWord', json={'id': 'w1', 'wordName': 'apple', 'categoryIds': ['c1']})
    client.post('/api/stageWords/createStageWord', json={'id': 's1', 'wordId': 'w1'})
    client.post('/api/pronunciations/createPronunciation', json={'id': 'p1', 'wordId': 'w1', 'ipa': 'ˈæp.əl'})

    r = client.delete('/api/words/w1')
    assert r.status_code == 200
    assert r.text == 'Word deleted!'
    assert client.get('/api/categories/c1/words').json() == []
    assert client.get('/api/stageWords/s1').status_code == 404
    assert client.get('/api/pronunciations/p1').status_code == 404
    # categories themselves survive
    assert client.get('/api/categories/c1').status_code == 200


def test_delete_all_words():
    client.post('/api/words/createWord', json={'id': 'w1', 'wordName': 'apple'})
    client.post('/api/words/createWord', json={'id': 'w2', 'wordName': 'pear'})
    r = client.delete('/api/words')
    assert r.text == 'All words deleted!'
    assert client.get('/api/words').status_code == 404
