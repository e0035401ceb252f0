from pronunciation_app import models, repositories


def test_save_inserts_then_replaces(session):
    repo = repositories.LevelRepository(session)
    repo.save(models.Level(id='L1', number=1, name='Beginner', required_score=5))
    assert repo.exists_by_id('L1')

    updated = repo.save(models.Level(id='L1', number=2))
    assert updated.number == 2
    # replace, not patch
    assert updated.name is None
    assert updated.required_score == 0
    assert len(repo.find_all()) == 1


def test_save_generates_missing_id(session):
    repo = repositories.CategoryRepository(session)
    saved = repo.save(models.Category(category_name='Animals'))
    assert saved.id
    assert repo.find_by_id(saved.id).category_name == 'Animals'


def test_exists_and_delete_by_id(session):
    repo = repositories.CategoryRepository(session)
    repo.save(models.Category(id='c1', category_name='Animals'))
    assert repo.exists_by_id('c1')
    assert not repo.exists_by_id('c2')
    repo.delete_by_id('c2')
    repo.delete_by_id('c1')
    assert not repo.exists_by_id('c1')
    assert repo.find_by_id('c1') is None


def test_category_name_lookups_return_first_match(session):
    repo = repositories.CategoryRepository(session)
    repo.save(models.Category(id='c1', category_name='Food', sub_category_name='Fruit'))
    repo.save(models.Category(id='c2', category_name='Food', sub_category_name='Vegetables'))
    assert repo.get_by_category_name('Food').id in {'c1', 'c2'}
    assert repo.get_by_sub_category_name('Vegetables').id == 'c2'
    assert repo.get_by_category_name('Drinks') is None
    assert repo.list_by_ids([]) == []


def test_word_category_links(session):
    cat_repo = repositories.CategoryRepository(session)
    word_repo = repositories.WordRepository(session)
    c1 = cat_repo.save(models.Category(id='c1', category_name='Food'))
    word_repo.save_with_categories(models.Word(id='w1', word_name='apple'), [c1])
    assert [c.id for c in cat_repo.list_for_word('w1')] == ['c1']
    assert [w.id for w in word_repo.list_for_category('c1')] == ['w1']

    word_repo.save_with_categories(models.Word(id='w1', word_name='apple'), [])
    assert cat_repo.list_for_word('w1') == []


def test_delete_all_levels_cascades_to_words(session):
    level_repo = repositories.LevelRepository(session)
    word_repo = repositories.WordRepository(session)
    stage_repo = repositories.StageWordRepository(session)
    level_repo.save(models.Level(id='L1', number=1))
    word_repo.save(models.Word(id='w1', word_name='apple', level_id='L1'))
    word_repo.save(models.Word(id='w2', word_name='pear'))
    stage_repo.save(models.StageWord(id='s1', word_id='w1'))
    session.expire_all()

    level_repo.delete_all()
    assert level_repo.find_all() == []
    assert [w.id for w in word_repo.find_all()] == ['w2']
    assert stage_repo.find_all() == []


def test_user_lookup_by_game_progress(session):
    progress = repositories.GameProgressRepository(session).save(models.GameProgress(id='g1'))
    users = repositories.UserRepository(session)
    users.save(models.AppUser(id='u1', user_name='ana', game_progress_id=progress.id))
    assert users.get_by_game_progress('g1').id == 'u1'
    assert users.get_by_game_progress('g2') is None
