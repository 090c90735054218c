from design_patterns.domain.post import Post, PostByAuthorSpecification
from design_patterns.infrastructure.persistence import InMemoryPostRepository


def test_default_repository_holds_one_post_by_tonio():
    posts = InMemoryPostRepository().find_all()

    assert len(posts) == 1
    assert posts[0].author == "Tonio"


def test_find_by_specification_returns_matching_post_unchanged():
    repo = InMemoryPostRepository()
    stored = repo.find_all()[0]

    result = repo.find_by_specification(PostByAuthorSpecification("Tonio"))

    assert result == [stored]
    assert result[0] is stored


def test_find_by_specification_excludes_other_authors():
    repo = InMemoryPostRepository([Post(id=1, author="Tonio"), Post(id=2, author="Ada")])

    result = repo.find_by_specification(PostByAuthorSpecification("Ada"))

    assert [p.id for p in result] == [2]


def test_save_and_find_by_id():
    repo = InMemoryPostRepository(posts=[])
    repo.save(Post(id=7, author="Ada"))
    repo.save(Post(id=7, author="Grace"))

    assert repo.find_by_id(7).author == "Grace"
    assert len(repo.find_all()) == 1
    assert repo.exists(7)
    assert not repo.exists(8)


def test_find_by_field():
    repo = InMemoryPostRepository([Post(id=1, author="Tonio"), Post(id=2, author="Ada")])

    assert [p.id for p in repo.find_by_field("author", "Tonio")] == [1]


def test_find_all_returns_a_copy():
    repo = InMemoryPostRepository()

    repo.find_all().clear()

    assert len(repo.find_all()) == 1
