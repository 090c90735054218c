from design_patterns.domain.base import CriteriaSpecification, PredicateSpecification
from design_patterns.domain.post import Post, PostByAuthorSpecification


def test_author_specification_filters_single_matching_post():
    # Arrange
    post = Post(author="Tonio")
    spec = PostByAuthorSpecification("Tonio")

    # Act
    result = spec.filter([post])

    # Assert
    assert len(result) == 1
    assert result[0] is post
    assert result[0].author == "Tonio"


def test_author_specification_rejects_other_authors():
    spec = PostByAuthorSpecification("Tonio")

    assert spec.is_satisfied_by(Post(author="Ada")) is False
    assert spec(Post(author="Tonio")) is True


def test_filter_keeps_input_order():
    posts = [Post(author="Tonio", title="a"), Post(author="Ada"), Post(author="Tonio", title="b")]

    result = PostByAuthorSpecification("Tonio").filter(posts)

    assert [p.title for p in result] == ["a", "b"]


def test_combinators():
    tonio = PostByAuthorSpecification("Tonio")
    ada = PostByAuthorSpecification("Ada")
    titled = PredicateSpecification(lambda p: p.title is not None)

    post = Post(author="Tonio", title="hello")

    assert (tonio & titled).is_satisfied_by(post)
    assert not (ada & titled).is_satisfied_by(post)
    assert (ada | tonio).is_satisfied_by(post)
    assert (~ada).is_satisfied_by(post)
    assert not (~tonio).is_satisfied_by(post)


def test_criteria_specification_matches_all_fields():
    spec = CriteriaSpecification({"author": "Tonio", "title": "x"})

    assert spec.is_satisfied_by(Post(author="Tonio", title="x"))
    assert not spec.is_satisfied_by(Post(author="Tonio", title="y"))
