"""
Tests for the review and character mutation handlers
"""

import pytest

from holocron.errors import InvalidArgumentError, NotFoundError
from holocron.store import (
    EntityStore,
    Episode,
    create_review,
    delete_character,
    update_review_stars,
)


class TestCreateReview:
    def test_appends_review(self, store):
        review = create_review(store, Episode.JEDI, 5, "great")

        assert review.episode == Episode.JEDI
        assert review.stars == 5
        assert review.comment == "great"
        assert store.list_all_reviews()[-1] is review
        assert review in store.list_reviews_for_episode(Episode.JEDI)

    def test_comment_defaults_to_none(self, store):
        review = create_review(store, Episode.EMPIRE, 3)

        assert review.comment is None

    def test_not_idempotent(self, store):
        create_review(store, Episode.NEWHOPE, 4, "again")
        create_review(store, Episode.NEWHOPE, 4, "again")

        assert len(store.list_reviews_for_episode(Episode.NEWHOPE)) == 3

    @pytest.mark.parametrize("stars", [0, 5])
    def test_boundaries_accepted(self, store, stars):
        assert create_review(store, Episode.JEDI, stars).stars == stars

    @pytest.mark.parametrize("stars", [-1, 6, 100])
    def test_out_of_range_rejected_without_mutation(self, store, stars):
        before = store.list_all_reviews()

        with pytest.raises(InvalidArgumentError, match=r"invalid number of stars \[0, 5\]"):
            create_review(store, Episode.JEDI, stars, "nope")

        assert store.list_all_reviews() == before


class TestUpdateReviewStars:
    def test_updates_stars_and_keeps_comment_when_omitted(self, store):
        create_review(store, Episode.JEDI, 5, "great")

        review = update_review_stars(store, Episode.JEDI, 3)

        # First review for the episode is the seeded one
        assert review is store.first_review_for_episode(Episode.JEDI)
        assert review.stars == 3
        assert review.comment == "return of the jedi"

    def test_created_review_updated_when_it_is_the_only_one(self):
        store = EntityStore()
        create_review(store, Episode.JEDI, 5, "great")

        review = update_review_stars(store, Episode.JEDI, 3)

        assert review.stars == 3
        assert review.comment == "great"
        assert store.list_reviews_for_episode(Episode.JEDI)[0].stars == 3

    def test_explicit_comment_replaces(self, store):
        review = update_review_stars(store, Episode.EMPIRE, 4, "best one")

        assert review.comment == "best one"

    def test_explicit_none_clears_comment(self, store):
        review = update_review_stars(store, Episode.EMPIRE, 4, None)

        assert review.comment is None

    def test_explicit_empty_comment_is_stored(self, store):
        review = update_review_stars(store, Episode.EMPIRE, 4, "")

        assert review.comment == ""

    @pytest.mark.parametrize("stars", [-1, 6])
    def test_out_of_range_rejected_without_mutation(self, store, stars):
        with pytest.raises(InvalidArgumentError):
            update_review_stars(store, Episode.NEWHOPE, stars, "changed")

        review = store.first_review_for_episode(Episode.NEWHOPE)
        assert review.stars == 0
        assert review.comment == "a new hope"

    def test_episode_without_review(self):
        store = EntityStore()

        with pytest.raises(NotFoundError, match="no review found for episode: EMPIRE"):
            update_review_stars(store, Episode.EMPIRE, 3)

    def test_range_checked_before_lookup(self):
        with pytest.raises(InvalidArgumentError):
            update_review_stars(EntityStore(), Episode.EMPIRE, 9)


class TestDeleteCharacter:
    def test_returns_id_and_removes(self, store):
        assert delete_character(store, "han") == "han"
        assert store.find_character_by_id("han") is None

    def test_prunes_friend_lists(self, store):
        delete_character(store, "luke")

        for character in store.list_characters():
            assert "luke" not in character.friend_ids
        assert store.find_character_by_id("chewie").friend_ids == ["han"]
        assert store.find_character_by_id("r2").friend_ids == []

    def test_deletes_droid(self, store):
        delete_character(store, "r2")

        assert [c.id for c in store.list_characters()] == ["han", "luke", "chewie"]
        assert store.find_character_by_id("luke").friend_ids == ["han"]

    def test_second_delete_fails(self, store):
        delete_character(store, "chewie")

        with pytest.raises(NotFoundError, match="no character found with id: chewie"):
            delete_character(store, "chewie")

    def test_unknown_id_leaves_store_untouched(self, store):
        with pytest.raises(NotFoundError):
            delete_character(store, "vader")

        assert len(store.list_characters()) == 4
