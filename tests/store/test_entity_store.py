"""
Tests for the in-memory entity store
"""

import pytest

from holocron.store import EntityStore
from holocron.store.models import CharacterKind, Droid, Episode, Human, Review, Starship


class TestCharacterLookup:
    def test_find_human(self, store):
        han = store.find_character_by_id("han")

        assert isinstance(han, Human)
        assert han.kind == CharacterKind.HUMAN
        assert han.name == "Han Solo"
        assert han.credits == 1000

    def test_find_droid(self, store):
        r2 = store.find_character_by_id("r2")

        assert isinstance(r2, Droid)
        assert r2.kind == CharacterKind.DROID
        assert r2.primary_function == "Astromech"

    def test_unknown_id_returns_none(self, store):
        assert store.find_character_by_id("vader") is None

    def test_list_characters_humans_first_in_insertion_order(self, store):
        ids = [c.id for c in store.list_characters()]

        assert ids == ["han", "luke", "r2", "chewie"]

    def test_duplicate_character_id_rejected(self):
        with pytest.raises(ValueError, match="Duplicate character id"):
            EntityStore(
                humans=[Human(id="x", name="Human X")],
                droids=[Droid(id="x", name="Droid X")],
            )


class TestStarshipLookup:
    def test_find_starship(self, store):
        falcon = store.find_starship_by_id("falcon")

        assert falcon is not None
        assert falcon.name == "Millennium Falcon"
        assert falcon.length_meters == 34.75

    def test_unknown_starship(self, store):
        assert store.find_starship_by_id("deathstar") is None

    def test_duplicate_starship_id_rejected(self):
        with pytest.raises(ValueError, match="Duplicate starship id"):
            EntityStore(
                starships=[
                    Starship(id="s", name="One", length_meters=1.0),
                    Starship(id="s", name="Two", length_meters=2.0),
                ]
            )


class TestReviews:
    def test_reviews_for_episode_is_ordered_subsequence(self, store):
        store.append_review(Review(episode=Episode.JEDI, stars=4, comment="second"))
        store.append_review(Review(episode=Episode.EMPIRE, stars=5))

        all_reviews = store.list_all_reviews()
        for episode in Episode:
            expected = [r for r in all_reviews if r.episode == episode]
            assert store.list_reviews_for_episode(episode) == expected

        jedi = store.list_reviews_for_episode(Episode.JEDI)
        assert [r.comment for r in jedi] == ["return of the jedi", "second"]

    def test_first_review_for_episode(self, store):
        store.append_review(Review(episode=Episode.JEDI, stars=4))

        first = store.first_review_for_episode(Episode.JEDI)

        assert first is not None
        assert first.comment == "return of the jedi"

    def test_first_review_missing(self):
        assert EntityStore().first_review_for_episode(Episode.EMPIRE) is None

    def test_listing_returns_copies(self, store):
        reviews = store.list_all_reviews()
        reviews.clear()

        assert len(store.list_all_reviews()) == 3


class TestRemoval:
    def test_remove_character(self, store):
        assert store.remove_character("r2") is True
        assert store.find_character_by_id("r2") is None

    def test_remove_unknown_character(self, store):
        assert store.remove_character("vader") is False
        assert len(store.list_characters()) == 4

    def test_prune_friend_reference(self, store):
        store.prune_friend_reference("han")

        for character in store.list_characters():
            assert "han" not in character.friend_ids
        assert store.find_character_by_id("luke").friend_ids == ["r2"]

    def test_stats(self, store):
        assert store.stats() == {"humans": 2, "droids": 2, "starships": 2, "reviews": 3}
