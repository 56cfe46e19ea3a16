"""Unit tests for the Movie record model."""

import dataclasses
import datetime as dt

import pytest

from movieCatalog.metadata import Movie, ValidationError, movie_from_form
from movieCatalog.metadata.core.models import NUMERIC_FORM_ERROR, SQLITE_MAX_INT

TODAY = dt.date(2026, 10, 19)


def make(**overrides) -> Movie:
    fields = dict(
        id=0, title="Alien", year=1979, director="Ridley Scott",
        rating=8.5, runtime_minutes=117, votes=950_000, watched=False,
    )
    fields.update(overrides)
    return Movie(**fields)


class TestValidate:
    def test_valid_movie_passes(self) -> None:
        make().validate(TODAY)

    @pytest.mark.parametrize("title", ["", "   ", "\t\n"])
    def test_blank_title_fails(self, title: str) -> None:
        with pytest.raises(ValidationError) as exc:
            make(title=title).validate(TODAY)
        assert exc.value.field == "title"
        assert exc.value.detail == "Title cannot be empty."

    @pytest.mark.parametrize("director", ["", "  "])
    def test_blank_director_fails(self, director: str) -> None:
        with pytest.raises(ValidationError) as exc:
            make(director=director).validate(TODAY)
        assert exc.value.field == "director"
        assert exc.value.detail == "Director cannot be empty."

    def test_year_1887_fails(self) -> None:
        with pytest.raises(ValidationError) as exc:
            make(year=1887).validate(TODAY)
        assert exc.value.field == "year"
        assert exc.value.detail == "Year must be between 1888 and 2026."

    def test_year_1888_passes(self) -> None:
        make(year=1888).validate(TODAY)

    def test_current_year_passes(self) -> None:
        make(year=TODAY.year).validate(TODAY)

    def test_next_year_fails(self) -> None:
        with pytest.raises(ValidationError):
            make(year=TODAY.year + 1).validate(TODAY)

    def test_current_year_passes_without_explicit_today(self) -> None:
        make(year=dt.date.today().year).validate()

    @pytest.mark.parametrize("rating", [-0.1, 10.01, 11, float("nan")])
    def test_rating_out_of_range_fails(self, rating: float) -> None:
        with pytest.raises(ValidationError) as exc:
            make(rating=rating).validate(TODAY)
        assert exc.value.field == "rating"

    @pytest.mark.parametrize("rating", [0, 10, 0.0, 10.0])
    def test_rating_bounds_are_inclusive(self, rating: float) -> None:
        make(rating=rating).validate(TODAY)

    def test_runtime_zero_fails(self) -> None:
        with pytest.raises(ValidationError) as exc:
            make(runtime_minutes=0).validate(TODAY)
        assert exc.value.detail == "Runtime must be positive."

    def test_runtime_one_passes(self) -> None:
        make(runtime_minutes=1).validate(TODAY)

    def test_negative_votes_fail(self) -> None:
        with pytest.raises(ValidationError) as exc:
            make(votes=-1).validate(TODAY)
        assert exc.value.detail == "Votes cannot be negative."

    def test_zero_votes_pass(self) -> None:
        make(votes=0).validate(TODAY)

    def test_first_violation_wins_in_field_order(self) -> None:
        bad = make(title="", director="", year=1500, rating=-1, runtime_minutes=0, votes=-1)
        with pytest.raises(ValidationError) as exc:
            bad.validate(TODAY)
        assert exc.value.field == "title"

        with pytest.raises(ValidationError) as exc:
            dataclasses.replace(bad, title="x").validate(TODAY)
        assert exc.value.field == "director"

        with pytest.raises(ValidationError) as exc:
            dataclasses.replace(bad, title="x", director="y").validate(TODAY)
        assert exc.value.field == "year"

    def test_validate_does_not_change_the_movie(self) -> None:
        movie = make(title="  Alien  ", votes=-5)
        before = dataclasses.astuple(movie)
        with pytest.raises(ValidationError):
            movie.validate(TODAY)
        assert dataclasses.astuple(movie) == before


    @pytest.mark.parametrize(
        "field, value",
        [
            ("year", 2010.5),
            ("year", True),
            ("year", "2010"),
            ("runtime_minutes", 0.5),
            ("runtime_minutes", 120.0),
            ("votes", 1.5),
            ("votes", False),
        ],
    )
    def test_non_integer_whole_fields_fail(self, field: str, value) -> None:
        with pytest.raises(ValidationError) as exc:
            make(**{field: value}).validate(TODAY)
        assert exc.value.field == field

    @pytest.mark.parametrize("rating", ["8.5", None, True])
    def test_non_numeric_rating_fails(self, rating) -> None:
        with pytest.raises(ValidationError) as exc:
            make(rating=rating).validate(TODAY)
        assert exc.value.field == "rating"
        assert exc.value.detail == "Rating must be a number."

    def test_integer_rating_passes(self) -> None:
        make(rating=7).validate(TODAY)

    @pytest.mark.parametrize("title", [None, 42])
    def test_non_text_title_fails(self, title) -> None:
        with pytest.raises(ValidationError) as exc:
            make(title=title).validate(TODAY)
        assert exc.value.field == "title"

    @pytest.mark.parametrize("field", ["runtime_minutes", "votes"])
    def test_values_wider_than_sqlite_integer_fail(self, field: str) -> None:
        with pytest.raises(ValidationError) as exc:
            make(**{field: SQLITE_MAX_INT + 1}).validate(TODAY)
        assert exc.value.field == field

    @pytest.mark.parametrize("field", ["runtime_minutes", "votes"])
    def test_largest_sqlite_integer_passes(self, field: str) -> None:
        make(**{field: SQLITE_MAX_INT}).validate(TODAY)


class TestIdentity:
    def test_persisted_movies_equal_by_id(self) -> None:
        assert make(id=3) == make(id=3, title="Something else")
        assert make(id=3) != make(id=4)

    def test_transient_movie_only_equals_itself(self) -> None:
        a, b = make(), make()
        assert a == a
        assert a != b

    def test_hash_follows_equality(self) -> None:
        assert len({make(id=1), make(id=1, rating=2.0), make(id=2)}) == 2

    def test_with_id_keeps_values(self) -> None:
        movie = make()
        stored = movie.with_id(7)
        assert stored.id == 7
        assert stored.values() == movie.values()
        assert movie.id == 0

    def test_id_cannot_be_reassigned(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            make(id=1).id = 2


class TestMovieFromForm:
    def form(self, **overrides) -> dict:
        fields = dict(
            title=" Alien ", year="1979", director=" Ridley Scott ",
            rating="8.5", runtime_minutes=" 117 ", votes="950000",
        )
        fields.update(overrides)
        return fields

    def test_parses_and_trims(self) -> None:
        movie = movie_from_form(watched=True, today=TODAY, **self.form())
        assert movie.values() == ("Alien", 1979, "Ridley Scott", 8.5, 117, 950_000, True)
        assert movie.id == 0

    def test_edit_keeps_original_id(self) -> None:
        movie = movie_from_form(watched=False, movie_id=12, today=TODAY, **self.form())
        assert movie.id == 12

    @pytest.mark.parametrize(
        "field, text",
        [("year", "nineteen"), ("rating", "great"), ("runtime_minutes", "1.5"), ("votes", "")],
    )
    def test_non_numeric_input_fails(self, field: str, text: str) -> None:
        with pytest.raises(ValidationError) as exc:
            movie_from_form(watched=False, today=TODAY, **self.form(**{field: text}))
        assert exc.value.field == "form"
        assert exc.value.detail == NUMERIC_FORM_ERROR

    def test_huge_vote_count_is_rejected_before_storage(self) -> None:
        with pytest.raises(ValidationError) as exc:
            movie_from_form(watched=False, today=TODAY, **self.form(votes="99999999999999999999"))
        assert exc.value.field == "votes"

    def test_result_is_validated(self) -> None:
        with pytest.raises(ValidationError) as exc:
            movie_from_form(watched=False, today=TODAY, **self.form(title="   "))
        assert exc.value.field == "title"
