import pytest

from reviewhub.mappers.rating import mean, normalize_rating, round_rating


@pytest.mark.parametrize("raw", [0, 1, 2.5, 3, 4.5, 5])
def test_five_point_scale_doubles(raw):
    assert normalize_rating(raw, 5) == raw * 2


@pytest.mark.parametrize("raw", [0, 1, 6.5, 9, 10])
def test_ten_point_scale_unchanged(raw):
    assert normalize_rating(raw, 10) == raw


def test_none_stays_unrated():
    assert normalize_rating(None, 5) is None
    assert normalize_rating(None, 10) is None


def test_true_zero_is_a_score():
    result = normalize_rating(0, 5)
    assert result is not None
    assert result == 0


def test_result_is_not_rounded():
    assert normalize_rating(4.33, 5) == pytest.approx(8.66)


def test_unsupported_scale():
    with pytest.raises(ValueError):
        normalize_rating(3, 7)


def test_round_rating():
    assert round_rating(8.333333) == 8.3
    assert round_rating(7) == 7.0


def test_mean_of_empty_is_zero():
    assert mean([]) == 0.0
    assert mean([8, 6]) == 7.0
