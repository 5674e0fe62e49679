"""
Unit tests for request parameter parsing: predicates, sortBy and limit.
"""

from dataclasses import FrozenInstanceError

import pytest

from film_query.errors import MalformedParameter, UnsupportedSortKey
from film_query.models import FilmEntry, SortKey
from film_query.params import build_predicates, build_query, parse_bool, parse_int, parse_limit


PARASITE = FilmEntry('Parasite', 2019, 4, 6, 8855, True)


def test_parse_int_accepts_signed_digits():
	assert parse_int('year', '2019') == 2019
	assert parse_int('year', '-3') == -3
	assert parse_int('year', '+7') == 7


@pytest.mark.parametrize('raw', ['', ' 2019', '2019 ', '20_19', '2019.0', 'abc', '2019\n'])
def test_parse_int_rejects_everything_else(raw):
	with pytest.raises(MalformedParameter) as info:
		parse_int('minYear', raw)
	assert info.value.name == 'minYear'
	assert info.value.value == raw


def test_parse_bool():
	assert parse_bool('isBestPicture', 'true') is True
	assert parse_bool('isBestPicture', 'FALSE') is False
	with pytest.raises(MalformedParameter):
		parse_bool('isBestPicture', 'yes')


def test_unrecognized_parameters_are_ignored():
	predicates = build_predicates({'foo': 'bar', 'year': '2019', 'q': 'x'})
	assert [p.name for p in predicates] == ['year']


def test_predicates_keep_order_of_appearance():
	predicates = build_predicates([('minAwards', '4'), ('title', 'Parasite'), ('year', '2019')])
	assert [p.name for p in predicates] == ['minAwards', 'title', 'year']
	assert all(p.test(PARASITE) for p in predicates)


def test_repeated_parameter_uses_first_value():
	predicates = build_predicates([('year', '2019'), ('year', '2020')])
	assert len(predicates) == 1
	assert predicates[0].expected == 2019


def test_malformed_filter_is_not_dropped():
	with pytest.raises(MalformedParameter):
		build_query({'year': '2019', 'minAwards': 'four'})


def test_bounds_are_inclusive():
	query = build_query({'minYear': '2019', 'maxYear': '2019', 'minAwards': '4', 'maxAwards': '4'})
	assert all(p.test(PARASITE) for p in query.predicates)


def test_absent_field_never_matches():
	untitled = FilmEntry('Unknown')
	for name, value in [('year', '2019'), ('minYear', '0'), ('maxAwards', '100'),
			('nominations', '0'), ('isBestPicture', 'false')]:
		(predicate,) = build_predicates({name: value})
		assert predicate.test(untitled) is False, name


def test_sort_key_is_case_insensitive():
	assert build_query({'sortBy': 'Year'}).sort_key is SortKey.YEAR
	assert build_query({'sortBy': 'NOMINATIONS'}).sort_key is SortKey.NOMINATIONS
	assert build_query({'sortBy': 'title'}).sort_key is SortKey.TITLE


def test_missing_or_blank_sort_key_means_default():
	assert build_query({}).sort_key is None
	assert build_query({'sortBy': '  '}).sort_key is None


def test_unsupported_sort_key_fails():
	with pytest.raises(UnsupportedSortKey) as info:
		build_query({'sortBy': 'rating'})
	assert info.value.value == 'rating'


def test_unsupported_sort_key_suggests_close_match():
	with pytest.raises(UnsupportedSortKey) as info:
		build_query({'sortBy': 'yeer'})
	assert info.value.suggestion == 'year'
	assert "did you mean 'year'" in str(info.value)


def test_limit_parsing():
	assert parse_limit(None) is None
	assert parse_limit('') is None
	assert parse_limit('0') == 0
	assert parse_limit('12') == 12
	with pytest.raises(MalformedParameter):
		parse_limit('-1')
	with pytest.raises(MalformedParameter):
		parse_limit('ten')


def test_query_is_immutable():
	query = build_query({'year': '2019', 'limit': '3'})
	with pytest.raises(FrozenInstanceError):
		query.limit = 5


def test_parse_int_accepts_32_bit_bounds():
	assert parse_int('year', '2147483647') == 2147483647
	assert parse_int('year', '-2147483648') == -2147483648


@pytest.mark.parametrize('raw', ['2147483648', '-2147483649', '99999999999999999999'])
def test_parse_int_rejects_values_outside_32_bits(raw):
	with pytest.raises(MalformedParameter) as info:
		parse_int('year', raw)
	assert info.value.value == raw


def test_oversized_limit_is_malformed():
	with pytest.raises(MalformedParameter):
		build_query({'limit': '99999999999999999999'})
