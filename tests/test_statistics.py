"""Tests for the statistics aggregator."""

from clean_slate_api.app.services.statistics_service import StatisticsService


def test_empty_store(store):
    stats = StatisticsService.compute(store)
    assert stats.total_participants == 0
    assert stats.unique_offices == 0
    assert stats.profile_distribution == {}
    assert stats.concern_distribution == {}
    assert stats.avg_traits_selected == 0
    assert stats.completion_rate == 100
    assert stats.last_updated.endswith("Z")


def test_distributions_and_average(store):
    store.insert({"name": "A", "audienceProfile": "p1", "primaryConcern": "c1", "selectedTraits": ["x", "y"]})
    store.insert({"name": "B", "audienceProfile": "p1", "primaryConcern": "c2", "selectedTraits": ["x"]})
    stats = StatisticsService.compute(store)
    assert stats.total_participants == 2
    assert stats.profile_distribution == {"p1": 2}
    assert stats.concern_distribution == {"c1": 1, "c2": 1}
    assert stats.avg_traits_selected == 2


def test_missing_values_are_counted_as_undefined(store):
    store.insert({"audienceProfile": "p1"})
    store.insert({})
    stats = StatisticsService.compute(store)
    assert stats.profile_distribution == {"p1": 1, "undefined": 1}
    assert stats.concern_distribution == {"undefined": 2}


def test_unique_offices_group_by_code(store):
    store.insert({"congressionalOffice": "12|Smith"})
    store.insert({"congressionalOffice": "12|Smith (district)"})
    store.insert({"congressionalOffice": "34|Jones"})
    store.insert({"congressionalOffice": "56"})
    assert StatisticsService.compute(store).unique_offices == 3


def test_missing_office_is_one_bucket(store):
    store.insert({"congressionalOffice": "12|Smith"})
    store.insert({})
    store.insert({})
    assert StatisticsService.compute(store).unique_offices == 2


def test_average_rounds_half_up(store):
    store.insert({"selectedTraits": ["a", "b", "c"]})
    store.insert({"selectedTraits": ["a", "b"]})
    # 5 / 2 == 2.5
    assert StatisticsService.compute(store).avg_traits_selected == 3


def test_missing_traits_count_as_zero(store):
    store.insert({"selectedTraits": ["a", "b", "c", "d"]})
    store.insert({})
    store.insert({})
    # 4 / 3 ~ 1.33
    assert StatisticsService.compute(store).avg_traits_selected == 1


def test_explicit_null_is_its_own_bucket(store):
    store.insert({"audienceProfile": None, "primaryConcern": None})
    store.insert({})
    stats = StatisticsService.compute(store)
    assert stats.profile_distribution == {"null": 1, "undefined": 1}
    assert stats.concern_distribution == {"null": 1, "undefined": 1}


def test_non_string_categories_are_keyed_by_their_text(store):
    store.insert({"audienceProfile": 7, "primaryConcern": False})
    store.insert({"audienceProfile": "7", "primaryConcern": ["a", "b"]})
    stats = StatisticsService.compute(store)
    assert stats.profile_distribution == {"7": 2}
    assert stats.concern_distribution == {"false": 1, "a,b": 1}


def test_trait_count_follows_value_length(store):
    store.insert({"selectedTraits": "abcd"})
    store.insert({"selectedTraits": 5})
    store.insert({"selectedTraits": None})
    store.insert({"selectedTraits": ["a", "b"]})
    # (4 + 0 + 0 + 2) / 4 == 1.5
    assert StatisticsService.compute(store).avg_traits_selected == 2


def test_office_codes_from_non_string_values(store):
    store.insert({"congressionalOffice": 12})
    store.insert({"congressionalOffice": "12|Smith"})
    store.insert({"congressionalOffice": None})
    store.insert({})
    # "12" twice, plus one bucket for null and missing offices
    assert StatisticsService.compute(store).unique_offices == 2
