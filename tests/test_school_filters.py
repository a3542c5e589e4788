import pytest


@pytest.fixture
def catalog(create_school):
    """Four schools spread over the filter dimensions, keyed by short name."""
    return {
        "eton": create_school(
            name="Eton Vale", description="Rowing on the river", region="england", cost_range="30000",
            sports=[{"sport_type": "rowing", "is_primary": True}, {"sport_type": "football"}],
            scholarships=[{"scholarship_type": "sports_scholarship"}],
        ),
        "bath": create_school(
            name="Bath Abbey College", description="Georgian city campus", region="england", cost_range="50000",
            sports=[{"sport_type": "tennis"}],
            scholarships=[{"scholarship_type": "full_scholarship"}],
        ),
        "fife": create_school(
            name="Fife Academy", description="Links golf and RUGBY heritage", region="scotland", cost_range="30000",
            sports=[{"sport_type": "rugby"}, {"sport_type": "football"}],
        ),
        "conwy": create_school(
            name="Conwy Castle School", description="100% boarding community", region="wales", cost_range="80000",
        ),
    }


def _search(client, body=None):
    response = client.post("/schools/search", json=body)
    assert response.status_code == 200, response.text
    return [s["name"] for s in response.json()]


def test_no_filters_returns_all_in_insertion_order(client, catalog):
    expected = ["Eton Vale", "Bath Abbey College", "Fife Academy", "Conwy Castle School"]

    assert _search(client) == expected
    assert _search(client, {}) == expected


def test_region_and_cost_range_combine_with_and(client, catalog):
    names = _search(client, {"regions": ["england"], "cost_ranges": ["30000"]})

    assert names == ["Eton Vale"]


def test_values_within_a_dimension_combine_with_or(client, catalog):
    names = _search(client, {"regions": ["scotland", "wales"]})

    assert names == ["Fife Academy", "Conwy Castle School"]


def test_sport_filter_requires_a_matching_sport_row(client, catalog):
    assert _search(client, {"sports": ["football"]}) == ["Eton Vale", "Fife Academy"]
    assert _search(client, {"sports": ["swimming"]}) == []


def test_sport_filter_matches_any_listed_sport(client, catalog):
    names = _search(client, {"sports": ["tennis", "rugby"]})

    assert names == ["Bath Abbey College", "Fife Academy"]


def test_school_with_duplicate_matches_is_listed_once(client, create_school):
    create_school(name="Twice", sports=[{"sport_type": "hockey"}, {"sport_type": "hockey"}])

    assert _search(client, {"sports": ["hockey"]}) == ["Twice"]


def test_scholarship_filter(client, catalog):
    names = _search(client, {"scholarships": ["full_scholarship", "sports_scholarship"]})

    assert names == ["Eton Vale", "Bath Abbey College"]


def test_sport_and_scholarship_filters_combine_with_and(client, catalog):
    names = _search(client, {"sports": ["football"], "scholarships": ["sports_scholarship"]})

    assert names == ["Eton Vale"]


def test_search_is_case_insensitive_over_name_and_description(client, catalog):
    assert _search(client, {"search": "abbey"}) == ["Bath Abbey College"]
    assert _search(client, {"search": "rugby"}) == ["Fife Academy"]
    assert _search(client, {"search": "ROW"}) == ["Eton Vale"]


def test_search_treats_wildcards_literally(client, catalog):
    assert _search(client, {"search": "100%"}) == ["Conwy Castle School"]
    assert _search(client, {"search": "%"}) == ["Conwy Castle School"]
    assert _search(client, {"search": "_"}) == []


def test_search_combines_with_other_filters(client, catalog):
    names = _search(client, {"search": "o", "regions": ["england"], "sports": ["rowing"]})

    assert names == ["Eton Vale"]


def test_empty_filter_lists_are_ignored(client, catalog):
    names = _search(client, {"sports": [], "regions": [], "search": ""})

    assert len(names) == 4


def test_pagination_applies_after_filtering(client, catalog):
    assert _search(client, {"limit": 2}) == ["Eton Vale", "Bath Abbey College"]
    assert _search(client, {"limit": 2, "offset": 2}) == ["Fife Academy", "Conwy Castle School"]
    assert _search(client, {"regions": ["england", "scotland"], "limit": 1, "offset": 1}) == ["Bath Abbey College"]
    assert _search(client, {"offset": 10}) == []


def test_default_limit_is_twenty(client, create_school):
    for i in range(25):
        create_school(name=f"School {i}")

    assert len(_search(client)) == 20


@pytest.mark.parametrize("body", [
    {"limit": 0},
    {"limit": -1},
    {"offset": -1},
    {"regions": ["munster"]},
    {"cost_ranges": ["90000"]},
    {"sports": ["cricket"]},
])
def test_invalid_filters_are_rejected(client, body):
    response = client.post("/schools/search", json=body)

    assert response.status_code == 422
