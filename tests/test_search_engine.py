from datetime import datetime

from asset_search.models.common import SizeRange
from asset_search.models.search import SearchFilters, SortBy, SortOrder
from asset_search.services.relevance import calculate_relevance_score
from asset_search.services.search_engine import perform_smart_search


def ids(assets):
    return [a.id for a in assets]


def test_defaults():
    filters = SearchFilters()
    assert filters.tags == []
    assert filters.file_types == []
    assert filters.sort_by == SortBy.RELEVANCE
    assert filters.sort_order == SortOrder.DESC


def test_unknown_sort_values_fall_back():
    filters = SearchFilters.model_validate({"sortBy": "popularity", "sortOrder": "sideways"})
    assert filters.sort_by == SortBy.RELEVANCE
    assert filters.sort_order == SortOrder.DESC


def test_scenario_a_relevance_desc_keeps_literal_order(make_asset):
    cat_photo = make_asset("Cat Photo", id="photo")
    dog = make_asset("Dog", id="dog", tags=["cat"])
    filters = SearchFilters(query="cat", sort_by="relevance", sort_order="desc")

    result = perform_smart_search([cat_photo, dog], filters)

    assert set(ids(result)) == {"photo", "dog"}
    # equal scores keep their input order
    assert calculate_relevance_score(cat_photo, "cat") == calculate_relevance_score(dog, "cat") == 15
    assert ids(result) == ["photo", "dog"]


def test_scenario_a_lower_score_first(make_asset):
    cat_photo = make_asset("Cat Photo", id="photo", view_count=20)  # 17
    dog = make_asset("Dog", id="dog", tags=["cat"])  # 15
    result = perform_smart_search([cat_photo, dog], SearchFilters(query="cat"))
    assert ids(result) == ["dog", "photo"]


def test_scenario_b_exclusion(make_asset):
    drafted = make_asset("notes", id="drafted", description="a rough draft")
    clean = make_asset("notes", id="clean", description="final")
    result = perform_smart_search([drafted, clean], SearchFilters(query="-draft"))
    assert ids(result) == ["clean"]


def test_scenario_c_file_types(make_asset):
    pdf = make_asset("doc", id="pdf", mime_type="application/pdf")
    png = make_asset("pic", id="png", mime_type="image/png")
    result = perform_smart_search([pdf, png], SearchFilters(file_types=["image"]))
    assert ids(result) == ["png"]


def test_scenario_d_size_range(make_asset):
    low = make_asset("low", id="low", size=1024)
    high = make_asset("high", id="high", size=2049)
    result = perform_smart_search([low, high], SearchFilters(size_range=SizeRange(min=1024, max=2048)))
    assert ids(result) == ["low"]


def test_scenario_e_date_ascending(library_assets):
    filters = SearchFilters(sort_by=SortBy.DATE, sort_order=SortOrder.ASC)
    result = perform_smart_search(library_assets, filters)
    assert ids(result) == ["backup", "report", "car", "holiday"]
    dates = [a.upload_date for a in result]
    assert dates == sorted(dates)


def test_exact_phrase_search(library_assets):
    result = perform_smart_search(library_assets, SearchFilters(query='"red car"', sort_by="name", sort_order="asc"))
    # the report only mentions "red" in OCR text
    assert ids(result) == ["holiday", "car"]


def test_search_is_idempotent_and_pure(library_assets):
    snapshot = [a.model_copy() for a in library_assets]
    filters = SearchFilters(query="red -draft", sort_by="views", sort_order="desc")
    first = perform_smart_search(library_assets, filters)
    second = perform_smart_search(library_assets, filters)
    assert ids(first) == ids(second) == ["holiday", "car"]
    assert library_assets == snapshot


def test_result_is_subset_of_input(library_assets):
    result = perform_smart_search(library_assets, SearchFilters(query="work", tags=["work"]))
    assert set(ids(result)) <= set(ids(library_assets))
    assert set(ids(result)) == {"report", "backup"}


def test_empty_collection(make_asset):
    assert perform_smart_search([], SearchFilters(query="anything")) == []


def test_date_filter_through_engine(library_assets):
    from asset_search.models.common import DateRange

    filters = SearchFilters(
        date_range=DateRange(from_=datetime(2024, 3, 10, 20, 0), to=datetime(2024, 4, 2)),
        sort_by=SortBy.DATE,
        sort_order=SortOrder.DESC,
    )
    assert ids(perform_smart_search(library_assets, filters)) == ["holiday", "car"]
