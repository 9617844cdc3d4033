"""Tests for QueryBuilder.to_dict, the JSON body sent to filter endpoints."""

from __future__ import annotations

import json
from datetime import date

from mixcore_sdk.query import QueryBuilder, SortDirection

CONTRACT_KEYS = {
    "pageIndex",
    "pageSize",
    "orderBy",
    "direction",
    "selectColumns",
    "keyword",
    "searchColumns",
    "compareOperator",
    "conjunction",
    "queries",
    "mixDatabaseName",
}


def test_fresh_builder_emits_contract_keys_as_null():
    payload = QueryBuilder().to_dict()
    assert set(payload) == CONTRACT_KEYS
    assert payload == {
        "pageIndex": 0,
        "pageSize": None,
        "orderBy": None,
        "direction": None,
        "selectColumns": None,
        "keyword": None,
        "searchColumns": None,
        "compareOperator": None,
        "conjunction": "And",
        "queries": [],
        "mixDatabaseName": None,
    }


def test_full_query_payload():
    q = (
        QueryBuilder()
        .default(10)
        .sort("createdDateTime", SortDirection.DESC)
        .select("id", "title")
        .like("title", "news", True)
        .between("price", 10, 100)
    )
    q.mix_database_name = "products"

    assert q.to_dict() == {
        "pageIndex": 0,
        "pageSize": 10,
        "orderBy": "createdDateTime",
        "direction": "Desc",
        "selectColumns": "id, title",
        "keyword": None,
        "searchColumns": None,
        "compareOperator": None,
        "conjunction": "And",
        "queries": [
            {
                "fieldName": "title",
                "value": "news",
                "compareOperator": "Like",
                "isRequired": True,
            },
            {
                "fieldName": "price",
                "value": 10,
                "compareOperator": "GreaterThan",
                "isRequired": False,
            },
            {
                "fieldName": "price",
                "value": 100,
                "compareOperator": "LessThan",
                "isRequired": False,
            },
        ],
        "mixDatabaseName": "products",
    }


def test_keyword_search_payload():
    payload = QueryBuilder().search_by_keyword("shoe", ["title", "sku"]).to_dict()
    assert payload["keyword"] == "shoe"
    assert payload["searchColumns"] == ["title", "sku"]
    assert payload["compareOperator"] == "Like"
    assert payload["conjunction"] == "And"
    assert payload["queries"] == []


def test_optional_keys_only_when_set():
    q = (
        QueryBuilder()
        .with_parent(3, guid_parent_id="abc")
        .with_status("Published")
        .with_nested_data(False)
        .add_sort("title", "Asc")
        .where_metadata(QueryBuilder.filters.equal("tag", "python"))
    )
    q.filters_map = {"publishedAt": date(2024, 1, 1)}
    payload = q.to_dict()

    assert payload["parentId"] == 3
    assert payload["guidParentId"] == "abc"
    assert "parentName" not in payload
    assert payload["status"] == "Published"
    assert payload["loadNestedData"] is False
    assert payload["sorts"] == [{"colSysName": "title", "direction": "Asc"}]
    assert payload["metadataQueries"][0]["fieldName"] == "tag"
    assert payload["filters"] == {"publishedAt": "2024-01-01"}
    assert "columns" not in payload
    assert "searchMethod" not in payload


def test_extras_merged_last():
    payload = (
        QueryBuilder()
        .with_extra("culture", "en-US")
        .with_extra("pageSize", 99)
        .default(10)
        .to_dict()
    )
    assert payload["culture"] == "en-US"
    assert payload["pageSize"] == 99


def test_seeded_unknown_key_passes_through():
    payload = QueryBuilder({"specificity": "high"}).to_dict()
    assert payload["specificity"] == "high"


def test_payload_is_json_serializable():
    q = QueryBuilder().default().greater_than("createdDateTime", date(2024, 5, 1))
    text = json.dumps(q.to_dict())
    assert '"2024-05-01"' in text


def test_to_dict_does_not_alias_builder_state():
    q = QueryBuilder().search_by_keyword("x", ["a"])
    payload = q.to_dict()
    payload["searchColumns"].append("b")
    payload["queries"].append({})
    assert q.search_columns == ["a"]
    assert q.queries == []


def test_serialization_is_repeatable():
    q = QueryBuilder().default().like("title", "x")
    assert q.to_dict() == q.to_dict()


def test_extras_render_dates_as_iso():
    payload = (
        QueryBuilder()
        .with_extra("since", date(2024, 1, 1))
        .with_extra("tags", ["a", "b"])
        .to_dict()
    )
    assert payload["since"] == "2024-01-01"
    assert payload["tags"] == ["a", "b"]
    json.dumps(payload)
