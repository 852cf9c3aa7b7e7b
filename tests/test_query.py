"""Tests for the lazy index query and the in-memory backend."""
import pytest

from customer_order_search.index import Document, InMemoryIndex, InMemoryIndexProvider, Query
from customer_order_search.index.predicates import FieldEquals


def _docs():
    return [
        Document(id="a", fields={"rank": 3, "group": "x"}),
        Document(id="b", fields={"rank": 1, "group": "y"}),
        Document(id="c", fields={"group": "x"}),
        Document(id="d", fields={"rank": 2, "group": "x"}),
    ]


def _ids(query):
    return [hit.document.id for hit in query.execute()]


class TestQuery:
    def test_builder_methods_return_new_queries(self):
        base = Query(_docs)
        filtered = base.where(FieldEquals("group", "x"))
        assert base.count() == 4
        assert filtered.count() == 3

    def test_missing_values_sort_first_ascending_last_descending(self):
        query = Query(_docs)
        key = lambda d: d.lookup("rank")  # noqa: E731
        assert _ids(query.order_by(key)) == ["c", "b", "d", "a"]
        assert _ids(query.order_by_descending(key)) == ["a", "d", "b", "c"]

    def test_skip_take_after_order(self):
        query = Query(_docs).order_by(lambda d: d.id).skip(1).take(2)
        assert _ids(query) == ["b", "c"]
        assert query.count() == 2

    def test_negative_skip_rejected(self):
        with pytest.raises(ValueError):
            Query(_docs).skip(-1)

    def test_hits_carry_no_score(self):
        hit = Query(_docs).execute()[0]
        assert hit.score is None


class TestInMemoryIndex:
    def test_context_serves_queries_while_open(self):
        index = InMemoryIndex("idx", _docs())
        with index.create_search_context() as context:
            assert context.queryable().count() == 4

    def test_closed_context_rejects_queries(self):
        index = InMemoryIndex("idx", _docs())
        with index.create_search_context() as context:
            query = context.queryable()
        with pytest.raises(RuntimeError):
            query.execute()

    def test_provider_unknown_index(self):
        with pytest.raises(LookupError):
            InMemoryIndexProvider().get_index("nope")


class TestSortKey:
    def test_kinds_rank_numbers_dates_strings_other(self):
        from datetime import date, datetime, timezone

        from customer_order_search.index.query import sort_key

        values = [["x"], "b", datetime(2024, 1, 1, tzinfo=timezone.utc), 2.5, None, date(2023, 1, 1), 1]
        ordered = sorted(values, key=sort_key)
        assert ordered == [None, 1, 2.5, date(2023, 1, 1), datetime(2024, 1, 1, tzinfo=timezone.utc), "b", ["x"]]

    def test_naive_and_aware_datetimes_compare_in_utc(self):
        from datetime import datetime, timedelta, timezone

        from customer_order_search.index.query import sort_key

        naive = datetime(2024, 1, 1, 12, 0)
        earlier_aware = datetime(2024, 1, 1, 12, 0, tzinfo=timezone(timedelta(hours=2)))
        assert sort_key(earlier_aware) < sort_key(naive)
