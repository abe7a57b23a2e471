"""
Unit tests for TfIdfRanker scoring, filtering and ordering.
"""

import math

import pytest
from search_server.index.document_store import DocumentStatus, DocumentStore
from search_server.index.inverted_index import InvertedIndex
from search_server.index.query import Query
from search_server.index.scorer import Document, TfIdfRanker, status_is


def build(documents):
    """documents: [(id, words, rating, status)] → (index, store)"""
    index = InvertedIndex()
    store = DocumentStore()
    for document_id, words, rating, status in documents:
        index.add(document_id, words)
        store.register(document_id, status, [rating])
    return index, store


def accept_all(document_id, status, rating):
    return True


class TestScore:
    """Test TF-IDF relevance accumulation"""
    
    def test_tf_idf_formula(self):
        index, store = build([
            (1, ["cat", "dog"], 0, DocumentStatus.ACTUAL),
            (2, ["cat", "hamster"], 0, DocumentStatus.ACTUAL),
            (3, ["rat"], 0, DocumentStatus.ACTUAL),
        ])
        
        scores = TfIdfRanker().score(Query(plus_words=frozenset({"cat", "dog"})), index, store, accept_all)
        
        assert scores[1] == pytest.approx(0.5 * math.log(3 / 2) + 0.5 * math.log(3 / 1))
        assert scores[2] == pytest.approx(0.5 * math.log(3 / 2))
        assert 3 not in scores
    
    def test_term_in_every_document_scores_zero(self):
        """Test idf = ln(1) = 0 still yields a match"""
        index, store = build([
            (1, ["cat"], 0, DocumentStatus.ACTUAL),
            (2, ["cat"], 0, DocumentStatus.ACTUAL),
        ])
        
        scores = TfIdfRanker().score(Query(plus_words=frozenset({"cat"})), index, store, accept_all)
        
        assert scores == {1: 0.0, 2: 0.0}
    
    def test_unknown_terms_ignored(self):
        index, store = build([(1, ["cat"], 0, DocumentStatus.ACTUAL)])
        
        query = Query(plus_words=frozenset({"unicorn"}), minus_words=frozenset({"dragon"}))
        assert TfIdfRanker().score(query, index, store, accept_all) == {}
    
    def test_predicate_receives_metadata(self):
        index, store = build([(7, ["cat"], 4, DocumentStatus.BANNED)])
        calls = []
        
        def predicate(document_id, status, rating):
            calls.append((document_id, status, rating))
            return False
        
        scores = TfIdfRanker().score(Query(plus_words=frozenset({"cat"})), index, store, predicate)
        
        assert scores == {}
        assert calls == [(7, DocumentStatus.BANNED, 4)]
    
    def test_minus_word_removes_document(self):
        index, store = build([
            (1, ["cat", "dog"], 0, DocumentStatus.ACTUAL),
            (2, ["cat", "rat"], 0, DocumentStatus.ACTUAL),
        ])
        
        query = Query(plus_words=frozenset({"cat"}), minus_words=frozenset({"dog"}))
        scores = TfIdfRanker().score(query, index, store, accept_all)
        
        assert list(scores) == [2]


class TestRank:
    """Test ordering and truncation"""
    
    def test_sorted_by_relevance(self):
        index, store = build([
            (1, ["cat", "x", "y", "z"], 0, DocumentStatus.ACTUAL),
            (2, ["cat"], 0, DocumentStatus.ACTUAL),
            (3, ["dog"], 0, DocumentStatus.ACTUAL),
        ])
        
        results = TfIdfRanker().rank(Query(plus_words=frozenset({"cat"})), index, store, accept_all)
        
        assert [doc.id for doc in results] == [2, 1]
        assert results[0].relevance > results[1].relevance
    
    def test_tie_broken_by_rating(self):
        index, store = build([
            (1, ["cat"], 1, DocumentStatus.ACTUAL),
            (2, ["cat"], 9, DocumentStatus.ACTUAL),
            (3, ["dog"], 5, DocumentStatus.ACTUAL),
        ])
        
        results = TfIdfRanker().rank(Query(plus_words=frozenset({"cat"})), index, store, accept_all)
        
        assert [doc.id for doc in results] == [2, 1]
    
    def test_full_tie_keeps_ascending_id(self):
        """Test equal relevance and rating fall back to id order, not insertion order"""
        index, store = build([
            (30, ["cat"], 3, DocumentStatus.ACTUAL),
            (10, ["cat"], 3, DocumentStatus.ACTUAL),
            (20, ["cat"], 3, DocumentStatus.ACTUAL),
            (40, ["dog"], 3, DocumentStatus.ACTUAL),
        ])
        
        results = TfIdfRanker().rank(Query(plus_words=frozenset({"cat"})), index, store, accept_all)
        
        assert [doc.id for doc in results] == [10, 20, 30]
    
    def test_truncated_to_max_results(self):
        documents = [(i, ["cat"] if i else ["dog"], i, DocumentStatus.ACTUAL) for i in range(10)]
        index, store = build(documents)
        
        results = TfIdfRanker().rank(Query(plus_words=frozenset({"cat"})), index, store, accept_all)
        
        assert len(results) == 5
        # Equal relevance → highest ratings first
        assert [doc.id for doc in results] == [9, 8, 7, 6, 5]
    
    def test_custom_max_results(self):
        documents = [(i, ["cat", "x" * i], 0, DocumentStatus.ACTUAL) for i in range(1, 5)]
        index, store = build(documents + [(9, ["dog"], 0, DocumentStatus.ACTUAL)])
        
        results = TfIdfRanker(max_results=2).rank(Query(plus_words=frozenset({"cat"})), index, store, accept_all)
        
        assert len(results) == 2
    
    def test_empty_result(self):
        index, store = build([(1, ["cat"], 0, DocumentStatus.ACTUAL)])
        assert TfIdfRanker().rank(Query(), index, store, accept_all) == []
    
    def test_result_rating_from_store(self):
        index, store = build([
            (1, ["cat"], 7, DocumentStatus.ACTUAL),
            (2, ["dog"], 0, DocumentStatus.ACTUAL),
        ])
        
        results = TfIdfRanker().rank(Query(plus_words=frozenset({"cat"})), index, store, accept_all)
        
        assert results == [Document(id=1, relevance=pytest.approx(math.log(2)), rating=7)]


class TestHelpers:
    """Test Document rendering and status predicate"""
    
    def test_document_str(self):
        assert str(Document(id=1, relevance=0.5, rating=3)) == "{ document_id = 1, relevance = 0.5, rating = 3 }"
    
    def test_status_is(self):
        predicate = status_is(DocumentStatus.BANNED)
        
        assert predicate(1, DocumentStatus.BANNED, 0)
        assert not predicate(1, DocumentStatus.ACTUAL, 0)
