"""Unit test fixtures - sample engines and documents"""

import pytest

from search_server.index import DocumentStatus, SearchServer


SAMPLE_DOCUMENTS = [
    (1, "funny pet and nasty rat", DocumentStatus.ACTUAL, [7, 2, 7]),
    (2, "funny pet with curly hair", DocumentStatus.ACTUAL, [1, 2, 3]),
    (3, "big cat nasty hair", DocumentStatus.ACTUAL, [1, 2, 8]),
    (4, "big dog cat Vladislav", DocumentStatus.ACTUAL, [1, 3, 2]),
    (5, "big dog hamster Borya", DocumentStatus.ACTUAL, [1, 1, 1]),
]


@pytest.fixture
def sample_documents():
    """(id, text, status, ratings) tuples for the five pet documents"""
    return list(SAMPLE_DOCUMENTS)


@pytest.fixture
def empty_server():
    """Engine with 'and'/'with' stop words and no documents"""
    return SearchServer("and with")


@pytest.fixture
def sample_server(empty_server, sample_documents):
    """
    Engine loaded with five pet documents.
    
    Average ratings: 1 → 5, 2 → 2, 3 → 3, 4 → 2, 5 → 1
    """
    for document_id, text, status, ratings in sample_documents:
        empty_server.add_document(document_id, text, status, ratings)
    return empty_server
