"""
Unit tests for Paginator page views.
"""

import math

import pytest
from search_server.index.errors import InvalidInputError
from search_server.index.paginator import Page, Paginator, paginate
from search_server.index.scorer import Document


class TestPaginate:
    """Test page counts and boundaries"""
    
    def test_uneven_split(self):
        pages = paginate([1, 2, 3, 4, 5], 2)
        
        assert len(pages) == 3
        assert [list(page) for page in pages] == [[1, 2], [3, 4], [5]]
        assert [len(page) for page in pages] == [2, 2, 1]
    
    def test_even_split(self):
        assert [list(page) for page in paginate("abcdef", 3)] == [["a", "b", "c"], ["d", "e", "f"]]
    
    def test_empty_input_has_no_pages(self):
        pages = paginate([], 3)
        
        assert len(pages) == 0
        assert list(pages) == []
    
    def test_page_larger_than_input(self):
        pages = paginate([1, 2], 10)
        
        assert len(pages) == 1
        assert list(pages[0]) == [1, 2]
    
    @pytest.mark.parametrize("item_count,page_size", [(1, 1), (7, 3), (10, 5), (11, 4), (0, 1)])
    def test_page_count_and_concatenation(self, item_count, page_size):
        items = list(range(item_count))
        pages = paginate(items, page_size)
        
        assert len(pages) == math.ceil(item_count / page_size)
        assert all(len(page) == page_size for page in list(pages)[:-1])
        assert [item for page in pages for item in page] == items
    
    @pytest.mark.parametrize("page_size", [0, -2])
    def test_non_positive_page_size(self, page_size):
        with pytest.raises(InvalidInputError):
            paginate([1, 2, 3], page_size)
    
    def test_restartable(self):
        pages = paginate([1, 2, 3], 2)
        
        first_pass = [list(page) for page in pages]
        second_pass = [list(page) for page in pages]
        
        assert first_pass == second_pass
    
    def test_indexing(self):
        pages = paginate([1, 2, 3, 4, 5], 2)
        
        assert list(pages[-1]) == [5]
        assert [list(page) for page in pages[1:]] == [[3, 4], [5]]
        with pytest.raises(IndexError):
            pages[3]
    
    def test_paginator_type(self):
        pages = paginate([1], 1)
        
        assert isinstance(pages, Paginator)
        assert pages.page_size == 1


class TestPage:
    """Test page views over the original sequence"""
    
    def test_page_is_view(self):
        """Test items are not copied"""
        items = [object(), object(), object()]
        page = paginate(items, 2)[0]
        
        assert page[0] is items[0]
        assert page[1] is items[1]
    
    def test_bounds(self):
        page = paginate(list(range(10)), 4)[2]
        
        assert (page.start, page.stop) == (8, 10)
        assert page[-1] == 9
        assert page[0:1] == [8]
        with pytest.raises(IndexError):
            page[2]
    
    def test_sequence_protocol(self):
        page = Page(["a", "b", "c", "d"], 1, 3)
        
        assert "b" in page
        assert "d" not in page
        assert page.index("c") == 1
    
    def test_str_concatenates_documents(self):
        documents = [Document(id=1, relevance=0.5, rating=3), Document(id=2, relevance=0.25, rating=1)]
        page = paginate(documents, 2)[0]
        
        assert str(page) == (
            "{ document_id = 1, relevance = 0.5, rating = 3 }"
            "{ document_id = 2, relevance = 0.25, rating = 1 }"
        )
