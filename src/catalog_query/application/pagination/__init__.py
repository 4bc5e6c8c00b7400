"""Application pagination – view projection and page primitives."""
from catalog_query.application.pagination.page_request import MAX_PAGE_SIZE, PageRequest
from catalog_query.application.pagination.page import Page, project, top_n

__all__ = ["MAX_PAGE_SIZE", "Page", "PageRequest", "project", "top_n"]
