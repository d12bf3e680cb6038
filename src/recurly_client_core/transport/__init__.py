"""Transport-level helpers.

Modules:
    pagination: Link-header cursor pagination and page merging

Example:
    ```python
    from recurly_client_core.transport import merge_pages

    accounts = merge_pages(pages, Accounts)
    ```
"""

from recurly_client_core.transport.pagination import Page, merge_pages, next_page_url

__all__ = ["Page", "merge_pages", "next_page_url"]
