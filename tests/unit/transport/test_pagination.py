"""Tests for Link-header pagination."""

import httpx
import pytest

from recurly_client_core.errors import DecodingError
from recurly_client_core.models import Accounts, Transactions
from recurly_client_core.testing import xml_response
from recurly_client_core.transport import Page, merge_pages, next_page_url
from recurly_client_core.transport.pagination import page_from_response


def accounts_page(*codes: str) -> bytes:
    items = "".join(f"<account><account_code>{code}</account_code></account>" for code in codes)
    return f'<accounts type="array">{items}</accounts>'.encode()


@pytest.mark.unit
class TestNextPageUrl:
    """Test extraction of the next page URL."""

    def test_next_link(self):
        """Test the rel="next" URL is returned verbatim."""
        response = httpx.Response(
            200,
            headers={
                "Link": '<https://api.recurly.com/v2/transactions>; rel="start", '
                '<https://api.recurly.com/v2/transactions?cursor=124142>; rel="next"'
            },
        )

        assert next_page_url(response) == "https://api.recurly.com/v2/transactions?cursor=124142"

    def test_no_link_header(self):
        """Test a response without Link header is the last page."""
        assert next_page_url(httpx.Response(200)) is None

    def test_link_without_next(self):
        """Test a Link header with only start/prev is the last page."""
        response = httpx.Response(
            200,
            headers={
                "Link": '<https://api.recurly.com/v2/transactions>; rel="start", '
                '<https://api.recurly.com/v2/transactions?cursor=-1>; rel="prev"'
            },
        )

        assert next_page_url(response) is None

    def test_page_from_response(self):
        """Test a page keeps its body and next URL."""
        page = page_from_response(xml_response("<accounts/>", next_url="https://api.recurly.com/v2/accounts?cursor=2"))

        assert page.body == b"<accounts/>"
        assert page.has_next
        assert page.next_url == "https://api.recurly.com/v2/accounts?cursor=2"


@pytest.mark.unit
class TestMergePages:
    """Test merging list pages."""

    def test_page_order_then_item_order(self):
        """Test items keep page order, then in-page order."""
        pages = [Page(accounts_page("a", "b")), Page(accounts_page("c")), Page(accounts_page("d", "e"))]

        merged = merge_pages(pages, Accounts)

        assert [account.account_code for account in merged] == ["a", "b", "c", "d", "e"]

    def test_single_page(self):
        """Test one page decodes as-is."""
        merged = merge_pages([Page(accounts_page("only"))], Accounts)

        assert isinstance(merged, Accounts)
        assert len(merged) == 1

    def test_empty_pages(self):
        """Test pages with no items merge into an empty collection."""
        merged = merge_pages([Page(accounts_page()), Page(accounts_page())], Accounts)

        assert merged is not None
        assert len(merged) == 0

    def test_no_pages_is_none(self):
        """Test zero pages gives None, not an empty collection."""
        assert merge_pages([], Accounts) is None

    def test_undecodable_page(self):
        """Test a bad page fails the whole merge."""
        with pytest.raises(DecodingError):
            merge_pages([Page(accounts_page("a")), Page(b"<accounts>")], Accounts)

    def test_page_of_wrong_type(self):
        """Test pages must all be the requested list type."""
        with pytest.raises(DecodingError):
            merge_pages([Page(accounts_page("a")), Page(b'<transactions type="array"/>')], Accounts)

    def test_other_list_type(self):
        """Test merging works for any list type."""
        pages = [
            Page(b"<transactions><transaction><uuid>t1</uuid></transaction></transactions>"),
            Page(b"<transactions><transaction><uuid>t2</uuid></transaction></transactions>"),
        ]

        merged = merge_pages(pages, Transactions)

        assert [transaction.uuid for transaction in merged] == ["t1", "t2"]
