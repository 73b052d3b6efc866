"""wiki モジュールのユニットテスト."""

import pytest

from conftest import FakeFetcher, load_fixture
from wikitop.errors import NotFoundError, RemoteAPIError, TransportError
from wikitop.models import ArticleSummary
from wikitop.wiki import (
    build_article_detail_url,
    build_most_viewed_url,
    fetch_article_url,
    fetch_most_viewed,
)


class TestBuildUrls:
    """URL 組み立てのテスト."""

    @pytest.mark.parametrize("lang", ["ja", "en", "zh-yue", "simple"])
    def test_most_viewed_url(self, lang):
        url = build_most_viewed_url(lang)
        assert url == (
            f"https://{lang}.wikipedia.org/w/api.php"
            "?action=query&list=mostviewed&format=json"
        )

    def test_most_viewed_lang_not_escaped(self):
        url = build_most_viewed_url("en&x=1")
        assert url.startswith("https://en&x=1.wikipedia.org/")

    def test_detail_url_ascii(self):
        assert build_article_detail_url("en", "Cat") == (
            "https://en.wikipedia.org/w/api.php"
            "?action=query&format=json&titles=Cat&prop=info&inprop=url"
        )

    def test_detail_url_non_ascii(self):
        url = build_article_detail_url("ja", "東京")
        assert "titles=%E6%9D%B1%E4%BA%AC&" in url

    def test_detail_url_space_and_slash(self):
        url = build_article_detail_url("en", "AC/DC discography")
        assert "titles=AC%2FDC+discography&" in url

    def test_detail_url_reserved_chars(self):
        url = build_article_detail_url("en", "Q&A=?")
        assert "titles=Q%26A%3D%3F&prop=info" in url


class TestFetchMostViewed:
    """fetch_most_viewed のテスト."""

    def test_success(self):
        fetcher = FakeFetcher(default=load_fixture("mostviewed.json"))
        articles = fetch_most_viewed("ja", fetcher)

        assert fetcher.urls == [build_most_viewed_url("ja")]
        assert articles[0] == ArticleSummary(title="メインページ", view_count=1520344)
        assert len(articles) == 3

    def test_api_error(self):
        fetcher = FakeFetcher(default=load_fixture("api_error.json"))
        with pytest.raises(RemoteAPIError):
            fetch_most_viewed("xx", fetcher)

    def test_transport_error_propagates(self):
        class BrokenFetcher:
            def fetch(self, url):
                raise TransportError("connection refused")

        with pytest.raises(TransportError):
            fetch_most_viewed("ja", BrokenFetcher())


class TestFetchArticleUrl:
    """fetch_article_url のテスト."""

    def test_success(self):
        fetcher = FakeFetcher(default=load_fixture("page_detail.json"))
        url = fetch_article_url("ja", "東京", fetcher)

        assert url == "https://ja.wikipedia.org/wiki/%E6%9D%B1%E4%BA%AC"
        assert fetcher.urls == [build_article_detail_url("ja", "東京")]

    def test_first_page_used(self):
        body = b'{"query":{"pages":{"1":{"fullurl":"https://a"},"2":{"fullurl":"https://b"}}}}'
        assert fetch_article_url("en", "A", FakeFetcher(default=body)) == "https://a"

    def test_empty_pages(self):
        fetcher = FakeFetcher(default=b'{"query":{"pages":{}}}')
        with pytest.raises(NotFoundError, match="article URL not found"):
            fetch_article_url("ja", "Cat", fetcher)

    def test_missing_query(self):
        with pytest.raises(NotFoundError):
            fetch_article_url("ja", "Cat", FakeFetcher(default=b"{}"))
