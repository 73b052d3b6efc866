"""Wikipedia API クエリモジュール.

閲覧数ランキング (list=mostviewed) と記事 URL (prop=info&inprop=url) の2種類のみ。
"""

from __future__ import annotations

import logging
from urllib.parse import quote_plus

from wikitop.config import ARTICLE_DETAIL_URL_TEMPLATE, MOST_VIEWED_URL_TEMPLATE
from wikitop.decoder import decode_most_viewed, decode_page_detail
from wikitop.errors import NotFoundError
from wikitop.fetcher import Fetcher
from wikitop.models import ArticleSummary

logger = logging.getLogger(__name__)


def build_most_viewed_url(lang: str) -> str:
    # lang はエスケープしない
    return MOST_VIEWED_URL_TEMPLATE.format(lang=lang)


def build_article_detail_url(lang: str, title: str) -> str:
    return ARTICLE_DETAIL_URL_TEMPLATE.format(lang=lang, title=quote_plus(title))


def fetch_most_viewed(lang: str, fetcher: Fetcher) -> list[ArticleSummary]:
    """閲覧数ランキングを取得する.

    ソート・フィルタ・重複排除は行わず、API が返した順序のまま返す。
    """
    body = fetcher.fetch(build_most_viewed_url(lang))
    articles = decode_most_viewed(body)
    logger.info("ランキング取得: lang=%s, %d 件", lang, len(articles))
    return articles


def fetch_article_url(lang: str, title: str, fetcher: Fetcher) -> str:
    """記事の正規 URL を取得する.

    タイトルは1件だけ指定するので、pages の最初の1件のみを見る。

    Raises:
        NotFoundError: pages が空の場合
    """
    body = fetcher.fetch(build_article_detail_url(lang, title))
    pages = decode_page_detail(body)
    for page in pages.values():
        logger.info("記事 URL 取得: title=%s, url=%s", title, page.full_url)
        return page.full_url
    raise NotFoundError("article URL not found")
