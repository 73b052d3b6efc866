"""API 応答のデコードモジュール.

デコードは2段階:
  1. error オブジェクトの確認 (正常応答でも失敗しないこと)
  2. 呼び出し元に応じた形 (mostviewed リスト / pages マッピング) への変換
"""

from __future__ import annotations

import json
import logging

from wikitop.errors import DecodeError, RemoteAPIError
from wikitop.models import ApiErrorEnvelope, ArticleSummary, PageDetail

logger = logging.getLogger(__name__)


def check_api_error(body: bytes) -> dict:
    """応答本文をパースし、API エラーなら RemoteAPIError を送出する.

    Returns:
        パース済みの JSON オブジェクト。
    """
    try:
        doc = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DecodeError(f"failed to parse API response: {e}") from e
    if not isinstance(doc, dict):
        raise DecodeError(
            f"failed to parse API response: expected object, got {type(doc).__name__}"
        )

    envelope = _parse_error_envelope(doc.get("error"))
    if envelope.has_error:
        logger.warning("API エラー応答: code=%s, info=%s", envelope.code, envelope.info)
        raise RemoteAPIError(envelope.code, envelope.info)
    return doc


def _parse_error_envelope(raw) -> ApiErrorEnvelope:
    if raw is None:
        return ApiErrorEnvelope()
    if not isinstance(raw, dict):
        raise DecodeError("failed to parse API response: error is not an object")
    return ApiErrorEnvelope(
        code=_get_typed(raw, "code", str, ""),
        info=_get_typed(raw, "info", str, ""),
    )


def decode_most_viewed(body: bytes) -> list[ArticleSummary]:
    """query.mostviewed を ArticleSummary のリストに変換する. 順序は API のまま."""
    doc = check_api_error(body)
    query = _get_typed(doc, "query", dict, {})
    items = _get_typed(query, "mostviewed", list, [])

    articles: list[ArticleSummary] = []
    for item in items:
        if not isinstance(item, dict):
            raise DecodeError("unexpected mostviewed entry: not an object")
        articles.append(ArticleSummary(
            title=_get_typed(item, "title", str, ""),
            view_count=_get_typed(item, "count", int, 0),
        ))
    return articles


def decode_page_detail(body: bytes) -> dict[str, PageDetail]:
    """query.pages をページ ID → PageDetail のマッピングに変換する."""
    doc = check_api_error(body)
    query = _get_typed(doc, "query", dict, {})
    pages = _get_typed(query, "pages", dict, {})

    details: dict[str, PageDetail] = {}
    for page_id, page in pages.items():
        if not isinstance(page, dict):
            raise DecodeError(f"unexpected page entry {page_id}: not an object")
        details[page_id] = PageDetail(full_url=_get_typed(page, "fullurl", str, ""))
    return details


def _get_typed(d: dict, key: str, expected: type, default):
    """dict から型を確認しつつ値を取得する. キーが無い・null ならデフォルト."""
    value = d.get(key)
    if value is None:
        return default
    # bool は int のサブクラスなので除外する
    if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
        raise DecodeError(
            f"unexpected type for {key!r}: expected {expected.__name__}, "
            f"got {type(value).__name__}"
        )
    return value
