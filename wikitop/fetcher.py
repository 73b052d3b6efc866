"""API 取得モジュール.

クエリ処理は Fetcher プロトコル (fetch(url) -> bytes) にのみ依存する。
テストでは固定のバイト列を返す実装に差し替える。
"""

from __future__ import annotations

import logging
from typing import Protocol

import requests

from wikitop.errors import TransportError

logger = logging.getLogger(__name__)


class Fetcher(Protocol):
    def fetch(self, url: str) -> bytes:
        ...


class HttpFetcher:
    """requests による Fetcher 実装.

    タイムアウト・リトライ・追加ヘッダーは設定しない (requests のデフォルト)。
    ステータスコードでは失敗扱いにせず、本文の JSON で判定する。
    """

    def fetch(self, url: str) -> bytes:
        logger.info("API リクエスト: %s", url)
        try:
            resp = requests.get(url)
            body = resp.content
        except requests.RequestException as e:
            logger.error("API 取得失敗: url=%s, error=%s", url, e)
            raise TransportError(f"request failed: {e}") from e

        if not resp.ok:
            logger.warning("API ステータス異常: url=%s, status=%d", url, resp.status_code)
        logger.debug("API 応答: %d バイト", len(body))
        return body
