"""テスト共通のヘルパー."""

from pathlib import Path

FIXTURES_DIR = Path(__file__).parent / "fixtures"


class FakeFetcher:
    """URL ごとに固定のバイト列を返す Fetcher. 呼ばれた URL を記録する."""

    def __init__(self, responses: dict[str, bytes] | None = None, default: bytes | None = None):
        self.responses = responses or {}
        self.default = default
        self.urls: list[str] = []

    def fetch(self, url: str) -> bytes:
        self.urls.append(url)
        if url in self.responses:
            return self.responses[url]
        if self.default is not None:
            return self.default
        raise AssertionError(f"unexpected URL: {url}")


def load_fixture(name: str) -> bytes:
    return (FIXTURES_DIR / name).read_bytes()
