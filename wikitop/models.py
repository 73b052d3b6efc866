"""データモデル定義."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ArticleSummary:
    """閲覧数ランキングの1記事を表す."""

    title: str
    view_count: int


@dataclass(frozen=True)
class ApiErrorEnvelope:
    """API エラー応答の error オブジェクト. 正常応答では両方とも空文字."""

    code: str = ""
    info: str = ""

    @property
    def has_error(self) -> bool:
        return self.code != ""


@dataclass(frozen=True)
class PageDetail:
    """記事情報 (prop=info&inprop=url) の1ページ分."""

    full_url: str
