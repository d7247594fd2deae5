"""
목적:
- 문서 묶음에 플러그인을 순서대로 적용하는 최소 호스트 파이프라인을 제공한다.

설명:
- 플러그인은 `(files, host)`를 받아 문서 dict를 제자리에서 변경한다.
- 호스트는 front-matter 파서, 진단 싱크, 경로 매처, 경로 해석을 제공한다.
- 저장소에서 문서를 읽거나 쓰는 책임은 호출자가 가진다.

디자인 패턴:
- 서비스 레이어(Service Layer) + 플러그인 체인(Plugin Chain).

참조:
- src_py/content_slots/pipeline/plugin.py
- src_py/content_slots/segmentation/frontmatter.py
- src_py/content_slots/shared/matching.py
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Callable

from content_slots.config.models import FrontmatterOptions
from content_slots.contracts.document_models import Document
from content_slots.shared.diagnostics import Diagnostics
from content_slots.shared.matching import match_paths
from content_slots.segmentation.frontmatter import FrontmatterParser

Plugin = Callable[[dict[str, Document], "ContentPipeline"], None]


class ContentPipeline:
    """문서 처리용 호스트 파이프라인 클래스."""

    def __init__(
        self,
        directory: str | Path,
        frontmatter: FrontmatterOptions | None = None,
        matter: FrontmatterParser | None = None,
    ) -> None:
        self._directory = Path(directory)
        self._frontmatter = frontmatter or FrontmatterOptions()
        self.matter = matter or FrontmatterParser(self._frontmatter)
        self._plugins: list[Plugin] = []

    @property
    def directory(self) -> Path:
        return self._directory

    @property
    def frontmatter_delimiters(self) -> str | list[str]:
        """호스트 전역 front-matter 구분자 설정(문자열 또는 대체 구분자 목록)."""
        return self._frontmatter.delimiters

    @property
    def plugins(self) -> list[Plugin]:
        return list(self._plugins)

    def debug(self, namespace: str) -> Diagnostics:
        return Diagnostics(namespace)

    def match(self, pattern: str, paths: Iterable[str]) -> list[str]:
        return match_paths(pattern, paths)

    def path(self, *parts: str) -> str:
        """작업 디렉터리 기준 절대 경로 문자열을 반환한다."""
        return str(self._directory.resolve().joinpath(*parts))

    def use(self, plugin: Plugin) -> ContentPipeline:
        self._plugins.append(plugin)
        return self

    def process(self, files: dict[str, Document]) -> dict[str, Document]:
        """등록 순서대로 플러그인을 실행하고 같은 문서 dict를 반환한다."""
        for plugin in self._plugins:
            plugin(files, self)
        return files
