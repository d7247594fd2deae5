"""
목적:
- 매칭된 문서마다 슬롯 분리와 병합을 실행하는 플러그인을 제공한다.

설명:
- 구분자는 호스트 front-matter 설정에서 가져오며, 목록이면 첫 번째 값만 쓴다.
- 매칭되지 않은 문서는 건드리지 않는다.
- 블록 문법 오류는 잡지 않고 호스트로 전파한다.

디자인 패턴:
- 플러그인(Plugin).

참조:
- src_py/content_slots/pipeline/host.py
- src_py/content_slots/segmentation/splitter.py
- src_py/content_slots/segmentation/merger.py
"""

from __future__ import annotations

from collections.abc import Mapping

from content_slots.config.models import SlotsOptions, normalize_options
from content_slots.contracts.document_models import Document
from content_slots.pipeline.host import ContentPipeline
from content_slots.segmentation.merger import merge_slots
from content_slots.segmentation.splitter import split_slots

DEBUG_NAMESPACE = "content_slots.slots"


class SlotsPlugin:
    """문서 본문을 이름 있는 슬롯으로 나누는 플러그인."""

    name = "slots"

    def __init__(self, options: SlotsOptions) -> None:
        self.options = options

    def __call__(self, files: dict[str, Document], host: ContentPipeline) -> None:
        debug = host.debug(DEBUG_NAMESPACE)
        debug("실행 옵션: %s", self.options)

        delimiter = host.frontmatter_delimiters
        if isinstance(delimiter, list):
            delimiter = delimiter[0]

        matches = host.match(self.options.pattern, list(files))
        debug("처리 대상 파일 %s개", len(matches))
        debug.info("매칭된 파일: %s", matches)

        for filepath in matches:
            document = files[filepath]
            ordered = split_slots(document.contents, delimiter, host.matter)
            merge_slots(ordered, document, debug, host.path(filepath))


def slots(options: SlotsOptions | Mapping[str, object] | None = None) -> SlotsPlugin:
    """슬롯 플러그인을 생성한다.

    Args:
        options: `pattern`만 인식한다. 기본값은 `**/*.md`.

    Returns:
        `(files, host)`를 받는 플러그인 객체.
    """
    return SlotsPlugin(normalize_options(options))
