"""
목적:
- 슬롯과 구분자 블록 파싱 결과 인터페이스 모델을 정의한다.

설명:
- 슬롯은 이름과 자신이 소유한 본문 텍스트만 가진다.
- 템플릿 엔진이 슬롯 자체를 문자열로 다룰 때 본문이 그대로 렌더링되도록
  `RendersAsText` 인터페이스를 구현한다.

디자인 패턴:
- DTO(Data Transfer Object) + 프로토콜(Protocol).

참조:
- src_py/content_slots/segmentation/splitter.py
- src_py/content_slots/segmentation/frontmatter.py
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from pydantic import BaseModel, Field

PRIMARY_SLOT_NAME = "contents"


@runtime_checkable
class RendersAsText(Protocol):
    """문자열 변환 시 본문을 그대로 돌려주는 객체."""

    contents: str

    def __str__(self) -> str: ...


class Slot(BaseModel):
    """문서에서 분리한 이름 있는 본문 구간 모델."""

    name: str = Field(default=PRIMARY_SLOT_NAME, min_length=1)
    contents: str = Field(default="")

    def __str__(self) -> str:
        return self.contents


class ParsedBlock(BaseModel):
    """구분자 블록 파서 결과 모델."""

    metadata: dict[str, object] = Field(default_factory=dict)
    body: str = Field(default="")

    @property
    def slot_name(self) -> str:
        """메타데이터의 `slot` 키를 슬롯 이름으로 변환한다. 비어 있으면 기본 이름."""
        value = self.metadata.get("slot")
        if not value:
            return PRIMARY_SLOT_NAME
        return str(value)


class BlockParser(Protocol):
    """구분자 위치에서 시작하는 텍스트를 메타데이터/본문으로 나누는 협력자."""

    def parse(self, text: str) -> ParsedBlock: ...
