"""
목적:
- 파이프라인이 다루는 문서 레코드 모델을 정의한다.

설명:
- 문서는 주 본문(`contents`, bytes)과 선택적 `slots` 필드를 가진다.
- `slots` 필드의 부재는 pydantic `model_fields_set`으로 추적한다.
- 그 외 front-matter 메타데이터 키는 extra 필드로 보존한다.

디자인 패턴:
- DTO(Data Transfer Object) + 태그 상태(Tagged State).

참조:
- src_py/content_slots/segmentation/merger.py
- src_py/content_slots/pipeline/host.py
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class SlotsFieldState(str, Enum):
    """기존 `slots` 필드와 새 파싱 결과의 병합 방식 판정값."""

    ABSENT = "absent"
    MAPPING = "mapping"
    INCOMPATIBLE = "incompatible"


class Document(BaseModel):
    """파이프라인 문서 레코드 모델."""

    model_config = ConfigDict(extra="allow", arbitrary_types_allowed=True)

    contents: bytes = Field(default=b"")
    slots: Any = Field(default=None)

    def text(self) -> str:
        """주 본문을 UTF-8 문자열로 반환한다."""
        return self.contents.decode("utf-8")

    def has_slots(self) -> bool:
        """이전 단계 또는 슬롯 병합이 `slots` 필드를 설정했는지 여부."""
        return "slots" in self.model_fields_set
