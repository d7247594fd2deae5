"""
목적:
- 분리된 슬롯 순서열을 문서의 주 본문과 이름 있는 `slots` 매핑에 반영한다.

설명:
- 첫 슬롯이 `contents`이면 매핑에 넣지 않고 문서 본문을 대체한다.
- 나머지 슬롯은 이름 기준으로 매핑에 넣으며, 중복 이름은 나중 슬롯이 이긴다.
- 기존 `slots` 필드는 없음/매핑/비호환 세 가지 상태로 판정한 뒤
  매핑이면 얕은 병합, 비호환 값이면 경고 후 통째로 교체한다.

디자인 패턴:
- 태그 분기(Tagged Decision) + 함수형 유틸 모듈.

참조:
- src_py/content_slots/contracts/document_models.py
- src_py/content_slots/pipeline/plugin.py
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping, Sequence

from content_slots.contracts.document_models import Document, SlotsFieldState
from content_slots.contracts.slot_models import PRIMARY_SLOT_NAME, Slot
from content_slots.shared.diagnostics import Diagnostics

INCOMPATIBLE_SLOTS_MESSAGE = '호환되지 않는 slots 속성(타입 "%s")을 덮어씁니다: 파일 "%s"'


def classify_slots_field(value: object) -> SlotsFieldState:
    """기존 `slots` 필드 값의 병합 방식을 판정한다."""
    if value is None:
        return SlotsFieldState.ABSENT
    if isinstance(value, Mapping):
        return SlotsFieldState.MAPPING
    return SlotsFieldState.INCOMPATIBLE


def describe_kind(value: object) -> str:
    """경고 메시지용 값 종류 이름을 반환한다. 그 밖의 값은 모두 "object"."""
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, (str, bytes)):
        return "string"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    return "object"


def remap_slots(ordered: Sequence[Slot]) -> tuple[str | None, dict[str, Slot]]:
    """슬롯 순서열을 (주 본문, 이름별 매핑)으로 변환한다."""
    primary: str | None = None
    remapped: dict[str, Slot] = {}
    for index, slot in enumerate(ordered):
        if index == 0 and slot.name == PRIMARY_SLOT_NAME:
            primary = slot.contents
            continue
        remapped[slot.name] = slot
    return primary, remapped


def merge_typed_slots(existing: Mapping[str, object], parsed: Mapping[str, Slot]) -> dict[str, object]:
    """기존 매핑에 새 슬롯 매핑을 얕게 병합한 새 dict를 반환한다. 충돌 시 새 값이 이긴다."""
    merged: dict[str, object] = dict(existing)
    merged.update(parsed)
    return merged


def merge_slots(
    ordered: Sequence[Slot],
    document: Document,
    diagnostics: Diagnostics,
    display_path: str,
) -> None:
    """슬롯 순서열을 문서에 반영한다. 빈 순서열이면 문서를 건드리지 않는다."""
    if not ordered:
        return

    primary, parsed = remap_slots(ordered)
    if primary is not None:
        document.contents = primary.encode("utf-8")

    current = document.slots
    state = classify_slots_field(current)
    if state is SlotsFieldState.MAPPING:
        if isinstance(current, MutableMapping):
            current.update(parsed)
        else:
            document.slots = merge_typed_slots(current, parsed)
        return

    if state is SlotsFieldState.INCOMPATIBLE:
        diagnostics.warn(INCOMPATIBLE_SLOTS_MESSAGE, describe_kind(current), display_path)
    document.slots = parsed
