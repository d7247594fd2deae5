"""
목적:
- 텍스트를 구분자 블록 단위의 슬롯 순서열로 분리한다.

설명:
- 구분자 앞 텍스트는 현재 누적 중인 슬롯(없으면 주 본문 슬롯)의 본문이 된다.
- 블록 본문은 새 슬롯이 되고, 그 본문 안에서 다시 구분자를 찾는다.
- 중첩 블록도 같은 평면 순서열에 발견 순서대로 추가된다.
- 재귀 대신 누적 리스트와 남은 텍스트 커서로 반복한다.

디자인 패턴:
- 함수형 유틸 모듈(Function Utility Module).

참조:
- src_py/content_slots/segmentation/frontmatter.py
- src_py/content_slots/segmentation/merger.py
"""

from __future__ import annotations

from content_slots.contracts.slot_models import PRIMARY_SLOT_NAME, BlockParser, Slot
from content_slots.exceptions import ConfigurationError


def split_slots(text: str | bytes, delimiter: str, block_parser: BlockParser) -> list[Slot]:
    """텍스트를 발견 순서대로 정렬된 슬롯 목록으로 분리한다.

    Args:
        text: 분리 대상 텍스트. bytes는 UTF-8로 디코딩하며 잘못된 바이트는 대체 문자로 바꾼다.
        delimiter: 구분자 블록 시작 리터럴.
        block_parser: 구분자 위치부터 시작하는 텍스트를 파싱하는 협력자.

    Returns:
        슬롯 목록. 구분자가 하나도 없으면 빈 목록.
    """
    if not delimiter:
        raise ConfigurationError("delimiter는 비어 있을 수 없습니다")
    if isinstance(text, bytes):
        text = text.decode("utf-8", errors="replace")

    slots: list[Slot] = []
    remaining = text
    while True:
        remaining = remaining.strip()
        position = remaining.find(delimiter)
        if position == -1:
            return slots

        if position > 0:
            if not slots:
                slots.append(Slot(name=PRIMARY_SLOT_NAME))
            slots[-1].contents = remaining[:position].strip()

        block = block_parser.parse(remaining[position:])
        slot = Slot(name=block.slot_name, contents=str(block.body).strip())
        slots.append(slot)
        remaining = slot.contents
