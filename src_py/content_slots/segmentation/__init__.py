"""
목적:
- 슬롯 분리/병합 핵심 계층의 공개 심볼을 정의한다.

설명:
- 구분자 블록 파서, 슬롯 분리기, 슬롯 병합기를 외부에 노출한다.

디자인 패턴:
- 퍼사드(Facade).

참조:
- src_py/content_slots/segmentation/frontmatter.py
- src_py/content_slots/segmentation/splitter.py
- src_py/content_slots/segmentation/merger.py
"""

from .frontmatter import FrontmatterParser
from .merger import (
    classify_slots_field,
    describe_kind,
    merge_slots,
    merge_typed_slots,
    remap_slots,
)
from .splitter import split_slots

__all__ = [
    "FrontmatterParser",
    "split_slots",
    "remap_slots",
    "classify_slots_field",
    "describe_kind",
    "merge_typed_slots",
    "merge_slots",
]
