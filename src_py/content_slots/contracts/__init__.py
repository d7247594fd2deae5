"""
목적:
- 슬롯/문서 계약 모델 계층의 공개 심볼을 제공한다.

설명:
- 슬롯, 파싱된 블록, 문서 레코드, 블록 파서 인터페이스를 하나의 네임스페이스에서 재노출한다.

디자인 패턴:
- 모듈 퍼사드(Module Facade).

참조:
- src_py/content_slots/contracts/slot_models.py
- src_py/content_slots/contracts/document_models.py
"""

from .document_models import Document, SlotsFieldState
from .slot_models import BlockParser, ParsedBlock, RendersAsText, Slot

__all__ = [
    "Slot",
    "ParsedBlock",
    "BlockParser",
    "RendersAsText",
    "Document",
    "SlotsFieldState",
]
