"""
목적:
- 공통 진단/경로 매칭 유틸 공개 심볼을 정의한다.

설명:
- 파이프라인과 슬롯 병합기가 공유하는 로깅 싱크와 glob 매처를 중앙에서 재사용한다.

디자인 패턴:
- 모듈 퍼사드(Module Facade).

참조:
- src_py/content_slots/shared/diagnostics.py
- src_py/content_slots/shared/matching.py
"""

from .diagnostics import Diagnostics, configure_logging
from .matching import match_paths

__all__ = ["Diagnostics", "configure_logging", "match_paths"]
