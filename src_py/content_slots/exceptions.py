"""
목적:
- Content Slots 패키지의 예외 타입을 표준화한다.

설명:
- 옵션 오류와 구분자 블록 문법 오류를 명시적으로 구분한다.
- 블록 문법 오류는 복구하지 않고 호출자에게 그대로 전파된다.

디자인 패턴:
- 계층형 예외(Hierarchical Exception).

참조:
- src_py/content_slots/segmentation/frontmatter.py
- src_py/content_slots/config/models.py
"""


class ContentSlotsError(Exception):
    """Content Slots 공통 베이스 예외."""


class ConfigurationError(ContentSlotsError):
    """옵션/설정값이 유효하지 않을 때 발생한다."""


class BlockSyntaxError(ContentSlotsError):
    """구분자 블록(front-matter) 문법이 잘못되었을 때 발생한다."""
