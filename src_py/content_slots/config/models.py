"""
목적:
- 슬롯 플러그인과 front-matter 파서의 옵션 인터페이스를 정의한다.

설명:
- 플러그인이 인식하는 옵션은 `pattern` 하나뿐이다.
- 구분자는 호스트 전역 front-matter 설정에서 오며, 배열이면 첫 번째 값만 사용한다.

디자인 패턴:
- 값 객체(Value Object).

참조:
- src_py/content_slots/pipeline/plugin.py
- src_py/content_slots/segmentation/frontmatter.py
"""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from content_slots.exceptions import ConfigurationError

DEFAULT_PATTERN = "**/*.md"
DEFAULT_DELIMITER = "---"


class SlotsOptions(BaseModel):
    """슬롯 플러그인 옵션 모델."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    pattern: str = Field(default=DEFAULT_PATTERN, min_length=1)

    @field_validator("pattern")
    @classmethod
    def validate_pattern(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("pattern은 공백일 수 없습니다")
        return value


class FrontmatterOptions(BaseModel):
    """호스트 전역 front-matter 설정 모델."""

    model_config = ConfigDict(frozen=True)

    delimiters: str | list[str] = Field(default=DEFAULT_DELIMITER)

    @field_validator("delimiters")
    @classmethod
    def validate_delimiters(cls, value: str | list[str]) -> str | list[str]:
        candidates = [value] if isinstance(value, str) else value
        if not candidates:
            raise ValueError("delimiters는 최소 1개 이상이어야 합니다")
        if any(not item.strip() for item in candidates):
            raise ValueError("delimiters에 빈 구분자를 사용할 수 없습니다")
        return value

    @property
    def primary_delimiter(self) -> str:
        """대체 구분자 목록 중 첫 번째(기본) 구분자를 반환한다."""
        if isinstance(self.delimiters, str):
            return self.delimiters
        return self.delimiters[0]


def normalize_options(options: SlotsOptions | Mapping[str, object] | None = None) -> SlotsOptions:
    """기본값을 채운 `SlotsOptions`를 반환한다.

    Args:
        options: 옵션 객체, 매핑, 또는 None.

    Returns:
        기본값이 병합된 옵션 객체.

    Raises:
        ConfigurationError: 알 수 없는 키가 있거나 값이 유효하지 않을 때.
    """
    if options is None:
        return SlotsOptions()
    if isinstance(options, SlotsOptions):
        return options
    if not isinstance(options, Mapping):
        raise ConfigurationError(f"옵션은 매핑이어야 합니다: {type(options).__name__}")

    try:
        return SlotsOptions.model_validate(dict(options))
    except ValidationError as exc:
        raise ConfigurationError(f"슬롯 옵션이 유효하지 않습니다: {exc}") from exc
