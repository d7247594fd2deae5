"""
목적:
- 구분자 위치에서 시작하는 텍스트를 YAML 메타데이터와 본문으로 분리한다.

설명:
- 여는 구분자 다음 줄부터 구분자만 있는 닫는 줄 직전까지를 메타데이터로 본다.
- 닫는 줄이 없으면 선두의 `key: value` 줄(및 들여쓴 연속 줄)까지만 메타데이터로 보고
  나머지를 본문으로 취급한다.
- 문법 오류는 `BlockSyntaxError`로 변환해 그대로 전파한다.

디자인 패턴:
- 어댑터(Adapter).

참조:
- src_py/content_slots/contracts/slot_models.py
- src_py/content_slots/segmentation/splitter.py
"""

from __future__ import annotations

import re

import yaml

from content_slots.config.models import FrontmatterOptions
from content_slots.contracts.slot_models import ParsedBlock
from content_slots.exceptions import BlockSyntaxError

_MAPPING_LINE = re.compile(r"^[A-Za-z0-9_\-\"'][^:\n]*:(\s|$)")


class FrontmatterParser:
    """YAML front-matter 블록 파서."""

    def __init__(self, options: FrontmatterOptions | None = None) -> None:
        self._options = options or FrontmatterOptions()

    @property
    def delimiter(self) -> str:
        return self._options.primary_delimiter

    def parse(self, text: str) -> ParsedBlock:
        """구분자로 시작하는 텍스트를 메타데이터/본문으로 나눈다.

        Raises:
            BlockSyntaxError: 텍스트가 구분자로 시작하지 않거나, YAML이 잘못되었거나,
                메타데이터가 매핑이 아닐 때.
        """
        delimiter = self.delimiter
        if not text.startswith(delimiter):
            raise BlockSyntaxError(f"블록이 구분자 '{delimiter}'로 시작하지 않습니다")

        lines = text[len(delimiter):].split("\n")
        # 여는 구분자 줄의 나머지(언어 태그 등)는 무시한다.
        lines = lines[1:]

        close_index = _find_closing_line(lines, delimiter)
        if close_index is None:
            meta_end = _leading_mapping_end(lines)
            meta_lines, body_lines = lines[:meta_end], lines[meta_end:]
        else:
            meta_lines, body_lines = lines[:close_index], lines[close_index + 1:]

        return ParsedBlock(
            metadata=_load_metadata("\n".join(meta_lines)),
            body="\n".join(body_lines),
        )


def _find_closing_line(lines: list[str], delimiter: str) -> int | None:
    for index, line in enumerate(lines):
        if line.rstrip() == delimiter:
            return index
    return None


def _leading_mapping_end(lines: list[str]) -> int:
    end = 0
    for index, line in enumerate(lines):
        if _MAPPING_LINE.match(line):
            end = index + 1
            continue
        if end and line[:1] in {" ", "\t"} and line.strip():
            end = index + 1
            continue
        break
    return end


def _load_metadata(raw: str) -> dict[str, object]:
    if not raw.strip():
        return {}

    try:
        loaded = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise BlockSyntaxError(f"구분자 블록 메타데이터 YAML 파싱 실패: {exc}") from exc

    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise BlockSyntaxError(
            f"구분자 블록 메타데이터는 매핑이어야 합니다: {type(loaded).__name__}"
        )
    return {str(key): value for key, value in loaded.items()}
