"""
목적:
- glob 패턴으로 처리 대상 문서 경로를 선택한다.

설명:
- 경로는 POSIX 형식 상대 경로로 비교한다(역슬래시는 `/`로 정규화).
- `**/`는 0개 이상의 디렉터리, `*`/`?`는 `/`를 넘지 않는 문자에 대응한다.
- `{a,b}` 중괄호 대안과 `[...]` 문자 클래스를 지원한다.

디자인 패턴:
- 함수형 유틸 모듈(Function Utility Module).

참조:
- src_py/content_slots/pipeline/host.py
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from functools import lru_cache

from content_slots.exceptions import ConfigurationError


@lru_cache(maxsize=64)
def compile_pattern(pattern: str) -> re.Pattern[str]:
    """glob 패턴을 정규식으로 변환한다."""
    parts: list[str] = []
    index = 0
    brace_depth = 0
    length = len(pattern)
    while index < length:
        char = pattern[index]
        if pattern.startswith("**/", index):
            parts.append("(?:.*/)?")
            index += 3
            continue
        if pattern.startswith("**", index):
            parts.append(".*")
            index += 2
            continue
        if char == "*":
            parts.append("[^/]*")
        elif char == "?":
            parts.append("[^/]")
        elif char == "[":
            close = pattern.find("]", index + 1)
            if close == -1:
                parts.append(re.escape(char))
            else:
                body = pattern[index + 1:close]
                if body.startswith("!"):
                    body = "^" + body[1:]
                parts.append(f"[{body}]")
                index = close
        elif char == "{":
            brace_depth += 1
            parts.append("(?:")
        elif char == "}" and brace_depth:
            brace_depth -= 1
            parts.append(")")
        elif char == "," and brace_depth:
            parts.append("|")
        else:
            parts.append(re.escape(char))
        index += 1
    if brace_depth:
        raise ConfigurationError(f"닫히지 않은 중괄호가 있는 패턴입니다: {pattern}")
    return re.compile("".join(parts) + r"\Z")


def match_paths(pattern: str, paths: Iterable[str]) -> list[str]:
    """패턴에 맞는 경로만 입력 순서대로 반환한다."""
    compiled = compile_pattern(pattern)
    return [path for path in paths if compiled.match(path.replace("\\", "/"))]
