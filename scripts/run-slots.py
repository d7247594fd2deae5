"""
목적:
- 입력 디렉터리의 문서를 읽어 슬롯 플러그인을 실행하는 드라이버 스크립트를 제공한다.

설명:
- 라이브러리 본체는 파일을 직접 읽지 않는다.
- 이 스크립트가 입력 루트의 파일을 `Document`로 적재하고 결과를 JSON 줄로 출력한다.

디자인 패턴:
- 드라이버(Driver Script).

참조:
- src_py/content_slots/pipeline/host.py
- src_py/content_slots/pipeline/plugin.py
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from content_slots import (
    ContentPipeline,
    Document,
    FrontmatterOptions,
    Slot,
    configure_logging,
    slots,
)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Content Slots 드라이버")
    parser.add_argument(
        "--input-root",
        type=Path,
        required=True,
        help="처리 대상 문서 루트 경로",
    )
    parser.add_argument(
        "--pattern",
        default="**/*.md",
        help="처리할 문서를 고르는 glob 패턴 (기본: **/*.md)",
    )
    parser.add_argument(
        "--delimiter",
        action="append",
        default=None,
        help="front-matter 구분자. 여러 번 지정하면 첫 번째 값만 슬롯 분리에 사용 (기본: ---)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="로그 레벨 (기본: INFO)",
    )
    return parser.parse_args()


def load_documents(root: Path) -> dict[str, Document]:
    if not root.exists():
        raise RuntimeError(f"입력 경로가 존재하지 않습니다: {root}")

    return {
        path.relative_to(root).as_posix(): Document(contents=path.read_bytes())
        for path in sorted(root.rglob("*"))
        if path.is_file()
    }


def serialize_slots(value: object) -> object:
    if isinstance(value, dict):
        return {
            key: item.model_dump() if isinstance(item, Slot) else item
            for key, item in value.items()
        }
    return value


def main() -> int:
    args = parse_args()
    configure_logging(args.log_level.upper())

    frontmatter = FrontmatterOptions(delimiters=args.delimiter or "---")
    pipeline = ContentPipeline(args.input_root, frontmatter=frontmatter)
    pipeline.use(slots({"pattern": args.pattern}))

    files = pipeline.process(load_documents(args.input_root))
    for filepath, document in files.items():
        record = {
            "path": filepath,
            "contents": document.contents.decode("utf-8", errors="replace"),
            "slots": serialize_slots(document.slots) if document.has_slots() else None,
        }
        print(json.dumps(record, ensure_ascii=False, default=str))
    return 0


if __name__ == "__main__":
    try:
        raise SystemExit(main())
    except Exception as exc:  # noqa: BLE001
        print(f"[error] {exc}", file=sys.stderr)
        raise SystemExit(1)
