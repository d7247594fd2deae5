"""
목적:
- 네임스페이스 단위 진단 싱크를 표준 `logging` 위에 제공한다.

설명:
- 일반(호출) / info / warn / error 네 채널을 가진다.
- 메시지는 `%` 보간 인자를 그대로 넘겨 로그 레코드에 인자를 보존한다.

디자인 패턴:
- 어댑터(Adapter).

참조:
- src_py/content_slots/pipeline/host.py
- src_py/content_slots/segmentation/merger.py
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"


class Diagnostics:
    """`logging.Logger` 래퍼 진단 싱크."""

    def __init__(self, namespace: str) -> None:
        self._logger = logging.getLogger(namespace)

    @property
    def namespace(self) -> str:
        return self._logger.name

    def __call__(self, message: str, *args: object) -> None:
        self._logger.debug(message, *args)

    def info(self, message: str, *args: object) -> None:
        self._logger.info(message, *args)

    def warn(self, message: str, *args: object) -> None:
        self._logger.warning(message, *args)

    def error(self, message: str, *args: object) -> None:
        self._logger.error(message, *args)


def configure_logging(level: int | str = logging.INFO) -> None:
    """드라이버 스크립트용 루트 로깅을 설정한다. 기존 핸들러는 제거한다."""
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)

    logging.basicConfig(level=level, format=LOG_FORMAT)
