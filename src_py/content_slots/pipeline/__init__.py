"""
목적:
- 호스트 파이프라인과 슬롯 플러그인 공개 심볼을 정의한다.

설명:
- `ContentPipeline`은 최소 호스트이며, `slots()`는 문서별 분리/병합을 수행하는 플러그인이다.

디자인 패턴:
- 퍼사드(Facade).

참조:
- src_py/content_slots/pipeline/host.py
- src_py/content_slots/pipeline/plugin.py
"""

from .host import ContentPipeline, Plugin
from .plugin import SlotsPlugin, slots

__all__ = ["ContentPipeline", "Plugin", "SlotsPlugin", "slots"]
