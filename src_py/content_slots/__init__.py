"""
목적:
- Content Slots Python 패키지의 공개 진입점을 제공한다.

설명:
- 하나의 문서 안에 구분자 블록으로 여러 이름 있는 슬롯(본문/푸터/사이드바 등)을 작성하고,
  이를 템플릿에서 쓸 수 있는 `slots` 매핑으로 분리한다.
- 옵션/계약 모델/예외/파이프라인 플러그인을 함께 노출한다.

디자인 패턴:
- 퍼사드(Facade).

참조:
- src_py/content_slots/segmentation/splitter.py
- src_py/content_slots/segmentation/merger.py
- src_py/content_slots/pipeline/plugin.py
"""

from .config.models import FrontmatterOptions, SlotsOptions, normalize_options
from .contracts.document_models import Document, SlotsFieldState
from .contracts.slot_models import BlockParser, ParsedBlock, RendersAsText, Slot
from .exceptions import BlockSyntaxError, ConfigurationError, ContentSlotsError
from .pipeline.host import ContentPipeline
from .pipeline.plugin import SlotsPlugin, slots
from .shared.diagnostics import Diagnostics, configure_logging
from .shared.matching import match_paths
from .segmentation.frontmatter import FrontmatterParser
from .segmentation.merger import merge_slots
from .segmentation.splitter import split_slots
from .version import __version__

__all__ = [
    "__version__",
    "slots",
    "SlotsPlugin",
    "ContentPipeline",
    "split_slots",
    "merge_slots",
    "FrontmatterParser",
    "SlotsOptions",
    "FrontmatterOptions",
    "normalize_options",
    "Slot",
    "ParsedBlock",
    "BlockParser",
    "RendersAsText",
    "Document",
    "SlotsFieldState",
    "Diagnostics",
    "configure_logging",
    "match_paths",
    "ContentSlotsError",
    "ConfigurationError",
    "BlockSyntaxError",
]
