import logging
from pathlib import Path

import pytest

from content_slots import ContentPipeline, Document, FrontmatterOptions, Slot, SlotsOptions, slots
from content_slots.exceptions import BlockSyntaxError, ConfigurationError
from content_slots.pipeline.plugin import DEBUG_NAMESPACE


def _fixture_files() -> dict[str, Document]:
    return {
        "default.md": Document(contents=b"# Plain page\n\nNo slots here."),
        "default.html": Document(contents=b"<p>Intro</p>\n---\nslot: footer\n---\n<footer></footer>"),
        "multiple-slots.md": Document(
            contents=(
                b"Contents\n"
                b"---\nslot: footer\n---\n<footer></footer>\n"
                b"---\nslot: aside\n---\n<aside></aside>\n"
                b"---\nslot: header\n---\n<header></header>\n"
            ),
            title="Multiple",
        ),
        "nested/already_has_slots_data.md": Document(
            contents=b"Body\n---\nslot: footer\n---\n<footer></footer>",
            slots={"header": Slot(name="header", contents='<header id="default-header"></header>')},
        ),
        "already_has_non_object_slots_prop.md": Document(
            contents=b"Body\n---\nslot: footer\n---\n<footer></footer>",
            slots=[1, 2, 3],
        ),
    }


@pytest.fixture
def built(tmp_path: Path) -> dict[str, Document]:
    pipeline = ContentPipeline(tmp_path).use(slots())
    return pipeline.process(_fixture_files())


def test_plugin_factory_names_plugin_and_applies_defaults() -> None:
    plugin = slots()

    assert plugin.name == "slots"
    assert plugin.options.pattern == "**/*.md"
    assert slots({"pattern": "**/*.njk"}).options.pattern == "**/*.njk"


def test_plugin_factory_rejects_unknown_options() -> None:
    with pytest.raises(ConfigurationError):
        slots({"key": "slots"})


def test_only_matched_files_receive_slots(built: dict[str, Document]) -> None:
    assert built["default.html"].has_slots() is False
    assert built["default.html"].contents.startswith(b"<p>Intro</p>")


def test_matched_file_without_delimiters_is_left_untouched(built: dict[str, Document]) -> None:
    assert built["default.md"].has_slots() is False
    assert built["default.md"].contents == b"# Plain page\n\nNo slots here."


def test_parses_multiple_slots(built: dict[str, Document]) -> None:
    document = built["multiple-slots.md"]

    assert {name: slot.model_dump() for name, slot in document.slots.items()} == {
        "footer": {"name": "footer", "contents": "<footer></footer>"},
        "aside": {"name": "aside", "contents": "<aside></aside>"},
        "header": {"name": "header", "contents": "<header></header>"},
    }
    assert document.text() == "Contents"
    assert document.title == "Multiple"


def test_assigns_parsed_slots_to_existing_mapping(built: dict[str, Document]) -> None:
    document = built["nested/already_has_slots_data.md"]

    assert {name: slot.model_dump() for name, slot in document.slots.items()} == {
        "footer": {"name": "footer", "contents": "<footer></footer>"},
        "header": {"name": "header", "contents": '<header id="default-header"></header>'},
    }
    assert document.text() == "Body"


def test_overwrites_non_mapping_slots_and_logs_warning(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    pipeline = ContentPipeline(tmp_path).use(slots())

    with caplog.at_level(logging.DEBUG, logger=DEBUG_NAMESPACE):
        files = pipeline.process(_fixture_files())

    assert files["already_has_non_object_slots_prop.md"].slots == {
        "footer": Slot(name="footer", contents="<footer></footer>")
    }
    warnings = [record for record in caplog.records if record.levelno == logging.WARNING]
    assert len(warnings) == 1
    kind, path = warnings[0].args
    assert kind == "array"
    assert path.endswith("already_has_non_object_slots_prop.md")
    assert path.startswith(str(tmp_path.resolve()))


def test_logs_options_and_matched_files(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    pipeline = ContentPipeline(tmp_path).use(slots())

    with caplog.at_level(logging.DEBUG, logger=DEBUG_NAMESPACE):
        pipeline.process(_fixture_files())

    debug_args = [record.args for record in caplog.records if record.levelno == logging.DEBUG]
    info_args = [record.args for record in caplog.records if record.levelno == logging.INFO]
    assert (SlotsOptions(),) in debug_args
    assert (4,) in debug_args
    assert info_args == [
        (
            [
                "default.md",
                "multiple-slots.md",
                "nested/already_has_slots_data.md",
                "already_has_non_object_slots_prop.md",
            ],
        )
    ]


def test_custom_pattern_selects_other_documents(tmp_path: Path) -> None:
    files = {
        "page.njk": Document(contents=b"Main\n---\nslot: aside\n---\n{{ title }}"),
        "page.md": Document(contents=b"Main\n---\nslot: aside\n---\nAside"),
    }

    ContentPipeline(tmp_path).use(slots({"pattern": "**/*.njk"})).process(files)

    assert files["page.njk"].text() == "Main"
    assert str(files["page.njk"].slots["aside"]) == "{{ title }}"
    assert files["page.md"].has_slots() is False


def test_uses_first_of_alternative_delimiters(tmp_path: Path) -> None:
    files = {"page.md": Document(contents=b"Main --- text\n+++\nslot: aside\n+++\nAside")}
    pipeline = ContentPipeline(tmp_path, frontmatter=FrontmatterOptions(delimiters=["+++", "---"]))

    pipeline.use(slots()).process(files)

    assert files["page.md"].text() == "Main --- text"
    assert files["page.md"].slots["aside"].contents == "Aside"


def test_nested_blocks_contribute_to_flat_mapping(tmp_path: Path) -> None:
    # sidebar 본문 안의 블록이 다시 분리된다. 닫는 구분자가 있으면 순차 블록과 같은 입력이다.
    files = {
        "page.md": Document(
            contents=b"Main\n---\nslot: sidebar\n---\nSide\n---\nslot: ad\n---\nBuy"
        )
    }

    ContentPipeline(tmp_path).use(slots()).process(files)

    assert files["page.md"].text() == "Main"
    assert {name: str(slot) for name, slot in files["page.md"].slots.items()} == {
        "sidebar": "Side",
        "ad": "Buy",
    }


def test_malformed_block_aborts_processing(tmp_path: Path) -> None:
    files = {"broken.md": Document(contents=b"Main\n---\nslot: [oops\n---\nBody")}

    with pytest.raises(BlockSyntaxError):
        ContentPipeline(tmp_path).use(slots()).process(files)


def test_host_resolves_paths_against_directory(tmp_path: Path) -> None:
    pipeline = ContentPipeline(tmp_path)

    assert pipeline.path("a", "b.md") == str(tmp_path.resolve() / "a" / "b.md")
    assert pipeline.frontmatter_delimiters == "---"
    assert pipeline.plugins == []


def test_matched_document_with_invalid_utf8_is_left_untouched(tmp_path: Path) -> None:
    raw = "café no slots".encode("latin-1")
    files = {"latin.md": Document(contents=raw)}

    ContentPipeline(tmp_path).use(slots()).process(files)

    assert files["latin.md"].contents == raw
    assert files["latin.md"].has_slots() is False


def test_invalid_utf8_bytes_do_not_stop_slot_splitting(tmp_path: Path) -> None:
    files = {"latin.md": Document(contents="caf\xe9\n---\nslot: aside\n---\nAside".encode("latin-1"))}

    ContentPipeline(tmp_path).use(slots()).process(files)

    assert files["latin.md"].text() == "caf\ufffd"
    assert files["latin.md"].slots["aside"].contents == "Aside"
