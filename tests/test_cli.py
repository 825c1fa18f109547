"""
Authoring-check CLI tests

Tests the prosetree command against small document modules written to a
temporary directory.
"""

import textwrap

import pytest
from loguru import logger

from prosetree.__main__ import document_load, main, target_resolve
from prosetree.config import appsettings
from prosetree.lib.log import verbosity_default
from prosetree.lib.tags import Paragraph
from prosetree.models.state import ProgramState


ARTICLE = """
from prosetree import Blocks, Paragraph, Text, define_document

article = define_document(
    lambda refs: Blocks(
        Paragraph("Hello", bind_to=refs["intro"]),
        Paragraph("Text ", Text("there", bind_to=refs["greet"])),
        refs["intro"],
    ),
    refs={"intro": Paragraph, "greet": Text},
)


def build_article():
    return article


not_a_document = 42
"""

BROKEN = """
from prosetree import Blocks, Paragraph, define_document

article = define_document(
    lambda refs: Blocks(Paragraph("Hello")),
    refs={"intro": Paragraph},
)
"""


@pytest.fixture
def docs_path(tmp_path, monkeypatch):
    """Directory on sys.path holding one good and one broken document module"""
    (tmp_path / "cli_article_doc.py").write_text(textwrap.dedent(ARTICLE), encoding="utf-8")
    (tmp_path / "cli_broken_doc.py").write_text(textwrap.dedent(BROKEN), encoding="utf-8")
    monkeypatch.syspath_prepend(str(tmp_path))
    return tmp_path


class TestListTags:
    """Test --listTags output"""

    def test_lists_builtin_tags_by_category(self, capsys):
        main(["--listTags"])
        out = capsys.readouterr().out

        assert "block:" in out
        assert "inliner:" in out
        assert "paragraph" in out
        assert "link" in out
        assert "e.g." not in out

    def test_examples_at_higher_verbosity(self, capsys):
        main(["--listTags", "-v"])
        assert "e.g." in capsys.readouterr().out


class TestTargetResolve:
    """Test module:attribute parsing"""

    def test_split_target(self):
        state = target_resolve(ProgramState(target="docs.article:article"))

        assert state.moduleName == "docs.article"
        assert state.attributeName == "article"

    @pytest.mark.parametrize("target", [None, "", "no_colon", ":attr", "module:"])
    def test_invalid_target_exits(self, target):
        with pytest.raises(SystemExit) as exc_info:
            target_resolve(ProgramState(target=target))

        assert exc_info.value.code == 1


class TestDocumentCheck:
    """Test importing and checking document modules"""

    def test_document_attribute(self, docs_path):
        state = target_resolve(ProgramState(target="cli_article_doc:article"))
        state = document_load(state)

        assert state.loadOK
        assert set(state.document.references) == {"intro", "greet"}

    def test_callable_attribute(self, docs_path):
        state = document_load(target_resolve(ProgramState(target="cli_article_doc:build_article")))

        assert state.document.content.name == "blocks"

    def test_main_succeeds(self, docs_path):
        main(["cli_article_doc:article"])

    def test_build_verbosity_not_shared(self, docs_path):
        """The CLI level reaches builds through the context, not the settings"""
        before = appsettings.verbosity
        main(["cli_article_doc:article", "-vv"])

        assert appsettings.verbosity == before
        assert verbosity_default() == before

    def test_cli_verbosity_not_left_connected(self, docs_path, capsys):
        """Tags used after a verbose run log nothing"""
        messages = []
        main(["cli_article_doc:article", "-vvv"])
        handler_id = logger.add(messages.append, format="{message}", level="DEBUG")
        try:
            Paragraph("after the run")
        finally:
            logger.remove(handler_id)

        assert messages == []

    def test_import_builds_use_cli_verbosity(self, docs_path):
        """A document built while its module imports logs at the CLI level"""
        (docs_path / "cli_traced_doc.py").write_text(textwrap.dedent(ARTICLE), encoding="utf-8")
        messages = []
        handler_id = logger.add(messages.append, format="{message}", level="DEBUG")
        try:
            main(["cli_traced_doc:article", "-vvv"])
        finally:
            logger.remove(handler_id)

        assert any('Assigned <paragraph> to reference "intro"' in m for m in messages)
        assert any("Built root <blocks>" in m for m in messages)

    def test_broken_document_exits(self, docs_path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["cli_broken_doc:article"])

        assert exc_info.value.code == 1
        assert 'Document reference "intro" was not assigned' in capsys.readouterr().err

    def test_not_a_document_exits(self, docs_path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["cli_article_doc:not_a_document"])

        assert exc_info.value.code == 1
        assert "is not a document" in capsys.readouterr().err

    def test_missing_module_exits(self, docs_path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["cli_missing_doc:article"])

        assert exc_info.value.code == 1
        assert "Error loading" in capsys.readouterr().err
