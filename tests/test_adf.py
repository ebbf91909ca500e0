"""Tests for jira_helper.utils.adf."""

from jira_helper.utils.adf import build_doc, extract_text, linkify, paragraph_doc


class TestExtractText:
    def test_none(self):
        assert extract_text(None) == ""

    def test_plain_string(self):
        assert extract_text("Hello world") == "Hello world"

    def test_text_leaf(self):
        assert extract_text({"type": "text", "text": "Simple comment"}) == "Simple comment"

    def test_nested_document_no_separators(self):
        doc = {"content": [{"content": [{"text": "Hello"}, {"text": " "}, {"text": "World!"}]}]}
        assert extract_text(doc) == "Hello World!"

    def test_paragraphs_concatenate_without_space(self):
        doc = {"content": [{"content": [{"text": "a"}]}, {"content": [{"text": "b"}]}]}
        assert extract_text(doc) == "ab"

    def test_unknown_shape(self):
        assert extract_text({"type": "rule"}) == ""

    def test_non_dict_non_string(self):
        assert extract_text(42) == ""

    def test_content_not_a_list(self):
        assert extract_text({"content": "oops"}) == ""

    def test_deep_tree(self):
        node = {"text": "x"}
        for _ in range(200):
            node = {"content": [node]}
        assert extract_text(node) == "x"


class TestLinkify:
    def test_plain_text(self):
        assert linkify("no links") == [{"type": "text", "text": "no links"}]

    def test_url_gets_link_mark(self):
        nodes = linkify("see https://example.com/x now")
        assert [n["text"] for n in nodes] == ["see ", "https://example.com/x", " now"]
        assert nodes[1]["marks"] == [{"type": "link", "attrs": {"href": "https://example.com/x"}}]
        assert "marks" not in nodes[0]

    def test_empty_parts_dropped(self):
        nodes = linkify("http://a.io")
        assert len(nodes) == 1


class TestDocs:
    def test_build_doc_shape(self):
        doc = build_doc("hi")
        assert doc["type"] == "doc"
        assert doc["version"] == 1
        assert doc["content"][0]["type"] == "paragraph"
        assert extract_text(doc) == "hi"

    def test_paragraph_doc_keeps_value(self):
        assert extract_text(paragraph_doc("Backend")) == "Backend"
