"""
Тесты сканера XML частей.
"""
from docscan.parsers.pptx import extract_text_runs, find_tag_text


class TestExtractTextRuns:
    """Тесты extract_text_runs."""

    def test_runs_in_document_order(self):
        xml = b"<p:sld><a:p><a:r><a:t>Hello</a:t></a:r><a:r><a:t>World</a:t></a:r></a:p></p:sld>"

        assert extract_text_runs(xml) == ["Hello", "World"]

    def test_whitespace_only_runs_filtered(self):
        xml = b"<a:t>   </a:t><a:t>kept</a:t><a:t></a:t>"

        assert extract_text_runs(xml) == ["kept"]

    def test_inner_whitespace_preserved(self):
        """Run не обрезается — только отбрасываются полностью пустые."""
        assert extract_text_runs(b"<a:t> padded </a:t>") == [" padded "]

    def test_other_tags_ignored(self):
        xml = b"<a:t>yes</a:t><a:text>no</a:text><b:t>no</b:t><dc:title>no</dc:title>"

        assert extract_text_runs(xml) == ["yes"]

    def test_tag_with_attributes_not_matched(self):
        """Узкое сопоставление: только <a:t> без атрибутов."""
        assert extract_text_runs(b'<a:t xml:space="preserve">x</a:t>') == []

    def test_malformed_markup_does_not_raise(self):
        """Незакрытый тег пропускается, следующий корректный run находится."""
        xml = b"<a:t>ok</a:t><a:t>broken<a:t>fine</a:t></a:r"

        assert extract_text_runs(xml) == ["ok", "fine"]

    def test_invalid_utf8_bytes(self):
        xml = b"\xff\xfe<a:t>caf\xc3\xa9</a:t>\x80<a:t>x\xffy</a:t>"

        assert extract_text_runs(xml) == ["café", "x\ufffdy"]

    def test_entities_passed_through_by_default(self):
        assert extract_text_runs(b"<a:t>R&amp;D &lt;2024&gt;</a:t>") == ["R&amp;D &lt;2024&gt;"]

    def test_entities_decoded_when_enabled(self):
        assert extract_text_runs(b"<a:t>R&amp;D &#x41;</a:t>", decode_entities=True) == ["R&D A"]

    def test_empty_input(self):
        assert extract_text_runs(b"") == []


class TestFindTagText:
    """Тесты find_tag_text."""

    def test_first_match_wins(self):
        xml = "<dc:title>First</dc:title><dc:title>Second</dc:title>"

        assert find_tag_text(xml, "dc:title") == "First"

    def test_missing_tag_returns_none(self):
        assert find_tag_text(b"<dc:creator>x</dc:creator>", "dc:title") is None

    def test_attributes_allowed_when_requested(self):
        xml = b'<dcterms:created xsi:type="dcterms:W3CDTF">2024-05-01T10:00:00Z</dcterms:created>'

        assert find_tag_text(xml, "dcterms:created") is None
        assert find_tag_text(xml, "dcterms:created", allow_attributes=True) == "2024-05-01T10:00:00Z"
