"""Tests for RDF serialization."""

from svgmetadata.rdf.constants import LICENSE_RIGHTS, PUBLIC_DOMAIN_URI
from svgmetadata.rdf.models import MetadataRecord
from svgmetadata.rdf.serializer import (
    build_license_block,
    normalize_license,
    serialize_rdf,
)
from tests.fixtures.documents import CC_BY_SA


def _rights_block(fragment: str) -> str:
    start = fragment.index("<License ")
    return fragment[start : fragment.index("</License>") + len("</License>")]


class TestSerializeRdf:
    """Tests for serialize_rdf output shape."""

    def test_fragment_structure(self) -> None:
        record = MetadataRecord(
            title="Apple", creator="Bris Geek", license=CC_BY_SA, keywords={"Fruit"}
        )

        fragment = serialize_rdf(record)

        assert fragment.startswith("<metadata>\n  <rdf:RDF ")
        assert fragment.endswith("</metadata>\n")
        assert 'xmlns="http://web.resource.org/cc/"' in fragment
        assert 'xmlns:dc="http://purl.org/dc/elements/1.1/"' in fragment
        assert "<dc:title>Apple</dc:title>" in fragment
        assert "<dc:format>image/svg+xml</dc:format>" in fragment
        assert '<dc:type rdf:resource="http://purl.org/dc/dcmitype/StillImage" />' in (
            fragment
        )
        assert "<dc:language>en</dc:language>" in fragment

    def test_agents_rendered(self) -> None:
        record = MetadataRecord(
            creator="Bris Geek",
            creator_url="http://example.com/bris",
            owner="Acme",
            publisher="Open Clip Art",
        )

        fragment = serialize_rdf(record)

        assert '<Agent rdf:about="http://example.com/bris">' in fragment
        assert "<dc:title>Bris Geek</dc:title>" in fragment
        assert "<dc:title>Acme</dc:title>" in fragment
        assert "<dc:title>Open Clip Art</dc:title>" in fragment

    def test_agent_without_url_has_no_about(self) -> None:
        fragment = serialize_rdf(MetadataRecord(creator="Bris Geek"))

        assert "<Agent>" in fragment
        assert "<Agent rdf:about" not in fragment

    def test_keywords_sorted_in_bag(self) -> None:
        record = MetadataRecord(keywords={"Vegetable", "Animal", "Fruit"})

        fragment = serialize_rdf(record)

        assert fragment.index("Animal") < fragment.index("Fruit")
        assert fragment.index("Fruit") < fragment.index("Vegetable")
        assert fragment.count("<rdf:li>") == 3

    def test_empty_record_never_fails(self) -> None:
        fragment = serialize_rdf(MetadataRecord())

        assert "<dc:title />" in fragment
        assert '<Work rdf:about="">' in fragment

    def test_escaping(self) -> None:
        """Test that every special character in a value is escaped."""
        record = MetadataRecord(title="<b>Tom & \"Jerry's\"</b>")

        fragment = serialize_rdf(record)
        start = fragment.index("<dc:title>") + len("<dc:title>")
        title = fragment[start : fragment.index("</dc:title>", start)]

        assert title == "&lt;b&gt;Tom &amp; &quot;Jerry&apos;s&quot;&lt;/b&gt;"
        for raw in "<>\"'":
            assert raw not in title
        assert "&" not in title.replace("&lt;", "").replace("&gt;", "").replace(
            "&amp;", ""
        ).replace("&quot;", "").replace("&apos;", "")


class TestLicenseBlock:
    """Tests for the license rights block."""

    def test_public_domain_label_and_uri_identical(self) -> None:
        """Test that the label and the URI produce the same rights block."""
        by_label = serialize_rdf(MetadataRecord(license="Public Domain"))
        by_uri = serialize_rdf(MetadataRecord(license=PUBLIC_DOMAIN_URI))

        assert _rights_block(by_label) == _rights_block(by_uri)
        assert by_label == by_uri

    def test_public_domain_rights(self) -> None:
        block = _rights_block(serialize_rdf(MetadataRecord(license="Public Domain")))

        assert block == (
            '<License rdf:about="http://web.resource.org/cc/PublicDomain">\n'
            '      <permits rdf:resource="http://web.resource.org/cc/Reproduction" />\n'
            '      <permits rdf:resource="http://web.resource.org/cc/Distribution" />\n'
            '      <permits rdf:resource="http://web.resource.org/cc/DerivativeWorks" />\n'
            "    </License>"
        )

    def test_share_alike_requires_share_alike(self) -> None:
        block = _rights_block(serialize_rdf(MetadataRecord(license=CC_BY_SA)))

        assert '<requires rdf:resource="http://web.resource.org/cc/ShareAlike" />' in (
            block
        )

    def test_unknown_license_has_bare_reference_only(self) -> None:
        fragment = serialize_rdf(MetadataRecord(license="http://example.com/mine"))

        assert '<license rdf:resource="http://example.com/mine">' in fragment
        assert "<License " not in fragment

    def test_every_table_entry_builds(self) -> None:
        for uri, rows in LICENSE_RIGHTS.items():
            block = build_license_block(uri)
            assert block.attrs == {"rdf:about": uri}
            assert len(block.children) == len(rows)

    def test_unknown_license_builds_nothing(self) -> None:
        assert build_license_block("http://example.com/mine") is None

    def test_normalize_license(self) -> None:
        assert normalize_license("Public Domain") == PUBLIC_DOMAIN_URI
        assert normalize_license(CC_BY_SA) == CC_BY_SA
        assert normalize_license("") == ""
