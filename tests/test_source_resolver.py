"""Unit tests for SourceResolver."""
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'backend'))

import pytest
from models.document import SourceKind
from services.source_resolver import SourceResolver


class TestSourceResolver:
    """Test suite for SourceResolver."""

    @pytest.fixture
    def resolver(self, tmp_path):
        resolver = SourceResolver(default_path=str(tmp_path / "default.pdf"))
        yield resolver
        resolver.release()

    def test_no_source_before_initialization(self, resolver):
        assert resolver.current is None

    def test_use_default(self, resolver, tmp_path):
        source = resolver.use_default()

        assert resolver.current == source
        assert source.kind == SourceKind.DEFAULT
        assert source.location == str(tmp_path / "default.pdf")
        assert source.display_name == "default.pdf"
        assert not source.is_temporary

    def test_select_upload_writes_temporary_file(self, resolver):
        source = resolver.select_upload("cv.pdf", b"%PDF-1.4 data")

        assert resolver.current == source
        assert source.kind == SourceKind.UPLOADED
        assert source.display_name == "cv.pdf"
        assert source.is_temporary
        with open(source.location, "rb") as f:
            assert f.read() == b"%PDF-1.4 data"

    def test_new_upload_releases_previous_upload(self, resolver):
        first = resolver.select_upload("one.pdf", b"one")
        second = resolver.select_upload("two.pdf", b"two")

        assert not os.path.exists(first.location)
        assert os.path.exists(second.location)
        assert first.location != second.location
        assert resolver.current == second

    def test_default_after_upload_releases_upload(self, resolver):
        upload = resolver.select_upload("one.pdf", b"one")
        resolver.use_default()

        assert not os.path.exists(upload.location)
        assert resolver.current.kind == SourceKind.DEFAULT

    def test_release_never_deletes_default_file(self, tmp_path):
        default = tmp_path / "default.pdf"
        default.write_bytes(b"%PDF")
        resolver = SourceResolver(default_path=str(default))

        resolver.use_default()
        resolver.select_upload("cv.pdf", b"x")
        resolver.release()

        assert default.exists()
        assert resolver.current is None

    def test_no_content_validation(self, resolver):
        """Invalid content is accepted here; the PDF engine rejects it on load."""
        source = resolver.select_upload("notes.pdf", b"not a pdf")
        assert resolver.current == source
