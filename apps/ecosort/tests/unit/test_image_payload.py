"""ImagePayload / HistoryEntry Unit Tests."""

from __future__ import annotations

import pytest

from ecosort.application.classify.dto import ImagePayload
from ecosort.application.classify.dto.image_payload import MAX_IMAGE_BYTES
from ecosort.domain.exceptions import InvalidImageError
from ecosort.domain.value_objects import HistoryEntry


class TestImagePayload:
    """이미지 입력 검증 테스트."""

    def test_from_upload_strips_parameters(self):
        image = ImagePayload.from_upload(b"data", "Image/PNG; charset=binary")
        assert image.mime_type == "image/png"

    def test_from_upload_defaults_to_jpeg(self):
        assert ImagePayload.from_upload(b"data", None).mime_type == "image/jpeg"

    def test_empty_rejected(self):
        with pytest.raises(InvalidImageError):
            ImagePayload(data=b"")

    def test_non_image_rejected(self):
        with pytest.raises(InvalidImageError):
            ImagePayload(data=b"%PDF", mime_type="application/pdf")

    def test_oversized_rejected(self):
        with pytest.raises(InvalidImageError):
            ImagePayload(data=b"x" * (MAX_IMAGE_BYTES + 1))


class TestHistoryEntry:
    """HistoryEntry 직렬화 테스트."""

    def test_to_dict_uses_camel_case(self, make_classification):
        entry = HistoryEntry.create(make_classification(), image_url=None, is_manual=True)

        data = entry.to_dict()

        assert data["isManualSearch"] is True
        assert "imageUrl" not in data
        assert "sources" not in data["result"]
        assert data["result"]["bin_recommendation"]["stream"] == "Recyclables"

    def test_unique_ids(self, make_classification):
        result = make_classification()
        assert HistoryEntry.create(result).id != HistoryEntry.create(result).id

    def test_parses_camel_case(self, make_classification):
        entry = HistoryEntry.create(make_classification(), image_url="https://a.example/x.jpg")
        assert HistoryEntry.model_validate(entry.to_dict()) == entry
