"""Unit tests for the subject codec and service functions."""

from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest
from elasticsearch import ConnectionError as ESConnectionError

from app.core.errors import (
    SubjectDecodeError,
    SubjectNotFoundError,
    SubjectWriteError,
)
from app.models.subject import Subject, SubjectPayload
from app.services.subjects import (
    create_subject,
    decode_subject,
    encode_subject,
    get_subject,
    update_subject,
)
from tests.fakes import FakeElasticsearch

NOW = datetime(2024, 9, 1, 8, 30, tzinfo=timezone.utc)


class TestCodec:
    def test_encode_renders_rfc3339_timestamp(self) -> None:
        subject = Subject(ma_mh="CS101", so_tin_chi=4, created_at=NOW)

        document = encode_subject(subject)

        assert document == {
            "ma_mh": "CS101",
            "ten_mon_hoc": "",
            "gvcn": "",
            "so_tin_chi": 4,
            "created_at": "2024-09-01T08:30:00Z",
        }

    def test_decode_parses_timestamp(self) -> None:
        subject = decode_subject(
            {"ma_mh": "CS101", "so_tin_chi": 4, "created_at": "2024-09-01T08:30:00Z"}
        )

        assert subject.created_at == NOW
        assert subject.gvcn == ""

    def test_decode_rejects_wrong_types(self) -> None:
        with pytest.raises(SubjectDecodeError):
            decode_subject({"ma_mh": 101})

    def test_decode_rejects_non_object(self) -> None:
        with pytest.raises(SubjectDecodeError):
            decode_subject(None)

    def test_payload_rejects_string_credit_count(self) -> None:
        with pytest.raises(ValueError):
            SubjectPayload.model_validate({"so_tin_chi": "4"})


class TestCreate:
    def test_create_stamps_given_time(self) -> None:
        es = FakeElasticsearch()

        subject = create_subject(es, "subjects", SubjectPayload(ma_mh="CS101"), now=NOW)

        assert subject.created_at == NOW
        assert es.docs[("subjects", "CS101")]["created_at"] == "2024-09-01T08:30:00Z"

    def test_create_defaults_to_current_utc_time(self) -> None:
        before = datetime.now(timezone.utc)

        subject = create_subject(FakeElasticsearch(), "subjects", SubjectPayload(ma_mh="X"))

        assert subject.created_at is not None
        assert subject.created_at >= before

    def test_create_store_failure(self) -> None:
        mock_es = MagicMock()
        mock_es.index.side_effect = ESConnectionError("Connection refused")

        with pytest.raises(SubjectWriteError) as exc_info:
            create_subject(mock_es, "subjects", SubjectPayload(ma_mh="CS101"))
        assert exc_info.value.status_code == 500


class TestGetAndUpdate:
    def test_get_missing_raises_not_found(self) -> None:
        with pytest.raises(SubjectNotFoundError) as exc_info:
            get_subject(FakeElasticsearch(), "subjects", "CS101")
        assert exc_info.value.status_code == 404

    def test_get_response_without_source(self) -> None:
        mock_es = MagicMock()
        mock_es.get.return_value = {"_id": "CS101", "found": True}

        with pytest.raises(SubjectDecodeError):
            get_subject(mock_es, "subjects", "CS101")

    def test_update_clears_created_at(self) -> None:
        es = FakeElasticsearch()
        create_subject(es, "subjects", SubjectPayload(ma_mh="CS101", so_tin_chi=4), now=NOW)

        update_subject(es, "subjects", "CS101", SubjectPayload(ma_mh="CS101", so_tin_chi=3))

        stored = get_subject(es, "subjects", "CS101")
        assert stored.so_tin_chi == 3
        assert stored.created_at is None
