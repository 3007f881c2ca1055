# tests/unit/services/test_member_helpers.py
from datetime import datetime, timezone

import pytest

from arm_backend.services.geography_service import MALI_GEOGRAPHY, commune_code
from arm_backend.services.member_service import build_card_payload, format_membership_number
from arm_backend.services.media_service import safe_filename
from arm_backend.services.qr_codes import DATA_URL_PREFIX, decode_data_url, generate_qr_data_url


def test_membership_number_padding():
    assert format_membership_number(2026, 7) == "ARM-2026-00007"
    assert format_membership_number(2026, 123456) == "ARM-2026-123456"


def test_card_payload():
    issued = datetime(2026, 1, 15, 10, 30, tzinfo=timezone.utc)
    assert build_card_payload("ARM-2026-00001", "Awa Traoré", "active", issued) == {
        "membershipNumber": "ARM-2026-00001",
        "fullName": "Awa Traoré",
        "status": "active",
        "issuedAt": "2026-01-15T10:30:00+00:00",
    }


def test_qr_code_is_png_data_url():
    data_url = generate_qr_data_url({"membershipNumber": "ARM-2026-00001"})
    assert data_url.startswith(DATA_URL_PREFIX)
    assert decode_data_url(data_url)[:8] == b"\x89PNG\r\n\x1a\n"


def test_decode_rejects_other_urls():
    with pytest.raises(ValueError):
        decode_data_url("data:text/plain;base64,SGVsbG8=")


@pytest.mark.parametrize("cercle, name, expected", [
    ("KOU-DIO", "Dioila", "KOU-DIO-DIOILA"),
    ("BAM-BAM", "District 1", "BAM-BAM-DISTRICT-1"),
    ("SEG-SEG", "  Ségou ", "SEG-SEG-SÉGOU"),
])
def test_commune_code(cercle, name, expected):
    assert commune_code(cercle, name) == expected


def test_builtin_commune_codes_are_unique():
    codes = [
        commune_code(cercle_code, name)
        for region in MALI_GEOGRAPHY.values()
        for cercle_code, (_, communes) in region["cercles"].items()
        for name in communes
    ]
    assert len(codes) == len(set(codes))


@pytest.mark.parametrize("name, expected", [
    ("photo meeting.jpg", "photo_meeting.jpg"),
    ("../../etc/passwd", "passwd"),
    ("été 2026.png", "_t__2026.png"),
])
def test_safe_filename(name, expected):
    assert safe_filename(name) == expected
