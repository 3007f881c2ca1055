# tests/unit/services/test_payment_instructions.py
from decimal import Decimal

import pytest

from arm_backend.core.enums import CotisationPaymentMethod
from arm_backend.services.payment_instructions import build_payment_instructions


@pytest.mark.parametrize("method, provider, account_key", [
    (CotisationPaymentMethod.SAMA_MONEY, "Sama Money", "phoneNumber"),
    (CotisationPaymentMethod.ORANGE_MONEY, "Orange Money", "merchantCode"),
    (CotisationPaymentMethod.MOOV_MONEY, "Moov Money", "phoneNumber"),
])
def test_mobile_money(method, provider, account_key):
    result = build_payment_instructions(method, Decimal("5000"), "ARM-2026-00001-1700000000000")

    assert result["instructions"] == f"Send 5000.00 XOF to A.R.M Party via {provider}"
    details = result["details"]
    assert details["provider"] == provider
    assert account_key in details
    assert details["amount"] == "5000.00 XOF"
    assert details["reference"] == "ARM-2026-00001-1700000000000"
    assert details["note"] == "A.R.M Membership Fee"


def test_bank_transfer_accepts_plain_string():
    result = build_payment_instructions("bank_transfer", Decimal("2500.5"), "REF")

    assert result["instructions"] == "Transfer 2500.50 XOF via bank transfer"
    assert result["details"]["swiftCode"] == "BMMLMLPA"
    assert result["details"]["reference"] == "REF"
    assert "note" not in result["details"]


def test_unknown_method():
    assert build_payment_instructions("cash", Decimal("1"), "REF") == {
        "instructions": "Payment method not supported",
        "details": {},
    }
