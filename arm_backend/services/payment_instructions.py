# arm_backend/services/payment_instructions.py
"""
How a member pays a cotisation. No payment provider is called; the
member receives the account details and a reference, then confirms
with the provider's transaction id.
"""
from decimal import Decimal
from typing import Any, Dict

from arm_backend.core.enums import CotisationPaymentMethod
from arm_backend.core.utils import format_money

FEE_NOTE = "A.R.M Membership Fee"

MOBILE_MONEY_ACCOUNTS = {
    CotisationPaymentMethod.SAMA_MONEY.value: {"provider": "Sama Money", "phoneNumber": "+223 75 XX XX XX"},
    CotisationPaymentMethod.ORANGE_MONEY.value: {"provider": "Orange Money", "merchantCode": "ARM001"},
    CotisationPaymentMethod.MOOV_MONEY.value: {"provider": "Moov Money", "phoneNumber": "+223 99 XX XX XX"},
}

BANK_ACCOUNT = {
    "bankName": "Bank of Mali",
    "accountName": "Alliance pour le Rassemblement Malien",
    "accountNumber": "XXXX-XXXX-XXXX-XXXX",
    "swiftCode": "BMMLMLPA",
}


def build_payment_instructions(method: str, amount: Decimal, reference: str) -> Dict[str, Any]:
    amount_text = format_money(amount)
    method = getattr(method, "value", method)

    if method in MOBILE_MONEY_ACCOUNTS:
        account = MOBILE_MONEY_ACCOUNTS[method]
        return {
            "instructions": f"Send {amount_text} XOF to A.R.M Party via {account['provider']}",
            "details": {
                **account,
                "amount": f"{amount_text} XOF",
                "reference": reference,
                "note": FEE_NOTE,
            },
        }

    if method == CotisationPaymentMethod.BANK_TRANSFER.value:
        return {
            "instructions": f"Transfer {amount_text} XOF via bank transfer",
            "details": {
                **BANK_ACCOUNT,
                "amount": f"{amount_text} XOF",
                "reference": reference,
            },
        }

    return {"instructions": "Payment method not supported", "details": {}}
