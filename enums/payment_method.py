from enum import Enum


class PaymentMethod(str, Enum):
    # Values match the order API ("cash" | "transfer")
    CASH = "cash"                    # Cash on delivery, carries the configured surcharge
    BANK_TRANSFER = "transfer"       # Bank transfer with payment proof, no surcharge
