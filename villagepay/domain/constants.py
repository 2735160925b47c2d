"""Reference data shown by the payment forms."""
from __future__ import annotations

MONTHS = (
    "มกราคม",
    "กุมภาพันธ์",
    "มีนาคม",
    "เมษายน",
    "พฤษภาคม",
    "มิถุนายน",
    "กรกฎาคม",
    "สิงหาคม",
    "กันยายน",
    "ตุลาคม",
    "พฤศจิกายน",
    "ธันวาคม",
)

BANKS = (
    "ธนาคารกสิกรไทย (KBANK)",
    "ธนาคารไทยพาณิชย์ (SCB)",
    "ธนาคารกรุงเทพ (BBL)",
    "ธนาคารกรุงไทย (KTB)",
    "ธนาคารกรุงศรีอยุธยา (Krungsri)",
    "ธนาคารทหารไทยธนชาต (TTB)",
    "ธนาคารออมสิน (GSB)",
    "ธนาคารเกียรตินาคินภัทร (KKP)",
    "ธนาคารซีไอเอ็มบี ไทย (CIMBT)",
    "ธนาคารทิสโก้ (TISCO)",
    "ธนาคารยูโอบี (UOB)",
    "ธนาคารแลนด์ แอนด์ เฮ้าส์ (LH Bank)",
    "ธนาคารเพื่อการเกษตรและสหกรณ์การเกษตร (BAAC)",
    "ธนาคารอาคารสงเคราะห์ (GHB)",
    "ธนาคารอิสลามแห่งประเทศไทย (IBANK)",
)


def month_name(month_index: int) -> str:
    """Thai month name for a 1-based month number."""
    return MONTHS[(month_index - 1) % 12]
