"""Keyword, route and message tables for the smart assistant.

Table order matters: fuzzy matching scans keywords in the order they are defined here and stops at
the first hit, so moving entries around can change which service or action wins a close contest.
"""

from __future__ import annotations

from src.intent.schema import ActionType, BilingualText, QuickPhrase, ServiceType

DEFAULT_ROUTE_KEY = "default"

SERVICE_KEYWORDS: dict[str, ServiceType] = {
    # Electricity
    "electricity": ServiceType.ELECTRICITY,
    "electric": ServiceType.ELECTRICITY,
    "power": ServiceType.ELECTRICITY,
    "bijli": ServiceType.ELECTRICITY,
    "बिजली": ServiceType.ELECTRICITY,
    "light": ServiceType.ELECTRICITY,
    "current": ServiceType.ELECTRICITY,
    "apdcl": ServiceType.ELECTRICITY,
    "bses": ServiceType.ELECTRICITY,
    "discom": ServiceType.ELECTRICITY,
    "unit": ServiceType.ELECTRICITY,
    "watt": ServiceType.ELECTRICITY,
    "voltage": ServiceType.ELECTRICITY,
    # Gas
    "gas": ServiceType.GAS,
    "cylinder": ServiceType.GAS,
    "lpg": ServiceType.GAS,
    "cooking": ServiceType.GAS,
    "गैस": ServiceType.GAS,
    "सिलिंडर": ServiceType.GAS,
    "indane": ServiceType.GAS,
    "bharat": ServiceType.GAS,
    "hp": ServiceType.GAS,
    "png": ServiceType.GAS,
    "pipeline": ServiceType.GAS,
    # Water
    "water": ServiceType.WATER,
    "पानी": ServiceType.WATER,
    "jal": ServiceType.WATER,
    "जल": ServiceType.WATER,
    "supply": ServiceType.WATER,
    "tank": ServiceType.WATER,
    "tap": ServiceType.WATER,
    "pipe": ServiceType.WATER,
    "sewage": ServiceType.WATER,
    "drainage": ServiceType.WATER,
    # Municipal
    "municipal": ServiceType.MUNICIPAL,
    "nagar": ServiceType.MUNICIPAL,
    "nigam": ServiceType.MUNICIPAL,
    "नगर": ServiceType.MUNICIPAL,
    "tax": ServiceType.MUNICIPAL,
    "property": ServiceType.MUNICIPAL,
    "garbage": ServiceType.MUNICIPAL,
    "waste": ServiceType.MUNICIPAL,
    "कचरा": ServiceType.MUNICIPAL,
    "streetlight": ServiceType.MUNICIPAL,
    "road": ServiceType.MUNICIPAL,
    "certificate": ServiceType.MUNICIPAL,
    "birth": ServiceType.MUNICIPAL,
    "death": ServiceType.MUNICIPAL,
}

ACTION_KEYWORDS: dict[str, ActionType] = {
    # Pay bill
    "pay": ActionType.PAY_BILL,
    "payment": ActionType.PAY_BILL,
    "भुगतान": ActionType.PAY_BILL,
    "bill": ActionType.PAY_BILL,
    "बिल": ActionType.PAY_BILL,
    "dues": ActionType.PAY_BILL,
    "बकाया": ActionType.PAY_BILL,
    "clear": ActionType.PAY_BILL,
    "settle": ActionType.PAY_BILL,
    "amount": ActionType.PAY_BILL,
    # Complaint
    "complaint": ActionType.FILE_COMPLAINT,
    "complain": ActionType.FILE_COMPLAINT,
    "शिकायत": ActionType.FILE_COMPLAINT,
    "grievance": ActionType.FILE_COMPLAINT,
    "issue": ActionType.FILE_COMPLAINT,
    "problem": ActionType.FILE_COMPLAINT,
    "समस्या": ActionType.FILE_COMPLAINT,
    "report": ActionType.FILE_COMPLAINT,
    "not working": ActionType.FILE_COMPLAINT,
    "broken": ActionType.FILE_COMPLAINT,
    "fault": ActionType.FILE_COMPLAINT,
    "outage": ActionType.FILE_COMPLAINT,
    # Status check
    "status": ActionType.CHECK_STATUS,
    "check": ActionType.CHECK_STATUS,
    "track": ActionType.CHECK_STATUS,
    "स्थिति": ActionType.CHECK_STATUS,
    "where": ActionType.CHECK_STATUS,
    "progress": ActionType.CHECK_STATUS,
    "pending": ActionType.CHECK_STATUS,
    # New connection
    "new": ActionType.NEW_CONNECTION,
    "connection": ActionType.NEW_CONNECTION,
    "apply": ActionType.NEW_CONNECTION,
    "register": ActionType.NEW_CONNECTION,
    "नया": ActionType.NEW_CONNECTION,
    "कनेक्शन": ActionType.NEW_CONNECTION,
    "install": ActionType.NEW_CONNECTION,
    # Meter reading
    "meter": ActionType.METER_READING,
    "reading": ActionType.METER_READING,
    "मीटर": ActionType.METER_READING,
    "submit": ActionType.METER_READING,
    "enter": ActionType.METER_READING,
    # View bills
    "view": ActionType.VIEW_BILLS,
    "see": ActionType.VIEW_BILLS,
    "show": ActionType.VIEW_BILLS,
    "देखें": ActionType.VIEW_BILLS,
    "list": ActionType.VIEW_BILLS,
    "history": ActionType.VIEW_BILLS,
}

ROUTE_MAP: dict[ActionType, dict[str, str]] = {
    ActionType.PAY_BILL: {
        ServiceType.ELECTRICITY: "/bills?service=ELECTRICITY",
        ServiceType.GAS: "/bills?service=GAS",
        ServiceType.WATER: "/bills?service=WATER",
        ServiceType.MUNICIPAL: "/bills?service=MUNICIPAL",
        DEFAULT_ROUTE_KEY: "/bills",
    },
    ActionType.FILE_COMPLAINT: {
        ServiceType.ELECTRICITY: "/grievances/new?service=ELECTRICITY",
        ServiceType.GAS: "/grievances/new?service=GAS",
        ServiceType.WATER: "/grievances/new?service=WATER",
        ServiceType.MUNICIPAL: "/grievances/new?service=MUNICIPAL",
        DEFAULT_ROUTE_KEY: "/grievances/new",
    },
    ActionType.CHECK_STATUS: {
        DEFAULT_ROUTE_KEY: "/grievances",
    },
    ActionType.NEW_CONNECTION: {
        ServiceType.ELECTRICITY: "/connections/new?service=ELECTRICITY",
        ServiceType.GAS: "/connections/new?service=GAS",
        ServiceType.WATER: "/connections/new?service=WATER",
        DEFAULT_ROUTE_KEY: "/connections/new",
    },
    ActionType.METER_READING: {
        DEFAULT_ROUTE_KEY: "/dashboard",
    },
    ActionType.VIEW_BILLS: {
        DEFAULT_ROUTE_KEY: "/bills",
    },
}

SERVICE_NAMES: dict[ServiceType, BilingualText] = {
    ServiceType.ELECTRICITY: BilingualText(en="electricity", hi="बिजली"),
    ServiceType.GAS: BilingualText(en="gas", hi="गैस"),
    ServiceType.WATER: BilingualText(en="water", hi="पानी"),
    ServiceType.MUNICIPAL: BilingualText(en="municipal services", hi="नगरपालिका सेवाएं"),
}

ACTION_NAMES: dict[ActionType, BilingualText] = {
    ActionType.PAY_BILL: BilingualText(en="pay your bill", hi="बिल भुगतान करना"),
    ActionType.FILE_COMPLAINT: BilingualText(en="file a complaint", hi="शिकायत दर्ज करना"),
    ActionType.CHECK_STATUS: BilingualText(en="check status", hi="स्थिति जांचना"),
    ActionType.NEW_CONNECTION: BilingualText(
        en="apply for new connection",
        hi="नया कनेक्शन के लिए आवेदन करना",
    ),
    ActionType.METER_READING: BilingualText(en="submit meter reading", hi="मीटर रीडिंग जमा करना"),
    ActionType.VIEW_BILLS: BilingualText(en="view your bills", hi="अपने बिल देखना"),
}

FALLBACK_MESSAGE = BilingualText(
    en="I couldn't understand your request. Please try again or select from the menu.",
    hi="मैं आपके अनुरोध को समझ नहीं पाया। कृपया पुनः प्रयास करें या मेनू से चुनें।",
)

# Home -> service -> action -> page in the regular UI.
MANUAL_STEPS: dict[ActionType, int] = {
    ActionType.PAY_BILL: 4,
    ActionType.FILE_COMPLAINT: 4,
    ActionType.CHECK_STATUS: 3,
    ActionType.NEW_CONNECTION: 4,
    ActionType.METER_READING: 4,
    ActionType.VIEW_BILLS: 3,
}
DEFAULT_MANUAL_STEPS = 3

# Free-text entry + confirmation.
ASSISTANT_STEPS = 2

QUICK_PHRASES: tuple[QuickPhrase, ...] = (
    QuickPhrase(id=1, en="Pay my electricity bill", hi="मेरा बिजली बिल भुगतान करें", icon="⚡"),
    QuickPhrase(id=2, en="Pay water bill", hi="पानी का बिल भुगतान करें", icon="💧"),
    QuickPhrase(id=3, en="Register a complaint", hi="शिकायत दर्ज करें", icon="📝"),
    QuickPhrase(id=4, en="Check complaint status", hi="शिकायत की स्थिति जांचें", icon="🔍"),
    QuickPhrase(id=5, en="Apply for new connection", hi="नया कनेक्शन के लिए आवेदन", icon="🆕"),
    QuickPhrase(id=6, en="Submit meter reading", hi="मीटर रीडिंग जमा करें", icon="📊"),
    QuickPhrase(id=7, en="Pay gas bill", hi="गैस बिल भुगतान करें", icon="🔥"),
    QuickPhrase(id=8, en="View my bills", hi="मेरे बिल देखें", icon="📄"),
)
