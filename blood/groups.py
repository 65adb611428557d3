BLOOD_GROUPS = [
    ("A+", "A+"), ("A-", "A-"),
    ("B+", "B+"), ("B-", "B-"),
    ("O+", "O+"), ("O-", "O-"),
    ("AB+", "AB+"), ("AB-", "AB-"),
]

BLOOD_GROUP_CODES = [code for code, _ in BLOOD_GROUPS]


def normalize_blood_group(value) -> str:
    """
    "o+", " O+ " and "o +" all become "O+". Unknown values come back
    normalized but unvalidated; callers check membership.
    """
    return "".join((value or "").split()).upper()


def is_known_blood_group(value) -> bool:
    return normalize_blood_group(value) in BLOOD_GROUP_CODES
