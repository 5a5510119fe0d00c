# nckuboard/services/validator.py

INSTITUTIONAL_SUFFIXES = ("@ncku.edu.tw", "@gs.ncku.edu.tw")


def is_institutional_email(candidate) -> bool:
    """True iff ``candidate`` ends exactly with one of the NCKU mail suffixes.

    Anchored suffix match only; "x@ncku.edu.tw.evil.com" and a value with a
    trailing newline are both rejected. Non-string input is simply False.
    """
    if not isinstance(candidate, str):
        return False
    return candidate.endswith(INSTITUTIONAL_SUFFIXES)
