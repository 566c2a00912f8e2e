import re

from dinero.models.enums import AccountType
from dinero.schemas.account import AccountBase
from dinero.schemas.user import UserBase

# All patterns are applied with fullmatch and ASCII semantics: `\w` and `\d`
# never match non-ASCII characters, and a trailing newline is never accepted.
NAME_PATTERN = re.compile(r"[a-zA-Z ]+")
ACCOUNT_TYPE_PATTERN = re.compile("|".join(t.value for t in AccountType))
DUE_DATE_PATTERN = re.compile(r"[1-9]|[12]\d|3[01]", re.ASCII)
EMAIL_PATTERN = re.compile(
    r"([\w-]+(?:\.[\w-]+)*)@((?:[\w-]+\.)*\w[\w-]{0,66})\.([a-z]{2,6}(?:\.[a-z]{2})?)",
    re.ASCII,
)


def _matches(pattern: re.Pattern, value: str) -> bool:
    return pattern.fullmatch(value) is not None


def validate_account(account: AccountBase) -> bool:
    """
    Check an account before it is persisted. Any failing rule rejects the whole
    record. `due_date` is checked lexically ("1".."31"), not against a calendar.
    """
    if account.user_id < 1:
        return False

    if not _matches(NAME_PATTERN, account.name):
        return False

    if not _matches(ACCOUNT_TYPE_PATTERN, account.account_type):
        return False

    if account.minimum_payment > account.full_amount:
        return False

    if account.current_payment > account.full_amount:
        return False

    if not _matches(DUE_DATE_PATTERN, account.due_date):
        return False

    return True


def validate_user(user: UserBase) -> bool:
    for name in (user.first_name, user.last_name, user.full_name):
        if not _matches(NAME_PATTERN, name):
            return False

    return _matches(EMAIL_PATTERN, user.email)
