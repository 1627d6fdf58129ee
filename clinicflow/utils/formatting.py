"""
Display formatting for dates and money.

Formatting never raises: a missing value renders as "N/A" and a value that
cannot be read as a date renders as "Invalid Date".
"""
from datetime import date, datetime

NOT_AVAILABLE = 'N/A'
INVALID_DATE = 'Invalid Date'

CURRENCY_SYMBOLS = {
    'INR': '₹',
    'USD': '$',
    'EUR': '€',
    'GBP': '£',
}


def parse_datetime(value):
    """Parse an ISO string (a trailing Z is accepted) into a datetime, or None."""
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    if text.endswith('Z'):
        text = text[:-1] + '+00:00'
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def format_date(value):
    """DD-MM-YYYY"""
    if value is None or value == '':
        return NOT_AVAILABLE
    parsed = parse_datetime(value)
    if parsed is None:
        return INVALID_DATE
    return parsed.strftime('%d-%m-%Y')


def format_datetime(value):
    """DD-MM-YYYY, hh:mm AM/PM"""
    if value is None or value == '':
        return NOT_AVAILABLE
    parsed = parse_datetime(value)
    if parsed is None:
        return INVALID_DATE
    return f"{format_date(parsed)}, {parsed.strftime('%I:%M %p')}"


def _group_indian(digits):
    # Last three digits, then groups of two: 12,34,56,789
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ','.join(groups + [tail])


def format_currency(amount, currency='INR'):
    """
    Format an amount with two decimals.

    INR uses Indian digit grouping (₹1,00,000.00); other currencies group by
    thousands.
    """
    amount = float(amount or 0)
    sign = '-' if amount < 0 else ''
    whole, cents = f"{abs(amount):.2f}".split('.')
    if currency == 'INR':
        whole = _group_indian(whole)
    else:
        whole = f"{int(whole):,}"
    symbol = CURRENCY_SYMBOLS.get(currency, f"{currency} ")
    return f"{sign}{symbol}{whole}.{cents}"


def calculate_age(dob, today=None):
    """Age in whole years from a date of birth, or None when unknown."""
    born = parse_datetime(dob)
    if born is None:
        return None
    today = today or date.today()
    return today.year - born.year - ((today.month, today.day) < (born.month, born.day))
