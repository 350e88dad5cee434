import math
from datetime import date, datetime
from decimal import Decimal, InvalidOperation

from skillbridge import bcrypt
from skillbridge.errors import ValidationError

# Largest value of a 32-bit INTEGER column
MAX_INTEGER = 2 ** 31 - 1


def hash_password(password):
    return bcrypt.generate_password_hash(password).decode('utf-8')


def check_password(password_hash, password):
    """Constant-time comparison of ``password`` against a stored bcrypt hash."""
    return bcrypt.check_password_hash(password_hash, password)


def json_body(request):
    """Parsed JSON object of the request, {} when there is no JSON body."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError('Request body must be a JSON object')
    return data


def require_fields(data, fields):
    """Raise ValidationError naming every field that is absent or blank."""
    missing = [field for field in fields if not str(data.get(field) or '').strip()]
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}")


def check_lengths(data, limits):
    """Raise ValidationError for any text field longer than its column allows."""
    too_long = [field for field, limit in limits.items() if len(str(data.get(field) or '').strip()) > limit]
    if too_long:
        raise ValidationError(f"Fields too long: {', '.join(too_long)}")


def clean(value):
    """Strip strings and turn blanks into None."""
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def parse_number(data, field, max_value=None):
    value = clean(data.get(field))
    if value is None:
        return None
    try:
        number = Decimal(value)
    except InvalidOperation:
        raise ValidationError(f"{field} must be a number")
    if not number.is_finite() or number < 0:
        raise ValidationError(f"{field} must be a non-negative number")
    if max_value is not None and number >= max_value:
        raise ValidationError(f"{field} must be lower than {max_value}")
    number = float(number)
    if not math.isfinite(number):
        raise ValidationError(f"{field} is out of range")
    return number


def parse_int(data, field, max_value=MAX_INTEGER):
    value = clean(data.get(field))
    if value is None:
        return None
    try:
        number = int(value)
    except ValueError:
        raise ValidationError(f"{field} must be an integer")
    if number < 0:
        raise ValidationError(f"{field} must be a non-negative integer")
    if number > max_value:
        raise ValidationError(f"{field} must be at most {max_value}")
    return number


def parse_date(data, field):
    """Validate an ISO ``YYYY-MM-DD`` date and return it as a string."""
    value = clean(data.get(field))
    if value is None:
        return None
    try:
        return date.fromisoformat(value).isoformat()
    except ValueError:
        raise ValidationError(f"{field} must be a date formatted as YYYY-MM-DD")


def to_json_value(value):
    """Convert driver values (Decimal, date, datetime) into JSON friendly ones."""
    if isinstance(value, Decimal):
        return float(value)
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return value
