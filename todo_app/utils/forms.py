import uuid
from urllib.parse import unquote_plus

from todo_app.core.errors import BadRequest, ValidationError


def _decode(part: str) -> str:
    try:
        return unquote_plus(part, errors="strict")
    except UnicodeDecodeError as e:
        raise BadRequest("Form field is not valid UTF-8.") from e


def parse_single_field(body: bytes, field: str) -> str:
    """
    Lit un corps `application/x-www-form-urlencoded` contenant exactement un couple `clé=valeur`.
    Retourne la valeur décodée.
    Lève BadRequest si le corps est mal formé, ValidationError si le champ attendu est absent.
    """
    try:
        text = body.decode("utf-8")
    except UnicodeDecodeError as e:
        raise BadRequest("Request body is not valid UTF-8.") from e

    key, sep, value = text.partition("=")
    if not sep:
        raise BadRequest("Expected a single 'key=value' form field.")
    if _decode(key).strip() != field:
        raise ValidationError(f"Missing form field '{field}'.")
    return _decode(value)


def parse_todo_id(value: str) -> uuid.UUID:
    try:
        return uuid.UUID(value.strip())
    except ValueError as e:
        raise BadRequest("Malformed todo id.") from e
