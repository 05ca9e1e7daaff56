# access_tokens/shared/utils/request_validation.py

"""
Validation of inbound token requests.

Runs the declarative request schemas against raw input and turns every
violation into a ``FieldError`` (field, message) pair.
"""

from typing import Any, Iterable, List, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from access_tokens.application.dtos.token_dto import CreateTokenRequest, ListTokensRequest
from access_tokens.domain.exceptions import FieldError, InvalidInputException

T = TypeVar("T", bound=BaseModel)

# Location prefixes FastAPI adds in front of the field path
_REQUEST_PARTS = ("body", "query", "header", "path")


def field_errors(errors: Iterable[Mapping[str, Any]]) -> List[FieldError]:
    """
    Convert pydantic error dicts to field errors.

    Args:
        errors: Output of ``ValidationError.errors()`` or ``RequestValidationError.errors()``

    Returns:
        One FieldError per violated rule, field path dotted (e.g. "scopes.1")
    """
    result = []
    for error in errors:
        loc = list(error.get("loc", ()))
        if len(loc) > 1 and loc[0] in _REQUEST_PARTS:
            loc = loc[1:]
        field = ".".join(str(part) for part in loc) or "body"
        result.append(FieldError(field=field, message=error.get("msg", "Invalid value")))
    return result


def validate(schema: Type[T], data: Any) -> T:
    try:
        return schema.model_validate(data)
    except ValidationError as exc:
        raise InvalidInputException(details=field_errors(exc.errors()))


def validate_create_token_request(data: Any) -> CreateTokenRequest:
    """
    Validate a create request body.

    Raises:
        InvalidInputException: With every failed field
    """
    return validate(CreateTokenRequest, data)


def validate_list_tokens_request(user_id: Optional[str]) -> ListTokensRequest:
    """
    Validate the list query. A missing userId fails like an empty one.

    Raises:
        InvalidInputException: With the failed field
    """
    return validate(ListTokensRequest, {} if user_id is None else {"userId": user_id})
