# shared/schemas.py
from typing import Annotated

from pydantic import AfterValidator, AnyUrl, BaseModel, TypeAdapter, ValidationError

_any_url = TypeAdapter(AnyUrl)


def _check_url(value: str) -> str:
    # Validated as a URL but stored exactly as sent
    try:
        _any_url.validate_python(value)
    except ValidationError as exc:
        raise ValueError(f"invalid URL: {exc.errors()[0]['msg']}") from exc
    return value


UrlStr = Annotated[str, AfterValidator(_check_url)]


class SuccessOut(BaseModel):
    success: bool
