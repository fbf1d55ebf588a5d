"""Domain operations behind the HTTP routes.

Each operation returns a Result instead of raising for expected failures.
"""

import re

from api.logging_config import get_logger
from api.models import Post, PostResponse, ValidateResponse
from api.result import AppError, NotFoundError, Result, ValidationError, fail, ok

log = get_logger(__name__)

MIN_AGE = 18
MAX_AGE = 100

EMAIL_PATTERN = re.compile(r"[^@\s]+@[^@\s]+\.[^@\s]+")


async def get_post(id: str) -> Result[PostResponse, AppError]:
    """Look up a post by ID. Only post "1" exists."""
    if id != "1":
        log.debug("post_not_found", id=id)
        return fail(NotFoundError())
    return ok(PostResponse(post=Post(id=id, title="Hello World")))


async def validate(age: int, email: str) -> Result[ValidateResponse, AppError]:
    """Check age and email against domain rules and echo them back.

    Args:
        age: Must be between MIN_AGE and MAX_AGE inclusive.
        email: Must look like local@domain.tld.

    Returns:
        Ok with the echoed values, or Err with a ValidationError naming the
        first rule that failed.
    """
    if not MIN_AGE <= age <= MAX_AGE:
        log.debug("validation_failed", field="age", value=age)
        return fail(ValidationError(f"age must be between {MIN_AGE} and {MAX_AGE}"))

    if not EMAIL_PATTERN.fullmatch(email):
        log.debug("validation_failed", field="email")
        return fail(ValidationError("invalid email address"))

    return ok(ValidateResponse(age=age, email=email))
