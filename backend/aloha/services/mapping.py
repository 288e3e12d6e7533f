"""
Taste of Aloha Backend — Item Mapping & Validation
===================================================

What:  Turns a loosely-typed item payload into the normalized record shape
       the stores persist.
How:   Pydantic parses and coerces the raw values (MenuItemFields); the two
       functions below apply defaults and required-field rules.
Who:   Called by MenuService before every create and update.

Both functions are pure: no I/O, no shared state, same input → same output.

Defaults on create:
    description  ""
    price        0
    image        None
    category     settings.default_category ("General")
    is_available True (only an explicit false disables an item)
"""

from typing import Any, Dict, Mapping, Optional

from pydantic import ValidationError as PydanticValidationError

from aloha.config import settings
from aloha.exceptions import ValidationError
from aloha.schemas.menu_item import MenuItemFields


def _parse(payload: Any) -> MenuItemFields:
    if not isinstance(payload, Mapping):
        raise ValidationError(message="Request body must be a JSON object", field="body")
    try:
        return MenuItemFields.model_validate(dict(payload))
    except PydanticValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"]) or "body"
        raise ValidationError(
            message=f"{field}: {first['msg']}",
            field=field,
        ) from e


def normalize_new_item(
    payload: Any,
    default_category: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Map a create payload to a complete record.

    Args:
        payload: Request body (dict-like). Keys may be camelCase or snake_case.
        default_category: Category used when the payload has none; falls back
            to settings.default_category.

    Returns:
        Dict with exactly name, description, price, image, category,
        is_available.

    Raises:
        ValidationError: body is not an object, name is missing/blank, or a
            value cannot be coerced (e.g. price "abc").
    """
    fields = _parse(payload)

    if not fields.name:
        raise ValidationError(message="name is required", field="name")

    return {
        "name": fields.name,
        "description": fields.description or "",
        "price": fields.price if fields.price is not None else 0.0,
        "image": fields.image or None,
        "category": fields.category or default_category or settings.default_category,
        "is_available": fields.is_available is not False,
    }


def normalize_changes(payload: Any) -> Dict[str, Any]:
    """
    Map an update payload to the subset of fields the caller supplied.

    Omitted fields are absent from the result, so the stored values are
    kept. A null for a non-nullable field is treated as omitted; a null or
    empty image clears the picture. An empty name is rejected.

    Returns:
        Dict with any of name, description, price, image, category,
        is_available. May be empty.
    """
    fields = _parse(payload)
    changes: Dict[str, Any] = {}

    for key in fields.model_fields_set:
        value = getattr(fields, key)
        if key == "image":
            changes["image"] = value or None
        elif value is None:
            continue
        elif key == "name" and not value:
            raise ValidationError(message="name cannot be empty", field="name")
        elif key == "category" and not value:
            continue
        else:
            changes[key] = value

    return changes
