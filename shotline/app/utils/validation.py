"""
Validation of JSON request bodies with Pydantic schemas. Validation failures
are turned into WrongParameterException so they are returned as 400 errors
listing the faulty fields.
"""
from flask import request

from pydantic import ValidationError

from shotline.app.services.exception import WrongParameterException


def format_errors(error: ValidationError):
    """
    Return one {field, message} dict per validation error.
    """
    return [
        {
            "field": ".".join(str(location) for location in err["loc"]),
            "message": err.get("msg", "Invalid value"),
        }
        for err in error.errors()
    ]


def get_json_payload():
    payload = request.get_json(silent=True)
    if payload is None:
        raise WrongParameterException(
            "Request body is empty or is not JSON. Set the Content-Type "
            "header to application/json."
        )
    return payload


def validate_request_body(schema_class, data=None):
    """
    Validate the JSON body of the current request (or given data) against
    given schema. Return the validated schema instance.
    """
    payload = data if data is not None else get_json_payload()
    try:
        return schema_class.model_validate(payload)
    except ValidationError as e:
        raise WrongParameterException(
            "Validation error.", dict={"errors": format_errors(e)}
        )


def get_update_data(schema_class, data=None, keep_none=True):
    """
    Validate an update body and return, as a dict, only the fields the client
    actually sent. Fields explicitly set to null are dropped when keep_none
    is False.
    """
    body = validate_request_body(schema_class, data=data)
    update_data = body.model_dump(
        exclude_unset=True, exclude_none=not keep_none
    )
    if len(update_data) == 0:
        raise WrongParameterException("No field to update was given.")
    return update_data
