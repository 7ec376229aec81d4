"""
Standardized API responses.

Every JSON body follows:
{
    "status": "success" | "error",
    "message": "string message or empty",
    "data": {...} | [] | null
}
Error bodies also carry "code", the machine-readable error name from
core.base.exceptions (or DRF's own code for framework errors).
"""
import logging

from django.core.exceptions import PermissionDenied as DjangoPermissionDenied
from django.core.exceptions import ValidationError as DjangoValidationError
from django.http import Http404
from rest_framework import status as http_status
from rest_framework.exceptions import NotAuthenticated
from rest_framework.exceptions import ValidationError as DRFValidationError
from rest_framework.renderers import JSONRenderer
from rest_framework.response import Response

from core.base.exceptions import InputError, InternalError, MissingField, Unauthenticated

logger = logging.getLogger(__name__)


def custom_exception_handler(exc, context):
    """
    Format every error raised inside a DRF view.

    Known API errors keep their status code. Anything else is an
    unexpected failure: it is logged with its traceback, the transaction
    is rolled back and the client receives a generic 500.
    """
    # rest_framework.views loads DEFAULT_RENDERER_CLASSES, which point back here
    from rest_framework.views import exception_handler, set_rollback

    if isinstance(exc, DjangoValidationError):
        exc = InputError(getattr(exc, 'message_dict', None) or exc.messages)

    response = exception_handler(exc, context)

    if response is None:
        view = context.get('view')
        logger.exception(
            "Unhandled error in %s",
            view.__class__.__name__ if view is not None else 'unknown view',
            exc_info=exc,
        )
        set_rollback()
        error = InternalError()
        return Response(
            build_error_body(error.detail, error.default_code),
            status=error.status_code,
        )

    response.data = build_error_body(response.data, error_code_for(exc))
    return response


def error_code_for(exc):
    """Pick the envelope `code` for an exception."""
    if isinstance(exc, Http404):
        return 'not_found'
    if isinstance(exc, DjangoPermissionDenied):
        return 'forbidden'
    if isinstance(exc, NotAuthenticated):
        return Unauthenticated.default_code
    if isinstance(exc, DRFValidationError) and 'required' in _flatten_codes(exc.get_codes()):
        return MissingField.default_code
    return getattr(exc, 'default_code', 'error')


def _flatten_codes(codes):
    if isinstance(codes, dict):
        return [c for value in codes.values() for c in _flatten_codes(value)]
    if isinstance(codes, (list, tuple)):
        return [c for value in codes for c in _flatten_codes(value)]
    return [codes]


def build_error_body(errors, code):
    return {
        "status": "error",
        "message": format_error_message(errors),
        "code": code,
        "data": None,
    }


def format_error_message(errors):
    """
    Flatten DRF error payloads into a single readable message.

    - {"field": ["error1", "error2"]} -> "field: error1, error2"
    - {"detail": "message"} -> "message"
    - ["error1", "error2"] -> "error1, error2"
    """
    if isinstance(errors, dict):
        parts = []
        for field, field_errors in errors.items():
            if field in ('detail', 'non_field_errors'):
                parts.append(format_error_message(field_errors))
            else:
                parts.append(f"{field}: {format_error_message(field_errors)}")
        return "; ".join(parts)

    if isinstance(errors, (list, tuple)):
        return ", ".join(format_error_message(e) for e in errors)

    return str(errors)


class StandardizedJSONRenderer(JSONRenderer):
    """
    JSON renderer that wraps successful payloads in the standard envelope.
    Bodies that already have the envelope keys are left alone.
    """

    def render(self, data, accepted_media_type=None, renderer_context=None):
        response = renderer_context.get('response') if renderer_context else None
        if response is not None and response.status_code == 204:
            return b''
        if response is not None and not self.is_already_formatted(data):
            if response.status_code >= 400:
                data = build_error_body(data, 'error')
            else:
                data = self.format_success_response(data)
        return super().render(data, accepted_media_type, renderer_context)

    def is_already_formatted(self, data):
        return isinstance(data, dict) and {'status', 'message', 'data'} <= data.keys()

    def format_success_response(self, data):
        if isinstance(data, dict) and set(data.keys()) == {'message'}:
            return {"status": "success", "message": str(data['message']), "data": None}
        return {"status": "success", "message": "", "data": data}


def success_response(data=None, message="", status_code=http_status.HTTP_200_OK):
    """
    Build an already-wrapped success response.

        return success_response(serializer.data, "Company created", status.HTTP_201_CREATED)
    """
    return Response({
        "status": "success",
        "message": message,
        "data": data
    }, status=status_code)
