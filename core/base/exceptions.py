"""
Error taxonomy for the magang API.

Every error is a DRF APIException, so views simply raise and the project
exception handler (magang_project.response_formatter) renders the
standard error envelope with the `code` below.

    AuthError        401  UserNotFound, InvalidCredential, TokenExpired, TokenMalformed
    AuthzError       401/403  Unauthenticated, Forbidden, SubmissionLocked
    InputError       400  MissingField, InvalidStatus, DuplicateUsername,
                          InvalidReference, FileTypeRejected, FileTooLarge (413)
    ConflictError    409  AlreadyPlaced, EntryLocked
    NotFoundError    404
    InternalError    500
"""
from rest_framework import status
from rest_framework.exceptions import APIException


class MagangError(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Request could not be processed.'
    default_code = 'error'


# ============================================================================
# Identity & session
# ============================================================================

class AuthError(MagangError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = 'Authentication failed.'
    default_code = 'auth_error'


class UserNotFound(AuthError):
    default_detail = 'Username not found.'
    default_code = 'user_not_found'


class InvalidCredential(AuthError):
    default_detail = 'Wrong password.'
    default_code = 'invalid_credential'


class TokenExpired(AuthError):
    default_detail = 'Session token has expired.'
    default_code = 'token_expired'


class TokenMalformed(AuthError):
    default_detail = 'Session token is invalid.'
    default_code = 'token_malformed'


# ============================================================================
# Authorization
# ============================================================================

class AuthzError(MagangError):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = 'Access denied.'
    default_code = 'authz_error'


class Unauthenticated(AuthzError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = 'Authentication required.'
    default_code = 'unauthenticated'


class Forbidden(AuthzError):
    default_detail = 'You do not have permission to perform this action.'
    default_code = 'forbidden'


class SubmissionLocked(AuthzError):
    default_detail = 'Logbook submission is locked until you have an active placement.'
    default_code = 'submission_locked'


# ============================================================================
# Validation
# ============================================================================

class InputError(MagangError):
    default_detail = 'Invalid input.'
    default_code = 'invalid'


class MissingField(InputError):
    default_detail = 'A required field is missing.'
    default_code = 'missing_field'

    def __init__(self, field=None, detail=None):
        if detail is None and field:
            detail = f'{field}: This field is required.'
        self.field = field
        super().__init__(detail)


class InvalidStatus(InputError):
    default_detail = 'Status must be one of: pending, approved, rejected.'
    default_code = 'invalid_status'


class DuplicateUsername(InputError):
    default_detail = 'Username is already taken.'
    default_code = 'duplicate_username'


class InvalidReference(InputError):
    default_detail = 'Referenced record is missing or has the wrong role.'
    default_code = 'invalid_reference'


class FileTypeRejected(InputError):
    default_detail = 'File type is not allowed.'
    default_code = 'file_type_rejected'


class FileTooLarge(InputError):
    status_code = status.HTTP_413_REQUEST_ENTITY_TOO_LARGE
    default_detail = 'File is too large.'
    default_code = 'file_too_large'


# ============================================================================
# Conflicts, missing resources, internal failures
# ============================================================================

class ConflictError(MagangError):
    status_code = status.HTTP_409_CONFLICT
    default_detail = 'Request conflicts with the current state.'
    default_code = 'conflict'


class AlreadyPlaced(ConflictError):
    default_detail = 'Participant already has an active placement.'
    default_code = 'already_placed'


class EntryLocked(ConflictError):
    default_detail = 'Approved logbook entries can no longer be edited.'
    default_code = 'entry_locked'


class NotFoundError(MagangError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = 'Resource not found.'
    default_code = 'not_found'


class InternalError(MagangError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = 'Internal server error.'
    default_code = 'internal_error'
