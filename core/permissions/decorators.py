"""
Permission decorators for function-based views.
"""
from functools import wraps

from core.user_accounts.identity import Identity

from .services import action_for_method, authorize_action


def identity_from_request(request):
    """
    The caller's Identity, or None for anonymous requests.
    """
    if isinstance(getattr(request, 'auth', None), Identity):
        return request.auth
    user = getattr(request, 'user', None)
    if user is not None and user.is_authenticated:
        return Identity.for_user(user)
    return None


def require_permission(resource, action=None):
    """
    Check the permission matrix before running the view.

    Args:
        resource: a core.permissions.matrix.Resources identifier
        action: the action to check. If None, derived from the HTTP method
                (GET = view, POST = create, PUT/PATCH = edit, DELETE = delete)

    The resolved Identity is passed to the view as `request.identity`.

    Usage:
        @api_view(['GET', 'POST'])
        @require_permission(Resources.COMPANIES)
        def company_list(request):
            ...

        @api_view(['PUT'])
        @require_permission(Resources.LOGBOOK_STATUS, Actions.EDIT)
        def logbook_status(request, pk):
            ...
    """
    def decorator(view_func):
        @wraps(view_func)
        def wrapper(request, *args, **kwargs):
            determined_action = action or action_for_method(request.method)
            request.identity = authorize_action(
                identity_from_request(request),
                resource,
                determined_action,
            )
            return view_func(request, *args, **kwargs)

        # Metadata for introspection/documentation
        wrapper.resource = resource
        wrapper.action = action

        return wrapper
    return decorator
