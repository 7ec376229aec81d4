"""
Permission Matrix - Hardcoded Setup
===================================

The single source of truth for who may do what:

    resource x action -> set of roles

Views never compare roles themselves; they declare the resource (and,
when the HTTP method is not enough, the action) through
core.permissions.decorators.require_permission. Ownership rules
(own logbook entries, supervised participants) are checked afterwards by
the services that own the data.
"""

# ============================================================================
# ROLES
# ============================================================================

class Roles:
    """Role identifiers stored on User.role."""
    ADMIN = 'admin'
    SUPERVISOR = 'supervisor'
    PARTICIPANT = 'peserta'


ALL_ROLES = frozenset({Roles.ADMIN, Roles.SUPERVISOR, Roles.PARTICIPANT})


# ============================================================================
# ACTIONS
# ============================================================================

class Actions:
    """Standard action identifiers."""
    VIEW = 'view'
    CREATE = 'create'
    EDIT = 'edit'
    DELETE = 'delete'


METHOD_ACTIONS = {
    'GET': Actions.VIEW,
    'HEAD': Actions.VIEW,
    'OPTIONS': Actions.VIEW,
    'POST': Actions.CREATE,
    'PUT': Actions.EDIT,
    'PATCH': Actions.EDIT,
    'DELETE': Actions.DELETE,
}


# ============================================================================
# RESOURCES
# ============================================================================

class Resources:
    """Resource identifiers used by views."""
    PROFILE = 'profile'
    USERS = 'users'
    COMPANIES = 'companies'
    PLACEMENTS = 'placements'
    OWN_PLACEMENT = 'own_placement'
    LOGBOOK = 'logbook'
    LOGBOOK_ENTRY = 'logbook_entry'
    OWN_LOGBOOK = 'own_logbook'
    SUPERVISED_LOGBOOK = 'supervised_logbook'
    LOGBOOK_STATUS = 'logbook_status'
    ADMIN_STATS = 'admin_stats'
    SUPERVISOR_STATS = 'supervisor_stats'
    PARTICIPANT_STATS = 'participant_stats'


_ADMIN = frozenset({Roles.ADMIN})
_ADMIN_SUPERVISOR = frozenset({Roles.ADMIN, Roles.SUPERVISOR})
_PARTICIPANT = frozenset({Roles.PARTICIPANT})
_SUPERVISOR = frozenset({Roles.SUPERVISOR})


PERMISSION_MATRIX = {
    Resources.PROFILE: {
        Actions.VIEW: ALL_ROLES,
        Actions.EDIT: ALL_ROLES,
    },
    Resources.USERS: {
        Actions.VIEW: _ADMIN,
        Actions.CREATE: _ADMIN,
        Actions.EDIT: _ADMIN,
        Actions.DELETE: _ADMIN,
    },
    Resources.COMPANIES: {
        Actions.VIEW: _ADMIN_SUPERVISOR,
        Actions.CREATE: _ADMIN,
        Actions.EDIT: _ADMIN,
        Actions.DELETE: _ADMIN,
    },
    Resources.PLACEMENTS: {
        Actions.VIEW: _ADMIN_SUPERVISOR,
        Actions.CREATE: _ADMIN,
        Actions.EDIT: _ADMIN,
        Actions.DELETE: _ADMIN,
    },
    Resources.OWN_PLACEMENT: {
        Actions.VIEW: _PARTICIPANT,
    },
    Resources.LOGBOOK: {
        Actions.VIEW: _ADMIN,
        Actions.CREATE: _PARTICIPANT,
    },
    # Entry-level visibility and ownership are enforced by LogbookService.
    Resources.LOGBOOK_ENTRY: {
        Actions.VIEW: ALL_ROLES,
        Actions.EDIT: _PARTICIPANT,
        Actions.DELETE: frozenset({Roles.ADMIN, Roles.PARTICIPANT}),
    },
    Resources.OWN_LOGBOOK: {
        Actions.VIEW: _PARTICIPANT,
    },
    Resources.SUPERVISED_LOGBOOK: {
        Actions.VIEW: _SUPERVISOR,
    },
    Resources.LOGBOOK_STATUS: {
        Actions.EDIT: _ADMIN_SUPERVISOR,
    },
    Resources.ADMIN_STATS: {
        Actions.VIEW: _ADMIN,
    },
    Resources.SUPERVISOR_STATS: {
        Actions.VIEW: _SUPERVISOR,
    },
    Resources.PARTICIPANT_STATS: {
        Actions.VIEW: _PARTICIPANT,
    },
}
