from rest_framework import permissions


# Capability constants
class Capabilities:
    MANAGE_CATALOG = 'manage_catalog'
    MANAGE_USERS = 'manage_users'
    VIEW_REPORTS = 'view_reports'
    CHECKOUT = 'checkout'


# Capabilities granted to each role
ROLE_CAPABILITIES = {
    'ADMIN': frozenset([
        Capabilities.MANAGE_CATALOG,
        Capabilities.MANAGE_USERS,
        Capabilities.VIEW_REPORTS,
        Capabilities.CHECKOUT,
    ]),
    'KASIR': frozenset([
        Capabilities.CHECKOUT,
    ]),
}


class HasCapability(permissions.BasePermission):
    """
    Grants access when the authenticated, active user's role carries
    `required_capability`. Subclasses only set the capability.
    """
    required_capability = None
    message = 'Your role does not allow this operation.'

    def has_permission(self, request, view):
        user = request.user
        if not user or not user.is_authenticated or not user.is_active:
            return False
        return user.has_capability(self.required_capability)


class CanManageCatalog(HasCapability):
    required_capability = Capabilities.MANAGE_CATALOG


class CanManageUsers(HasCapability):
    required_capability = Capabilities.MANAGE_USERS


class CanViewReports(HasCapability):
    required_capability = Capabilities.VIEW_REPORTS


class CanCheckout(HasCapability):
    required_capability = Capabilities.CHECKOUT
