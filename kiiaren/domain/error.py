"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class AccessDeniedError(DomainError):
    """Base for workspace authorization failures."""

    def __init__(self, workspace_id: str, user_id: str, message: str):
        self.workspace_id = workspace_id
        self.user_id = user_id
        super().__init__(message)


class NotWorkspaceMemberError(AccessDeniedError):
    """Raised when an authenticated user is not a member of the workspace."""

    def __init__(self, workspace_id: str, user_id: str):
        super().__init__(
            workspace_id, user_id, "You are not a member of this workspace."
        )


class NotWorkspaceAdminError(AccessDeniedError):
    """Raised when a member lacks the admin role for an admin-only operation."""

    def __init__(self, workspace_id: str, user_id: str):
        super().__init__(
            workspace_id,
            user_id,
            "You must be a workspace admin to perform this action.",
        )


class InvalidDomainError(ValidationError):
    """Raised when a domain is empty or not a valid DNS host name."""

    def __init__(self, domain: str, reason: str):
        self.domain = domain
        super().__init__(f"Invalid domain '{domain}': {reason}")


class DomainAlreadyClaimedError(BusinessRuleViolationError):
    """Raised when a domain is already claimed by a workspace."""

    def __init__(self, domain: str):
        self.domain = domain
        super().__init__(f"Domain {domain} is already claimed by a workspace")


class DomainNotFoundError(NotFoundError):
    """Raised when a domain claim ID does not exist."""

    def __init__(self, identifier: str):
        super().__init__("Domain", identifier)


class InviteLinkNotFoundError(NotFoundError):
    """Raised when an invite link ID does not exist."""

    def __init__(self, identifier: str):
        super().__init__("Invite link", identifier)


class WorkspaceNotFoundError(NotFoundError):
    """Raised when a workspace ID or join code does not exist."""

    def __init__(self, identifier: str):
        super().__init__("Workspace", identifier)


class JoinCodeDisabledError(BusinessRuleViolationError):
    """Raised when joining by code a workspace whose join code is disabled."""

    def __init__(self, workspace_id: str):
        self.workspace_id = workspace_id
        super().__init__(
            "Join codes are disabled for this workspace. "
            "Ask an admin for an invite link."
        )


class AlreadyMemberError(BusinessRuleViolationError):
    """Raised when a membership already exists for the user and workspace."""

    def __init__(self, workspace_id: str, user_id: str):
        self.workspace_id = workspace_id
        self.user_id = user_id
        super().__init__("You are already a member of this workspace")
