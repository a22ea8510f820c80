from taskflow.libs.result import Error, ErrorKind

WORKSPACE_NOT_FOUND = Error("WORKSPACE_NOT_FOUND", "Workspace not found", ErrorKind.not_found)
MEMBER_NOT_FOUND = Error("MEMBER_NOT_FOUND", "Member not found", ErrorKind.not_found)
USER_NOT_FOUND = Error("USER_NOT_FOUND", "User not found", ErrorKind.not_found)
ALREADY_A_MEMBER = Error(
    "ALREADY_A_MEMBER", "User is already a member of this workspace", ErrorKind.conflict
)
OWNER_ROLE_RESTRICTED = Error(
    "INSUFFICIENT_ROLE", "Only owners can grant, change or remove the OWNER role", ErrorKind.forbidden
)
LAST_OWNER_REMOVAL = Error(
    "CANNOT_REMOVE_LAST_OWNER", "Cannot remove the last OWNER", ErrorKind.validation
)
LAST_OWNER_DOWNGRADE = Error(
    "CANNOT_DOWNGRADE_LAST_OWNER", "Cannot downgrade the last OWNER", ErrorKind.validation
)
OWNER_SELF_REMOVAL = Error(
    "CANNOT_REMOVE_SELF_AS_OWNER", "Cannot remove yourself as OWNER", ErrorKind.validation
)
