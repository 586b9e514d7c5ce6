"""Role names accepted by `revoke user`."""

from ..errors import InvalidRoleError
from ..model.membership import Role

# Singular spellings users commonly type
ROLE_ALIASES = {
    "cluster-admin": Role.CLUSTER_ADMINS,
    "dedicated-admin": Role.DEDICATED_ADMINS,
}


def canonicalize_role(token: str) -> Role:
    """Map a role token or alias to its canonical group."""
    if token in ROLE_ALIASES:
        return ROLE_ALIASES[token]
    try:
        return Role(token)
    except ValueError:
        valid = ", ".join(role.value for role in Role)
        raise InvalidRoleError(f"Expected at least one of [{valid}], got '{token}'")
