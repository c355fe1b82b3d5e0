# sitenav/application/navigation/roles.py
from typing import Iterable, List, Tuple
from sitenav.extensions import db
from sitenav.models.role import Role


class RoleService:
    """Read-only role lookup backed by the roles table."""

    def get_roles_from_ids(self, role_ids: Iterable[str]) -> List[Role]:
        ids = list(dict.fromkeys(role_ids))
        if not ids:
            return []

        return (
            db.session.query(Role)
            .filter(Role.id.in_(ids))
            .order_by(Role.name)
            .all()
        )


def view_role_names(role_service, role_ids: Iterable[str]) -> Tuple[str, ...]:
    """
    Names of the roles allowed to view an item, in the order the role
    service returns them.
    """
    return tuple(role.name for role in role_service.get_roles_from_ids(role_ids))
