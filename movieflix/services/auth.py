"""Role-based authorization for catalog reads."""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterable, TypeVar

from movieflix.errors import Forbidden, Unauthenticated

logger = logging.getLogger(__name__)

R = TypeVar("R")

ROLE_PREFIX = "ROLE_"


class Role(str, Enum):
    VISITOR = "VISITOR"
    MEMBER = "MEMBER"

    @classmethod
    def parse(cls, name: str) -> "Role | None":
        """Map ``ROLE_VISITOR`` or ``VISITOR`` to a Role; unknown names give None."""
        name = name.strip().upper()
        if name.startswith(ROLE_PREFIX):
            name = name[len(ROLE_PREFIX):]
        try:
            return cls(name)
        except ValueError:
            return None


@dataclass(frozen=True)
class Principal:
    subject: str
    roles: frozenset[Role] = field(default_factory=frozenset)

    @classmethod
    def of(cls, subject: str, role_names: Iterable[str]) -> "Principal":
        roles = (Role.parse(name) for name in role_names)
        return cls(subject=subject, roles=frozenset(r for r in roles if r is not None))

    def has_any_role(self, roles: Iterable[Role]) -> bool:
        return not self.roles.isdisjoint(roles)


class AuthorizationGate:
    """Lets an operation run only for principals holding one of ``required_roles``."""

    def __init__(self, required_roles: Iterable[Role]):
        self.required_roles = frozenset(required_roles)
        if not self.required_roles:
            raise ValueError("AuthorizationGate needs at least one required role")

    def authorize(self, principal: Principal | None) -> Principal:
        if principal is None:
            raise Unauthenticated()
        if not principal.has_any_role(self.required_roles):
            logger.info(
                "Denied %s: has %s, needs one of %s",
                principal.subject,
                sorted(r.value for r in principal.roles),
                sorted(r.value for r in self.required_roles),
            )
            raise Forbidden()
        return principal

    def __call__(
        self, principal: Principal | None, operation: Callable[..., R], *args, **kwargs
    ) -> R:
        self.authorize(principal)
        return operation(*args, **kwargs)


CATALOG_READERS = AuthorizationGate({Role.VISITOR, Role.MEMBER})
