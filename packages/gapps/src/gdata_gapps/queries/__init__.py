"""Query builders for the hosted-groups provisioning feeds."""

from __future__ import annotations

from .group import GroupQuery
from .member import MemberQuery
from .nickname import NicknameQuery
from .owner import OwnerQuery
from .protocol import IAppsQuery
from .user import UserQuery

__all__ = [
    "GroupQuery",
    "IAppsQuery",
    "MemberQuery",
    "NicknameQuery",
    "OwnerQuery",
    "UserQuery",
]
