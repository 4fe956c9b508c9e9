from flickly.domain.models.review import Review
from flickly.domain.models.user import Role, User


def can_manage_catalog(actor: User) -> bool:
    return actor.is_admin


def can_edit_user(actor: User, target: User) -> bool:
    """Self, admins over non-admins, moderators over plain users"""
    if actor.id == target.id:
        return True
    if actor.is_admin:
        return target.role != Role.ADMIN
    if actor.is_moderator:
        return target.role == Role.USER
    return False


def can_delete_user(actor: User, target: User) -> bool:
    return actor.id != target.id and can_edit_user(actor, target)


def can_modify_review(actor: User, review: Review) -> bool:
    return review.user_id == actor.id or actor.role in (Role.ADMIN, Role.MODERATOR)
