from tollgate.domain.user.aggregates.user_profile import UserProfile

__all__ = ["UserProfile"]
