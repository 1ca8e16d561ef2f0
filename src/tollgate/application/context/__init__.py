from tollgate.application.context.identity import AuthenticatedIdentity

__all__ = ["AuthenticatedIdentity"]
