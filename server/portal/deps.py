from fastapi import Request

from portal.context import PortalContext


def get_context(request: Request) -> PortalContext:
    """Dependency returning the portal context the app was built with"""
    return request.app.state.context
