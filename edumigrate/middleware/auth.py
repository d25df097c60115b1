# guards /admin pages and /api/admin endpoints
# only checks that the session cookie is present and non-empty;
# the cookie itself is issued by the external auth provider

from fastapi import Request
from starlette.responses import JSONResponse, RedirectResponse

from ..config import settings

LOGIN_PATH = "/admin/login"

_PAGE_PREFIX = "/admin"
_API_PREFIX = "/api/admin"


def _is_under(path: str, prefix: str) -> bool:
    return path == prefix or path.startswith(prefix + "/")


def is_protected(path: str) -> bool:
    if path == LOGIN_PATH:
        return False
    return _is_under(path, _PAGE_PREFIX) or _is_under(path, _API_PREFIX)


def has_session(request: Request) -> bool:
    return bool(request.cookies.get(settings.auth_cookie_name))


async def auth_middleware(request: Request, call_next):
    path = request.url.path

    if not is_protected(path) or has_session(request):
        return await call_next(request)

    # ===== API: no redirects, plain 401 =====
    if _is_under(path, _API_PREFIX):
        return JSONResponse(status_code=401, content={"detail": "Not authenticated"})

    return RedirectResponse(url=LOGIN_PATH, status_code=307)
