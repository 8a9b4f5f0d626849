"""
Authentication Routes
"""

from typing import Optional

from fastapi import APIRouter, Form, Query, Request, status
from fastapi.responses import RedirectResponse

from app.services.auth_service import ACCESS_TOKEN_COOKIE, REFRESH_TOKEN_COOKIE
from app.utils.dependencies import AuthServiceDep

router = APIRouter()


@router.post("/sign-out")
async def sign_out(
    request: Request,
    auth: AuthServiceDep,
    form_locale: Optional[str] = Form(None, alias="locale"),
    query_locale: Optional[str] = Query(None, alias="locale")
):
    """
    Sign out the current visitor

    The locale comes from the submitted form, or the query string for plain
    POSTs. Always redirects to the locale home page; Supabase errors are left
    to the global exception handler.
    """
    locale = form_locale if form_locale is not None else query_locale
    access_token = request.cookies.get(ACCESS_TOKEN_COOKIE)
    redirect_path = await auth.sign_out(locale, access_token)

    response = RedirectResponse(url=redirect_path, status_code=status.HTTP_303_SEE_OTHER)
    response.delete_cookie(ACCESS_TOKEN_COOKIE)
    response.delete_cookie(REFRESH_TOKEN_COOKIE)
    return response
