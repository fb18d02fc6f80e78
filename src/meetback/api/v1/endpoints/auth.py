"""Account endpoints: registration, sessions, profile and deletion."""

from typing import Any

from fastapi import APIRouter, Request, status

from meetback.api.v1.dependencies import CurrentUserDep, SessionDep
from meetback.schemas.common import success_body
from meetback.schemas.user import (
    ChangePasswordRequest,
    LoginRequest,
    ProfileUpdateRequest,
    RegisterRequest,
)
from meetback.services import auth_service

router = APIRouter(prefix="/auth", tags=["authentication"])


@router.post("/register", status_code=status.HTTP_201_CREATED)
def register(payload: RegisterRequest, db: SessionDep) -> dict[str, Any]:
    """Create a new account."""
    user = auth_service.register_user(
        db,
        email=payload.email,
        password=payload.password,
        handle=payload.handle,
        display_name=payload.display_name,
    )
    return success_body("User registered successfully", user)


@router.post("/login")
def login(payload: LoginRequest, db: SessionDep) -> dict[str, Any]:
    """Exchange email and password for an access token."""
    session = auth_service.login_user(db, email=payload.email, password=payload.password)
    return success_body("Login successful", session)


@router.post("/logout")
def logout(current_user: CurrentUserDep, db: SessionDep) -> dict[str, Any]:
    return success_body("Logout successful", auth_service.logout_user(db, current_user))


@router.get("/verify")
def verify(request: Request, current_user: CurrentUserDep) -> dict[str, Any]:
    """Confirm the token is valid and hand back its refreshed replacement."""
    data = auth_service.get_session_data(current_user, request.state.refreshed_token)
    return success_body("Token is valid", data)


@router.get("/me")
def account_overview(current_user: CurrentUserDep, db: SessionDep) -> dict[str, Any]:
    return success_body(
        "Account overview retrieved", auth_service.get_account_overview(db, current_user.id)
    )


@router.get("/profile")
def get_profile(current_user: CurrentUserDep, db: SessionDep) -> dict[str, Any]:
    return success_body(
        "Profile retrieved", auth_service.get_user_profile(db, current_user.id)
    )


@router.put("/profile")
def update_profile(
    payload: ProfileUpdateRequest,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> dict[str, Any]:
    user = auth_service.update_user_profile(
        db,
        current_user.id,
        display_name=payload.display_name,
        description=payload.description,
        gender=payload.gender,
    )
    return success_body("Profile updated", user)


@router.put("/change-password")
def change_password(
    payload: ChangePasswordRequest,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> dict[str, Any]:
    auth_service.change_password(
        db,
        current_user.id,
        current_password=payload.current_password,
        new_password=payload.new_password,
    )
    return success_body("Password updated")


@router.get("/user/{handle}")
def public_profile(handle: str, db: SessionDep) -> dict[str, Any]:
    """Look up a visible user by handle. No authentication required."""
    return success_body("User found", auth_service.get_public_profile(db, handle))


@router.delete("/delete")
def delete_account(current_user: CurrentUserDep, db: SessionDep) -> dict[str, Any]:
    """Delete the caller's account, hiding their ratings and dropping follows."""
    return success_body("User deleted", auth_service.delete_account(db, current_user))
