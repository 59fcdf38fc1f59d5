"""
Authentication Routes
Signup, login and logout
"""

from fastapi import APIRouter, status

from clubify.schemas.user import SignupRequest, LoginRequest, AuthResponse
from clubify.services.user_service import user_service

router = APIRouter()


@router.post("/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def signup(request: SignupRequest):
    """
    Create an account

    - **name**, **email**, **password**: required
    - **role**: member (default), lead or board
    """
    user = await user_service.signup(request)
    return {
        "success": True,
        "message": "User created successfully",
        "user": user
    }


@router.post("/login", response_model=AuthResponse)
async def login(credentials: LoginRequest):
    """
    Login endpoint

    Process:
    1. Find the user by (lowercased) email
    2. Verify password
    3. Update last_login timestamp
    4. Return the user id the client sends back in the `user-id` header
    """
    user = await user_service.login(credentials)
    return {
        "success": True,
        "message": "Login successful",
        "user": user
    }


@router.post("/logout")
async def logout():
    """
    Logout endpoint (client should forget the stored user)
    """
    return {
        "success": True,
        "message": "Logged out successfully"
    }
