"""
Registration API Endpoints

Public self-service sign-up. Accounts are created in Keycloak; nothing is
stored locally.
"""
import logging
from typing import Any
from fastapi import APIRouter, Body
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, EmailStr, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel
from portfolio.modules.error_handlers import validation_errors
from portfolio.modules.exceptions import IdentityProviderError
from portfolio.modules.users.domain.account import NewAccount
from portfolio.modules.users.services.registration import UserRegistrationService

logger = logging.getLogger("portfolio.users.api")

router = APIRouter(prefix="/api/public/auth", tags=["auth"])


class RegistrationRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    username: str = Field(min_length=3, max_length=50)
    email: EmailStr
    first_name: str = Field(max_length=100)
    last_name: str = Field(max_length=100)
    password: str = Field(min_length=8, max_length=128)

    @field_validator("username", "first_name", "last_name", "password")
    @classmethod
    def not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value


# Service instance
_registration_service = UserRegistrationService()


@router.post("/register", status_code=201)
async def register_user(payload: Any = Body(...)):
    """
    Register a new user in Keycloak with the registration role.

    Validation problems return 400 with per-field messages; Keycloak failures
    are translated to 400 by the global handler.
    """
    try:
        request = RegistrationRequest.model_validate(payload)
    except ValidationError as e:
        errors = validation_errors(e.errors())
        logger.warning(f"Validation failed for registration request: {errors}")
        return JSONResponse(
            status_code=400,
            content={"error": "Validation failed", "validationErrors": errors},
        )

    logger.info(f"Received registration request for username: {request.username}")
    try:
        await _registration_service.register_user(
            NewAccount(
                username=request.username,
                email=str(request.email),
                first_name=request.first_name,
                last_name=request.last_name,
                password=request.password,
            )
        )
    except IdentityProviderError:
        raise
    except Exception as e:
        logger.error(f"Registration failed for username: {request.username}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"error": "Registration failed", "message": str(e), "type": "server_error"},
        )

    logger.info(f"Registration successful for username: {request.username}")
    return {"message": "User registered successfully", "username": request.username}
