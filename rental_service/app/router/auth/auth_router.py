from fastapi import APIRouter, Depends

from shared.core.auth import validate_current_token
from shared.core.schemas import UserToken

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.get("/me")
def get_me(current_user: UserToken = Depends(validate_current_token)):
    result = {
        "uid": current_user.user_id,
        "email": current_user.email,
        "role": current_user.role,
    }
    if current_user.holder_id:
        result["holderId"] = current_user.holder_id
    return result
