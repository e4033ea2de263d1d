from fastapi import APIRouter

from app import repository
from app.dependencies import CurrentIdentity, DbSession
from app.schemas.user import ProfileRead, ProfileUpdate

router = APIRouter(prefix="/profile", tags=["profile"])


@router.get("", response_model=ProfileRead)
def get_profile(identity: CurrentIdentity, db: DbSession):
    return repository.get_user(db, identity.id)


@router.patch("", response_model=ProfileRead)
def update_profile(updates: ProfileUpdate, identity: CurrentIdentity, db: DbSession):
    user = repository.get_user(db, identity.id)
    for field, value in updates.model_dump(exclude_unset=True).items():
        setattr(user, field, value)
    db.flush()
    db.refresh(user)
    return user
