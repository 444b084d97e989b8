from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from energy_harmony.core.security import hash_password, verify_password, create_access_token
from energy_harmony.core.database import get_db
from energy_harmony.models.user import User
from energy_harmony.schemas.user import UserRegister, UserLogin
from energy_harmony.schemas.auth import AuthData
from energy_harmony.utils.logger import get_logger

router = APIRouter(prefix="/api/auth", tags=["Auth"])
logger = get_logger(__name__)

@router.post("/register", response_model=AuthData, status_code=status.HTTP_201_CREATED)
def register(data: UserRegister, db: Session = Depends(get_db)):
    if db.query(User).filter(User.email == data.email).first():
        raise HTTPException(status_code=400, detail="User already exists")

    user = User(
        name=data.name,
        email=data.email,
        password=hash_password(data.password)
    )

    db.add(user)
    db.commit()
    db.refresh(user)

    logger.info("user_registered", user_id=user.id)

    return {
        "token": create_access_token(user.id),
        "user": user
    }

@router.post("/login", response_model=AuthData)
def login(data: UserLogin, db: Session = Depends(get_db)):
    user = db.query(User).filter(User.email == data.email).first()
    if not user or not verify_password(data.password, user.password):
        raise HTTPException(status_code=400, detail="Invalid credentials")

    return {
        "token": create_access_token(user.id),
        "user": user
    }
