# python imports
import logging

# package imports
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import selectinload

# projects imports
from app.libs.session import session_scope
from app.libs.errors import APIError, AuthError, ValidationError
from app.libs.constants import MESSAGES
from app.categories.models import Category
from app.smes.models import Sme, SmeImage, SmeCategory
from app.smes.constants import SME_PROFILE_FIELDS

# app imports
from .models import User

logger = logging.getLogger(__name__)


class AuthService:
    @staticmethod
    def register_user(data):
        """Create the owner and their listing in one transaction"""
        sme_data = data["sme"]
        try:
            with session_scope() as session:
                email = data["email"].strip().lower()
                if session.query(User).filter(User.email == email).first():
                    raise ValidationError(MESSAGES["EMAIL_TAKEN"])

                # Create user
                user = User(name=data["name"], email=email, phone=data.get("phone"))
                user.set_password(data["password"])
                session.add(user)
                session.flush()

                # Create listing
                sme = Sme(
                    user_id=user.id,
                    **{k: v for k, v in sme_data.items() if k in SME_PROFILE_FIELDS},
                )
                session.add(sme)
                session.flush()

                for category_id in dict.fromkeys(sme_data.get("categories", [])):
                    if not session.get(Category, category_id):
                        raise ValidationError(
                            MESSAGES["CATEGORY_NOT_FOUND"],
                            payload={"categoryId": category_id},
                        )
                    session.add(SmeCategory(sme_id=sme.id, category_id=category_id))

                for idx, image in enumerate(sme_data.get("images", [])):
                    session.add(
                        SmeImage(
                            sme_id=sme.id,
                            url=image["url"],
                            alt=image.get("alt"),
                            is_featured=(idx == 0),  # First image is featured
                        )
                    )

                logger.info(f"Registered user {user.id} with listing {sme.id}")
                return {
                    "message": MESSAGES["REGISTER_OK"],
                    "user_id": user.id,
                    "sme_id": sme.id,
                }
        except SQLAlchemyError as e:
            logger.error(f"Database error registering {data.get('email')}: {str(e)}")
            raise APIError(MESSAGES["REGISTER_FAILED"], 500)

    @staticmethod
    def login_user(email, password):
        if not email or not password:
            raise ValidationError(MESSAGES["LOGIN_REQUIRED_FIELDS"])

        try:
            with session_scope(commit=False) as session:
                user = (
                    session.query(User)
                    .options(selectinload(User.sme).selectinload(Sme.images))
                    .filter(User.email == email.strip().lower())
                    .first()
                )
                if not user or not user.check_password(password):
                    raise AuthError(MESSAGES["INVALID_CREDENTIALS"])

                return user
        except SQLAlchemyError as e:
            logger.error(f"Database error during login for {email}: {str(e)}")
            raise APIError(MESSAGES["LOGIN_FAILED"], 500)


class UserService:
    @staticmethod
    def get_user(user_id):
        """Session loader; returns None for unknown ids"""
        with session_scope(commit=False) as session:
            return session.get(User, str(user_id))
