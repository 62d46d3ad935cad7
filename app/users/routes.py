import logging

# package imports
from flask_smorest import Blueprint
from flask.views import MethodView
from flask_login import login_user, logout_user, login_required, current_user

# app imports
from .schemas import (
    UserRegisterSchema,
    RegisterResponseSchema,
    UserLoginSchema,
    UserProfileSchema,
)
from .services import AuthService

logger = logging.getLogger(__name__)

bp = Blueprint("users", __name__, description="Owner account operations", url_prefix="/api")


@bp.route("/register")
class UserRegister(MethodView):
    @bp.arguments(UserRegisterSchema)
    @bp.response(200, RegisterResponseSchema)
    @bp.alt_response(400, description="Missing required data or email already registered")
    def post(self, user_data):
        """Register an owner together with their listing"""
        return AuthService.register_user(user_data)


@bp.route("/login")
class UserLogin(MethodView):
    @bp.arguments(UserLoginSchema)
    @bp.response(200, UserProfileSchema)
    @bp.alt_response(401, description="Invalid credentials")
    def post(self, credentials):
        user = AuthService.login_user(credentials["email"], credentials["password"])
        login_user(user)
        logger.info(f"User {user.id} logged in")
        return user


@bp.route("/me")
class CurrentUser(MethodView):
    @login_required
    @bp.response(200, UserProfileSchema)
    def get(self):
        """Owner of the current session, with their listing"""
        return current_user._get_current_object()


@bp.route("/logout")
class UserLogout(MethodView):
    @login_required
    @bp.response(204)
    def post(self):
        logout_user()
        return None
