import logging

from flask import request
from flask_smorest import Blueprint
from flask.views import MethodView
from flask_login import login_required, current_user

from .schemas import UploadQueryArgs, UploadResponseSchema
from .services import UploadService

logger = logging.getLogger(__name__)

bp = Blueprint(
    "media", __name__, description="Image uploads", url_prefix="/api"
)


@bp.route("/upload")
class MediaUpload(MethodView):
    @login_required
    @bp.arguments(UploadQueryArgs, location="query")
    @bp.response(200, UploadResponseSchema)
    @bp.alt_response(400, description="Missing file name or empty body")
    @bp.alt_response(413, description="File too large")
    @bp.alt_response(415, description="Not a supported image")
    def post(self, args):
        """
        Upload an image

        The raw file is the request body and its name is passed as the
        ``filename`` query parameter. The returned URL is what listings and
        products store as their image URL.
        """
        return UploadService.upload_image(
            args["filename"],
            request.stream,
            content_length=request.content_length,
            user_id=current_user.id,
        )
