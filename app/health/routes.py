# package imports
from flask_smorest import Blueprint
from flask.views import MethodView
from flask import current_app
import logging
import time
import psutil
import os
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

# project imports
from external.database import db

logger = logging.getLogger(__name__)

bp = Blueprint(
    "health", __name__, description="Health check endpoints", url_prefix="/health"
)

VERSION = "1.0.0"


def _base_status():
    return {
        "status": "healthy",
        "timestamp": time.time(),
        "version": VERSION,
        "environment": current_app.config.get("ENV", "development"),
    }


def _check_database():
    """Round trip ``SELECT 1``; returns (ok, details)"""
    start_time = time.time()
    try:
        db.session.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error(f"Database health check failed: {e}")
        db.session.rollback()
        return False, {"status": "unhealthy", "error": str(e)}
    return True, {
        "status": "healthy",
        "response_time": round((time.time() - start_time) * 1000, 2),  # ms
    }


@bp.route("/")
class HealthCheck(MethodView):
    def get(self):
        """Basic health check endpoint"""
        return _base_status()


@bp.route("/detailed")
class DetailedHealthCheck(MethodView):
    def get(self):
        """Detailed health check with database and host resources"""
        health_status = _base_status()
        health_status["components"] = {}

        db_ok, db_details = _check_database()
        health_status["components"]["database"] = db_details
        if not db_ok:
            health_status["status"] = "unhealthy"

        # System resources
        health_status["components"]["system"] = {
            "cpu_usage": psutil.cpu_percent(interval=None),
            "memory_usage": psutil.virtual_memory().percent,
            "disk_usage": psutil.disk_usage("/").percent,
            "load_average": os.getloadavg() if hasattr(os, "getloadavg") else None,
        }

        return health_status


@bp.route("/ready")
class ReadinessCheck(MethodView):
    def get(self):
        """Readiness check for container orchestration"""
        db_ok, _ = _check_database()
        return {
            "ready": db_ok,
            "timestamp": time.time(),
            "checks": {"database": db_ok, "application": True},
        }


@bp.route("/live")
class LivenessCheck(MethodView):
    def get(self):
        """Liveness check for container orchestration"""
        return {"alive": True, "timestamp": time.time()}
