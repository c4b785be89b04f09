import logging
import os

from dotenv import load_dotenv

from softflow.database.database import SessionLocal, create_tables
from softflow.models.service import Service
from softflow.models.user import User
from softflow.utils.security import get_password_hash

load_dotenv()
logger = logging.getLogger("seed")

DEFAULT_SERVICES = [
    {"title": "Frontend Development", "slug": "frontend-development", "icon": "code",
     "description": "Building responsive and accessible user interfaces with modern frameworks."},
    {"title": "Backend Development", "slug": "backend-development", "icon": "server",
     "description": "Creating robust and scalable server-side applications and APIs."},
    {"title": "Mobile Development", "slug": "mobile-development", "icon": "smartphone",
     "description": "Building native and cross-platform applications for iOS and Android."},
    {"title": "Cloud Management", "slug": "cloud-management", "icon": "cloud",
     "description": "Hosting, managing, and scaling applications in the cloud."},
    {"title": "Data Analytics", "slug": "data-analytics", "icon": "bar-chart",
     "description": "Turning raw data into actionable insights for better decision making."},
    {"title": "Tech Consultancy", "slug": "tech-consultancy", "icon": "lightbulb",
     "description": "Expert advice on technology strategy and implementation."},
]


def seed(db):
    username = os.getenv("ADMIN_USERNAME", "admin")
    password = os.getenv("ADMIN_PASSWORD")
    if not db.query(User).filter(User.username == username).first():
        if not password:
            raise SystemExit("ADMIN_PASSWORD must be set to create the admin account")
        db.add(User(
            username=username,
            email=os.getenv("ADMIN_EMAIL"),
            password_hash=get_password_hash(password),
            is_admin=True,
            is_verified=True,
        ))
        logger.info("Admin user %s created", username)

    for order, service in enumerate(DEFAULT_SERVICES, start=1):
        if not db.query(Service).filter(Service.slug == service["slug"]).first():
            db.add(Service(**service, order=order, active=True))
            logger.info("Service %s created", service["slug"])
    db.commit()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    logger.info("Creating tables...")
    create_tables()
    with SessionLocal() as db:
        seed(db)
    logger.info("Seed complete")
