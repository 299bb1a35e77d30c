from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from app.config import settings

# SQLite braucht check_same_thread=False, weil FastAPI Requests in Threads abarbeitet
connect_args = {"check_same_thread": False} if settings.database_url.startswith("sqlite") else {}

engine = create_engine(settings.database_url, connect_args=connect_args)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """Eine Session pro Request, wird nach dem Request immer geschlossen."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
